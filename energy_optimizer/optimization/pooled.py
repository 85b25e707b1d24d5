from __future__ import annotations

from typing import Sequence

from ..logger import log_debug
from ..resources import Device, EnergySource, active_devices, total_active_power_kw
from .results import AllocationResult, DeviceAllocation
from .solver import EPS, max_equal_concurrent_time


def allocate_optimized(
    devices: Sequence[Device],
    sources: Sequence[EnergySource],
    *,
    eps: float = 1e-6,
    slack: float = 1e-12,
) -> AllocationResult:
    """
    Pool every battery and equalize runtime across the active devices.

    Capacities are converted from kWh into hours of an average device
    (``capacity / mean_power``), which lets the fleet be treated as ``n``
    identical consumers. The common runtime comes from
    :func:`max_equal_concurrent_time`; each device then receives
    ``power_i * t`` kWh.
    """
    active = active_devices(devices)
    n = len(active)
    if n == 0 or not sources:
        log_debug("optimized: nothing to allocate (devices=%d, sources=%d)", n, len(sources))
        return AllocationResult.zero()

    avg_power_kw = total_active_power_kw(active) / n
    device_hours = [s.capacity_kwh / (avg_power_kw or EPS) for s in sources]
    t = max_equal_concurrent_time(n, device_hours, eps=eps, slack=slack)

    rows = [DeviceAllocation(d.id, d.power_draw_kw * t, t) for d in active]
    log_debug("optimized: equalized runtime %.4f h (avg draw %.3f kW)", t, avg_power_kw)
    return AllocationResult.uniform(rows, t)


def allocate_simple_pool(devices: Sequence[Device], capacity_kwh: float) -> AllocationResult:
    """
    Single shared bank: ``t = capacity / total_power``.

    With one undifferentiated pool there is nothing to rebalance, so the
    optimized and simultaneous runtimes are the same and the gain is zero.
    """
    active = active_devices(devices)
    if not active or capacity_kwh <= 0:
        log_debug("simple: nothing to allocate (devices=%d, capacity=%.3f)", len(active), capacity_kwh)
        return AllocationResult.zero()

    total_power_kw = total_active_power_kw(active)
    t = capacity_kwh / total_power_kw if total_power_kw > 0 else 0.0

    rows = [DeviceAllocation(d.id, d.power_draw_kw * t, t) for d in active]
    log_debug("simple: %.3f kWh over %.3f kW -> %.4f h", capacity_kwh, total_power_kw, t)
    return AllocationResult.uniform(rows, t)
