from __future__ import annotations

from typing import List, Sequence

from ..logger import log_debug
from ..resources import Device, EnergySource, active_devices
from .results import AllocationResult, DeviceAllocation
from .solver import EPS


def allocate_simultaneous(devices: Sequence[Device], sources: Sequence[EnergySource]) -> AllocationResult:
    """
    Baseline allocation: one whole battery per device, no sharing.

    Devices and batteries are both sorted largest first and paired index by
    index, so the hungriest device gets the biggest battery. Only the top
    ``n`` batteries are used. Every device is reported at the bottleneck
    runtime ``min(capacity_i / power_i)``.
    """
    active = active_devices(devices)
    n = len(active)
    if n == 0 or not sources:
        log_debug("simultaneous: nothing to allocate (devices=%d, sources=%d)", n, len(sources))
        return AllocationResult.zero()

    by_power = sorted(active, key=lambda d: d.power_draw_kw, reverse=True)
    top = sorted((s.capacity_kwh for s in sources), reverse=True)[:n]
    if len(top) < n:
        log_debug("simultaneous: %d batteries cannot cover %d devices", len(top), n)
        return AllocationResult.zero()

    t = min(cap / (d.power_draw_kw or EPS) for d, cap in zip(by_power, top))

    rows: List[DeviceAllocation] = [
        DeviceAllocation(d.id, d.power_draw_kw * t, t) for d in by_power
    ]
    log_debug("simultaneous: bottleneck runtime %.4f h over %d devices", t, n)
    return AllocationResult.uniform(rows, t)
