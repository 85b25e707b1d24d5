from __future__ import annotations

from typing import Dict, List, Optional, Sequence

import numpy as np

from ..logger import log_debug
from ..resources import Device, active_devices
from .results import AllocationResult, DeviceAllocation
from .solver import EPS


def priority_weights(active: Sequence[Device], priority_order: Optional[Sequence[str]] = None) -> Dict[str, int]:
    """
    Rank weights for the active devices: ``n`` for the top device down to 1.

    Ids in ``priority_order`` come first (unknown or inactive ids are
    dropped, repeats keep their first position); active devices missing
    from the list follow in listing order. No list means listing order.
    """
    active_ids = [d.id for d in active]
    known = set(active_ids)
    ranked: List[str] = []
    for dev_id in priority_order or ():
        if dev_id in known and dev_id not in ranked:
            ranked.append(dev_id)
    ranked.extend(dev_id for dev_id in active_ids if dev_id not in ranked)

    n = len(ranked)
    return {dev_id: n - i for i, dev_id in enumerate(ranked)}


def allocate_priority(
    devices: Sequence[Device],
    total_energy_kwh: float,
    min_runtime_hours: float,
    priority_order: Optional[Sequence[str]] = None,
    *,
    tolerance_kwh: float = 1e-9,
) -> AllocationResult:
    """
    Guarantee ``min_runtime_hours`` to every device, then share the surplus.

    Phase 1 reserves ``power_i * R`` for each device (zero draws floored
    at ``EPS``, so they still reach ``R``). If the bank cannot
    cover that, every reservation is scaled by the same factor so all
    devices fall short together instead of some being starved.

    Phase 2 hands out the leftover as extra *hours* proportional to rank
    weight: device ``i`` gains ``K * w_i`` hours, costing
    ``K * w_i * power_i`` kWh, with ``K`` chosen to use the leftover
    exactly.
    """
    active = active_devices(devices)
    n = len(active)
    if n == 0 or total_energy_kwh <= 0 or min_runtime_hours < 0:
        log_debug(
            "priority: nothing to allocate (devices=%d, energy=%.3f, min=%.3f)",
            n, total_energy_kwh, min_runtime_hours,
        )
        return AllocationResult.zero()

    power = np.array([d.power_draw_kw for d in active], dtype=float)
    denom_power = np.where(power > 0, power, EPS)
    base = denom_power * min_runtime_hours
    e_min = float(base.sum())

    if total_energy_kwh + tolerance_kwh < e_min:
        scale = total_energy_kwh / (e_min or EPS)
        alloc = base * scale
        runtimes = alloc / denom_power
        log_debug("priority: %.3f kWh short of minimum, scaling by %.4f", e_min - total_energy_kwh, scale)
        total_dh = float(runtimes.sum())
        min_rt = float(runtimes.min())
        return AllocationResult(
            total_runtime_hours=total_dh / n,
            simultaneous_runtime_hours=min_rt,
            optimized_runtime_hours=total_dh / n,
            efficiency_gain_percent=0.0,
            per_device=_rows(active, alloc, runtimes),
            simultaneous_device_hours=min_rt * n,
            optimized_device_hours=total_dh,
        )

    alloc = base.copy()
    leftover = total_energy_kwh - e_min
    if leftover > 0:
        weight_map = priority_weights(active, priority_order)
        weights = np.array([weight_map[d.id] for d in active], dtype=float)
        denom = float((weights * denom_power).sum()) or 1.0
        k = leftover / denom
        alloc += k * weights * denom_power
        log_debug("priority: %.3f kWh surplus, %.4f h per weight unit", leftover, k)

    runtimes = alloc / denom_power
    min_rt = float(runtimes.min())
    max_rt = float(runtimes.max())
    return AllocationResult(
        total_runtime_hours=max_rt,
        simultaneous_runtime_hours=min_rt,
        optimized_runtime_hours=max_rt,
        efficiency_gain_percent=0.0,
        per_device=_rows(active, alloc, runtimes),
        simultaneous_device_hours=min_rt * n,
        optimized_device_hours=float(runtimes.sum()),
    )


def _rows(active: Sequence[Device], alloc: np.ndarray, runtimes: np.ndarray) -> List[DeviceAllocation]:
    return [
        DeviceAllocation(d.id, float(e), float(r))
        for d, e, r in zip(active, alloc, runtimes)
    ]
