from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from ..resources import Device, active_devices, total_active_power_kw


@dataclass(frozen=True)
class FeasibilityReport:
    feasible: bool
    required_kwh: float
    available_kwh: float
    max_runtime_hours: float
    message: str


def check_feasibility(
    devices: Sequence[Device],
    capacity_kwh: float,
    desired_runtime_hours: float,
) -> FeasibilityReport:
    """
    Can the bank run every active device together for the desired time?

    Screens against the pooled total only; per-battery limits are the
    allocators' concern.
    """
    capacity_kwh = max(0.0, float(capacity_kwh))
    if not active_devices(devices):
        return FeasibilityReport(False, 0.0, capacity_kwh, 0.0, "No active devices to check")

    power_kw = total_active_power_kw(devices)
    required = power_kw * desired_runtime_hours
    max_runtime = capacity_kwh / power_kw if power_kw > 0 else math.inf

    if required <= capacity_kwh:
        msg = f"Batteries can support devices for {desired_runtime_hours:g}h"
        return FeasibilityReport(True, required, capacity_kwh, max_runtime, msg)

    msg = f"Only {max_runtime:.1f}h supported - reduce device load or add battery"
    return FeasibilityReport(False, required, capacity_kwh, max_runtime, msg)


def format_runtime(hours: float) -> str:
    """Render hours as ``HH:MM:SS``; negative or non-finite values show as zero."""
    if not math.isfinite(hours) or hours <= 0:
        hours = 0.0
    total_seconds = int(round(hours * 3600))
    h, rem = divmod(total_seconds, 3600)
    m, s = divmod(rem, 60)
    return f"{h:02d}:{m:02d}:{s:02d}"
