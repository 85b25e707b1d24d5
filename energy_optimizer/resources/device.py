"""
Device (Consumer)
=================

Models a device drawing constant power while it is switched on.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional
import math


@dataclass(frozen=True)
class Device:
    """
    Constant-draw power consumer.

    Attributes:
        id: Identifier, unique within one request
        name: Display name
        power_draw_kw: Steady-state power draw (kW)
        is_active: Only active devices take part in allocation
        activation_order: Stamp assigned by the caller when the device was
            last switched on. Not used by the allocation engine.
    """
    id: str
    name: str
    power_draw_kw: float
    is_active: bool = True
    activation_order: Optional[int] = None

    def __post_init__(self):
        """Validate device parameters."""
        if not self.id:
            raise ValueError("id must be a non-empty string")
        if not math.isfinite(self.power_draw_kw):
            raise ValueError("power_draw_kw must be finite")
        if self.power_draw_kw < 0:
            raise ValueError("power_draw_kw must be non-negative")


def active_devices(devices: Iterable[Device]) -> List[Device]:
    """Devices that are switched on, in listing order."""
    return [d for d in devices if d.is_active]


def total_active_power_kw(devices: Iterable[Device]) -> float:
    """Combined draw of the active devices (kW)."""
    return float(sum(d.power_draw_kw for d in devices if d.is_active))
