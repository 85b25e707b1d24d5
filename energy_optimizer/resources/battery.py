"""
Energy Source (Battery)
=======================

An independent reservoir of stored energy. Batteries are not split across
a bank unless an allocator pools them explicitly.
"""

from dataclasses import dataclass
from typing import Iterable, List
import math

@dataclass(frozen=True)
class EnergySource:
    """
    Battery with a fixed usable capacity.

    Negative capacities are clamped to zero: a depleted or mis-entered
    battery contributes nothing rather than failing the request.
    """
    capacity_kwh: float

    def __post_init__(self):
        """Validate and clamp capacity."""
        if not math.isfinite(self.capacity_kwh):
            raise ValueError("capacity_kwh must be finite")
        if self.capacity_kwh < 0:
            object.__setattr__(self, "capacity_kwh", 0.0)


def sources_from_capacities(capacities: Iterable[float]) -> List[EnergySource]:
    """Build a battery list from raw kWh values."""
    return [EnergySource(float(c)) for c in capacities]


def total_capacity_kwh(sources: Iterable[EnergySource]) -> float:
    """Combined capacity of a battery bank (kWh)."""
    return float(sum(s.capacity_kwh for s in sources))
