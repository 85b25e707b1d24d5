"""
Allocation Results
==================

Structured container for allocator output. ``to_dict`` produces the flat
camelCase record handed to callers at the response boundary.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class DeviceAllocation:
    """Energy and runtime assigned to a single device."""
    device_id: str
    allocated_energy_kwh: float
    runtime_hours: float

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "deviceId": self.device_id,
            "allocatedEnergyKWh": self.allocated_energy_kwh,
            "runtimeHours": self.runtime_hours,
        }


@dataclass
class AllocationResult:
    """
    Outcome of one allocation request.

    Contains:
    - Headline runtimes (total, simultaneous baseline, optimized)
    - Efficiency gain of optimized over baseline (%)
    - Per-device energy and runtime rows
    - Device-hour totals for baseline and chosen policy

    An empty ``per_device`` list with all numbers at zero means the input
    was empty or infeasible.
    """
    total_runtime_hours: float = 0.0
    simultaneous_runtime_hours: float = 0.0
    optimized_runtime_hours: float = 0.0
    efficiency_gain_percent: float = 0.0
    per_device: List[DeviceAllocation] = field(default_factory=list)
    simultaneous_device_hours: float = 0.0
    optimized_device_hours: float = 0.0

    @classmethod
    def zero(cls) -> "AllocationResult":
        """Canonical empty/infeasible result."""
        return cls()

    @classmethod
    def uniform(cls, per_device: List[DeviceAllocation], runtime_hours: float) -> "AllocationResult":
        """Result where every device runs for the same ``runtime_hours``."""
        device_hours = runtime_hours * len(per_device)
        return cls(
            total_runtime_hours=runtime_hours,
            simultaneous_runtime_hours=runtime_hours,
            optimized_runtime_hours=runtime_hours,
            efficiency_gain_percent=0.0,
            per_device=per_device,
            simultaneous_device_hours=device_hours,
            optimized_device_hours=device_hours,
        )

    @property
    def is_empty(self) -> bool:
        """True for the zero result (no device rows)."""
        return not self.per_device

    @property
    def total_allocated_kwh(self) -> float:
        """Energy handed out across all devices (kWh)."""
        return float(sum(a.allocated_energy_kwh for a in self.per_device))

    def for_device(self, device_id: str) -> DeviceAllocation:
        """Row for ``device_id``; raises KeyError if the device was not allocated."""
        for a in self.per_device:
            if a.device_id == device_id:
                return a
        raise KeyError(device_id)

    def remaining_percent(self, capacity_kwh: float) -> float:
        """Share of ``capacity_kwh`` left after this allocation (%)."""
        if capacity_kwh <= 0:
            return 100.0
        return max(0.0, (capacity_kwh - self.total_allocated_kwh) / capacity_kwh * 100.0)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the flat response record."""
        return {
            "totalRuntimeHours": self.total_runtime_hours,
            "simultaneousRuntimeHours": self.simultaneous_runtime_hours,
            "optimizedRuntimeHours": self.optimized_runtime_hours,
            "efficiencyGainPercent": self.efficiency_gain_percent,
            "perDevice": [a.to_dict() for a in self.per_device],
            "simultaneousDeviceHours": self.simultaneous_device_hours,
            "optimizedDeviceHours": self.optimized_device_hours,
        }
