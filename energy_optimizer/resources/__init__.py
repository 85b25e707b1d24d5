"""
Resource Models
===============

Consumer and source definitions for runtime planning:
- Device: Constant-draw consumer that can be switched on or off
- EnergySource: Independent battery with a fixed usable capacity
"""

from .battery import EnergySource, sources_from_capacities, total_capacity_kwh
from .device import Device, active_devices, total_active_power_kw

__all__ = [
    "Device",
    "EnergySource",
    "active_devices",
    "sources_from_capacities",
    "total_active_power_kw",
    "total_capacity_kwh",
]
