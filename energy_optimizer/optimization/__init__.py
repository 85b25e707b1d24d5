"""
Optimization Module
===================

Allocation engine turning devices plus batteries into a runtime schedule:
- Max equal concurrent time solver (bisection)
- Simultaneous baseline (one battery per device)
- Optimized pooling and the single-pool special case
- Priority: guaranteed minimum plus weighted surplus
- Comparator for the efficiency gain of pooling
"""

from .comparator import compare_results, efficiency_gain_percent, raw_gain_percent
from .pooled import allocate_optimized, allocate_simple_pool
from .priority import allocate_priority, priority_weights
from .results import AllocationResult, DeviceAllocation
from .simultaneous import allocate_simultaneous
from .solver import EPS, max_equal_concurrent_time

__all__ = [
    "EPS",
    "AllocationResult",
    "DeviceAllocation",
    "allocate_optimized",
    "allocate_priority",
    "allocate_simple_pool",
    "allocate_simultaneous",
    "compare_results",
    "efficiency_gain_percent",
    "max_equal_concurrent_time",
    "priority_weights",
    "raw_gain_percent",
]
