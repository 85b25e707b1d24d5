from __future__ import annotations

from typing import Optional, Union

from ..logger import log_debug, log_info
from ..optimization import (
    AllocationResult,
    allocate_optimized,
    allocate_priority,
    allocate_simple_pool,
    allocate_simultaneous,
    compare_results,
)
from ..resources import active_devices, total_capacity_kwh
from .models import AdvancedRequest, PriorityRequest, SimpleRequest, SolverSettings

AnyRequest = Union[SimpleRequest, AdvancedRequest, PriorityRequest]


def request_capacity_kwh(request: AnyRequest) -> float:
    """Total usable energy described by a request (kWh)."""
    if isinstance(request, PriorityRequest):
        return request.total_energy_kwh
    if isinstance(request, SimpleRequest):
        return max(0.0, float(request.battery_capacity_kwh))
    return total_capacity_kwh(request.to_sources())


def run_request(request: AnyRequest, settings: Optional[SolverSettings] = None) -> AllocationResult:
    """
    Run the allocator(s) selected by ``request.mode``.

    - simple: single pool
    - advanced: simultaneous baseline; with ``optimized_mode`` also the
      pooled optimum, merged by the comparator
    - priority: guaranteed minimum plus weighted surplus

    ``settings`` overrides the settings embedded in the request.
    """
    settings = settings or request.settings
    devices = request.to_devices()
    log_info("allocation request: mode=%s, devices=%d", request.mode, len(devices))

    if isinstance(request, PriorityRequest):
        return allocate_priority(
            devices,
            request.total_energy_kwh,
            float(request.min_desired_runtime_hours),
            request.priority_order,
            tolerance_kwh=settings.priority_tolerance_kwh,
        )

    if isinstance(request, SimpleRequest):
        return allocate_simple_pool(devices, float(request.battery_capacity_kwh))

    sources = request.to_sources()
    if not active_devices(devices) or total_capacity_kwh(sources) <= 0:
        log_debug("advanced: no active devices or no usable capacity")
        return AllocationResult.zero()

    baseline = allocate_simultaneous(devices, sources)
    if not request.optimized_mode:
        return baseline

    optimized = allocate_optimized(
        devices,
        sources,
        eps=settings.convergence_eps,
        slack=settings.feasibility_slack,
    )
    return compare_results(baseline, optimized, decimals=settings.gain_decimals)
