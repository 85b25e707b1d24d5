from __future__ import annotations

from .results import AllocationResult


def raw_gain_percent(simultaneous_hours: float, optimized_hours: float) -> float:
    """Unclamped relative change of optimized over baseline runtime (%)."""
    if simultaneous_hours <= 0:
        return 0.0
    return (optimized_hours - simultaneous_hours) / simultaneous_hours * 100.0


def efficiency_gain_percent(simultaneous_hours: float, optimized_hours: float, decimals: int = 2) -> float:
    """Reported gain: the raw value floored at zero and rounded."""
    return round(max(0.0, raw_gain_percent(simultaneous_hours, optimized_hours)), decimals)


def compare_results(
    baseline: AllocationResult,
    optimized: AllocationResult,
    *,
    decimals: int = 2,
) -> AllocationResult:
    """
    Merge a baseline and an optimized run into one reported result.

    Headline and per-device rows come from the optimized run; the
    simultaneous figures come from the baseline.
    """
    sim = baseline.simultaneous_runtime_hours
    opt = optimized.optimized_runtime_hours
    return AllocationResult(
        total_runtime_hours=opt,
        simultaneous_runtime_hours=sim,
        optimized_runtime_hours=opt,
        efficiency_gain_percent=efficiency_gain_percent(sim, opt, decimals),
        per_device=list(optimized.per_device),
        simultaneous_device_hours=baseline.simultaneous_device_hours,
        optimized_device_hours=optimized.optimized_device_hours,
    )
