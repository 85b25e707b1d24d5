from __future__ import annotations

from typing import Sequence

import numpy as np

# Denominator floor for devices that draw no power.
EPS = float(np.finfo(float).eps)


def max_equal_concurrent_time(
    n: int,
    sources: Sequence[float],
    *,
    eps: float = 1e-6,
    slack: float = 1e-12,
) -> float:
    """
    Longest time ``t`` for which ``n`` equal consumers can run together.

    Each source contributes at most ``min(source, t)`` over a run of length
    ``t``, so ``t`` is feasible when ``sum(min(source_i, t)) >= n * t``.
    The left side is concave and non-decreasing, the right side linear, so
    the feasible set is an interval ``[0, t*]`` and bisection on
    ``[0, sum(sources) / n]`` converges to ``t*``.

    ``slack`` absorbs rounding in the feasibility test; the loop stops once
    the bracket is no wider than ``eps`` and returns its lower end.
    """
    arr = np.asarray(sources, dtype=float)
    if n <= 0 or arr.size == 0:
        return 0.0

    arr = np.clip(arr, 0.0, None)
    lo, hi = 0.0, float(arr.sum()) / n
    while hi - lo > eps:
        mid = (lo + hi) / 2.0
        if mid <= lo or mid >= hi:
            # bracket narrower than float spacing at this magnitude
            break
        can = float(np.minimum(arr, mid).sum())
        if can + slack >= n * mid:
            lo = mid
        else:
            hi = mid
    return lo
