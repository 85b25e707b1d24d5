"""
Planning / request toolchain.

This package turns a request body (simple pool, independent batteries, or
priority mode) into a validated request, runs the matching allocator(s),
and offers a quick feasibility screen plus a command line front end.
"""

from .feasibility import FeasibilityReport, check_feasibility, format_runtime
from .models import (
    AdvancedRequest,
    PriorityRequest,
    SimpleRequest,
    SolverSettings,
    parse_request,
)
from .planner import request_capacity_kwh, run_request
