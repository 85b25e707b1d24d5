from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict

from pydantic import ValidationError

from .feasibility import check_feasibility, format_runtime
from .models import parse_request
from .planner import request_capacity_kwh, run_request


def load_request(path: str | None) -> Dict[str, Any]:
    """Read a request body from ``path``, or from stdin when ``path`` is None or ``-``."""
    if path and path != "-":
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(f"Request JSON not found: {path}")
        return json.loads(p.read_text())
    return json.loads(sys.stdin.read())


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Split battery energy between devices and report achievable runtimes."
    )
    parser.add_argument(
        "--input",
        "-i",
        help="Path to request JSON (mode: simple | advanced | priority). Reads stdin if omitted.",
    )
    parser.add_argument(
        "--output",
        "-o",
        help="Path to write the allocation result JSON. Printed to stdout if omitted.",
    )
    parser.add_argument(
        "--desired-runtime",
        type=float,
        default=None,
        help="Also check whether the bank can run all active devices for this many hours.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity.",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    try:
        raw = load_request(args.input)
        request = parse_request(raw)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        print(f"Input error: {e}", file=sys.stderr)
        return 2
    except ValidationError as e:
        print("Request validation error:", file=sys.stderr)
        print(e, file=sys.stderr)
        return 2

    result = run_request(request)
    payload = json.dumps(result.to_dict(), indent=2)
    if args.output:
        Path(args.output).write_text(payload)
    else:
        print(payload)

    # Minimal console summary
    capacity = request_capacity_kwh(request)
    print(f"Mode: {request.mode}", file=sys.stderr)
    print(f"Simultaneous runtime: {format_runtime(result.simultaneous_runtime_hours)}", file=sys.stderr)
    print(f"Optimized runtime:    {format_runtime(result.optimized_runtime_hours)}", file=sys.stderr)
    print(f"Efficiency gain: {result.efficiency_gain_percent:.2f}%", file=sys.stderr)
    print(f"Capacity left: {result.remaining_percent(capacity):.1f}% of {capacity:.2f} kWh", file=sys.stderr)

    ok = not result.is_empty
    if args.desired_runtime is not None:
        report = check_feasibility(request.to_devices(), capacity, args.desired_runtime)
        print(report.message, file=sys.stderr)
        ok = ok and report.feasible

    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
