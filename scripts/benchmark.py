#!/usr/bin/env python3
"""Benchmark script for tapconsole reporting throughput.

Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import io
import json
import time
from pathlib import Path


def benchmark_import_time() -> float:
    """Measure import time of tapconsole package."""
    start = time.perf_counter()
    import tapconsole  # noqa: F401

    return time.perf_counter() - start


def benchmark_session(total: int, *, terminal: bool) -> float:
    """Measure one session reporting `total` passing tests."""
    from rich.console import Console

    from tapconsole import ReportingSession, ResultEvent, ResultTally, RichConsoleSink

    console = Console(file=io.StringIO(), force_terminal=terminal, color_system=None)
    sink = RichConsoleSink(console)
    tally = ResultTally()
    tally.plan(total)
    events = [ResultEvent.test(number) for number in range(1, total + 1)]

    start = time.perf_counter()
    session = ReportingSession("t/bench.t", sink, tally)
    session.header()
    for event in events:
        tally.observe(event)
        session.result(event)
    tally.finish()
    session.close()
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run tapconsole benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    parser.add_argument(
        "--tests",
        type=int,
        default=100_000,
        help="Number of test events per session",
    )
    args = parser.parse_args()

    results = [
        {
            "name": "Import Time",
            "unit": "seconds",
            "value": benchmark_import_time(),
        },
        {
            "name": f"Terminal Session ({args.tests} tests)",
            "unit": "seconds",
            "value": benchmark_session(args.tests, terminal=True),
        },
        {
            "name": f"Redirected Session ({args.tests} tests)",
            "unit": "seconds",
            "value": benchmark_session(args.tests, terminal=False),
        },
    ]

    # Write results
    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()
