"""Benchmark and error messages written to standard error."""

from __future__ import annotations

from pushswap.operations import PushSwap, Strategy


def strategy_label(strategy: Strategy, disorder: float) -> str:
    """Name and complexity of a strategy; adaptive depends on the disorder."""
    if strategy is Strategy.SIMPLE:
        return "Simple / O(n^2)"
    if strategy is Strategy.MEDIUM:
        return "Medium / O(n*sqrt(n))"
    if strategy is Strategy.COMPLEX:
        return "Complex / O(n log n)"
    if disorder < 0.2:
        return "Adaptive / O(n)"
    if disorder < 0.5:
        return "Adaptive / O(n*sqrt(n))"
    return "Adaptive / O(n log n)"


def format_disorder(disorder: float) -> str:
    """Disorder as a percentage with two truncated decimals."""
    whole = int(disorder * 100)
    hundredths = int(disorder * 10000) % 100
    return f"{whole}.{hundredths:02d}%"


def format_benchmark(ps: PushSwap) -> str:
    """The benchmark report, or an empty string when bench mode is off."""
    if not ps.bench_mode:
        return ""
    b = ps.bench
    return (
        f"[bench] disorder: {format_disorder(ps.disorder)}\n"
        f"[bench] strategy: {strategy_label(ps.strategy, ps.disorder)}\n"
        f"[bench] total_ops: {b.total}\n"
        f"[bench] sa: {b.sa} sb: {b.sb} ss: {b.ss} pa: {b.pa} pb: {b.pb}\n"
        f"[bench] ra: {b.ra} rb: {b.rb} rr: {b.rr} "
        f"rra: {b.rra} rrb: {b.rrb} rrr: {b.rrr}\n"
    )


def error_message() -> str:
    """The message reported for any invalid input."""
    return "Error\n"