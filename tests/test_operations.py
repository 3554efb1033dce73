import io

import pytest

from pushswap.operations import Bench, PushSwap, Strategy, isqrt, max_bits
from pushswap.stack import Stack


def make(values):
    out = io.StringIO()
    return PushSwap(Stack(values), output=out), out


def test_init_assigns_indexes_and_disorder():
    ps, _ = make([30, 10, 20])
    assert sorted(ps.a.indexes()) == list(range(3))
    assert ps.disorder == ps.a.disorder()
    assert len(ps.b) == 0


def test_sorted_input_has_no_disorder():
    ps, _ = make([1, 2, 3, 4])
    assert ps.disorder == 0.0


def test_sa_swaps_top_and_prints():
    values = [3, 1, 2]
    ps, out = make(values)
    ps.sa()
    assert ps.a.values() == [values[1], values[0], *values[2:]]
    assert out.getvalue() == "sa\n"
    assert ps.bench.sa == ps.bench.total


def test_silent_move_is_counted_but_not_printed():
    ps, out = make([3, 1, 2])
    ps.sa(False)
    assert out.getvalue() == ""
    assert ps.bench.sa == ps.bench.total
    assert ps.bench.total > 0


def test_pb_then_pa_round_trip():
    values = [5, 6, 7]
    ps, out = make(values)
    ps.pb()
    assert ps.b.values() == values[:1]
    assert ps.a.values() == values[1:]
    ps.pa()
    assert ps.a.values() == values
    assert len(ps.b) == 0
    assert out.getvalue() == "pb\npa\n"


def test_pa_on_empty_b_still_counts():
    values = [1, 2]
    ps, out = make(values)
    ps.pa()
    assert ps.a.values() == values
    assert out.getvalue() == "pa\n"
    assert ps.bench.pa == ps.bench.total


def test_ra_and_rra_are_inverse():
    values = [4, 8, 15, 16]
    ps, out = make(values)
    ps.ra()
    assert ps.a.values() == values[1:] + values[:1]
    ps.rra()
    assert ps.a.values() == values
    assert out.getvalue() == "ra\nrra\n"


def test_double_moves_touch_both_stacks():
    values = [1, 2, 3, 4, 5, 6]
    ps, out = make(values)
    ps.pb(False)
    ps.pb(False)
    ps.pb(False)
    b_before = ps.b.values()
    a_before = ps.a.values()
    ps.rr()
    assert ps.a.values() == a_before[1:] + a_before[:1]
    assert ps.b.values() == b_before[1:] + b_before[:1]
    ps.rrr()
    assert ps.a.values() == a_before
    assert ps.b.values() == b_before
    ps.ss()
    assert ps.a.values() == [a_before[1], a_before[0], *a_before[2:]]
    assert ps.b.values() == [b_before[1], b_before[0], *b_before[2:]]
    assert out.getvalue() == "rr\nrrr\nss\n"


def test_b_moves_print_their_names():
    ps, out = make([1, 2, 3])
    ps.pb(False)
    ps.pb(False)
    ps.sb()
    ps.rb()
    ps.rrb()
    assert out.getvalue() == "sb\nrb\nrrb\n"
    assert ps.bench.sb == ps.bench.rb == ps.bench.rrb
    assert ps.bench.rrb > 0


def test_total_is_sum_of_counters():
    ps, _ = make([3, 2, 1, 0])
    for move in (ps.sa, ps.pb, ps.pb, ps.ra, ps.rra, ps.rr, ps.pa, ps.ss):
        move(False)
    bench = ps.bench
    parts = [bench.sa, bench.sb, bench.ss, bench.pa, bench.pb, bench.ra,
             bench.rb, bench.rr, bench.rra, bench.rrb, bench.rrr]
    assert sum(parts) == bench.total


@pytest.mark.parametrize("position", range(6))
def test_rotate_to_top_brings_node_up(position):
    values = [10, 20, 30, 40, 50, 60]
    ps, out = make(values)
    ps.rotate_to_top(ps.a, position, "a")
    assert ps.a.values()[0] == values[position]
    lines = out.getvalue().split()
    expected = "ra" if position <= len(values) // 2 else "rra"
    assert all(line == expected for line in lines)
    assert len(lines) == min(position, len(values) - position) if position else len(lines) == 0


def test_rotate_to_top_on_b():
    ps, _ = make([1, 2, 3, 4])
    for _ in range(4):
        ps.pb(False)
    target = ps.b.values()[2]
    ps.rotate_to_top(ps.b, 2, "b")
    assert ps.b.values()[0] == target


def test_rotate_to_top_rejects_unknown_name():
    ps, _ = make([1, 2])
    with pytest.raises(ValueError):
        ps.rotate_to_top(ps.a, 1, "c")


def test_default_output_is_stdout(capsys):
    ps = PushSwap(Stack([2, 1]))
    ps.sa()
    assert capsys.readouterr().out == "sa\n"


def test_strategy_and_bench_mode_kept():
    ps = PushSwap(Stack([1]), output=io.StringIO(), strategy=Strategy.MEDIUM, bench_mode=True)
    assert ps.strategy is Strategy.MEDIUM
    assert ps.bench_mode is True
    assert ps.bench == Bench()


@pytest.mark.parametrize("n", range(0, 200))
def test_isqrt_bounds(n):
    root = isqrt(n)
    assert root * root <= n < (root + 1) * (root + 1)


def test_isqrt_non_positive():
    assert isqrt(0) == 0
    assert isqrt(-9) == 0


@pytest.mark.parametrize("size", [1, 2, 3, 8, 9, 100])
def test_max_bits_fits_largest_index(size):
    stack = Stack(range(size))
    stack.assign_indexes()
    bits = max_bits(stack)
    largest = stack.max_index()
    assert largest < 2**bits
    assert bits == 0 or largest >= 2 ** (bits - 1)