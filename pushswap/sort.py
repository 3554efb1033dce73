"""Sorting stack A with the push-swap moves."""

from __future__ import annotations

from pushswap.operations import PushSwap


def sort_two(ps: PushSwap) -> None:
    """Order a two-node stack A."""
    if ps.a[0].index > ps.a[1].index:
        ps.sa()


def sort_three(ps: PushSwap) -> None:
    """Order a three-node stack A in at most two moves."""
    a, b, c = ps.a[0].index, ps.a[1].index, ps.a[-1].index
    if a > b and b < c and a < c:
        ps.sa()
    elif a > b and b > c:
        ps.sa()
        ps.rra()
    elif a > b and b < c and a > c:
        ps.ra()
    elif a < b and b > c and a < c:
        ps.sa()
        ps.ra()
    elif a < b and b > c and a > c:
        ps.rra()


def _push_min_to_b(ps: PushSwap) -> None:
    ps.rotate_to_top(ps.a, ps.a.position(ps.a.min_index()), "a")
    ps.pb()


def sort_four(ps: PushSwap) -> None:
    """Order a four-node stack A."""
    _push_min_to_b(ps)
    sort_three(ps)
    ps.pa()


def sort_five(ps: PushSwap) -> None:
    """Order a five-node stack A."""
    _push_min_to_b(ps)
    _push_min_to_b(ps)
    sort_three(ps)
    ps.pa()
    ps.pa()


def sort_simple(ps: PushSwap) -> None:
    """Selection sort: move each minimum to B, then bring everything back."""
    if ps.a.is_sorted():
        return
    size = len(ps.a)
    if size == 2:
        sort_two(ps)
        return
    if size == 3:
        sort_three(ps)
        return
    for _ in range(size):
        _push_min_to_b(ps)
    while len(ps.b):
        ps.pa()


def _distance_from_top(ps: PushSwap, low: int, high: int) -> int:
    for position, node in enumerate(ps.a):
        if low <= node.index <= high:
            return position
    return len(ps.a)


def _distance_from_bottom(ps: PushSwap, low: int, high: int) -> int:
    for position, node in enumerate(reversed(list(ps.a)), start=1):
        if low <= node.index <= high:
            return position
    return len(ps.a)


def _push_chunks_to_b(ps: PushSwap) -> None:
    span = 15 if len(ps.a) <= 100 else 32
    pushed = 0
    while len(ps.a):
        low, high = pushed - span, pushed + span
        top = _distance_from_top(ps, low, high)
        bottom = _distance_from_bottom(ps, low, high)
        if top <= bottom:
            for _ in range(top):
                ps.ra()
        else:
            for _ in range(bottom):
                ps.rra()
        ps.pb()
        if len(ps.b) > 1 and ps.b[0].index < pushed:
            ps.rb()
        pushed += 1


def _push_back_to_a(ps: PushSwap) -> None:
    while len(ps.b):
        position = ps.b.position(ps.b.max_index())
        size = len(ps.b)
        if position <= size // 2:
            for _ in range(position):
                ps.rb()
        else:
            for _ in range(size - position):
                ps.rrb()
        ps.pa()


def sort_medium(ps: PushSwap) -> None:
    """Chunk sort in O(n*sqrt(n)) moves; small stacks go to sort_simple."""
    if ps.a.is_sorted():
        return
    if len(ps.a) <= 5:
        sort_simple(ps)
        return
    _push_chunks_to_b(ps)
    _push_back_to_a(ps)