"""The eleven stack moves, their counters, and helpers shared by the sorters."""

from __future__ import annotations

import math
import sys
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto
from typing import TextIO

from pushswap.stack import Stack


class Strategy(Enum):
    """Which sorting strategy was requested."""

    SIMPLE = auto()
    MEDIUM = auto()
    COMPLEX = auto()
    ADAPTIVE = auto()


@dataclass
class Bench:
    """How many times each move was performed."""

    sa: int = 0
    sb: int = 0
    ss: int = 0
    pa: int = 0
    pb: int = 0
    ra: int = 0
    rb: int = 0
    rr: int = 0
    rra: int = 0
    rrb: int = 0
    rrr: int = 0
    total: int = 0

    def record(self, move: str) -> None:
        """Count one use of ``move``."""
        setattr(self, move, getattr(self, move) + 1)
        self.total += 1


class PushSwap:
    """Stacks A and B together with the moves that act on them.

    Every move is counted and, unless asked otherwise, its name is written
    as a line to ``output`` (standard output by default).
    """

    def __init__(
        self,
        a: Stack,
        output: TextIO | None = None,
        strategy: Strategy = Strategy.ADAPTIVE,
        bench_mode: bool = False,
    ) -> None:
        self.a = a
        self.b = Stack()
        self._output = output
        self.strategy = strategy
        self.bench_mode = bench_mode
        self.bench = Bench()
        self.a.assign_indexes()
        self.disorder = self.a.disorder()

    @property
    def output(self) -> TextIO:
        return self._output if self._output is not None else sys.stdout

    def _perform(self, move: str, does_print: bool, *actions: Callable[[], None]) -> None:
        for action in actions:
            action()
        if does_print:
            self.output.write(f"{move}\n")
        self.bench.record(move)

    @staticmethod
    def _push_to(src: Stack, dst: Stack) -> Callable[[], None]:
        def move() -> None:
            if len(src):
                dst.push(src.pop())

        return move

    def sa(self, does_print: bool = True) -> None:
        """Swap the two top nodes of A."""
        self._perform("sa", does_print, self.a.swap)

    def sb(self, does_print: bool = True) -> None:
        """Swap the two top nodes of B."""
        self._perform("sb", does_print, self.b.swap)

    def ss(self, does_print: bool = True) -> None:
        """Swap the two top nodes of both stacks."""
        self._perform("ss", does_print, self.a.swap, self.b.swap)

    def pa(self, does_print: bool = True) -> None:
        """Move the top of B onto A; nothing moves when B is empty."""
        self._perform("pa", does_print, self._push_to(self.b, self.a))

    def pb(self, does_print: bool = True) -> None:
        """Move the top of A onto B; nothing moves when A is empty."""
        self._perform("pb", does_print, self._push_to(self.a, self.b))

    def ra(self, does_print: bool = True) -> None:
        """Rotate A: its top goes to the bottom."""
        self._perform("ra", does_print, self.a.rotate)

    def rb(self, does_print: bool = True) -> None:
        """Rotate B: its top goes to the bottom."""
        self._perform("rb", does_print, self.b.rotate)

    def rr(self, does_print: bool = True) -> None:
        """Rotate both stacks."""
        self._perform("rr", does_print, self.a.rotate, self.b.rotate)

    def rra(self, does_print: bool = True) -> None:
        """Reverse-rotate A: its bottom comes to the top."""
        self._perform("rra", does_print, self.a.reverse_rotate)

    def rrb(self, does_print: bool = True) -> None:
        """Reverse-rotate B: its bottom comes to the top."""
        self._perform("rrb", does_print, self.b.reverse_rotate)

    def rrr(self, does_print: bool = True) -> None:
        """Reverse-rotate both stacks."""
        self._perform("rrr", does_print, self.a.reverse_rotate, self.b.reverse_rotate)

    def rotate_to_top(self, stack: Stack, position: int, name: str) -> None:
        """Bring the node at ``position`` of ``stack`` to its top the short way.

        ``name`` is ``"a"`` or ``"b"`` and picks which moves are used.
        """
        if name == "a":
            forward, backward = self.ra, self.rra
        elif name == "b":
            forward, backward = self.rb, self.rrb
        else:
            raise ValueError(f"unknown stack name: {name!r}")
        size = len(stack)
        if position <= size // 2:
            for _ in range(position):
                forward()
        else:
            for _ in range(size - position):
                backward()


def isqrt(n: int) -> int:
    """Integer square root, rounded down; 0 for n <= 0."""
    return math.isqrt(n) if n > 0 else 0


def max_bits(stack: Stack) -> int:
    """Number of bits needed to write the largest index in the stack."""
    return stack.max_index().bit_length()