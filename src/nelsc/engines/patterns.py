"""
nelsc.engines.patterns
----------------------
Long/short period tables driving the NELSC cycles.

A pattern is a string of "S" (short) and "L" (long) symbols, one per
period. Months are grouped into a repeating 32-month pattern of 28- and
35-day months; years are grouped into an 11-year span of 12- and 13-month
years, and 21 spans make a 231-year pattern whose final year is always
long.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from nelsc.core.errors import ContractViolation

SHORT = "S"
LONG = "L"


@dataclass(frozen=True)
class CyclePattern:
    symbols: str
    short: int
    long: int

    def __post_init__(self) -> None:
        if not self.symbols:
            raise ValueError("pattern must not be empty")
        bad = set(self.symbols) - {SHORT, LONG}
        if bad:
            raise ValueError(f"pattern symbols must be 'S' or 'L', got {sorted(bad)}")
        if not (0 < self.short < self.long):
            raise ValueError("Require 0 < short < long")

    def __len__(self) -> int:
        return len(self.symbols)

    @property
    def lengths(self) -> Tuple[int, ...]:
        return tuple(self.long if s == LONG else self.short for s in self.symbols)

    @property
    def total(self) -> int:
        """Units covered by one pass of the pattern."""
        return sum(self.lengths)

    def is_long(self, i: int) -> bool:
        if not (0 <= i < len(self.symbols)):
            raise ContractViolation(f"pattern index {i} outside 0..{len(self.symbols) - 1}")
        return self.symbols[i] == LONG

    def length(self, i: int) -> int:
        return self.long if self.is_long(i) else self.short

    def prefix(self, n: int) -> int:
        """Units covered by the first n periods."""
        if not (0 <= n <= len(self.symbols)):
            raise ContractViolation(f"prefix count {n} outside 0..{len(self.symbols)}")
        return sum(self.lengths[:n])

    def locate(self, units: int) -> Tuple[int, int]:
        """
        Split a position inside one pass of the pattern into
        (period index, units into that period).
        """
        if not (0 <= units < self.total):
            raise ContractViolation(f"position {units} outside 0..{self.total - 1}")
        i = 0
        while units >= self.length(i):
            units -= self.length(i)
            i += 1
        return i, units


@dataclass(frozen=True)
class YearPattern:
    """
    `spans` repetitions of an 11-year span pattern. The last year of the
    whole pattern is long whatever its symbol in the span says.
    """
    span: CyclePattern
    spans: int

    def __post_init__(self) -> None:
        if self.spans <= 0:
            raise ValueError("spans must be positive")

    @property
    def years(self) -> int:
        return self.spans * len(self.span)

    @property
    def months(self) -> int:
        extra = self.span.long - self.span.length(len(self.span) - 1)
        return self.spans * self.span.total + extra

    def is_long(self, i: int) -> bool:
        if not (0 <= i < self.years):
            raise ContractViolation(f"year index {i} outside 0..{self.years - 1}")
        if i == self.years - 1:
            return True
        return self.span.is_long(i % len(self.span))

    def length(self, i: int) -> int:
        return self.span.long if self.is_long(i) else self.span.short


MONTH_PATTERN = CyclePattern(
    "SSLS" "SSSLS"
    "SSLS" "SSSLS"
    "SSLS" "SSSLS"
           "SSSLS",
    short=28,
    long=35,
)

YEAR_SPAN_PATTERN = CyclePattern(
    "SL" "SL" "SSL" "SSL" "S",
    short=12,
    long=13,
)

YEAR_PATTERN = YearPattern(span=YEAR_SPAN_PATTERN, spans=21)
