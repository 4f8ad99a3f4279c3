"""
nelsc.formats.base24
--------------------
Base-24 digits and signed two-digit pairs.

Digits are 0-9 followed by the fourteen letters ABCDEFGMPRTVXY.
A pair holds 0..575 unsigned; values above 479 wrap to -96..-1, so a pair
covers exactly the NELSC year range.
"""

from __future__ import annotations

from typing import Optional

from nelsc.core.errors import ContractViolation

ALPHABET = "0123456789ABCDEFGMPRTVXY"
BASE = len(ALPHABET)
DIGIT_MAX = BASE - 1

PAIR_MIN = -96
PAIR_MAX = 479
PAIR_SPAN = BASE * BASE  # 576


def digit_to_int(c: str) -> Optional[int]:
    """Value of a base-24 digit (case-insensitive), or None if c is not one."""
    if len(c) != 1:
        return None
    u = c.upper()
    if len(u) != 1 or u not in ALPHABET:
        return None
    return ALPHABET.index(u)


def int_to_digit(v: int) -> str:
    if not (0 <= v <= DIGIT_MAX):
        raise ContractViolation(f"base-24 digit value {v} outside 0..{DIGIT_MAX}")
    return ALPHABET[v]


def pair_to_int(text: str) -> Optional[int]:
    """
    Signed value of the pair formed by the first two characters of text.
    Characters after the pair are ignored.
    """
    if len(text) < 2:
        return None
    hi = digit_to_int(text[0])
    lo = digit_to_int(text[1])
    if hi is None or lo is None:
        return None
    v = hi * BASE + lo
    if v > PAIR_MAX:
        v -= PAIR_SPAN
    return v


def int_to_pair(v: int) -> str:
    if not (PAIR_MIN <= v <= PAIR_MAX):
        raise ContractViolation(f"base-24 pair value {v} outside {PAIR_MIN}..{PAIR_MAX}")
    if v < 0:
        v += PAIR_SPAN
    hi, lo = divmod(v, BASE)
    return int_to_digit(hi) + int_to_digit(lo)
