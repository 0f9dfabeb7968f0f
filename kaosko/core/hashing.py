from __future__ import annotations
from typing import Optional

INT32_MIN = -2**31
INT32_MAX = 2**31 - 1

def to_int32(value: int) -> int:
    """Wrap an arbitrary int into signed 32-bit two's-complement range."""
    return ((int(value) - INT32_MIN) % 2**32) + INT32_MIN

def char_sum_hash(label: Optional[str]) -> int:
    """Sum of character code points, wrapped to int32.

    Deliberately simple and stable across processes (unlike the salted
    builtin ``hash``). Order-insensitive: anagrams share a seed.
    """
    total = 0
    for ch in label or "":
        total = to_int32(total + ord(ch))
    return total
