from __future__ import annotations

from typing import List


BitGrid = List[List[bool]]  # rows of True (set/black) / False (clear/white)


def _dims(bits: BitGrid) -> tuple[int, int]:
    h = len(bits)
    w = len(bits[0]) if h > 0 else 0
    return w, h


def op_invert(bits: BitGrid) -> None:
    for row in bits:
        for x in range(len(row)):
            row[x] = not row[x]


def op_flip_h(bits: BitGrid) -> None:
    """
    Mirror each row left-to-right, in place.
    The middle column of an odd-width grid stays where it is.
    """
    w, _ = _dims(bits)
    for row in bits:
        for x in range(w // 2):
            row[x], row[w - 1 - x] = row[w - 1 - x], row[x]


def op_flip_v(bits: BitGrid) -> None:
    """
    Reverse the row order, in place. Rows are swapped, not copied.
    """
    _, h = _dims(bits)
    for y in range(h // 2):
        bits[y], bits[h - 1 - y] = bits[h - 1 - y], bits[y]
