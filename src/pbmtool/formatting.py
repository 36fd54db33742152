from __future__ import annotations

from typing import Iterable, List, Sequence


def format_row(row: Iterable[bool]) -> str:
    """
    One token per pixel, each followed by a space ("1 0 1 ").
    The trailing separator is part of the format and is kept.
    """
    return "".join("1 " if px else "0 " for px in row)


def format_header(magic_number: str, width: int, height: int) -> str:
    return f"{magic_number}\n{width} {height}\n"


def format_pbm(
    magic_number: str,
    width: int,
    height: int,
    grid: Sequence[Sequence[bool]],
) -> str:
    """
    Deterministic plain PBM text: header line, dimensions line, one line per row.
    """
    lines: List[str] = [format_header(magic_number, width, height)]
    for row in grid:
        lines.append(format_row(row) + "\n")
    return "".join(lines)
