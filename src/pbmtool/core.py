from __future__ import annotations

import io
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, TextIO, Tuple

from .formatting import format_pbm
from .ops import BitGrid, op_flip_h, op_flip_v, op_invert


class PbmError(Exception):
    """User-facing one-line errors."""


class PbmFormatError(PbmError, ValueError):
    """Malformed PBM content: bad header token, missing pixels, bad shape."""


_INT_RE = re.compile(r"[+-]?[0-9]+")


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _next_token(tokens: Iterator[str], what: str) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise PbmFormatError(f"Unexpected end of data while reading {what}") from None


def _parse_dim(tokens: Iterator[str], what: str) -> int:
    tok = _next_token(tokens, what)
    if not _INT_RE.fullmatch(tok):
        raise PbmFormatError(f"Invalid {what}: {tok!r} is not an integer")
    return int(tok)


@dataclass
class Bitmap:
    magic_number: str
    width: int
    height: int
    grid: BitGrid = field(repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise PbmFormatError(f"Invalid size: {self.width}x{self.height}")
        if len(self.grid) != self.height or any(len(row) != self.width for row in self.grid):
            raise PbmFormatError(
                f"Grid shape does not match size {self.width}x{self.height}"
            )

    # --- parsing

    @classmethod
    def from_stream(cls, stream: TextIO) -> "Bitmap":
        """
        Read whitespace-separated tokens: magic number, width, height,
        then width*height pixels in row-major order. Only the token "1"
        is a set pixel; anything else reads as clear.
        """
        tokens = _tokens(stream)
        magic = _next_token(tokens, "magic number")
        width = _parse_dim(tokens, "width")
        height = _parse_dim(tokens, "height")
        if width <= 0 or height <= 0:
            raise PbmFormatError(f"Invalid size: {width}x{height}")

        grid: BitGrid = []
        for y in range(height):
            row = []
            for x in range(width):
                row.append(_next_token(tokens, f"pixel ({x},{y})") == "1")
            grid.append(row)
        return cls(magic_number=magic, width=width, height=height, grid=grid)

    @classmethod
    def from_text(cls, text: str) -> "Bitmap":
        return cls.from_stream(io.StringIO(text))

    # --- accessors

    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"pixel out of bounds: ({x},{y}) for size {self.width}x{self.height}"
            )

    def at(self, x: int, y: int) -> bool:
        self._check_bounds(x, y)
        return self.grid[y][x]

    def set(self, x: int, y: int, value: bool) -> None:
        self._check_bounds(x, y)
        self.grid[y][x] = bool(value)

    def set_magic_number(self, magic_number: str) -> None:
        self.magic_number = magic_number

    # --- transforms (in place)

    def invert(self) -> None:
        op_invert(self.grid)

    def flip(self) -> None:
        """Horizontal mirror."""
        op_flip_h(self.grid)

    def flop(self) -> None:
        """Vertical mirror."""
        op_flip_v(self.grid)

    # --- serialization

    def to_text(self) -> str:
        return format_pbm(self.magic_number, self.width, self.height, self.grid)

    def save(self, path: Path | str) -> None:
        content = self.to_text()
        with Path(path).open("w", encoding="utf-8", newline="\n") as f:
            f.write(content)


def read_pbm(path: Path | str) -> Bitmap:
    with Path(path).open("r", encoding="utf-8") as f:
        try:
            return Bitmap.from_stream(f)
        except UnicodeDecodeError as e:
            raise PbmFormatError(f"Not a plain-text PBM file: {path} ({e.reason})") from e

