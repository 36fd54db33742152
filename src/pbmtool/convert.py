from __future__ import annotations

from PIL import Image

from .core import Bitmap, PbmError
from .ops import BitGrid


def bitmap_from_image(
    img: Image.Image,
    allow_threshold: bool = False,
    magic_number: str = "P1",
) -> Bitmap:
    """
    Build a Bitmap from a Pillow image.

    Mode "1" images map directly (black=set, white=clear). Anything else
    is rejected unless allow_threshold is given, in which case the image is
    converted to grayscale and binarized at 128.
    """
    if img.mode == "1":
        src = img
        is_set = lambda v: v == 0  # noqa: E731  # 0 or 255
    elif allow_threshold:
        src = img.convert("L")
        is_set = lambda v: v < 128  # noqa: E731
    else:
        raise PbmError(f"Image is not 1-bit (mode={img.mode}). Pass allow_threshold=True.")

    w, h = src.size
    px = src.load()
    grid: BitGrid = []
    for y in range(h):
        grid.append([is_set(px[x, y]) for x in range(w)])
    return Bitmap(magic_number=magic_number, width=w, height=h, grid=grid)


def bitmap_to_image(bitmap: Bitmap) -> Image.Image:
    w, h = bitmap.size()
    img = Image.new("1", (w, h), 255)
    px = img.load()
    for y in range(h):
        row = bitmap.grid[y]
        for x in range(w):
            px[x, y] = 0 if row[x] else 255
    return img
