from __future__ import annotations

import argparse
import sys
import unittest
from pathlib import Path
from typing import List

from . import __version__
from .core import PbmError, read_pbm

EXAMPLE_INPUT = Path("image.pbm")
EXAMPLE_OUTPUT = Path("inverted_image.pbm")


def run_selftest() -> int:
    loader = unittest.TestLoader()
    suite = loader.discover(start_dir=str(Path(__file__).parent.parent.parent / "tests"))
    runner = unittest.TextTestRunner(verbosity=2)
    res = runner.run(suite)
    return 0 if res.wasSuccessful() else 1


def run_example(input_path: Path, output_path: Path, verbose: bool = False) -> None:
    """
    Read a PBM, report its size and the pixel at (1, 1), then save it inverted.
    """
    image = read_pbm(input_path)
    if verbose:
        print(f"Read {input_path} ({image.magic_number})")

    width, height = image.size()
    print("Image Size:", width, "x", height)
    print("Value at (1, 1):", image.at(1, 1))

    image.invert()
    image.save(output_path)
    if verbose:
        print(f"Wrote {output_path}")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="pbmtool",
        description=(
            f"Read {EXAMPLE_INPUT}, print its size and pixel (1, 1), "
            f"and write the inverted image to {EXAMPLE_OUTPUT}."
        ),
    )
    ap.add_argument("--selftest", action="store_true", help="run the internal test suite and exit")
    ap.add_argument("--version", action="version", version=f"pbmtool {__version__}")
    ap.add_argument("--verbose", action="store_true", help="verbose logging")
    return ap


def main(argv: List[str] | None = None) -> None:
    argv = list(sys.argv[1:] if argv is None else argv)
    ns = build_parser().parse_args(argv)

    if ns.selftest:
        sys.exit(run_selftest())

    try:
        run_example(EXAMPLE_INPUT, EXAMPLE_OUTPUT, verbose=ns.verbose)
    except (PbmError, OSError, IndexError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)
