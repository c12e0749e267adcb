"""Choosing filters by number and applying them one after another."""

from __future__ import annotations

import enum
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from pixelcraft.image import Image

__all__ = [
    "FilterFlag",
    "parse_filters",
    "dumped_name",
    "run_filters",
    "process_image",
]

Ask = Callable[[str], str]

# The filter line is read as at most this many "number separator" fields.
_MAX_FIELDS = ord("&")
_INTEGER = re.compile(r"\s*([-+]?\d+)")


class FilterFlag(enum.IntFlag):
    """One bit per filter, in menu order."""

    HORIZONTAL = 0b00000001
    MOSAIC = 0b00000010
    GAUSSIAN = 0b00000100
    LAPLACIAN = 0b00001000
    FISHEYE = 0b00010000
    INVERT = 0b00100000
    EMBOSS = 0b01000000
    OIL_PAINTING = 0b10000000


_MENU = (
    "Case 1 : horizontal\n"
    "Case 2 : mosaic\n"
    "Case 3 : gaussian\n"
    "Case 4 : laplacain\n"
    "Case 5 : fisheye\n"
    "Case 6 : invert\n"
    "Case 7 : emboss\n"
    "Case 8 : oil-painting\n"
)


def parse_filters(text: str) -> FilterFlag:
    """Read filter numbers 1-8 separated by single characters, such as ``1&3&5``.

    Reading stops at the first field that is not a number; numbers outside
    1-8 are ignored.
    """
    flags = FilterFlag(0)
    pos = 0
    for _ in range(_MAX_FIELDS):
        match = _INTEGER.match(text, pos)
        if match is None:
            break
        number = int(match.group(1))
        pos = match.end()
        if 1 <= number <= 8:
            flags |= FilterFlag(1 << (number - 1))
        while pos < len(text) and text[pos].isspace():
            pos += 1
        if pos >= len(text):
            break
        pos += 1
    return flags


def dumped_name(filename: str, suffix: str) -> str:
    """Insert ``suffix`` before the four-character extension of ``filename``."""
    if len(filename) < 4:
        raise ValueError(f"file name too short to carry an extension: {filename!r}")
    return filename[:-4] + suffix + filename[-4:]


def _mosaic(image: Image, ask: Ask) -> Image:
    answer = ask("Enter the block's size : ")
    return image.mosaic() if answer == "" else image.mosaic(int(answer))


def _laplacian(image: Image, ask: Ask) -> Image:
    answer = ask("Enter 0 or 1 to choose a type : ")
    return image.laplacian(0 if answer == "0" else 1)


def _fisheye(image: Image, ask: Ask) -> Image:
    answer = ask("Enter the effect : ")
    return image.fisheye() if answer == "" else image.fisheye(float(answer))


def _oil_painting(image: Image, ask: Ask) -> Image:
    answer = ask("Enter the effect : ")
    return image.oil_painting() if answer == "" else image.oil_painting(int(float(answer)))


@dataclass(frozen=True)
class _Step:
    flag: FilterFlag
    label: str
    suffix: str
    apply: Callable[[Image, Ask], Image]


_STEPS = (
    _Step(FilterFlag.HORIZONTAL, "horizontalflip", "_horizontal",
          lambda image, ask: image.horizontal_flip()),
    _Step(FilterFlag.MOSAIC, "mosaic", "_mosiac", _mosaic),
    _Step(FilterFlag.GAUSSIAN, "Gaussian", "_Gaussian",
          lambda image, ask: image.gaussian()),
    _Step(FilterFlag.LAPLACIAN, "laplacian", "_laplacian", _laplacian),
    _Step(FilterFlag.FISHEYE, "fisheye", "_fisheye", _fisheye),
    _Step(FilterFlag.INVERT, "invert", "_invert", lambda image, ask: image.invert()),
    _Step(FilterFlag.EMBOSS, "emboss", "_emboss", lambda image, ask: image.emboss()),
    _Step(FilterFlag.OIL_PAINTING, "oil-painting", "_oil-painting", _oil_painting),
)


def run_filters(
    image: Image,
    flags: FilterFlag,
    filename: str,
    ask: Ask = input,
    out_dir: str | os.PathLike = "DumpedImage",
) -> Image:
    """Apply every selected filter in menu order, each to the previous result.

    After each filter the result is shown and, if the answer is ``y``, saved
    in ``out_dir``; the saved names accumulate the suffix of every saved step.
    Returns the final image.
    """
    for step in _STEPS:
        if not flags & step.flag:
            continue
        print(f"Processing {step.label}......")
        image = step.apply(image, ask)
        image.display()
        if ask("Do you want to dump the image?(y/n) : ") == "y":
            filename = dumped_name(filename, step.suffix)
            image.dump(Path(out_dir) / filename)
    print("End of processing.")
    return image


def process_image(
    image: type[Image],
    filename: str,
    ask: Ask = input,
    image_dir: str | os.PathLike = "Image-Folder",
    out_dir: str | os.PathLike = "DumpedImage",
) -> Image:
    """Load ``filename`` from ``image_dir`` with the image class ``image``,
    ask which filters to use and run them. Returns the final image."""
    loaded = image.load(Path(image_dir) / filename)
    print("The original picture.")
    loaded.display()
    if ask("Do you want to display in ASCII?(y/n) : ") == "y":
        print(loaded.to_ascii(), end="")
    print(_MENU)
    flags = parse_filters(ask("Enter the filter : "))
    for number, flag in enumerate(FilterFlag, start=1):
        if flags & flag:
            print(f"Case {number} detected")
    return run_filters(loaded, flags, filename, ask, out_dir)