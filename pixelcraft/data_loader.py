"""Reading, writing, listing and showing images as integer pixel arrays.

Gray images are ``(height, width)`` integer arrays and RGB images are
``(height, width, 3)`` integer arrays.
"""

from __future__ import annotations

import base64
import io
import os
from pathlib import Path

import numpy as np
from PIL import Image as PILImage

__all__ = [
    "DISPLAY_ENABLED",
    "R_FACTOR",
    "G_FACTOR",
    "B_FACTOR",
    "load_gray",
    "load_rgb",
    "dump_gray",
    "dump_rgb",
    "display_gray",
    "display_rgb",
    "gray_ascii",
    "rgb_ascii",
    "list_directory",
]

# Luminance formula: Y = 0.2126R + 0.7152G + 0.0722B
R_FACTOR = 0.2126
G_FACTOR = 0.7152
B_FACTOR = 0.0722

# When false, the display functions return without opening a window.
DISPLAY_ENABLED = True

_SHADES = " .-+#@"
_WINDOW_TITLE = "Loaded Image"
_KEEP_MODES = {"L", "LA", "RGB", "RGBA"}
_TO_GRAY_MODES = {"1", "I", "I;16", "I;16B", "I;16L", "I;16N", "F"}


def _read_channels(filename: str | os.PathLike) -> np.ndarray:
    """Read an image file into a ``(height, width, channels)`` int array."""
    path = Path(filename)
    if not path.is_file():
        raise FileNotFoundError(f"image file not found: {path}")
    with PILImage.open(path) as img:
        if img.mode == "P":
            img = img.convert("RGBA" if "transparency" in img.info else "RGB")
        elif img.mode == "PA":
            img = img.convert("RGBA")
        elif img.mode in _TO_GRAY_MODES:
            img = img.convert("L")
        elif img.mode not in _KEEP_MODES:
            img = img.convert("RGB")
        array = np.asarray(img)
    if array.ndim == 2:
        array = array[:, :, np.newaxis]
    return array.astype(np.int64)


def load_gray(filename: str | os.PathLike) -> np.ndarray:
    """Load an image as gray levels, converting colour images by luminance."""
    array = _read_channels(filename)
    channels = array.shape[2]
    if channels == 1:
        return array[:, :, 0].copy()
    if channels in (3, 4):
        luminance = (
            R_FACTOR * array[:, :, 0]
            + G_FACTOR * array[:, :, 1]
            + B_FACTOR * array[:, :, 2]
        )
        return luminance.astype(np.int64)
    raise ValueError(f"cannot convert an image with {channels} channels to gray")


def load_rgb(filename: str | os.PathLike) -> np.ndarray:
    """Load an image with at least three channels as RGB values."""
    array = _read_channels(filename)
    channels = array.shape[2]
    if channels < 3:
        raise ValueError(f"image has {channels} channel(s); RGB needs at least 3")
    return array[:, :, :3].copy()


def _gray_array(pixels) -> np.ndarray:
    array = np.asarray(pixels, dtype=np.int64)
    if array.ndim != 2 or array.size == 0:
        raise ValueError("gray pixels must be a non-empty 2-D array")
    return array


def _rgb_array(pixels) -> np.ndarray:
    array = np.asarray(pixels, dtype=np.int64)
    if array.ndim != 3 or array.shape[2] < 3 or array.size == 0:
        raise ValueError("RGB pixels must be a non-empty (height, width, 3) array")
    return array[:, :, :3]


def _as_bytes(array: np.ndarray) -> np.ndarray:
    # Values outside 0..255 wrap around, as a cast to an unsigned byte does.
    return (array & 0xFF).astype(np.uint8)


def dump_gray(pixels, filename: str | os.PathLike) -> None:
    """Save gray pixels to an image file; the extension picks the format."""
    array = _gray_array(pixels)
    PILImage.fromarray(_as_bytes(array), mode="L").save(filename)


def dump_rgb(pixels, filename: str | os.PathLike) -> None:
    """Save RGB pixels to an image file; the extension picks the format."""
    array = _rgb_array(pixels)
    PILImage.fromarray(_as_bytes(np.ascontiguousarray(array)), mode="RGB").save(filename)


def _show(image: PILImage.Image) -> None:
    """Show an image in a window and wait until the window is closed."""
    import tkinter

    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    root = tkinter.Tk()
    root.title(_WINDOW_TITLE)
    photo = tkinter.PhotoImage(
        master=root,
        data=base64.b64encode(buffer.getvalue()).decode("ascii"),
        format="png",
    )
    tkinter.Label(root, image=photo).pack()
    root.mainloop()


def display_gray(pixels) -> None:
    """Show gray pixels in a window, blocking until it is closed."""
    if not DISPLAY_ENABLED:
        return
    array = _gray_array(pixels)
    _show(PILImage.fromarray(_as_bytes(array), mode="L"))


def display_rgb(pixels) -> None:
    """Show RGB pixels in a window, blocking until it is closed."""
    if not DISPLAY_ENABLED:
        return
    array = _rgb_array(pixels)
    _show(PILImage.fromarray(_as_bytes(np.ascontiguousarray(array)), mode="RGB"))


def _shade(intensity: int) -> str:
    index = max(0, min(255, int(intensity))) * len(_SHADES) // 255
    # Full intensity lands one past the last shade, which is the terminator.
    return _SHADES[index] if index < len(_SHADES) else "\0"


def _ascii_rows(intensities: np.ndarray) -> str:
    return "".join(
        "".join(_shade(value) * 2 for value in row) + "\n"
        for row in intensities.tolist()
    )


def gray_ascii(pixels) -> str:
    """Render gray pixels as ASCII art, two characters per pixel."""
    return _ascii_rows(_gray_array(pixels))


def rgb_ascii(pixels) -> str:
    """Render RGB pixels as ASCII art using the mean of the three channels."""
    array = _rgb_array(pixels)
    return _ascii_rows(array.sum(axis=2) // 3)


def list_directory(directory: str | os.PathLike) -> list[str]:
    """Return ``directory/name`` for every entry in a directory, sorted."""
    directory = os.fspath(directory)
    return [f"{directory}/{name}" for name in sorted(os.listdir(directory))]