"""Single-channel images and the filters that act on them."""

from __future__ import annotations

import math
import os

import numpy as np

from pixelcraft.data_loader import display_gray, dump_gray, gray_ascii, load_gray
from pixelcraft.image import Image

__all__ = ["GrayImage"]

_SHARPEN_CROSS = ((0, -1, 0), (-1, 5, -1), (0, -1, 0))
_SHARPEN_FULL = ((-1, -1, -1), (-1, 9, -1), (-1, -1, -1))
_EMBOSS = ((-2, -1, 0), (-1, 1, 1), (0, 1, 2))


def _truncating_divide(total: int, count: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(total) // count
    return quotient if total >= 0 else -quotient


class GrayImage(Image):
    """A gray image stored as a ``(height, width)`` integer array."""

    def __init__(self, pixels) -> None:
        super().__init__(pixels)
        if self.pixels.ndim != 2:
            raise ValueError("gray pixels must be a 2-D array")

    @classmethod
    def load(cls, filename: str | os.PathLike) -> GrayImage:
        """Load an image file as gray levels."""
        return cls(load_gray(filename))

    def copy(self) -> GrayImage:
        """Return an independent copy of the image."""
        return GrayImage(self.pixels)

    def dump(self, filename: str | os.PathLike) -> None:
        """Save the image to a file."""
        dump_gray(self.pixels, filename)

    def display(self) -> None:
        """Show the image in a window."""
        display_gray(self.pixels)

    def to_ascii(self) -> str:
        """Render the image as ASCII art."""
        return gray_ascii(self.pixels)

    def __getitem__(self, key):
        value = self.pixels[key]
        return int(value) if np.ndim(value) == 0 else value.copy()

    def __setitem__(self, key, value) -> None:
        self.pixels[key] = value

    def _convolve3(self, kernel) -> np.ndarray:
        """Integer 3x3 convolution with edge pixels repeated outside the image."""
        height, width = self.pixels.shape
        padded = np.pad(self.pixels, 1, mode="edge")
        total = np.zeros((height, width), dtype=np.int64)
        for ki, kernel_row in enumerate(kernel):
            for kj, weight in enumerate(kernel_row):
                total += weight * padded[ki:ki + height, kj:kj + width]
        return total

    def horizontal_flip(self) -> GrayImage:
        """Return the image mirrored left to right."""
        return GrayImage(self.pixels[:, ::-1])

    def mosaic(self, block: int = 8) -> GrayImage:
        """Return the image averaged over square blocks of side ``block``."""
        if block <= 0:
            raise ValueError("block size must be positive")
        height, width = self.pixels.shape
        result = np.empty_like(self.pixels)
        for top in range(0, height, block):
            for left in range(0, width, block):
                cell = self.pixels[top:top + block, left:left + block]
                result[top:top + block, left:left + block] = _truncating_divide(
                    int(cell.sum()), cell.size
                )
        return GrayImage(result)

    def gaussian(self, sigma: float = 10, k: int = 2) -> GrayImage:
        """Return the image blurred with a normalised Gaussian of radius ``k``."""
        height, width = self.pixels.shape
        offsets = range(-k, k + 1)
        weights = {}
        total_weight = 0.0
        for gi in offsets:
            for gj in offsets:
                weight = (1.0 / 2.0 * math.pi * sigma * sigma) * math.exp(
                    -(gi * gi + gj * gj) / (sigma * sigma)
                )
                weights[gi, gj] = weight
                total_weight += weight
        result = np.zeros((height, width), dtype=np.float64)
        if weights and height and width:
            padded = np.pad(self.pixels, k, mode="edge").astype(np.float64)
            for gi in offsets:
                for gj in offsets:
                    shifted = padded[gi + k:gi + k + height, gj + k:gj + k + width]
                    result = result + (weights[gi, gj] / total_weight) * shifted
        return GrayImage(np.clip(np.trunc(result), 0, 255).astype(np.int64))

    def laplacian(self, d: int = 0) -> GrayImage:
        """Return the image sharpened; ``d == 0`` uses the 4-neighbour kernel."""
        kernel = _SHARPEN_CROSS if d == 0 else _SHARPEN_FULL
        if self.pixels.size == 0:
            return self.copy()
        return GrayImage(np.clip(self._convolve3(kernel), 0, 255))

    def fisheye(self, k: float = 0.5) -> GrayImage:
        """Return the image with a fisheye distortion of strength ``k``."""
        height, width = self.pixels.shape
        result = np.zeros((height, width), dtype=np.int64)
        if not (height and width):
            return GrayImage(result)
        half_w = width / 2.0
        half_h = height / 2.0
        rows, cols = np.mgrid[0:height, 0:width]
        u = ((cols - half_w) / half_w).astype(np.float32)
        v = ((rows - half_h) / half_h).astype(np.float32)
        radius = np.sqrt(u * u + v * v)
        angle = np.arctan2(v, u)
        inside = radius <= 1
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            bent = np.power(radius, np.float32(k))
            uu = bent * np.cos(angle)
            vv = bent * np.sin(angle)
            src_col = np.nan_to_num(uu.astype(np.float64) * half_w + half_w)
            src_row = np.nan_to_num(vv.astype(np.float64) * half_h + half_h)
        src_col = np.clip(np.trunc(src_col), 0, width - 1).astype(np.int64)
        src_row = np.clip(np.trunc(src_row), 0, height - 1).astype(np.int64)
        result[inside] = self.pixels[src_row[inside], src_col[inside]]
        return GrayImage(result)

    def invert(self) -> GrayImage:
        """Return the negative of the image."""
        return GrayImage(255 - self.pixels)

    def emboss(self) -> GrayImage:
        """Return the image with an emboss effect, offset by 128."""
        if self.pixels.size == 0:
            return self.copy()
        return GrayImage(self._convolve3(_EMBOSS) + 128)

    def oil_painting(self, r: int = 3) -> GrayImage:
        """Replace each pixel by the most frequent level within radius ``r``."""
        if self.pixels.size and (self.pixels.min() < 0 or self.pixels.max() > 255):
            raise ValueError("oil painting needs gray levels between 0 and 255")
        height, width = self.pixels.shape
        pad = max(r, 0)
        # Level 256 marks positions outside the image and is never counted.
        padded = np.pad(self.pixels, pad, mode="constant", constant_values=256)
        columns = np.arange(width)
        result = np.zeros((height, width), dtype=np.int64)
        for row in range(height):
            counts = np.zeros((width, 257), dtype=np.int64)
            for ki in range(-r, r + 1):
                window_row = padded[row + pad + ki]
                for kj in range(-r, r + 1):
                    counts[columns, window_row[pad + kj:pad + kj + width]] += 1
            result[row] = counts[:, :256].argmax(axis=1)
        return GrayImage(result)