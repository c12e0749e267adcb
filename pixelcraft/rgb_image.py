"""Three-channel images and the filters that act on them."""

from __future__ import annotations

import math
import os

import numpy as np

from pixelcraft.data_loader import display_rgb, dump_rgb, load_rgb, rgb_ascii
from pixelcraft.image import Image

__all__ = ["RGBImage"]

_SHARPEN_CROSS = ((0, -1, 0), (-1, 5, -1), (0, -1, 0))
_SHARPEN_FULL = ((-1, -1, -1), (-1, 9, -1), (-1, -1, -1))
_EMBOSS = ((-2, -1, 0), (-1, 1, 1), (0, 1, 2))


def _truncating_divide(total: int, count: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(total) // count
    return quotient if total >= 0 else -quotient


def _spatial_pad(array: np.ndarray, amount: int, **kwargs) -> np.ndarray:
    """Pad the row and column axes only, leaving the channel axis alone."""
    return np.pad(array, ((amount, amount), (amount, amount), (0, 0)), **kwargs)


class RGBImage(Image):
    """An RGB image stored as a ``(height, width, 3)`` integer array."""

    def __init__(self, pixels) -> None:
        super().__init__(pixels)
        if self.pixels.ndim != 3 or self.pixels.shape[2] != 3:
            raise ValueError("RGB pixels must be a (height, width, 3) array")

    @classmethod
    def load(cls, filename: str | os.PathLike) -> RGBImage:
        """Load an image file as RGB values."""
        return cls(load_rgb(filename))

    def copy(self) -> RGBImage:
        """Return an independent copy of the image."""
        return RGBImage(self.pixels)

    def dump(self, filename: str | os.PathLike) -> None:
        """Save the image to a file."""
        dump_rgb(self.pixels, filename)

    def display(self) -> None:
        """Show the image in a window."""
        display_rgb(self.pixels)

    def to_ascii(self) -> str:
        """Render the image as ASCII art."""
        return rgb_ascii(self.pixels)

    def __getitem__(self, key):
        value = self.pixels[key]
        return int(value) if np.ndim(value) == 0 else value.copy()

    def __setitem__(self, key, value) -> None:
        self.pixels[key] = value

    def _convolve3(self, kernel) -> np.ndarray:
        """Integer 3x3 convolution per channel with edge pixels repeated."""
        height, width = self.pixels.shape[:2]
        padded = _spatial_pad(self.pixels, 1, mode="edge")
        total = np.zeros(self.pixels.shape, dtype=np.int64)
        for ki, kernel_row in enumerate(kernel):
            for kj, weight in enumerate(kernel_row):
                total += weight * padded[ki:ki + height, kj:kj + width]
        return total

    def horizontal_flip(self) -> RGBImage:
        """Return the image mirrored left to right."""
        return RGBImage(self.pixels[:, ::-1])

    def mosaic(self, block: int = 8) -> RGBImage:
        """Return the image averaged per channel over square blocks."""
        if block <= 0:
            raise ValueError("block size must be positive")
        height, width = self.pixels.shape[:2]
        result = np.empty_like(self.pixels)
        for top in range(0, height, block):
            for left in range(0, width, block):
                cell = self.pixels[top:top + block, left:left + block]
                count = cell.shape[0] * cell.shape[1]
                sums = cell.sum(axis=(0, 1)).tolist()
                result[top:top + block, left:left + block] = [
                    _truncating_divide(int(total), count) for total in sums
                ]
        return RGBImage(result)

    def gaussian(self, sigma: float = 10, k: int = 2) -> RGBImage:
        """Return the image blurred with a normalised Gaussian of radius ``k``."""
        height, width = self.pixels.shape[:2]
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
        result = np.zeros(self.pixels.shape, dtype=np.float64)
        if weights and height and width:
            padded = _spatial_pad(self.pixels, k, mode="edge").astype(np.float64)
            for gi in offsets:
                for gj in offsets:
                    shifted = padded[gi + k:gi + k + height, gj + k:gj + k + width]
                    result = result + (weights[gi, gj] / total_weight) * shifted
        return RGBImage(np.clip(np.trunc(result), 0, 255).astype(np.int64))

    def laplacian(self, d: int = 0) -> RGBImage:
        """Return the image sharpened; ``d == 0`` uses the 4-neighbour kernel."""
        kernel = _SHARPEN_CROSS if d == 0 else _SHARPEN_FULL
        if self.pixels.size == 0:
            return self.copy()
        return RGBImage(np.clip(self._convolve3(kernel), 0, 255))

    def fisheye(self, k: float = 0.5) -> RGBImage:
        """Return the image with a fisheye distortion of strength ``k``."""
        height, width = self.pixels.shape[:2]
        result = np.zeros(self.pixels.shape, dtype=np.int64)
        if not (height and width):
            return RGBImage(result)
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
        return RGBImage(result)

    def invert(self) -> RGBImage:
        """Return the negative of the image."""
        return RGBImage(255 - self.pixels)

    def emboss(self) -> RGBImage:
        """Return the image with an emboss effect, offset by 128."""
        if self.pixels.size == 0:
            return self.copy()
        return RGBImage(self._convolve3(_EMBOSS) + 128)

    def oil_painting(self, r: int = 3) -> RGBImage:
        """Replace each channel value by the most frequent one within radius ``r``."""
        if self.pixels.size and (self.pixels.min() < 0 or self.pixels.max() > 255):
            raise ValueError("oil painting needs channel values between 0 and 255")
        height, width = self.pixels.shape[:2]
        pad = max(r, 0)
        # Value 256 marks positions outside the image and is never counted.
        padded = _spatial_pad(self.pixels, pad, mode="constant", constant_values=256)
        columns = np.arange(width)
        result = np.zeros(self.pixels.shape, dtype=np.int64)
        for channel in range(3):
            plane = padded[:, :, channel]
            for row in range(height):
                counts = np.zeros((width, 257), dtype=np.int64)
                for ki in range(-r, r + 1):
                    window_row = plane[row + pad + ki]
                    for kj in range(-r, r + 1):
                        counts[columns, window_row[pad + kj:pad + kj + width]] += 1
                result[row, :, channel] = counts[:, :256].argmax(axis=1)
        return RGBImage(result)