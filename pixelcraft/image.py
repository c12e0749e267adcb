"""The common interface of gray and RGB images."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod

import numpy as np

__all__ = ["Image"]


class Image(ABC):
    """An image held as an integer pixel array indexed ``[row, column, ...]``."""

    def __init__(self, pixels) -> None:
        array = np.array(pixels, dtype=np.int64)
        if array.ndim < 2:
            raise ValueError("pixels must have at least two dimensions")
        self.pixels = array

    @property
    def width(self) -> int:
        """Number of pixel columns."""
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        """Number of pixel rows."""
        return int(self.pixels.shape[0])

    def __repr__(self) -> str:
        return f"{type(self).__name__}(width={self.width}, height={self.height})"

    @abstractmethod
    def dump(self, filename: str | os.PathLike) -> None:
        """Save the image to a file."""

    @abstractmethod
    def display(self) -> None:
        """Show the image in a window."""

    @abstractmethod
    def to_ascii(self) -> str:
        """Render the image as ASCII art."""

    @abstractmethod
    def horizontal_flip(self) -> Image:
        """Return the image mirrored left to right."""

    @abstractmethod
    def mosaic(self, block: int = 8) -> Image:
        """Return the image averaged over square blocks."""

    @abstractmethod
    def gaussian(self, sigma: float = 10, k: int = 2) -> Image:
        """Return the image blurred with a Gaussian kernel of radius ``k``."""

    @abstractmethod
    def laplacian(self, d: int = 0) -> Image:
        """Return the image sharpened with a Laplacian kernel."""

    @abstractmethod
    def fisheye(self, k: float = 0.5) -> Image:
        """Return the image with a fisheye distortion."""

    @abstractmethod
    def invert(self) -> Image:
        """Return the negative of the image."""

    @abstractmethod
    def emboss(self) -> Image:
        """Return the image with an emboss effect."""

    @abstractmethod
    def oil_painting(self, r: int = 3) -> Image:
        """Return the image with an oil-painting effect of radius ``r``."""