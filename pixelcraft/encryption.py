"""Hiding a text message in the least significant bits of an RGB image."""

from __future__ import annotations

import numpy as np

from pixelcraft.rgb_image import RGBImage

__all__ = ["MessageTooLongError", "to_bits", "encrypt", "decrypt"]

_LENGTH_BITS = 16
_MAX_LENGTH = (1 << _LENGTH_BITS) - 1


class MessageTooLongError(ValueError):
    """The message does not fit in the image or in the length header."""


def _message_bytes(message: str | bytes) -> bytes:
    return message.encode("utf-8") if isinstance(message, str) else bytes(message)


def to_bits(message: str | bytes) -> list[bool]:
    """Return a 16-bit big-endian byte count followed by the message bits, MSB first."""
    data = _message_bytes(message)
    if len(data) > _MAX_LENGTH:
        raise MessageTooLongError(
            f"message of {len(data)} bytes exceeds the {_MAX_LENGTH}-byte limit"
        )
    header = [bool(len(data) >> shift & 1) for shift in range(_LENGTH_BITS - 1, -1, -1)]
    body = [bool(byte >> shift & 1) for byte in data for shift in range(7, -1, -1)]
    return header + body


def encrypt(image: RGBImage, message: str | bytes) -> RGBImage:
    """Return a copy of ``image`` with ``message`` written into its channel LSBs.

    Bits are stored row by row, pixel by pixel, red, green then blue.
    """
    bits = to_bits(message)
    flat = image.pixels.reshape(-1).copy()
    if len(bits) > flat.size:
        raise MessageTooLongError(
            f"message needs {len(bits)} bits but the image holds only {flat.size}"
        )
    count = len(bits)
    flat[:count] = (flat[:count] & 0xFE) | np.array(bits, dtype=np.int64)
    return RGBImage(flat.reshape(image.pixels.shape))


def decrypt(image: RGBImage) -> str:
    """Read back a message hidden by :func:`encrypt`."""
    lsb = (image.pixels.reshape(-1) & 1).astype(np.uint8)
    if lsb.size < _LENGTH_BITS:
        raise ValueError("image is too small to hold a message header")
    length = 0
    for bit in lsb[:_LENGTH_BITS].tolist():
        length = (length << 1) | bit
    needed = _LENGTH_BITS + 8 * length
    if lsb.size < needed:
        raise ValueError(
            f"header announces {length} bytes but the image holds fewer bits"
        )
    data = np.packbits(lsb[_LENGTH_BITS:needed]).tobytes()
    return data.decode("utf-8", errors="replace")