import numpy as np
import pytest

from pixelcraft.encryption import MessageTooLongError, decrypt, encrypt, to_bits
from pixelcraft.rgb_image import RGBImage


def _image(height=8, width=8, seed=0):
    rng = np.random.default_rng(seed)
    return RGBImage(rng.integers(0, 256, size=(height, width, 3)))


def test_to_bits_layout_for_single_char():
    bits = to_bits("A")
    assert [int(b) for b in bits] == [0] * 15 + [1] + [0, 1, 0, 0, 0, 0, 0, 1]


def test_to_bits_length_matches_message():
    message = "hello world"
    assert len(to_bits(message)) == 16 + 8 * len(message)


def test_to_bits_empty_is_header_only():
    assert [int(b) for b in to_bits("")] == [0] * 16


def test_to_bits_rejects_oversized_message():
    with pytest.raises(MessageTooLongError):
        to_bits("x" * 70000)


@pytest.mark.parametrize("message", ["", "A", "hello world", "secret message!"])
def test_round_trip(message):
    assert decrypt(encrypt(_image(), message)) == message


def test_round_trip_non_ascii():
    message = "héllo"
    assert decrypt(encrypt(_image(), message)) == message


def test_encrypt_leaves_original_untouched():
    image = _image()
    before = image.pixels.copy()
    encrypt(image, "abc")
    assert np.array_equal(image.pixels, before)


def test_encrypt_changes_only_low_bits():
    image = _image()
    hidden = encrypt(image, "some text")
    assert hidden.pixels.shape == image.pixels.shape
    assert np.abs(hidden.pixels - image.pixels).max() <= 1


def test_encrypt_keeps_pixels_after_message():
    image = _image()
    message = "hi"
    hidden = encrypt(image, message)
    used = len(to_bits(message))
    assert np.array_equal(
        hidden.pixels.reshape(-1)[used:], image.pixels.reshape(-1)[used:]
    )


def test_encrypt_message_too_long_for_image():
    image = _image(height=2, width=2)
    with pytest.raises(MessageTooLongError):
        encrypt(image, "too long")


def test_encrypt_exact_capacity():
    # 2x4 pixels * 3 channels = 24 bits = header + one byte
    image = _image(height=2, width=4)
    assert decrypt(encrypt(image, "Z")) == "Z"


def test_decrypt_too_small_for_header():
    with pytest.raises(ValueError):
        decrypt(RGBImage(np.zeros((1, 2, 3), dtype=np.int64)))


def test_decrypt_header_exceeding_image():
    pixels = np.ones((3, 3, 3), dtype=np.int64)
    with pytest.raises(ValueError):
        decrypt(RGBImage(pixels))


def test_decrypt_all_even_pixels_gives_empty_message():
    pixels = np.full((4, 4, 3), 200, dtype=np.int64)
    assert decrypt(RGBImage(pixels)) == ""