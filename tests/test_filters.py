import numpy as np
import pytest

from pixelcraft import data_loader
from pixelcraft.filters import (
    FilterFlag,
    dumped_name,
    parse_filters,
    process_image,
    run_filters,
)
from pixelcraft.gray_image import GrayImage
from pixelcraft.rgb_image import RGBImage


@pytest.fixture(autouse=True)
def no_windows(monkeypatch):
    monkeypatch.setattr(data_loader, "DISPLAY_ENABLED", False)


def _answers(*replies):
    replies = iter(replies)
    return lambda prompt: next(replies)


def _gray(seed=0, size=(6, 5)):
    rng = np.random.default_rng(seed)
    return GrayImage(rng.integers(0, 256, size=size))


def _rgb(seed=0, size=(6, 5)):
    rng = np.random.default_rng(seed)
    return RGBImage(rng.integers(0, 256, size=size + (3,)))


def test_parse_filters_ampersand_list():
    assert parse_filters("1&3&5") == (
        FilterFlag.HORIZONTAL | FilterFlag.GAUSSIAN | FilterFlag.FISHEYE
    )


def test_parse_filters_single():
    assert parse_filters("8") == FilterFlag.OIL_PAINTING


def test_parse_filters_empty():
    assert parse_filters("") == FilterFlag(0)


def test_parse_filters_ignores_out_of_range():
    assert parse_filters("9&2&0") == FilterFlag.MOSAIC


def test_parse_filters_stops_at_non_number():
    assert parse_filters("1&&2") == FilterFlag.HORIZONTAL


def test_parse_filters_all():
    expected = (
        FilterFlag.HORIZONTAL
        | FilterFlag.MOSAIC
        | FilterFlag.GAUSSIAN
        | FilterFlag.LAPLACIAN
        | FilterFlag.FISHEYE
        | FilterFlag.INVERT
        | FilterFlag.EMBOSS
        | FilterFlag.OIL_PAINTING
    )
    assert parse_filters("1&2&3&4&5&6&7&8") == expected


def test_dumped_name_inserts_suffix():
    assert dumped_name("truck.png", "_invert") == "truck_invert.png"


def test_dumped_name_too_short():
    with pytest.raises(ValueError):
        dumped_name("a.b", "_x")


def test_run_filters_invert_and_dump(tmp_path):
    image = _gray()
    result = run_filters(image, FilterFlag.INVERT, "pic.png", _answers("y"), tmp_path)
    assert np.array_equal(result.pixels, image.invert().pixels)
    saved = GrayImage.load(tmp_path / "pic_invert.png")
    assert np.array_equal(saved.pixels, result.pixels)


def test_run_filters_names_accumulate(tmp_path):
    image = _rgb()
    flags = FilterFlag.HORIZONTAL | FilterFlag.INVERT
    result = run_filters(image, flags, "pic.png", _answers("y", "y"), tmp_path)
    assert (tmp_path / "pic_horizontal.png").is_file()
    assert (tmp_path / "pic_horizontal_invert.png").is_file()
    assert np.array_equal(result.pixels, image.horizontal_flip().invert().pixels)


def test_run_filters_no_dump_writes_nothing(tmp_path):
    run_filters(_gray(), FilterFlag.EMBOSS, "pic.png", _answers("n"), tmp_path)
    assert list(tmp_path.iterdir()) == []


def test_run_filters_mosaic_default_block(tmp_path):
    image = _gray(size=(10, 10))
    result = run_filters(image, FilterFlag.MOSAIC, "p.png", _answers("", "n"), tmp_path)
    assert np.array_equal(result.pixels, image.mosaic().pixels)


def test_run_filters_mosaic_given_block(tmp_path):
    image = _gray(size=(10, 10))
    result = run_filters(image, FilterFlag.MOSAIC, "p.png", _answers("2", "n"), tmp_path)
    assert np.array_equal(result.pixels, image.mosaic(2).pixels)


@pytest.mark.parametrize("answer, d", [("0", 0), ("1", 1), ("other", 1)])
def test_run_filters_laplacian_type(tmp_path, answer, d):
    image = _rgb()
    result = run_filters(
        image, FilterFlag.LAPLACIAN, "p.png", _answers(answer, "n"), tmp_path
    )
    assert np.array_equal(result.pixels, image.laplacian(d).pixels)


def test_run_filters_oil_painting_truncates_radius(tmp_path):
    image = _gray()
    result = run_filters(
        image, FilterFlag.OIL_PAINTING, "p.png", _answers("1.7", "n"), tmp_path
    )
    assert np.array_equal(result.pixels, image.oil_painting(1).pixels)


def test_run_filters_fisheye_value(tmp_path):
    image = _gray()
    result = run_filters(
        image, FilterFlag.FISHEYE, "p.png", _answers("0.8", "n"), tmp_path
    )
    assert np.array_equal(result.pixels, image.fisheye(0.8).pixels)


def test_run_filters_bad_block_size(tmp_path):
    with pytest.raises(ValueError):
        run_filters(_gray(), FilterFlag.MOSAIC, "p.png", _answers("abc"), tmp_path)


def test_process_image_loads_and_filters(tmp_path, capsys):
    image_dir = tmp_path / "images"
    out_dir = tmp_path / "out"
    image_dir.mkdir()
    out_dir.mkdir()
    original = _gray()
    original.dump(image_dir / "scene.png")

    result = process_image(
        GrayImage, "scene.png", _answers("n", "6", "y"), image_dir, out_dir
    )

    loaded = GrayImage.load(image_dir / "scene.png")
    assert np.array_equal(result.pixels, loaded.invert().pixels)
    assert (out_dir / "scene_invert.png").is_file()
    output = capsys.readouterr().out
    assert "Case 6 detected" in output
    assert "End of processing." in output


def test_process_image_ascii_output(tmp_path, capsys):
    image_dir = tmp_path / "images"
    image_dir.mkdir()
    original = _rgb()
    original.dump(image_dir / "c.png")

    process_image(RGBImage, "c.png", _answers("y", ""), image_dir, tmp_path)

    loaded = RGBImage.load(image_dir / "c.png")
    assert loaded.to_ascii() in capsys.readouterr().out


def test_process_image_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        process_image(GrayImage, "none.png", _answers(), tmp_path, tmp_path)