# pixelcraft

Load gray-scale and colour pictures, run classic filters over them, render
them as ASCII art, and hide a short text message in the lowest bit of each
colour channel.

## Installing

    pip install .

For the test suite:

    pip install ".[test]"
    pytest

## The interactive program

    pixelcraft [--image-dir DIR] [--out-dir DIR] [--no-display]

| option          | meaning                                                    |
|-----------------|------------------------------------------------------------|
| `--image-dir`   | directory holding the input pictures (default `Image-Folder`) |
| `--out-dir`     | directory receiving saved pictures (default `DumpedImage`) |
| `--no-display`  | do not open windows to show pictures                       |

The menu offers four choices and repeats until you answer `n` to
"Do you want to continue?":

1. **Gray Image Processing**: lists the image directory, loads the chosen
   picture as gray levels (colour pictures are converted with the luminance
   weights 0.2126, 0.7152 and 0.0722), then asks for filters.
2. **RGB Image Processing**: the same steps on the colour picture.
3. **Image Encryption**: hides a message in a picture from the image
   directory and writes it to the output directory as
   `<name>_encrypted.png` (the last four characters of the name, normally
   the extension, are replaced).
4. **Image Decryption**: lists the output directory and prints the message
   hidden in the chosen picture.

After loading a picture you may print it as ASCII art. Filters are then
chosen by number, separated by single characters, for example `1&3&6`.
Reading stops at the first field that is not a number; numbers outside 1-8
are ignored.

| number | filter            | extra prompt                         | saved suffix    |
|-------:|-------------------|--------------------------------------|-----------------|
| 1      | horizontal flip   |                                      | `_horizontal`   |
| 2      | mosaic            | block size (empty for 8)             | `_mosiac`       |
| 3      | Gaussian blur     |                                      | `_Gaussian`     |
| 4      | Laplacian sharpen | `0` for the 4-neighbour kernel, anything else for the 8-neighbour one | `_laplacian` |
| 5      | fisheye           | strength (empty for 0.5)             | `_fisheye`      |
| 6      | invert            |                                      | `_invert`       |
| 7      | emboss            |                                      | `_emboss`       |
| 8      | oil painting      | radius (empty for 3)                 | `_oil-painting` |

Filters always run in this order, each on the result of the one before.
After each one the picture is shown and you may save it to the output
directory; the suffix goes before the four-character extension, and the
suffixes of saved steps accumulate (`truck_horizontal_invert.png`).

Errors while reading or writing a file, or from bad input, are printed and
the menu carries on. End of input ends the program.

## Using it as a library

```python
from pixelcraft.gray_image import GrayImage
from pixelcraft.rgb_image import RGBImage
from pixelcraft.encryption import encrypt, decrypt

gray = GrayImage.load("Image-Folder/truck.png")
gray.mosaic(8).invert().dump("truck_mosaic_invert.png")
print(gray.to_ascii())

photo = RGBImage.load("Image-Folder/lena.jpg")
blurred = photo.gaussian(10, 2)
sharp = photo.laplacian(1)

secret = encrypt(photo, "meet at noon")
secret.dump("lena_encrypted.png")  # PNG: the hidden bits need lossless storage
print(decrypt(RGBImage.load("lena_encrypted.png")))
```

`GrayImage` holds a `(height, width)` integer array and `RGBImage` a
`(height, width, 3)` one, both in the `pixels` attribute; `width` and
`height` are properties. Indexing an image reads or writes its pixels, and
`copy()` returns an independent copy. Every filter returns a new image and
leaves the original unchanged:

- `horizontal_flip()`
- `mosaic(block=8)`: averages square blocks; a block size of 0 or less raises `ValueError`
- `gaussian(sigma=10, k=2)`: normalised Gaussian of radius `k`, clipped to 0-255
- `laplacian(d=0)`: sharpening, clipped to 0-255
- `fisheye(k=0.5)`: points outside the inscribed circle become black
- `invert()`: `255 - value`
- `emboss()`: kernel result plus 128, not clipped
- `oil_painting(r=3)`: most frequent value within radius `r`; values outside 0-255 raise `ValueError`

`pixelcraft.encryption` stores a 16-bit byte count followed by the UTF-8
bytes of the message, row by row, red, green then blue. `to_bits` returns
that bit sequence. A message longer than the picture can hold, or longer
than 65535 bytes, raises `MessageTooLongError`. `decrypt` raises
`ValueError` when the picture is too small for the count it reads.

`pixelcraft.filters` offers `FilterFlag`, `parse_filters`, `dumped_name`,
`run_filters` and `process_image`; the last two take an `ask` callable in
place of `input`.

`pixelcraft.data_loader` works on plain pixel arrays: `load_gray`,
`load_rgb`, `dump_gray`, `dump_rgb`, `display_gray`, `display_rgb`,
`gray_ascii`, `rgb_ascii` and `list_directory`. The file extension picks
the format when saving; values outside 0-255 wrap around. Setting
`data_loader.DISPLAY_ENABLED = False` turns the display functions off.

## What it does not do

- Windows are drawn with `tkinter`, which must be available for the display
  functions; use `--no-display` otherwise.
- The image and output directories are not created; saving into a missing
  directory fails with an error.