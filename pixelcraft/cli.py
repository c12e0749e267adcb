"""Interactive menu for filtering images and hiding messages in them."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pixelcraft import data_loader
from pixelcraft.encryption import MessageTooLongError, decrypt, encrypt
from pixelcraft.filters import process_image
from pixelcraft.gray_image import GrayImage
from pixelcraft.rgb_image import RGBImage

__all__ = ["main"]

_STARS = "*" * 57
_MENU = (
    "Below are all functions : \n"
    "1. Gray Image Processing.\n"
    "2. RGB Image Processing.\n"
    "3. Image Encryption.\n"
    "4. Image Decryption.\n"
)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pixelcraft",
        description="Apply filters to images and hide text messages in them.",
    )
    parser.add_argument(
        "--image-dir",
        default="Image-Folder",
        help="directory holding the input images (default: %(default)s)",
    )
    parser.add_argument(
        "--out-dir",
        default="DumpedImage",
        help="directory receiving saved images (default: %(default)s)",
    )
    parser.add_argument(
        "--no-display",
        action="store_true",
        help="do not open windows to show images",
    )
    return parser.parse_args(argv)


def _list_files(directory: str) -> None:
    try:
        names = data_loader.list_directory(directory)
    except OSError as exc:
        print(f"cannot list {directory}: {exc}", file=sys.stderr)
        return
    for name in names:
        print(name)


def _filter_session(kind: type, title: str, image_dir: str, out_dir: str) -> None:
    print(f"\n***** {title} *****\n")
    _list_files(image_dir)
    filename = input(f"\nChoose a picture for {title} :")
    process_image(kind, filename, input, image_dir, out_dir)
    print(f"\n***** {title} *****\n")


def _encryption_session(image_dir: str, out_dir: str) -> None:
    print("\n***** Image Encryption *****\n")
    _list_files(image_dir)
    filename = input("\nChoose a picture for Image Encryption :")
    message = input("Enter a message you want to encrypt : ")
    print("Start encrypting ...... ")
    original = RGBImage.load(Path(image_dir) / filename)
    print("This the originalpicture : ")
    original.display()
    try:
        hidden = encrypt(original, message)
    except MessageTooLongError as exc:
        print(f"The message is too long: {exc}")
        return
    print("Encrypted picture : ")
    hidden.display()
    if len(filename) < 4:
        raise ValueError(f"file name too short to carry an extension: {filename!r}")
    out_name = filename[:-4] + "_encrypted.png"
    hidden.dump(Path(out_dir) / out_name)
    print(f"The picture has been dumped as : {out_name} at {out_dir} folder. ")
    print("End of encryption.")
    print("\n***** Image Encryption *****\n")


def _decryption_session(out_dir: str) -> None:
    print("\n***** Image Decryption *****\n")
    _list_files(out_dir)
    filename = input("\nChoose a picture for Image Decryption :")
    print(f"The encrypted picture : {filename}")
    print("Start decrypting ...... ")
    image = RGBImage.load(Path(out_dir) / filename)
    print(f"The hidden message : {decrypt(image)}")
    print("End of decryption.")
    print("\n***** Image Decryption *****\n")


def _run(image_dir: str, out_dir: str) -> None:
    print(f"\n\n{_STARS}\n{_STARS}\n")
    process = "y"
    try:
        while process != "n":
            print(_MENU)
            option = input("Enter an option : ")
            try:
                if option == "1":
                    _filter_session(GrayImage, "Gray Image Processing", image_dir, out_dir)
                elif option == "2":
                    _filter_session(RGBImage, "RGB Image Processing", image_dir, out_dir)
                elif option == "3":
                    _encryption_session(image_dir, out_dir)
                elif option == "4":
                    _decryption_session(out_dir)
            except (OSError, ValueError) as exc:
                print(f"error: {exc}", file=sys.stderr)
            process = input("Do you want to continue?(y/n) : ")
            print("\n")
    except EOFError:
        print()
    print("End of program.")
    print(f"\n\n{_STARS}\n{_STARS}\n")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive menu until the user declines to continue."""
    args = _parse_args(argv)
    previous = data_loader.DISPLAY_ENABLED
    if args.no_display:
        data_loader.DISPLAY_ENABLED = False
    try:
        _run(args.image_dir, args.out_dir)
    finally:
        data_loader.DISPLAY_ENABLED = previous
    return 0


if __name__ == "__main__":
    sys.exit(main())