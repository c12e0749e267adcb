"""Gray and RGB image filters, ASCII rendering and LSB message hiding."""

__version__ = "0.1.0"
__all__ = ["data_loader", "image", "gray_image", "rgb_image", "encryption", "filters", "cli"]