"""Read XPM pixmap images into pixel data, with the X11 colour name table."""

__version__ = "0.1.0"
__all__ = ["colors", "textscan", "xpm"]