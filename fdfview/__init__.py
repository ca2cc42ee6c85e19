"""Load .fdf height maps and draw them as wireframes into a pixel canvas."""

__version__ = "0.1.0"
__all__ = [
    "chars",
    "colornames",
    "intlist",
    "linereader",
    "mapfile",
    "memory",
    "output",
    "render",
    "text",
    "xpm",
]