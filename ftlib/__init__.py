"""ASCII character classes, number conversions, byte buffers, a linked list, printf-style formatting and line reading."""

__version__ = "0.1.0"
__all__ = ["chartype", "convert", "memory", "chain", "fmtspec", "numeric", "textual", "printf", "linereader"]