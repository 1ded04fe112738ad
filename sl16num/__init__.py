"""Sixteen-bit sign-logarithm numbers: arithmetic, formatting and a comparison table."""

__version__ = "0.1.0"
__all__ = ["core", "formatting", "compare"]