"""Stitch pattern editor: geometry, pattern files, settings, viewport and a pygame window."""

__version__ = "0.1.0"
__all__ = ["__version__"]