"""TextPlay: type text, click the canvas, and play with its font.

The version is defined here and read by pyproject.toml.
"""

__all__ = ["__version__"]

__version__ = "1.0.0"
