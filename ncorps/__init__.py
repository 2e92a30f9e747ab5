"""Two-dimensional N-body gravitational simulation with a pygame viewer and a text demonstration."""

__version__ = "1.0.0"
__all__ = ["__version__"]