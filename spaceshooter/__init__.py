"""A small pygame arcade game: a square player and a cannon firing bouncing balls."""

__version__ = "0.1.0"
__all__ = ["__version__"]