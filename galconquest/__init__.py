"""A Galaga-style arcade space shooter built on pygame."""

__version__ = "1.0.0"