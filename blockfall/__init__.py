"""A small falling-blocks puzzle game: a T piece, gravity, pausing and grid lines."""

__version__ = "0.1.0"