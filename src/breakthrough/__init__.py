"""Breakthrough — two-player race-to-the-far-edge board game."""

__version__ = "1.0.0"
