"""A small turn-based text RPG played with single key presses in the terminal."""

__version__ = "0.1.0"