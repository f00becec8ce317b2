"""Terminal hangman game played with a gamepad, by level or by category."""

__version__ = "1.0.0"