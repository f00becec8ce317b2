"""ASCII drawings of the hangman for each stage of the game."""

from ahorcado.terminal import RESET

_TOP = "  +---+\n  |   |\n"
_BASE = "      |\n=========\n"

_HANGMAN = {
    6: _TOP + "      |\n      |\n      |\n" + _BASE + RESET,
    5: _TOP + "  O   |\n      |\n      |\n" + _BASE,
    4: _TOP + "  O   |\n  |   |\n      |\n" + _BASE,
    3: _TOP + "  O   |\n /|   |\n      |\n" + _BASE,
    2: _TOP + "  O   |\n /|\\  |\n      |\n" + _BASE,
    1: _TOP + "  O   |\n /|\\  |\n /    |\n" + _BASE,
    0: _TOP + "  O   |\n /|\\  |\n / \\  |\n" + _BASE,
}

_GALLOWS_TOP = "\n     _______\n    |       |\n"
_GALLOWS_BASE = "    |\n    |\n ----------"

_GALLOWS = {
    0: _GALLOWS_TOP + "    |\n    |\n    |\n" + _GALLOWS_BASE,
    1: _GALLOWS_TOP + "    |       0\n    |\n    |\n" + _GALLOWS_BASE,
    2: _GALLOWS_TOP + "    |       0\n    |       |\n    |\n" + _GALLOWS_BASE,
    3: _GALLOWS_TOP + "    |       0\n    |      /|\n    |\n" + _GALLOWS_BASE,
    4: _GALLOWS_TOP + "    |       0\n    |      /|\\\n    |\n" + _GALLOWS_BASE,
    5: _GALLOWS_TOP + "    |       0\n    |      /|\\\n    |      /\n" + _GALLOWS_BASE,
    6: _GALLOWS_TOP + "    |       0\n    |      /|\\\n    |      / \\\n" + _GALLOWS_BASE,
}


def draw_hangman(lives):
    """Print the hangman for the remaining ``lives`` (6 down to 0)."""
    print(_HANGMAN.get(lives, ""), end="")


def draw_gallows(attempts):
    """Print the gallows for the number of failed ``attempts`` (0 to 6)."""
    print(_GALLOWS.get(attempts, ""), end="")