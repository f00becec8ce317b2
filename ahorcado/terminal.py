"""Console helpers: ANSI colours, prompts, simple progress animations."""

import re
import time

SEPARATOR = ","

BLACK = "\x1b[30m"
RED = "\x1b[31m"
GREEN = "\x1b[32m"
YELLOW = "\x1b[33m"
BLUE = "\x1b[34m"
MAGENTA = "\x1b[35m"
CYAN = "\x1b[36m"
WHITE = "\x1b[37m"
ORANGE = "\x1b[38;2;255;128;0m"
ROSE = "\x1b[38;2;255;151;203m"
LBLUE = "\x1b[38;2;53;149;240m"
LGREEN = "\x1b[38;2;17;245;120m"
GRAY = "\x1b[38;2;176;174;174m"
RESET = "\x1b[0m"

BG_BLACK = "\x1b[40m"
BG_RED = "\x1b[41m"
BG_GREEN = "\x1b[42m"
BG_YELLOW = "\x1b[43m"
BG_BLUE = "\x1b[44m"
BG_MAGENTA = "\x1b[45m"
BG_CYAN = "\x1b[46m"
BG_WHITE = "\x1b[47m"
BG_ORANGE = "\x1b[48;2;255;128;0m"
BG_LBLUE = "\x1b[48;2;53;149;240m"
BG_LGREEN = "\x1b[48;2;17;245;120m"
BG_GRAY = "\x1b[48;2;176;174;174m"
BG_ROSE = "\x1b[48;2;255;151;203m"

CLEAR_SCREEN = "\x1b[2J\x1b[H"

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _write(text):
    print(text, end="", flush=True)


def _parse_int(text):
    """Parse a leading integer, ignoring trailing characters."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no integer in {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {value}")
    return value


def split_string(text, sep=SEPARATOR):
    """Split ``text`` on every occurrence of ``sep``, keeping empty fields."""
    return text.split(sep)


def trim(text):
    """Remove leading and trailing spaces (spaces only)."""
    return text.strip(" ")


def get_console_number(message="Ingrese un numero: ", minimum=0, maximum=10):
    """Prompt until the user enters an integer within ``[minimum, maximum]``."""
    while True:
        _write(message)
        entry = input()
        try:
            value = _parse_int(entry)
        except ValueError:
            print(f":( Ingrese solo numeros validos entre {minimum} y {maximum}")
            continue
        if minimum <= value <= maximum:
            return value
        print(f":( Valores entre {minimum} y {maximum}")


def get_console_string(message="Ingrese una cadena: "):
    """Prompt for a whole line of text and return it."""
    _write(message)
    return input()


def show_spinner(message=""):
    """Show a spinner counting from 0 to 100 percent."""
    spinner = "|/-|\\"
    for i in range(101):
        _write(f"\r{spinner[i % len(spinner)]} {i} % {message}")
        time.sleep(0.09)
    return ""


def show_waiting(message=""):
    """Show a short bouncing-dot waiting animation."""
    frames = ("0oo", "o0o", "oo0", "o0o")
    for i in range(21):
        _write(f"\r{frames[i % len(frames)]} ... {message}")
        time.sleep(0.1)
    return ""


def clear_screen():
    """Clear the terminal and move the cursor home."""
    _write(CLEAR_SCREEN)