"""Short terminal animations shown between game screens."""

import time

from ahorcado.terminal import (
    BG_ORANGE,
    BLACK,
    CYAN,
    GREEN,
    LGREEN,
    MAGENTA,
    RED,
    RESET,
    WHITE,
    clear_screen,
)

TITLE = "\n".join(
    (
        " ",
        "     ___    _   _   ____   ____   ____   ___   ____   ___  ",
        "    / _ \\  | | | | |  _ \\ |  _ \\ |  _ \\ / _ \\ |  _ \\ / _ \\",
        "   | | | | | | | | | | | || | | || | | | | | || |_) | | | |",
        "   | |_| | | |_| | | |_| || |_| || |_| | |_| ||  _ <| |_| |",
        "    \\___/   \\___/  |____/ |____/ |____/ \\___/ |_| \\_\\\\___/",
        "    ",
    )
)

_PRESS_ENTER = f"Presiona {BLACK}{BG_ORANGE}ENTER{RESET} para comenzar{RESET}"


def _write(text):
    print(text, end="", flush=True)


def _type_out(message, color, delay):
    for char in message:
        _write(f"{color}{char}{RESET}")
        time.sleep(delay)


def _blink(message, color):
    blank = " " * len(message)
    for i in range(6):
        if i % 2 == 0:
            _write(f"{color}\r{message}      ")
        else:
            _write(f"\r{blank}      ")
        time.sleep(0.4)
    print()


def main_menu_intro():
    """Type out the title, blink the prompt and wait for Enter."""
    clear_screen()
    _type_out(TITLE, MAGENTA, 0.002)
    print()
    print()
    for i in range(3):
        _write(_PRESS_ENTER + "." * (i + 1) + "\r")
        time.sleep(0.5)
    print(_PRESS_ENTER)
    input()


def letter_feedback(correct):
    """Show whether the chosen letter was right or wrong."""
    clear_screen()
    if correct:
        _type_out(" Bien hecho!", LGREEN, 0.08)
    else:
        _type_out("Incorrecto...", RED, 0.1)
    time.sleep(0.8)


def initial_loading():
    """Show the start-up spinner with a percentage."""
    spinner = "|/-\\"
    _write(f"{WHITE}Cargando juego, por favor espera...\n{RESET}")
    for i in range(101):
        _write(f"{CYAN}\r{spinner[i % len(spinner)]} {i}%{RESET}")
        time.sleep(0.05)
    _write(f"{GREEN}\nListo para jugar!\n{RESET}")
    time.sleep(0.5)


def between_games_loading():
    """Show animated dots before the next game."""
    _write(f"{CYAN}Cargando proxima partida")
    for _ in range(3):
        _write(".")
        time.sleep(0.5)
    _write(f"{GREEN}\nListo, vamos a jugar!\n")
    time.sleep(0.5)


def level_transition():
    """Show animated dots while preparing the next level."""
    print(f"{CYAN}Preparando el siguiente nivel{RESET}")
    for _ in range(6):
        _write(".")
        time.sleep(0.4)
    print()


def victory():
    """Blink the winning message."""
    _blink(" GANASTE!!!", LGREEN)


def defeat():
    """Blink the losing message."""
    _blink(" PERDISTE!!!", RED)