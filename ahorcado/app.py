"""Level-based hangman played with the gamepad's left stick."""

import argparse
import re
import time

from ahorcado.animations import (
    between_games_loading,
    defeat,
    initial_loading,
    letter_feedback,
    level_transition,
    main_menu_intro,
    victory,
)
from ahorcado.controller import Button, ControllerError, Gamepad, select_letter_stick
from ahorcado.drawing import draw_hangman
from ahorcado.game import HangmanRound, choose_word
from ahorcado.terminal import (
    BG_BLUE,
    BG_CYAN,
    BG_GREEN,
    BG_ORANGE,
    BG_RED,
    BLACK,
    BLUE,
    CYAN,
    GREEN,
    LGREEN,
    MAGENTA,
    ORANGE,
    RED,
    RESET,
    WHITE,
    YELLOW,
    clear_screen,
)
from ahorcado.words import DEFAULT_DIRECTORY, read_words_for_level

LEVELS = range(1, 4)
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _pause():
    print("Presione una tecla para continuar . . .")
    input()


def _read_level(text):
    match = _LEADING_INT.match(text)
    level = int(match.group(1)) if match else 0
    return level if level in LEVELS else LEVELS[0]


def play_round(words, level, gamepad):
    """Play one round; return the finished round, or None without words."""
    if not words:
        print(f"{BLACK}No hay palabras cargadas para este nivel.{RESET}")
        _pause()
        return None
    word = choose_word(words)
    current = HangmanRound(word)
    while not current.is_lost():
        clear_screen()
        print(f"{MAGENTA}Bienvenido al juego del ahorcado!{RESET}")
        print(f"Nivel: {level}")
        draw_hangman(current.lives)
        print(f"{RED}Fallos: {current.failed}{RESET}")
        print(f"{GREEN}Progreso: {current.revealed}{RESET}")
        print("Selecciona una letra con el joystick:")
        letter = select_letter_stick(gamepad)
        letter_feedback(current.guess(letter))
        if current.is_solved():
            clear_screen()
            victory()
            print(f"{BLUE}{BG_CYAN}::: A H O R C A D O :::{RESET}")
            print(f"{LGREEN}Felicidades, has ganado!{RESET}")
            print(f"{BLUE}La palabra era: {RESET}{word}")
            between_games_loading()
            print(f"Presiona {BLACK}{BG_ORANGE}ENTER{RESET} para volver al menu principal..")
            input()
            return current

    clear_screen()
    defeat()
    print(f"{CYAN}{BG_BLUE}::: A H O R C A D O :::{RESET}")
    print(f"{RED}Perdiste{RESET}")
    print(f"{BLUE}La palabra era: {RESET}{word}")
    between_games_loading()
    print(
        f"{WHITE}Presiona {RESET}{BLACK}{BG_ORANGE}ENTER{RESET}"
        f"{WHITE} para volver al menu principal..{RESET}"
    )
    input()
    return current


def _menu(words_dir, gamepad):
    while True:
        clear_screen()
        print(f"{YELLOW}Bienvenido al juego del ahorcado!")
        print(f"{MAGENTA}:::: MENU PRINCIPAL ::::{RESET}")
        print(
            f"Selecciona el nivel (1-3) usando el teclado y presiona "
            f"{BLACK}{BG_ORANGE}ENTER{RESET} :"
        )
        print(f"{GREEN}1. Facil\n{RESET}{ORANGE}2. Medio\n{RESET}{RED}3. Dificil{RESET}")
        print(f"{BLUE}\nNivel: {RESET}", end="", flush=True)
        level = _read_level(input())
        words = read_words_for_level(level, words_dir)
        print(
            f"Presiona boton {BLACK}{BG_GREEN} A {RESET} para jugar, boton "
            f"{BLACK}{BG_RED} B {RESET} para salir."
        )
        while True:
            try:
                state = gamepad.poll()
            except ControllerError:
                print("Joystick desconectado.")
                return 1
            if Button.A in state.held:
                level_transition()
                try:
                    play_round(words, level, gamepad)
                except ControllerError:
                    print(f"\nJoystick no conectado. Conectalo y reinicia el juego.{RESET}")
                    return 1
                break
            if Button.B in state.held:
                print(f"{MAGENTA}Gracias por jugar!")
                return 0
            time.sleep(0.1)


def main(argv=None):
    """Run the level-based game; return the exit status."""
    parser = argparse.ArgumentParser(prog="ahorcado", description="Juego del ahorcado.")
    parser.add_argument(
        "--datos",
        default=DEFAULT_DIRECTORY,
        help="directorio con los archivos nivelN.txt",
    )
    args = parser.parse_args(argv)

    print(f"{CYAN}Programa iniciado...")
    initial_loading()
    try:
        gamepad = Gamepad()
    except ControllerError:
        print("No se detecto joystick. Conectalo y reinicia el juego.")
        _pause()
        return 1
    with gamepad:
        main_menu_intro()
        return _menu(args.datos, gamepad)