"""Category-based hangman played with the D-pad or arrow keys."""

import argparse
import re

from ahorcado.animations import (
    between_games_loading,
    defeat,
    initial_loading,
    letter_feedback,
    main_menu_intro,
    victory,
)
from ahorcado.controller import ControllerError, Gamepad, select_letter_dpad
from ahorcado.drawing import draw_gallows
from ahorcado.game import HangmanRound, choose_word
from ahorcado.terminal import clear_screen

CATEGORIES = {
    "Frutas": (
        "MELON", "PAPAYA", "SANDIA", "MANZANA", "PERA",
        "NARANJA", "UVA", "CEREZA", "CIRUELA", "KIWI",
    ),
    "Animales": (
        "PERRO", "GATO", "CABALLO", "GALLINA", "JIRAFA",
        "MONO", "VACA", "CONEJO", "TORTUGA", "LOBO",
    ),
    "Paises": (
        "PERU", "COLOMBIA", "ARGENTINA", "NICARAGUA", "ITALIA",
        "MEXICO", "CANADA", "VENEZUELA", "ECUADOR", "BRASIL",
    ),
    "Objetos": (
        "MOCHILA", "RELOJ", "ZAPATILLA", "MUEBLE", "CUADERNO",
        "SILLA", "MESA", "CELULAR", "PUERTA", "AURICULARES",
    ),
}

_TITLE = "\n\t\t\t\tJUEGO EL AHORCADO\n"
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _write(text):
    print(text, end="", flush=True)


def choose_category():
    """Show the menu until a valid category is chosen; return (name, words)."""
    names = list(CATEGORIES)
    while True:
        clear_screen()
        main_menu_intro()
        print(_TITLE)
        print(" CATEGORIAS\n")
        for number, name in enumerate(names, 1):
            print(f" {number}. {name}")
        print()
        _write(" Ingresa una opcion: ")
        match = _LEADING_INT.match(input())
        if match and 1 <= int(match.group(1)) <= len(names):
            name = names[int(match.group(1)) - 1]
            return name, CATEGORIES[name]


def play_category(name, words, picker):
    """Play one round from ``words``; ``picker`` returns each guessed letter."""
    between_games_loading()
    current = HangmanRound(choose_word(words), repeats_miss=True)
    while True:
        clear_screen()
        print(_TITLE)
        print(f" CATEGORIA: {name}\n")
        print(f" Intentos Disponibles: {current.lives}\t\t\t\tPuntuacion: {current.score}\n")
        draw_gallows(current.misses)
        print("\n\n")
        print("".join(f" {char} " for char in current.progress))

        if current.is_lost():
            defeat()
            print("\n\n PERDISTE!!")
            print(f" LA SOLUCION ERA: {current.word}\n")
            _write(" Presiona ENTER para volver a jugar..")
            input()
            return current

        if current.is_solved():
            victory()
            print("\n\n FELICIDADES.. GANASTE!!\n")
            _write(" Presiona ENTER para volver a jugar..")
            input()
            return current

        letter_feedback(current.guess(picker()))


def main(argv=None):
    """Run the category game until interrupted; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="ahorcado-categorias", description="Juego del ahorcado por categorias."
    )
    parser.parse_args(argv)
    try:
        gamepad = Gamepad(required=False)
    except ControllerError as exc:
        print(f"No se pudo inicializar SDL: {exc}")
        return 1
    with gamepad:
        initial_loading()
        try:
            while True:
                name, words = choose_category()
                play_category(name, words, lambda: select_letter_dpad(gamepad))
        except ControllerError as exc:
            print(f"\nError del controlador: {exc}")
            return 1
        except (KeyboardInterrupt, EOFError):
            print()
            return 0