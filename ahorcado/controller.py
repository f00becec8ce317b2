"""Gamepad input and the on-screen virtual keyboard used to pick letters."""

import enum
import os
import string
import time
from dataclasses import dataclass

from ahorcado.terminal import BG_GREEN, BG_YELLOW, BLACK, BLUE, RESET, clear_screen

STICK_THRESHOLD = 16000
AXIS_MAX = 32767


class ControllerError(Exception):
    """The gamepad is missing, disconnected or could not be initialised."""


class Button(enum.Enum):
    A = "a"
    B = "b"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class GamepadState:
    """One poll: stick position, buttons held now and buttons newly pressed."""

    stick_x: int = 0
    held: frozenset = frozenset()
    pressed: frozenset = frozenset()


@dataclass
class VirtualKeyboard:
    """A row of letters with one of them selected."""

    letters: str = string.ascii_lowercase
    wrap: bool = False
    separator: str = ""
    index: int = 0

    def __post_init__(self):
        if not self.letters:
            raise ValueError("a keyboard needs at least one letter")

    def move(self, step):
        """Move the selection by ``step``, wrapping or stopping at the ends."""
        size = len(self.letters)
        if self.wrap:
            self.index = (self.index + step) % size
        else:
            self.index = min(max(self.index + step, 0), size - 1)
        return self.letter()

    def letter(self):
        """The selected letter."""
        return self.letters[self.index]

    def render(self):
        """The keyboard as one line, the selected letter in brackets."""
        return "".join(
            (f"[{char}]" if position == self.index else f" {char} ") + self.separator
            for position, char in enumerate(self.letters)
        )


_BUTTONS = {0: Button.A, 1: Button.B}


class Gamepad:
    """The first game controller, read through pygame."""

    def __init__(self, index=0, required=True):
        os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
        os.environ.setdefault("SDL_JOYSTICK_ALLOW_BACKGROUND_EVENTS", "1")
        import pygame

        self._pygame = pygame
        self._required = required
        self._joystick = None
        try:
            pygame.init()
            pygame.joystick.init()
            count = pygame.joystick.get_count()
            if index < count:
                self._joystick = pygame.joystick.Joystick(index)
        except pygame.error as exc:
            pygame.quit()
            raise ControllerError(str(exc)) from exc
        if self._joystick is None and required:
            pygame.quit()
            raise ControllerError("No se detecto joystick")
        self._keys = {
            pygame.K_LEFT: Button.LEFT,
            pygame.K_RIGHT: Button.RIGHT,
            pygame.K_RETURN: Button.A,
        }

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def _events(self):
        pg = self._pygame
        try:
            return pg.event.get()
        except pg.error as exc:
            raise ControllerError(str(exc)) from exc

    def poll(self):
        """Read the controller and return its current state."""
        pg = self._pygame
        pressed = set()
        for event in self._events():
            if event.type == pg.JOYBUTTONDOWN:
                button = _BUTTONS.get(event.button)
                if button is not None:
                    pressed.add(button)
            elif event.type == pg.JOYHATMOTION:
                if event.value[0] < 0:
                    pressed.add(Button.LEFT)
                elif event.value[0] > 0:
                    pressed.add(Button.RIGHT)
            elif event.type == pg.KEYDOWN:
                button = self._keys.get(event.key)
                if button is not None:
                    pressed.add(button)
            elif (
                event.type == pg.JOYDEVICEREMOVED
                and self._joystick is not None
                and event.instance_id == self._joystick.get_instance_id()
            ):
                self._joystick = None
                if self._required:
                    raise ControllerError("Joystick desconectado")

        held = set()
        stick_x = 0
        joystick = self._joystick
        if joystick is not None:
            if joystick.get_numaxes() > 0:
                stick_x = max(-AXIS_MAX, min(AXIS_MAX, round(joystick.get_axis(0) * AXIS_MAX)))
            for number, button in _BUTTONS.items():
                if number < joystick.get_numbuttons() and joystick.get_button(number):
                    held.add(button)
            if joystick.get_numhats() > 0:
                hat_x = joystick.get_hat(0)[0]
                if hat_x < 0:
                    held.add(Button.LEFT)
                elif hat_x > 0:
                    held.add(Button.RIGHT)
        return GamepadState(stick_x, frozenset(held), frozenset(pressed))

    def close(self):
        """Release the controller."""
        self._joystick = None
        self._pygame.quit()


def _write(text):
    print(text, end="", flush=True)


def select_letter_stick(gamepad, keyboard=None):
    """Pick a letter by moving the left stick and pressing A."""
    if keyboard is None:
        keyboard = VirtualKeyboard()
    print(
        f"Usa el stick {BLACK}{BG_YELLOW}izquierdo{RESET} para moverte y boton "
        f"{BLACK}{BG_GREEN} A {RESET} para seleccionar."
    )
    last = len(keyboard.letters) - 1
    while True:
        state = gamepad.poll()
        if state.stick_x > STICK_THRESHOLD and keyboard.index < last:
            keyboard.move(1)
            time.sleep(0.2)
        if state.stick_x < -STICK_THRESHOLD and keyboard.index > 0:
            keyboard.move(-1)
            time.sleep(0.2)
        _write("\r" + keyboard.render() + "   ")
        if Button.A in state.held:
            letter = keyboard.letter()
            print()
            print(f"{BLUE}Letra seleccionada: {RESET}{letter}")
            time.sleep(0.3)
            return letter
        time.sleep(0.05)


def select_letter_dpad(gamepad, keyboard=None):
    """Pick a letter with the D-pad or arrow keys, confirming with A or Enter."""
    if keyboard is None:
        keyboard = VirtualKeyboard(string.ascii_uppercase, wrap=True, separator=" ")
    while True:
        clear_screen()
        print(
            "\nSelecciona una letra con el joystick (D-Pad) o flechas "
            "y pulsa A/Enter para elegir:\n"
        )
        print(keyboard.render())
        start = time.monotonic()
        while time.monotonic() - start < 0.2:
            state = gamepad.poll()
            moved = False
            if Button.RIGHT in state.pressed:
                keyboard.move(1)
                moved = True
            if Button.LEFT in state.pressed:
                keyboard.move(-1)
                moved = True
            if Button.A in state.pressed:
                return keyboard.letter()
            if moved:
                break
            time.sleep(0.01)