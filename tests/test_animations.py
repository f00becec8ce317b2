import re
from unittest import mock

import pytest

from ahorcado import animations
from ahorcado.terminal import CLEAR_SCREEN

_ANSI = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")


def _plain(text):
    return _ANSI.sub("", text)


@pytest.fixture
def no_sleep():
    with mock.patch("time.sleep") as sleep:
        yield sleep


def test_main_menu_intro_waits_for_enter(monkeypatch, capsys, no_sleep):
    calls = []
    monkeypatch.setattr("builtins.input", lambda *a: calls.append(a) or "")
    animations.main_menu_intro()
    out = capsys.readouterr().out
    assert len(calls) == 1
    assert out.startswith(CLEAR_SCREEN)
    text = _plain(out)
    assert animations.TITLE in text
    assert "Presiona ENTER para comenzar...\r" in text
    assert text.endswith("Presiona ENTER para comenzar\n")


def test_letter_feedback_correct(capsys, no_sleep):
    animations.letter_feedback(True)
    out = capsys.readouterr().out
    assert out.startswith(CLEAR_SCREEN)
    assert _plain(out) == " Bien hecho!"


def test_letter_feedback_wrong(capsys, no_sleep):
    animations.letter_feedback(False)
    assert _plain(capsys.readouterr().out) == "Incorrecto..."


def test_initial_loading(capsys, no_sleep):
    animations.initial_loading()
    text = _plain(capsys.readouterr().out)
    assert text.startswith("Cargando juego, por favor espera...\n\r| 0%")
    assert "100%" in text
    assert text.endswith("\nListo para jugar!\n")


def test_between_games_loading(capsys, no_sleep):
    animations.between_games_loading()
    text = _plain(capsys.readouterr().out)
    assert text == "Cargando proxima partida...\nListo, vamos a jugar!\n"


def test_level_transition(capsys, no_sleep):
    animations.level_transition()
    text = _plain(capsys.readouterr().out)
    assert text.startswith("Preparando el siguiente nivel\n")
    assert text.count(".") == no_sleep.call_count


def test_victory_blinks(capsys, no_sleep):
    animations.victory()
    text = _plain(capsys.readouterr().out)
    assert text.count(" GANASTE!!!") == 3
    assert text.count("\r") == no_sleep.call_count
    assert text.endswith("\n")


def test_defeat_blinks(capsys, no_sleep):
    animations.defeat()
    text = _plain(capsys.readouterr().out)
    assert text.count(" PERDISTE!!!") * 2 == no_sleep.call_count
    assert "GANASTE" not in text