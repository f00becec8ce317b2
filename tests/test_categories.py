import time

import pytest

from ahorcado.categories import CATEGORIES, choose_category, main, play_category
from ahorcado.game import START_SCORE


@pytest.fixture(autouse=True)
def no_sleep(monkeypatch):
    monkeypatch.setattr(time, "sleep", lambda _seconds: None)


def feed_input(monkeypatch, answers):
    replies = iter(answers)
    monkeypatch.setattr("builtins.input", lambda *args: next(replies))


def test_categories_hold_ten_uppercase_words():
    assert list(CATEGORIES) == ["Frutas", "Animales", "Paises", "Objetos"]
    for words in CATEGORIES.values():
        assert len(words) == 10
        assert all(word == word.upper() for word in words)


def test_choose_category_retries_invalid_options(monkeypatch):
    feed_input(monkeypatch, ["", "7", "", "abc", "", "3"])
    name, words = choose_category()
    assert name == "Paises"
    assert "PERU" in words


def test_choose_category_first_valid(monkeypatch):
    feed_input(monkeypatch, ["", "2"])
    assert choose_category() == ("Animales", CATEGORIES["Animales"])


def test_play_category_win(monkeypatch, capsys):
    feed_input(monkeypatch, [""])
    result = play_category("Frutas", ("PERA",), iter("PERA").__next__)
    assert result.is_solved()
    assert result.score == START_SCORE
    out = capsys.readouterr().out
    assert "FELICIDADES.. GANASTE!!" in out
    assert "CATEGORIA: Frutas" in out


def test_play_category_loss(monkeypatch, capsys):
    feed_input(monkeypatch, [""])
    result = play_category("Frutas", ("PERA",), iter("ZXYWVU").__next__)
    assert result.is_lost()
    assert result.score < START_SCORE
    assert "LA SOLUCION ERA: PERA" in capsys.readouterr().out


def test_play_category_repeat_is_a_miss(monkeypatch):
    feed_input(monkeypatch, [""])
    result = play_category("Frutas", ("PERA",), iter("PPERA").__next__)
    assert result.is_solved()
    assert result.misses == 1


def test_main_ends_on_end_of_input(monkeypatch, capsys):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")

    def closed(*args):
        raise EOFError

    monkeypatch.setattr("builtins.input", closed)
    assert main([]) == 0
    assert "Cargando juego" in capsys.readouterr().out