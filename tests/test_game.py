import random

import pytest

from ahorcado.game import MAX_MISSES, START_SCORE, HangmanRound, choose_word


def test_new_round_hides_every_letter():
    rnd = HangmanRound("casa")
    assert rnd.revealed == "____"
    assert rnd.lives == MAX_MISSES
    assert rnd.score == START_SCORE
    assert not rnd.is_solved()
    assert not rnd.is_lost()


def test_correct_guess_reveals_all_positions():
    rnd = HangmanRound("casa")
    assert rnd.guess("a") is True
    assert rnd.revealed == "_a_a"
    assert rnd.misses == 0


def test_wrong_guess_costs_a_life():
    rnd = HangmanRound("casa")
    assert rnd.guess("z") is False
    assert rnd.misses == 1
    assert rnd.lives == MAX_MISSES - 1
    assert rnd.failed == "z"
    assert rnd.score < START_SCORE


def test_solving_the_word():
    rnd = HangmanRound("casa")
    for letter in "cas":
        rnd.guess(letter)
    assert rnd.is_solved()
    assert rnd.revealed == "casa"


def test_losing_after_max_misses():
    rnd = HangmanRound("casa")
    for _ in range(MAX_MISSES):
        rnd.guess("x")
    assert rnd.is_lost()
    assert rnd.lives == 0
    assert rnd.failed == "x" * MAX_MISSES


def test_repeated_letter_is_a_hit_by_default():
    rnd = HangmanRound("casa")
    rnd.guess("c")
    assert rnd.guess("c") is True
    assert rnd.misses == 0


def test_repeated_letter_is_a_miss_when_strict():
    rnd = HangmanRound("PERA", repeats_miss=True)
    rnd.guess("P")
    assert rnd.guess("P") is False
    assert rnd.misses == 1
    assert rnd.revealed == "P___"


def test_guess_must_be_one_letter():
    rnd = HangmanRound("casa")
    with pytest.raises(ValueError):
        rnd.guess("ca")


def test_choose_word_returns_member():
    words = ["uno", "dos", "tres"]
    for seed in range(20):
        assert choose_word(words, random.Random(seed)) in words


def test_choose_word_is_reproducible_with_seed():
    words = ["uno", "dos", "tres", "cuatro"]
    first = choose_word(words, random.Random(7))
    assert choose_word(words, random.Random(7)) == first


def test_choose_word_rejects_empty_list():
    with pytest.raises(ValueError):
        choose_word([])