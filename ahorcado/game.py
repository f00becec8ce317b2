"""State of a single hangman round."""

import random
from dataclasses import dataclass, field

MAX_MISSES = 6
START_SCORE = 1200
MISS_PENALTY = 200
HIDDEN = "_"


@dataclass
class HangmanRound:
    """A word being guessed letter by letter.

    With ``repeats_miss`` set, guessing a letter that is already revealed
    counts as a miss; otherwise it counts as a hit.
    """

    word: str
    max_misses: int = MAX_MISSES
    repeats_miss: bool = False
    progress: list = field(init=False)
    failed: str = field(init=False, default="")
    misses: int = field(init=False, default=0)

    def __post_init__(self):
        self.progress = [HIDDEN] * len(self.word)

    @property
    def revealed(self):
        """The word with unguessed letters shown as underscores."""
        return "".join(self.progress)

    @property
    def lives(self):
        """Misses still allowed before the round is lost."""
        return self.max_misses - self.misses

    @property
    def score(self):
        """Points left: the starting score minus a penalty per miss."""
        return START_SCORE - MISS_PENALTY * self.misses

    def guess(self, letter):
        """Reveal every position holding ``letter``; return whether any did."""
        if len(letter) != 1:
            raise ValueError(f"a guess is a single letter, got {letter!r}")
        hit = False
        for position, (char, shown) in enumerate(zip(self.word, self.progress)):
            if char == letter and (not self.repeats_miss or shown == HIDDEN):
                self.progress[position] = letter
                hit = True
        if not hit:
            self.misses += 1
            self.failed += letter
        return hit

    def is_solved(self):
        """True once no letter is hidden."""
        return HIDDEN not in self.progress

    def is_lost(self):
        """True once the allowed misses are used up."""
        return self.misses >= self.max_misses


def choose_word(words, rng=None):
    """Pick a word at random from ``words``."""
    if not words:
        raise ValueError("no words to choose from")
    source = random if rng is None else rng
    return words[source.randrange(len(words))]