# ahorcado

A hangman game for the terminal, played with a gamepad. The on-screen text is in Spanish.

## Installing

    pip install .

Gamepad input is read through pygame.

## Playing by level

    ahorcado [--datos DIRECTORY]

A gamepad must be connected. If none is found, the program prints a message, waits for ENTER and exits with status 1.

The program plays a short loading animation and then shows the main menu. Type a level from 1 to 3 on the keyboard and press ENTER. Any other input selects level 1. Words are read from `nivel<level>.txt` in the directory given by `--datos`. The default is `datafile` in the current directory. The file holds one word per line, and blank lines are skipped. If the file cannot be opened, a message is printed and the round cannot start.

At the menu, press **A** to start a round or **B** to quit. During a round, push the left stick to move along the on-screen keyboard (`a` to `z`) and press **A** to choose the highlighted letter. Six wrong letters lose the round. The program exits with status 1 if the gamepad is disconnected.

## Playing by category

    ahorcado-categorias

This game also starts without a gamepad. Choose one of four built-in categories: Frutas, Animales, Paises or Objetos. Move across the letters `A` to `Z` with the D-pad or the arrow keys, then press A or ENTER to choose one. The selection wraps around at both ends.

The score starts at 1200 and each miss takes away 200. A letter that is already revealed counts as a miss. Six misses lose the game. When a game ends you go back to the category menu. Press Ctrl+C to quit.

## Using it as a library

The game logic works without a terminal or a gamepad:

```python
from ahorcado.game import HangmanRound, choose_word

round_ = HangmanRound("gato")
round_.guess("a")     # True
round_.revealed       # "_a__"
round_.is_solved()    # False
round_.lives          # 6

word = choose_word(["perro", "gato"])
```

Other helpers:

- `ahorcado.words.read_words_for_level(level, directory)` returns a level's word list.
- `ahorcado.words.level_file(level, directory)` returns the path of a level's word file.
- `ahorcado.drawing.draw_hangman(lives)` prints the hangman for the given number of remaining lives.
- `ahorcado.drawing.draw_gallows(attempts)` prints the gallows for the given number of misses.
- `ahorcado.controller.VirtualKeyboard` is the letter selector. It provides `move`, `letter` and `render`.
- `ahorcado.terminal` holds the ANSI colour codes and the console prompt helpers `get_console_number`, `get_console_string`, `split_string` and `trim`.

## What it does not do

- Scores are not saved.
- Word lists for the level game are not included. You supply the `nivel1.txt` to `nivel3.txt` files yourself.