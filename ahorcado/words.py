"""Loading word lists for each difficulty level."""

from pathlib import Path

DEFAULT_DIRECTORY = "datafile"


def level_file(level, directory=DEFAULT_DIRECTORY):
    """Return the path of the word file for ``level``."""
    return Path(directory) / f"nivel{level}.txt"


def read_words_for_level(level, directory=DEFAULT_DIRECTORY):
    """Return the non-empty lines of the level's word file.

    When the file cannot be opened a message is printed and an empty
    list is returned.
    """
    path = level_file(level, directory)
    try:
        with path.open(encoding="utf-8") as handle:
            return [line.rstrip("\n") for line in handle if line.rstrip("\n")]
    except OSError:
        print(f"No se pudo abrir el archivo: {path}")
        return []