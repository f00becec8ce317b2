from pathlib import Path

from ahorcado import words


def test_level_file_default_directory():
    assert words.level_file(1) == Path("datafile") / "nivel1.txt"


def test_level_file_custom_directory(tmp_path):
    assert words.level_file(2, tmp_path) == tmp_path / "nivel2.txt"


def test_read_words_skips_empty_lines(tmp_path):
    (tmp_path / "nivel1.txt").write_text("sol\n\nluna\n", encoding="utf-8")
    assert words.read_words_for_level(1, tmp_path) == ["sol", "luna"]


def test_read_words_crlf(tmp_path):
    (tmp_path / "nivel3.txt").write_bytes(b"perro\r\ngato\r\n")
    assert words.read_words_for_level(3, tmp_path) == ["perro", "gato"]


def test_read_words_round_trip(tmp_path):
    expected = ["manzana", "pera", "kiwi"]
    words.level_file(2, tmp_path).write_text("\n".join(expected), encoding="utf-8")
    assert words.read_words_for_level(2, tmp_path) == expected


def test_read_words_missing_file(tmp_path, capsys):
    assert words.read_words_for_level(9, tmp_path) == []
    out = capsys.readouterr().out
    assert out.startswith("No se pudo abrir el archivo: ")
    assert "nivel9.txt" in out