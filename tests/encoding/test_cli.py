import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from phone_encoder import cli

TESTS_DIR = Path(__file__).resolve().parents[1]
WORDS = str(TESTS_DIR / "words.txt")
NUMBERS = str(TESTS_DIR / "numbers.txt")


def _expected_output() -> str:
    return (TESTS_DIR / "output.txt").read_text(encoding="utf-8")


def test_main_prints_sample_solutions(capsys):
    assert cli.main([WORDS, NUMBERS]) == 0
    assert capsys.readouterr().out == _expected_output()


def test_main_writes_output_file(tmp_path, capsys):
    target = tmp_path / "out" / "result.txt"

    assert cli.main([WORDS, NUMBERS, "--output", str(target)]) == 0

    assert target.read_text(encoding="utf-8") == _expected_output()
    assert capsys.readouterr().out == ""


def test_main_count_mode(capsys):
    assert cli.main([WORDS, NUMBERS, "--count"]) == 0
    assert capsys.readouterr().out == "12\n"


def test_number_lines_are_echoed_verbatim(tmp_path, capsys):
    words = tmp_path / "words.txt"
    numbers = tmp_path / "numbers.txt"
    words.write_text("Mon\nday\n", encoding="utf-8")
    numbers.write_bytes(b"58-13/53\r\n\xff\n--\n")

    assert cli.main([str(words), str(numbers)]) == 0

    assert capsys.readouterr().out == "58-13/53: Mon day\n--:\n"


@pytest.mark.parametrize("missing", ["words", "numbers"])
def test_missing_input_is_fatal_without_output(tmp_path, capsys, missing):
    paths = {"words": WORDS, "numbers": NUMBERS}
    paths[missing] = str(tmp_path / "nope.txt")

    assert cli.main([paths["words"], paths["numbers"]]) == 2

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "nope.txt" in captured.err


def test_build_parser_defaults():
    args = cli.build_parser().parse_args([])
    assert args.words_file is None
    assert args.numbers_file is None
    assert not args.count
    assert args.output is None


def test_unwritable_output_is_reported(tmp_path, capsys):
    assert cli.main([WORDS, NUMBERS, "--output", str(tmp_path)]) == 2

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Cannot write output file" in captured.err


def test_progress_bar_goes_to_stderr(capsys):
    assert cli.main([WORDS, NUMBERS, "--progress", "--verbose"]) == 0

    captured = capsys.readouterr()
    assert captured.out == _expected_output()
    assert "Encoding numbers" in captured.err
