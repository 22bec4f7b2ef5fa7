import pytest

from linuxplay.grep import grep_file, grep_text, main

CONTENT = (
    "This is the first line\n"
    "This line contains the pattern\n"
    "Another line without it\n"
    "Pattern appears here too\n"
    "Final line\n"
)

TEXT = "First line\nSecond line with pattern\nThird line\npattern in fourth line\nFifth line"


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "test.txt"
    path.write_text(CONTENT)
    return path


def test_matches_pattern_in_file(sample_file):
    result = grep_file("pattern", sample_file)
    assert result == ["This line contains the pattern"]
    assert "Pattern appears here too" not in result
    assert "This is the first line" not in result


def test_no_match_in_file(sample_file):
    assert grep_file("nonexistent", sample_file) == []


def test_matches_with_line_numbers(sample_file):
    result = grep_file("pattern", sample_file, True)
    assert "2:This line contains the pattern" in result
    assert "4:Pattern appears here too" not in result


def test_handles_nonexistent_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="File does not exist"):
        grep_file("pattern", tmp_path / "non_existent_file.txt")


def test_text_matches_pattern():
    result = grep_text("pattern", TEXT)
    assert result == ["Second line with pattern", "pattern in fourth line"]


def test_text_matches_with_line_numbers():
    result = grep_text("pattern", TEXT, True)
    assert result == ["2:Second line with pattern", "4:pattern in fourth line"]


def test_empty_text():
    assert grep_text("pattern", "") == []


def test_empty_pattern_matches_every_line():
    assert grep_text("", "a\nb\n") == ["a", "b"]


def test_main_with_line_numbers(sample_file, capsys):
    assert main(["-n", "pattern", str(sample_file)]) == 0
    assert capsys.readouterr().out == "2:This line contains the pattern\n"


def test_main_without_flags(sample_file, capsys):
    assert main(["line", str(sample_file)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "This is the first line",
        "This line contains the pattern",
        "Another line without it",
        "Final line",
    ]


def test_main_missing_arguments(capsys):
    assert main(["pattern"]) == 1
    assert "Usage:" in capsys.readouterr().err


def test_main_help(capsys):
    assert main(["--help"]) == 0
    assert "-n\tShow line numbers" in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main(["pattern", str(tmp_path / "missing.txt")]) == 1
    assert "Error: File does not exist" in capsys.readouterr().out