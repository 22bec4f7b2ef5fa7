"""Count lines, words and characters (bytes) in text or files."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

PROGRAM_NAME = "my_wc"


@dataclass(frozen=True)
class WcResult:
    """Counts produced by a word count."""

    lines: int = 0
    words: int = 0
    characters: int = 0


def wc_text(text: str | bytes) -> WcResult:
    """Count lines, words and characters in ``text``.

    Characters are counted as bytes of the UTF-8 encoding. A final line
    without a trailing newline still counts as a line.
    """
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    lines = data.count(b"\n")
    if data and not data.endswith(b"\n"):
        lines += 1
    return WcResult(lines=lines, words=len(data.split()), characters=len(data))


def wc_file(filepath: str | os.PathLike[str]) -> WcResult:
    """Count lines, words and characters in the file at ``filepath``.

    Raises FileNotFoundError if the file does not exist and OSError if it
    cannot be read.
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f'File does not exist: "{path}"')
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise OSError(f'Could not open file: "{path}"') from exc
    return wc_text(data)


def _print_usage() -> None:
    print(
        f"Usage: {PROGRAM_NAME} [-lwc] [file]\n"
        "  -l\tCount lines\n"
        "  -w\tCount words\n"
        "  -c\tCount characters\n"
        "  --help\tDisplay this help message"
    )


def main(argv: list[str] | None = None) -> int:
    """Run the command line tool and return its exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    count_lines = count_words = count_chars = False
    filepath: str | None = None

    for arg in args:
        if arg == "-l":
            count_lines = True
        elif arg == "-w":
            count_words = True
        elif arg == "-c":
            count_chars = True
        elif arg == "--help":
            _print_usage()
            return 0
        elif filepath is None:
            filepath = arg
        else:
            print(f"Usage: {PROGRAM_NAME} [-lwc] [file]", file=sys.stderr)
            return 1

    if not (count_lines or count_words or count_chars):
        count_lines = count_words = count_chars = True

    if filepath is None:
        result = wc_text(sys.stdin.buffer.read())
    else:
        try:
            result = wc_file(filepath)
        except OSError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1

    selected = (
        (count_lines, result.lines),
        (count_words, result.words),
        (count_chars, result.characters),
    )
    output = " ".join(str(value) for enabled, value in selected if enabled)
    if filepath is not None:
        output += f" {filepath}"
    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())