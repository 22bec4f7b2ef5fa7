"""Search text or files for lines containing a fixed substring."""

from __future__ import annotations

import os
import sys
from pathlib import Path

PROGRAM_NAME = "my_grep"


def _split_lines(text: str) -> list[str]:
    """Split text on newlines; a trailing newline does not start a new line."""
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def grep_text(pattern: str, text: str, show_line_numbers: bool = False) -> list[str]:
    """Return the lines of ``text`` containing ``pattern``.

    With ``show_line_numbers`` each line is prefixed by its 1-based number and a colon.
    """
    return [
        f"{number}:{line}" if show_line_numbers else line
        for number, line in enumerate(_split_lines(text), start=1)
        if pattern in line
    ]


def grep_file(
    pattern: str, filepath: str | os.PathLike[str], show_line_numbers: bool = False
) -> list[str]:
    """Return the lines of the file at ``filepath`` containing ``pattern``.

    Raises FileNotFoundError if the file does not exist and OSError if it
    cannot be read.
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f'File does not exist: "{path}"')
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise OSError(f'Could not open file: "{path}"') from exc
    return grep_text(pattern, text, show_line_numbers)


def _print_usage() -> None:
    print(
        f"Usage: {PROGRAM_NAME} [-n] pattern file\n"
        "  -n\tShow line numbers\n"
        "  -h\tDisplay this help message"
    )


def main(argv: list[str] | None = None) -> int:
    """Run the command line tool and return its exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    show_line_numbers = False

    if args:
        if args[0] == "-n":
            show_line_numbers = True
            args = args[1:]
        elif args[0] in ("-h", "--help"):
            _print_usage()
            return 0

    if len(args) < 2:
        print(f"Usage: {PROGRAM_NAME} [-n] pattern file", file=sys.stderr)
        return 1

    pattern, filepath = args[0], args[1]
    try:
        matches = grep_file(pattern, filepath, show_line_numbers)
    except OSError as exc:
        print(f"Error: {exc}")
        return 1

    for line in matches:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())