"""List the entries of a directory in sorted order."""

from __future__ import annotations

import os
import sys
from pathlib import Path

PROGRAM_NAME = "my_ls"


def list_directory(path: str | os.PathLike[str]) -> list[str]:
    """Return the sorted entry names of a directory.

    A path naming a file yields just that file's name. Raises
    FileNotFoundError if the path does not exist.
    """
    target = Path(path)
    if not target.exists():
        raise FileNotFoundError("Path does not exist.")
    if not target.is_dir():
        return [target.name]
    return sorted(entry.name for entry in target.iterdir())


def main(argv: list[str] | None = None) -> int:
    """Run the command line tool and return its exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) > 1:
        print(f"Usage: {PROGRAM_NAME} [path]", file=sys.stderr)
        return 1

    path = args[0] if args else "."
    try:
        entries = list_directory(path)
    except OSError as exc:
        message = exc.args[0] if isinstance(exc, FileNotFoundError) and exc.args else exc
        print(f"Error: {message}")
        return 1

    for name in entries:
        print(name)
    return 0


if __name__ == "__main__":
    sys.exit(main())