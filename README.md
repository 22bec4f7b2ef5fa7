# linuxplay

A handful of small, dependency-free tools:

- simplified `ls`, `grep` and `wc` commands,
- a thread-safe logger that writes timestamped records to a file from a
  background worker thread,
- a minimal JSON value type with its own parser and serializer.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

### linuxplay-ls

```
linuxplay-ls [path]
```

Lists the entries of a directory in sorted order, one per line. Without a
path the current directory is listed. Given a file, it prints the file's
name. A missing path prints `Error: Path does not exist.` and exits with 1.
More than one argument prints a usage line and exits with 1.

### linuxplay-grep

```
linuxplay-grep [-n] pattern file
```

Prints every line of `file` that contains `pattern` as a plain,
case-sensitive substring. With `-n` each line is prefixed with its line
number and a colon (`2:matching line`). `-h` or `--help` as the first
argument prints usage. A missing or unreadable file prints an
`Error: ...` message and the exit status is 1.

### linuxplay-wc

```
linuxplay-wc [-l] [-w] [-c] [--help] [file]
```

Counts lines, words and characters. Without options all three are shown;
`-l`, `-w` and `-c` select lines, words or characters. The counts are
printed on one line, followed by the file name when a file was given.
Without a file the text is read from standard input:

```
echo "Hello world" | linuxplay-wc
```

Characters are counted as bytes of the UTF-8 encoding. A final line without
a trailing newline still counts as a line. Only one file may be given; a
second one prints usage and exits with 1.

### linuxplay-logger-demo

Starts five threads that log through the shared `Logger` instance and
writes their records to `app.log` in the current directory.

### linuxplay-json-demo

Parses a sample JSON document, prints its name, age, student flag, courses
and address, then the re-serialized document.

## Library use

Each command's logic can be imported directly and returns data instead of
printing:

```python
from linuxplay.grep import grep_text, grep_file
from linuxplay.ls import list_directory
from linuxplay.wc import wc_text, wc_file, WcResult

grep_text("pattern", "one\ntwo pattern\n", show_line_numbers=True)  # ["2:two pattern"]
list_directory(".")                                                 # sorted entry names
wc_text("First line\nSecond line\n")                                # WcResult(lines=2, words=4, characters=23)
```

`grep_file`, `wc_file` and `list_directory` raise `FileNotFoundError` for a
missing path and `OSError` for a file that cannot be read. `WcResult` is a
frozen dataclass with `lines`, `words` and `characters`.

### Logging

```python
from linuxplay.logger import Logger, LogLevel

logger = Logger.get_instance()
logger.log(LogLevel.INFO, "service started")
logger.flush()
```

`Logger.get_instance()` returns a process-wide logger appending to
`app.log` and closed at interpreter exit. A `Logger(path)` of your own
writes to another file and can be used as a context manager. If the file
cannot be opened, records go to standard output instead.

Records look like `2024-01-01 12:00:00 [INFO] [Thread 1234] service started`.
`format_record(level, message)` builds such a line without logging it.
`flush()` blocks until every queued record is written, and `close()` drains
the queue, stops the worker and closes the file; logging after `close()`
raises `RuntimeError`. Levels are `DEBUG`, `INFO`, `WARN` and `ERROR`.

### JSON

```python
from linuxplay.jsonvalue import JsonValue, parse_json, parse_json_file, JsonParseError

value = parse_json('{"name": "John", "courses": ["Math", "Physics"]}')
value.is_object()                      # True
value["name"].as_string()              # "John"
value["courses"][1].as_string()        # "Physics"
value.to_string()                      # '{"courses":["Math","Physics"],"name":"John"}'

items = JsonValue([])
items.append(1)
items.to_string()                      # '[1]'
```

`JsonValue` wraps `None`, booleans, numbers (held as floats), strings,
lists and dicts. It has `is_*` checks and `as_*` accessors (which raise
`TypeError` on the wrong type), indexing by position or key, `len()`,
`append` for arrays and `insert` for objects.

Objects serialize with their keys in sorted order. Whole numbers below 10^15
are written without a decimal point; other numbers with up to 15 significant
digits; infinite or NaN numbers raise `ValueError`. Malformed input raises
`JsonParseError` (a `ValueError`), and `parse_json_file` raises `OSError`
when the file cannot be opened.

## Limitations

- `grep` matches fixed substrings only; there are no regular expressions
  and no case-insensitive mode.
- `ls` prints names only, with no long format or hidden-file options.
- The JSON parser does not decode `\uXXXX` escapes: each is replaced by a
  `?` placeholder.