"""A small JSON document model with its own parser and serializer."""

from __future__ import annotations

import math
import os
from typing import Any, Union

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"

_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}

_UNESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}


class JsonParseError(ValueError):
    """Raised when text is not a well-formed JSON document."""


def _escape_string(text: str) -> str:
    parts = ['"']
    for char in text:
        if char in _ESCAPES:
            parts.append(_ESCAPES[char])
        elif ord(char) < 0x20:
            parts.append(f"\\u{ord(char):04x}")
        else:
            parts.append(char)
    parts.append('"')
    return "".join(parts)


def _format_number(number: float) -> str:
    if math.isinf(number):
        raise ValueError("Infinity values are not allowed in JSON")
    if math.isnan(number):
        raise ValueError("NaN values are not allowed in JSON")
    if number == math.floor(number) and abs(number) < 1e15:
        return str(int(number))
    return f"{number:.15g}"


class JsonValue:
    """A JSON value: null, boolean, number, string, array or object.

    Numbers are held as floats. Arrays hold JsonValue elements and objects
    map string keys to JsonValue elements; objects serialize with their
    keys in sorted order.
    """

    __slots__ = ("_value",)

    def __init__(self, value: Any = None) -> None:
        self._value = _convert(value)

    @property
    def _kind(self) -> str:
        value = self._value
        if value is None:
            return "null"
        if isinstance(value, bool):
            return "boolean"
        if isinstance(value, float):
            return "number"
        if isinstance(value, str):
            return "string"
        if isinstance(value, list):
            return "array"
        return "object"

    def _expect(self, kind: str) -> Any:
        if self._kind != kind:
            raise TypeError(f"JSON value is {self._kind}, not {kind}")
        return self._value

    def is_null(self) -> bool:
        return self._value is None

    def is_bool(self) -> bool:
        return isinstance(self._value, bool)

    def is_number(self) -> bool:
        return self._kind == "number"

    def is_string(self) -> bool:
        return isinstance(self._value, str)

    def is_array(self) -> bool:
        return isinstance(self._value, list)

    def is_object(self) -> bool:
        return isinstance(self._value, dict)

    def as_bool(self) -> bool:
        """Return the boolean held; TypeError if the value is not one."""
        return self._expect("boolean")

    def as_number(self) -> float:
        """Return the number held; TypeError if the value is not one."""
        return self._expect("number")

    def as_string(self) -> str:
        """Return the string held; TypeError if the value is not one."""
        return self._expect("string")

    def as_array(self) -> list[JsonValue]:
        """Return the list of elements; TypeError if the value is not an array."""
        return self._expect("array")

    def as_object(self) -> dict[str, JsonValue]:
        """Return the mapping of members; TypeError if the value is not an object."""
        return self._expect("object")

    def _check_index(self, index: int) -> list[JsonValue]:
        elements = self.as_array()
        if not 0 <= index < len(elements):
            raise IndexError("Index out of range")
        return elements

    def __getitem__(self, key: Union[int, str]) -> JsonValue:
        if isinstance(key, str):
            members = self.as_object()
            if key not in members:
                raise KeyError(key)
            return members[key]
        if isinstance(key, int) and not isinstance(key, bool):
            return self._check_index(key)[key]
        raise TypeError(f"JSON values are indexed by int or str, not {type(key).__name__}")

    def __setitem__(self, key: Union[int, str], value: Any) -> None:
        if isinstance(key, str):
            self.as_object()[key] = _wrap(value)
        elif isinstance(key, int) and not isinstance(key, bool):
            self._check_index(key)[key] = _wrap(value)
        else:
            raise TypeError(f"JSON values are indexed by int or str, not {type(key).__name__}")

    def __len__(self) -> int:
        if isinstance(self._value, (list, dict)):
            return len(self._value)
        raise TypeError(f"JSON {self._kind} has no length")

    def append(self, value: Any) -> None:
        """Add an element to the end of an array."""
        self.as_array().append(_wrap(value))

    def insert(self, key: str, value: Any) -> None:
        """Set the member ``key`` of an object, replacing any previous value."""
        self.as_object()[key] = _wrap(value)

    def to_string(self) -> str:
        """Serialize to compact JSON text.

        Raises ValueError if a number is infinite or NaN.
        """
        value = self._value
        if value is None:
            return "null"
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, float):
            return _format_number(value)
        if isinstance(value, str):
            return _escape_string(value)
        if isinstance(value, list):
            return "[" + ",".join(element.to_string() for element in value) + "]"
        return (
            "{"
            + ",".join(
                f"{_escape_string(key)}:{value[key].to_string()}" for key in sorted(value)
            )
            + "}"
        )

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"JsonValue({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonValue):
            return NotImplemented
        return self._kind == other._kind and self._value == other._value

    __hash__ = None  # type: ignore[assignment]


def _wrap(value: Any) -> JsonValue:
    return value if isinstance(value, JsonValue) else JsonValue(value)


def _convert(value: Any) -> Any:
    if isinstance(value, JsonValue):
        inner = value._value
        if isinstance(inner, list):
            return list(inner)
        if isinstance(inner, dict):
            return dict(inner)
        return inner
    if value is None or isinstance(value, (bool, str)):
        return value
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, (list, tuple)):
        return [_wrap(element) for element in value]
    if isinstance(value, dict):
        members = {}
        for key, element in value.items():
            if not isinstance(key, str):
                raise TypeError("JSON object keys must be strings")
            members[key] = _wrap(element)
        return members
    raise TypeError(f"cannot hold {type(value).__name__} in a JSON value")


class _Parser:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def _at_end(self) -> bool:
        return self.pos >= len(self.text)

    def _peek(self) -> str:
        return self.text[self.pos]

    def _skip_whitespace(self) -> None:
        while not self._at_end() and self._peek() in _WHITESPACE:
            self.pos += 1

    def _skip_digits(self) -> None:
        while not self._at_end() and self._peek() in _DIGITS:
            self.pos += 1

    def parse(self) -> JsonValue:
        self._skip_whitespace()
        result = self._parse_value()
        self._skip_whitespace()
        if not self._at_end():
            raise JsonParseError("Unexpected characters at end of input")
        return result

    def _parse_value(self) -> JsonValue:
        self._skip_whitespace()
        if self._at_end():
            raise JsonParseError("Unexpected end of input")
        char = self._peek()
        if char == "{":
            return self._parse_object()
        if char == "[":
            return self._parse_array()
        if char == '"':
            return JsonValue(self._parse_string())
        if char == "t":
            return JsonValue(self._parse_literal("true", True))
        if char == "f":
            return JsonValue(self._parse_literal("false", False))
        if char == "n":
            return JsonValue(self._parse_literal("null", None))
        if char == "-" or char in _DIGITS:
            return JsonValue(self._parse_number())
        raise JsonParseError(f"Unexpected character: {char}")

    def _parse_object(self) -> JsonValue:
        self.pos += 1
        self._skip_whitespace()
        members: dict[str, JsonValue] = {}
        if not self._at_end() and self._peek() == "}":
            self.pos += 1
            return JsonValue(members)

        while True:
            self._skip_whitespace()
            if self._at_end():
                raise JsonParseError("Unexpected end of input while parsing object")
            if self._peek() != '"':
                raise JsonParseError("Expected string key in object")
            key = self._parse_string()

            self._skip_whitespace()
            if self._at_end() or self._peek() != ":":
                raise JsonParseError("Expected ':' after key in object")
            self.pos += 1

            self._skip_whitespace()
            members[key] = self._parse_value()

            self._skip_whitespace()
            if self._at_end():
                raise JsonParseError("Unexpected end of input while parsing object")
            char = self._peek()
            self.pos += 1
            if char == "}":
                break
            if char != ",":
                raise JsonParseError("Expected ',' or '}' in object")
        return JsonValue(members)

    def _parse_array(self) -> JsonValue:
        self.pos += 1
        self._skip_whitespace()
        elements: list[JsonValue] = []
        if not self._at_end() and self._peek() == "]":
            self.pos += 1
            return JsonValue(elements)

        while True:
            self._skip_whitespace()
            if self._at_end():
                raise JsonParseError("Unexpected end of input while parsing array")
            elements.append(self._parse_value())

            self._skip_whitespace()
            if self._at_end():
                raise JsonParseError("Unexpected end of input while parsing array")
            char = self._peek()
            self.pos += 1
            if char == "]":
                break
            if char != ",":
                raise JsonParseError("Expected ',' or ']' in array")
        return JsonValue(elements)

    def _parse_string(self) -> str:
        self.pos += 1
        parts: list[str] = []
        while not self._at_end() and self._peek() != '"':
            char = self._peek()
            if char == "\\":
                self.pos += 1
                if self._at_end():
                    raise JsonParseError("Unexpected end of input in string")
                char = self._peek()
                if char in _UNESCAPES:
                    parts.append(_UNESCAPES[char])
                elif char == "u":
                    # Unicode escapes are not decoded; the code point is replaced by '?'.
                    if self.pos + 4 > len(self.text):
                        raise JsonParseError("Invalid unicode escape sequence")
                    self.pos += 4
                    parts.append("?")
                else:
                    raise JsonParseError(f"Invalid escape sequence: \\{char}")
            else:
                parts.append(char)
            self.pos += 1

        if self._at_end():
            raise JsonParseError("Unterminated string")
        self.pos += 1
        return "".join(parts)

    def _expect_digit(self) -> None:
        if self._at_end() or self._peek() not in _DIGITS:
            raise JsonParseError("Invalid number format")

    def _parse_number(self) -> float:
        start = self.pos
        if self._peek() == "-":
            self.pos += 1

        self._expect_digit()
        self._skip_digits()

        if not self._at_end() and self._peek() == ".":
            self.pos += 1
            self._expect_digit()
            self._skip_digits()

        mantissa_end = self.pos
        if not self._at_end() and self._peek() in "eE":
            self.pos += 1
            if not self._at_end() and self._peek() in "+-":
                self.pos += 1
            self._expect_digit()
            self._skip_digits()

        literal = self.text[start : self.pos]
        number = float(literal)
        overflow = math.isinf(number)
        underflow = number == 0.0 and any(
            digit in "123456789" for digit in self.text[start:mantissa_end]
        )
        if overflow or underflow:
            raise JsonParseError(f"Invalid number format: {literal}")
        return number

    def _parse_literal(self, word: str, value: Any) -> Any:
        if self.text.startswith(word, self.pos):
            self.pos += len(word)
            return value
        raise JsonParseError(f"Expected '{word}'")


def parse_json(text: str) -> JsonValue:
    """Parse JSON text into a JsonValue; raises JsonParseError if malformed."""
    return _Parser(text).parse()


def parse_json_file(filepath: str | os.PathLike[str]) -> JsonValue:
    """Parse the JSON document in a file.

    Raises OSError if the file cannot be opened and JsonParseError if its
    content is malformed.
    """
    try:
        with open(filepath, encoding="utf-8", newline="") as handle:
            content = handle.read()
    except OSError as exc:
        raise OSError(f"Failed to open file: {os.fspath(filepath)}") from exc
    return parse_json(content)