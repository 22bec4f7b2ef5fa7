"""Parse a sample JSON document and print its fields."""

from __future__ import annotations

import sys

from linuxplay.jsonvalue import JsonValue, parse_json

SAMPLE_JSON = """{
        "name": "John Doe",
        "age": 30,
        "isStudent": false,
        "courses": ["Math", "Physics"],
        "address": {
            "street": "123 Main St",
            "city": "Anytown"
        }
    }"""


def describe(value: JsonValue) -> list[str]:
    """Return report lines for a person document.

    Raises KeyError if a field is missing and TypeError if one has the
    wrong type.
    """
    person = value.as_object()
    courses = ", ".join(course.as_string() for course in person["courses"].as_array())
    address = person["address"].as_object()
    return [
        f"Name: {person['name'].as_string()}",
        f"Age: {person['age'].as_number():g}",
        f"Is Student: {'Yes' if person['isStudent'].as_bool() else 'No'}",
        f"Courses: {courses}",
        f"Address: {address['street'].as_string()}, {address['city'].as_string()}",
        f"Serialized JSON: {value.to_string()}",
    ]


def main(argv: list[str] | None = None) -> int:
    """Print the report for the sample document and return the exit status."""
    try:
        lines = describe(parse_json(SAMPLE_JSON))
    except (ValueError, KeyError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())