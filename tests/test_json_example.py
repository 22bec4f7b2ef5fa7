import pytest

from linuxplay.json_example import SAMPLE_JSON, describe, main
from linuxplay.jsonvalue import parse_json

SERIALIZED_PREFIX = "Serialized JSON: "


def test_describe_sample_fields():
    lines = describe(parse_json(SAMPLE_JSON))
    assert len(lines) == 6
    assert lines[0] == "Name: John Doe"
    assert lines[1] == "Age: 30"
    assert lines[3] == "Courses: Math, Physics"


def test_describe_student_flag():
    lines = describe(parse_json(SAMPLE_JSON))
    assert lines[2].endswith("No")
    student = parse_json(SAMPLE_JSON.replace("false", "true"))
    assert describe(student)[2].endswith("Yes")


def test_serialized_line_round_trips():
    value = parse_json(SAMPLE_JSON)
    line = describe(value)[-1]
    assert line.startswith(SERIALIZED_PREFIX)
    assert parse_json(line.removeprefix(SERIALIZED_PREFIX)) == value


def test_address_line_contains_street_and_city():
    line = describe(parse_json(SAMPLE_JSON))[4]
    assert "123 Main St" in line
    assert line.endswith("Anytown")


def test_missing_field_raises():
    with pytest.raises(KeyError):
        describe(parse_json('{"name": "x"}'))


def test_wrong_field_type_raises():
    text = SAMPLE_JSON.replace('"John Doe"', "7")
    with pytest.raises(TypeError):
        describe(parse_json(text))


def test_main_prints_description(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == describe(parse_json(SAMPLE_JSON))