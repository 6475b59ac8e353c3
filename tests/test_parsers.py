"""Unit tests for the lenient JSON value parser."""
import json

import pytest
from jsonrpc_cli.exceptions import JSONParseError
from jsonrpc_cli.parsers import parse_json_value

@pytest.mark.parametrize("raw, expected", [
    ("0", 0),
    ("-12", -12),
    ("0.001", 0.001),
    ("3.5", 3.5),
    ("-1.5e3", -1500.0),
    ("true", True),
    ("false", False),
    ("null", None),
    ('"x"', "x"),
    ('""', ""),
    ("[1,2]", [1, 2]),
    ("[]", []),
    ("{}", {}),
    ('{"a": 1, "b": [true, null]}', {"a": 1, "b": [True, None]}),
    (" 7 ", 7),
])
def test_valid_values(raw, expected):
    assert parse_json_value(raw) == expected

def test_scalar_types():
    """Integers stay integers, bare literals are real booleans."""
    assert isinstance(parse_json_value("42"), int)
    assert isinstance(parse_json_value("42.0"), float)
    assert parse_json_value("true") is True
    assert parse_json_value("null") is None

@pytest.mark.parametrize("raw", [
    "",
    "   ",
    "foo",
    "True",
    "NULL",
    "'x'",
    "1,2",
    "1 2",
    "{bad json",
    "[1,2",
    '"unterminated',
    "{}}",
    "[1] x",
    "NaN",
    "Infinity",
    "-Infinity",
    "[NaN]",
])
def test_invalid_values(raw):
    with pytest.raises(JSONParseError) as exc_info:
        parse_json_value(raw)
    assert exc_info.value.raw_text == raw
    assert str(exc_info.value) == f"Error parsing JSON: {raw}"

@pytest.mark.parametrize("raw", [
    "0.001",
    "-7",
    '"quoted \\"inner\\""',
    '{"outputs": {"addr": 0.5}, "flags": [true, false, null]}',
    "[[], {}, [1.25e-5]]",
])
def test_round_trip(raw):
    """Parsing, dumping compactly and parsing again gives the same value."""
    value = parse_json_value(raw)
    compact = json.dumps(value, separators=(",", ":"))
    assert parse_json_value(compact) == value
