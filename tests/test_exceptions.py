"""Tests for the exception hierarchy."""
from jsonrpc_cli import (
    JSONParseError,
    MissingEqualsError,
    RPCConvertError,
    RuleDefinitionError
)

def test_hierarchy():
    assert issubclass(JSONParseError, RPCConvertError)
    assert issubclass(MissingEqualsError, RPCConvertError)
    assert issubclass(RuleDefinitionError, RPCConvertError)

def test_json_parse_error_context():
    error = JSONParseError("foo")
    assert error.method is None
    assert error.param is None

    tagged = error.with_context("echojson", 7)
    assert tagged.raw_text == "foo"
    assert tagged.method == "echojson"
    assert tagged.param == 7
    assert str(tagged) == "Error parsing JSON: foo"

def test_missing_equals_message():
    error = MissingEqualsError("badtoken")
    assert error.raw_text == "badtoken"
    assert str(error) == (
        "No '=' in named argument 'badtoken', this needs to be present "
        "for every argument (even if it is empty)"
    )
