"""Parsers for raw command-line argument text."""

import json
import logging
from typing import Any

from .exceptions import JSONParseError

_LOGGER = logging.getLogger(__name__)

def _reject_constant(name: str) -> Any:
    # json accepts NaN/Infinity by default, JSON does not.
    raise ValueError(f"Non-standard JSON constant '{name}'")

def parse_json_value(raw_text: str) -> Any:
    """Parse a single command-line fragment into a JSON value.

    Unlike strict RFC 4627 documents, a bare scalar is accepted at the top
    level, so all of these are valid:
    1. Numbers and literals: '0.001', '-3e2', 'true', 'null'
    2. Quoted strings: '"x"'
    3. Arrays and objects typed directly: '[1,2]', '{"a": 1}'

    Unquoted words such as 'foo', more than one value ('1,2') and empty
    text are rejected.

    Args:
        raw_text: The argument exactly as typed by the user.

    Returns:
        The parsed value (dict, list, str, int, float, bool or None).

    Raises:
        JSONParseError: If the text is not exactly one valid JSON value.
    """
    try:
        return json.loads(raw_text, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        _LOGGER.debug("Rejected JSON value %r: %s", raw_text, e)
        raise JSONParseError(raw_text) from e
