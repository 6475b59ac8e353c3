"""Conversion of raw CLI arguments into JSON-RPC parameters.

Each argument is either passed on as the literal string the user typed, or
parsed as JSON when the registry lists that parameter of the method.
"""

import logging
from typing import Any, Dict, List, Sequence, Tuple

from .exceptions import JSONParseError, MissingEqualsError
from .parsers import parse_json_value
from .registry import DEFAULT_REGISTRY, ConversionRegistry

_LOGGER = logging.getLogger(__name__)

def convert_positional(
    method: str,
    raw_args: Sequence[str],
    registry: ConversionRegistry = DEFAULT_REGISTRY,
) -> List[Any]:
    """Convert positional arguments for an RPC call.

    Args:
        method: Name of the RPC method.
        raw_args: Arguments in the order they were given.
        registry: Registry deciding which positions are parsed as JSON.

    Returns:
        List of parameters with the same length and order as raw_args.

    Raises:
        JSONParseError: If a converted argument is not valid JSON. No partial
            result is returned.
    """
    params = []
    for index, raw_value in enumerate(raw_args):
        if not registry.should_convert_index(method, index):
            params.append(raw_value)
            continue

        _LOGGER.debug("Parsing %s argument %s as JSON", method, index)
        try:
            params.append(parse_json_value(raw_value))
        except JSONParseError as e:
            raise e.with_context(method, index) from e

    return params

def split_named_arg(token: str) -> Tuple[str, str]:
    """Split a 'name=value' token at the first '='.

    Raises:
        MissingEqualsError: If the token has no '='.
    """
    name, sep, value = token.partition("=")
    if not sep:
        raise MissingEqualsError(token)
    return name, value

def convert_named(
    method: str,
    raw_args: Sequence[str],
    registry: ConversionRegistry = DEFAULT_REGISTRY,
) -> Dict[str, Any]:
    """Convert 'name=value' arguments for an RPC call.

    Every token needs an '=', even for an empty value ('name='). Keys keep
    the order in which they first appear; a repeated name keeps its last
    value.

    Args:
        method: Name of the RPC method.
        raw_args: Tokens in the order they were given.
        registry: Registry deciding which names are parsed as JSON.

    Returns:
        Dictionary of parameter name to value.

    Raises:
        MissingEqualsError: If a token has no '='.
        JSONParseError: If a converted value is not valid JSON.
    """
    params: Dict[str, Any] = {}
    for token in raw_args:
        name, raw_value = split_named_arg(token)

        if not registry.should_convert_name(method, name):
            params[name] = raw_value
            continue

        _LOGGER.debug("Parsing %s argument '%s' as JSON", method, name)
        try:
            params[name] = parse_json_value(raw_value)
        except JSONParseError as e:
            raise e.with_context(method, name) from e

    return params
