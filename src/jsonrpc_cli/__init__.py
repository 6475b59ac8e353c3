"""JSON-RPC CLI argument converter."""

from .convert import convert_named, convert_positional
from .exceptions import (
    RPCConvertError,
    JSONParseError,
    MissingEqualsError,
    RuleDefinitionError
)
from .parsers import parse_json_value
from .registry import (
    DEFAULT_REGISTRY,
    ConversionRegistry,
    ConversionRule,
    build_registry
)

__all__ = [
    "ConversionRegistry",
    "ConversionRule",
    "DEFAULT_REGISTRY",
    "JSONParseError",
    "MissingEqualsError",
    "RPCConvertError",
    "RuleDefinitionError",
    "build_registry",
    "convert_named",
    "convert_positional",
    "parse_json_value",
]
