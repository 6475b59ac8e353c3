"""CLI for the JSON-RPC argument converter."""

import argparse
import json
import logging
import os
import sys
from typing import Any, Dict, List, Optional

from jsonrpc_cli import (
    ConversionRegistry,
    JSONParseError,
    MissingEqualsError,
    RuleDefinitionError,
    build_registry,
    convert_named,
    convert_positional,
)
from jsonrpc_cli.const import CONFIG_FILE, ENV_CONFIG_FILE, ENV_NAMED

logging.basicConfig(level=logging.INFO, format='%(message)s')
_LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CONVERSION_ERROR = 1
EXIT_CONFIG_ERROR = 2

_TRUTHY = ("1", "true", "yes", "on")

def load_config(config_file: str) -> Dict[str, Any]:
    """Load configuration from a JSON file."""
    try:
        with open(config_file, "r") as f:
            config = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError):
        return {}
    return config if isinstance(config, dict) else {}

def get_config(args) -> Dict[str, Any]:
    """Load the config file named by --config, the env var or the default path."""
    config_file = args.config or os.getenv(ENV_CONFIG_FILE) or CONFIG_FILE
    config = load_config(config_file)
    if config:
        _LOGGER.debug("Loaded config from %s", config_file)
    return config

def use_named(args, config: Dict[str, Any]) -> bool:
    """Whether arguments are passed as name=value pairs."""
    if args.named:
        return True
    env_named = os.getenv(ENV_NAMED)
    if env_named is not None:
        return env_named.strip().lower() in _TRUTHY
    return bool(config.get("named", False))

def registry_from_config(config: Dict[str, Any]) -> ConversionRegistry:
    """Build the registry from the built-in table and the config's extra rules.

    Raises:
        RuleDefinitionError: If 'extra_rules' is not a list of valid triples.
    """
    extra_rules = config.get("extra_rules", [])
    if not isinstance(extra_rules, list):
        raise RuleDefinitionError(
            f"'extra_rules' must be a list of [method, index, name] triples, got {extra_rules!r}"
        )
    if extra_rules:
        _LOGGER.debug("Adding %s extra conversion rules from config", len(extra_rules))
    return build_registry(extra_rules)

def read_stdin_args(stream) -> List[str]:
    """Read one argument per line."""
    return [line.rstrip("\r\n") for line in stream]

def cmd_convert(args) -> int:
    """Convert arguments for a method and print the JSON params."""
    config = get_config(args)
    try:
        registry = registry_from_config(config)
    except RuleDefinitionError as e:
        _LOGGER.error("Invalid configuration: %s", e)
        return EXIT_CONFIG_ERROR

    raw_args = list(args.params)
    if args.stdin:
        raw_args.extend(read_stdin_args(sys.stdin))

    try:
        if use_named(args, config):
            params = convert_named(args.method, raw_args, registry)
        else:
            params = convert_positional(args.method, raw_args, registry)
    except MissingEqualsError as e:
        _LOGGER.error("Malformed named argument: %s", e)
        return EXIT_CONVERSION_ERROR
    except JSONParseError as e:
        _LOGGER.error("Invalid value for parameter %s of '%s': %s", e.param, e.method, e)
        return EXIT_CONVERSION_ERROR

    print(json.dumps(params, indent=args.indent))
    return EXIT_OK

def cmd_list_rules(args) -> int:
    """List methods with conversion rules, or the rules of one method."""
    config = get_config(args)
    try:
        registry = registry_from_config(config)
    except RuleDefinitionError as e:
        _LOGGER.error("Invalid configuration: %s", e)
        return EXIT_CONFIG_ERROR

    if args.method:
        rules = registry.rules_for(args.method)
        if not rules:
            print(f"No conversion rules for '{args.method}'; all arguments are sent as strings.")
            return EXIT_OK
        print(f"Parameters of '{args.method}' parsed as JSON:")
        for rule in rules:
            print(f"- {rule.index}: {rule.name}")
        return EXIT_OK

    methods = registry.methods()
    print(f"Found {len(methods)} methods with conversion rules:")
    for method in methods:
        indices = ", ".join(str(rule.index) for rule in registry.rules_for(method))
        print(f"- {method} ({indices})")
    return EXIT_OK

def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    # Parent parser for common arguments
    common_parser = argparse.ArgumentParser(add_help=False)
    common_parser.add_argument("--config", help=f"Path to JSON config file (default: {CONFIG_FILE})")
    common_parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    parser = argparse.ArgumentParser(description="JSON-RPC CLI argument converter")
    subparsers = parser.add_subparsers(dest="command")

    # Convert
    parser_convert = subparsers.add_parser("convert", help="Convert arguments to JSON-RPC params", parents=[common_parser])
    parser_convert.add_argument("-named", "--named", action="store_true", help="Pass arguments as name=value pairs")
    parser_convert.add_argument("--stdin", action="store_true", help="Read extra arguments from stdin, one per line")
    parser_convert.add_argument("--indent", type=int, default=None, help="Indent the JSON output")
    parser_convert.add_argument("method", help="RPC method name (e.g. sendtoaddress)")
    # Options must come before the method; everything after it is an argument.
    parser_convert.add_argument("params", nargs=argparse.REMAINDER, help="Arguments (positional, or name=value with -named)")

    # List Rules
    parser_rules = subparsers.add_parser("list-rules", help="List parameters that are parsed as JSON", parents=[common_parser])
    parser_rules.add_argument("method", nargs="?", help="RPC method name (optional)")

    return parser

def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_OK

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        if args.command == "convert":
            return cmd_convert(args)
        elif args.command == "list-rules":
            return cmd_list_rules(args)
    except KeyboardInterrupt:
        pass
    return EXIT_OK

if __name__ == "__main__":
    sys.exit(main())
