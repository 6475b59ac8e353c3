"""Argument Conversion Demo.

Shows how raw command-line text becomes JSON-RPC params, both for
positional arguments and for name=value arguments.
"""

import json
import sys
from pathlib import Path

# Ensure we can import the local package
sys.path.insert(0, str(Path("src").resolve()))

from jsonrpc_cli import (
    DEFAULT_REGISTRY,
    JSONParseError,
    MissingEqualsError,
    convert_named,
    convert_positional,
)


def main():
    """Run the conversion demo."""
    # 1. Positional: index 1 (amount) is parsed, the address stays a string
    params = convert_positional("sendtoaddress", ["pX1addr", "1.5", "donation"])
    print(f"sendtoaddress positional -> {json.dumps(params)}")

    # 2. Named: same method, parameters by name
    params = convert_named("sendtoaddress", ["address=pX1addr", "amount=1.5", "comment=hello"])
    print(f"sendtoaddress named      -> {json.dumps(params)}")

    # 3. Structured values typed directly at the prompt
    params = convert_positional("createrawtransaction", ['[{"txid":"ab","vout":0}]', '{"pX1addr":0.1}', "0"])
    print(f"createrawtransaction     -> {json.dumps(params)}")

    # 4. Which parameters are converted?
    print("\nRules for 'listunspent':")
    for rule in DEFAULT_REGISTRY.rules_for("listunspent"):
        print(f"- {rule.index}: {rule.name}")

    # 5. Errors
    print("\nErrors:")
    try:
        convert_positional("settxfee", ["{bad json"])
    except JSONParseError as e:
        print(f"Invalid value for parameter {e.param}: {e}")

    try:
        convert_named("settxfee", ["amount"])
    except MissingEqualsError as e:
        print(f"Malformed named argument: {e}")


if __name__ == "__main__":
    main()
