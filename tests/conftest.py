
import logging
import pytest
from jsonrpc_cli.registry import ConversionRegistry

@pytest.fixture
def small_registry():
    """Registry with holes and a method that shares names across indices."""
    return ConversionRegistry([
        ("alpha", 0, "count"),
        ("alpha", 2, "options"),
        ("beta", 1, "amount"),
    ])

@pytest.fixture
def echojson_args():
    """Raw arguments for the test-only echojson method, one per position."""
    return ["1", '"x"', "[1,2]", "true", "null", "3.5", "{}", "foo", "bar", "baz"]

@pytest.fixture
def cli_env(monkeypatch, tmp_path):
    """Run CLI commands without picking up a real config file or env vars."""
    monkeypatch.delenv("JSONRPC_CLI_CONFIG", raising=False)
    monkeypatch.delenv("JSONRPC_CLI_NAMED", raising=False)
    monkeypatch.chdir(tmp_path)
    root = logging.getLogger()
    level = root.level
    yield tmp_path
    root.setLevel(level)
