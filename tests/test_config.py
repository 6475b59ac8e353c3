"""Tests for CLI configuration handling."""
import json
from argparse import Namespace

import pytest
from jsonrpc_cli.cli import get_config, load_config, registry_from_config, use_named
from jsonrpc_cli.exceptions import RuleDefinitionError

def test_load_config_missing(tmp_path):
    assert load_config(str(tmp_path / "nope.json")) == {}

def test_load_config_invalid_json(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json")
    assert load_config(str(path)) == {}

def test_load_config_not_an_object(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[1, 2]")
    assert load_config(str(path)) == {}

def test_get_config_from_env(cli_env, monkeypatch):
    path = cli_env / "env.json"
    path.write_text(json.dumps({"named": True}))
    monkeypatch.setenv("JSONRPC_CLI_CONFIG", str(path))

    assert get_config(Namespace(config=None)) == {"named": True}

def test_get_config_option_beats_env(cli_env, monkeypatch):
    env_path = cli_env / "env.json"
    env_path.write_text(json.dumps({"named": True}))
    opt_path = cli_env / "opt.json"
    opt_path.write_text(json.dumps({"named": False}))
    monkeypatch.setenv("JSONRPC_CLI_CONFIG", str(env_path))

    assert get_config(Namespace(config=str(opt_path))) == {"named": False}

class TestUseNamed:

    def test_default(self, cli_env):
        assert use_named(Namespace(named=False), {}) is False

    def test_flag(self, cli_env):
        assert use_named(Namespace(named=True), {"named": False}) is True

    def test_config(self, cli_env):
        assert use_named(Namespace(named=False), {"named": True}) is True

    @pytest.mark.parametrize("value, expected", [
        ("1", True), ("true", True), ("YES", True), ("on", True),
        ("0", False), ("false", False), ("", False),
    ])
    def test_env_overrides_config(self, cli_env, monkeypatch, value, expected):
        monkeypatch.setenv("JSONRPC_CLI_NAMED", value)
        assert use_named(Namespace(named=False), {"named": not expected}) is expected

def test_registry_from_config():
    registry = registry_from_config({"extra_rules": [["mycall", 2, "flag"]]})
    assert registry.should_convert("mycall", 2)
    assert registry.should_convert("settxfee", 0)

def test_registry_from_config_not_a_list():
    with pytest.raises(RuleDefinitionError, match="must be a list"):
        registry_from_config({"extra_rules": {"mycall": 0}})
