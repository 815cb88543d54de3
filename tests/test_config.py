import pytest
from pydantic import ValidationError

from smarthome_bridge import BridgeConfig, ConfigError


def test_from_env():
    cfg = BridgeConfig.from_env({"REMOTE_HOST": "backend.local", "REMOTE_PORT": "8080", "IS_VERBOSE": "true"})
    assert cfg.host == "backend.local"
    assert cfg.port == 8080
    assert cfg.verbose is True
    assert cfg.base_url == "http://backend.local:8080"
    assert cfg.control_method == "PUT"
    assert cfg.timeout is None


@pytest.mark.parametrize("flag, expected", [("", False), ("0", False), ("false", False), ("1", True), ("yes", True)])
def test_verbose_flag(flag, expected):
    cfg = BridgeConfig.from_env({"REMOTE_HOST": "h", "REMOTE_PORT": "1", "IS_VERBOSE": flag})
    assert cfg.verbose is expected


def test_verbose_defaults_off():
    assert BridgeConfig.from_env({"REMOTE_HOST": "h", "REMOTE_PORT": "1"}).verbose is False


@pytest.mark.parametrize("env", [{}, {"REMOTE_HOST": "h"}, {"REMOTE_PORT": "80"}, {"REMOTE_HOST": "", "REMOTE_PORT": "80"}])
def test_missing_host_or_port(env):
    with pytest.raises(ConfigError):
        BridgeConfig.from_env(env)


def test_port_must_be_numeric():
    with pytest.raises(ConfigError):
        BridgeConfig.from_env({"REMOTE_HOST": "h", "REMOTE_PORT": "http"})


def test_from_process_environment(monkeypatch):
    monkeypatch.setenv("REMOTE_HOST", "10.0.0.2")
    monkeypatch.setenv("REMOTE_PORT", "3000")
    monkeypatch.delenv("IS_VERBOSE", raising=False)
    cfg = BridgeConfig.from_env()
    assert cfg.base_url == "http://10.0.0.2:3000"


def test_rejects_unknown_control_method():
    with pytest.raises(ValidationError):
        BridgeConfig(host="h", port=1, control_method="PATCH")
