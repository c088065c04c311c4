"""Tests for YAML config loading and overrides."""
import pytest
import yaml

import board_server
from issueboard.config import Config, ConfigError


def test_defaults_when_file_missing(tmp_path, monkeypatch):
    monkeypatch.delenv("ISSUEBOARD_HOST", raising=False)
    monkeypatch.delenv("ISSUEBOARD_PORT", raising=False)
    cfg = Config.load(str(tmp_path / "nope.yaml"))
    assert cfg.host == "127.0.0.1"
    assert cfg.port == 3000
    assert cfg.seed is True
    assert cfg.not_found_status == 400
    assert cfg.strict_status is False


def test_loads_yaml_and_ignores_unknown_keys(tmp_path, monkeypatch):
    monkeypatch.delenv("ISSUEBOARD_PORT", raising=False)
    path = tmp_path / "issueboard.yaml"
    with open(path, "w") as f:
        yaml.dump({
            "port": "8080",
            "strict_status": True,
            "log_level": "debug",
            "api_url": "http://example.test/",
            "mystery": 1,
        }, f)
    cfg = Config.load(str(path))
    assert cfg.port == 8080
    assert cfg.strict_status is True
    assert cfg.log_level == "DEBUG"
    assert cfg.api_url == "http://example.test"


def test_config_path_from_env(tmp_path, monkeypatch):
    path = tmp_path / "board.yaml"
    path.write_text("not_found_status: 404\n")
    monkeypatch.setenv("ISSUEBOARD_CONFIG", str(path))
    assert Config.load().not_found_status == 404


def test_env_overrides_file(tmp_path, monkeypatch):
    path = tmp_path / "board.yaml"
    path.write_text("host: 10.0.0.1\nport: 4000\n")
    monkeypatch.setenv("ISSUEBOARD_HOST", "0.0.0.0")
    monkeypatch.setenv("ISSUEBOARD_PORT", "5000")
    cfg = Config.load(str(path))
    assert cfg.host == "0.0.0.0"
    assert cfg.port == 5000


def test_broken_yaml_falls_back_to_defaults(tmp_path, monkeypatch):
    monkeypatch.delenv("ISSUEBOARD_PORT", raising=False)
    path = tmp_path / "board.yaml"
    path.write_text("port: [unclosed\n")
    assert Config.load(str(path)).port == 3000


@pytest.mark.parametrize("content", [
    "port: not-a-number\n",
    "port: 70000\n",
    "not_found_status: 200\n",
])
def test_invalid_values_raise(tmp_path, monkeypatch, content):
    monkeypatch.delenv("ISSUEBOARD_PORT", raising=False)
    path = tmp_path / "board.yaml"
    path.write_text(content)
    with pytest.raises(ConfigError):
        Config.load(str(path))


def test_main_applies_cli_flags(tmp_path, monkeypatch):
    """CLI flags win over the config file; app.run gets the result."""
    monkeypatch.delenv("ISSUEBOARD_HOST", raising=False)
    monkeypatch.delenv("ISSUEBOARD_PORT", raising=False)
    path = tmp_path / "board.yaml"
    path.write_text("port: 4000\n")
    seen = {}

    def fake_run(self, host=None, port=None, **kwargs):
        seen["host"] = host
        seen["port"] = port
        seen["issues"] = len(self.extensions["issue_store"])

    monkeypatch.setattr(board_server.Flask, "run", fake_run)
    board_server.main(["--config", str(path), "--port", "5001", "--no-seed"])
    assert seen == {"host": "127.0.0.1", "port": 5001, "issues": 0}


@pytest.mark.parametrize("content", [
    "api_url: null\n",
    "host: 8080\n",
    "log_level: [debug]\n",
])
def test_non_string_settings_raise(tmp_path, monkeypatch, content):
    monkeypatch.delenv("ISSUEBOARD_HOST", raising=False)
    monkeypatch.delenv("ISSUEBOARD_PORT", raising=False)
    path = tmp_path / "board.yaml"
    path.write_text(content)
    with pytest.raises(ConfigError, match="must be a string"):
        Config.load(str(path))


def test_undecodable_file_falls_back_to_defaults(tmp_path, monkeypatch):
    monkeypatch.delenv("ISSUEBOARD_PORT", raising=False)
    path = tmp_path / "board.yaml"
    path.write_bytes(b"port: 4000\ntitle: \xff\xfe\xfa\n")
    assert Config.load(str(path)).port == 3000


def test_default_config_is_read_from_working_directory(tmp_path, monkeypatch):
    monkeypatch.delenv("ISSUEBOARD_CONFIG", raising=False)
    monkeypatch.delenv("ISSUEBOARD_PORT", raising=False)
    (tmp_path / "issueboard.yaml").write_text("port: 4321\n")
    monkeypatch.chdir(tmp_path)
    assert Config.load().port == 4321
