"""Tests for pidlock configuration."""

import tomllib
from pathlib import Path

import pytest
from pydantic import ValidationError

from pidlock.config import PidfileConfig, PidlockConfig, load_config, write_config_template


def test_defaults():
    """Default config has no pidfile path and standard modes."""
    config = PidlockConfig()
    assert config.pidfile.path is None
    assert config.pidfile.dir_mode == 0o755
    assert config.pidfile.file_mode == 0o644


def test_load_missing_config_returns_defaults(tmp_path: Path):
    """A missing config file yields defaults."""
    config = load_config(tmp_path / "pidlock.toml")
    assert config == PidlockConfig()


def test_load_config(tmp_path: Path):
    """Values in the TOML file override defaults."""
    config_path = tmp_path / "pidlock.toml"
    config_path.write_text('[pidfile]\npath = "/run/app.pid"\nfile_mode = 384\n')

    config = load_config(config_path)

    assert config.pidfile.path == Path("/run/app.pid")
    assert config.pidfile.file_mode == 0o600
    assert config.pidfile.dir_mode == 0o755


def test_load_default_location(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Without a path, pidlock.toml in the current directory is used."""
    (tmp_path / "pidlock.toml").write_text('[pidfile]\npath = "app.pid"\n')
    monkeypatch.chdir(tmp_path)
    assert load_config().pidfile.path == Path("app.pid")


def test_invalid_mode_rejected():
    """Modes outside the permission bits are rejected."""
    with pytest.raises(ValidationError):
        PidfileConfig(file_mode=0o10000)


def test_write_config_template(tmp_path: Path):
    """The template is valid TOML that loads back into a config."""
    config_path = tmp_path / "conf" / "pidlock.toml"
    written = write_config_template(config_path, Path("/run/app.pid"))

    assert written == config_path
    with open(config_path, "rb") as f:
        data = tomllib.load(f)
    assert data["pidfile"]["path"] == "/run/app.pid"

    config = load_config(config_path)
    assert config.pidfile.path == Path("/run/app.pid")
    assert config.pidfile.file_mode == 0o644
