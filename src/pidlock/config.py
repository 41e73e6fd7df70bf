"""Configuration management for pidlock."""

import tomllib
from pathlib import Path

import tomli_w
from pydantic import BaseModel, Field

from .constants import CONFIG_FILE, DEFAULT_DIR_MODE, DEFAULT_FILE_MODE


class PidfileConfig(BaseModel):
    """Configuration for the pidfile itself."""

    path: Path | None = Field(default=None, description="Default pidfile path")
    dir_mode: int = Field(default=DEFAULT_DIR_MODE, ge=0, le=0o7777)
    file_mode: int = Field(default=DEFAULT_FILE_MODE, ge=0, le=0o7777)


class PidlockConfig(BaseModel):
    """Root configuration for pidlock."""

    pidfile: PidfileConfig = Field(default_factory=PidfileConfig)


def load_config(config_path: Path | None = None) -> PidlockConfig:
    """Load config from a TOML file.

    Args:
        config_path: Path to the config file, pidlock.toml in the current
            directory if not provided

    Returns:
        Loaded configuration, or defaults if the file doesn't exist
    """
    if config_path is None:
        config_path = Path(CONFIG_FILE)
    if not config_path.exists():
        return PidlockConfig()
    with open(config_path, "rb") as f:
        data = tomllib.load(f)
    return PidlockConfig.model_validate(data)


def write_config_template(config_path: Path, pidfile_path: Path | None = None) -> Path:
    """Write default config template.

    Args:
        config_path: Where to write the config file
        pidfile_path: Pidfile path to put in the template

    Returns:
        Path to the written config file
    """
    template = {
        "pidfile": {
            "path": str(pidfile_path or Path("run") / "app.pid"),
            # TOML has no octal-as-mode type; these are plain integers
            "dir_mode": DEFAULT_DIR_MODE,
            "file_mode": DEFAULT_FILE_MODE,
        },
    }
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "wb") as f:
        tomli_w.dump(template, f)
    return config_path
