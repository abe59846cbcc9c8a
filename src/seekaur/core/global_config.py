"""Global configuration data structures and loading.

Provides immutable config loaded from ~/.seekaur/config.toml. The file is
optional; every key has a default.
"""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

DEFAULT_AUR_URL = "https://aur.archlinux.org"
DEFAULT_REPO_LABEL = "aur"


@dataclass(frozen=True)
class GlobalConfig:
    """Immutable global configuration data.

    Loaded once at CLI entry point and stored in SeekaurContext.
    """

    aur_url: str
    repo_label: str

    @staticmethod
    def default() -> "GlobalConfig":
        return GlobalConfig(aur_url=DEFAULT_AUR_URL, repo_label=DEFAULT_REPO_LABEL)


def default_config_path() -> Path:
    """Return the config path, honoring SEEKAUR_CONFIG if set."""
    override = os.environ.get("SEEKAUR_CONFIG")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".seekaur" / "config.toml"


def _string_setting(data: dict, key: str, default: str, config_path: Path) -> str:
    value = data.get(key, default)
    if not isinstance(value, str) or not value:
        raise ValueError(f"'{key}' in {config_path} must be a non-empty string")
    return value


def load_config(config_path: Path, env: dict[str, str] | None = None) -> GlobalConfig:
    """Load config from a TOML file, applying environment overrides.

    Args:
        config_path: Path to config.toml (may not exist)
        env: Environment mapping, defaults to os.environ

    Returns:
        GlobalConfig with defaults for anything not configured

    Raises:
        ValueError: If the file is not valid TOML or a value is malformed
    """
    if env is None:
        env = dict(os.environ)

    data: dict = {}
    if config_path.exists():
        try:
            data = tomllib.loads(config_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in {config_path}: {e}") from e

    aur_url = _string_setting(data, "aur_url", DEFAULT_AUR_URL, config_path)
    if env.get("SEEKAUR_AUR_URL"):
        aur_url = env["SEEKAUR_AUR_URL"]

    return GlobalConfig(
        aur_url=aur_url.rstrip("/"),
        repo_label=_string_setting(data, "repo_label", DEFAULT_REPO_LABEL, config_path),
    )
