"""
Settings files for bezierclip.

Reads ``[interval]`` settings from a project file (``.bezierclip.toml`` or
``bezierclip.toml``, searched upward to the repository root) layered over
``~/.config/bezierclip/config.toml``. Values only take effect once an
application installs them, normally via
``bezierclip.tolerance.load_current_epsilon()``.
"""

import logging
import sys
import warnings
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from bezierclip.exceptions import ConfigError

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomli as tomllib
    except ImportError:
        tomllib = None  # type: ignore[assignment]

logger = logging.getLogger(__name__)

CONFIG_FILENAMES = [".bezierclip.toml", "bezierclip.toml"]

USER_CONFIG_PATH = Path.home() / ".config" / "bezierclip" / "config.toml"

KNOWN_KEYS = {
    "interval": {"epsilon"},
}


@dataclass
class IntervalConfig:
    """Tolerance settings for approximate interval comparisons."""

    epsilon: float = 1e-5


@dataclass
class Config:
    """Interval settings merged from the user and project files."""

    interval: IntervalConfig = field(default_factory=IntervalConfig)

    # dotted key -> file the value came from
    _sources: dict = field(default_factory=dict, repr=False)

    @classmethod
    def load(cls, start_dir: Path | None = None) -> "Config":
        """
        Read the user file, then the nearest project file above *start_dir*.

        Raises:
            ConfigError: If a file is unreadable, not TOML, or holds an
                invalid epsilon
        """
        config = cls()
        sources: dict[str, str] = {}

        candidates = []
        if USER_CONFIG_PATH.exists():
            candidates.append(USER_CONFIG_PATH)
        project_config = _find_project_config(start_dir or Path.cwd())
        if project_config:
            candidates.append(project_config)

        for path in candidates:
            data = _load_toml_file(path)
            if data:
                _merge_config(config, data, str(path), sources)

        config._sources = sources
        return config

    def get_source(self, key: str) -> str:
        """Return the file that set dotted *key*, or ``"default"``."""
        return self._sources.get(key, "default")


def _find_project_config(start_dir: Path) -> Path | None:
    """Walk up from *start_dir* to the first directory holding ``.git``."""
    current = start_dir.resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            if (current / filename).is_file():
                return current / filename
        if (current / ".git").exists() or current.parent == current:
            return None
        current = current.parent


def _load_toml_file(path: Path) -> dict[str, Any] | None:
    if tomllib is None:
        warnings.warn(
            "tomli package not installed. Config file support requires 'pip install tomli' for Python < 3.11.",
            stacklevel=2,
        )
        return None

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}", context={"file": str(path)}) from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}", context={"file": str(path)}) from e

    logger.debug(f"Loaded config from {path}")
    return data


def _merge_config(
    config: Config, data: dict[str, Any], source: str, sources: dict[str, str]
) -> None:
    for key in data:
        if key not in KNOWN_KEYS:
            warnings.warn(f"Unknown config key '{key}' in {source}", stacklevel=3)

    interval_data = data.get("interval", {})
    _warn_unknown_keys(interval_data, KNOWN_KEYS["interval"], "interval", source)
    if "epsilon" in interval_data:
        config.interval.epsilon = _parse_epsilon(interval_data["epsilon"], source)
        sources["interval.epsilon"] = source


def _parse_epsilon(value: Any, source: str) -> float:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(
            "interval.epsilon must be a number",
            context={"file": source, "value": repr(value)},
        )
    if value < 0:
        raise ConfigError(
            "interval.epsilon must not be negative",
            context={"file": source, "value": value},
            suggestions=["Use a small positive tolerance such as 1e-5"],
        )
    return float(value)


def _warn_unknown_keys(data: dict[str, Any], known: set[str], section: str, source: str) -> None:
    for key in data:
        if key not in known:
            warnings.warn(f"Unknown config key '{section}.{key}' in {source}", stacklevel=4)


def generate_template() -> str:
    """Return a commented ``.bezierclip.toml`` with every option."""
    return """# bezierclip configuration file
# Place as .bezierclip.toml in project root or ~/.config/bezierclip/config.toml for user defaults

[interval]
# Tolerance for are_near() calls that pass no eps. Applied once the
# application calls bezierclip.tolerance.load_current_epsilon() at start-up;
# the BEZIERCLIP_EPSILON environment variable takes precedence.
# epsilon = 1e-5
"""


def get_config_paths() -> dict[str, Path | None]:
    """Report the user and project files ``Config.load()`` would read."""
    return {
        "user": USER_CONFIG_PATH if USER_CONFIG_PATH.exists() else None,
        "project": _find_project_config(Path.cwd()),
    }


__all__ = [
    "Config",
    "ConfigError",
    "IntervalConfig",
    "generate_template",
    "get_config_paths",
]
