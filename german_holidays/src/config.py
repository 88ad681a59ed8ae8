"""Load and provide typed access to config.yaml."""

from pathlib import Path

import yaml

from .regions import Region

LANGUAGES = ("en", "de")

_DEFAULTS = {
    "default_region": "BY",
    "language": "en",
}


def load_config(path: Path | None = None) -> dict:
    """Load config.yaml and return as dict with defaults merged."""
    if path is None:
        path = package_root() / "config.yaml"
    with open(path, encoding="utf-8") as f:
        stored = yaml.safe_load(f) or {}

    cfg = {**_DEFAULTS, **stored}

    codes = {r.value for r in Region}
    if cfg["default_region"] not in codes:
        raise ValueError(f"Unknown default_region: {cfg['default_region']!r}")
    if cfg["language"] not in LANGUAGES:
        raise ValueError(f"Unknown language: {cfg['language']!r}")
    return cfg


def package_root() -> Path:
    """Return the german_holidays directory."""
    return Path(__file__).parent.parent
