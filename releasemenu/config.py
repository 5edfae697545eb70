"""Configuration loader for releasemenu."""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import dotenv_values

from .keys import DEFAULT_TTY

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".releasemenu"
ENV_FILE = CONFIG_DIR / ".env"
SETTINGS_FILE = CONFIG_DIR / "settings.json"

MAX_VERBOSITY = 2


@dataclass
class Config:
    """releasemenu configuration."""

    verbosity: int = 0  # 0 = actionable only, 1 = + skipped, 2 = + ignored
    tty: str = DEFAULT_TTY
    color: bool = True
    log_dir: Path | None = None  # None = ~/.releasemenu/logs


def load_env_file():
    """Load RELEASEMENU_* settings from ~/.releasemenu/.env."""
    if not ENV_FILE.exists():
        return {}

    try:
        values = dotenv_values(ENV_FILE)
    except (OSError, UnicodeDecodeError):
        logger.debug(f"Failed to parse env file: {ENV_FILE}")
        return {}
    return {key: value for key, value in values.items() if key.startswith("RELEASEMENU_")}


def load_settings_file():
    """Load config from settings.json file."""
    if not SETTINGS_FILE.exists():
        return {}

    try:
        return json.loads(SETTINGS_FILE.read_text())
    except (OSError, ValueError):
        logger.debug(f"Failed to parse settings file: {SETTINGS_FILE}")
        return {}


def parse_verbosity(value) -> int:
    """Parse a verbosity level and clamp it to 0..2."""
    try:
        level = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"Verbosity must be an integer, got {value!r}") from None
    return max(0, min(MAX_VERBOSITY, level))


def _is_truthy(value) -> bool:
    return str(value).strip().lower() in ("1", "true", "yes", "on")


def load_config(verbosity_override=None, tty_override=None):
    """Load configuration from overrides, environment and config files."""
    env_config = load_env_file()
    settings_config = load_settings_file()

    def lookup(env_var, settings_key):
        # Priority: environment > .env file > settings.json
        value = os.getenv(env_var)
        if value is None:
            value = env_config.get(env_var)
        if value is None:
            value = settings_config.get(settings_key)
        return value

    verbosity = verbosity_override
    if verbosity is None:
        verbosity = lookup("RELEASEMENU_VERBOSITY", "verbosity")

    tty = tty_override or lookup("RELEASEMENU_TTY", "tty") or DEFAULT_TTY

    no_color = lookup("RELEASEMENU_NO_COLOR", "no_color")

    log_dir = lookup("RELEASEMENU_LOG_DIR", "log_dir")
    log_dir = Path(log_dir).expanduser() if log_dir else CONFIG_DIR / "logs"

    return Config(
        verbosity=parse_verbosity(verbosity) if verbosity is not None else 0,
        tty=tty,
        color=not (no_color is not None and _is_truthy(no_color)),
        log_dir=log_dir,
    )
