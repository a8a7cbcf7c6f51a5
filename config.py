"""Configuration management for skillbook."""

import os

# Define path constants directly to avoid circular imports with utils
# (utils.terminal_ui imports Config, and utils.runtime is in the utils package)
_RUNTIME_DIR = os.path.join(os.path.expanduser("~"), ".skillbook")
_CONFIG_FILE = os.path.join(_RUNTIME_DIR, "config")

_VALID_THEMES = ("dark", "light")
_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Default configuration template
_DEFAULT_CONFIG = """\
# skillbook Configuration

# Directory holding user skills (one sub-directory per skill, each with a SKILL.md).
# Defaults to ~/.skillbook/skills when empty.
SKILLS_DIR=

# Set to false to hide the bundled Effective Java skills
INCLUDE_BUNDLED_SKILLS=true

# Logging (only active with --verbose)
LOG_LEVEL=DEBUG

# Terminal output theme: dark or light
TUI_THEME=dark
"""


def _load_config(path: str) -> dict[str, str]:
    """Parse a KEY=VALUE config file, skipping comments and blank lines."""
    cfg: dict[str, str] = {}
    if not os.path.isfile(path):
        return cfg
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" not in line:
                continue
            key, _, value = line.partition("=")
            # Strip inline comments (# ...) from the value
            if "#" in value:
                value = value[: value.index("#")]
            cfg[key.strip()] = value.strip()
    return cfg


def _ensure_config():
    """Ensure ~/.skillbook/config exists, create with defaults if not."""
    if not os.path.exists(_CONFIG_FILE):
        os.makedirs(_RUNTIME_DIR, exist_ok=True)
        with open(_CONFIG_FILE, "w", encoding="utf-8") as f:
            f.write(_DEFAULT_CONFIG)


# Ensure config exists and load it
_ensure_config()
_cfg = _load_config(_CONFIG_FILE)


class Config:
    """Configuration for skillbook.

    All configuration is centralized here. Access config values directly via Config.XXX.
    """

    # Skills
    SKILLS_DIR = os.path.expanduser(_cfg.get("SKILLS_DIR") or os.path.join(_RUNTIME_DIR, "skills"))
    INCLUDE_BUNDLED_SKILLS = _cfg.get("INCLUDE_BUNDLED_SKILLS", "true").lower() == "true"

    # Logging Configuration
    # Note: Logging is controlled via --verbose flag, logs go to ~/.skillbook/logs/
    LOG_LEVEL = _cfg.get("LOG_LEVEL", "DEBUG").upper()

    # Terminal output
    TUI_THEME = _cfg.get("TUI_THEME", "dark")  # "dark" or "light"

    @classmethod
    def validate(cls):
        """Validate configuration values.

        Raises:
            ValueError: If a value is out of range
        """
        if cls.TUI_THEME not in _VALID_THEMES:
            raise ValueError(
                f"TUI_THEME must be one of {', '.join(_VALID_THEMES)} (got '{cls.TUI_THEME}'). "
                "Please fix it in ~/.skillbook/config."
            )
        if cls.LOG_LEVEL not in _VALID_LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {', '.join(_VALID_LOG_LEVELS)} (got '{cls.LOG_LEVEL}'). "
                "Please fix it in ~/.skillbook/config."
            )
