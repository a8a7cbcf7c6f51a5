"""Runtime directory management for skillbook.

All runtime data is stored under ~/.skillbook/ directory:
- config: Configuration file (created by config.py on first import)
- skills/: User skills, each in its own directory with a SKILL.md
- logs/: Log files (only created with --verbose)
"""

import os

RUNTIME_DIR = os.path.join(os.path.expanduser("~"), ".skillbook")


def get_log_dir() -> str:
    """Get the log directory path.

    Returns:
        Path to ~/.skillbook/logs/
    """
    return os.path.join(RUNTIME_DIR, "logs")


def ensure_runtime_dirs(create_logs: bool = False) -> None:
    """Ensure runtime directories exist.

    Creates ~/.skillbook/skills/, plus ~/.skillbook/logs/ when create_logs is set.
    ~/.skillbook/config is created by config.py on first import.

    Args:
        create_logs: Whether to create the logs directory (for --verbose mode)
    """
    os.makedirs(os.path.join(RUNTIME_DIR, "skills"), exist_ok=True)

    if create_logs:
        os.makedirs(get_log_dir(), exist_ok=True)
