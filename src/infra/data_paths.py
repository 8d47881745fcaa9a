"""
Data path helpers for the content studio.

Directory structure:
data/
 └── studio.db                 # Key-value store (API key + history)

logs/                          # Daily log files

Environment Variables:
- STORE_DB_PATH: Override the key-value store location (default: data/studio.db)
- LOG_DIR: Override the log directory (default: logs)
"""

import logging
import os
from pathlib import Path

logger = logging.getLogger("scripture_studio")

# =============================================================================
# Environment Variable Helpers
# =============================================================================

def get_env_bool(key: str, default: bool = False) -> bool:
    """Get boolean value from environment variable."""
    val = os.getenv(key, "").lower()
    if val in ("true", "1", "yes", "on"):
        return True
    elif val in ("false", "0", "no", "off"):
        return False
    return default


def get_env_float(key: str, default: float) -> float:
    """Get float value from environment variable."""
    val = os.getenv(key)
    if val is not None:
        try:
            return float(val)
        except ValueError:
            logger.warning(f"[DataPaths] Invalid float for {key}: {val}, using default: {default}")
    return default

# =============================================================================
# Base Paths (relative to project root)
# =============================================================================

def get_project_root() -> Path:
    """
    Get the project root directory.

    File is at src/infra/data_paths.py, so project root is 2 levels up.

    Returns:
        Path: Project root directory
    """
    return Path(__file__).parent.parent.parent.resolve()

def get_data_root() -> Path:
    """Get the data/ directory path."""
    return get_project_root() / "data"

def get_store_path() -> Path:
    """
    Get the key-value store database path.

    Respects STORE_DB_PATH; relative values are resolved against the
    project root.
    """
    env_path = os.getenv("STORE_DB_PATH")
    if env_path:
        path = Path(env_path)
        if not path.is_absolute():
            path = get_project_root() / path
        return path
    return get_data_root() / "studio.db"

def get_logs_dir() -> Path:
    """Get the log directory (LOG_DIR or logs/)."""
    env_path = os.getenv("LOG_DIR")
    if env_path:
        return Path(env_path)
    return get_project_root() / "logs"

def ensure_data_directories() -> dict:
    """
    Create the data and log directories if missing.

    Returns:
        dict: Name -> path of every directory ensured
    """
    directories = {
        "data": get_store_path().parent,
        "logs": get_logs_dir(),
    }
    for name, path in directories.items():
        if not path.exists():
            path.mkdir(parents=True, exist_ok=True)
            logger.info(f"[DataPaths] Created {name} directory: {path}")
    return directories
