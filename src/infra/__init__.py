"""
Infrastructure module - logging, paths, and environment helpers.
"""

from .data_paths import (
    get_env_bool,
    get_env_float,
    get_project_root,
    get_data_root,
    get_store_path,
    get_logs_dir,
    ensure_data_directories,
)

from .logging_config import setup_logging, DailyRotatingFileHandler, LOGGER_NAME

__all__ = [
    # data_paths
    "get_env_bool",
    "get_env_float",
    "get_project_root",
    "get_data_root",
    "get_store_path",
    "get_logs_dir",
    "ensure_data_directories",
    # logging
    "setup_logging",
    "DailyRotatingFileHandler",
    "LOGGER_NAME",
]
