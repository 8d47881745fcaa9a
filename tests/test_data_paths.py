"""
Tests for data_paths module.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from src.infra.data_paths import (
    ensure_data_directories,
    get_data_root,
    get_env_bool,
    get_env_float,
    get_logs_dir,
    get_project_root,
    get_store_path,
)

class TestGetProjectRoot:
    """Tests for get_project_root function."""

    def test_returns_existing_directory(self):
        result = get_project_root()
        assert isinstance(result, Path)
        assert result.is_dir()

    def test_contains_main_py(self):
        """Should be the project root containing main.py."""
        assert (get_project_root() / "main.py").exists()
        assert (get_project_root() / "pyproject.toml").exists()

class TestStorePath:
    """Tests for get_store_path function."""

    def test_default(self):
        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop("STORE_DB_PATH", None)
            assert get_store_path() == get_data_root() / "studio.db"

    def test_absolute_override(self, tmp_path):
        target = tmp_path / "custom.db"
        with patch.dict(os.environ, {"STORE_DB_PATH": str(target)}):
            assert get_store_path() == target

    def test_relative_override_resolved_against_root(self):
        with patch.dict(os.environ, {"STORE_DB_PATH": "var/store.db"}):
            assert get_store_path() == get_project_root() / "var" / "store.db"

class TestEnvHelpers:
    """Tests for environment variable helpers."""

    @pytest.mark.parametrize("value, expected", [
        ("true", True), ("1", True), ("YES", True), ("off", False), ("0", False),
    ])
    def test_get_env_bool(self, value, expected):
        with patch.dict(os.environ, {"TEST_FLAG": value}):
            assert get_env_bool("TEST_FLAG") is expected

    def test_get_env_bool_default(self):
        with patch.dict(os.environ, {"TEST_FLAG": "maybe"}):
            assert get_env_bool("TEST_FLAG", default=True) is True

    def test_get_env_float(self):
        with patch.dict(os.environ, {"TEST_FLOAT": "0.5", "TEST_BAD": "warm"}):
            assert get_env_float("TEST_FLOAT", 0.75) == 0.5
            assert get_env_float("TEST_BAD", 0.75) == 0.75
            assert get_env_float("TEST_MISSING_FLOAT", 0.75) == 0.75

class TestEnsureDataDirectories:
    """Tests for ensure_data_directories function."""

    def test_creates_directories(self, tmp_path):
        env = {"STORE_DB_PATH": str(tmp_path / "data" / "studio.db"), "LOG_DIR": str(tmp_path / "logs")}
        with patch.dict(os.environ, env):
            result = ensure_data_directories()

            assert result == {"data": tmp_path / "data", "logs": tmp_path / "logs"}
            assert (tmp_path / "data").is_dir()
            assert (tmp_path / "logs").is_dir()
            assert get_logs_dir() == tmp_path / "logs"

    def test_idempotent(self, tmp_path):
        env = {"STORE_DB_PATH": str(tmp_path / "studio.db"), "LOG_DIR": str(tmp_path / "logs")}
        with patch.dict(os.environ, env):
            assert ensure_data_directories() == ensure_data_directories()
