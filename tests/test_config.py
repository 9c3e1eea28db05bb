"""
Tests for configuration loading and the admin password check.
"""

import os
import pytest
from pathlib import Path
from unittest.mock import patch

from airline.utils.config import (
    ReservationConfig,
    load_config,
    get_config,
    reset_config,
    verify_admin_password,
)


@pytest.fixture(autouse=True)
def clean_config():
    reset_config()
    yield
    reset_config()


class TestReservationConfig:
    """Test configuration defaults and validation."""

    def test_defaults(self):
        config = ReservationConfig()
        assert config.flight_path == Path("flights.dat")
        assert config.reservation_path == Path("reservations.dat")
        assert config.admin_password == "admin123"
        assert config.log_level == "INFO"

    def test_paths_under_data_dir(self, tmp_path):
        config = ReservationConfig(data_dir=tmp_path, flight_file="f.dat")
        assert config.flight_path == tmp_path / "f.dat"
        assert config.reservation_path == tmp_path / "reservations.dat"

    def test_log_level_normalised(self):
        assert ReservationConfig(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValueError):
            ReservationConfig(log_level="LOUD")

    def test_empty_file_name(self):
        with pytest.raises(ValueError):
            ReservationConfig(flight_file="  ")

    def test_str_hides_password(self):
        config = ReservationConfig(admin_password="s3cret")
        assert "s3cret" not in str(config)


class TestLoadConfig:
    """Test loading from environment variables and .env files."""

    @patch.dict(os.environ, {
        "AIRLINE_DATA_DIR": "/var/lib/airline",
        "AIRLINE_FLIGHT_FILE": "fl.dat",
        "AIRLINE_ADMIN_PASSWORD": "letmein",
        "AIRLINE_LOG_LEVEL": "warning",
    })
    def test_from_environment(self, tmp_path):
        config = load_config(env_file=str(tmp_path / "missing.env"))
        assert config.flight_path == Path("/var/lib/airline/fl.dat")
        assert config.admin_password == "letmein"
        assert config.log_level == "WARNING"

    def test_from_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("AIRLINE_RESERVATION_FILE=bookings.dat\n")
        with patch.dict(os.environ, {}, clear=True):
            config = load_config(env_file=str(env_file))
        assert config.reservation_file == "bookings.dat"

    @patch.dict(os.environ, {"AIRLINE_LOG_LEVEL": "CHATTY"})
    def test_invalid_environment(self, tmp_path):
        with pytest.raises(ValueError, match="Configuration validation failed"):
            load_config(env_file=str(tmp_path / "missing.env"))

    def test_get_config_is_cached(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        first = get_config()
        assert get_config() is first
        reset_config()
        assert get_config() is not first


class TestAdminPassword:
    """Test the admin credential check."""

    def test_correct_password(self):
        assert verify_admin_password(ReservationConfig(), "admin123")

    def test_wrong_password(self):
        config = ReservationConfig(admin_password="admin123")
        assert not verify_admin_password(config, "admin12")
        assert not verify_admin_password(config, "")
