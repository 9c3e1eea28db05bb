"""
Environment configuration loader with validation for the reservation core.
"""

import hmac
import logging
import os
from pathlib import Path
from typing import Optional, Dict, Any
from pydantic import BaseModel, Field, field_validator
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ReservationConfig(BaseModel):
    """Configuration passed to the catalog, ledger and reporting services."""

    # Storage Configuration
    data_dir: Path = Field(default=Path("."), description="Directory holding the record files")
    flight_file: str = Field(default="flights.dat", description="Flight table file name")
    reservation_file: str = Field(
        default="reservations.dat", description="Reservation table file name"
    )

    # Administration
    admin_password: str = Field(
        default="admin123", min_length=1, description="Password for admin operations"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard levels."""
        if v.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"Log level must be one of: {VALID_LOG_LEVELS}")
        return v.upper()

    @field_validator("flight_file", "reservation_file")
    @classmethod
    def validate_file_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("File name must not be empty")
        return v

    @property
    def flight_path(self) -> Path:
        return self.data_dir / self.flight_file

    @property
    def reservation_path(self) -> Path:
        return self.data_dir / self.reservation_file

    def __str__(self) -> str:
        """String representation hiding the admin password."""
        return (
            f"ReservationConfig(flights={self.flight_path}, "
            f"reservations={self.reservation_path}, admin_password=***, "
            f"log_level={self.log_level})"
        )


def load_config(env_file: Optional[str] = None) -> ReservationConfig:
    """
    Load configuration from environment variables and .env file.

    Args:
        env_file: Optional path to .env file. If None, looks for .env in current directory.

    Returns:
        ReservationConfig: Validated configuration object

    Raises:
        ValueError: If configuration is invalid
    """
    if env_file is None:
        env_file = ".env"

    if os.path.exists(env_file):
        load_dotenv(env_file)

    config_data: Dict[str, Any] = {
        "data_dir": os.getenv("AIRLINE_DATA_DIR", "."),
        "flight_file": os.getenv("AIRLINE_FLIGHT_FILE", "flights.dat"),
        "reservation_file": os.getenv("AIRLINE_RESERVATION_FILE", "reservations.dat"),
        "admin_password": os.getenv("AIRLINE_ADMIN_PASSWORD", "admin123"),
        "log_level": os.getenv("AIRLINE_LOG_LEVEL", "INFO"),
    }

    try:
        return ReservationConfig(**config_data)
    except Exception as e:
        raise ValueError(f"Configuration validation failed: {e}") from e


def verify_admin_password(config: ReservationConfig, candidate: str) -> bool:
    """Check an admin password attempt in constant time."""
    return hmac.compare_digest(
        candidate.encode("utf-8"), config.admin_password.encode("utf-8")
    )


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the application entry point."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


# Global configuration instance
_config: Optional[ReservationConfig] = None


def get_config() -> ReservationConfig:
    """
    Get the global configuration instance, loading it if necessary.

    Returns:
        ReservationConfig: The global configuration object
    """
    global _config
    if _config is None:
        _config = load_config()
        logger.info(f"Configuration loaded: {_config}")
    return _config


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() reloads it."""
    global _config
    _config = None
