"""
Utility helpers: configuration loading and logging setup.
"""

from .config import (
    ReservationConfig,
    load_config,
    get_config,
    reset_config,
    verify_admin_password,
    configure_logging,
)

__all__ = [
    "ReservationConfig",
    "load_config",
    "get_config",
    "reset_config",
    "verify_admin_password",
    "configure_logging",
]
