"""
Configuration settings for cluster certificate issuance.
"""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)


def _parse_log_level(value: str) -> int:
    """Parse a level name or number, falling back to INFO if unknown."""
    normalized = value.strip().upper()
    if normalized.isdigit():
        return int(normalized)
    level = getattr(logging, normalized, None)
    if not isinstance(level, int):
        logger.warning("Invalid log level %r, using INFO", value)
        return logging.INFO
    return level


class Config:
    """Central configuration class for issuance defaults and constants."""

    def __init__(self) -> None:
        # CLI defaults
        self.CA_CRT_PATH: str = "ca.crt"
        self.CA_KEY_PATH: str = "ca.key"
        self.KEY_SIZE: int = 4096
        self.OUT_CRT_PATH: str = "cluster.crt"
        self.OUT_KEY_PATH: str = "cluster.key"

        # Issued certificate settings
        self.VALIDITY_YEARS: int = 10
        self.RSA_PUBLIC_EXPONENT: int = 65537
        self.SIGNATURE_HASH: str = "sha512"
        self.OUTPUT_FILE_MODE: int = 0o644  # rw-r--r--

        # Logging
        self.LOG_LEVEL: int = _parse_log_level(
            os.getenv("CLUSTERCERT_LOG_LEVEL", "INFO")
        )
