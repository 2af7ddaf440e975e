"""
RSA key generation for issued certificates.
"""

from __future__ import annotations

import logging

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from clustercert.common.config import Config
from clustercert.common.exceptions import KeyGenerationError

logger = logging.getLogger(__name__)


class KeyGenerator:
    """Key generator for the RSA key pair bound into an issued certificate."""

    def __init__(self, key_size: int, config: Config | None = None):
        self.config = config or Config()
        self.key_size = key_size

    def generate_key(self) -> rsa.RSAPrivateKey:
        """Generate a fresh RSA private key of the configured size."""
        logger.debug("Generating %d-bit RSA key...", self.key_size)
        try:
            return rsa.generate_private_key(
                public_exponent=self.config.RSA_PUBLIC_EXPONENT,
                key_size=self.key_size,
            )
        except (ValueError, TypeError, OverflowError) as err:
            msg = f"Certificate generation failed: {err}"
            raise KeyGenerationError(msg) from err

    @staticmethod
    def private_key_pem(private_key: rsa.RSAPrivateKey) -> bytes:
        """Serialize to an unencrypted PKCS#1 "RSA PRIVATE KEY" PEM block."""
        return private_key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.TraditionalOpenSSL,
            encryption_algorithm=serialization.NoEncryption(),
        )
