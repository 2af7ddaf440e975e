"""
Loading of CA certificate and private key material.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from cryptography import x509
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.rsa import (
    RSAPrivateKey,
    RSAPublicKey,
)

from clustercert.common.exceptions import CertificateParseError, FileReadError
from clustercert.common.pem import decode_pem_block

logger = logging.getLogger(__name__)

CERTIFICATE_PEM_TYPE = "CERTIFICATE"
RSA_PRIVATE_KEY_PEM_TYPE = "RSA PRIVATE KEY"


@dataclass(frozen=True)
class CAMaterial:
    """CA certificate together with its RSA signing key."""

    certificate: x509.Certificate
    private_key: RSAPrivateKey

    def key_matches_certificate(self) -> bool:
        certificate_key = self.certificate.public_key()
        if not isinstance(certificate_key, RSAPublicKey):
            return False
        return (
            certificate_key.public_numbers()
            == self.private_key.public_key().public_numbers()
        )


def _read_file(path: Path) -> bytes:
    try:
        with path.open("rb") as f:
            return f.read()
    except OSError as err:
        msg = f"Could not read file: {str(path)!r}"
        raise FileReadError(msg, path) from err


def load_ca_certificate(path: str | Path) -> x509.Certificate:
    """Read and parse a PEM-encoded CA certificate."""
    path = Path(path)
    der_bytes = decode_pem_block(_read_file(path), CERTIFICATE_PEM_TYPE, path)
    try:
        return x509.load_der_x509_certificate(der_bytes)
    except ValueError as err:
        msg = f"Could not parse CA certificate {str(path)!r}: {err}"
        raise CertificateParseError(msg, path) from err


def load_ca_private_key(path: str | Path) -> RSAPrivateKey:
    """Read and parse a PEM-encoded PKCS#1 RSA private key."""
    path = Path(path)
    der_bytes = decode_pem_block(_read_file(path), RSA_PRIVATE_KEY_PEM_TYPE, path)
    try:
        private_key = serialization.load_der_private_key(der_bytes, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as err:
        msg = f"Could not parse CA private key {str(path)!r}: {err}"
        raise CertificateParseError(msg, path) from err
    if not isinstance(private_key, RSAPrivateKey):
        msg = f"CA private key {str(path)!r} is not an RSA key"
        raise CertificateParseError(msg, path)
    return private_key


def load_ca_material(cert_path: str | Path, key_path: str | Path) -> CAMaterial:
    """Load the CA certificate first, then its private key."""
    certificate = load_ca_certificate(cert_path)
    private_key = load_ca_private_key(key_path)
    logger.debug("Loaded CA certificate %s", certificate.subject.rfc4514_string())
    return CAMaterial(certificate=certificate, private_key=private_key)
