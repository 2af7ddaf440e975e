"""
Custom exceptions for certificate issuance.
"""

from __future__ import annotations

from pathlib import Path


class CertificateError(Exception):
    """Base exception for every issuance failure."""


class PreconditionError(CertificateError):
    """Required inputs are missing or invalid."""


class FileAccessError(CertificateError):
    """Exception for unreadable or unwritable files."""

    def __init__(self, message: str, path: str | Path) -> None:
        super().__init__(message)
        self.path = Path(path)


class FileReadError(FileAccessError):
    """An input file could not be read."""


class FileWriteError(FileAccessError):
    """An output file could not be written."""


class FormatError(CertificateError):
    """Exception for input files with unusable contents."""

    def __init__(self, message: str, path: str | Path) -> None:
        super().__init__(message)
        self.path = Path(path)


class MalformedPEMError(FormatError):
    """No PEM block of the expected type was found."""


class CertificateParseError(FormatError):
    """The PEM payload is not a valid DER structure of the expected kind."""


class CryptoError(CertificateError):
    """Base exception for failures inside the crypto backend."""


class KeyGenerationError(CryptoError):
    """The RSA key pair could not be generated."""


class SigningError(CryptoError):
    """The certificate could not be signed with the CA key."""
