"""
PEM envelope decoding for CA input files.
"""

from __future__ import annotations

from pathlib import Path

from asn1crypto import pem

from clustercert.common.exceptions import MalformedPEMError


def decode_pem_block(data: bytes, expected_type: str, source: str | Path) -> bytes:
    """
    Return the DER payload of the first PEM block in ``data``.

    Args:
        data: Raw file contents
        expected_type: Required PEM label, e.g. "CERTIFICATE"
        source: File the data was read from, used in error messages

    Raises:
        MalformedPEMError: If there is no PEM block or its label differs
    """
    if not pem.detect(data):
        msg = f"No PEM data found in file: {str(source)!r}"
        raise MalformedPEMError(msg, source)

    try:
        pem_type, _headers, der_bytes = pem.unarmor(data)
    except ValueError as err:
        msg = f"Malformed PEM data in file {str(source)!r}: {err}"
        raise MalformedPEMError(msg, source) from err

    if pem_type != expected_type:
        msg = (
            f"Expected PEM type {expected_type!r} in file {str(source)!r}, "
            f"found {pem_type!r}"
        )
        raise MalformedPEMError(msg, source)
    return der_bytes
