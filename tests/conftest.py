from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.x509.oid import NameOID

from clustercert.common.models import IssueOptions


@dataclass(frozen=True)
class CAFiles:
    crt_path: Path
    key_path: Path
    certificate: x509.Certificate
    private_key: rsa.RSAPrivateKey


def _write_ca(directory: Path) -> CAFiles:
    private_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    name = x509.Name(
        [
            x509.NameAttribute(NameOID.COMMON_NAME, "Test Cluster CA"),
            x509.NameAttribute(NameOID.ORGANIZATION_NAME, "Acme"),
        ]
    )
    now = datetime.now(timezone.utc)
    certificate = (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(private_key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now - timedelta(days=1))
        .not_valid_after(now + timedelta(days=3650))
        .add_extension(x509.BasicConstraints(ca=True, path_length=None), critical=True)
        .add_extension(
            x509.SubjectKeyIdentifier.from_public_key(private_key.public_key()),
            critical=False,
        )
        .sign(private_key, hashes.SHA256())
    )

    crt_path = directory / "ca.crt"
    key_path = directory / "ca.key"
    crt_path.write_bytes(certificate.public_bytes(serialization.Encoding.PEM))
    key_path.write_bytes(
        private_key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.TraditionalOpenSSL,
            encryption_algorithm=serialization.NoEncryption(),
        )
    )
    return CAFiles(crt_path, key_path, certificate, private_key)


@pytest.fixture(scope="session")
def ca_files(tmp_path_factory: pytest.TempPathFactory) -> CAFiles:
    """Self-signed RSA CA shared across the test session."""
    return _write_ca(tmp_path_factory.mktemp("ca"))


@pytest.fixture(scope="session")
def other_ca_files(tmp_path_factory: pytest.TempPathFactory) -> CAFiles:
    """A second, unrelated CA for mismatch tests."""
    return _write_ca(tmp_path_factory.mktemp("other-ca"))


@pytest.fixture
def options(ca_files: CAFiles, tmp_path: Path) -> IssueOptions:
    return IssueOptions(
        ca_crt=str(ca_files.crt_path),
        ca_key=str(ca_files.key_path),
        organization="Acme",
        common_name="node1",
        out_crt=str(tmp_path / "cluster.crt"),
        out_key=str(tmp_path / "cluster.key"),
        key_bits=2048,
    )
