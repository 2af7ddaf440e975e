"""
Issuance of CA-signed cluster node certificates.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.x509.oid import ExtendedKeyUsageOID, NameOID

from clustercert.common.config import Config
from clustercert.common.exceptions import FileWriteError, SigningError
from clustercert.common.models import IssueOptions, SubjectAltNames
from clustercert.issuer.ca import CAMaterial, load_ca_material
from clustercert.issuer.keygen import KeyGenerator

logger = logging.getLogger(__name__)

_SIGNATURE_HASHES: dict[str, type[hashes.HashAlgorithm]] = {
    "sha256": hashes.SHA256,
    "sha384": hashes.SHA384,
    "sha512": hashes.SHA512,
}


@dataclass(frozen=True)
class IssuedCertificate:
    """Signed leaf certificate, its private key and their PEM encodings."""

    certificate: x509.Certificate
    private_key: rsa.RSAPrivateKey
    certificate_pem: bytes
    private_key_pem: bytes


def add_years(moment: datetime, years: int) -> datetime:
    """Add calendar years; Feb 29 rolls over to Mar 1 in non-leap years."""
    try:
        return moment.replace(year=moment.year + years)
    except ValueError:
        return moment.replace(year=moment.year + years, month=3, day=1)


class CertificateIssuer:
    """Issues leaf certificates signed by an existing CA."""

    def __init__(self, config: Config | None = None):
        self.config = config or Config()
        try:
            self.signature_hash = _SIGNATURE_HASHES[self.config.SIGNATURE_HASH]
        except KeyError as err:
            msg = f"Unsupported signature hash: {self.config.SIGNATURE_HASH}"
            raise ValueError(msg) from err

    def build_subject(self, options: IssueOptions) -> x509.Name:
        attributes = []
        if options.common_name:
            attributes.append(
                x509.NameAttribute(NameOID.COMMON_NAME, options.common_name)
            )
        attributes.append(
            x509.NameAttribute(NameOID.ORGANIZATION_NAME, options.organization)
        )
        return x509.Name(attributes)

    def build_template(
        self,
        options: IssueOptions,
        names: SubjectAltNames,
        ca_certificate: x509.Certificate,
        now: datetime | None = None,
    ) -> x509.CertificateBuilder:
        """
        Build the unsigned certificate for ``options``.

        The returned builder holds every field except the public key, which
        is bound at signing time.

        Raises:
            SigningError: If a subject or SAN value cannot be encoded
        """
        not_before = (now or datetime.now(timezone.utc)).replace(microsecond=0)
        not_after = add_years(not_before, self.config.VALIDITY_YEARS)

        try:
            builder = (
                x509.CertificateBuilder()
                .subject_name(self.build_subject(options))
                .issuer_name(ca_certificate.subject)
                .serial_number(x509.random_serial_number())
                .not_valid_before(not_before)
                .not_valid_after(not_after)
                .add_extension(
                    x509.BasicConstraints(ca=False, path_length=None), critical=True
                )
                .add_extension(
                    x509.KeyUsage(
                        digital_signature=True,
                        content_commitment=True,
                        key_encipherment=True,
                        data_encipherment=True,
                        key_agreement=True,
                        key_cert_sign=True,
                        crl_sign=False,
                        encipher_only=False,
                        decipher_only=False,
                    ),
                    critical=True,
                )
                .add_extension(
                    x509.ExtendedKeyUsage(
                        [
                            ExtendedKeyUsageOID.SERVER_AUTH,
                            ExtendedKeyUsageOID.CLIENT_AUTH,
                        ]
                    ),
                    critical=False,
                )
            )
            if not names.is_empty():
                general_names: list[x509.GeneralName] = [
                    x509.DNSName(name) for name in names.dns_names
                ]
                general_names.extend(
                    x509.IPAddress(address) for address in names.ip_addresses
                )
                builder = builder.add_extension(
                    x509.SubjectAlternativeName(general_names), critical=False
                )
        except ValueError as err:
            msg = f"Certificate generation failed: {err}"
            raise SigningError(msg) from err

        try:
            ski = ca_certificate.extensions.get_extension_for_class(
                x509.SubjectKeyIdentifier
            )
        except x509.ExtensionNotFound:
            return builder
        return builder.add_extension(
            x509.AuthorityKeyIdentifier.from_issuer_subject_key_identifier(ski.value),
            critical=False,
        )

    def sign(
        self,
        template: x509.CertificateBuilder,
        public_key: rsa.RSAPublicKey,
        ca: CAMaterial,
    ) -> x509.Certificate:
        """Bind ``public_key`` to the template and sign it with the CA key."""
        if not ca.key_matches_certificate():
            msg = (
                "Certificate generation failed: "
                "CA private key does not match the CA certificate"
            )
            raise SigningError(msg)
        try:
            return template.public_key(public_key).sign(
                ca.private_key, self.signature_hash()
            )
        except (ValueError, TypeError) as err:
            msg = f"Certificate generation failed: {err}"
            raise SigningError(msg) from err

    def write_file(self, path: str | Path, data: bytes, description: str) -> None:
        """
        Write ``data`` to ``path``, replacing any existing file.

        New files are created with the configured mode (less the umask). An
        existing file keeps its mode.
        """
        path = Path(path)
        logger.info("Saving server %s file into %s...", description, path)
        try:
            fd = os.open(
                path,
                os.O_WRONLY | os.O_CREAT | os.O_TRUNC,
                self.config.OUTPUT_FILE_MODE,
            )
            with os.fdopen(fd, "wb") as f:
                f.write(data)
        except OSError as err:
            msg = f"Unable to write {description} file to {path}: {err}"
            raise FileWriteError(msg, path) from err

    def issue(self, options: IssueOptions, names: SubjectAltNames) -> IssuedCertificate:
        """
        Issue a certificate and key pair and write both to disk.

        The certificate is written before the key. A failure writing the key
        leaves the certificate file in place.
        """
        ca = load_ca_material(options.ca_crt, options.ca_key)
        template = self.build_template(options, names, ca.certificate)

        keygen = KeyGenerator(options.key_bits, config=self.config)
        private_key = keygen.generate_key()
        certificate = self.sign(template, private_key.public_key(), ca)

        issued = IssuedCertificate(
            certificate=certificate,
            private_key=private_key,
            certificate_pem=certificate.public_bytes(serialization.Encoding.PEM),
            private_key_pem=keygen.private_key_pem(private_key),
        )
        self.write_file(options.out_crt, issued.certificate_pem, "certificate")
        self.write_file(options.out_key, issued.private_key_pem, "private key")
        return issued
