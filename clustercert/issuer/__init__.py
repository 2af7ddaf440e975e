"""Certificate issuance workflow."""

from clustercert.issuer.ca import CAMaterial, load_ca_material
from clustercert.issuer.identity import classify_identifiers
from clustercert.issuer.issuer import CertificateIssuer, IssuedCertificate
from clustercert.issuer.keygen import KeyGenerator

__all__ = [
    "CAMaterial",
    "CertificateIssuer",
    "IssuedCertificate",
    "KeyGenerator",
    "classify_identifiers",
    "load_ca_material",
]
