# Cluster certificate issuance

__version__ = "0.1.0"

from clustercert.common.exceptions import CertificateError
from clustercert.common.models import IssueOptions, SubjectAltNames
from clustercert.issuer import (
    CertificateIssuer,
    IssuedCertificate,
    classify_identifiers,
)

__all__ = [
    "CertificateError",
    "CertificateIssuer",
    "IssueOptions",
    "IssuedCertificate",
    "SubjectAltNames",
    "__version__",
    "classify_identifiers",
]
