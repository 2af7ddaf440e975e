"""
Pydantic models for issuance inputs.
"""

from __future__ import annotations

from ipaddress import IPv4Address, IPv6Address
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    field_validator,
)

from clustercert.common.exceptions import PreconditionError

# Checked in declaration order, so the first missing value is reported first.
_REQUIRED_MESSAGES: dict[str, str] = {
    "ca_crt": "Please provide a CA certificate file path.",
    "ca_key": "Please provide a CA private key file path.",
    "organization": "Please provide an organisation name.",
    "out_crt": "Please provide a certificate file path.",
    "out_key": "Please provide a private key file path.",
}


class IssueOptions(BaseModel):
    """Immutable set of inputs for a single certificate issuance."""

    model_config = ConfigDict(frozen=True)

    ca_crt: str
    ca_key: str
    organization: str
    out_crt: str
    out_key: str
    common_name: str = ""
    key_bits: int = Field(default=4096, gt=0)

    @field_validator("ca_crt", "ca_key", "organization", "out_crt", "out_key")
    @classmethod
    def _require_value(cls, value: str, info: ValidationInfo) -> str:
        if not value:
            raise ValueError(_REQUIRED_MESSAGES[info.field_name])
        return value

    @classmethod
    def create(cls, **values: Any) -> IssueOptions:
        """Build options, raising PreconditionError instead of ValidationError."""
        try:
            return cls(**values)
        except ValidationError as err:
            raise PreconditionError(_describe_validation_error(err)) from err


class SubjectAltNames(BaseModel):
    """Host identifiers split into DNS names and IP addresses."""

    model_config = ConfigDict(frozen=True)

    dns_names: list[str] = Field(default_factory=list)
    ip_addresses: list[IPv4Address | IPv6Address] = Field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.dns_names and not self.ip_addresses


def _describe_validation_error(err: ValidationError) -> str:
    first = err.errors()[0]
    cause = first.get("ctx", {}).get("error")
    if isinstance(cause, ValueError):
        return str(cause)
    field = ".".join(str(part) for part in first["loc"])
    if field == "key_bits":
        return f"Key size must be a positive integer, got: {first.get('input')!r}"
    return f"{field}: {first['msg']}"
