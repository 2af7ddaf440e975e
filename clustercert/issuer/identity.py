"""
Classification of host identifiers into DNS names and IP addresses.
"""

from __future__ import annotations

import ipaddress
from typing import Iterable

from clustercert.common.models import SubjectAltNames


def parse_ip(value: str) -> ipaddress.IPv4Address | ipaddress.IPv6Address | None:
    """Parse ``value`` as an IP address, folding IPv4-mapped IPv6 to IPv4."""
    try:
        address = ipaddress.ip_address(value)
    except ValueError:
        return None
    if isinstance(address, ipaddress.IPv6Address):
        # Zone-scoped addresses cannot be encoded in a SAN entry
        if address.scope_id is not None:
            return None
        if address.ipv4_mapped is not None:
            return address.ipv4_mapped
    return address


def classify_identifiers(identifiers: Iterable[str]) -> SubjectAltNames:
    """
    Split host identifiers into DNS names and IP addresses.

    Order is preserved within each list and duplicates are kept. Anything
    that does not parse as an IP address is taken as a DNS name verbatim.
    """
    dns_names: list[str] = []
    ip_addresses: list[ipaddress.IPv4Address | ipaddress.IPv6Address] = []
    for identifier in identifiers:
        address = parse_ip(identifier)
        if address is None:
            dns_names.append(identifier)
        else:
            ip_addresses.append(address)
    return SubjectAltNames(dns_names=dns_names, ip_addresses=ip_addresses)
