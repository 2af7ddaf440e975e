"""
Command-line interface for cluster certificate issuance.
"""

from __future__ import annotations

import logging

import click

from clustercert import __version__
from clustercert.common.config import Config
from clustercert.common.exceptions import CertificateError
from clustercert.common.logging_utils import setup_logger
from clustercert.common.models import IssueOptions
from clustercert.issuer.identity import classify_identifiers
from clustercert.issuer.issuer import CertificateIssuer

_defaults = Config()


@click.group()
@click.version_option(__version__, prog_name="clustercert")
def cli() -> None:
    """Cluster certificate tooling"""


@cli.command(
    epilog=(
        "Example: clustercert cluster --ca-crt crt/ca.crt --ca-key crt/ca.key "
        "--out-org Acme --out-crt crt/cluster.crt --out-key crt/cluster.key "
        "node1.cluster.local 10.0.0.5"
    )
)
@click.option(
    "--ca-crt",
    default=_defaults.CA_CRT_PATH,
    show_default=True,
    help="The path to the CA certificate file.",
)
@click.option(
    "--ca-key",
    default=_defaults.CA_KEY_PATH,
    show_default=True,
    help="The path to the CA private key file.",
)
@click.option(
    "--key-size",
    default=_defaults.KEY_SIZE,
    show_default=True,
    type=int,
    help="The desired number of bits for the key.",
)
@click.option(
    "--out-com",
    default="",
    help="The common name for the server certificate.",
)
@click.option(
    "--out-org",
    default="",
    help="The organisation name for the server certificate (required).",
)
@click.option(
    "--out-crt",
    default=_defaults.OUT_CRT_PATH,
    show_default=True,
    help="The path destination for the server certificate file.",
)
@click.option(
    "--out-key",
    default=_defaults.OUT_KEY_PATH,
    show_default=True,
    help="The path destination for the server private key file.",
)
@click.argument("hosts", nargs=-1)
def cluster(  # noqa: PLR0913
    ca_crt: str,
    ca_key: str,
    key_size: int,
    out_com: str,
    out_org: str,
    out_crt: str,
    out_key: str,
    hosts: tuple[str, ...],
) -> None:
    """Create a new cluster certificate and key.

    HOSTS are hostnames and IP addresses added as subject alternative names.
    """
    config = Config()
    setup_logger(logging.getLogger("clustercert"), config.LOG_LEVEL)

    try:
        options = IssueOptions.create(
            ca_crt=ca_crt,
            ca_key=ca_key,
            organization=out_org,
            out_crt=out_crt,
            out_key=out_key,
            common_name=out_com,
            key_bits=key_size,
        )
        names = classify_identifiers(hosts)
        CertificateIssuer(config=config).issue(options, names)
    except CertificateError as err:
        raise click.ClickException(str(err)) from err


if __name__ == "__main__":
    cli()
