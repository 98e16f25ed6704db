"""
Reverse zone naming for classless (RFC 4183) delegations.

Domains can be declared as a CIDR block (``192.0.2.0/24``); they are
converted to their ``in-addr.arpa`` / ``ip6.arpa`` zone name during
normalization. Blocks that are not aligned on an octet boundary use the
RFC 4183 form ``<first>-<prefix>.<rest>``. Older releases used the
RFC 2317 ``<first>/<prefix>`` form for those, so their use is recorded and
announced once by :func:`print_warning` at the end of a run.
"""

from __future__ import annotations

import ipaddress
from typing import TextIO

import typer

_classless_zones: list[str] = []


def is_cidr(name: str) -> bool:
    """Return True if ``name`` looks like a CIDR block rather than a zone name."""
    if "/" not in name:
        return False
    try:
        ipaddress.ip_network(name, strict=False)
    except ValueError:
        return False
    return True


def reverse_domain_name(cidr: str) -> str:
    """
    Convert a CIDR block to its reverse zone name.

    Args:
        cidr: Network such as ``"192.0.2.0/24"`` or ``"2001:db8::/32"``

    Returns:
        Reverse zone name without a trailing dot

    Raises:
        ValueError: If ``cidr`` is not a valid network or the prefix cannot
            be expressed as a reverse zone
    """
    network = ipaddress.ip_network(cidr, strict=False)
    prefix = network.prefixlen

    if network.version == 6:
        if prefix % 4:
            raise ValueError(f"IPv6 prefix /{prefix} is not on a nibble boundary: {cidr}")
        nibbles = network.network_address.exploded.replace(":", "")[: prefix // 4]
        return ".".join([*reversed(nibbles), "ip6", "arpa"])

    octets = str(network.network_address).split(".")
    if prefix % 8 == 0:
        labels = octets[: prefix // 8]
        return ".".join([*reversed(labels), "in-addr", "arpa"])

    if prefix < 8:
        raise ValueError(f"IPv4 prefix /{prefix} is too short for a reverse zone: {cidr}")

    full = prefix // 8
    parent = ".".join(reversed(octets[:full]))
    name = f"{octets[full]}-{prefix}.{parent}.in-addr.arpa"
    if name not in _classless_zones:
        _classless_zones.append(name)
    return name


def print_warning(stream: TextIO | None = None) -> None:
    """Print the classless reverse zone notice if any zone needed it, then reset."""
    if not _classless_zones:
        return
    zones = ", ".join(_classless_zones)
    typer.echo(
        "WARNING: classless reverse zones are named in RFC 4183 format "
        f"(<first>-<prefix>); RFC 2317 names are no longer generated: {zones}",
        file=stream,
    )
    _classless_zones.clear()


def reset() -> None:
    """Forget recorded classless zones."""
    _classless_zones.clear()
