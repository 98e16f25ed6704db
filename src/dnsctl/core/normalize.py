"""
Validation and normalization of the configuration object graph.

Normalizes names, types, and TTLs in place and returns the problems found
as :class:`Issue` values. Errors abort the run; warnings are only reported.
"""

from __future__ import annotations

import ipaddress
import logging
from collections import defaultdict

from . import rfc4183
from .ir import DNSConfig, DomainConfig, Issue, RecordConfig
from .rtypes import RTYPES

logger = logging.getLogger(__name__)

# =============================================================================
# Validation Constants
# =============================================================================

DEFAULT_TTL = 300
LOW_TTL_WARN_THRESHOLD = 60
TXT_MAX_STRING_OCTETS = 255

KNOWN_RECORD_TYPES = frozenset(RTYPES)

# Types whose target is a host name
HOST_TARGET_TYPES = frozenset({"ALIAS", "CNAME", "MX", "NS", "PTR", "SRV"})

CAA_TAGS = frozenset({"issue", "issuewild", "iodef"})


def _normalize_domain_name(domain: DomainConfig) -> Issue | None:
    name = domain.name.strip().lower().rstrip(".")
    if rfc4183.is_cidr(name):
        try:
            name = rfc4183.reverse_domain_name(name)
        except ValueError as e:
            domain.name = name
            return Issue.error(f"domain {name}: {e}")
    domain.name = name
    return None


def _normalize_record(domain: DomainConfig, record: RecordConfig) -> list[Issue]:
    issues: list[Issue] = []
    record.type = record.type.upper()

    name = record.name.strip().lower()
    if name.endswith("."):
        fqdn = name.rstrip(".")
        if fqdn == domain.name:
            name = "@"
        elif fqdn.endswith("." + domain.name):
            name = fqdn[: -len(domain.name) - 1]
        else:
            issues.append(
                Issue.error(f"{domain.name}: record name '{record.name}' is not within the zone")
            )
    elif name == "" or name == domain.name:
        name = "@"
    elif name.endswith("." + domain.name):
        issues.append(
            Issue.error(
                f"{domain.name}: label '{record.name}' ends with the domain name; "
                "use a short name or add a trailing dot"
            )
        )
    record.name = name

    if record.ttl is None or record.ttl == 0:
        record.ttl = DEFAULT_TTL
    return issues


def _check_record(domain: DomainConfig, record: RecordConfig) -> list[Issue]:
    issues: list[Issue] = []
    where = f"{domain.name}: {record.type} record '{record.name}'"

    if record.type not in KNOWN_RECORD_TYPES:
        return [Issue.error(f"{where}: unsupported record type")]

    if record.ttl is not None and record.ttl < LOW_TTL_WARN_THRESHOLD:
        issues.append(Issue.warning(f"{where}: TTL {record.ttl} is below {LOW_TTL_WARN_THRESHOLD}"))

    if record.type == "A":
        try:
            ipaddress.IPv4Address(record.target)
        except ValueError:
            issues.append(Issue.error(f"{where}: target '{record.target}' is not an IPv4 address"))
    elif record.type == "AAAA":
        try:
            ipaddress.IPv6Address(record.target)
        except ValueError:
            issues.append(Issue.error(f"{where}: target '{record.target}' is not an IPv6 address"))
    elif record.type == "CNAME" and record.name == "@":
        issues.append(Issue.error(f"{where}: CNAME is not allowed at the apex"))
    elif record.type == "TXT" and len(record.target.encode("utf-8")) > TXT_MAX_STRING_OCTETS:
        issues.append(
            Issue.warning(
                f"{where}: TXT value is longer than {TXT_MAX_STRING_OCTETS} octets "
                "and will be split by some providers"
            )
        )
    elif record.type == "MX" and record.mxpreference is None:
        issues.append(Issue.warning(f"{where}: no preference given, using 0"))
        record.mxpreference = 0
    elif record.type == "SRV" and record.srvport == 0:
        issues.append(Issue.warning(f"{where}: port 0 means the service is unavailable"))
    elif record.type == "CAA" and (record.caatag or "") not in CAA_TAGS:
        issues.append(
            Issue.error(f"{where}: CAA tag '{record.caatag}' is not one of {sorted(CAA_TAGS)}")
        )

    if record.type in HOST_TARGET_TYPES:
        target = record.target
        if not target:
            issues.append(Issue.error(f"{where}: target is empty"))
        elif "." in target.rstrip(".") and not target.endswith("."):
            issues.append(
                Issue.error(
                    f"{where}: target '{target}' includes periods but does not end in period"
                )
            )

    return issues


def _check_label_conflicts(domain: DomainConfig) -> list[Issue]:
    issues: list[Issue] = []
    by_label: dict[str, list[str]] = defaultdict(list)
    for record in domain.records:
        by_label[record.name].append(record.type)

    for label, types in by_label.items():
        if "CNAME" in types and len(types) > 1:
            issues.append(
                Issue.error(f"{domain.name}: label '{label}' has a CNAME and other records")
            )

    seen: set[tuple] = set()
    for record in domain.records:
        key = record.identity()
        if key in seen:
            issues.append(
                Issue.error(
                    f"{domain.name}: exact duplicate {record.type} record "
                    f"'{record.name}' -> '{record.target}'"
                )
            )
        seen.add(key)
    return issues


def validate_and_normalize_config(config: DNSConfig) -> list[Issue]:
    """
    Validate ``config`` and normalize it in place.

    Args:
        config: Object graph produced by the evaluator

    Returns:
        Errors and warnings in the order they were found
    """
    issues: list[Issue] = []
    seen_domains: set[str] = set()

    for domain in config.domains:
        issue = _normalize_domain_name(domain)
        if issue:
            issues.append(issue)

        if domain.name in seen_domains:
            issues.append(Issue.error(f"domain {domain.name} is declared more than once"))
        seen_domains.add(domain.name)

        if not domain.registrar:
            issues.append(Issue.error(f"domain {domain.name} has no registrar"))
        elif config.find_registrar(domain.registrar) is None:
            issues.append(
                Issue.error(f"domain {domain.name}: registrar '{domain.registrar}' is not declared")
            )

        if not domain.dns_providers:
            issues.append(Issue.warning(f"domain {domain.name} has no DNS providers"))
        for provider in domain.dns_providers:
            if config.find_dns_provider(provider) is None:
                issues.append(
                    Issue.error(f"domain {domain.name}: DNS provider '{provider}' is not declared")
                )

        for record in domain.records:
            issues.extend(_normalize_record(domain, record))
            issues.extend(_check_record(domain, record))

        issues.extend(_check_label_conflicts(domain))

    logger.debug("Validation found %d issue(s)", len(issues))
    return issues
