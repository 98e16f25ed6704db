"""
dnsctl Intermediate Representation (IR) types.

All types are re-exported from this package.
"""

from .config import (
    DNSConfig,
    DNSProviderConfig,
    DomainConfig,
    RecordConfig,
    RegistrarConfig,
)
from .issues import Issue, IssueKind

__all__ = [
    "DNSConfig",
    "DNSProviderConfig",
    "DomainConfig",
    "RecordConfig",
    "RegistrarConfig",
    "Issue",
    "IssueKind",
]
