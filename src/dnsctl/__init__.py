"""
dnsctl - validate and print the intermediate representation of DNS configurations.

Evaluates a declarative DNS configuration source, validates and normalizes
the resulting object graph, and writes it as canonical JSON.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version

from .core import ir
from .core.errors import (
    ConfigurationError,
    DnsctlError,
    EvaluationError,
    LoadError,
    PostProcessError,
    SerializationError,
    ValidationFailure,
)


def _get_version() -> str:
    try:
        return _metadata_version("dnsctl")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()

__all__ = [
    "__version__",
    "ir",
    "DnsctlError",
    "ConfigurationError",
    "EvaluationError",
    "LoadError",
    "PostProcessError",
    "SerializationError",
    "ValidationFailure",
]
