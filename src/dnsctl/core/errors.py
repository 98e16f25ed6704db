"""
Error types for dnsctl configuration loading, validation, and output.
"""

from pathlib import Path


class DnsctlError(Exception):
    """Base exception for all dnsctl errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigurationError(DnsctlError):
    """
    Raised when the invocation itself is unusable.

    Examples:
    - No configuration source specified
    """

    pass


class EvaluationError(DnsctlError):
    """
    Raised by the evaluator when a source cannot be turned into a DNSConfig.

    Examples:
    - Missing or unreadable source file
    - Unsupported source format
    - Syntax errors in TOML/YAML/JSON
    - Reference to an undefined variable
    """

    pass


class LoadError(DnsctlError):
    """
    Raised when evaluating a configuration source or reading an IR file fails.

    Wraps the underlying error with the file path for context.
    """

    def __init__(self, source: str | Path, cause: Exception, action: str = "executing"):
        self.source = str(source)
        self.cause = cause
        super().__init__(f"{action} {source}: {cause}")


class PostProcessError(DnsctlError):
    """
    Raised when record-type-specific arguments cannot be expanded.

    Examples:
    - MX record with a single argument
    - SRV port that is not an integer
    """

    pass


class ValidationFailure(DnsctlError):
    """
    Raised when validation reported at least one fatal issue.

    The individual issues have already been printed by the time this
    is raised, so it carries only a generic message.
    """

    def __init__(self, message: str = "exiting due to validation errors"):
        super().__init__(message)


class SerializationError(DnsctlError):
    """
    Raised when the IR cannot be rendered or written.

    Examples:
    - Output directory does not exist
    - Permission denied on the output file
    """

    pass
