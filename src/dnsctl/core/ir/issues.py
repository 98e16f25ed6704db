"""
Validation issue types for dnsctl IR.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class IssueKind(StrEnum):
    """Severity of a validation issue."""

    WARNING = "warning"
    ERROR = "error"


class Issue(BaseModel):
    """
    A problem reported by validation and normalization.

    Only ``WARNING`` issues are non-fatal; any other kind aborts the run.
    """

    kind: IssueKind
    message: str

    model_config = ConfigDict(frozen=True)

    @classmethod
    def warning(cls, message: str) -> Issue:
        return cls(kind=IssueKind.WARNING, message=message)

    @classmethod
    def error(cls, message: str) -> Issue:
        return cls(kind=IssueKind.ERROR, message=message)

    def __str__(self) -> str:
        return self.message
