"""Reporting of validation issues."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TextIO

import typer

from .ir import Issue, IssueKind


def print_validation_errors(issues: Sequence[Issue], stream: TextIO) -> bool:
    """
    Print validation errors and warnings, one line per issue.

    Issues are printed in the order given. Only ``WARNING`` issues are
    non-fatal; every other kind is reported as an error.

    Args:
        issues: Issues returned by validation and normalization
        stream: Where the report is written

    Returns:
        True if at least one issue is fatal
    """
    if not issues:
        return False

    typer.echo(f"{len(issues)} Validation errors:", file=stream)
    fatal = False
    for issue in issues:
        if issue.kind is IssueKind.WARNING:
            typer.echo(f"WARNING: {issue}", file=stream)
        else:
            fatal = True
            typer.echo(f"ERROR: {issue}", file=stream)
    return fatal
