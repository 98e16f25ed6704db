"""Conversion of ``KEY=VALUE`` command-line assignments into evaluator variables."""

from __future__ import annotations

import logging
from collections.abc import Iterable

logger = logging.getLogger(__name__)


def string_slice_to_map(assignments: Iterable[str]) -> dict[str, str]:
    """
    Build a variable mapping from ``KEY=VALUE`` strings.

    Each entry is split at the first ``=`` so values may contain ``=``.
    Entries without ``=`` are dropped, and a repeated key keeps the last value.

    Args:
        assignments: Assignments in command-line order

    Returns:
        Mapping of variable name to value
    """
    variables: dict[str, str] = {}
    for assignment in assignments:
        key, sep, value = assignment.partition("=")
        if not sep:
            logger.debug("Ignoring variable without '=': %r", assignment)
            continue
        variables[key] = value
    return variables
