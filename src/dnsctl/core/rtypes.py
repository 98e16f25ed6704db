"""
Record-type-specific post-processing.

Records may be written with positional ``args`` instead of named fields,
e.g. ``{type = "MX", args = [10, "mail.example.com."]}``. This module
expands those arguments into the typed fields of :class:`RecordConfig`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from .errors import PostProcessError
from .ir import DomainConfig, RecordConfig

logger = logging.getLogger(__name__)


def _as_int(value: Any, field: str) -> int:
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise ValueError(f"{field} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{field} must be an integer, got {value!r}") from None


def _target_only(record: RecordConfig, args: Sequence[Any]) -> None:
    (target,) = args
    record.target = str(target)


def _mx(record: RecordConfig, args: Sequence[Any]) -> None:
    preference, target = args
    record.mxpreference = _as_int(preference, "preference")
    record.target = str(target)


def _srv(record: RecordConfig, args: Sequence[Any]) -> None:
    priority, weight, port, target = args
    record.srvpriority = _as_int(priority, "priority")
    record.srvweight = _as_int(weight, "weight")
    record.srvport = _as_int(port, "port")
    record.target = str(target)


def _caa(record: RecordConfig, args: Sequence[Any]) -> None:
    flag, tag, value = args
    record.caaflag = _as_int(flag, "flag")
    record.caatag = str(tag)
    record.target = str(value)


# Record type -> (number of args, expander)
RTYPES: dict[str, tuple[int, Callable[[RecordConfig, Sequence[Any]], None]]] = {
    "A": (1, _target_only),
    "AAAA": (1, _target_only),
    "ALIAS": (1, _target_only),
    "CNAME": (1, _target_only),
    "NS": (1, _target_only),
    "PTR": (1, _target_only),
    "TXT": (1, _target_only),
    "MX": (2, _mx),
    "SRV": (4, _srv),
    "CAA": (3, _caa),
}


def post_process(domains: Sequence[DomainConfig]) -> None:
    """
    Expand positional record arguments in place.

    Raises:
        PostProcessError: If a record's arguments do not fit its type
    """
    for domain in domains:
        for record in domain.records:
            if record.args is None:
                continue

            rtype = record.type.upper()
            label = f"{domain.name}: {rtype} record '{record.name}'"
            if rtype not in RTYPES:
                raise PostProcessError(f"{label}: type does not accept positional args")

            count, expand = RTYPES[rtype]
            if len(record.args) != count:
                raise PostProcessError(
                    f"{label}: expected {count} args, got {len(record.args)}"
                )
            try:
                expand(record, record.args)
            except ValueError as e:
                raise PostProcessError(f"{label}: {e}") from e

            logger.debug("Expanded %s", label)
            record.args = None
