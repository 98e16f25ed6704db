"""
Evaluation of declarative DNS configuration sources.

A source is a TOML, YAML, or JSON document:

    [registrars.none]
    type = "NONE"

    [dns_providers.bind]
    type = "BIND"

    [[domains]]
    name = "example.com"
    registrar = "none"
    dns_providers = { bind = -1 }
    records = [
        { type = "A", name = "@", target = "${WEB_IP}" },
        { type = "MX", name = "@", args = [10, "mail.example.com."] },
    ]

String values may reference injected variables as ``${NAME}``; ``$${``
produces a literal ``${``. Records without a TTL receive the helper default.
"""

from __future__ import annotations

import json
import logging
import re
import tomllib
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .errors import EvaluationError
from .ir import DNSConfig, DNSProviderConfig, DomainConfig, RecordConfig, RegistrarConfig

logger = logging.getLogger(__name__)

# Built-in helper settings; a helpers.toml next to the source replaces
# these in dev mode.
DEFAULT_HELPERS: dict[str, Any] = {"ttl": 300}
HELPERS_FILE = "helpers.toml"

_VARIABLE_RE = re.compile(r"\$\$\{|\$\{([A-Za-z_][A-Za-z0-9_]*)\}")

# Signature shared by all evaluators: (source, dev_mode, variables) -> DNSConfig
Evaluator = Callable[[str, bool, Mapping[str, str]], DNSConfig]


def _read_document(path: Path) -> Any:
    suffix = path.suffix.lower()
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise EvaluationError(f"reading source: {e}") from e

    try:
        if suffix == ".toml":
            return tomllib.loads(text)
        if suffix in (".yaml", ".yml"):
            return yaml.safe_load(text) or {}
        if suffix == ".json":
            return json.loads(text)
    except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise EvaluationError(f"parsing {path.name}: {e}") from e

    raise EvaluationError(f"unsupported source format '{suffix}' (expected .toml, .yaml, or .json)")


def _load_helpers(path: Path, dev_mode: bool) -> dict[str, Any]:
    helpers = dict(DEFAULT_HELPERS)
    if not dev_mode:
        return helpers

    helpers_path = path.parent / HELPERS_FILE
    if helpers_path.exists():
        logger.debug("Dev mode: loading helpers from %s", helpers_path)
        try:
            helpers.update(tomllib.loads(helpers_path.read_text(encoding="utf-8")))
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise EvaluationError(f"loading {helpers_path}: {e}") from e
    return helpers


def substitute_variables(value: Any, variables: Mapping[str, str]) -> Any:
    """
    Replace ``${NAME}`` references in every string within ``value``.

    Raises:
        EvaluationError: If a referenced variable is not defined
    """
    if isinstance(value, str):

        def replace(match: re.Match[str]) -> str:
            name = match.group(1)
            if name is None:
                return "${"
            if name not in variables:
                raise EvaluationError(f"{name} is not defined")
            return variables[name]

        return _VARIABLE_RE.sub(replace, value)
    if isinstance(value, list):
        return [substitute_variables(item, variables) for item in value]
    if isinstance(value, dict):
        return {key: substitute_variables(item, variables) for key, item in value.items()}
    return value


def _parse_named(data: Any, section: str) -> list[dict[str, Any]]:
    if not data:
        return []
    if not isinstance(data, dict):
        raise EvaluationError(f"'{section}' must be a table of name to settings")

    entries = []
    for name, settings in data.items():
        settings = dict(settings or {})
        if "type" not in settings:
            raise EvaluationError(f"{section}.{name}: missing 'type'")
        kind = settings.pop("type")
        # Remaining keys are provider settings unless given as an explicit meta table
        meta = settings.pop("meta", None) or settings
        meta = {key: str(val) for key, val in meta.items()}
        entries.append({"name": name, "type": kind, "meta": meta})
    return entries


def _parse_record(data: dict[str, Any], default_ttl: int | None) -> RecordConfig:
    record = RecordConfig(**data)
    if record.ttl is None:
        record.ttl = default_ttl
    return record


def _parse_domain(data: dict[str, Any], helpers: Mapping[str, Any]) -> DomainConfig:
    data = dict(data)
    defaults = data.pop("defaults", {}) or {}
    default_ttl = defaults.get("ttl", helpers.get("ttl"))
    records = [_parse_record(r, default_ttl) for r in data.pop("records", []) or []]
    return DomainConfig(**data, records=records)


def evaluate_source(source: str, dev_mode: bool, variables: Mapping[str, str]) -> DNSConfig:
    """
    Evaluate a configuration source into a DNSConfig.

    Args:
        source: Path to the TOML, YAML, or JSON source
        dev_mode: Load helper settings from a helpers.toml beside the source
        variables: Values for ``${NAME}`` references

    Returns:
        The configuration object graph

    Raises:
        EvaluationError: If the source cannot be read, parsed, or built
    """
    path = Path(source)
    document = _read_document(path)
    if not isinstance(document, dict):
        raise EvaluationError("top level of the source must be a table/mapping")

    helpers = _load_helpers(path, dev_mode)
    document = substitute_variables(document, variables)

    defaults = document.get("defaults", {}) or {}
    helpers = {**helpers, **defaults}

    try:
        config = DNSConfig(
            registrars=[
                RegistrarConfig(**r) for r in _parse_named(document.get("registrars"), "registrars")
            ],
            dns_providers=[
                DNSProviderConfig(**p)
                for p in _parse_named(document.get("dns_providers"), "dns_providers")
            ],
            domains=[_parse_domain(d, helpers) for d in document.get("domains", []) or []],
        )
    except (ValidationError, TypeError, ValueError) as e:
        raise EvaluationError(str(e)) from e

    logger.debug("Evaluated %s: %d domain(s)", source, len(config.domains))
    return config
