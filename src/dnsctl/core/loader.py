"""Canonical DNSConfig loader.

Single implementation of the source -> evaluate -> post-process pipeline.
All code that needs a configuration object graph should load it from here.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from pathlib import Path

from pydantic import ValidationError

from .errors import ConfigurationError, LoadError
from .evaluator import Evaluator, evaluate_source
from .ir import DNSConfig, DomainConfig
from .rtypes import post_process
from .variables import string_slice_to_map

logger = logging.getLogger(__name__)

PostProcessor = Callable[[Sequence[DomainConfig]], None]


def load_ir_file(path: str) -> DNSConfig:
    """Read a previously printed IR JSON file back into a DNSConfig.

    Raises:
        LoadError: If the file cannot be read or is not valid IR
    """
    logger.debug("Reading IR from %s", path)
    try:
        return DNSConfig.model_validate_json(Path(path).read_bytes())
    except (OSError, ValidationError) as e:
        raise LoadError(path, e, action="reading") from e


def load_dns_config(
    source: str,
    dev_mode: bool = False,
    variables: Sequence[str] = (),
    *,
    ir_file: str = "",
    evaluator: Evaluator = evaluate_source,
    post_processor: PostProcessor = post_process,
) -> DNSConfig:
    """Evaluate a configuration source and post-process its records.

    When ``ir_file`` is given the configuration is read from that IR JSON
    instead; it is already post-processed, so neither the evaluator nor the
    post-processor runs.

    Args:
        source: Path to the configuration source
        dev_mode: Passed through to the evaluator
        variables: ``KEY=VALUE`` assignments injected into the evaluator
        ir_file: IR JSON to load instead of evaluating ``source``

    Returns:
        The configuration object graph

    Raises:
        ConfigurationError: If no source is given
        LoadError: If the evaluator fails or the IR file cannot be read
        PostProcessError: If record arguments cannot be expanded
    """
    if ir_file:
        return load_ir_file(ir_file)

    if not source:
        raise ConfigurationError("no config specified")

    logger.debug("Evaluating %s (dev_mode=%s)", source, dev_mode)
    try:
        config = evaluator(source, dev_mode, string_slice_to_map(variables))
    except Exception as e:
        raise LoadError(source, e) from e

    post_processor(config.domains)
    return config
