"""
Serialization of the configuration object graph as JSON IR.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TextIO

import typer

from .errors import SerializationError
from .ir import DNSConfig

logger = logging.getLogger(__name__)

# Output target that accepts and discards everything written to it.
DISCARD = os.devnull


@dataclass
class PrintJSONArgs:
    """Output options for the IR serializer.

    Attributes:
        pretty: Indent with two spaces instead of the compact form
        output: File to write; empty means the given stream
    """

    pretty: bool = False
    output: str = ""


def ir_payload(config: DNSConfig) -> dict[str, Any]:
    """Return the JSON-compatible IR representation of ``config``."""
    return config.model_dump(mode="json", by_alias=True, exclude_none=True)


def render_json(config: DNSConfig, pretty: bool = False) -> str:
    """Render ``config`` as canonical JSON text."""
    payload = ir_payload(config)
    try:
        if pretty:
            return json.dumps(payload, indent=2, ensure_ascii=False)
        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"rendering IR: {e}") from e


def print_json(args: PrintJSONArgs, config: DNSConfig, stream: TextIO) -> None:
    """
    Write the IR for ``config`` to a file or to ``stream``.

    A named output file is created or truncated and receives the JSON
    without a trailing newline. Without an output file the JSON is written
    to ``stream`` followed by a newline.

    Raises:
        SerializationError: If rendering fails or the file cannot be written
    """
    text = render_json(config, pretty=args.pretty)

    if args.output:
        logger.debug("Writing IR to %s", args.output)
        try:
            with Path(args.output).open("wb") as f:
                f.write(text.encode("utf-8"))
        except OSError as e:
            raise SerializationError(f"writing {args.output}: {e}") from e
        return

    typer.echo(text, file=stream)
