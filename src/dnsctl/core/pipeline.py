"""
The print-ir and check pipelines.

Both run the same stages (load, optional validation, serialization) and
differ only in where output goes and what is printed on success:

- print-ir: IR to a file or ``out``; issues and failures to ``err``;
  validation can be skipped with ``raw``.
- check: IR is discarded; everything goes to ``out``; "No errors." is
  printed on success.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import TextIO

import typer

from . import rfc4183
from .errors import DnsctlError, ValidationFailure
from .evaluator import Evaluator, evaluate_source
from .ir import DNSConfig, Issue
from .issues import print_validation_errors
from .loader import PostProcessor, load_dns_config
from .normalize import validate_and_normalize_config
from .rtypes import post_process
from .serializer import DISCARD, PrintJSONArgs, print_json

logger = logging.getLogger(__name__)

Validator = Callable[[DNSConfig], Sequence[Issue]]


@dataclass
class Collaborators:
    """The replaceable stages a pipeline run delegates to."""

    evaluator: Evaluator = evaluate_source
    post_processor: PostProcessor = post_process
    validator: Validator = validate_and_normalize_config
    warning_emitter: Callable[[TextIO], None] = rfc4183.print_warning


@dataclass
class PrintIRArgs:
    """Arguments for the print-ir command."""

    source: str = ""
    dev_mode: bool = False
    variables: list[str] = field(default_factory=list)
    ir_file: str = ""
    pretty: bool = False
    output: str = ""
    raw: bool = False


@dataclass
class CheckArgs:
    """Arguments for the check command."""

    source: str = ""
    dev_mode: bool = False
    variables: list[str] = field(default_factory=list)
    ir_file: str = ""


@dataclass(frozen=True)
class ExitSignal:
    """Outcome of a pipeline run as a process exit code and message."""

    code: int = 0
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.code == 0


def exit_signal(error: DnsctlError | None) -> ExitSignal:
    """Map a pipeline error (or its absence) to an exit signal."""
    if error is None:
        return ExitSignal()
    return ExitSignal(code=1, message=str(error))


def _run(
    source: str,
    dev_mode: bool,
    variables: Sequence[str],
    ir_file: str,
    json_args: PrintJSONArgs,
    raw: bool,
    out: TextIO,
    err: TextIO,
    collaborators: Collaborators,
) -> None:
    rfc4183.reset()
    config = load_dns_config(
        source,
        dev_mode,
        variables,
        ir_file=ir_file,
        evaluator=collaborators.evaluator,
        post_processor=collaborators.post_processor,
    )

    if raw:
        logger.debug("Raw mode: skipping validation and normalization")
    else:
        issues = collaborators.validator(config)
        if print_validation_errors(issues, err):
            raise ValidationFailure()

    print_json(json_args, config, out)


def print_ir(
    args: PrintIRArgs,
    *,
    out: TextIO,
    err: TextIO,
    collaborators: Collaborators | None = None,
) -> None:
    """
    Load, validate, and print the IR.

    Raises:
        ConfigurationError: If no source is given
        LoadError: If evaluation fails
        PostProcessError: If record arguments cannot be expanded
        ValidationFailure: If validation reported a fatal issue
        SerializationError: If the IR cannot be written
    """
    _run(
        args.source,
        args.dev_mode,
        args.variables,
        args.ir_file,
        PrintJSONArgs(pretty=args.pretty, output=args.output),
        args.raw,
        out,
        err,
        collaborators or Collaborators(),
    )


def run_print_ir(
    args: PrintIRArgs,
    *,
    out: TextIO,
    err: TextIO,
    collaborators: Collaborators | None = None,
) -> ExitSignal:
    """Run print-ir and report a failure on ``err``."""
    try:
        print_ir(args, out=out, err=err, collaborators=collaborators)
    except DnsctlError as e:
        signal = exit_signal(e)
        typer.echo(signal.message, file=err)
        return signal
    return exit_signal(None)


def check(
    args: CheckArgs,
    *,
    out: TextIO,
    collaborators: Collaborators | None = None,
) -> ExitSignal:
    """
    Load and validate without printing the IR.

    All output, including failures, goes to ``out``. The reverse zone
    notice is emitted whether or not the run succeeded.
    """
    collaborators = collaborators or Collaborators()
    error: DnsctlError | None = None
    try:
        _run(
            args.source,
            args.dev_mode,
            args.variables,
            args.ir_file,
            PrintJSONArgs(pretty=False, output=DISCARD),
            False,
            out,
            out,
            collaborators,
        )
    except DnsctlError as e:
        error = e
    finally:
        collaborators.warning_emitter(out)

    signal = exit_signal(error)
    if signal.ok:
        typer.echo("No errors.", file=out)
    else:
        typer.echo(signal.message, file=out)
    return signal
