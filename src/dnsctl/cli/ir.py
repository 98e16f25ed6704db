"""
IR commands for dnsctl CLI.

- print-ir: Output the intermediate representation after validation
- check: Validate the configuration without output; report to stdout
"""

from __future__ import annotations

import sys

import typer

from dnsctl.cli.utils import configure_logging
from dnsctl.core.pipeline import CheckArgs, PrintIRArgs, check, run_print_ir

DEFAULT_CONFIG = "dnsconfig.toml"
CONFIG_ENV_VAR = "DNSCTL_CONFIG"


def _verbose(ctx: typer.Context) -> bool:
    return bool((ctx.obj or {}).get("verbose", False))


def print_ir_command(
    ctx: typer.Context,
    config: str = typer.Option(
        DEFAULT_CONFIG,
        "--config",
        "-c",
        envvar=CONFIG_ENV_VAR,
        help="File containing the DNS configuration (.toml, .yaml, .json)",
    ),
    dev: bool = typer.Option(
        False, "--dev", help="Load helpers.toml from beside the config instead of built-ins"
    ),
    variable: list[str] | None = typer.Option(
        None, "--variable", "-v", help="Inject a variable as KEY=VALUE (repeatable)"
    ),
    ir: str = typer.Option(
        "", "--ir", help="Read IR JSON (as written by print-ir) instead of evaluating --config"
    ),
    pretty: bool = typer.Option(False, "--pretty", help="Pretty print the IR JSON"),
    out: str = typer.Option("", "--out", help="File to write the IR to (default: stdout)"),
    raw: bool = typer.Option(
        False, "--raw", help="Skip validation and normalization. Just print the evaluated config."
    ),
) -> None:
    """
    Output intermediate representation (IR) after running validation and normalization logic.
    """
    configure_logging(_verbose(ctx), stream=sys.stderr)
    args = PrintIRArgs(
        source=config,
        dev_mode=dev,
        variables=list(variable or []),
        ir_file=ir,
        pretty=pretty,
        output=out,
        raw=raw,
    )
    signal = run_print_ir(args, out=sys.stdout, err=sys.stderr)
    if not signal.ok:
        raise typer.Exit(code=signal.code)


def check_command(
    ctx: typer.Context,
    config: str = typer.Option(
        DEFAULT_CONFIG,
        "--config",
        "-c",
        envvar=CONFIG_ENV_VAR,
        help="File containing the DNS configuration (.toml, .yaml, .json)",
    ),
    dev: bool = typer.Option(
        False, "--dev", help="Load helpers.toml from beside the config instead of built-ins"
    ),
    variable: list[str] | None = typer.Option(
        None, "--variable", "-v", help="Inject a variable as KEY=VALUE (repeatable)"
    ),
    ir: str = typer.Option(
        "", "--ir", help="Read IR JSON (as written by print-ir) instead of evaluating --config"
    ),
) -> None:
    """
    Check and validate the DNS configuration. Output to stdout. Do not access providers.
    """
    # check reports everything on stdout, logs included
    configure_logging(_verbose(ctx), stream=sys.stdout)
    args = CheckArgs(
        source=config, dev_mode=dev, variables=list(variable or []), ir_file=ir
    )
    signal = check(args, out=sys.stdout)
    if not signal.ok:
        raise typer.Exit(code=signal.code)
