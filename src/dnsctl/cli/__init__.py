"""
dnsctl CLI Package.

- ir.py: print-ir and check commands
- utils.py: Shared utilities
"""

from __future__ import annotations

import typer

from dnsctl.cli.ir import check_command, print_ir_command
from dnsctl.cli.utils import get_version, version_callback

app = typer.Typer(
    help="""dnsctl – declarative DNS configuration

Commands:
  • print-ir: Output the validated, normalized configuration as JSON
  • check:    Validate the configuration and report problems
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """dnsctl CLI main callback for global options."""
    ctx.ensure_object(dict)["verbose"] = verbose


app.command(name="print-ir")(print_ir_command)
app.command(name="check")(check_command)


def main() -> None:
    """Entry point for the dnsctl console script."""
    app()


__all__ = [
    "app",
    "main",
    "get_version",
    "version_callback",
]
