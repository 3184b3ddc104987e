"""
meshcheck — CLI entrypoint.

Usage:
    python -m meshcheck.main --help
    meshcheck analyze k8s/
    meshcheck analyzers
"""

from __future__ import annotations

import os
from pathlib import Path

import click

from meshcheck import __version__
from meshcheck.core.observability.logging_config import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="meshcheck")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to meshcheck.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """meshcheck — static analysis for service-mesh gateway configuration."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("MESHCHECK_LOG_LEVEL", "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get("MESHCHECK_LOG_FILE"),
        log_file_level=os.environ.get("MESHCHECK_LOG_FILE_LEVEL"),
    )


from meshcheck.ui.cli.analyze import analyze, analyzers  # noqa: E402

cli.add_command(analyze)
cli.add_command(analyzers)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
