"""
CLI commands for analysis.

Thin wrappers over ``meshcheck.core.use_cases.analyze``.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from meshcheck.core.models.diagnostic import Level
from meshcheck.core.models.settings import Settings

_LEVEL_CHOICE = click.Choice([level.name.lower() for level in Level], case_sensitive=False)

_LEVEL_COLORS = {Level.ERROR: "red", Level.WARNING: "yellow", Level.INFO: "cyan"}


def _load_settings(ctx: click.Context) -> Settings:
    """Load meshcheck.yml, exiting with an error message if it's invalid."""
    from meshcheck.core.config.loader import ConfigError, load_settings

    try:
        return load_settings(ctx.obj.get("config_path"))
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)


@click.command("analyze")
@click.argument("paths", nargs=-1, required=True, type=click.Path(path_type=Path))
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option(
    "--namespace", "-n", default=None,
    help="Namespace for resources that don't declare one.",
)
@click.option(
    "--suppress", "-S", "suppress", multiple=True,
    help="Suppress a finding: CODE=Kind namespace/name (globs allowed).",
)
@click.option("--output-threshold", type=_LEVEL_CHOICE, default=None,
              help="Lowest level to print.")
@click.option("--failure-threshold", type=_LEVEL_CHOICE, default=None,
              help="Lowest level that makes the command fail.")
@click.pass_context
def analyze(
    ctx: click.Context,
    paths: tuple[Path, ...],
    as_json: bool,
    namespace: str | None,
    suppress: tuple[str, ...],
    output_threshold: str | None,
    failure_threshold: str | None,
) -> None:
    """Analyze mesh configuration files (gateway secret references)."""
    from meshcheck.core.models.suppression import Suppression
    from meshcheck.core.services.manifests import ManifestError
    from meshcheck.core.use_cases.analyze import run_analysis

    settings = _load_settings(ctx)

    updates: dict = {}
    if namespace:
        updates["default_namespace"] = namespace
    if suppress:
        try:
            extra = [Suppression.parse(s) for s in suppress]
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="--suppress") from e
        updates["suppress"] = [*settings.suppress, *extra]
    if output_threshold:
        updates["output_threshold"] = Level.parse(output_threshold)
    if failure_threshold:
        updates["failure_threshold"] = Level.parse(failure_threshold)
    if updates:
        settings = settings.model_copy(update=updates)

    try:
        result = run_analysis(paths, settings=settings)
    except ManifestError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(1 if result.failed else 0)

    quiet = ctx.obj.get("quiet", False)

    for diagnostic in result.visible:
        click.secho(str(diagnostic), fg=_LEVEL_COLORS[diagnostic.level])

    if not result.diagnostics:
        if not quiet:
            click.secho(
                f"✅ No validation issues found when analyzing {len(result.files)} file(s).",
                fg="green",
            )
    elif not quiet:
        click.echo()
        click.echo(
            f"   {result.count(Level.ERROR)} error(s), "
            f"{result.count(Level.WARNING)} warning(s), "
            f"{result.count(Level.INFO)} info"
        )

    if not quiet:
        if result.suppressed:
            click.echo(f"   {result.suppressed} suppressed")
        for name, reason in result.skipped.items():
            click.secho(f"   ⏭  {name} skipped ({reason})", fg="yellow")

    if result.failed:
        sys.exit(1)


@click.command("analyzers")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def analyzers(ctx: click.Context, as_json: bool) -> None:
    """List the available analyzers and the resource kinds they read."""
    from meshcheck.core.analysis.registry import default_registry

    settings = _load_settings(ctx)
    registry = default_registry(fallback=settings.fallback)
    info = registry.analyzer_info()

    if as_json:
        click.echo(json.dumps(info, indent=2))
        return

    click.secho("🔍 Available analyzers:", fg="cyan", bold=True)
    for entry in info:
        disabled = " (disabled)" if entry["name"] in settings.disabled_analyzers else ""
        click.echo(f"   • {entry['name']}{disabled}")
        click.echo(f"       {entry['description']}")
        click.echo(f"       inputs: {', '.join(entry['inputs'])}")
