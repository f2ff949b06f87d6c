"""Command-line interface for HookFlow.

This module provides CLI commands to discover, list, validate and
document hooks. Hooks are loaded from Python modules (``--module``) or
source files and directories (``--path``); when neither is given, the
sources configured in settings are used.
"""

import json
from typing import Any, NoReturn

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from hookflow.core.config import get_settings
from hookflow.core.hooks.hook_definition import HookDefinition
from hookflow.core.hooks.hook_registry import HookRegistry
from hookflow.core.logging import configure_logging, get_logger
from hookflow.domain.entities.hook_exceptions import HookValidationError
from hookflow.domain.services.hook_validation_service import (
    HookValidationReport,
    HookValidationService,
    class_reference,
)
from hookflow.infrastructure.discovery.hook_loader import DiscoveryResult, HookLoader
from hookflow.infrastructure.docs.hook_documenter import DOC_FORMATS, HookDocumenter

logger = get_logger(__name__)


def hook_source_options(func: Any) -> Any:
    """Add the --module and --path options shared by hook commands."""
    func = click.option(
        "--path",
        "-p",
        "paths",
        multiple=True,
        type=click.Path(),
        help="Python file or directory to load hooks from (repeatable)",
    )(func)
    func = click.option(
        "--module",
        "-m",
        "modules",
        multiple=True,
        help="Dotted module name to load hooks from (repeatable)",
    )(func)
    return func


def load_hooks(
    modules: tuple[str, ...],
    paths: tuple[str, ...],
    skip_duplicates: bool = True,
) -> DiscoveryResult:
    """Load hooks from CLI sources, falling back to configured sources."""
    settings = get_settings()
    if not modules and not paths:
        modules = tuple(settings.hook_modules)
        paths = tuple(settings.hook_paths)

    loader = HookLoader(skip_duplicates=skip_duplicates)
    return loader.load(modules=modules, paths=paths)


def build_registry(modules: tuple[str, ...], paths: tuple[str, ...]) -> HookRegistry:
    """Load hooks and register them in a fresh registry.

    Exits with status 1 if any loaded hook is invalid.
    """
    result = load_hooks(modules, paths)
    for error in result.errors:
        click.echo(f"Warning: {error}", err=True)

    registry = HookRegistry()
    try:
        registry.register_many(result.hooks)
    except HookValidationError as e:
        click.echo(f"Error: {e.message}", err=True)
        logger.error("Hook registration failed", issues=e.issues)
        raise SystemExit(1)

    return registry


def describe_parameters(hook: HookDefinition) -> str:
    """Format a hook's parameters as "name: type, ..."."""
    if not hook.parameters:
        return "<none>"
    return ", ".join(f"{name}: {type_tag}" for name, type_tag in hook.parameters.items())


@click.group()
@click.version_option(version="0.1.0", prog_name="HookFlow")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    default=None,
    help="Set log level (overrides HOOKFLOW_LOG_LEVEL)",
)
def cli(log_level: str | None) -> None:
    """HookFlow - priority-ordered action and filter hooks.

    Discover, list, validate and document the hooks plugins provide.
    """
    settings = get_settings()
    if log_level is not None:
        settings = settings.model_copy(update={"log_level": log_level})
    configure_logging(settings)


@cli.command("list")
@hook_source_options
@click.option("--plugin", type=str, default=None, help="Filter hooks by plugin name")
@click.option("--json", "as_json", is_flag=True, default=False, help="Output in JSON format")
def list_hooks(
    modules: tuple[str, ...],
    paths: tuple[str, ...],
    plugin: str | None,
    as_json: bool,
) -> None:
    """List all registered hooks."""
    registry = build_registry(modules, paths)
    hooks = registry.for_plugin(plugin) if plugin else registry.all()

    if not hooks:
        click.echo("No hooks found.")
        return

    if as_json:
        output = [
            {
                "identifier": hook.identifier,
                "description": hook.description,
                "plugin": hook.plugin,
                "parameters": dict(hook.parameters),
                "trigger_point": hook.trigger_point,
            }
            for hook in hooks
        ]
        click.echo(json.dumps(output, indent=4))
        return

    console = Console()
    table = Table(title="Registered Hooks")
    table.add_column("Identifier", style="cyan")
    table.add_column("Description", style="white")
    table.add_column("Plugin", style="green")
    table.add_column("Parameters")
    table.add_column("Trigger Point")

    for hook in hooks:
        table.add_row(
            escape(hook.identifier),
            escape(hook.description),
            escape(hook.plugin),
            escape(describe_parameters(hook)),
            escape(hook.trigger_point or "<none>"),
        )

    console.print(table)


@cli.command()
@hook_source_options
@click.option("--json", "as_json", is_flag=True, default=False, help="Output in JSON format")
def discover(modules: tuple[str, ...], paths: tuple[str, ...], as_json: bool) -> None:
    """Discover hooks and register them.

    Hooks whose identifier was already discovered are skipped.
    """
    result = load_hooks(modules, paths)

    registry = HookRegistry()
    try:
        registry.register_many(result.hooks)
    except HookValidationError as e:
        click.echo(f"Error: {e.message}", err=True)
        raise SystemExit(1)

    discovered = [
        {"identifier": hook.identifier, "class": class_reference(hook)}
        for hook in registry.all()
    ]

    if as_json:
        click.echo(json.dumps({"discovered": discovered}, indent=4))
        return

    for skipped in result.skipped:
        click.echo(f"Skipped duplicate hook identifier from {skipped}", err=True)
    for error in result.errors:
        click.echo(f"Error: {error}", err=True)

    if not discovered:
        click.echo("No hooks found.")
        return

    click.echo("Discovered Hooks:")
    for entry in discovered:
        click.echo(f"  - {entry['identifier']} ({entry['class']})")


@cli.command()
@hook_source_options
@click.option("--json", "as_json", is_flag=True, default=False, help="Output in JSON format")
def validate(modules: tuple[str, ...], paths: tuple[str, ...], as_json: bool) -> None:
    """Validate hooks without registering them.

    Exits with status 1 when hooks were found and none of them is valid.
    Duplicate identifiers are reported but do not fail validation.
    """
    result = load_hooks(modules, paths, skip_duplicates=False)

    report = HookValidationReport(errors=list(result.errors))
    report = HookValidationService.validate_hooks(result.hooks, report)

    if as_json:
        click.echo(json.dumps(report.to_dict(exclude_duplicates=True), indent=4))
    else:
        if not report.found_hooks and not report.errors:
            click.echo("No hooks found.")
        _echo_report(report)

    if not report.is_successful:
        raise SystemExit(1)


def _echo_report(report: HookValidationReport) -> None:
    if report.valid:
        click.echo("Valid Hooks:")
        for entry in report.valid:
            click.echo(f"  - {entry.identifier}")

    if report.invalid:
        click.echo("Invalid Hooks:")
        for entry in report.invalid:
            click.echo(f"  - {entry.class_name}:")
            for issue in entry.issues:
                click.echo(f"    - {issue}")

    if report.duplicates:
        click.echo("Duplicate Hook Identifiers:")
        for duplicate in report.duplicates:
            click.echo(f'  - "{duplicate.identifier}" is used by:')
            for class_name in duplicate.classes:
                click.echo(f"    - {class_name}")

    if report.errors:
        click.echo("Errors:")
        for error in report.errors:
            click.echo(f"  - {error}")


@cli.command()
@hook_source_options
@click.argument("fmt", metavar="FORMAT", type=click.Choice(DOC_FORMATS), required=False)
@click.option("--output", "-o", type=click.Path(), default=None, help="Output file path")
@click.option(
    "--group-by",
    type=click.Choice(["none", "plugin"]),
    default=None,
    help="Group hooks by plugin or none",
)
def document(
    modules: tuple[str, ...],
    paths: tuple[str, ...],
    fmt: str | None,
    output: str | None,
    group_by: str | None,
) -> None:
    """Generate documentation for all registered hooks.

    FORMAT is markdown or html (default from HOOKFLOW_DOCS_FORMAT).
    """
    settings = get_settings()
    fmt = fmt or settings.docs_format
    group_by = group_by or settings.docs_group_by

    registry = build_registry(modules, paths)
    hooks = registry.all()

    if not hooks:
        click.echo("No hooks found to document.")
        return

    documenter = HookDocumenter()
    if output:
        path = documenter.write(hooks, output, fmt=fmt, group_by_plugin=group_by == "plugin")
        click.echo(f"Documentation saved to {path}")
    else:
        click.echo(documenter.render(hooks, fmt=fmt, group_by_plugin=group_by == "plugin"))


@cli.command()
def info() -> None:
    """Display HookFlow configuration."""
    settings = get_settings()

    click.echo(f"""
HookFlow v{settings.app_version}
{'=' * 40}

Configuration:
  Environment:  {settings.environment}
  Debug:        {settings.debug}

Hook Sources:
  Modules:      {', '.join(settings.hook_modules) or '<none>'}
  Paths:        {', '.join(settings.hook_paths) or '<none>'}

Documentation:
  Format:       {settings.docs_format}
  Group By:     {settings.docs_group_by}

Logging:
  Level:        {settings.log_level}
  Format:       {settings.log_format}
""")


def main() -> NoReturn:
    """Main entry point for the CLI.

    This function is called when the `hookflow` command is run
    or when using `python -m hookflow`.
    """
    cli()


if __name__ == "__main__":
    main()
