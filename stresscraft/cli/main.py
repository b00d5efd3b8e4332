"""Main CLI entry point for StressCraft."""

import json
import logging
import sys
from pathlib import Path
from typing import Any

import click
from rich.console import Console
from rich.markup import escape

from ..adapters.io.enhanced_logging import LoggerManager, setup_enhanced_logging
from ..application.structure_usecase import StructureUseCase
from ..config.loader import ConfigLoader, ConfigurationError
from ..config.models import StressCraftConfig
from ..domain.errors import StressCraftError
from .formatters.structure import StructureFormatter, structure_to_dict
from .target_loader import TargetLoadError, load_target

logger = logging.getLogger(__name__)


class ClickContext:
    """Context object for Click commands."""

    def __init__(self) -> None:
        self.config: StressCraftConfig | None = None
        self.console: Console = Console()
        self.verbose: bool = False
        self.quiet: bool = False

    def create_usecase(self) -> StructureUseCase:
        return StructureUseCase(self.config)


def _fail(ctx_obj: ClickContext, message: str) -> None:
    ctx_obj.console.print(
        f"[bold red]Error:[/] {escape(message)}", highlight=False, soft_wrap=True
    )
    sys.exit(1)


def _logging_overrides(verbose: bool, quiet: bool) -> dict[str, Any]:
    if quiet:
        return {"logging": {"level": "WARNING"}}
    if verbose:
        return {"logging": {"level": "DEBUG"}}
    return {}


@click.group()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Reduce output: set log level to WARNING and hide INFO",
)
@click.pass_context
def app(ctx: click.Context, config: Path | None, verbose: bool, quiet: bool) -> None:
    """StressCraft - operation catalogs for concurrency stress tests."""
    ctx.ensure_object(ClickContext)
    ctx.obj.verbose = verbose
    ctx.obj.quiet = quiet

    try:
        ctx.obj.config = ConfigLoader(config).load_config(
            cli_overrides=_logging_overrides(verbose, quiet)
        )
    except ConfigurationError as e:
        _fail(ctx.obj, f"Configuration error: {e}")

    logging_config = ctx.obj.config.logging
    setup_enhanced_logging(
        Console(stderr=True),
        LoggerManager.resolve_level(logging_config.level),
    )
    LoggerManager.suppress_modules(logging_config.suppress_modules, verbose)
    logger.debug("Debug mode enabled - verbose logging active")


@app.command()
@click.argument("target")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format",
)
@click.pass_context
def inspect(ctx: click.Context, target: str, fmt: str) -> None:
    """Show the operations and groups of TARGET (module:Class or file.py:Class)."""
    try:
        test_class = load_target(target)
        structure = ctx.obj.create_usecase().build(test_class)
    except (TargetLoadError, StressCraftError, TypeError) as e:
        _fail(ctx.obj, str(e))

    if fmt == "json":
        click.echo(json.dumps(structure_to_dict(structure), indent=2))
        return
    StructureFormatter(ctx.obj.console).format_table(structure, target)


@app.command()
@click.argument("targets", nargs=-1, required=True)
@click.pass_context
def validate(ctx: click.Context, targets: tuple[str, ...]) -> None:
    """Assemble every TARGET and report configuration errors."""
    console = ctx.obj.console
    try:
        usecase = ctx.obj.create_usecase()
    except StressCraftError as e:
        _fail(ctx.obj, str(e))

    failures = 0
    for target in targets:
        try:
            structure = usecase.build(load_target(target))
        except (TargetLoadError, StressCraftError, TypeError) as e:
            failures += 1
            console.print(
                f"[red]FAIL[/] {escape(target)}: {escape(str(e))}",
                highlight=False,
                soft_wrap=True,
            )
            continue
        console.print(
            f"[green]OK[/] {target}: "
            f"{len(structure.actor_generators)} operation(s), "
            f"{len(structure.operation_groups)} group(s)",
            highlight=False,
            soft_wrap=True,
        )

    if failures:
        console.print(
            f"{failures} of {len(targets)} target(s) failed", soft_wrap=True
        )
        sys.exit(1)


@app.command()
@click.pass_context
def generators(ctx: click.Context) -> None:
    """List the available generator kinds."""
    try:
        factory = ctx.obj.create_usecase().factory
    except StressCraftError as e:
        _fail(ctx.obj, str(e))

    kinds = {}
    for kind in factory.kinds():
        constructor = factory.constructor_for(kind)
        qualname = getattr(constructor, "__qualname__", None)
        kinds[kind] = (
            f"{constructor.__module__}.{qualname}" if qualname else repr(constructor)
        )
    StructureFormatter(ctx.obj.console).format_kinds(kinds)


if __name__ == "__main__":
    app()
