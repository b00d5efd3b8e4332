"""Test structure formatters for different output formats."""

from typing import Any

from rich.console import Console
from rich.table import Table

from ...domain.models import ActorGenerator, TestStructure


def _exception_names(actor: ActorGenerator) -> list[str]:
    return [exc.__name__ for exc in actor.handled_exceptions]


def structure_to_dict(structure: TestStructure) -> dict[str, Any]:
    """Convert a test structure into JSON-serializable data."""
    return {
        "actor_generators": [
            {
                "name": actor.name,
                "argument_generators": [repr(gen) for gen in actor.argument_generators],
                "handled_exceptions": _exception_names(actor),
                "run_once": actor.run_once,
            }
            for actor in structure.actor_generators
        ],
        "operation_groups": [
            {
                "name": group.name,
                "non_parallel": group.non_parallel,
                "actors": [actor.name for actor in group.actors],
            }
            for group in structure.operation_groups
        ],
    }


class StructureFormatter:
    """Formatter for test structure display."""

    def __init__(self, console: Console):
        """Initialize with console instance."""
        self.console = console

    def format_table(self, structure: TestStructure, title: str) -> None:
        """Display the operations and groups of a structure as tables."""
        operations = Table(
            title=f"Operations of {title}", show_header=True, header_style="bold blue"
        )
        operations.add_column("#", justify="right", style="dim")
        operations.add_column("Operation", style="cyan", no_wrap=True)
        operations.add_column("Argument generators", style="green")
        operations.add_column("Handled exceptions", style="yellow")
        operations.add_column("Run once", justify="center")

        for index, actor in enumerate(structure.actor_generators, start=1):
            operations.add_row(
                str(index),
                actor.name,
                ", ".join(map(repr, actor.argument_generators)) or "-",
                ", ".join(_exception_names(actor)) or "-",
                "yes" if actor.run_once else "",
            )
        self.console.print(operations)

        if not structure.operation_groups:
            return

        groups = Table(
            title="Operation groups", show_header=True, header_style="bold blue"
        )
        groups.add_column("Group", style="cyan", no_wrap=True)
        groups.add_column("Non-parallel", justify="center")
        groups.add_column("Operations", style="green")

        for group in structure.operation_groups:
            groups.add_row(
                group.name,
                "yes" if group.non_parallel else "no",
                ", ".join(actor.name for actor in group.actors) or "-",
            )
        self.console.print(groups)

    def format_kinds(self, kinds: dict[str, str]) -> None:
        """Display generator kinds and the constructors behind them."""
        table = Table(
            title="Generator kinds", show_header=True, header_style="bold blue"
        )
        table.add_column("Kind", style="cyan", no_wrap=True)
        table.add_column("Constructor", style="green")
        for kind, constructor in kinds.items():
            table.add_row(kind, constructor)
        self.console.print(table)
