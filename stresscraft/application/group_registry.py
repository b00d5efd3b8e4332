"""Registry of named operation groups."""

import logging
from dataclasses import dataclass, field

from ..domain.errors import UndeclaredGroupError
from ..domain.models import ActorGenerator, OperationGroup

logger = logging.getLogger(__name__)


@dataclass
class _GroupEntry:
    name: str
    non_parallel: bool
    actors: list[ActorGenerator] = field(default_factory=list)

    def freeze(self) -> OperationGroup:
        return OperationGroup(
            name=self.name, non_parallel=self.non_parallel, actors=tuple(self.actors)
        )


class GroupRegistry:
    """
    Operation groups declared by a test definition.

    Redeclaring a name replaces the earlier group (last declaration wins) but
    keeps the position of the first declaration.
    """

    def __init__(self) -> None:
        self._groups: dict[str, _GroupEntry] = {}

    def declare_group(self, name: str, non_parallel: bool = False) -> None:
        if name in self._groups:
            logger.debug(f"Group '{name}' redeclared, replacing earlier declaration")
        self._groups[name] = _GroupEntry(name=name, non_parallel=non_parallel)

    def is_declared(self, name: str) -> bool:
        return name in self._groups

    def attach(
        self, group_name: str, actor: ActorGenerator, *, operation: str | None = None
    ) -> None:
        """
        Append ``actor`` to the members of ``group_name``.

        Raises:
            UndeclaredGroupError: If the group was never declared
        """
        entry = self._groups.get(group_name)
        if entry is None:
            raise UndeclaredGroupError(group_name, operation=operation)
        entry.actors.append(actor)
        logger.debug(f"Attached operation '{actor.name}' to group '{group_name}'")

    def groups(self) -> list[OperationGroup]:
        """Immutable snapshots of all groups, in first-declaration order."""
        return [entry.freeze() for entry in self._groups.values()]
