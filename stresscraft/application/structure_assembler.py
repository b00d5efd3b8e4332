"""
Test structure assembly.

One assembly pass over a ``TestDefinition``:

(a) register the class-level named generators,
(b) declare the class-level operation groups,
(c) resolve every marked method in declaration order,
(d) return the immutable ``TestStructure``.

The pass is fail-fast; the first configuration error propagates unchanged
and no partial structure is returned. Registries are created per call, so an
assembler can be reused and shared.
"""

import logging

from ..domain.models import TestDefinition, TestStructure
from ..paramgen.factory import GeneratorFactory
from .default_catalog import DefaultGeneratorCatalog
from .generator_registry import ValueGeneratorRegistry
from .group_registry import GroupRegistry
from .operation_resolver import OperationResolver

logger = logging.getLogger(__name__)


class StructureAssembler:
    """Assembles test structures from test definitions."""

    def __init__(
        self,
        factory: GeneratorFactory | None = None,
        defaults: DefaultGeneratorCatalog | None = None,
    ) -> None:
        self.factory = factory or GeneratorFactory()
        self.defaults = defaults or DefaultGeneratorCatalog()

    def assemble(self, definition: TestDefinition) -> TestStructure:
        """
        Build the test structure of ``definition``.

        Args:
            definition: Structural description of the test class

        Returns:
            Immutable TestStructure

        Raises:
            DefinitionError: On the first inconsistency found
        """
        generators = ValueGeneratorRegistry(self.factory)
        groups = GroupRegistry()
        resolver = OperationResolver(generators, self.defaults, groups)

        for declaration in definition.generators:
            generators.declare(declaration)
        for group in definition.groups:
            groups.declare_group(group.name, group.non_parallel)

        actor_generators = []
        for method in definition.methods:
            if not method.is_operation:
                continue
            actor_generators.append(resolver.resolve(method))

        structure = TestStructure(
            actor_generators=tuple(actor_generators),
            operation_groups=tuple(groups.groups()),
        )
        logger.info(
            f"Assembled test structure for {definition.name}: "
            f"{len(structure.actor_generators)} operation(s), "
            f"{len(structure.operation_groups)} group(s)"
        )
        return structure
