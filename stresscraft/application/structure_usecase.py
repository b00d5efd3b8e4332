"""
Structure Use Case - Build the test structure of a test class.

This module wires configuration, the introspection port and the structure
assembler together: a test class goes in, its immutable TestStructure comes
out.
"""

import logging
from typing import Any

from ..adapters.introspection.class_introspector import ClassIntrospector
from ..config.models import StressCraftConfig
from ..domain.models import TestDefinition, TestStructure
from ..paramgen.factory import GeneratorFactory
from ..ports.introspection_port import IntrospectionPort
from .structure_assembler import StructureAssembler

logger = logging.getLogger(__name__)


class StructureUseCase:
    """Use case for describing and assembling test classes."""

    def __init__(
        self,
        config: StressCraftConfig | None = None,
        introspection_port: IntrospectionPort | None = None,
        factory: GeneratorFactory | None = None,
    ) -> None:
        """
        Initialize the use case.

        Args:
            config: StressCraft configuration (defaults if None)
            introspection_port: Port describing test targets (a
                ClassIntrospector configured from ``config`` if None)
            factory: Generator factory; configured plugins are loaded into a
                new one if None

        Raises:
            GeneratorConstructionError: If a configured plugin cannot be imported
            DuplicateNameError: If a plugin reuses a registered kind
        """
        self.config = config or StressCraftConfig()
        self._introspector = introspection_port or ClassIntrospector(
            expose_parameter_names=self.config.introspection.expose_parameter_names,
            include_inherited=self.config.introspection.include_inherited,
        )
        if factory is None:
            factory = GeneratorFactory()
            factory.load_plugins(self.config.generators.plugins)
        self.factory = factory
        self._assembler = StructureAssembler(factory)

    def describe(self, target: Any) -> TestDefinition:
        return self._introspector.describe(target)

    def build(self, target: Any) -> TestStructure:
        """Describe ``target`` and assemble its test structure."""
        definition = self.describe(target)
        return self._assembler.assemble(definition)


def build_test_structure(
    test_class: Any, config: StressCraftConfig | None = None
) -> TestStructure:
    """Build the test structure of ``test_class`` in one call."""
    return StructureUseCase(config).build(test_class)
