"""
Application layer for stresscraft.

Registries, the operation resolver and the assembler that turn a test
definition into its test structure, plus the use case wiring them to
configuration and introspection.
"""

from .default_catalog import DefaultGeneratorCatalog
from .generator_registry import ValueGeneratorRegistry
from .group_registry import GroupRegistry
from .operation_resolver import OperationResolver
from .structure_assembler import StructureAssembler
from .structure_usecase import StructureUseCase, build_test_structure

__all__ = [
    "DefaultGeneratorCatalog",
    "ValueGeneratorRegistry",
    "GroupRegistry",
    "OperationResolver",
    "StructureAssembler",
    "StructureUseCase",
    "build_test_structure",
]
