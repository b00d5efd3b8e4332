"""
StressCraft - operation catalogs for concurrency stress tests.

Mark a class's operations, declare its named generators and operation groups,
and build the immutable test structure that scenario generators consume.
"""

from .adapters.introspection import Param, op_group_config, operation, param
from .application import StructureAssembler, build_test_structure
from .domain.errors import (
    ConflictingParamConfigError,
    DefinitionError,
    DuplicateNameError,
    GeneratorConstructionError,
    ParameterCountMismatchError,
    StressCraftError,
    UndeclaredGroupError,
    UnknownGeneratorError,
    UnresolvedParameterError,
)
from .domain.models import (
    Actor,
    ActorGenerator,
    OperationGroup,
    ScalarKind,
    TestDefinition,
    TestStructure,
)
from .paramgen import (
    ByteGen,
    DoubleGen,
    FloatGen,
    IntGen,
    LongGen,
    ParameterGenerator,
    ShortGen,
    StringGen,
)

__version__ = "0.1.0"

__all__ = [
    "Param",
    "operation",
    "param",
    "op_group_config",
    "build_test_structure",
    "StructureAssembler",
    "Actor",
    "ActorGenerator",
    "OperationGroup",
    "ScalarKind",
    "TestDefinition",
    "TestStructure",
    "ParameterGenerator",
    "ByteGen",
    "ShortGen",
    "IntGen",
    "LongGen",
    "FloatGen",
    "DoubleGen",
    "StringGen",
    "StressCraftError",
    "DefinitionError",
    "DuplicateNameError",
    "UnknownGeneratorError",
    "GeneratorConstructionError",
    "ConflictingParamConfigError",
    "ParameterCountMismatchError",
    "UnresolvedParameterError",
    "UndeclaredGroupError",
]
