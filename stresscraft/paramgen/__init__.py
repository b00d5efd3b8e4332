"""
Parameter value generators.

Built-in generators for the scalar kinds plus the factory that constructs
generators from a kind identifier and a configuration string.
"""

from .base import ParameterGenerator
from .factory import BUILTIN_GENERATORS, GeneratorFactory, GeneratorKind
from .numeric import ByteGen, DoubleGen, FloatGen, IntGen, LongGen, ShortGen
from .strings import StringGen

__all__ = [
    "ParameterGenerator",
    "GeneratorFactory",
    "GeneratorKind",
    "BUILTIN_GENERATORS",
    "ByteGen",
    "ShortGen",
    "IntGen",
    "LongGen",
    "FloatGen",
    "DoubleGen",
    "StringGen",
]
