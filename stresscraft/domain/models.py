"""
Domain models for the stresscraft system.

This module contains the core domain models using Pydantic for validation.
The input side describes a test definition structurally (its methods,
parameters and class-level declarations); the output side is the immutable
test structure consumed by scenario generators and executors.
"""

import random
from collections.abc import Callable
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..paramgen.base import ParameterGenerator

GeneratorKindField = str | Callable[..., Any] | None


class ScalarKind(str, Enum):
    """Scalar parameter kinds that have a default generator."""

    BYTE = "byte"
    SHORT = "short"
    INT = "int"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    STRING = "string"


# ================================================================================
# Configuration records
# ================================================================================


class ParamConfig(BaseModel):
    """
    Generator configuration for a single parameter.

    Either ``name`` references a class-level named generator, or ``gen`` (with
    an optional ``conf`` string) describes a generator built just for this
    parameter. Setting both is a configuration error detected at assembly.
    """

    name: str = Field(default="", description="Name of a class-level generator")
    gen: GeneratorKindField = Field(
        default=None, description="Generator kind identifier or constructor"
    )
    conf: str = Field(default="", description="Generator configuration string")

    model_config = ConfigDict(frozen=True)

    @property
    def has_name(self) -> bool:
        return bool(self.name)

    @property
    def has_gen(self) -> bool:
        return self.gen is not None


class GeneratorDeclaration(BaseModel):
    """Class-level named generator declaration."""

    name: str = Field(..., description="Unique generator name")
    gen: GeneratorKindField = Field(
        default=None, description="Generator kind identifier or constructor"
    )
    conf: str = Field(default="", description="Generator configuration string")

    model_config = ConfigDict(frozen=True)


class GroupDeclaration(BaseModel):
    """Class-level operation group declaration."""

    name: str = Field(..., description="Group name")
    non_parallel: bool = Field(
        default=False,
        description="Members must never be scheduled concurrently with each other",
    )

    model_config = ConfigDict(frozen=True)


class OperationConfig(BaseModel):
    """Marks a method as a test operation."""

    params: tuple[str, ...] = Field(
        default=(), description="Generator names, one per formal parameter"
    )
    group: str | None = Field(default=None, description="Operation group name")
    run_once: bool = Field(
        default=False, description="Operation may execute at most once per scenario"
    )
    handle_exceptions_as_result: tuple[type[BaseException], ...] = Field(
        default=(), description="Exception types recorded as results"
    )

    model_config = ConfigDict(frozen=True)


# ================================================================================
# Structural description of a test definition
# ================================================================================


class ParameterDescriptor(BaseModel):
    """A formal parameter of an operation method."""

    position: int = Field(..., ge=0, description="Zero-based parameter position")
    name: str | None = Field(
        default=None, description="Declared name, when the introspector exposes it"
    )
    kind: ScalarKind | None = Field(
        default=None, description="Scalar kind of the declared type, if any"
    )
    type_name: str = Field(default="", description="Declared type, for messages")
    param: ParamConfig | None = Field(
        default=None, description="Inline generator configuration"
    )

    model_config = ConfigDict(frozen=True)

    @property
    def display_name(self) -> str:
        """Human-readable parameter identity used in error messages."""
        label = self.name if self.name is not None else f"#{self.position}"
        return f"{label}: {self.type_name}" if self.type_name else label


class MethodDescriptor(BaseModel):
    """A method of the test definition; an operation when ``operation`` is set."""

    name: str = Field(..., description="Method name")
    parameters: tuple[ParameterDescriptor, ...] = Field(default=())
    operation: OperationConfig | None = Field(default=None)
    method: Callable[..., Any] | None = Field(
        default=None, description="Underlying function object"
    )

    model_config = ConfigDict(frozen=True)

    @property
    def is_operation(self) -> bool:
        return self.operation is not None


class TestDefinition(BaseModel):
    """Structural description of a test class."""

    name: str = Field(..., description="Name of the test class")
    methods: tuple[MethodDescriptor, ...] = Field(
        default=(), description="Methods in declaration order"
    )
    generators: tuple[GeneratorDeclaration, ...] = Field(default=())
    groups: tuple[GroupDeclaration, ...] = Field(default=())

    model_config = ConfigDict(frozen=True)

    @property
    def operations(self) -> list[MethodDescriptor]:
        return [method for method in self.methods if method.is_operation]


# ================================================================================
# Assembled test structure
# ================================================================================


class Actor(BaseModel):
    """One invocation of an operation with concrete arguments."""

    name: str
    method: Callable[..., Any] | None = None
    arguments: tuple[Any, ...] = ()
    handled_exceptions: tuple[type[BaseException], ...] = ()
    run_once: bool = False

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.name}({', '.join(map(repr, self.arguments))})"


class ActorGenerator(BaseModel):
    """An operation paired with the generators for its arguments."""

    name: str = Field(..., description="Operation name")
    method: Callable[..., Any] | None = Field(default=None)
    argument_generators: tuple[ParameterGenerator, ...] = Field(
        default=(), description="One generator per formal parameter, in order"
    )
    handled_exceptions: tuple[type[BaseException], ...] = Field(default=())
    run_once: bool = Field(default=False)

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    def generate(self, rng: random.Random) -> Actor:
        """Draw concrete arguments and build an actor; the method is not invoked."""
        return Actor(
            name=self.name,
            method=self.method,
            arguments=tuple(gen.generate(rng) for gen in self.argument_generators),
            handled_exceptions=self.handled_exceptions,
            run_once=self.run_once,
        )

    def handles(self, exc: BaseException) -> bool:
        """Whether ``exc`` is captured as a result instead of propagating."""
        return isinstance(exc, self.handled_exceptions)

    def __str__(self) -> str:
        return f"{self.name}({', '.join(map(repr, self.argument_generators))})"


class OperationGroup(BaseModel):
    """Named set of operations sharing a scheduling constraint."""

    name: str
    non_parallel: bool = False
    actors: tuple[ActorGenerator, ...] = ()

    model_config = ConfigDict(frozen=True)


class TestStructure(BaseModel):
    """
    Immutable catalog of a test's operations.

    ``actor_generators`` follows method declaration order and
    ``operation_groups`` follows the order group names were first declared.
    """

    actor_generators: tuple[ActorGenerator, ...] = ()
    operation_groups: tuple[OperationGroup, ...] = ()

    model_config = ConfigDict(frozen=True)

    def get_group(self, name: str) -> OperationGroup | None:
        return next((g for g in self.operation_groups if g.name == name), None)

    def get_actor_generator(self, name: str) -> ActorGenerator | None:
        return next((a for a in self.actor_generators if a.name == name), None)
