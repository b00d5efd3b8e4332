"""Global fixtures and utilities for the stresscraft test suite.

This module provides builders for structural test definitions so that the
application layer can be exercised without going through introspection.
"""

from pathlib import Path

import pytest

from stresscraft.application.default_catalog import DefaultGeneratorCatalog
from stresscraft.application.generator_registry import ValueGeneratorRegistry
from stresscraft.application.group_registry import GroupRegistry
from stresscraft.application.operation_resolver import OperationResolver
from stresscraft.domain.models import (
    MethodDescriptor,
    OperationConfig,
    ParamConfig,
    ParameterDescriptor,
    ScalarKind,
)
from stresscraft.paramgen import GeneratorFactory


# ================================================================================
# Registry Fixtures
# ================================================================================


@pytest.fixture
def factory():
    """Return a generator factory with the built-in kinds."""
    return GeneratorFactory()


@pytest.fixture
def generator_registry(factory):
    """Return an empty named-generator registry."""
    return ValueGeneratorRegistry(factory)


@pytest.fixture
def group_registry():
    """Return an empty group registry."""
    return GroupRegistry()


@pytest.fixture
def resolver(generator_registry, group_registry):
    """Return an operation resolver wired to the registry fixtures."""
    return OperationResolver(
        generator_registry, DefaultGeneratorCatalog(), group_registry
    )


# ================================================================================
# Definition Builders
# ================================================================================


@pytest.fixture
def make_parameter():
    """Factory fixture building parameter descriptors.

    Usage:
        def test_something(make_parameter):
            x = make_parameter(0, name="x", param=ParamConfig(name="id"))
    """

    def _make(
        position: int = 0,
        kind: ScalarKind | None = ScalarKind.INT,
        name: str | None = None,
        param: ParamConfig | None = None,
    ) -> ParameterDescriptor:
        return ParameterDescriptor(
            position=position,
            name=name,
            kind=kind,
            type_name=kind.value if kind else "object",
            param=param,
        )

    return _make


@pytest.fixture
def make_operation():
    """Factory fixture building marked method descriptors."""

    def _make(
        name: str,
        *parameters: ParameterDescriptor,
        marked: bool = True,
        **operation_options,
    ) -> MethodDescriptor:
        return MethodDescriptor(
            name=name,
            parameters=parameters,
            operation=OperationConfig(**operation_options) if marked else None,
        )

    return _make


# ================================================================================
# Path Fixtures
# ================================================================================


@pytest.fixture
def sample_definitions_path():
    """Return the path to the decorated sample test classes."""
    return Path(__file__).parent / "fixtures" / "sample_definitions.py"
