"""
Introspection Port interface definition.

This module defines the interface for turning a test target (typically a
class) into the structural description consumed by the assembler.
"""

from typing import Any

from typing_extensions import Protocol

from ..domain.models import TestDefinition


class IntrospectionPort(Protocol):
    """
    Interface for discovering operations and declarations of a test target.

    Implementations may use runtime reflection, static analysis or any other
    metadata facility; the assembler only sees the returned description.
    """

    def describe(self, target: Any) -> TestDefinition:
        """
        Describe a test target structurally.

        Args:
            target: The test target, e.g. a class with marked operations

        Returns:
            TestDefinition with methods in declaration order and the
            class-level generator and group declarations

        Raises:
            TypeError: If the target cannot be described
            DefinitionError: If the target is malformed beyond description
        """
        ...
