"""
Error taxonomy for test definition assembly.

Every error raised while building a test structure is a configuration error
discovered before any operation runs. Each error keeps the context needed to
locate the misconfiguration (operation, parameter, offending name) both as
attributes and in its message.
"""

from typing import Any


class StressCraftError(Exception):
    """Base exception for StressCraft domain errors."""

    pass


class DefinitionError(StressCraftError):
    """Raised when a test definition is inconsistent and cannot be assembled."""

    def __init__(
        self,
        message: str,
        *,
        operation: str | None = None,
        parameter: str | None = None,
    ) -> None:
        self.operation = operation
        self.parameter = parameter
        super().__init__(message)


def _location(operation: str | None, parameter: str | None) -> str:
    if operation and parameter:
        return f" (parameter {parameter} of operation '{operation}')"
    if operation:
        return f" (operation '{operation}')"
    return ""


class DuplicateNameError(DefinitionError):
    """Raised when a name is empty or already registered."""

    def __init__(self, name: str, what: str = "generator") -> None:
        self.name = name
        if not name:
            message = f"{what.capitalize()} name in class declaration cannot be empty"
        else:
            message = f"Duplicate {what} name: \"{name}\""
        super().__init__(message)


class UnknownGeneratorError(DefinitionError):
    """Raised when a named generator is referenced but never declared."""

    def __init__(
        self,
        name: str,
        *,
        operation: str | None = None,
        parameter: str | None = None,
    ) -> None:
        self.name = name
        super().__init__(
            f"Unknown generator name: \"{name}\"{_location(operation, parameter)}",
            operation=operation,
            parameter=parameter,
        )


class GeneratorConstructionError(DefinitionError):
    """Raised when a generator cannot be built from its kind and configuration.

    The underlying instantiation failure, if any, is chained as ``__cause__``.
    """

    def __init__(
        self,
        kind: Any,
        configuration: str,
        reason: str,
        *,
        operation: str | None = None,
        parameter: str | None = None,
    ) -> None:
        self.kind = kind
        self.configuration = configuration
        self.reason = reason
        kind_name = getattr(kind, "__name__", kind)
        super().__init__(
            f"Cannot create parameter generator {kind_name!s} "
            f"with configuration \"{configuration}\": {reason}"
            f"{_location(operation, parameter)}",
            operation=operation,
            parameter=parameter,
        )


class ConflictingParamConfigError(DefinitionError):
    """Raised when a parameter sets both a generator name and a generator kind."""

    def __init__(self, *, operation: str, parameter: str) -> None:
        super().__init__(
            "Param should have either name or gen with optional configuration"
            f"{_location(operation, parameter)}",
            operation=operation,
            parameter=parameter,
        )


class ParameterCountMismatchError(DefinitionError):
    """Raised when an operation's parameter-name list does not match its arity."""

    def __init__(self, *, operation: str, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Invalid count of parameter names for operation '{operation}': "
            f"method declares {expected} parameter(s), got {actual} name(s)",
            operation=operation,
        )


class UnresolvedParameterError(DefinitionError):
    """Raised when no generator can be found or defaulted for a parameter."""

    def __init__(
        self, *, operation: str, parameter: str, reason: str | None = None
    ) -> None:
        super().__init__(
            reason
            or f"Generator for parameter {parameter} in operation "
            f"'{operation}' should be specified",
            operation=operation,
            parameter=parameter,
        )


class UndeclaredGroupError(DefinitionError):
    """Raised when an operation names a group that was never declared."""

    def __init__(self, group: str, *, operation: str | None = None) -> None:
        self.group = group
        super().__init__(
            f"Operation group \"{group}\" is not configured{_location(operation, None)}",
            operation=operation,
        )
