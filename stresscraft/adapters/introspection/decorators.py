"""
Decorators that mark test classes and their operations.

Usage::

    @param("id", gen=IntGen, conf="1:10")
    @op_group_config("writers", non_parallel=True)
    class QueueTest:
        @operation(group="writers")
        def push(self, x: Annotated[int, Param(name="id")]) -> None: ...

        @operation(handle_exceptions_as_result=(IndexError,))
        def pop(self) -> int: ...

The decorators only attach configuration records; nothing is validated until
the class is assembled.
"""

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from ...domain.models import (
    GeneratorDeclaration,
    GroupDeclaration,
    OperationConfig,
    ParamConfig,
)

OPERATION_ATTR = "__stresscraft_operation__"
GENERATORS_ATTR = "__stresscraft_generators__"
GROUPS_ATTR = "__stresscraft_groups__"

F = TypeVar("F")
C = TypeVar("C", bound=type)

# Inline parameter configuration, used as ``Annotated[int, Param(name="id")]``
Param = ParamConfig


def operation(
    func: F | None = None,
    *,
    params: Iterable[str] = (),
    group: str | None = None,
    run_once: bool = False,
    handle_exceptions_as_result: Iterable[type[BaseException]] = (),
) -> Any:
    """Mark a method as a test operation; usable bare or with arguments."""
    if isinstance(params, str):
        raise TypeError(
            f"params must be a sequence of generator names, not a string: {params!r}"
        )
    config = OperationConfig(
        params=tuple(params),
        group=group or None,
        run_once=run_once,
        handle_exceptions_as_result=tuple(handle_exceptions_as_result),
    )

    def decorate(target: F) -> F:
        # mark the wrapped function of a staticmethod/classmethod
        function = getattr(target, "__func__", target)
        setattr(function, OPERATION_ATTR, config)
        return target

    if func is not None:
        return decorate(func)
    return decorate


def _prepend_declaration(cls: C, attribute: str, declaration: Any) -> C:
    # decorators apply bottom-up; prepending keeps source order
    own = cls.__dict__.get(attribute, ())
    setattr(cls, attribute, (declaration, *own))
    return cls


def param(name: str, gen: Any = None, conf: str = "") -> Callable[[C], C]:
    """Declare a named generator shared by the operations of a class."""
    declaration = GeneratorDeclaration(name=name, gen=gen, conf=conf)

    def decorate(cls: C) -> C:
        return _prepend_declaration(cls, GENERATORS_ATTR, declaration)

    return decorate


def op_group_config(name: str, non_parallel: bool = False) -> Callable[[C], C]:
    """Declare an operation group of a class."""
    declaration = GroupDeclaration(name=name, non_parallel=non_parallel)

    def decorate(cls: C) -> C:
        return _prepend_declaration(cls, GROUPS_ATTR, declaration)

    return decorate


def get_operation_config(function: Any) -> OperationConfig | None:
    return getattr(getattr(function, "__func__", function), OPERATION_ATTR, None)
