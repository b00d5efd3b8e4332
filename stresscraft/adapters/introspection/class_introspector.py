"""
Class introspector adapter implementation.

This module describes decorated Python classes structurally using runtime
reflection (``inspect`` and ``typing``). It implements the IntrospectionPort
interface consumed by the structure assembler.
"""

import inspect
import logging
import types
import typing
from typing import Annotated, Any, Union, get_args, get_origin

from ...domain.errors import UnresolvedParameterError
from ...domain.models import (
    GeneratorDeclaration,
    GroupDeclaration,
    MethodDescriptor,
    ParamConfig,
    ParameterDescriptor,
    ScalarKind,
    TestDefinition,
)
from .decorators import GENERATORS_ATTR, GROUPS_ATTR, get_operation_config

logger = logging.getLogger(__name__)

KIND_BY_TYPE: dict[Any, ScalarKind] = {
    int: ScalarKind.INT,
    float: ScalarKind.DOUBLE,
    str: ScalarKind.STRING,
}

_VARIADIC = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


class ClassIntrospector:
    """
    Describes test classes via runtime reflection.

    Methods are reported in definition order. Parameter kinds come from type
    annotations: ``int``, ``float`` and ``str`` map to the int, double and
    string kinds, a ``ScalarKind`` inside ``Annotated[...]`` overrides the
    mapping and ``Optional[T]`` is treated like ``T``.
    """

    def __init__(
        self, expose_parameter_names: bool = False, include_inherited: bool = False
    ) -> None:
        """Initialize the introspector.

        Args:
            expose_parameter_names: Report declared parameter names, making
                them usable as generator names
            include_inherited: Also collect methods and declarations of base
                classes (most-base first)
        """
        self.expose_parameter_names = expose_parameter_names
        self.include_inherited = include_inherited

    def describe(self, target: Any) -> TestDefinition:
        if not inspect.isclass(target):
            raise TypeError(
                f"Test target must be a class, got {type(target).__name__}"
            )

        owners = self._owners(target)
        functions: dict[str, tuple[Any, bool, type]] = {}
        for owner in owners:
            for name, attribute in vars(owner).items():
                function, is_static = self._unwrap(attribute)
                if function is not None:
                    functions[name] = (function, is_static, owner)

        methods = tuple(
            self._describe_method(name, function, is_static, defined_in)
            for name, (function, is_static, defined_in) in functions.items()
        )
        generators: tuple[GeneratorDeclaration, ...] = ()
        groups: tuple[GroupDeclaration, ...] = ()
        for owner in owners:
            generators += owner.__dict__.get(GENERATORS_ATTR, ())
            groups += owner.__dict__.get(GROUPS_ATTR, ())

        definition = TestDefinition(
            name=target.__qualname__,
            methods=methods,
            generators=generators,
            groups=groups,
        )
        logger.debug(
            f"Described {definition.name}: {len(definition.methods)} method(s), "
            f"{len(definition.operations)} operation(s)"
        )
        return definition

    def _owners(self, target: type) -> list[type]:
        if not self.include_inherited:
            return [target]
        return [cls for cls in reversed(target.__mro__) if cls is not object]

    @staticmethod
    def _unwrap(attribute: Any) -> tuple[Any, bool]:
        if isinstance(attribute, staticmethod):
            return attribute.__func__, True
        if isinstance(attribute, classmethod):
            return attribute.__func__, False
        if inspect.isfunction(attribute):
            return attribute, False
        return None, False

    def _describe_method(
        self, name: str, function: Any, is_static: bool, owner: type
    ) -> MethodDescriptor:
        operation = get_operation_config(function)
        signature = inspect.signature(function)
        hints = _type_hints(function, {**vars(owner), owner.__name__: owner})

        formal = list(signature.parameters.values())
        if not is_static and formal:
            formal = formal[1:]  # self / cls

        parameters = []
        for position, parameter in enumerate(formal):
            if parameter.kind in _VARIADIC:
                if operation is not None:
                    raise UnresolvedParameterError(
                        operation=name,
                        parameter=parameter.name,
                        reason=f"Operation '{name}' cannot declare variadic "
                        f"parameter {parameter}",
                    )
                continue
            annotation = hints.get(parameter.name, parameter.annotation)
            parameters.append(self._describe_parameter(position, parameter, annotation))

        return MethodDescriptor(
            name=name,
            parameters=tuple(parameters),
            operation=operation,
            method=function,
        )

    def _describe_parameter(
        self, position: int, parameter: inspect.Parameter, annotation: Any
    ) -> ParameterDescriptor:
        kind, param_config, base = parse_annotation(annotation)
        return ParameterDescriptor(
            position=position,
            name=parameter.name if self.expose_parameter_names else None,
            kind=kind,
            type_name=type_name(base),
            param=param_config,
        )


_NO_CODE = (lambda: None).__code__


def _type_hints(function: Any, localns: dict[str, Any]) -> dict[str, Any]:
    """Resolve annotations, keeping those that resolve when others do not."""
    try:
        return typing.get_type_hints(function, localns=localns, include_extras=True)
    except (NameError, TypeError) as e:
        logger.debug(f"Cannot resolve annotations of {function.__qualname__}: {e}")

    try:
        annotations = dict(getattr(function, "__annotations__", {}))
    except NameError:
        return {}

    hints: dict[str, Any] = {}
    for name, annotation in annotations.items():
        single = types.FunctionType(_NO_CODE, function.__globals__)
        single.__annotations__ = {name: annotation}
        try:
            hints.update(
                typing.get_type_hints(single, localns=localns, include_extras=True)
            )
        except (NameError, TypeError):
            logger.debug(f"Cannot resolve annotation {name!r} of {function.__qualname__}")
    return hints


def parse_annotation(annotation: Any) -> tuple[ScalarKind | None, ParamConfig | None, Any]:
    """Extract scalar kind, inline ParamConfig and base type from an annotation."""
    kind: ScalarKind | None = None
    param_config: ParamConfig | None = None

    base = _unwrap_optional(annotation)
    if get_origin(base) is Annotated:
        base, *metadata = get_args(base)
        base = _unwrap_optional(base)
        for item in metadata:
            if isinstance(item, ParamConfig):
                param_config = item
            elif isinstance(item, ScalarKind):
                kind = item

    if kind is None and isinstance(base, ScalarKind):
        kind = base
    if kind is None:
        try:
            kind = KIND_BY_TYPE.get(base)
        except TypeError:  # unhashable annotation object
            kind = None
    return kind, param_config, base


def _unwrap_optional(annotation: Any) -> Any:
    if get_origin(annotation) in (Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def type_name(annotation: Any) -> str:
    if annotation is inspect.Parameter.empty:
        return ""
    if isinstance(annotation, ScalarKind):
        return annotation.value
    if isinstance(annotation, str):
        return annotation
    return getattr(annotation, "__name__", None) or repr(annotation)
