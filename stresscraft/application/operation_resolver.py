"""
Operation resolution.

Turns one marked method into an ``ActorGenerator``: checks the operation-level
configuration, resolves a generator for every formal parameter and attaches
the result to the operation's group.

Per parameter, the first matching rule wins:

1. inline ``Param`` configuration, either a generator name or a kind with
   configuration (never both);
2. otherwise a name from the operation's ``params`` list, falling back to the
   parameter's own declared name;
3. a name from rule 1 or 2 is looked up among the class-level generators;
4. with no name at all, the default generator of the parameter's scalar kind.
"""

import logging

from ..domain.errors import (
    ConflictingParamConfigError,
    ParameterCountMismatchError,
    UndeclaredGroupError,
    UnresolvedParameterError,
)
from ..domain.models import (
    ActorGenerator,
    MethodDescriptor,
    OperationConfig,
    ParameterDescriptor,
)
from ..paramgen.base import ParameterGenerator
from .default_catalog import DefaultGeneratorCatalog
from .generator_registry import ValueGeneratorRegistry
from .group_registry import GroupRegistry

logger = logging.getLogger(__name__)


class OperationResolver:
    """Resolves marked methods against the registries of one assembly pass."""

    def __init__(
        self,
        generators: ValueGeneratorRegistry,
        defaults: DefaultGeneratorCatalog,
        groups: GroupRegistry,
    ) -> None:
        self._generators = generators
        self._defaults = defaults
        self._groups = groups

    def resolve(self, method: MethodDescriptor) -> ActorGenerator:
        """
        Build the actor generator of a marked method.

        Args:
            method: Method descriptor carrying an ``OperationConfig``

        Returns:
            The ActorGenerator, already appended to its group if it has one

        Raises:
            ValueError: If ``method`` is not marked as an operation
            ParameterCountMismatchError: If ``params`` does not match the arity
            UndeclaredGroupError: If the operation's group was never declared
            DefinitionError: If any parameter cannot be resolved
        """
        operation = method.operation
        if operation is None:
            raise ValueError(f"Method '{method.name}' is not marked as an operation")

        self._check_parameter_names(method, operation)
        if operation.group and not self._groups.is_declared(operation.group):
            raise UndeclaredGroupError(operation.group, operation=method.name)

        names_in_operation: tuple[str | None, ...] = operation.params or (None,) * len(
            method.parameters
        )
        argument_generators = tuple(
            self.resolve_parameter(method, parameter, name)
            for parameter, name in zip(method.parameters, names_in_operation)
        )

        actor = ActorGenerator(
            name=method.name,
            method=method.method,
            argument_generators=argument_generators,
            handled_exceptions=operation.handle_exceptions_as_result,
            run_once=operation.run_once,
        )
        if operation.group:
            self._groups.attach(operation.group, actor, operation=method.name)
        logger.debug(f"Resolved operation {actor}")
        return actor

    def resolve_parameter(
        self,
        method: MethodDescriptor,
        parameter: ParameterDescriptor,
        name_in_operation: str | None = None,
    ) -> ParameterGenerator:
        """Resolve the generator of a single parameter."""
        operation_name = method.name
        parameter_name = parameter.display_name
        param = parameter.param

        if param is not None:
            if param.has_name and param.has_gen:
                raise ConflictingParamConfigError(
                    operation=operation_name, parameter=parameter_name
                )
            if param.has_name:
                return self._generators.lookup(
                    param.name, operation=operation_name, parameter=parameter_name
                )
            # a fresh generator owned by this parameter only
            return self._generators.create(
                param.gen,
                param.conf,
                operation=operation_name,
                parameter=parameter_name,
            )

        name = name_in_operation if name_in_operation is not None else parameter.name
        if name is not None:
            return self._generators.lookup(
                name, operation=operation_name, parameter=parameter_name
            )

        default = self._defaults.default_for(parameter.kind)
        if default is not None:
            return default

        raise UnresolvedParameterError(
            operation=operation_name, parameter=parameter_name
        )

    @staticmethod
    def _check_parameter_names(
        method: MethodDescriptor, operation: OperationConfig
    ) -> None:
        if operation.params and len(operation.params) != len(method.parameters):
            raise ParameterCountMismatchError(
                operation=method.name,
                expected=len(method.parameters),
                actual=len(operation.params),
            )
