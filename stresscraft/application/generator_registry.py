"""Registry of class-level named value generators."""

import logging

from ..domain.errors import DuplicateNameError, UnknownGeneratorError
from ..domain.models import GeneratorDeclaration
from ..paramgen.base import ParameterGenerator
from ..paramgen.factory import GeneratorFactory, GeneratorKind

logger = logging.getLogger(__name__)


class ValueGeneratorRegistry:
    """
    Named, reusable generators of one test definition.

    A registered generator instance is shared by every parameter that
    references its name. Construction of new generators goes through the
    ``GeneratorFactory``.
    """

    def __init__(self, factory: GeneratorFactory | None = None) -> None:
        self._factory = factory or GeneratorFactory()
        self._generators: dict[str, ParameterGenerator] = {}

    def register(self, name: str, generator: ParameterGenerator) -> None:
        """
        Register ``generator`` under ``name``.

        Raises:
            DuplicateNameError: If ``name`` is empty or already registered
        """
        if not name or name in self._generators:
            raise DuplicateNameError(name)
        self._generators[name] = generator
        logger.debug(f"Registered generator '{name}': {generator!r}")

    def declare(self, declaration: GeneratorDeclaration) -> ParameterGenerator:
        """Construct and register the generator of a class-level declaration."""
        if not declaration.name or declaration.name in self._generators:
            raise DuplicateNameError(declaration.name)
        generator = self.create(declaration.gen, declaration.conf)
        self.register(declaration.name, generator)
        return generator

    def lookup(
        self,
        name: str,
        *,
        operation: str | None = None,
        parameter: str | None = None,
    ) -> ParameterGenerator:
        """
        Return the generator registered under ``name``.

        Raises:
            UnknownGeneratorError: If no generator has that name
        """
        try:
            return self._generators[name]
        except KeyError:
            raise UnknownGeneratorError(
                name, operation=operation, parameter=parameter
            ) from None

    def create(
        self,
        kind: GeneratorKind | None,
        configuration: str = "",
        *,
        operation: str | None = None,
        parameter: str | None = None,
    ) -> ParameterGenerator:
        """Construct a new, unregistered generator.

        Raises:
            GeneratorConstructionError: If the kind cannot be instantiated
                with ``configuration``
        """
        return self._factory.create(
            kind, configuration, operation=operation, parameter=parameter
        )

    def names(self) -> list[str]:
        return list(self._generators)

    def __contains__(self, name: object) -> bool:
        return name in self._generators

    def __len__(self) -> int:
        return len(self._generators)
