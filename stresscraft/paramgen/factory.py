"""
Generator factory.

Maps generator-kind identifiers to constructors taking a single configuration
string. Generator classes (or any such callable) may also be used directly as
a kind, in which case no registration is needed.
"""

import importlib
import logging
from collections.abc import Callable, Mapping
from typing import Any

from ..domain.errors import DuplicateNameError, GeneratorConstructionError
from .base import ParameterGenerator
from .numeric import ByteGen, DoubleGen, FloatGen, IntGen, LongGen, ShortGen
from .strings import StringGen

logger = logging.getLogger(__name__)

GeneratorConstructor = Callable[[str], ParameterGenerator]
GeneratorKind = str | GeneratorConstructor

BUILTIN_GENERATORS: tuple[type[ParameterGenerator], ...] = (
    ByteGen,
    ShortGen,
    IntGen,
    LongGen,
    FloatGen,
    DoubleGen,
    StringGen,
)


class GeneratorFactory:
    """Builds parameter generators from a kind and a configuration string."""

    def __init__(self, include_builtins: bool = True) -> None:
        self._constructors: dict[str, GeneratorConstructor] = {}
        if include_builtins:
            for generator_class in BUILTIN_GENERATORS:
                self.register(generator_class.kind, generator_class)

    def register(self, kind: str, constructor: GeneratorConstructor) -> None:
        """Register ``constructor`` under ``kind``.

        Raises:
            DuplicateNameError: If ``kind`` is empty or already registered
        """
        if not kind or kind in self._constructors:
            raise DuplicateNameError(kind, what="generator kind")
        self._constructors[kind] = constructor

    def kinds(self) -> list[str]:
        """Registered kind identifiers, in registration order."""
        return list(self._constructors)

    def constructor_for(self, kind: str) -> GeneratorConstructor | None:
        return self._constructors.get(kind)

    def create(
        self,
        kind: GeneratorKind | None,
        configuration: str = "",
        *,
        operation: str | None = None,
        parameter: str | None = None,
    ) -> ParameterGenerator:
        """
        Construct a new generator.

        Args:
            kind: Registered kind identifier or a constructor callable
            configuration: Configuration string handed to the constructor
            operation: Operation name, for error context
            parameter: Parameter identity, for error context

        Returns:
            A freshly constructed generator

        Raises:
            GeneratorConstructionError: If the kind is missing or unknown, or
                the constructor rejects the configuration
        """

        def fail(reason: str) -> GeneratorConstructionError:
            return GeneratorConstructionError(
                kind, configuration, reason, operation=operation, parameter=parameter
            )

        if kind is None:
            raise fail("no generator kind specified")
        if isinstance(kind, str):
            constructor = self._constructors.get(kind)
            if constructor is None:
                raise fail(f"unknown generator kind (known: {', '.join(self.kinds())})")
        elif callable(kind):
            constructor = kind
        else:
            raise fail(f"unsupported generator kind of type {type(kind).__name__}")

        try:
            generator = constructor(configuration)
        except Exception as e:
            raise fail(str(e) or type(e).__name__) from e

        if not isinstance(generator, ParameterGenerator):
            raise fail(
                f"constructor returned {type(generator).__name__}, "
                "expected a ParameterGenerator"
            )
        return generator

    def load_plugins(self, plugins: Mapping[str, str]) -> int:
        """
        Import and register third-party generator constructors.

        Args:
            plugins: Mapping of kind identifier to ``"module:attribute"``

        Returns:
            Number of constructors registered
        """
        for kind, import_path in plugins.items():
            self.register(kind, _import_constructor(kind, import_path))
            logger.debug(f"Registered generator kind '{kind}' from {import_path}")
        return len(plugins)


def _import_constructor(kind: str, import_path: str) -> GeneratorConstructor:
    module_name, _, attribute = import_path.partition(":")
    if not module_name or not attribute:
        raise GeneratorConstructionError(
            kind, "", f"plugin path {import_path!r} should look like 'module:attribute'"
        )
    try:
        module = importlib.import_module(module_name)
        constructor: Any = getattr(module, attribute)
    except (ImportError, AttributeError) as e:
        raise GeneratorConstructionError(
            kind, "", f"cannot import {import_path}: {e}"
        ) from e
    if not callable(constructor):
        raise GeneratorConstructionError(kind, "", f"{import_path} is not callable")
    return constructor
