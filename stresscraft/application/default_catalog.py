"""Default generators for scalar parameter kinds."""

from collections.abc import Mapping

from ..domain.models import ScalarKind
from ..paramgen.base import ParameterGenerator
from ..paramgen.numeric import ByteGen, DoubleGen, FloatGen, IntGen, LongGen, ShortGen
from ..paramgen.strings import StringGen

DEFAULT_GENERATORS: dict[ScalarKind, type[ParameterGenerator]] = {
    ScalarKind.BYTE: ByteGen,
    ScalarKind.SHORT: ShortGen,
    ScalarKind.INT: IntGen,
    ScalarKind.LONG: LongGen,
    ScalarKind.FLOAT: FloatGen,
    ScalarKind.DOUBLE: DoubleGen,
    ScalarKind.STRING: StringGen,
}


class DefaultGeneratorCatalog:
    """Selects a generator by scalar kind when nothing more specific applies."""

    def __init__(
        self, defaults: Mapping[ScalarKind, type[ParameterGenerator]] | None = None
    ) -> None:
        self._defaults = dict(DEFAULT_GENERATORS if defaults is None else defaults)

    def supports(self, kind: ScalarKind | None) -> bool:
        return kind in self._defaults

    def default_for(self, kind: ScalarKind | None) -> ParameterGenerator | None:
        """Return a new default generator for ``kind``, or None if it has none."""
        generator_class = self._defaults.get(kind) if kind is not None else None
        if generator_class is None:
            return None
        return generator_class("")
