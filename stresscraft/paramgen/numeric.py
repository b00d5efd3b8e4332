"""
Integral and real number generators.

Integral generators accept ``"begin:end"`` (both inclusive). Real generators
accept ``"begin:end"`` or ``"begin:step:end"``; a zero step samples the
continuous range. An empty configuration selects the class defaults.
"""

import math
import random
import struct

from .base import ParameterGenerator, split_configuration


def _parse_number(raw: str, parse: type, kind: str) -> int | float:
    try:
        return parse(raw)
    except ValueError as e:
        raise ValueError(f"Invalid {kind} value in configuration: {raw!r}") from e


class IntGen(ParameterGenerator):
    """Uniform integers in ``[begin, end]``."""

    kind = "int"

    DEFAULT_BEGIN = -10
    DEFAULT_END = 10
    MIN_VALUE = -(2**31)
    MAX_VALUE = 2**31 - 1

    def __init__(self, configuration: str = "") -> None:
        super().__init__(configuration)
        args = split_configuration(configuration)
        if not args:
            self.begin, self.end = self.DEFAULT_BEGIN, self.DEFAULT_END
        elif len(args) == 2:
            self.begin = _parse_number(args[0], int, self.kind)
            self.end = _parse_number(args[1], int, self.kind)
        else:
            raise ValueError(
                "Configuration should have two arguments (begin and end) "
                "separated by colon"
            )
        if self.begin > self.end:
            raise ValueError(
                f"Illegal range [{self.begin}; {self.end}]: "
                "end should not be less than begin"
            )
        if self.begin < self.MIN_VALUE or self.end > self.MAX_VALUE:
            raise ValueError(
                f"Illegal range for {self.kind} type: [{self.begin}; {self.end}]"
            )

    def generate(self, rng: random.Random) -> int:
        return rng.randint(self.begin, self.end)


class LongGen(IntGen):
    kind = "long"

    MIN_VALUE = -(2**63)
    MAX_VALUE = 2**63 - 1


class ShortGen(IntGen):
    kind = "short"

    MIN_VALUE = -(2**15)
    MAX_VALUE = 2**15 - 1


class ByteGen(IntGen):
    kind = "byte"

    MIN_VALUE = -(2**7)
    MAX_VALUE = 2**7 - 1


class DoubleGen(ParameterGenerator):
    """Real numbers in ``[begin, end]``, optionally on a ``step`` grid."""

    kind = "double"

    DEFAULT_BEGIN = -10.0
    DEFAULT_END = 10.0
    DEFAULT_STEP = 0.1

    def __init__(self, configuration: str = "") -> None:
        super().__init__(configuration)
        args = split_configuration(configuration)
        self.step = self.DEFAULT_STEP
        if not args:
            self.begin, self.end = self.DEFAULT_BEGIN, self.DEFAULT_END
        elif len(args) == 2:
            self.begin = _parse_number(args[0], float, self.kind)
            self.end = _parse_number(args[1], float, self.kind)
        elif len(args) == 3:
            self.begin = _parse_number(args[0], float, self.kind)
            self.step = _parse_number(args[1], float, self.kind)
            self.end = _parse_number(args[2], float, self.kind)
        else:
            raise ValueError(
                "Configuration should have two (begin and end) or three "
                "(begin, step and end) arguments separated by colon"
            )
        if not all(map(math.isfinite, (self.begin, self.step, self.end))):
            raise ValueError("Configuration values must be finite")
        if self.begin >= self.end:
            raise ValueError(
                f"Illegal range [{self.begin}; {self.end}]: "
                "end should be greater than begin"
            )
        if self.step < 0:
            raise ValueError(f"Step should not be negative, got {self.step}")
        # tolerate float error in (end - begin) / step, e.g. 20 / 0.1
        self._max_steps = (
            int(math.floor((self.end - self.begin) / self.step + 1e-9))
            if self.step
            else 0
        )

    def generate(self, rng: random.Random) -> float:
        if self.step == 0:
            return self.begin + (self.end - self.begin) * rng.random()
        return self.begin + self.step * rng.randint(0, self._max_steps)


class FloatGen(DoubleGen):
    """Like ``DoubleGen`` but rounds values to single precision."""

    kind = "float"

    MAX_VALUE = 3.4028234663852886e38

    def __init__(self, configuration: str = "") -> None:
        super().__init__(configuration)
        if max(abs(self.begin), abs(self.end)) > self.MAX_VALUE:
            raise ValueError(
                f"Illegal range for {self.kind} type: [{self.begin}; {self.end}]"
            )

    def generate(self, rng: random.Random) -> float:
        value = super().generate(rng)
        return struct.unpack("f", struct.pack("f", value))[0]
