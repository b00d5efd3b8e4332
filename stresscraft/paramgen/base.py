"""Base class for parameter value generators."""

import random
from abc import ABC, abstractmethod
from typing import Any, ClassVar


def split_configuration(configuration: str) -> list[str]:
    """Split a colon-separated configuration string, ignoring whitespace.

    An empty (or blank) configuration yields an empty list.
    """
    compact = "".join(configuration.split())
    if not compact:
        return []
    return compact.split(":")


class ParameterGenerator(ABC):
    """
    Produces argument values for operation parameters.

    Generators are constructed from a single configuration string and draw
    values from the random source handed to ``generate``; they keep no random
    state of their own, so a seeded ``random.Random`` reproduces a sequence.
    """

    kind: ClassVar[str] = ""

    def __init__(self, configuration: str = "") -> None:
        self.configuration = configuration

    @abstractmethod
    def generate(self, rng: random.Random) -> Any:
        """Return the next value drawn from ``rng``."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.configuration!r})"
