"""String generator."""

import random
import string

from .base import ParameterGenerator


class StringGen(ParameterGenerator):
    """
    Random words of up to ``max_word_length`` characters.

    Configuration is ``"maxWordLength"`` or ``"maxWordLength:alphabet"``. The
    alphabet is taken verbatim (whitespace included) after the first colon.
    """

    kind = "string"

    DEFAULT_MAX_WORD_LENGTH = 15
    DEFAULT_ALPHABET = string.ascii_letters + string.digits + " _-"

    def __init__(self, configuration: str = "") -> None:
        super().__init__(configuration)
        length, separator, alphabet = configuration.partition(":")
        length = length.strip()
        if not length and not separator:
            self.max_word_length = self.DEFAULT_MAX_WORD_LENGTH
            self.alphabet = self.DEFAULT_ALPHABET
            return
        try:
            self.max_word_length = int(length)
        except ValueError as e:
            raise ValueError(
                f"Invalid maximal word length in configuration: {length!r}"
            ) from e
        if self.max_word_length < 0:
            raise ValueError("Maximal word length should not be negative")
        if separator and not alphabet:
            raise ValueError("Alphabet should not be empty")
        self.alphabet = alphabet or self.DEFAULT_ALPHABET

    def generate(self, rng: random.Random) -> str:
        length = rng.randint(0, self.max_word_length)
        return "".join(rng.choice(self.alphabet) for _ in range(length))
