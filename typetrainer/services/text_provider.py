# services/text_provider.py
from __future__ import annotations
import random
from typing import Iterable, Optional, Protocol, Sequence

from typetrainer.app.errors import InvalidArgument


class RandomSource(Protocol):
    def choice(self, seq: Sequence[str]) -> str: ...


class TextProvider:
    def __init__(
        self,
        words: Iterable[str],
        sentences: Iterable[str],
        rng: Optional[RandomSource] = None,
    ):
        self.words = tuple(words)
        self.sentences = tuple(sentences)
        if not self.words:
            raise InvalidArgument("vocabulary is empty")
        for word in self.words:
            # one draw must be exactly one space-free token
            if not isinstance(word, str) or word.split() != [word]:
                raise InvalidArgument(f"vocabulary entry must be a single word, got {word!r}")
        if not self.sentences:
            raise InvalidArgument("sentence pool is empty")
        self.rng = rng if rng is not None else random.Random()

    @classmethod
    def from_word_bank(cls, bank, seed=None) -> "TextProvider":
        return cls(bank.words, bank.sentences, random.Random(seed))

    def generate(self, word_count: int) -> str:
        """Draw `word_count` words with replacement, joined by single spaces."""
        if isinstance(word_count, bool) or not isinstance(word_count, int):
            raise InvalidArgument(f"word_count must be an int, got {word_count!r}")
        if word_count < 0:
            raise InvalidArgument(f"word_count must be >= 0, got {word_count}")
        return " ".join(self.rng.choice(self.words) for _ in range(word_count))

    def pick_sentence(self) -> str:
        return self.rng.choice(self.sentences)
