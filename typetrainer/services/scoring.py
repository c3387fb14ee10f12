# services/scoring.py
from __future__ import annotations
import math
from dataclasses import dataclass

from typetrainer.app.errors import InvalidArgument

CHARS_PER_WORD = 5.0


@dataclass(frozen=True)
class TypingStats:
    reference_length: int = 0
    typed_length: int = 0
    correct_count: int = 0
    incorrect_count: int = 0
    word_count: int = 0
    elapsed_seconds: float = 0.0
    accuracy_percent: float = 0.0
    words_per_minute: float = 0.0


def count_words(text: str) -> int:
    # whitespace tokens; "" and "   " both give 0
    return len(text.split())


def accuracy(correct: int, reference_length: int) -> float:
    if reference_length <= 0:
        return 0.0
    return correct / reference_length * 100.0


def wpm(typed_length: int, elapsed_seconds: float) -> float:
    # WPM = (typed chars / 5) / minutes
    if elapsed_seconds <= 0:
        return 0.0
    return (typed_length / CHARS_PER_WORD) / (elapsed_seconds / 60.0)


def _check_elapsed(elapsed_seconds) -> float:
    if isinstance(elapsed_seconds, bool) or not isinstance(elapsed_seconds, (int, float)):
        raise InvalidArgument(f"elapsed_seconds must be a number, got {elapsed_seconds!r}")
    if math.isnan(elapsed_seconds) or elapsed_seconds < 0:
        raise InvalidArgument(f"elapsed_seconds must be >= 0, got {elapsed_seconds!r}")
    return float(elapsed_seconds)


def score(reference: str, typed: str, elapsed_seconds: float) -> TypingStats:
    """
    Compare `typed` against `reference` position by position.

    Characters are compared as code points. Positions past the shorter of the
    two texts count as incorrect, whichever side is longer.
    """
    elapsed = _check_elapsed(elapsed_seconds)
    reference = reference or ""
    typed = typed or ""

    correct = 0
    incorrect = 0
    for ref_ch, typed_ch in zip(reference, typed):
        if ref_ch == typed_ch:
            correct += 1
        else:
            incorrect += 1
    incorrect += abs(len(typed) - len(reference))

    return TypingStats(
        reference_length=len(reference),
        typed_length=len(typed),
        correct_count=correct,
        incorrect_count=incorrect,
        word_count=count_words(reference),
        elapsed_seconds=elapsed,
        accuracy_percent=accuracy(correct, len(reference)),
        words_per_minute=wpm(len(typed), elapsed),
    )


class ScoringEngine:
    """Stateless; kept as a class so the session can take it as a collaborator."""

    def score(self, reference: str, typed: str, elapsed_seconds: float) -> TypingStats:
        return score(reference, typed, elapsed_seconds)
