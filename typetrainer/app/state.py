from dataclasses import dataclass, field
from typing import List

from typetrainer.services.scoring import TypingStats


@dataclass
class SessionTally:
    rounds: int = 0
    total_words: int = 0
    total_typed_chars: int = 0
    total_seconds: float = 0.0
    results: List[TypingStats] = field(default_factory=list)

    def record(self, stats: TypingStats):
        self.rounds += 1
        self.total_words += stats.word_count
        self.total_typed_chars += stats.typed_length
        self.total_seconds += stats.elapsed_seconds
        self.results.append(stats)

    def average_wpm(self) -> float:
        if not self.results:
            return 0.0
        return sum(s.words_per_minute for s in self.results) / len(self.results)

    def average_accuracy(self) -> float:
        if not self.results:
            return 0.0
        return sum(s.accuracy_percent for s in self.results) / len(self.results)

    def best_wpm(self) -> float:
        return max((s.words_per_minute for s in self.results), default=0.0)
