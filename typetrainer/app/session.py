# app/session.py
from __future__ import annotations
import logging
from typing import Callable, Optional

from typetrainer.app.config import Settings
from typetrainer.app.state import SessionTally
from typetrainer.core.capture import CapturedInput, capture_line
from typetrainer.services.scoring import ScoringEngine
from typetrainer.services.text_provider import TextProvider

logger = logging.getLogger(__name__)


class PracticeSession:
    """Round loop: text -> timed capture -> score -> present."""

    def __init__(
        self,
        provider: TextProvider,
        engine: ScoringEngine,
        presenter,
        capture: Optional[Callable[[int], CapturedInput]] = None,
        settings: Optional[Settings] = None,
    ):
        self.provider = provider
        self.engine = engine
        self.presenter = presenter
        self.settings = settings or Settings()
        self.capture = capture or (lambda max_length: capture_line(max_length=max_length))
        self.tally = SessionTally()

    def next_text(self) -> str:
        if self.settings.mode == "sentences":
            return self.provider.pick_sentence()
        return self.provider.generate(self.settings.words_per_block)

    def play_round(self, round_no: int):
        reference = self.next_text()
        self.presenter.show_header(round_no)
        self.presenter.show_reference(reference)
        captured = self.capture(self.settings.max_input_length)
        stats = self.engine.score(reference, captured.text, captured.elapsed_seconds)
        self.tally.record(stats)
        logger.info(
            "Round %d: %.1f WPM, %.1f%% accuracy, %.1fs",
            round_no, stats.words_per_minute, stats.accuracy_percent, stats.elapsed_seconds,
        )
        self.presenter.show_results(stats)
        return stats

    def run(self) -> SessionTally:
        self.presenter.welcome()
        round_no = 1
        try:
            while True:
                self.play_round(round_no)
                if self.settings.max_rounds is not None and round_no >= self.settings.max_rounds:
                    break
                if not self.presenter.ask_continue():
                    break
                round_no += 1
        except KeyboardInterrupt:
            logger.info("Session interrupted after %d round(s)", self.tally.rounds)
        self.presenter.farewell(self.tally)
        return self.tally
