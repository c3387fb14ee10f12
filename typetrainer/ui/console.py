# ui/console.py
from __future__ import annotations
import sys
import textwrap
from typing import Callable, Optional, TextIO

from typetrainer.app.state import SessionTally
from typetrainer.services.scoring import TypingStats

BOX_WIDTH = 40


def _box(lines, width: int = BOX_WIDTH, title: Optional[str] = None) -> str:
    out = ["╔" + "═" * width + "╗"]
    if title is not None:
        out.append("║" + title.center(width) + "║")
        if lines:
            out.append("╠" + "═" * width + "╣")
    for ln in lines:
        out.append("║  " + ln.ljust(width - 2) + "║")
    out.append("╚" + "═" * width + "╝")
    return "\n".join(out)


class ConsolePresenter:
    def __init__(
        self,
        stream: Optional[TextIO] = None,
        reader: Callable[[str], str] = input,
        width: int = BOX_WIDTH,
    ):
        self.stream = stream or sys.stdout
        self.reader = reader
        self.width = width

    def _print(self, text: str = ""):
        self.stream.write(text + "\n")
        self.stream.flush()

    def welcome(self):
        self._print("TYPING TRAINER - type each text and press Enter.")
        try:
            self.reader("Press Enter to start...")
        except EOFError:
            pass

    def show_header(self, round_no: int):
        self._print()
        self._print(_box([], self.width, title=f"TYPING TRAINER - BLOCK {round_no}"))
        self._print()

    def show_reference(self, text: str):
        wrapped = textwrap.wrap(text, self.width - 4) or [""]
        self._print(_box(wrapped, self.width, title="TEXT TO TYPE"))
        self._print()
        self.stream.write("Start typing now: ")
        self.stream.flush()

    def show_results(self, stats: TypingStats):
        lines = [
            f"Speed:    {stats.words_per_minute:.1f} WPM",
            f"Accuracy: {stats.accuracy_percent:.1f}%",
            f"Time:     {stats.elapsed_seconds:.1f} sec",
            f"Correct:  {stats.correct_count}/{stats.reference_length}",
            f"Errors:   {stats.incorrect_count}",
        ]
        self._print()
        self._print(_box(lines, self.width, title="RESULTS"))
        self._print()

    def ask_continue(self) -> bool:
        try:
            answer = self.reader("Next block? (y/n): ")
        except EOFError:
            return False
        return answer.strip()[:1] in ("y", "Y")

    def farewell(self, tally: SessionTally):
        if tally.rounds:
            lines = [
                f"Rounds:      {tally.rounds}",
                f"Words:       {tally.total_words}",
                f"Average WPM: {tally.average_wpm():.1f}",
                f"Best WPM:    {tally.best_wpm():.1f}",
                f"Accuracy:    {tally.average_accuracy():.1f}%",
            ]
            self._print()
            self._print(_box(lines, self.width, title="SESSION"))
        self._print("Great practice session! Keep improving!")
