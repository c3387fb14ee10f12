# main.py
from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from typetrainer.app.config import MODES, Settings, load_settings, with_overrides
from typetrainer.app.errors import TypetrainerError
from typetrainer.app.session import PracticeSession
from typetrainer.services.scoring import ScoringEngine
from typetrainer.services.text_provider import TextProvider
from typetrainer.ui.console import ConsolePresenter
from typetrainer.utils.file_handler import load_word_bank

logger = logging.getLogger(__name__)


def setup_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        handlers=[
            logging.StreamHandler(sys.stderr),
            logging.FileHandler(settings.log_file, encoding="utf-8"),
        ],
        force=True,
    )

    # Log any uncaught exceptions rather than silently dying
    def excepthook(exctype, value, tb):
        logging.critical("Unhandled exception", exc_info=(exctype, value, tb))
        sys.exit(1)

    sys.excepthook = excepthook


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="typetrainer",
        description="Terminal typing practice: type the text, get WPM and accuracy.",
    )
    parser.add_argument("--config", type=Path, default=None, help="JSON settings file (default: ./typetrainer.json)")
    parser.add_argument("--mode", choices=MODES, default=None, help="random words or preset sentences")
    parser.add_argument("--words", dest="words_per_block", type=int, default=None, help="words per block")
    parser.add_argument("--word-bank", dest="word_bank_file", default=None, help="JSON file with 'words' and 'sentences'")
    parser.add_argument("--seed", type=int, default=None, help="seed for reproducible texts")
    parser.add_argument("--rounds", dest="max_rounds", type=int, default=None, help="stop after N rounds")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
    return parser


def resolve_settings(args: argparse.Namespace) -> Settings:
    settings = load_settings(args.config)
    return with_overrides(
        settings,
        mode=args.mode,
        words_per_block=args.words_per_block,
        word_bank_file=args.word_bank_file,
        seed=args.seed,
        max_rounds=args.max_rounds,
        log_level=args.log_level,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = resolve_settings(args)
    except TypetrainerError as e:
        # logging is not configured yet; this goes to the last-resort handler
        logger.error("Bad configuration: %s", e)
        print(f"typetrainer: {e}", file=sys.stderr)
        return 2

    setup_logging(settings)
    try:
        bank = load_word_bank(settings.word_bank_file)
        provider = TextProvider.from_word_bank(bank, seed=settings.seed)
        session = PracticeSession(provider, ScoringEngine(), ConsolePresenter(), settings=settings)
        session.run()
    except TypetrainerError as e:
        logger.error("%s", e)
        print(f"typetrainer: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
