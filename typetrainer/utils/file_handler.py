import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from typetrainer.app.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_WORDS: Tuple[str, ...] = (
    "the", "quick", "brown", "fox", "jumps", "over", "lazy", "dog",
    "computer", "program", "typing", "speed", "accuracy", "practice",
)

DEFAULT_SENTENCES: Tuple[str, ...] = (
    "The quick brown fox jumps over the lazy dog.",
    "Practice a little every day and your speed will follow.",
    "Accuracy first, then speed, then both at once.",
    "A good program is read far more often than it is written.",
    "Keep your eyes on the text and let your fingers find the keys.",
)


@dataclass(frozen=True)
class WordBank:
    words: Tuple[str, ...] = DEFAULT_WORDS
    sentences: Tuple[str, ...] = DEFAULT_SENTENCES


def _clean(entries, section: str, path: Path) -> Tuple[str, ...]:
    if not isinstance(entries, list):
        raise ConfigError(f"{path}: '{section}' must be a list of strings")
    cleaned = []
    for item in entries:
        if not isinstance(item, str):
            raise ConfigError(f"{path}: '{section}' must be a list of strings")
        item = item.strip()
        if section == "words" and len(item.split()) > 1:
            raise ConfigError(f"{path}: word {item!r} contains whitespace")
        if item:
            cleaned.append(item)
    return tuple(cleaned)


def load_word_bank(path: Optional[str] = None) -> WordBank:
    """
    Load words and sentences from a JSON file shaped like
    {"words": [...], "sentences": [...]}. Either key may be left out.
    With no path the built-in bank is returned.
    """
    if path is None:
        return WordBank()
    p = Path(path)
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise ConfigError(f"cannot read word bank {p}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"{p}: expected a JSON object")

    words = DEFAULT_WORDS
    sentences = DEFAULT_SENTENCES
    if "words" in data:
        words = _clean(data["words"], "words", p)
    else:
        logger.warning("%s has no 'words', using the built-in list", p)
    if "sentences" in data:
        sentences = _clean(data["sentences"], "sentences", p)
    else:
        logger.warning("%s has no 'sentences', using the built-in pool", p)

    if not words:
        raise ConfigError(f"{p}: 'words' has no usable entries")
    if not sentences:
        raise ConfigError(f"{p}: 'sentences' has no usable entries")
    logger.info("Loaded %d words and %d sentences from %s", len(words), len(sentences), p)
    return WordBank(words=words, sentences=sentences)
