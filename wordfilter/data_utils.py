from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from wordfilter.vocab import WordVocab, DEFAULT_WORD_LEN

logger = logging.getLogger(__name__)

BUNDLED_WORDS_PATH = Path(__file__).resolve().parent / "words" / "five_letters.txt"


def load_word_vocab(
    path: Optional[str] = None,
    *,
    column: Optional[str] = None,
    word_len: Optional[int] = DEFAULT_WORD_LEN,
    alpha_only: bool = True,
) -> WordVocab:
    """
    Load the word list to play against.
    Uses the bundled five-letter list when `path` is None. `.csv` files are read
    through `column` (default "word"); any other file is one word per line.
    `alpha_only=False` keeps entries with spaces, digits or punctuation.
    """
    source = Path(path) if path is not None else BUNDLED_WORDS_PATH
    if source.suffix.lower() == ".csv":
        vocab = WordVocab.from_csv(str(source), column or "word", word_len=word_len, alpha_only=alpha_only)
    else:
        vocab = WordVocab.from_lines(str(source), word_len=word_len, alpha_only=alpha_only)
    logger.debug("loaded %d words from %s", len(vocab), source)
    return vocab
