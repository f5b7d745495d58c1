"""
wordle_helper/helper_cli.py

Command line Wordle helper.
- `random`:   pick a starting word (or several distinct ones) from the word list.
- `eligible`: list every word still consistent with what the game has told you.

Run:
  python -m wordle_helper.helper_cli random --count 3
  python -m wordle_helper.helper_cli eligible -c "vi___" -w "e" -i "xqz"

The correct-positions template uses '_' for unknown slots, e.g. "v__eo" for "video"
before the i and d are found. Repeat a wrong-position letter to require it twice ("ll").
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from wordfilter.data_utils import load_word_vocab
from wordfilter.predicate import EvidencePredicate, filter_vocab
from wordfilter.sampler import WordSampler
from wordfilter.vocab import WordVocab, DEFAULT_WORD_LEN

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(asctime)s | %(name)s | %(levelname)s]: %(message)s"


def _load_vocab(args: argparse.Namespace) -> WordVocab:
    word_len = args.length if args.length > 0 else None
    return load_word_vocab(args.words, column=args.column, word_len=word_len, alpha_only=not args.any_chars)


def handle_random(vocab: WordVocab, count: Optional[int], seed: Optional[int] = None) -> str:
    """Return the line to print for the `random` subcommand."""
    sampler = WordSampler(vocab, seed=seed)
    if count is None:
        return f"Randomly Selected Word: {sampler.choice_word()}"
    words = sampler.sample_words(count)
    return f"Randomly Selected Words: {', '.join(words)}"


def handle_eligible(
    vocab: WordVocab,
    correct_positions: Optional[str],
    wrong_positions: Optional[str],
    invalid_letters: Optional[str],
) -> str:
    """Return the line to print for the `eligible` subcommand."""
    predicate = EvidencePredicate.build(
        correct_positions=correct_positions,
        wrong_positions=wrong_positions,
        invalid_letters=invalid_letters,
    )
    eligible = filter_vocab(vocab, predicate)
    logger.info("%d eligible out of %d", len(eligible), len(vocab))
    return f"Eligible Wordle Contenders: {eligible!r}"


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="wordle-helper",
        description="Pick starting words and list eligible Wordle guesses",
    )
    ap.add_argument("--words", default=None,
                    help="Word list to use: one word per line, or a .csv (default: bundled five-letter list)")
    ap.add_argument("--column", default=None, help="Column holding the words when --words is a CSV")
    ap.add_argument("--length", type=int, default=DEFAULT_WORD_LEN,
                    help="Keep only words of this length (0 keeps every length)")
    ap.add_argument("--any-chars", action="store_true",
                    help="Keep entries with spaces, digits or punctuation (default: letters only)")
    ap.add_argument("--seed", type=int, default=None, help="Seed for random word selection")
    ap.add_argument("-l", "--log", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                    help="Log level")

    sub = ap.add_subparsers(dest="command", required=True)

    rnd = sub.add_parser("random", help="Generate a random word or words the game can be started with")
    rnd.add_argument("-c", "--count", type=int, default=None,
                     help="The number of distinct random words to display")

    elg = sub.add_parser("eligible", help="List all eligible guesses based on known information")
    elg.add_argument("-c", "--correct-positions", default=None,
                     help="Letters in their correct position, '_' for unknown slots (e.g. v__eo)")
    elg.add_argument("-w", "--wrong-positions", default=None,
                     help="Letters in the word but not in the guessed position, repeated for duplicates")
    elg.add_argument("-i", "--invalid-letters", default=None,
                     help="Letters already guessed that are not in the word")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    if args.length < 0:
        ap.error("--length must be 0 or a positive integer")

    logging.basicConfig(level=getattr(logging, args.log), format=LOG_FORMAT)

    try:
        vocab = _load_vocab(args)
        if args.command == "random":
            line = handle_random(vocab, args.count, seed=args.seed)
        else:
            line = handle_eligible(
                vocab,
                args.correct_positions,
                args.wrong_positions,
                args.invalid_letters,
            )
    except (ValueError, KeyError, OSError) as e:
        logger.debug("command failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
