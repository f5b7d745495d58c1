"""
predicate.py

Compiles what is known about the hidden word into lookup tables once,
then checks candidate words against them.

Evidence comes in three independently optional strings:
- correct positions: a template like "vi___" ('_' = unknown slot)
- wrong positions:   letters known to be in the word, with multiplicity ("ll" = at least two l's)
- invalid letters:   letters known to be absent ("xq")
"""

from __future__ import annotations

import logging
from collections import Counter
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, FrozenSet

import numpy as np

from wordfilter.vocab import WordVocab

logger = logging.getLogger(__name__)

PLACEHOLDER = "_"


class EvidencePredicate:
    """
    Read-only predicate over candidate words.

    Build it with `EvidencePredicate.build(...)` and reuse it for every word in the list.
    Each compiled table is None when its evidence was not supplied.
    """

    __slots__ = ("_correct_positions", "_required_counts", "_forbidden")

    def __init__(
        self,
        correct_positions: Optional[Mapping[int, str]] = None,
        required_counts: Optional[Mapping[str, int]] = None,
        forbidden: Optional[Iterable[str]] = None,
    ) -> None:
        self._correct_positions = (
            MappingProxyType(dict(correct_positions)) if correct_positions is not None else None
        )
        self._required_counts = (
            MappingProxyType(dict(required_counts)) if required_counts is not None else None
        )
        self._forbidden = frozenset(forbidden) if forbidden is not None else None

    # ---------- Construction ----------

    @classmethod
    def build(
        cls,
        correct_positions: Optional[str] = None,
        wrong_positions: Optional[str] = None,
        invalid_letters: Optional[str] = None,
    ) -> "EvidencePredicate":
        """Compile the raw evidence strings. Never raises on odd input."""
        predicate = cls(
            correct_positions=cls._position_map(correct_positions),
            required_counts=cls._required_count_map(wrong_positions),
            forbidden=cls._forbidden_set(invalid_letters),
        )
        logger.debug("compiled %r", predicate)
        return predicate

    @staticmethod
    def _position_map(template: Optional[str]) -> Optional[dict]:
        if template is None:
            return None
        positions = {}
        for i, ch in enumerate(template):
            if ch == PLACEHOLDER:
                continue
            positions[i] = ch
        return positions

    @staticmethod
    def _required_count_map(letters: Optional[str]) -> Optional[dict]:
        if letters is None:
            return None
        return dict(Counter(letters))

    @staticmethod
    def _forbidden_set(letters: Optional[str]) -> Optional[FrozenSet[str]]:
        if letters is None:
            return None
        return frozenset(letters)

    # ---------- Introspection ----------

    @property
    def correct_positions(self) -> Optional[Mapping[int, str]]:
        return self._correct_positions

    @property
    def required_counts(self) -> Optional[Mapping[str, int]]:
        return self._required_counts

    @property
    def forbidden(self) -> Optional[FrozenSet[str]]:
        return self._forbidden

    def __repr__(self) -> str:
        return (
            f"EvidencePredicate(correct_positions={self._as_plain(self._correct_positions)}, "
            f"required_counts={self._as_plain(self._required_counts)}, "
            f"forbidden={sorted(self._forbidden) if self._forbidden is not None else None})"
        )

    @staticmethod
    def _as_plain(mapping):
        return dict(mapping) if mapping is not None else None

    # ---------- Evaluation ----------

    def matches(self, word: str) -> bool:
        """Return True iff `word` is consistent with every piece of supplied evidence."""
        return (
            self._has_wrong_position_letters(word)
            and self._has_correct_positions(word)
            and self._avoids_forbidden(word)
        )

    __call__ = matches

    def _has_wrong_position_letters(self, word: str) -> bool:
        if self._required_counts is None:
            return True
        # NOTE: the slot a letter was guessed in is not excluded here
        counts = Counter(word)
        return all(counts[ch] >= n for ch, n in self._required_counts.items())

    def _has_correct_positions(self, word: str) -> bool:
        if self._correct_positions is None:
            return True
        # Walk the word, not the template: constraints past the end of a short word are ignored
        for i, ch in enumerate(word):
            required = self._correct_positions.get(i)
            if required is not None and required != ch:
                return False
        return True

    def _avoids_forbidden(self, word: str) -> bool:
        if self._forbidden is None:
            return True
        return not any(ch in self._forbidden for ch in word)


def filter_candidates(words: Iterable[str], predicate: EvidencePredicate) -> List[str]:
    """
    Keep only the words the predicate accepts.
    Order (and any duplicates) of `words` is preserved.
    """
    candidates = []
    for w in words:
        if predicate.matches(w):
            candidates.append(w)
    return candidates


def eligibility_mask(words: Iterable[str], predicate: EvidencePredicate) -> np.ndarray:
    """Return an int8 0/1 mask with one entry per word, 1 where the predicate accepts it."""
    return np.fromiter((1 if predicate.matches(w) else 0 for w in words), dtype=np.int8)


def filter_vocab(vocab: WordVocab, predicate: EvidencePredicate) -> List[str]:
    """Eligible words of `vocab`, in vocab order."""
    mask = eligibility_mask(vocab, predicate)
    eligible = vocab.to_words([int(i) for i in np.nonzero(mask)[0]])
    logger.debug("%d of %d words eligible", len(eligible), len(vocab))
    return eligible
