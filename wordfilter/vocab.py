from __future__ import annotations
from typing import Iterable, List, Optional
import pandas as pd

DEFAULT_WORD_LEN = 5


class WordVocab:
    def __init__(self, words: List[str]) -> None:
        if not isinstance(words, list):
            raise TypeError("`words` must be a list of strings")
        if not words:
            raise ValueError("no words provided")
        if not all(isinstance(w, str) for w in words):
            raise TypeError("all items in `words` must be str")

        # Loaders dedupe; direct construction must already be unique
        if len(set(words)) != len(words):
            raise ValueError("duplicate words detected; input to WordVocab must be deduplicated")

        self._words: List[str] = list(words)

    # ---------- Construction helpers ----------

    @classmethod
    def from_csv(
        cls,
        path: str,
        column: str = "word",
        *,
        word_len: Optional[int] = DEFAULT_WORD_LEN,
        lowercase: bool = True,
        dedupe: bool = True,
        alpha_only: bool = True,
    ) -> "WordVocab":
        """
        Load words from a CSV and build a WordVocab.

        Parameters
        ----------
        path : str
            Path to CSV file.
        column : str
            Column name containing words.
        word_len : int or None, default=5
            Required word length. None keeps words of any length.
        lowercase : bool, default=True
            If True, lowercase words before validation.
        dedupe : bool, default=True
            If True, keep the first occurrence and drop later duplicates.
        alpha_only : bool, default=True
            If True, keep only alphabetic words (str.isalpha()).

        Raises
        ------
        FileNotFoundError, KeyError, ValueError, TypeError
        """
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
        if column not in df.columns:
            raise KeyError(f"column '{column}' not found in {path}")
        return cls._from_raw(
            df[column].tolist(),
            word_len=word_len,
            lowercase=lowercase,
            dedupe=dedupe,
            alpha_only=alpha_only,
        )

    @classmethod
    def from_lines(
        cls,
        path: str,
        *,
        word_len: Optional[int] = DEFAULT_WORD_LEN,
        lowercase: bool = True,
        dedupe: bool = True,
        alpha_only: bool = True,
    ) -> "WordVocab":
        """
        Load a plain word list (one word per line). Same cleaning rules as `from_csv`.
        Lines may carry extra tab-separated fields (e.g. "word<TAB>count"); only the first is kept.
        """
        with open(path, encoding="utf-8") as f:
            lines = pd.Series(f.read().splitlines(), dtype=str)
        return cls._from_raw(
            lines.str.split("\t").str[0].tolist(),
            word_len=word_len,
            lowercase=lowercase,
            dedupe=dedupe,
            alpha_only=alpha_only,
        )

    @classmethod
    def _from_raw(
        cls,
        raw_iter: Iterable,
        *,
        word_len: Optional[int],
        lowercase: bool,
        dedupe: bool,
        alpha_only: bool,
    ) -> "WordVocab":
        clean: List[str] = []
        seen = set()

        for val in raw_iter:
            if not isinstance(val, str):
                val = str(val) if val is not None else ""
            w = val.strip()
            w = w.lower() if lowercase else w

            if not w:
                continue
            if word_len is not None and len(w) != word_len:
                continue
            if alpha_only and not w.isalpha():
                continue

            if dedupe:
                if w in seen:
                    continue
                seen.add(w)

            clean.append(w)

        if not clean:
            raise ValueError("no valid words after filtering")

        return cls(clean)

    # ---------- Basic protocol ----------

    def __len__(self) -> int:
        """Number of words in the vocabulary."""
        return len(self._words)

    def __iter__(self):
        return iter(self._words)

    def words(self) -> List[str]:
        """Return a copy of the internal word list (to avoid external mutation)."""
        return list(self._words)

    def word_at(self, idx: int) -> str:
        """Return the word at position `idx`; raise IndexError if out of bounds."""
        if idx < 0 or idx >= len(self._words):
            raise IndexError(f"index out of range: {idx}")
        return self._words[idx]

    def to_words(self, indices: List[int]) -> List[str]:
        """Convert a list of indices to words; raise IndexError on the first invalid index."""
        out: List[str] = []
        for i in indices:
            out.append(self.word_at(i))
        return out
