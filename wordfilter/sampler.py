from __future__ import annotations

import random
from wordfilter.vocab import WordVocab


class WordSampler:
    def __init__(self, vocab: WordVocab, seed: int | None = None) -> None:
        if not isinstance(vocab, WordVocab):
            raise TypeError("vocab must be a WordVocab")
        if len(vocab) == 0:
            raise ValueError("vocab is empty")

        self._vocab = vocab

        # Deterministic if seed provided
        self._rng = random.Random(seed)
        self._seed = seed

    @property
    def seed(self) -> int | None:
        return self._seed

    def set_seed(self, seed: int) -> None:
        self._rng = random.Random(seed)
        self._seed = seed

    def choice_index(self) -> int:
        return self._rng.randrange(len(self._vocab))

    def choice_word(self) -> str:
        return self._vocab.word_at(self.choice_index())

    def sample_indices(self, k: int) -> list[int]:
        """
        Draw `k` distinct indices uniformly without replacement.
        Raises ValueError up front if the vocab cannot supply `k` distinct words.
        """
        if not isinstance(k, int) or isinstance(k, bool) or k < 0:
            raise ValueError("k must be a non-negative integer")
        n = len(self._vocab)
        if k > n:
            raise ValueError(f"cannot sample {k} distinct words from a vocab of {n}")
        return self._rng.sample(range(n), k)

    def sample_words(self, k: int) -> list[str]:
        return self._vocab.to_words(self.sample_indices(k))
