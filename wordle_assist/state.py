"""
state.py

Candidate answers still consistent with every outcome seen so far.

Not thread safe: filter() and reset() must not run while a ranking or an
assessment over the same instance is in flight.
"""

import numpy as np

from wordle_assist.errors import LengthMismatch
from wordle_assist.patterns import encode_words, match_matrix
from wordle_assist.ranking import CHUNK_SIZE, assess_guess, rank_guesses


class CandidateSet:
    def __init__(self, answers):
        self.answers = answers
        self.reset()

    def reset(self):
        """Every answer id becomes a candidate again."""
        self._ids = np.arange(len(self.answers), dtype=np.intp)
        self.reset_calculations()

    def reset_calculations(self):
        self.choices = None
        self._ranked_guesses = None

    def count(self) -> int:
        return int(self._ids.size)

    def ids(self) -> tuple:
        return tuple(int(answer_id) for answer_id in self._ids)

    def words(self, limit=None) -> list:
        ids = self._ids if limit is None else self._ids[:limit]
        return [self.answers[int(answer_id)] for answer_id in ids]

    def filter(self, guess: str, observed) -> int:
        """
        Drop every candidate that would not show `observed` for `guess`.

        The cached ranking survives only when nothing was removed.
        Returns the number of candidates left.
        """
        if len(guess) != self.answers.word_len:
            raise LengthMismatch(
                f"guess has length {len(guess)}, expected {self.answers.word_len}"
            )
        if self._ids.size == 0:
            return 0

        guess_letters = encode_words([guess], self.answers.word_len)
        codes = match_matrix(self.answers.rows(self._ids), guess_letters)[0]
        keep = codes == observed.value

        if not keep.all():
            self._ids = self._ids[keep]
            self.reset_calculations()

        return self.count()

    def calculate(self, guesses, workers=1, chunk_size=CHUNK_SIZE, progress=False):
        """Ranked GuessChoice list, computed once per candidate set and guess corpus."""
        if self.choices is None or guesses is not self._ranked_guesses:
            self.choices = rank_guesses(
                self.answers,
                self._ids,
                guesses,
                workers=workers,
                chunk_size=chunk_size,
                progress=progress,
            )
            self._ranked_guesses = guesses
        return self.choices

    def assess(self, guess: str):
        return assess_guess(self.answers, self._ids, guess)
