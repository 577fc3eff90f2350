"""
patterns.py

Outcome codes and the guess/answer matcher.

An outcome packs one 2-bit symbol per letter position into an unsigned
32-bit integer, position i living at bits 2i..2i+1:

    0 = absent
    1 = misplaced
    2 = correct

The value 3 never appears in a matched code, so the all-ones word is free
to act as the INVALID sentinel.

Matching comes in two shapes. match_word() works on a single pair of
strings and is the reference implementation; match_matrix() runs the same
two-pass algorithm over whole letter matrices with numpy broadcasting and
is what filtering and ranking use.
"""

import logging
from dataclasses import dataclass

import numpy as np

from wordle_assist.errors import LengthMismatch


logger = logging.getLogger(__name__)

ABSENT = 0
MISPLACED = 1
CORRECT = 2

BITS_PER_ELEM = 2
ELEM_MASK = (1 << BITS_PER_ELEM) - 1
CODE_BITS = 32
MAX_LENGTH = CODE_BITS // BITS_PER_ELEM
INVALID_VALUE = (1 << CODE_BITS) - 1

SYMBOL_CHARS = "-mC?"
TEXT_SYMBOLS = {
    "-": ABSENT,
    "1": ABSENT,
    "m": MISPLACED,
    "2": MISPLACED,
    "C": CORRECT,
    "3": CORRECT,
}


@dataclass(frozen=True, order=True)
class OutcomeCode:
    """Packed per-letter verdicts for one guess against one answer."""

    value: int = 0

    def __post_init__(self):
        if not 0 <= self.value <= INVALID_VALUE:
            raise ValueError(f"outcome value out of range: {self.value}")

    @classmethod
    def from_symbols(cls, symbols):
        symbols = list(symbols)
        if len(symbols) > MAX_LENGTH:
            raise LengthMismatch(
                f"outcome too long: expected <= {MAX_LENGTH}, found {len(symbols)}"
            )

        value = 0
        for i, symbol in enumerate(symbols):
            if symbol not in (ABSENT, MISPLACED, CORRECT):
                raise ValueError(f"invalid outcome symbol at {i}: {symbol!r}")
            value |= symbol << (BITS_PER_ELEM * i)
        return cls(value)

    @classmethod
    def from_text(cls, text: str) -> "OutcomeCode":
        """
        Parse outcome text such as "-CCmC" or "12232".

        Never raises: text that is too long or holds an unknown character
        yields INVALID, which callers compare against explicitly.
        """
        if len(text) > MAX_LENGTH:
            logger.debug("outcome text too long: %r", text)
            return INVALID

        value = 0
        for i, ch in enumerate(text):
            symbol = TEXT_SYMBOLS.get(ch)
            if symbol is None:
                logger.debug("unrecognized character %r in outcome %r", ch, text)
                return INVALID
            value |= symbol << (BITS_PER_ELEM * i)
        return cls(value)

    @property
    def is_valid(self) -> bool:
        return self.value != INVALID_VALUE

    def symbol(self, index: int) -> int:
        return (self.value >> (BITS_PER_ELEM * index)) & ELEM_MASK

    def symbols(self, length: int) -> tuple:
        return tuple(self.symbol(i) for i in range(length))

    def to_text(self, length: int) -> str:
        return "".join(SYMBOL_CHARS[self.symbol(i)] for i in range(length))


INVALID = OutcomeCode(INVALID_VALUE)


def check_lengths(answer: str, guess: str):
    if len(answer) != len(guess):
        raise LengthMismatch(
            f"lengths do not match: answer has {len(answer)}, guess has {len(guess)}"
        )
    if len(answer) > MAX_LENGTH:
        raise LengthMismatch(
            f"words too long: length should be no more than {MAX_LENGTH}"
        )


def match_word(answer: str, guess: str) -> OutcomeCode:
    """
    Outcome shown for `guess` when the hidden word is `answer`.

    1. Every position where the letters agree is correct.
    2. Every answer letter not matched in place claims the leftmost guess
       position that is still absent and holds the same letter; that guess
       position becomes misplaced.

    Each answer letter claims at most one guess position, so repeated
    letters are never double counted.
    """
    check_lengths(answer, guess)
    length = len(answer)
    marks = [ABSENT] * length

    for i in range(length):
        if guess[i] == answer[i]:
            marks[i] = CORRECT

    for i in range(length):
        if guess[i] == answer[i]:
            continue
        for j in range(length):
            if marks[j] == ABSENT and guess[j] == answer[i]:
                marks[j] = MISPLACED
                break

    return OutcomeCode.from_symbols(marks)


def encode_words(words, word_len: int) -> np.ndarray:
    """Letter matrix of shape (len(words), word_len) holding code points."""
    words = list(words)
    matrix = np.empty((len(words), word_len), dtype=np.int32)
    for row, word in enumerate(words):
        if len(word) != word_len:
            raise LengthMismatch(
                f"word {word!r} has length {len(word)}, expected {word_len}"
            )
        matrix[row] = [ord(ch) for ch in word]
    return matrix


def match_matrix(answers: np.ndarray, guesses: np.ndarray) -> np.ndarray:
    """
    Raw outcome values for every (guess, answer) pair.

    answers has shape (n, L) and guesses (b, L); the result has shape
    (b, n) and dtype uint32. Element [g, a] equals
    match_word(answer a, guess g).value.
    """
    word_len = answers.shape[1]
    if guesses.shape[1] != word_len:
        raise LengthMismatch(
            f"guess length {guesses.shape[1]} does not match answer length {word_len}"
        )

    a = answers[np.newaxis, :, :]
    g = guesses[:, np.newaxis, :]

    marks = np.where(a == g, CORRECT, ABSENT).astype(np.uint8)

    for i in range(word_len):
        pending = a[..., i] != g[..., i]
        for j in range(word_len):
            hit = pending & (marks[..., j] == ABSENT) & (g[..., j] == a[..., i])
            marks[..., j] = np.where(hit, MISPLACED, marks[..., j])
            pending &= ~hit

    shifts = np.arange(word_len, dtype=np.uint32) * BITS_PER_ELEM
    return (marks.astype(np.uint32) << shifts).sum(axis=-1, dtype=np.uint32)
