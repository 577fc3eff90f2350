"""
words.py

Handles loading and organizing the word lists.

A dictionary lives under DATA_DIR/<dict_name>/<dict_lang>/ as two files:

    answers.txt   words that can be the hidden answer
    full.txt      every word accepted as a guess

Each file starts with a word count followed by at least that many
whitespace separated words. Only words of the session's length are kept.
"""

import logging
from pathlib import Path

import numpy as np

from wordle_assist.errors import LengthMismatch, LoadError
from wordle_assist.patterns import MAX_LENGTH, encode_words


logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent.parent / "data"
DEFAULT_DICT = "sample"
DEFAULT_LANG = "en"
DEFAULT_WORD_LEN = 5
ANSWERS_FILE = "answers.txt"
FULL_FILE = "full.txt"


class Corpus:
    """
    Immutable ordered word list. Ids are 0-based positions in load order.

    `letters` holds the same words as a read-only (n, word_len) matrix of
    code points for the vectorised matcher.
    """

    def __init__(self, words, word_len: int, name: str = ""):
        words = tuple(words)
        if not 1 <= word_len <= MAX_LENGTH:
            raise LengthMismatch(
                f"word length must be between 1 and {MAX_LENGTH}, found {word_len}"
            )
        if not words:
            raise LoadError(f"corpus {name!r} has no words of length {word_len}")

        self.name = name
        self.word_len = word_len
        self._words = words
        self._ids = {}
        for word_id, word in enumerate(words):
            self._ids.setdefault(word, word_id)

        self.letters = encode_words(words, word_len)
        self.letters.setflags(write=False)

    def __len__(self):
        return len(self._words)

    def __getitem__(self, word_id):
        return self._words[word_id]

    def __iter__(self):
        return iter(self._words)

    def __contains__(self, word):
        return word in self._ids

    def __repr__(self):
        return f"Corpus(name={self.name!r}, size={len(self)}, word_len={self.word_len})"

    def index(self, word: str) -> int:
        """Id of the first occurrence of `word`; KeyError if absent."""
        return self._ids[word]

    def rows(self, ids) -> np.ndarray:
        return self.letters[np.asarray(ids, dtype=np.intp)]


def load_corpus(path, word_len: int) -> Corpus:
    """Load one count-headed dictionary file, keeping words of `word_len`."""
    path = Path(path)

    if not 1 <= word_len <= MAX_LENGTH:
        raise LoadError(
            f"word length out of range: expected 1..{MAX_LENGTH}, found {word_len}"
        )

    try:
        with open(path, "r", encoding="utf-8") as f:
            tokens = f.read().split()
    except (OSError, UnicodeDecodeError) as exc:
        raise LoadError(f'unable to open dictionary "{path}"') from exc

    try:
        total = int(tokens[0])
    except (IndexError, ValueError) as exc:
        raise LoadError(
            f'unable to parse dictionary "{path}": expected word count'
        ) from exc
    if total < 0:
        raise LoadError(f'unable to parse dictionary "{path}": negative word count')

    body = tokens[1:total + 1]
    if len(body) < total:
        raise LoadError(
            f'unable to parse dictionary "{path}": expected {total} words, '
            f"found {len(body)}"
        )

    words = [word for word in body if len(word) == word_len]
    if not words:
        raise LoadError(
            f'unable to load dictionary "{path}": '
            f"no words with length {word_len} present"
        )

    logger.info("Loaded %d of %d words from %s", len(words), total, path)
    return Corpus(words, word_len, name=str(path))


def load_words(
    dict_name=DEFAULT_DICT,
    dict_lang=DEFAULT_LANG,
    word_len=DEFAULT_WORD_LEN,
    data_dir=None,
):
    """
    Returns:
        answers: corpus of possible solution words
        guesses: corpus of valid guess words
    """
    base = Path(data_dir) if data_dir is not None else DATA_DIR
    dict_dir = base / dict_name / dict_lang

    try:
        answers = load_corpus(dict_dir / ANSWERS_FILE, word_len)
    except LoadError as exc:
        raise LoadError(f"unable to load answer dictionary: {exc}") from exc

    try:
        guesses = load_corpus(dict_dir / FULL_FILE, word_len)
    except LoadError as exc:
        raise LoadError(f"unable to load full dictionary: {exc}") from exc

    return answers, guesses
