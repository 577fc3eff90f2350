"""
session.py

One solving session: the answer and guess corpora for a dictionary plus
the candidates narrowed so far. Loading another dictionary builds a new
Session rather than changing this one.
"""

from wordle_assist.errors import InvalidEncoding, LengthMismatch
from wordle_assist.patterns import OutcomeCode, match_word
from wordle_assist.ranking import CHUNK_SIZE
from wordle_assist.state import CandidateSet
from wordle_assist.words import load_words


class Session:
    def __init__(self, answers, guesses, dict_name="", dict_lang=""):
        if answers.word_len != guesses.word_len:
            raise LengthMismatch(
                f"answer words have length {answers.word_len}, "
                f"guess words have length {guesses.word_len}"
            )
        self.answers = answers
        self.guesses = guesses
        self.dict_name = dict_name
        self.dict_lang = dict_lang
        self.state = CandidateSet(answers)

    @classmethod
    def load(cls, dict_name, dict_lang, word_len, data_dir=None):
        answers, guesses = load_words(dict_name, dict_lang, word_len, data_dir)
        return cls(answers, guesses, dict_name, dict_lang)

    @property
    def word_len(self) -> int:
        return self.answers.word_len

    def candidate_count(self) -> int:
        return self.state.count()

    def status(self) -> dict:
        return {
            "dict_name": self.dict_name,
            "dict_lang": self.dict_lang,
            "word_len": self.word_len,
            "answer_count": len(self.answers),
            "guess_count": len(self.guesses),
            "candidate_count": self.state.count(),
        }

    def filter(self, guess_text: str, outcome_text: str) -> int:
        """Apply one observed outcome; returns the candidates left."""
        if len(guess_text) != self.word_len or len(outcome_text) != self.word_len:
            raise LengthMismatch(
                f"Incorrect word length: expected {self.word_len} letters "
                f"for both guess and result"
            )

        observed = OutcomeCode.from_text(outcome_text)
        if not observed.is_valid:
            raise InvalidEncoding(f"Invalid result string: {outcome_text!r}")

        return self.state.filter(guess_text, observed)

    def calculate(self, workers=1, chunk_size=CHUNK_SIZE, progress=False):
        return self.state.calculate(
            self.guesses, workers=workers, chunk_size=chunk_size, progress=progress
        )

    def assess(self, guess_text: str):
        return self.state.assess(guess_text)

    def match(self, answer_text: str, guess_text: str) -> OutcomeCode:
        """Outcome of any two equal-length words; neither needs a corpus."""
        return match_word(answer_text, guess_text)

    def reset(self):
        self.state.reset()

    def candidates(self, limit=None) -> list:
        return self.state.words(limit)

    def guess_word(self, choice) -> str:
        return self.guesses[choice.guess_id]

    def answer_word(self, answer_id: int) -> str:
        return self.answers[answer_id]
