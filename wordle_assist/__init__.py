"""
Entropy-ranked assistant for Wordle-style letter-guessing puzzles.
"""

from wordle_assist.errors import (
    EmptyCandidateSet,
    InvalidEncoding,
    LengthMismatch,
    LoadError,
    WordleError,
)
from wordle_assist.patterns import INVALID, MAX_LENGTH, OutcomeCode, match_word
from wordle_assist.ranking import GuessAssessment, GuessChoice, OutcomeGroup
from wordle_assist.session import Session
from wordle_assist.state import CandidateSet
from wordle_assist.words import Corpus, load_corpus, load_words


__version__ = "0.1.0"

__all__ = [
    "CandidateSet",
    "Corpus",
    "EmptyCandidateSet",
    "GuessAssessment",
    "GuessChoice",
    "INVALID",
    "InvalidEncoding",
    "LengthMismatch",
    "LoadError",
    "MAX_LENGTH",
    "OutcomeCode",
    "OutcomeGroup",
    "Session",
    "WordleError",
    "load_corpus",
    "load_words",
    "match_word",
]
