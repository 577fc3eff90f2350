"""
errors.py

Exceptions raised by the solver. The shell catches WordleError at the
command boundary; library callers can catch the specific subclasses.
"""


class WordleError(Exception):
    """Base class for every error the solver reports."""


class LoadError(WordleError):
    """A dictionary could not be turned into a corpus."""


class InvalidEncoding(WordleError, ValueError):
    """Outcome text is too long or contains an unrecognised character."""


class LengthMismatch(WordleError, ValueError):
    """Guess, answer or outcome lengths disagree, or exceed MAX_LENGTH."""


class EmptyCandidateSet(WordleError):
    """Ranking or assessment was requested with no candidates left."""
