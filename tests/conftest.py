import pytest

from wordle_assist.session import Session
from wordle_assist.words import Corpus


def _write_dict(path, words, count=None):
    path.parent.mkdir(parents=True, exist_ok=True)
    header = len(words) if count is None else count
    path.write_text(f"{header}\n" + " ".join(words) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def write_dict():
    return _write_dict


@pytest.fixture
def tiny_answers():
    return Corpus(["ab", "cd", "ef", "gh"], 2, name="tiny")


@pytest.fixture
def sample_session():
    return Session.load("sample", "en", 5)


@pytest.fixture
def two_word_session():
    words = Corpus(["ab", "cd"], 2)
    return Session(words, words, "two", "xx")
