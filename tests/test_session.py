import pytest

from wordle_assist.errors import (
    EmptyCandidateSet,
    InvalidEncoding,
    LengthMismatch,
    LoadError,
)
from wordle_assist.session import Session
from wordle_assist.words import Corpus


def test_status_reports_sizes(sample_session):
    assert sample_session.status() == {
        "dict_name": "sample",
        "dict_lang": "en",
        "word_len": 5,
        "answer_count": 496,
        "guess_count": 592,
        "candidate_count": 496,
    }


def test_filter_narrows_candidates(sample_session):
    left = sample_session.filter("crane", "mCC-C")
    assert 0 < left < 496
    assert "trace" in sample_session.candidates()
    assert sample_session.status()["candidate_count"] == left


def test_digit_outcomes_are_accepted(sample_session):
    letters = Session(sample_session.answers, sample_session.guesses)
    assert sample_session.filter("crane", "23313") == letters.filter("crane", "mCC-C")
    assert sample_session.candidates() == letters.candidates()


@pytest.mark.parametrize("guess,outcome", [
    ("cranes", "mCC-C"),
    ("crane", "mCC-"),
    ("cran", "mCC-"),
])
def test_length_mismatch_leaves_session_intact(sample_session, guess, outcome):
    with pytest.raises(LengthMismatch):
        sample_session.filter(guess, outcome)
    assert sample_session.candidate_count() == 496


def test_invalid_outcome_leaves_session_intact(sample_session):
    with pytest.raises(InvalidEncoding):
        sample_session.filter("crane", "mCx-C")
    assert sample_session.candidate_count() == 496


def test_calculate_and_assess(sample_session):
    sample_session.filter("crane", "mCC-C")
    choices = sample_session.calculate()
    assert len(choices) == 592
    assert sample_session.calculate() is choices

    best = sample_session.guess_word(choices[0])
    assessment = sample_session.assess(best)
    assert assessment.entropy == choices[0].entropy
    assert sum(len(g.answer_ids) for g in assessment.groups) == sample_session.candidate_count()


def test_filter_drops_cached_ranking(sample_session):
    sample_session.calculate()
    sample_session.filter("crane", "mCC-C")
    assert sample_session.state.choices is None


def test_empty_session_rejects_calculate_and_assess(two_word_session):
    assert two_word_session.filter("ab", "--") == 1
    assert two_word_session.candidates() == ["cd"]
    assert two_word_session.filter("cd", "--") == 0

    with pytest.raises(EmptyCandidateSet):
        two_word_session.calculate()
    with pytest.raises(EmptyCandidateSet):
        two_word_session.assess("ab")


def test_reset(two_word_session):
    two_word_session.filter("ab", "CC")
    two_word_session.reset()
    assert two_word_session.candidates() == ["ab", "cd"]


def test_match_does_not_need_the_corpus(two_word_session):
    assert two_word_session.match("crane", "trace").to_text(5) == "-CCmC"
    with pytest.raises(LengthMismatch):
        two_word_session.match("crane", "tracer")


def test_answer_word_lookup(two_word_session):
    assert two_word_session.answer_word(1) == "cd"


def test_load_from_data_dir(tmp_path, write_dict):
    write_dict(tmp_path / "mini" / "xx" / "answers.txt", ["abcd", "bcda"])
    write_dict(tmp_path / "mini" / "xx" / "full.txt", ["abcd", "bcda", "dddd"])
    session = Session.load("mini", "xx", 4, data_dir=tmp_path)
    assert session.status()["guess_count"] == 3
    assert session.word_len == 4


def test_load_failure_raises(tmp_path):
    with pytest.raises(LoadError):
        Session.load("missing", "en", 5, data_dir=tmp_path)


def test_corpora_must_share_word_length():
    with pytest.raises(LengthMismatch):
        Session(Corpus(["ab"], 2), Corpus(["abc"], 3))
