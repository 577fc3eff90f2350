import itertools

import numpy as np
import pytest

from wordle_assist.errors import LengthMismatch
from wordle_assist.patterns import (
    CORRECT,
    INVALID,
    MAX_LENGTH,
    MISPLACED,
    OutcomeCode,
    encode_words,
    match_matrix,
    match_word,
)


WORDS = ["crane", "trace", "level", "belle", "scoop", "cools", "speed",
         "geese", "eerie", "abbey", "babes", "sassy", "asses", "llama"]


def test_crane_trace_marks_the_claimed_guess_slot():
    code = match_word("CRANE", "TRACE")
    assert code.to_text(5) == "-CCmC"
    assert code.symbols(5) == (0, 2, 2, 1, 2)


# (answer, guess, expected)
@pytest.mark.parametrize("answer,guess,expected", [
    ("level", "belle", "-Cmmm"),
    ("level", "level", "CCCCC"),
    ("scoop", "cools", "mmC-m"),
    ("crane", "eerie", "--m-C"),
    ("speed", "geese", "-mCm-"),
    ("abbey", "babes", "mmCC-"),
    ("crane", "trace", "-CCmC"),
    ("trace", "crane", "mCC-C"),
    ("letter", "settle", "-CCCmm"),
])
def test_match_word_golden(answer, guess, expected):
    assert match_word(answer, guess).to_text(len(answer)) == expected


def test_match_word_is_deterministic():
    first = match_word("sassy", "asses")
    for _ in range(5):
        assert match_word("sassy", "asses") == first


def test_match_word_never_double_counts_letters():
    for answer, guess in itertools.product(WORDS, repeat=2):
        code = match_word(answer, guess)
        for letter in set(guess):
            marked = sum(
                1
                for j, ch in enumerate(guess)
                if ch == letter and code.symbol(j) != 0
            )
            assert marked <= answer.count(letter), (answer, guess, letter)


def test_match_word_rejects_length_mismatch():
    with pytest.raises(LengthMismatch):
        match_word("crane", "cranes")


def test_match_word_rejects_words_over_max_length():
    word = "a" * (MAX_LENGTH + 1)
    with pytest.raises(LengthMismatch):
        match_word(word, word)


def test_match_matrix_agrees_with_match_word():
    letters = encode_words(WORDS, 5)
    codes = match_matrix(letters, letters)
    assert codes.shape == (len(WORDS), len(WORDS))
    assert codes.dtype == np.uint32
    for g, guess in enumerate(WORDS):
        for a, answer in enumerate(WORDS):
            assert int(codes[g, a]) == match_word(answer, guess).value


def test_match_matrix_rejects_different_widths():
    with pytest.raises(LengthMismatch):
        match_matrix(encode_words(["crane"], 5), encode_words(["ab"], 2))


def test_encode_words_checks_length():
    with pytest.raises(LengthMismatch):
        encode_words(["crane", "cat"], 5)


def test_packed_value_layout():
    assert OutcomeCode.from_text("-CCmC").value == 616
    assert OutcomeCode.from_text("C").value == CORRECT
    assert OutcomeCode.from_text("-m").value == MISPLACED << 2
    assert OutcomeCode.from_text("").value == 0


def test_digit_and_letter_alphabets_agree():
    assert OutcomeCode.from_text("12232") == OutcomeCode.from_text("-mmCm")


@pytest.mark.parametrize("text", ["-CxmC", "c", "M", "-C-C ", "?"])
def test_unrecognized_characters_yield_invalid(text):
    assert OutcomeCode.from_text(text) == INVALID


def test_text_longer_than_max_length_is_invalid():
    assert OutcomeCode.from_text("C" * (MAX_LENGTH + 1)) == INVALID
    code = OutcomeCode.from_text("C" * MAX_LENGTH)
    assert code.is_valid
    assert code.to_text(MAX_LENGTH) == "C" * MAX_LENGTH


def test_text_round_trip():
    for text in ("-CCmC", "mmmm", "C-m-C-m-C-m-C-m-", "-"):
        code = OutcomeCode.from_text(text)
        assert code.to_text(len(text)) == text
        assert OutcomeCode.from_text(code.to_text(len(text))) == code


def test_invalid_sentinel_is_never_a_match_result():
    assert not INVALID.is_valid
    assert INVALID.to_text(2) == "??"
    assert match_word("aaaa", "bbbb") != INVALID


def test_from_symbols_validates_width_and_values():
    with pytest.raises(LengthMismatch):
        OutcomeCode.from_symbols([0] * (MAX_LENGTH + 1))
    with pytest.raises(ValueError):
        OutcomeCode.from_symbols([0, 3])
    assert OutcomeCode.from_symbols([2, 1]).to_text(2) == "Cm"


def test_outcome_value_range_is_checked():
    with pytest.raises(ValueError):
        OutcomeCode(-1)
    with pytest.raises(ValueError):
        OutcomeCode(1 << 32)
