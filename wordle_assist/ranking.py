"""
ranking.py

Ranks every allowed guess by the entropy of the partition it induces on
the remaining candidates, and breaks a single guess down into its
outcome groups.

Ranking is a fork-join map: guess ids are cut into contiguous chunks, each
chunk is evaluated against read-only copies of the candidate and guess
letter matrices, and the results are merged and sorted only once every
chunk is back. Chunks can complete in any order without changing the
output.
"""

import logging
import multiprocessing as mp
import time
from typing import NamedTuple

import numpy as np
from tqdm import tqdm

from wordle_assist.entropy import entropy_from_counts, single_guess_entropy
from wordle_assist.errors import EmptyCandidateSet, LengthMismatch
from wordle_assist.patterns import OutcomeCode, encode_words, match_matrix


logger = logging.getLogger(__name__)

# Upper bound on (guess, candidate) cells matched in one numpy pass.
BLOCK_CELLS = 1 << 20
CHUNK_SIZE = 256


_WORKER_STATE = {}


class GuessChoice(NamedTuple):
    guess_id: int
    entropy: float


class OutcomeGroup(NamedTuple):
    code: OutcomeCode
    answer_ids: tuple


class GuessAssessment(NamedTuple):
    groups: list
    entropy: float


def _sort_key(choice):
    return (-choice.entropy, choice.guess_id)


def _entropy_chunk(candidate_letters, guess_letters, start, end):
    n_candidates = candidate_letters.shape[0]
    block = max(1, BLOCK_CELLS // n_candidates)
    choices = []

    for lo in range(start, end, block):
        hi = min(lo + block, end)
        codes = match_matrix(candidate_letters, guess_letters[lo:hi])
        for offset, row in enumerate(codes):
            choices.append(GuessChoice(lo + offset, single_guess_entropy(row)))

    return choices


def _init_worker(candidate_letters, guess_letters):
    _WORKER_STATE["candidate_letters"] = candidate_letters
    _WORKER_STATE["guess_letters"] = guess_letters


def _worker_chunk(task):
    start, end = task
    return _entropy_chunk(
        _WORKER_STATE["candidate_letters"],
        _WORKER_STATE["guess_letters"],
        start,
        end,
    )


def rank_guesses(
    answers,
    candidate_ids,
    guesses,
    workers=1,
    chunk_size=CHUNK_SIZE,
    progress=False,
):
    """
    Entropy of every word in `guesses` against the candidates.

    Returns one GuessChoice per guess id, by descending entropy with ties
    going to the lower guess id. The result is the same for any worker
    count or chunk size.
    """
    candidate_ids = np.asarray(candidate_ids, dtype=np.intp)
    if candidate_ids.size == 0:
        raise EmptyCandidateSet("No candidates left, nothing to calculate.")
    if answers.word_len != guesses.word_len:
        raise LengthMismatch(
            f"answer words have length {answers.word_len}, "
            f"guess words have length {guesses.word_len}"
        )

    workers = max(1, int(workers))
    chunk_size = max(1, int(chunk_size))
    start_time = time.perf_counter()

    candidate_letters = answers.rows(candidate_ids)
    guess_letters = guesses.letters
    n_guesses = len(guesses)
    tasks = [
        (start, min(start + chunk_size, n_guesses))
        for start in range(0, n_guesses, chunk_size)
    ]

    choices = []
    if workers == 1 or len(tasks) == 1:
        for start, end in tqdm(tasks, desc="Ranking guesses", disable=not progress):
            choices.extend(
                _entropy_chunk(candidate_letters, guess_letters, start, end)
            )
    else:
        start_methods = mp.get_all_start_methods()
        start_method = "fork" if "fork" in start_methods else "spawn"
        ctx = mp.get_context(start_method)

        with ctx.Pool(
            processes=min(workers, len(tasks)),
            initializer=_init_worker,
            initargs=(candidate_letters, guess_letters),
        ) as pool:
            results = pool.imap_unordered(_worker_chunk, tasks, chunksize=1)
            for chunk in tqdm(
                results,
                total=len(tasks),
                desc="Ranking guesses",
                disable=not progress,
            ):
                choices.extend(chunk)

    choices.sort(key=_sort_key)

    elapsed_ms = (time.perf_counter() - start_time) * 1000.0
    logger.info(
        "Calculation took %.2fms (%d guesses, %d candidates, %d worker(s)).",
        elapsed_ms,
        n_guesses,
        candidate_ids.size,
        workers,
    )
    return choices


def assess_guess(answers, candidate_ids, guess: str) -> GuessAssessment:
    """
    Split the candidates by the outcome `guess` would show against each.

    Groups come largest first, ties by ascending code value; ids inside a
    group keep ascending order. The entropy equals the figure
    rank_guesses() reports for the same guess.
    """
    if len(guess) != answers.word_len:
        raise LengthMismatch(
            f"Incorrect length of guess word: expected {answers.word_len}, "
            f"found {len(guess)}"
        )
    candidate_ids = np.asarray(candidate_ids, dtype=np.intp)
    if candidate_ids.size == 0:
        raise EmptyCandidateSet("No candidates left, nothing to assess.")

    guess_letters = encode_words([guess], answers.word_len)
    codes = match_matrix(answers.rows(candidate_ids), guess_letters)[0]
    values, inverse, counts = np.unique(
        codes, return_inverse=True, return_counts=True
    )
    inverse = inverse.reshape(-1)

    order = sorted(range(values.size), key=lambda k: (-counts[k], values[k]))
    groups = [
        OutcomeGroup(
            OutcomeCode(int(values[k])),
            tuple(int(answer_id) for answer_id in candidate_ids[inverse == k]),
        )
        for k in order
    ]

    return GuessAssessment(groups, entropy_from_counts(counts))
