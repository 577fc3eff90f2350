"""
entropy.py

Entropy of a guess from the sizes of the outcome groups it splits the
candidates into.
"""

import numpy as np


def entropy_from_counts(counts):
    """
    Shannon entropy in bits from group sizes.

        H = -sum c_i/n log2(c_i/n)
          = log2(n) - sum(c_i log2 c_i) / n

    The second form needs no per-group division. Counts are summed in
    ascending order so two guesses with the same group sizes get exactly
    the same float, whatever order their groups were found in.
    """
    counts = np.asarray(counts, dtype=np.float64)
    counts = np.sort(counts[counts > 0])
    total = counts.sum()
    if total <= 0:
        raise ValueError("entropy of an empty partition is undefined")

    entropy = np.log2(total) - np.sum(counts * np.log2(counts)) / total
    return max(0.0, float(entropy))


def outcome_counts(codes):
    """Group sizes of a row of raw outcome values, ordered by code."""
    _, counts = np.unique(codes, return_counts=True)
    return counts


def single_guess_entropy(codes):
    """Entropy of one guess from its outcome against every candidate."""
    return entropy_from_counts(outcome_counts(codes))
