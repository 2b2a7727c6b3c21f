"""
Pico, Bagel, Fermi Feedback
===========================

Scores a guess against a reference sequence.

- Fermi ('f'): a guess symbol in the same position as in the reference
- Pico ('p'):  a guess symbol present somewhere else in the reference
- Bagel ('b'): no guess symbol appears in the reference at all

Presence is tested against the reference's symbol SET, not its multiset:
a symbol either occurs in the reference or it does not. With repeated
symbols this differs from classic Mastermind scoring, e.g. reference
"122" against guess "111" gives f=1, p=2.

Two implementations live here:
- Secret.compare: pure Python over any hashable symbols
- compute_feedback & co: numba kernels over integer-coded sequences,
  used by the solver to score whole candidate sets at once
"""

import numpy as np
from numba import jit, prange
from typing import Hashable, List, NamedTuple, Sequence, Union


# ============================================================================
# FEEDBACK VALUE
# ============================================================================

class Feedback(NamedTuple):
    """Feedback for one guess: p = presence-only matches, f = positional matches."""

    p: int
    f: int

    def __str__(self) -> str:
        if self.p == 0 and self.f == 0:
            return "b"
        return "f" * self.f + "p" * self.p

    @classmethod
    def parse(cls, text: str) -> "Feedback":
        """
        Parse the game notation ("ffp", "pp", "b") back into feedback.

        Case-insensitive; whitespace is ignored. An empty outcome counts
        as a bagel.
        """
        p = f = 0
        for c in text.lower():
            if c == "p":
                p += 1
            elif c == "f":
                f += 1
            elif c == "b" or c.isspace():
                continue
            else:
                raise ValueError(f"'{c}' is not a valid outcome (expected p, f or b)")
        return cls(p, f)

    def is_solved(self, length: int) -> bool:
        return self.f == length

    def encode(self, length: int) -> int:
        """Dense integer code, matching the kernels below."""
        return self.f * (length + 1) + self.p

    @classmethod
    def decode(cls, code: int, length: int) -> "Feedback":
        f, p = divmod(int(code), length + 1)
        return cls(p, f)


def outcome_space(length: int) -> List[Feedback]:
    """
    All feedback values possible for sequences of `length` positions.

    Every slot is either a positional match, present elsewhere, or absent,
    so the outcomes are exactly the (p, f) with p + f <= length.
    """
    if length < 1:
        raise ValueError(f"length must be at least 1, got {length}")
    return [Feedback(p, f)
            for f in range(length + 1)
            for p in range(length + 1 - f)]


# ============================================================================
# REFERENCE SEQUENCE
# ============================================================================

class Secret:
    """
    An immutable reference sequence with a set view for presence tests.

    Used both for the real secret and for any candidate the solver
    compares guesses against.
    """

    __slots__ = ("symbols", "symbol_set")

    def __init__(self, symbols: Sequence[Hashable]):
        self.symbols = tuple(symbols)
        self.symbol_set = frozenset(self.symbols)

    def __len__(self) -> int:
        return len(self.symbols)

    def __iter__(self):
        return iter(self.symbols)

    def __eq__(self, other) -> bool:
        if isinstance(other, Secret):
            return self.symbols == other.symbols
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.symbols)

    def __repr__(self) -> str:
        return f"Secret({list(self.symbols)!r})"

    def compare(self, candidate: Sequence[Hashable]) -> Feedback:
        """Score `candidate` against this reference."""
        candidate = tuple(candidate)
        if len(candidate) != len(self.symbols):
            raise ValueError(
                f"guess length ({len(candidate)}) != secret length ({len(self.symbols)})"
            )
        f = 0
        hits = 0
        for s, c in zip(self.symbols, candidate):
            if s == c:
                f += 1
            if c in self.symbol_set:
                hits += 1
        return Feedback(hits - f, f)


def compare(reference: Union[Secret, Sequence[Hashable]],
            candidate: Sequence[Hashable]) -> Feedback:
    """Score `candidate` against `reference` (a Secret or any sequence)."""
    if not isinstance(reference, Secret):
        reference = Secret(reference)
    return reference.compare(candidate)


# ============================================================================
# NUMBA KERNELS (integer-coded sequences)
# ============================================================================

def presence_table(codes: np.ndarray, n_symbols: int) -> np.ndarray:
    """
    Boolean table of which symbols each coded sequence contains.

    Args:
        codes: shape (n, length) array of symbol codes (0..n_symbols-1)
        n_symbols: alphabet size

    Returns:
        shape (n, n_symbols) bool array
    """
    table = np.zeros((codes.shape[0], n_symbols), dtype=np.bool_)
    rows = np.arange(codes.shape[0])[:, None]
    table[rows, codes] = True
    return table


@jit(nopython=True, cache=True)
def compute_feedback(reference: np.ndarray, present: np.ndarray,
                     candidate: np.ndarray) -> int:
    """
    Encoded feedback of `candidate` against `reference`.

    Args:
        reference: shape (length,) symbol codes
        present: shape (n_symbols,) presence row of the reference
        candidate: shape (length,) symbol codes

    Returns:
        f * (length + 1) + p
    """
    length = reference.shape[0]
    f = 0
    hits = 0
    for i in range(length):
        if reference[i] == candidate[i]:
            f += 1
        if present[candidate[i]]:
            hits += 1
    return f * (length + 1) + (hits - f)


@jit(nopython=True, parallel=True, cache=True)
def filter_consistent(space: np.ndarray, presence: np.ndarray,
                      candidates: np.ndarray, guess_codes: np.ndarray,
                      feedback_codes: np.ndarray) -> np.ndarray:
    """
    Keep the candidates that reproduce every recorded feedback.

    Args:
        space: shape (n_space, length) coded sequence space
        presence: presence table of `space`
        candidates: indices into `space`
        guess_codes: shape (n_guesses, length) recorded guesses
        feedback_codes: shape (n_guesses,) encoded recorded feedback

    Returns:
        Surviving indices, in their original order
    """
    n = candidates.shape[0]
    keep = np.zeros(n, dtype=np.bool_)
    for k in prange(n):
        c = candidates[k]
        ok = True
        for g in range(guess_codes.shape[0]):
            if compute_feedback(space[c], presence[c], guess_codes[g]) != feedback_codes[g]:
                ok = False
                break
        keep[k] = ok
    return candidates[keep]


@jit(nopython=True, parallel=True, cache=True)
def score_probes(space: np.ndarray, presence: np.ndarray,
                 candidates: np.ndarray, outcome_codes: np.ndarray,
                 excluded: np.ndarray) -> np.ndarray:
    """
    Minimax score of every probe in the space.

    For probe g the score is min over outcomes v of the number of
    candidates that would NOT answer v, i.e. n minus the largest group of
    candidates g cannot tell apart. Higher is better.

    Args:
        space: shape (n_space, length) coded sequence space (also the probes)
        presence: presence table of `space`
        candidates: indices into `space` of the surviving secrets
        outcome_codes: encoded outcome space
        excluded: shape (n_space,) bool, probes that may not be chosen

    Returns:
        shape (n_space,) scores, -1 for excluded probes
    """
    n_probes = space.shape[0]
    length = space.shape[1]
    n_codes = (length + 1) * (length + 1)
    n = candidates.shape[0]
    scores = np.full(n_probes, -1, dtype=np.int64)

    for g in prange(n_probes):
        if not excluded[g]:
            sizes = np.zeros(n_codes, dtype=np.int64)
            for k in range(n):
                c = candidates[k]
                sizes[compute_feedback(space[c], presence[c], space[g])] += 1
            best = n
            for o in range(outcome_codes.shape[0]):
                rest = n - sizes[outcome_codes[o]]
                if rest < best:
                    best = rest
            scores[g] = best

    return scores
