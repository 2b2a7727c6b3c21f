"""
Minimax Hint Solver
===================

Tracks which secrets are still consistent with the guesses seen so far and
picks the next probe that minimizes the worst-case number of secrets left.

Algorithm:
- The sequence space is every length-`length` sequence over the alphabet,
  repetition allowed, in itertools.product order of the declared alphabet
- A candidate survives only if, for every recorded guess, comparing the
  candidate against the guess gives exactly the recorded feedback
- next_guess scores every probe in the full space (not just the candidates):
      score(g) = min_v |{c : feedback(c, g) != v}|
               = |candidates| - largest partition of candidates under g
  and returns the highest-scoring probe not already guessed

Tie-break: among probes with the same score, the one earliest in
enumeration order wins (numpy.argmax returns the first maximum).

Cost: the space is |alphabet|^length sequences, built eagerly once. That is
fine for the game's sizes (10 digits, 3-5 positions) but not beyond, so
construction refuses spaces larger than `max_space`.
"""

import itertools
import time
import numpy as np
from typing import Hashable, Iterable, Iterator, List, NamedTuple, Optional, Sequence, Tuple

from .feedback import (
    Feedback,
    filter_consistent,
    outcome_space,
    presence_table,
    score_probes,
)


# ============================================================================
# CONSTANTS
# ============================================================================

MAX_SPACE_SIZE = 10 ** 6  # 10 symbols, 6 positions


# ============================================================================
# TYPES
# ============================================================================

class Guess(NamedTuple):
    """A guess and the feedback it received against the true secret."""

    guess: Tuple[Hashable, ...]
    feedback: Feedback


def iter_sequences(alphabet: Sequence[Hashable], length: int) -> Iterator[Tuple[Hashable, ...]]:
    """Lazily yield every sequence of `length` symbols, in enumeration order."""
    return itertools.product(tuple(alphabet), repeat=length)


def space_size(alphabet: Sequence[Hashable], length: int) -> int:
    return len(alphabet) ** length


# ============================================================================
# SOLVER CLASS
# ============================================================================

class GuessState:
    """
    Guess history plus the shrinking set of consistent secrets.

    States:
    - fresh: every sequence is a candidate, no guesses
    - narrowing: some guesses recorded, several candidates left
    - solved: exactly one candidate left, next_guess returns it directly
    - exhausted: no candidate left, the recorded feedback contradicts itself
    """

    def __init__(self, alphabet: Iterable[Hashable], length: int,
                 max_space: int = MAX_SPACE_SIZE, verbose: bool = False):
        """
        Initialize solver.

        Args:
            alphabet: Distinct, hashable symbols a sequence may use
            length: Number of positions in the secret
            max_space: Largest sequence space this solver will build
            verbose: Print progress and timings
        """
        self.alphabet = tuple(alphabet)
        self.length = length
        self.verbose = verbose

        if not self.alphabet:
            raise ValueError("alphabet must not be empty")
        if length < 1:
            raise ValueError(f"length must be at least 1, got {length}")

        self.symbol_to_code = {s: i for i, s in enumerate(self.alphabet)}
        if len(self.symbol_to_code) != len(self.alphabet):
            raise ValueError(f"alphabet has duplicate symbols: {list(self.alphabet)!r}")

        n_space = space_size(self.alphabet, length)
        if n_space > max_space:
            raise ValueError(
                f"{len(self.alphabet)} symbols over {length} positions gives "
                f"{n_space} sequences, more than max_space={max_space}"
            )

        self.outcomes = outcome_space(length)
        self._outcome_codes = np.array([o.encode(length) for o in self.outcomes], dtype=np.int64)
        self._outcome_set = frozenset(self.outcomes)

        if verbose:
            print(f"Enumerating {n_space} sequences ({len(self.alphabet)} symbols ^ {length})...")
        start = time.time()
        self.space = self._build_space()
        self.presence = presence_table(self.space, len(self.alphabet))
        if verbose:
            print(f"Done in {time.time() - start:.2f}s")

        # Indices into self.space, always in enumeration order
        self._candidates = np.arange(n_space, dtype=np.int64)
        self._guesses: List[Guess] = []
        self._guess_codes = np.zeros((0, length), dtype=np.int32)
        self._feedback_codes = np.zeros(0, dtype=np.int64)
        self._guessed = np.zeros(n_space, dtype=np.bool_)

    def _build_space(self) -> np.ndarray:
        """Code array of the whole space, row i = i-th sequence in enumeration order."""
        codes = range(len(self.alphabet))
        flat = np.fromiter(
            itertools.chain.from_iterable(itertools.product(codes, repeat=self.length)),
            dtype=np.int32,
        )
        return flat.reshape(-1, self.length)

    def _encode(self, sequence: Sequence[Hashable]) -> np.ndarray:
        sequence = tuple(sequence)
        if len(sequence) != self.length:
            raise ValueError(f"guess length ({len(sequence)}) != secret length ({self.length})")
        try:
            return np.array([self.symbol_to_code[s] for s in sequence], dtype=np.int32)
        except KeyError as e:
            raise ValueError(f"{e.args[0]!r} is not in the alphabet") from None

    def _index_of(self, codes: np.ndarray) -> int:
        """Position of a coded sequence in enumeration order."""
        idx = 0
        for c in codes:
            idx = idx * len(self.alphabet) + int(c)
        return idx

    def _decode(self, idx: int) -> Tuple[Hashable, ...]:
        return tuple(self.alphabet[c] for c in self.space[idx])

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._candidates)

    def candidates(self) -> List[Tuple[Hashable, ...]]:
        """Surviving secrets, in enumeration order."""
        return [self._decode(i) for i in self._candidates]

    def guesses(self) -> Tuple[Guess, ...]:
        """Recorded guesses, in the order they were added."""
        return tuple(self._guesses)

    def is_solved(self) -> bool:
        return len(self._candidates) == 1

    def is_exhausted(self) -> bool:
        return len(self._candidates) == 0

    # ------------------------------------------------------------------
    # Updates
    # ------------------------------------------------------------------

    def add_guess(self, guess: Sequence[Hashable], feedback: Tuple[int, int]):
        """
        Record a guess with its feedback and drop inconsistent candidates.

        Contradictory feedback may leave no candidate at all; that is a
        valid state, see is_exhausted().
        """
        codes = self._encode(guess)
        feedback = Feedback(*feedback)
        if feedback not in self._outcome_set:
            raise ValueError(f"feedback {tuple(feedback)} is impossible for length {self.length}")

        self._guesses.append(Guess(tuple(guess), feedback))
        self._guess_codes = np.vstack([self._guess_codes, codes[None, :]])
        self._feedback_codes = np.append(self._feedback_codes, feedback.encode(self.length))
        self._guessed[self._index_of(codes)] = True

        n_before = len(self._candidates)
        self._candidates = filter_consistent(
            self.space, self.presence, self._candidates,
            self._guess_codes, self._feedback_codes,
        )
        if self.verbose:
            print(f"{''.join(map(str, guess))} -> {feedback}: "
                  f"{n_before} -> {len(self._candidates)} candidates")

    # ------------------------------------------------------------------
    # Hint
    # ------------------------------------------------------------------

    def next_guess(self) -> Optional[Tuple[Hashable, ...]]:
        """
        Best probe to play next.

        Returns:
            The only candidate if solved; None if exhausted or every probe
            has already been guessed; otherwise the minimax probe.
        """
        n = len(self._candidates)
        if n == 0:
            return None
        if n == 1:
            return self._decode(self._candidates[0])

        start = time.time()
        scores = score_probes(
            self.space, self.presence, self._candidates,
            self._outcome_codes, self._guessed,
        )
        best_idx = int(np.argmax(scores))
        if scores[best_idx] < 0:
            return None

        if self.verbose:
            print(f"Scored {len(self.space)} probes against {n} candidates "
                  f"in {time.time() - start:.2f}s (best score {scores[best_idx]})")
        return self._decode(best_idx)
