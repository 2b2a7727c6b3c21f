"""
Hint Session
============

The text-level layer around GuessState: parses what a player types
("123", "fp"), keeps a solver for the current session and renders the
guess history the way the game shows it.

Run interactively:
    python -m pbf.hints --length 3
"""

import argparse
from typing import Hashable, List, Optional, Sequence, Tuple

from .feedback import Feedback, Secret
from .solver import GuessState


# ============================================================================
# CONSTANTS
# ============================================================================

DEFAULT_ALPHABET = tuple(range(10))
DEFAULT_LENGTH = 3

EXAMPLE_SECRET = "123"
EXAMPLE_GUESSES = ["789", "345", "234", "134", "123"]


# ============================================================================
# PARSING & RENDERING
# ============================================================================

def parse_digits(text: str) -> Tuple[int, ...]:
    """Parse "123" into (1, 2, 3)."""
    digits = []
    for c in text.strip():
        if not "0" <= c <= "9":
            raise ValueError(f"{c} is not a digit")
        digits.append(int(c))
    return tuple(digits)


def format_sequence(sequence: Sequence[Hashable]) -> str:
    return "".join(str(s) for s in sequence)


def render_guess(secret: Secret, guess: Sequence[Hashable]) -> str:
    """One line of a real game, e.g. "134 - fp" or "123 - fff (Correct)"."""
    feedback = secret.compare(guess)
    line = f"{format_sequence(guess)} - {feedback}"
    if feedback.is_solved(len(secret)):
        line += " (Correct)"
    return line


def example_game() -> List[str]:
    """The worked example from the rules page."""
    secret = Secret(EXAMPLE_SECRET)
    return [render_guess(secret, g) for g in EXAMPLE_GUESSES]


# ============================================================================
# SESSION
# ============================================================================

class HintSession:
    """
    A hint page session: guesses typed in with their outcomes, a hint on demand.
    """

    def __init__(self, alphabet: Sequence[Hashable] = DEFAULT_ALPHABET,
                 length: int = DEFAULT_LENGTH, verbose: bool = False):
        self.alphabet = tuple(alphabet)
        self.length = length
        self.verbose = verbose
        self.state = GuessState(self.alphabet, length, verbose=verbose)

    def parse_guess(self, text: str) -> Tuple[Hashable, ...]:
        if all(isinstance(s, int) for s in self.alphabet):
            return parse_digits(text)
        return tuple(text.strip())

    def add_guess(self, guess_text: str, outcome_text: str) -> Feedback:
        guess = self.parse_guess(guess_text)
        feedback = Feedback.parse(outcome_text)
        self.state.add_guess(guess, feedback)
        return feedback

    def reset(self):
        self.state = GuessState(self.alphabet, self.length, verbose=self.verbose)

    def hint(self) -> Optional[Tuple[Hashable, ...]]:
        return self.state.next_guess()

    def render_hint(self) -> str:
        hint = self.hint()
        if hint is None:
            if self.state.is_exhausted():
                return "No hint available: the outcomes entered contradict each other."
            return "No hint available."
        return format_sequence(hint)

    def render_guesses(self) -> List[str]:
        return [f"{format_sequence(g.guess)} - {g.feedback}" for g in self.state.guesses()]


# ============================================================================
# MAIN
# ============================================================================

def main(argv=None):
    parser = argparse.ArgumentParser(description="Pico, Bagel, Fermi hints")
    parser.add_argument("--length", type=int, default=DEFAULT_LENGTH,
                        help="number of symbols in the secret")
    parser.add_argument("--alphabet", default=None,
                        help="symbols the secret may use (default: digits 0-9)")
    parser.add_argument("--verbose", action="store_true", help="print solver timings")
    args = parser.parse_args(argv)

    alphabet = tuple(args.alphabet) if args.alphabet else DEFAULT_ALPHABET
    session = HintSession(alphabet, args.length, verbose=args.verbose)

    print("Example (secret 123):")
    for line in example_game():
        print(f"  {line}")
    print("\nEnter '<guess> <outcome>' (e.g. '456 b'), 'hint', 'reset' or 'quit'.")

    while True:
        try:
            line = input("> ").strip()
        except EOFError:
            break
        if not line:
            continue
        if line == "quit":
            break
        if line == "hint":
            print(session.render_hint())
            continue
        if line == "reset":
            session.reset()
            print("Guesses cleared.")
            continue

        guess_text, _, outcome_text = line.partition(" ")
        try:
            session.add_guess(guess_text, outcome_text)
        except ValueError as e:
            print(f"Error: {e}")
            continue
        for rendered in session.render_guesses():
            print(f"  {rendered}")
        print(f"  ({len(session.state)} possible secrets left)")


if __name__ == "__main__":
    main()
