"""Debug script for tracing solver behavior."""

import sys

from pbf.feedback import Secret
from pbf.solver import GuessState


def trace_solve(secret, alphabet="0123456789", max_turns=20):
    secret = Secret(secret)
    state = GuessState(alphabet, len(secret), verbose=True)

    print(f"\n=== Tracing solve for: {''.join(secret)} ===\n")

    for i in range(max_turns):
        cands = state.candidates()
        print(f"Turn {i+1}: {len(cands)} candidates")
        if len(cands) <= 10:
            print(f"  Candidates: {[''.join(c) for c in cands]}")

        guess = state.next_guess()
        if guess is None:
            print("  No hint available")
            return None

        fb = secret.compare(guess)
        print(f"  Guess: {''.join(guess)} -> {fb}")

        if fb.is_solved(len(secret)):
            print(f"\n✓ Solved in {i+1} guesses!")
            return i + 1

        state.add_guess(guess, fb)

        if tuple(secret) not in state.candidates():
            print(f"  ERROR: {''.join(secret)} not in remaining candidates!")
            break

    print(f"\n✗ Failed to solve in {max_turns} guesses")
    return None


if __name__ == "__main__":
    for word in sys.argv[1:] or ["123"]:
        trace_solve(word)
