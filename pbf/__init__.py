"""
Pico, Bagel, Fermi - Hint Solver
================================

Scores guesses in the Pico, Bagel, Fermi code-breaking game and suggests
the next guess by minimax over feedback partitions.
"""

__version__ = "0.1.0"

from .feedback import Feedback, Secret, compare, outcome_space
from .solver import GuessState, Guess, iter_sequences, MAX_SPACE_SIZE
from .hints import HintSession
