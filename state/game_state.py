# state/game_state.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"

    @property
    def is_terminal(self) -> bool:
        return self is not GameStatus.IN_PROGRESS


@dataclass(frozen=True)
class GuessResult:
    """
    Feedback for one accepted guess.

    Attributes:
        guess: The normalized guess, e.g. 'ABCD'.
        exact_matches: Symbols in the correct position.
        partial_matches: Correct symbols in a wrong position.
    """

    guess: str
    exact_matches: int
    partial_matches: int

    def get_feedback(self) -> tuple[int, int]:
        return (self.exact_matches, self.partial_matches)

    def is_solved(self, code_length: int) -> bool:
        return self.exact_matches == code_length


class GameState:
    """Read-only snapshot of a CipherMind session"""

    def __init__(
        self,
        rules,
        guesses,
        current_attempts,
        max_attempts,
        status,
        code=None,
    ):
        self.rules = rules
        self.guesses = tuple(guesses)
        self.current_attempts = current_attempts
        self.max_attempts = max_attempts
        self.status = status
        self.secret_code = code

    @property
    def is_over(self):
        return self.status.is_terminal

    @property
    def is_won(self):
        return self.status is GameStatus.WON

    @property
    def remaining_attempts(self):
        return max(0, self.max_attempts - self.current_attempts)

    def to_dict(self, reveal_code=False):
        # Return the snapshot as dictionary, i.e. for debug logging
        return {
            "rules": self.rules.get("name"),
            "guesses": [
                {"guess": g.guess, "feedback": list(g.get_feedback())}
                for g in self.guesses
            ],
            "current_attempts": self.current_attempts,
            "max_attempts": self.max_attempts,
            "status": self.status.value,
            "secret_code": self.secret_code if reveal_code else None,
        }
