import logging
import random

from .errors import GameOverError
from .guess import Guess
from .ruleset import DEFAULT_RULES
from .secret_code import Code
from state.game_state import GameState, GameStatus

logger = logging.getLogger(__name__)


class Board:
    """Game session: secret code, attempt counter and guess history."""

    def __init__(self, rules=None, rng=None, secret=None):
        """
        Start a new game.

        Args:
            rules (dict, optional): The ruleset. Defaults to DEFAULT_RULES.
            rng (random.Random, optional): Random source for the secret.
            secret (str, optional): Fixed secret code instead of a random one.
        """
        self.rules = rules or DEFAULT_RULES
        self.secret_code = Code(secret, rules=self.rules)
        if secret is None:
            self.secret_code.generate_random(rng or random.Random())
        self.guesses = []
        self.current_attempt = 0
        self.max_attempts = self.rules.get("max_attempts", 10)
        self.status = GameStatus.IN_PROGRESS

    @property
    def is_over(self):
        return self.status.is_terminal

    @property
    def is_won(self):
        return self.status is GameStatus.WON

    def make_guess(self, guess_input):
        """
        Validate a raw guess, evaluate it and update the game state.

        Args:
            guess_input (str): The guess as typed by the player.
        Returns:
            GuessResult: Feedback for the accepted guess.
        Raises:
            LengthError, InvalidSymbolError: The guess was rejected, no
            attempt is consumed.
            GameOverError: The game has already ended.
        """
        if self.is_over:
            raise GameOverError(f"Game is already {self.status.value}.")

        # Validation errors propagate before any state changes
        new_guess = Guess(guess_input, rules=self.rules)

        self.current_attempt += 1
        result = self.secret_code.compare_with(new_guess)
        self.guesses.append(result)
        logger.debug(
            "Attempt %d/%d: %s -> %d exact, %d partial",
            self.current_attempt,
            self.max_attempts,
            result.guess,
            result.exact_matches,
            result.partial_matches,
        )

        self.check_game_over()
        return result

    def check_game_over(self):
        """Move to WON or LOST after the last guess, if the game is finished."""
        last_guess = self.guesses[-1]
        if last_guess.is_solved(self.rules["code_length"]):
            self.status = GameStatus.WON
        elif self.current_attempt >= self.max_attempts:
            self.status = GameStatus.LOST

        if self.is_over:
            logger.info(
                "Game %s after %d attempts", self.status.value,
                self.current_attempt,
            )

    def forfeit(self):
        """End an unfinished game as lost, without consuming an attempt."""
        if not self.is_over:
            self.status = GameStatus.LOST
            logger.info("Game forfeited after %d attempts", self.current_attempt)

    def get_feedback_history(self):
        """Return the full history as (guess, (exact, partial)) pairs."""
        return [(g.guess, g.get_feedback()) for g in self.guesses]

    def reveal_code(self):
        """Return the secret code (used at the end of the game)."""
        return self.secret_code.as_string()

    def remaining_attempts(self):
        """Return how many guesses are left."""
        return max(0, self.max_attempts - self.current_attempt)

    def get_current_state(self):
        """Return a GameState snapshot for rendering or logging."""
        return GameState(
            rules=self.rules,
            guesses=self.guesses,
            current_attempts=self.current_attempt,
            max_attempts=self.max_attempts,
            status=self.status,
            code=self.secret_code.as_string(),
        )
