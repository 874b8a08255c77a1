import logging
import random

from .guess import Guess
from .ruleset import DEFAULT_RULES
from state.game_state import GuessResult

logger = logging.getLogger(__name__)


def generate(alphabet, length: int, rng: random.Random) -> str:
    """
    Draw `length` symbols uniformly from `alphabet`, with replacement.

    Args:
        alphabet (Sequence[str]): The symbols to draw from.
        length (int): Number of symbols in the code.
        rng (random.Random): The random source owned by the caller.
    Returns:
        str: The generated code, repeated symbols allowed.
    """
    return "".join(rng.choices(list(alphabet), k=length))


def evaluate(secret: str, guess: str) -> GuessResult:
    """
    Score a guess against the secret.

    Args:
        secret (str): The secret code.
        guess (str): A validated guess of the same length.
    Returns:
        GuessResult: exact = right symbol in the right position,
        partial = right symbol in a wrong position.

    Notes:
        Each secret position is consumed by at most one match, exact
        matches first, so repeated symbols are never counted twice.
    """
    length = len(secret)
    secret_used = [False] * length
    guess_used = [False] * length
    exact = 0
    partial = 0

    # Same symbol, same position.
    for i in range(length):
        if guess[i] == secret[i]:
            exact += 1
            secret_used[i] = True
            guess_used[i] = True

    # Same symbol elsewhere: first unused secret position wins.
    for i in range(length):
        if guess_used[i]:
            continue
        for j in range(length):
            if not secret_used[j] and guess[i] == secret[j]:
                partial += 1
                secret_used[j] = True
                break

    return GuessResult(guess=guess, exact_matches=exact, partial_matches=partial)


class Code:
    """
        Represents the secret code for one game.
    Attributes:
        sequence (list[str]): The symbols of the code.
        rules (dict): The ruleset (length, symbols).
    """

    def __init__(self, sequence=None, rules=None):
        """
        Initialize a Code instance.

        Args:
            sequence (str or list or None): A fixed code, e.g. for tests.
            Use generate_random() to draw one instead.
            rules (dict or None): Reference to the ruleset.
        """
        self.rules = rules or DEFAULT_RULES
        if sequence is None:
            self.sequence = []
        else:
            # Same length and symbol rules as a guess.
            self.sequence = Guess(
                "".join(sequence), rules=self.rules
            ).get_guess()

    def generate_random(self, rng=None):
        """
        Generate a random code according to the rules.

        Args:
            rng (random.Random or None): Random source. A fresh one seeded
            from system entropy is used when omitted.
        """
        rng = rng or random.Random()
        self.sequence = list(
            generate(self.rules["colors"], self.rules["code_length"], rng)
        )
        logger.debug("Generated secret code %s", self.as_string())

    def compare_with(self, guess) -> GuessResult:
        """
        Compare this secret code with a Guess and compute the feedback.

        Args:
            guess (Guess): A validated guess.

        Returns:
            GuessResult: The guess with its exact and partial counts.
        """
        return evaluate(self.as_string(), guess.as_string())

    def as_string(self):
        """
        Return a string representation of the code (e.g. 'ABCD').
        Returns:
            str: The code as a string.
        """
        return "".join(self.sequence) if self.sequence else "EMPTY"

    def __eq__(self, other):
        if isinstance(other, Code):
            return self.sequence == other.sequence
        if isinstance(other, list):
            return self.sequence == other
        return False

    def __str__(self):
        return self.as_string()
