from .errors import InvalidSymbolError, LengthError
from .ruleset import DEFAULT_RULES


def normalize(raw_input: str) -> str:
    """
    Trim surrounding whitespace and fold to the canonical upper case.

    Args:
        raw_input (str): A line as typed by the player.
    Returns:
        str: The normalized candidate guess.
    """
    return raw_input.strip().upper()


def validate(raw_input: str, alphabet, length: int) -> str:
    """
    Normalize a raw guess and check it against the alphabet and code length.

    Args:
        raw_input (str): The raw guess.
        alphabet (Iterable[str]): Allowed upper-case symbols.
        length (int): Required code length.
    Returns:
        str: The normalized guess.
    Raises:
        LengthError: If the normalized guess has the wrong length.
        InvalidSymbolError: If a character is not in the alphabet.
    """
    guess = normalize(raw_input)

    # Length check
    if len(guess) != length:
        raise LengthError(length, len(guess))

    # Symbol check
    allowed = list(alphabet)
    for symbol in guess:
        if symbol not in allowed:
            raise InvalidSymbolError(symbol, allowed)

    return guess


class Guess:
    """
        Represents a single validated player guess.
    Attributes:
        sequence (list[str]): The guessed sequence of symbols.
        rules (dict): The ruleset used for validation.
    """

    def __init__(self, raw_input: str, rules=None):
        """
        Validate and store a guess.
        Args:
            raw_input (str): The guess as typed, e.g. ' abcd'.
            rules (dict, optional): The ruleset. Defaults to DEFAULT_RULES.
        Raises:
            LengthError, InvalidSymbolError: If the guess is rejected.
        """
        self.rules = rules or DEFAULT_RULES
        self.sequence = list(
            validate(
                raw_input, self.rules["colors"], self.rules["code_length"]
            )
        )

    def get_guess(self):
        """
        Return the stored guess.

        Returns:
            list[str]: The guess sequence."""
        return self.sequence

    def as_string(self):
        """
        Return a string representation of the guess (e.g. 'ABCD').
        Returns:
            str: The guess as a string."""
        return "".join(self.sequence)

    def __str__(self):
        return self.as_string()
