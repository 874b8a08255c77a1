class GuessError(ValueError):
    """Base class for a rejected guess. The attempt is not consumed."""


class LengthError(GuessError):
    """
    Raised when a guess does not have the code length.

    Attributes:
        expected (int): The required code length.
        actual (int): The length of the normalized guess.
    """

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Guess must be exactly {expected} symbols, but got {actual}."
        )


class InvalidSymbolError(GuessError):
    """
    Raised when a guess contains a symbol outside the alphabet.

    Attributes:
        symbol (str): The offending character.
        alphabet (list[str]): The allowed symbols.
    """

    def __init__(self, symbol: str, alphabet):
        self.symbol = symbol
        self.alphabet = list(alphabet)
        super().__init__(
            f"Invalid symbol '{symbol}'. Use only: {''.join(self.alphabet)}"
        )


class GameOverError(RuntimeError):
    """Raised when a guess is made on a game that already ended."""
