# Configuration: symbols, code length, attempts, display settings.
DEFAULT_RULES = {
    "name": "classic",  # Identifier for this ruleset
    "code_length": 4,  # Number of symbols in the code
    "max_attempts": 10,  # Number of guesses per game
    "colors": [
        "A",
        "B",
        "C",
        "D",
        "E",
        "F",
    ],  # Default symbol set, six like classic Mastermind
    "display": {
        "marker": "●",  # One marker per exact / partial match
        "exact_color": "green",
        "partial_color": "yellow",
        "warn_below": 3,  # Warn when this many attempts (or fewer) are left
    },
}
