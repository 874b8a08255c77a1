# Text rendering of banners, guess history and game outcome.
from state.game_state import GameStatus


def welcome_banner(rules, paint):
    """Return the lines of the welcome screen."""
    display = rules["display"]
    marker = display["marker"]
    symbols = "".join(rules["colors"])
    frame = "═" * 44
    return [
        paint(f"\n╔{frame}╗", "bold", "cyan"),
        paint("║      🧠 CIPHERMIND - MASTERMIND PUZZLE 🧠  ║", "bold", "cyan"),
        paint(f"╚{frame}╝", "bold", "cyan"),
        "",
        paint("Welcome to CipherMind!", "yellow"),
        "I've created a secret code using "
        + paint(f"{rules['code_length']} symbols", "bold")
        + ".",
        "Your mission: crack the code in "
        + paint(f"{rules['max_attempts']} attempts or less!", "bold"),
        "",
        paint("Available symbols: ", "purple") + paint(symbols, "purple", "bold"),
        "",
        "After each guess, I'll give you clues:",
        "  " + paint(marker, display["exact_color"])
        + " Green dots = symbols in the correct position",
        "  " + paint(marker, display["partial_color"])
        + " Yellow dots = correct symbols but wrong position",
        "",
        paint(
            f"Let's begin! Enter your guess (e.g., {symbols[:rules['code_length']]}):",
            "cyan",
        ),
        "",
    ]


def attempt_prompt(state, paint):
    return (
        paint(f"[Attempt {state.current_attempts + 1}/{state.max_attempts}]", "blue")
        + " Enter your guess: "
    )


def feedback_line(index, result, rules, paint):
    """
    Render one history entry, e.g. 'Attempt 2: ABCD → ●●● (2 exact, 1 misplaced)'.

    Args:
        index (int): 1-based attempt number.
        result (GuessResult): The scored guess.
        rules (dict): The ruleset (marker glyph and colors).
        paint (Painter): Color helper.
    Returns:
        str: The rendered line.
    """
    display = rules["display"]
    marker = display["marker"]
    line = f"Attempt {index}: " + paint(result.guess, "bold") + " → "
    line += paint(marker * result.exact_matches, display["exact_color"])
    line += paint(marker * result.partial_matches, display["partial_color"])

    if result.exact_matches == 0 and result.partial_matches == 0:
        line += paint(" None correct", "red")
    else:
        line += (
            f" ({result.exact_matches} exact, "
            f"{result.partial_matches} misplaced)"
        )
    return line


def history(state, paint):
    """Return the guess history block, empty before the first guess."""
    if not state.guesses:
        return []
    lines = [paint("\n--- Guess History ---", "bold")]
    for i, result in enumerate(state.guesses, start=1):
        lines.append(feedback_line(i, result, state.rules, paint))
    lines.append("")
    return lines


def remaining_warning(state, paint):
    """Return the low-attempts warning, or None when enough are left."""
    left = state.remaining_attempts
    if state.is_over or not 0 < left <= state.rules["display"]["warn_below"]:
        return None
    noun = "attempt" if left == 1 else "attempts"
    return paint(f"⚠️  Only {left} {noun} remaining!", "red")


def outcome(state, paint, abandoned=False):
    """Return the closing lines for a finished game."""
    code = state.secret_code
    if state.status is GameStatus.WON:
        return [
            paint("\n🎉 CONGRATULATIONS! 🎉", "green", "bold"),
            paint("You cracked the code ", "green")
            + paint(code, "green", "bold")
            + paint(f" in {state.current_attempts} attempts!", "green"),
            paint("Your deduction skills are impressive!", "yellow"),
        ]
    reason = "Game abandoned!" if abandoned else "You ran out of attempts!"
    return [
        paint("\n💀 GAME OVER 💀", "red", "bold"),
        paint(f"{reason} The secret code was: ", "red") + paint(code, "red", "bold"),
        paint("Better luck next time, code breaker!", "yellow"),
    ]
