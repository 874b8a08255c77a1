# ANSI escape sequences for terminal output
RESET = "\033[0m"
BOLD = "\033[1m"

COLORS = {
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "blue": "\033[34m",
    "purple": "\033[35m",
    "cyan": "\033[36m",
    "white": "\033[37m",
    "bold": BOLD,
}


class Painter:
    """Wraps text in ANSI colors, or passes it through when disabled."""

    def __init__(self, enabled: bool = True):
        self.enabled = enabled

    def __call__(self, text: str, *styles: str) -> str:
        if not self.enabled or not styles:
            return text
        prefix = "".join(COLORS[s] for s in styles)
        return f"{prefix}{text}{RESET}"
