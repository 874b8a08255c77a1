# Encouragement shown after a guess that did not crack the code

ALMOST = [
    "So close! Just one more symbol!",
    "You're almost there! One more to go!",
    "Nearly cracked it! Keep going!",
]
HALFWAY = [
    "Good progress! You're on the right track!",
    "Nice work! You're getting warmer!",
    "Excellent deduction! Keep it up!",
]
STRUGGLING = [
    "Don't give up! Try a different approach!",
    "Hmm, time to think outside the box!",
    "Keep analyzing the clues!",
]
GENERIC = [
    "Interesting guess! Study the feedback carefully.",
    "Use the clues to narrow down the possibilities!",
    "Logic will lead you to victory!",
]


def message_pool(exact_matches: int, attempts: int, rules) -> list[str]:
    """
    Pick the message group matching the player's progress.

    Args:
        exact_matches (int): Exact matches of the latest guess.
        attempts (int): Attempts used so far.
        rules (dict): The ruleset (code length, attempt limit).
    Returns:
        list[str]: Candidate messages.
    """
    code_length = rules["code_length"]
    if exact_matches == code_length - 1:
        return ALMOST
    if exact_matches >= code_length // 2:
        return HALFWAY
    if attempts > rules["max_attempts"] // 2:
        return STRUGGLING
    return GENERIC


def pick_encouragement(exact_matches, attempts, rules, rng) -> str:
    return rng.choice(message_pool(exact_matches, attempts, rules))
