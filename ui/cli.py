# Command-line interface (text-based play)
import logging
import random
import sys

from game.board import Board
from game.errors import GuessError
from ui import render
from ui.colors import Painter
from ui.messages import pick_encouragement

logger = logging.getLogger(__name__)

YES = ("y", "yes")


def read_line(stdin, stdout, prompt):
    """Write a prompt and read one line. Returns None once input is closed."""
    stdout.write(prompt)
    stdout.flush()
    line = stdin.readline()
    if not line:
        return None
    return line.rstrip("\n")


def emit(stdout, lines):
    for line in lines:
        print(line, file=stdout)


def play_game(board, stdin, stdout, paint, rng):
    """
    Run one game until it is won, lost or input runs out.

    Args:
        board (Board): A fresh game.
        stdin, stdout: Line-oriented text streams.
        paint (Painter): Color helper.
        rng (random.Random): Source for message selection.
    Returns:
        bool: False if the input stream closed during the game.
    """
    rules = board.rules
    emit(stdout, render.welcome_banner(rules, paint))

    while not board.is_over:
        state = board.get_current_state()
        user_input = read_line(stdin, stdout, render.attempt_prompt(state, paint))
        if user_input is None:
            print(file=stdout)
            board.forfeit()
            emit(stdout, render.outcome(board.get_current_state(), paint, abandoned=True))
            return False

        try:
            result = board.make_guess(user_input)
        except GuessError as e:
            print(paint(f"❌ {e}", "red"), file=stdout)
            continue

        state = board.get_current_state()
        emit(stdout, render.history(state, paint))
        if board.is_over:
            break

        message = pick_encouragement(
            result.exact_matches, board.current_attempt, rules, rng
        )
        print(paint(message, "cyan"), file=stdout)
        warning = render.remaining_warning(state, paint)
        if warning:
            print(warning, file=stdout)
        print(file=stdout)

    state = board.get_current_state()
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Final state: %s", state.to_dict(reveal_code=True))
    emit(stdout, render.outcome(state, paint))
    return True


def ask_replay(stdin, stdout):
    print(file=stdout)
    answer = read_line(stdin, stdout, "Play again? (y/n): ")
    return answer is not None and answer.strip().lower() in YES


def gameloop(stdin=None, stdout=None, rng=None, color=True, new_board=None):
    """
    Play games until the player declines a replay or input runs out.

    Args:
        stdin, stdout: Text streams, sys.stdin / sys.stdout by default.
        rng (random.Random, optional): Random source for secrets and messages.
        color (bool): Use ANSI colors.
        new_board (callable, optional): Builds a Board from the random
        source, Board(rng=rng) by default.
    Returns:
        list[GameState]: Final state of every game played.
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    rng = rng or random.Random()
    new_board = new_board or (lambda r: Board(rng=r))
    paint = Painter(color)

    finished = []
    while True:
        board = new_board(rng)
        input_open = play_game(board, stdin, stdout, paint, rng)
        finished.append(board.get_current_state())
        if not input_open or not ask_replay(stdin, stdout):
            break
        print(file=stdout)

    print(paint("\nThanks for playing CipherMind! 🧠", "cyan"), file=stdout)
    logger.info("Session finished after %d game(s)", len(finished))
    return finished
