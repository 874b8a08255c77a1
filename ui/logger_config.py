import logging
import sys

HANDLER_NAME = "ciphermind-console"


def setup_logger(name: str = "", level: int = logging.WARNING) -> logging.Logger:
    """
    Configure a logger that writes to stderr, away from the game output.

    Calling it again with another level updates the logger and the
    handler it installed earlier.

    Args:
        name (str): Logger name, the root logger by default.
        level (int): Logging level.
    Returns:
        logging.Logger: The configured logger.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    own = [h for h in logger.handlers if h.get_name() == HANDLER_NAME]
    for handler in own:
        handler.setLevel(level)

    if not logger.handlers:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.set_name(HANDLER_NAME)
        console_handler.setLevel(level)

        formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        console_handler.setFormatter(formatter)

        logger.addHandler(console_handler)

    return logger
