import logging
import sys


def setup_logging(level: int = logging.WARNING):
    """
    Configure logging for the launcher.

    Logs go to stderr; stdout belongs to the program the launcher hands over to.
    """
    stream_handler = logging.StreamHandler(sys.stderr)
    logging.basicConfig(
        handlers=[stream_handler],
        format=(
            "{asctime:^} | {levelname: ^8} | {filename: ^14} {lineno: <4} | {message}"
        ),
        style="{",
        datefmt="%d.%m.%Y %H:%M:%S",
        level=level,
        force=True,
    )
