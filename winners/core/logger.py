import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(name)s] - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: Optional[str] = None) -> int:
    """
    Configure root logging for a single run of the CLI.

    Logs go to stderr so stdout only carries the winner report.
    `level` is a level name (DEBUG, INFO, ...); unknown names fall back
    to WARNING. Returns the numeric level applied.
    """
    level_str = (level or "WARNING").upper()
    numeric = getattr(logging, level_str, None)
    valid = isinstance(numeric, int)
    if not valid:
        numeric = logging.WARNING

    # reemplaza handlers previos
    logging.basicConfig(
        level=numeric,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        stream=sys.stderr,
        force=True,
    )

    if not valid:
        logging.warning(f"Log level '{level_str}' is not valid, using WARNING.")
    return numeric
