from __future__ import annotations

import logging
import sys
from logging import getLogger

log = getLogger("tgaction")

LOG_FORMAT = "%(asctime)s %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: int = logging.INFO) -> None:
    """Send timestamped log lines to stderr.

    stdout is left to the wrapped tool's streamed output.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
    log.handlers = [handler]
    log.setLevel(level)
    log.propagate = False
