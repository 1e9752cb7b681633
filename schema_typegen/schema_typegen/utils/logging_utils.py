import logging
import sys
from typing import Optional

DEFAULT_LOG_FORMAT = "%(name)s - %(levelname)s - %(message)s"


class _BelowLevelFilter(logging.Filter):
    """Pass only records strictly below a threshold level."""

    def __init__(self, threshold: int) -> None:
        super().__init__()
        self._threshold = threshold

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self._threshold


def parse_log_level(name: Optional[str], default: int = logging.INFO) -> int:
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def configure_logging(
    level: int = logging.INFO,
    print_level: int = logging.WARNING,
    fmt: str = DEFAULT_LOG_FORMAT,
) -> None:
    """Route root logging to two streams.

    Records below *print_level* go to stdout, the rest to stderr, so a caller
    that silences stdout still sees warnings and errors.
    """
    print_level = max(print_level, logging.DEBUG)
    formatter = logging.Formatter(fmt)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)

    stdout_handler = logging.StreamHandler(stream=sys.stdout)
    stdout_handler.setLevel(logging.DEBUG)
    stdout_handler.addFilter(_BelowLevelFilter(print_level))
    stdout_handler.setFormatter(formatter)
    root.addHandler(stdout_handler)

    stderr_handler = logging.StreamHandler(stream=sys.stderr)
    stderr_handler.setLevel(print_level)
    stderr_handler.setFormatter(formatter)
    root.addHandler(stderr_handler)
