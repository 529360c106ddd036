import logging
import sys
from typing import Optional, Union


class _MaxLevelFilter(logging.Filter):
    """Let through records up to and including ``max_level``."""

    def __init__(self, max_level: int) -> None:
        super().__init__()
        self._max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno <= self._max_level


def parse_log_level(level: Union[str, int, None], default: int) -> int:
    """Turn 'debug' / 'INFO' / 20 into a logging level, falling back to ``default``."""
    if isinstance(level, int):
        return level
    if not level:
        return default
    value = getattr(logging, str(level).strip().upper(), None)
    return value if isinstance(value, int) else default


def configure_split_stream_logging(
    *,
    level: int = logging.INFO,
    stderr_level: int = logging.WARNING,
    formatter: Optional[logging.Formatter] = None,
) -> None:
    """Configure root logging so validation output stays readable:

    - records below ``stderr_level`` go to stdout
    - records at or above ``stderr_level`` go to stderr

    The CLI prints its report on stdout, so fatal errors and warnings end up
    on stderr where a CI job will surface them.
    """

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)

    if formatter is None:
        formatter = logging.Formatter("%(name)s - %(levelname)s - %(message)s")

    stderr_level = max(stderr_level, logging.DEBUG)

    stdout_handler = logging.StreamHandler(stream=sys.stdout)
    stdout_handler.setLevel(logging.DEBUG)
    stdout_handler.addFilter(_MaxLevelFilter(stderr_level - 1))
    stdout_handler.setFormatter(formatter)

    stderr_handler = logging.StreamHandler(stream=sys.stderr)
    stderr_handler.setLevel(stderr_level)
    stderr_handler.setFormatter(formatter)

    root.addHandler(stdout_handler)
    root.addHandler(stderr_handler)
