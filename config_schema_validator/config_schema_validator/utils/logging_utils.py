import logging
import sys
from typing import IO, Optional


DEFAULT_FORMAT = "%(name)s - %(levelname)s - %(message)s"


class ViolationFormatter(logging.Formatter):
    """Formatter that renders mapping messages as ``key: value`` pairs.

    The reporter logs each violation as ``{"config": ..., "message": ...}``;
    on a terminal that reads as ``config: context -> name, message: ...``.
    """

    def format(self, record: logging.LogRecord) -> str:
        if isinstance(record.msg, dict) and not record.args:
            record = logging.makeLogRecord(record.__dict__)
            record.msg = ", ".join(f"{key}: {value}" for key, value in record.msg.items())
        return super().format(record)


class _LevelBandFilter(logging.Filter):
    """Pass records whose level lies in ``[min_level, max_level]``."""

    def __init__(self, min_level: int, max_level: int) -> None:
        super().__init__()
        self._min_level = min_level
        self._max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:
        return self._min_level <= record.levelno <= self._max_level


def _band_handler(stream: IO, min_level: int, max_level: int, formatter: logging.Formatter) -> logging.Handler:
    handler = logging.StreamHandler(stream=stream)
    handler.addFilter(_LevelBandFilter(min_level, max_level))
    handler.setFormatter(formatter)
    return handler


def configure_split_stream_logging(
    *,
    level: int = logging.INFO,
    stderr_level: int = logging.WARNING,
    formatter: Optional[logging.Formatter] = None,
) -> None:
    """Route progress to stdout and diagnostics to stderr.

    Pass messages and schema discovery (below ``stderr_level``) go to stdout;
    parse failures and violations go to stderr, so a CI job can keep only
    the diagnostics with ``2>``.
    """
    formatter = formatter or ViolationFormatter(DEFAULT_FORMAT)
    stderr_level = max(stderr_level, logging.DEBUG)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    root.addHandler(_band_handler(sys.stdout, logging.NOTSET, stderr_level - 1, formatter))
    root.addHandler(_band_handler(sys.stderr, stderr_level, logging.CRITICAL, formatter))


def resolve_level(name: Optional[str], default: int = logging.INFO) -> int:
    """Translate a level name such as ``"debug"`` into a logging constant."""
    if not name:
        return default
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else default
