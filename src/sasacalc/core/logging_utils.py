"""Logging utilities for colorized terminal output.

Report blocks go to stdout, so every log record is written to stderr.
Warnings and errors are highlighted when that stream is a terminal.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional


class ColoredFormatter(logging.Formatter):
    """Formatter that highlights warnings and errors on a terminal stream.

    Parameters
    ----------
    fmt : str, optional
        Log format string.
    stream : file-like, optional
        Stream the owning handler writes to. Colors are added only when it
        is a TTY. Defaults to ``sys.stderr`` looked up at format time.
    """

    COLORS = {
        logging.WARNING: "\033[93m",
        logging.ERROR: "\033[91m",
        logging.CRITICAL: "\033[1;91m",
    }
    RESET = "\033[0m"

    def __init__(self, fmt: Optional[str] = None, stream: Optional[IO[str]] = None) -> None:
        super().__init__(fmt)
        self.stream = stream

    def _use_color(self) -> bool:
        stream = self.stream if self.stream is not None else sys.stderr
        isatty = getattr(stream, "isatty", None)
        return bool(isatty and isatty())

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = self.COLORS.get(record.levelno)
        if color and self._use_color():
            return f"{color}{message}{self.RESET}"
        return message


def setup_logging(quiet: bool = False, debug: bool = False) -> None:
    """Set up logging with colored output for warnings and errors.

    Parameters
    ----------
    quiet : bool, optional
        Only show ERROR and above, and silence FreeSASA's own warnings.
    debug : bool, optional
        Show DEBUG and above. Takes precedence over ``quiet``.

    Examples
    --------
    >>> from sasacalc.core.logging_utils import setup_logging
    >>> setup_logging()  # WARNING and above
    >>> setup_logging(debug=True)  # everything, including handle releases
    """
    if debug:
        level = logging.DEBUG
        fmt = "%(levelname)s %(name)s: %(message)s"
    elif quiet:
        level = logging.ERROR
        fmt = "%(message)s"
    else:
        level = logging.WARNING
        fmt = "%(message)s"

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ColoredFormatter(fmt, stream=handler.stream))

    logging.root.handlers = []
    logging.root.addHandler(handler)
    logging.root.setLevel(level)

    set_freesasa_verbosity(quiet=quiet and not debug)


def set_freesasa_verbosity(quiet: bool = False) -> None:
    """Set how much the FreeSASA C library prints to stderr.

    FreeSASA writes its warnings (unknown atoms, skipped HETATM records)
    straight to stderr, bypassing Python logging. In quiet mode only its
    errors are kept.
    """
    import freesasa

    freesasa.setVerbosity(freesasa.nowarnings if quiet else freesasa.normal)
