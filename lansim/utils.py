from __future__ import annotations
import logging
from typing import TextIO

from rich.logging import RichHandler

log = logging.getLogger("lansim")

# writing to a closed stream raises ValueError rather than OSError
SINK_ERRORS = (OSError, ValueError)

class PreconditionError(AssertionError):
    """A caller broke the contract of an operation (development-time error)."""

def require(cond: bool, msg: str):
    if not cond:
        raise PreconditionError(msg)

def setup_logging(verbose: bool = False) -> logging.Logger:
    level = logging.DEBUG if verbose else logging.WARNING
    if not any(isinstance(h, RichHandler) for h in log.handlers):
        handler = RichHandler(show_path=False, markup=False)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        log.addHandler(handler)
    log.setLevel(level)
    return log

def safe_write(sink: TextIO, text: str, flush: bool = False):
    """Write to a trace sink, ignoring I/O failures of the sink."""
    try:
        sink.write(text)
        if flush:
            sink.flush()
    except SINK_ERRORS as exc:
        log.debug("ignoring sink failure: %s", exc)
