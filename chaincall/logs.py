"""Helpers for configuring and using project logging.

Verbosity is counted the way the command line counts ``-v`` flags:

* ``0``: warnings and errors only
* ``1``: INFO and DEBUG records from the command itself
* ``2``: codec details (dropped argument entries, ignored trailing bytes)
* ``3``: transport details (one line per request and response)
"""

from __future__ import annotations

import sys
from logging import DEBUG, INFO, WARNING, Formatter, StreamHandler, getLogger
from types import TracebackType

get = getLogger
log = get(__name__)

FORMAT = '%(levelname).1s %(asctime)s %(name)s . %(message)s'

# debug level at which each subsystem starts emitting DEBUG records
SUBSYSTEM_LEVELS = {
    'chaincall.codec': 2,
    'chaincall.transport': 3,
}


def init(debug_level: int = 0, log_exceptions: bool = True) -> None:
    """Initializes simple logging defaults."""
    root_log = get()

    if root_log.handlers:
        return

    handler = StreamHandler()
    handler.setFormatter(Formatter(FORMAT))

    root_log.addHandler(handler)
    root_log.setLevel(DEBUG if debug_level > 0 else WARNING)

    for name in SUBSYSTEM_LEVELS:
        get(name).setLevel(subsystem_level(name, debug_level))

    if log_exceptions:
        sys.excepthook = handle_exception


def subsystem_level(name: str, debug_level: int) -> int:
    """Return the logging level for subsystem *name* at *debug_level*."""
    threshold = SUBSYSTEM_LEVELS.get(name)
    if threshold is None:
        raise ValueError(f'unknown logging subsystem: {name}')
    return DEBUG if debug_level >= threshold else INFO


def handle_exception(
    etype: type[BaseException],
    evalue: BaseException,
    etb: TracebackType | None,
) -> None:
    """Log uncaught exceptions while letting Ctrl+C exit quietly."""
    if issubclass(etype, KeyboardInterrupt):
        sys.__excepthook__(etype, evalue, etb)
        return
    log.error('unhandled exception', exc_info=(etype, evalue, etb))
