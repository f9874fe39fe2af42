"""
Terminal utilities for the CLI.
"""

from __future__ import annotations

import sys
from shutil import get_terminal_size

import colorama
from colorama import Back, Fore, Style

##
## colors
##

_enable_color = True


def set_color_enabled(enabled: bool = True) -> None:
    global _enable_color
    _enable_color = enabled
    if enabled:
        colorama.just_fix_windows_console()


def color(s: str, fore: str | None = None, back: str | None = None, style: str | None = None) -> str:
    if not _enable_color:
        return s
    fore = getattr(Fore, fore.upper()) if fore else ''
    back = getattr(Back, back.upper()) if back else ''
    style = getattr(Style, style.upper()) if style else ''
    return f'{fore}{back}{style}{s}{Style.RESET_ALL}'


def error(msg: str) -> None:
    """Print *msg* to stderr in red."""
    print(color(msg, fore='red', style='bright'), file=sys.stderr)


##
## text alignment
##


def elide(s: str, width: int | None = None, ellipsis: str = '...') -> str:
    """Append ellipsis to *s* if longer than *width*.

    Defaults to terminal width.
    """
    width = width or get_terminal_size().columns
    if len(s) <= width:
        return s
    return s[: width - len(ellipsis)] + ellipsis
