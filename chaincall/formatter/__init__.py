"""Formatter plugin infrastructure."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from ..registry import Registry

DEFAULT_FORMAT = 'hex'


def create(name: str | Formatter, **kwargs: Any) -> Formatter:
    """Return a formatter by name or pass through existing instances."""
    if isinstance(name, Formatter):
        return name
    return REGISTRY[name](**kwargs)


def names() -> tuple[str, ...]:
    return REGISTRY.names()


class Formatter:
    """Base class for converting encoded call data to user output."""

    NAME: str

    def __init_subclass__(cls) -> None:
        REGISTRY[cls.NAME] = cls

    def process(self, res: bytes | Iterable[bytes]) -> None:
        """Print a single payload, or each payload of a list in order."""
        if isinstance(res, (bytes, bytearray)):
            self.print(bytes(res))
        else:
            for value in res:
                self.print(value)

    def print(self, res: bytes) -> None:
        """Print a formatted representation of `res`."""
        print(self.format(res))

    def format(self, res: bytes) -> Any:
        """Return the raw value by default; subclasses can override."""
        return res


REGISTRY = Registry(__name__, Formatter)

# register the built-in formatters
from . import standard  # noqa: E402,F401
