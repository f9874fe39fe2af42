"""Base transport abstractions."""

from __future__ import annotations

import abc
from typing import Any

from .. import logs, utils
from ..registry import Registry

DEFAULT_TIMEOUT = 30.0

log = logs.get(__name__)


def create(url: str | utils.url.Url | Transport, **kwargs: Any) -> Transport:
    """Return a `Transport` instance for *url*."""
    if isinstance(url, Transport):
        return url

    name = utils.url.Url(url).scheme
    cls = REGISTRY[name]
    return cls(url, **kwargs)


class Transport(abc.ABC):
    """Exchanges request and response bytes with a provider."""

    SCHEMES: tuple[str, ...] = ()

    def __init_subclass__(cls) -> None:
        for scheme in cls.SCHEMES:
            REGISTRY[scheme] = cls

    def __init__(self, url: str | utils.url.Url, timeout: float | None = None):
        """Store the normalized URL for later use."""
        self._url = utils.url.Url(url)
        self.timeout = DEFAULT_TIMEOUT if timeout is None else timeout

    @property
    def url(self) -> utils.url.Url:
        """Return the configured provider URL."""
        return self._url

    @abc.abstractmethod
    def post(self, path: str, payload: bytes) -> bytes:
        """Send *payload* to the endpoint at *path* and return the response body."""
        raise NotImplementedError

    @abc.abstractmethod
    def get(self, path: str) -> bytes:
        """Request the endpoint at *path* and return the response body."""
        raise NotImplementedError


REGISTRY = Registry(__name__, Transport)

# register the built-in transports
from . import http  # noqa: E402,F401
