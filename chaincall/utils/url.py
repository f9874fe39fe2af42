from __future__ import annotations

import posixpath
from dataclasses import dataclass
from urllib.parse import urlparse

DEFAULT_SCHEME = 'http'
DEFAULT_HOST = '127.0.0.1'
DEFAULT_PORTS = {'http': 80, 'https': 443}


def format_addr(addr: tuple[str, int]) -> str:
    return f'{addr[0]}:{addr[1]}'


@dataclass(slots=True)
class Url:
    """A provider base URL: scheme, host, port and an optional path prefix."""

    _scheme: str
    _host: str
    _port: int
    _path: str

    def __init__(self, url: str | Url) -> None:
        if isinstance(url, Url):
            self._scheme = url._scheme
            self._host = url._host
            self._port = url._port
            self._path = url._path
            return

        parsed = urlparse(url if '://' in url else f'{DEFAULT_SCHEME}://{url}')
        if parsed.query or parsed.fragment:
            raise ValueError(f'invalid URL: {url}')

        self._scheme = parsed.scheme
        self._host = parsed.hostname or DEFAULT_HOST
        port = parsed.port or DEFAULT_PORTS.get(self._scheme)
        if port is None:
            raise ValueError(f'url must include a port: {url}')
        self._port = port
        self._path = parsed.path.rstrip(posixpath.sep)

    @property
    def scheme(self) -> str:
        return self._scheme

    @property
    def host(self) -> str:
        return self._host

    @property
    def port(self) -> int:
        return self._port

    @property
    def path(self) -> str:
        return self._path

    @property
    def address(self) -> tuple[str, int]:
        return (self._host, self._port)

    @property
    def netloc(self) -> str:
        return format_addr(self.address)

    def join(self, path: str) -> str:
        """Return the request path for *path* relative to the base path."""
        return posixpath.join(self._path or posixpath.sep, path.lstrip(posixpath.sep))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Url):
            return str(self) == str(other)
        if isinstance(other, str):
            return str(self) == other
        return NotImplemented

    def __str__(self) -> str:
        return f'{self.scheme}://{self.netloc}{self.path}'

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({str(self)!r})'
