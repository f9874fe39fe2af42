from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from . import codec, errors, logs, utils
from .transport import Transport
from .transport import create as create_transport

log = logs.get(__name__)


class Client:
    """Ties a provider transport to the typed argument codec.

    Request and response records for individual endpoints are serialized by
    the caller; the client only moves bytes and handles contract call data.
    """

    def __init__(self, url: str | Transport | None = None, timeout: float | None = None) -> None:
        if isinstance(url, Transport):
            self.transport = url
        else:
            self.transport = create_transport(url or utils.DEFAULT_URL, timeout=timeout)

    @property
    def url(self) -> str:
        return str(self.transport.url)

    def is_provider_up(self) -> bool:
        """Return True if the provider answers a GET on its base URL."""
        try:
            self.transport.get('')
        except errors.TransportError as exc:
            log.debug('provider down (%s): %s', self.url, utils.format.format_exc(exc))
            return False
        return True

    def post(self, path: str, payload: bytes) -> bytes:
        """Post serialized request bytes to *path* and return the raw response."""
        return self.transport.post(path, payload)

    def call_data(self, document: str | bytes | Mapping[str, Any]) -> bytes:
        """Encode a JSON arguments document into contract call data."""
        return codec.encode_call_data(document)

    def call_result(self, data: bytes, type_name: str) -> str:
        """Render the return value of a contract call as *type_name*."""
        return codec.call_result_to_data_type(data, type_name)
