"""Standard formatter implementations."""

from __future__ import annotations

import sys

from msgspec import json

from ..utils.encoding import to_base64url
from . import Formatter


class RawFormatter(Formatter):
    """Write the bytes exactly as encoded."""

    NAME = 'raw'

    def print(self, res: bytes) -> None:
        """Write to the binary stdout without a trailing newline."""
        sys.stdout.buffer.write(self.format(res))
        sys.stdout.buffer.flush()


class HexFormatter(Formatter):
    """Lowercase hexadecimal."""

    NAME = 'hex'

    def format(self, res: bytes) -> str:
        return res.hex()


class Base64UrlFormatter(Formatter):
    """Unpadded URL-safe Base64, the encoding used by fullnode RPC."""

    NAME = 'base64url'

    def format(self, res: bytes) -> str:
        return to_base64url(res)


class JsonFormatter(Formatter):
    """A JSON object holding the length and both text encodings."""

    NAME = 'json'

    def format(self, res: bytes) -> str:
        return json.encode(
            {'length': len(res), 'hex': res.hex(), 'base64url': to_base64url(res)}
        ).decode()
