"""Helpers for converting between bytes and their text encodings."""

from __future__ import annotations

import base64
import binascii
import re

from .. import errors

BYTES32_LENGTH = 32

_BASE64URL_RE = re.compile(r'^[A-Za-z0-9_-]*$')


def to_base64url(data: bytes) -> str:
    """Encode *data* as unpadded URL-safe Base64."""
    return base64.urlsafe_b64encode(data).rstrip(b'=').decode('ascii')


def from_base64url(text: str) -> bytes:
    """Decode URL-safe Base64, with or without padding."""
    stripped = text.strip().rstrip('=')
    if not _BASE64URL_RE.match(stripped):
        raise errors.InvalidBase64(f'invalid base64url string: {text!r}')
    try:
        return base64.urlsafe_b64decode(stripped + '=' * (-len(stripped) % 4))
    except (binascii.Error, ValueError) as exc:
        raise errors.InvalidBase64(f'invalid base64url string: {text!r}') from exc


def base64url_to_bytes32(text: str) -> bytes:
    """Decode a Base64URL string that must hold exactly 32 bytes."""
    data = from_base64url(text)
    if len(data) != BYTES32_LENGTH:
        raise errors.InvalidLength(f'expected {BYTES32_LENGTH} bytes, got {len(data)}')
    return data


def from_hex(text: str) -> bytes:
    """Decode a hex string, with or without a ``0x`` prefix."""
    stripped = text.strip()
    if stripped[:2].lower() == '0x':
        stripped = stripped[2:]
    try:
        return bytes.fromhex(stripped)
    except ValueError as exc:
        raise errors.EncodingError(f'invalid hex string: {text!r}') from exc
