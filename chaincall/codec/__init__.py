"""Typed argument codec for contract calls.

Converts ``(type name, JSON value)`` pairs into call data and renders call
results back into display strings.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .. import logs
from .arguments import CallArgument, parse_arguments, read_arguments
from .decoder import decode, decode_value, render
from .encoder import encode, encode_json
from .types import (
    FixedBytes,
    Optional,
    Primitive,
    Sequence,
    TypeDescriptor,
    is_supported,
    parse_type,
)

log = logs.get(__name__)


def encode_arguments(document: str | bytes | Mapping[str, Any]) -> list[bytes]:
    """Encode every argument in *document*, in document order."""
    encoded = []
    for arg in parse_arguments(document):
        data = arg.encode()
        log.debug('encoded %s: %d bytes', arg.descriptor, len(data))
        encoded.append(data)
    return encoded


def encode_call_data(document: str | bytes | Mapping[str, Any]) -> bytes:
    """Encode *document* and concatenate the arguments into call data."""
    return b''.join(encode_arguments(document))


def serialize_call_argument(value: str, type_name: str) -> bytes:
    """Encode the JSON literal *value* as *type_name*."""
    return encode_json(parse_type(type_name), value)


def call_result_to_data_type(data: bytes, type_name: str) -> str:
    """Render the call result *data* as *type_name*."""
    return decode(parse_type(type_name), data)


__all__ = [
    'CallArgument',
    'FixedBytes',
    'Optional',
    'Primitive',
    'Sequence',
    'TypeDescriptor',
    'call_result_to_data_type',
    'decode',
    'decode_value',
    'encode',
    'encode_arguments',
    'encode_call_data',
    'encode_json',
    'is_supported',
    'parse_arguments',
    'parse_type',
    'read_arguments',
    'render',
    'serialize_call_argument',
]
