"""Encode JSON argument values into the canonical binary call format.

The format is little-endian and length-prefixed, byte-compatible with Borsh:

- integers: fixed-width two's complement
- bool: one byte, 0 or 1
- string: u32 byte length followed by UTF-8 bytes
- sequence: u32 element count followed by the elements
- optional: 0 (absent) or 1 (present) followed by the value
- fixed bytes: the raw bytes, no prefix
"""

from __future__ import annotations

from typing import Any

import msgspec

from .. import errors, utils
from .types import (
    INTEGER_WIDTHS,
    FixedBytes,
    Optional,
    Primitive,
    Sequence,
    TypeDescriptor,
    is_supported,
)

LENGTH_PREFIX_BYTES = 4
MAX_LENGTH = 2 ** (LENGTH_PREFIX_BYTES * 8) - 1


def integer_bounds(kind: str) -> tuple[int, int]:
    """Return the inclusive ``(min, max)`` range of integer *kind*."""
    bits, signed = INTEGER_WIDTHS[kind]
    if signed:
        return -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    return 0, (1 << bits) - 1


def encode_json(descriptor: TypeDescriptor, text: str | bytes) -> bytes:
    """Decode the JSON literal *text* and encode it as *descriptor*."""
    try:
        value = msgspec.json.decode(text)
    except msgspec.DecodeError as exc:
        raise errors.InvalidValue(
            f'invalid JSON value for {descriptor}: {utils.format.elide(repr(text))}: {exc}'
        ) from exc
    return encode(descriptor, value)


def encode(descriptor: TypeDescriptor, value: Any) -> bytes:
    """Encode the decoded JSON *value* as *descriptor*."""
    if not is_supported(descriptor):
        raise errors.UnencodableType(f'unsupported descriptor: {descriptor!r}')
    return b''.join(_encode(descriptor, value))


def _encode(descriptor: TypeDescriptor, value: Any) -> list[bytes]:
    if isinstance(descriptor, Primitive):
        return [_encode_primitive(descriptor, value)]

    if isinstance(descriptor, FixedBytes):
        return [_encode_fixed_bytes(descriptor, value)]

    if isinstance(descriptor, Sequence):
        if not isinstance(value, list):
            raise _mismatch(descriptor, value)
        chunks = [_encode_length(descriptor, len(value))]
        for item in value:
            chunks.extend(_encode(descriptor.inner, item))
        return chunks

    if isinstance(descriptor, Optional):
        if value is None:
            return [b'\x00']
        return [b'\x01', *_encode(descriptor.inner, value)]

    raise errors.UnencodableType(f'unsupported descriptor: {descriptor!r}')


def _encode_primitive(descriptor: Primitive, value: Any) -> bytes:
    kind = descriptor.kind

    if kind == 'bool':
        if not isinstance(value, bool):
            raise _mismatch(descriptor, value)
        return b'\x01' if value else b'\x00'

    if kind == 'string':
        if not isinstance(value, str):
            raise _mismatch(descriptor, value)
        data = value.encode('utf8')
        return _encode_length(descriptor, len(data)) + data

    if kind in INTEGER_WIDTHS:
        return _encode_integer(kind, value)

    raise errors.UnencodableType(f'unsupported primitive: {kind!r}')


def _encode_integer(kind: str, value: Any) -> bytes:
    # bool is an int subclass but never a valid integer literal
    if isinstance(value, bool) or not isinstance(value, int):
        raise _mismatch(kind, value)

    lo, hi = integer_bounds(kind)
    if not lo <= value <= hi:
        raise errors.NumericOverflow(f'{value} does not fit in {kind} (range {lo}..{hi})')

    bits, signed = INTEGER_WIDTHS[kind]
    return value.to_bytes(bits // 8, 'little', signed=signed)


def _encode_fixed_bytes(descriptor: FixedBytes, value: Any) -> bytes:
    if not isinstance(value, list):
        raise _mismatch(descriptor, value)
    if len(value) != descriptor.length:
        raise errors.TypeMismatch(
            f'expected {descriptor.length} elements for {descriptor}, got {len(value)}'
        )
    return b''.join(_encode_integer('u8', item) for item in value)


def _encode_length(descriptor: TypeDescriptor, length: int) -> bytes:
    if length > MAX_LENGTH:
        raise errors.NumericOverflow(f'length {length} of {descriptor} exceeds {MAX_LENGTH}')
    return length.to_bytes(LENGTH_PREFIX_BYTES, 'little')


def _mismatch(expected: TypeDescriptor | str, value: Any) -> errors.TypeMismatch:
    found = 'null' if value is None else type(value).__name__
    return errors.TypeMismatch(
        f'expected {expected}, got {found}: {utils.format.elide(repr(value))}'
    )
