"""Decode call results from the canonical binary format and render them."""

from __future__ import annotations

from typing import Any

from .. import errors, logs
from .encoder import LENGTH_PREFIX_BYTES
from .types import (
    INTEGER_WIDTHS,
    FixedBytes,
    Optional,
    Primitive,
    Sequence,
    TypeDescriptor,
    is_supported,
)

log = logs.get(__name__)

_ESCAPES = {
    '"': '\\"',
    '\\': '\\\\',
    '\n': '\\n',
    '\r': '\\r',
    '\t': '\\t',
    '\0': '\\0',
}


class Reader:
    """Sequential reader over a byte buffer."""

    def __init__(self, data: bytes) -> None:
        self._data = memoryview(data)
        self.offset = 0

    @property
    def remaining(self) -> int:
        return len(self._data) - self.offset

    def read(self, size: int) -> bytes:
        if size > self.remaining:
            raise errors.TruncatedBuffer(size, self.remaining)
        start = self.offset
        self.offset += size
        return self._data[start : self.offset].tobytes()

    def read_tag(self, what: str) -> bool:
        tag = self.read(1)[0]
        if tag > 1:
            raise errors.MalformedBuffer(f'invalid {what} byte at offset {self.offset - 1}: {tag}')
        return tag == 1

    def read_length(self) -> int:
        return int.from_bytes(self.read(LENGTH_PREFIX_BYTES), 'little')


def decode(descriptor: TypeDescriptor, data: bytes) -> str:
    """Decode the first value in *data* and return its display rendering.

    Bytes left over after the value are ignored.
    """
    return render(descriptor, decode_value(descriptor, data))


def decode_value(descriptor: TypeDescriptor, data: bytes) -> Any:
    """Decode the first value in *data* into Python objects."""
    if not is_supported(descriptor):
        raise errors.UndecodableType(f'unsupported descriptor: {descriptor!r}')
    reader = Reader(data)
    value = _decode(descriptor, reader)
    if reader.remaining:
        log.debug('ignoring %d trailing bytes after %s', reader.remaining, descriptor)
    return value


def _decode(descriptor: TypeDescriptor, reader: Reader) -> Any:
    if isinstance(descriptor, Primitive):
        return _decode_primitive(descriptor, reader)

    if isinstance(descriptor, FixedBytes):
        return list(reader.read(descriptor.length))

    if isinstance(descriptor, Sequence):
        count = reader.read_length()
        return [_decode(descriptor.inner, reader) for _ in range(count)]

    if isinstance(descriptor, Optional):
        if reader.read_tag('option'):
            return _decode(descriptor.inner, reader)
        return None

    raise errors.UndecodableType(f'unsupported descriptor: {descriptor!r}')


def _decode_primitive(descriptor: Primitive, reader: Reader) -> Any:
    kind = descriptor.kind

    if kind == 'bool':
        return reader.read_tag('bool')

    if kind == 'string':
        data = reader.read(reader.read_length())
        try:
            return data.decode('utf8')
        except UnicodeDecodeError as exc:
            raise errors.MalformedBuffer(f'invalid UTF-8 string: {exc}') from exc

    if kind in INTEGER_WIDTHS:
        bits, signed = INTEGER_WIDTHS[kind]
        return int.from_bytes(reader.read(bits // 8), 'little', signed=signed)

    raise errors.UndecodableType(f'unsupported primitive: {kind!r}')


def render(descriptor: TypeDescriptor, value: Any) -> str:
    """Return the debug-style rendering of *value* as *descriptor*."""
    if isinstance(descriptor, Primitive):
        if descriptor.kind == 'bool':
            return 'true' if value else 'false'
        if descriptor.kind == 'string':
            return quote(value)
        return str(value)

    if isinstance(descriptor, FixedBytes):
        return '[{}]'.format(', '.join(str(b) for b in value))

    if isinstance(descriptor, Sequence):
        return '[{}]'.format(', '.join(render(descriptor.inner, item) for item in value))

    if isinstance(descriptor, Optional):
        if value is None:
            return 'None'
        return f'Some({render(descriptor.inner, value)})'

    raise errors.UndecodableType(f'unsupported descriptor: {descriptor!r}')


def quote(s: str) -> str:
    """Quote *s* with backslash escapes for quotes and non-printable characters."""
    parts = []
    for char in s:
        if char in _ESCAPES:
            parts.append(_ESCAPES[char])
        elif not char.isprintable():
            parts.append(f'\\u{{{ord(char):x}}}')
        else:
            parts.append(char)
    return '"{}"'.format(''.join(parts))
