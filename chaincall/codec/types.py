"""Type descriptors for contract call arguments and the parser that builds them.

Type names follow the syntax used by contract authors: primitive names
(``u64``, ``bool``, ``String``), the generic forms ``Vec<T>`` and
``Option<T>``, and the fixed byte arrays ``[u8;32]`` and ``[u8;64]``.
Only a closed set of shapes is accepted; see :func:`is_supported`.
"""

from __future__ import annotations

import re

import msgspec

from .. import errors

INTEGER_WIDTHS = {
    'i8': (8, True),
    'i16': (16, True),
    'i32': (32, True),
    'i64': (64, True),
    'i128': (128, True),
    'u8': (8, False),
    'u16': (16, False),
    'u32': (32, False),
    'u64': (64, False),
    'u128': (128, False),
}

# type-name token -> primitive kind
PRIMITIVE_NAMES = {name: name for name in INTEGER_WIDTHS}
PRIMITIVE_NAMES.update({'bool': 'bool', 'String': 'string'})
PRIMITIVE_KINDS = {kind: name for name, kind in PRIMITIVE_NAMES.items()}

FIXED_BYTES_LENGTHS = (32, 64)

_WHITESPACE_RE = re.compile(r'\s+')
_FIXED_ARRAY_RE = re.compile(r'^\[(\w+);(\d+)\]$')
_GENERIC_RE = re.compile(r'^(Vec|Option)<(.+)>$')


class TypeDescriptor(msgspec.Struct, frozen=True, tag=True):
    """Base class for parsed type names."""


class Primitive(TypeDescriptor, frozen=True):
    kind: str

    def __str__(self) -> str:
        return PRIMITIVE_KINDS.get(self.kind, self.kind)


class FixedBytes(TypeDescriptor, frozen=True):
    length: int

    def __str__(self) -> str:
        return f'[u8;{self.length}]'


class Sequence(TypeDescriptor, frozen=True):
    inner: TypeDescriptor

    def __str__(self) -> str:
        return f'Vec<{self.inner}>'


class Optional(TypeDescriptor, frozen=True):
    inner: TypeDescriptor

    def __str__(self) -> str:
        return f'Option<{self.inner}>'


def normalize(type_name: str) -> str:
    """Remove all whitespace from *type_name*."""
    return _WHITESPACE_RE.sub('', type_name)


def parse_type(type_name: str) -> TypeDescriptor:
    """Parse *type_name* into a :class:`TypeDescriptor`.

    Raises :class:`errors.UnsupportedType` carrying the original string for
    anything outside the supported set.
    """
    descriptor = _parse(normalize(type_name))
    if descriptor is None or not is_supported(descriptor):
        raise errors.UnsupportedType(type_name)
    return descriptor


def _parse(name: str) -> TypeDescriptor | None:
    if name in PRIMITIVE_NAMES:
        return Primitive(PRIMITIVE_NAMES[name])

    match = _FIXED_ARRAY_RE.match(name)
    if match:
        element, length = match.groups()
        # exact tokens only; int() would accept "032" and non-ASCII digits
        if element != 'u8' or length not in {str(n) for n in FIXED_BYTES_LENGTHS}:
            return None
        return FixedBytes(int(length))

    match = _GENERIC_RE.match(name)
    if match:
        wrapper, inner_name = match.groups()
        inner = _parse(inner_name)
        if inner is None:
            return None
        return Sequence(inner) if wrapper == 'Vec' else Optional(inner)

    return None


def is_primitive(descriptor: TypeDescriptor) -> bool:
    return isinstance(descriptor, Primitive) and descriptor.kind in PRIMITIVE_KINDS


def is_supported(descriptor: TypeDescriptor) -> bool:
    """Return True if *descriptor* is one of the accepted argument shapes.

    The accepted shapes are: ``T``, ``Vec<T>``, ``Option<T>``, ``Vec<Vec<T>>``,
    ``Vec<Option<T>>`` and ``Option<Vec<T>>`` for any primitive ``T``, plus
    ``[u8;32]`` and ``[u8;64]``.
    """
    if isinstance(descriptor, Primitive):
        return is_primitive(descriptor)
    if isinstance(descriptor, FixedBytes):
        return descriptor.length in FIXED_BYTES_LENGTHS

    inner = getattr(descriptor, 'inner', None)
    if isinstance(descriptor, Sequence):
        if isinstance(inner, (Sequence, Optional)):
            return is_primitive(inner.inner)
        return is_primitive(inner)
    if isinstance(descriptor, Optional):
        if isinstance(inner, Sequence):
            return is_primitive(inner.inner)
        return is_primitive(inner)
    return False
