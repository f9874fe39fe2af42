"""Read call arguments from a JSON arguments document.

A document has the shape::

    {"arguments": [{"argument_type": "u64", "argument_value": "42"}, ...]}

The top level is strict: invalid JSON or a missing ``arguments`` array is an
error. Individual entries are lenient: an entry without string
``argument_type`` and ``argument_value`` fields is dropped with a warning.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import msgspec

from .. import errors, logs, utils
from .encoder import encode_json
from .types import TypeDescriptor, parse_type

ARGUMENTS_FIELD = 'arguments'
TYPE_FIELD = 'argument_type'
VALUE_FIELD = 'argument_value'

log = logs.get(__name__)


class CallArgument(msgspec.Struct, frozen=True):
    """A parsed type paired with its JSON value text."""

    descriptor: TypeDescriptor
    value: str

    @classmethod
    def from_pair(cls, type_name: str, value: str) -> CallArgument:
        return cls(parse_type(type_name), value)

    def encode(self) -> bytes:
        return encode_json(self.descriptor, self.value)


def read_arguments(document: str | bytes | Mapping[str, Any]) -> list[tuple[str, str]]:
    """Return the ordered ``(type_name, value)`` pairs in *document*."""
    if isinstance(document, (str, bytes)):
        try:
            document = msgspec.json.decode(document)
        except msgspec.DecodeError as exc:
            raise errors.InvalidJson(
                f'invalid arguments document: {exc}: {utils.format.elide(repr(document))}'
            ) from exc

    entries = document.get(ARGUMENTS_FIELD) if isinstance(document, Mapping) else None
    if not isinstance(entries, list):
        raise errors.MissingField(ARGUMENTS_FIELD)

    pairs = []
    for index, entry in enumerate(entries):
        pair = _read_entry(entry)
        if pair is None:
            log.warning('skipping malformed argument %d: %s', index, utils.format.elide(repr(entry)))
            continue
        pairs.append(pair)
    return pairs


def _read_entry(entry: Any) -> tuple[str, str] | None:
    if not isinstance(entry, Mapping):
        return None
    type_name = entry.get(TYPE_FIELD)
    value = entry.get(VALUE_FIELD)
    if not isinstance(type_name, str) or not isinstance(value, str):
        return None
    return type_name, value


def parse_arguments(document: str | bytes | Mapping[str, Any]) -> list[CallArgument]:
    """Read *document* and parse the type of every argument."""
    return [CallArgument.from_pair(type_name, value) for type_name, value in read_arguments(document)]
