from __future__ import annotations


class ChainCallError(Exception):
    """Base class for all chaincall exceptions."""


class CodecError(ChainCallError):
    """Base class for errors raised by the typed argument codec."""


class ParseError(CodecError):
    """Raised for invalid type names and argument documents."""


class UnsupportedType(ParseError):
    """Raised when a type name is outside the supported set."""

    def __init__(self, type_name: str) -> None:
        super().__init__(f'unsupported type: {type_name!r}')
        self.type_name = type_name


class InvalidJson(ParseError):
    """Raised when an arguments document is not valid JSON."""


class MissingField(ParseError):
    """Raised when a required field is absent from an arguments document."""

    def __init__(self, field: str) -> None:
        super().__init__(f'missing field: {field!r}')
        self.field = field


class EncodeError(CodecError):
    """Base class for errors raised when encoding argument values."""


class TypeMismatch(EncodeError):
    """Raised when a JSON value does not have the shape of its type."""


class NumericOverflow(EncodeError):
    """Raised when a number does not fit the width of its type."""


class InvalidValue(EncodeError):
    """Raised when an argument value is not a valid JSON literal."""


class UnencodableType(EncodeError):
    """Raised when a descriptor outside the supported set reaches the encoder."""


class DecodeError(CodecError):
    """Base class for errors raised when decoding call results."""


class TruncatedBuffer(DecodeError):
    """Raised when fewer bytes are available than the type requires."""

    def __init__(self, needed: int, available: int) -> None:
        super().__init__(f'truncated buffer: needed {needed} bytes, {available} available')
        self.needed = needed
        self.available = available


class MalformedBuffer(DecodeError):
    """Raised when the bytes are not a valid encoding of the type."""


class UndecodableType(DecodeError):
    """Raised when a descriptor outside the supported set reaches the decoder."""


class EncodingError(ChainCallError):
    """Base class for text encoding helper errors."""


class InvalidBase64(EncodingError):
    """Raised for strings that are not valid Base64URL."""


class InvalidLength(EncodingError):
    """Raised when decoded data does not have the expected length."""


class TransportError(ChainCallError):
    """Raised for any error in the transport."""


class RequestFailed(TransportError):
    """Raised when the remote end answers with a non-success status."""

    def __init__(self, status: int, body: str) -> None:
        super().__init__(f'request failed ({status}): {body}')
        self.status = status
        self.body = body


class RegistryError(ChainCallError):
    """Raised when looking up a name that has not been registered."""
