"""Client library for contract calls against a blockchain fullnode."""

from __future__ import annotations

__version__ = '0.1.0'

from . import codec, errors, logs, utils
from .client import Client
from .codec import (
    CallArgument,
    TypeDescriptor,
    call_result_to_data_type,
    decode,
    encode,
    encode_arguments,
    encode_call_data,
    parse_type,
    read_arguments,
    serialize_call_argument,
)
from .utils.encoding import base64url_to_bytes32

__all__ = [
    'CallArgument',
    'Client',
    'TypeDescriptor',
    '__version__',
    'base64url_to_bytes32',
    'call_result_to_data_type',
    'codec',
    'decode',
    'encode',
    'encode_arguments',
    'encode_call_data',
    'errors',
    'logs',
    'parse_type',
    'read_arguments',
    'serialize_call_argument',
    'utils',
]
