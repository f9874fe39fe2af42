from __future__ import annotations

# Imports for convenience
from . import encoding, format, url

DEFAULT_URL = 'http://127.0.0.1:8080'

__all__ = [
    'DEFAULT_URL',
    'encoding',
    'format',
    'url',
]
