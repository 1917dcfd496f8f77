"""Compatibility module re-exporting the engine namespace and CLI.

The implementation lives in `engine.py`; the smaller `api_*` modules wrap it
so callers can import plain functions.
"""

from .engine import (
    DecryptionError,
    EncodeError,
    FramingError,
    ImglockError,
    LoadResult,
    LoadStatus,
    LoaderConfig,
    TransportError,
    UnexpectedDecodeFailure,
    cli,
    imglock,
    main,
)

__all__ = [
    "DecryptionError",
    "EncodeError",
    "FramingError",
    "ImglockError",
    "LoadResult",
    "LoadStatus",
    "LoaderConfig",
    "TransportError",
    "UnexpectedDecodeFailure",
    "cli",
    "imglock",
    "main",
]
