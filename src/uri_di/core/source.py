from __future__ import annotations

from typing import Any

from ..errors import InvalidSourceError, MissingSourceError
from ..types import (
    BufferSource,
    CallbackSource,
    ScalarSource,
    Source,
    StreamSource,
)

_VARIANTS = (StreamSource, BufferSource, CallbackSource, ScalarSource)


def as_source(data: Any) -> Source:
    """Classify a plain value as one of the four source kinds."""
    if data is None:
        raise MissingSourceError("Compute must have some sort of data source")
    if isinstance(data, _VARIANTS):
        return data
    if isinstance(data, bool):
        raise InvalidSourceError(_invalid_message(data))
    if isinstance(data, bytes):
        return ScalarSource(data)
    if isinstance(data, (str, int, float)):
        return ScalarSource(str(data).encode("utf-8"))
    if isinstance(data, (bytearray, memoryview)):
        return BufferSource(data)
    if callable(getattr(data, "read", None)):
        return StreamSource(data)
    if callable(data):
        return CallbackSource(data)
    raise InvalidSourceError(_invalid_message(data))


def _invalid_message(data: Any) -> str:
    return (
        f"Cannot digest a {type(data).__name__}: expected a stream, "
        "a byte buffer, a callable or a plain string/bytes value"
    )
