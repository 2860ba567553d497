from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import IO, Any, Callable, Union

# snake_case → camelCase field mapping
_SNAKE_TO_CAMEL = {
    "b64digest": "b64Digest",
    "b64url_digest": "b64urlDigest",
    "hexdigest": "hexDigest",
}


# Input sources. Plain values are classified into one of these by
# core.source.as_source before digesting.


@dataclass(frozen=True)
class StreamSource:
    handle: IO[Any]


@dataclass(frozen=True)
class BufferSource:
    buffer: bytearray | memoryview


@dataclass(frozen=True)
class CallbackSource:
    callback: Callable[[Any], object]


@dataclass(frozen=True)
class ScalarSource:
    value: bytes


Source = Union[StreamSource, BufferSource, CallbackSource, ScalarSource]


@dataclass
class UriInfo:
    uri: str
    algorithm: str | None
    b64digest: str | None = None
    b64url_digest: str | None = None
    hexdigest: str | None = None
    query: dict[str, list[str]] | None = None


@dataclass
class VerifyResult:
    verified: bool
    uri: str
    algorithm: str | None = None
    expected: str | None = None
    actual: str | None = None
    error: str | None = None


def to_json_dict(obj: object) -> dict | list:
    """Convert a dataclass instance to a camelCase dict suitable for JSON serialization.
    Removes keys with None values."""
    if isinstance(obj, list):
        return [to_json_dict(item) for item in obj]

    d = asdict(obj)
    result = {}
    for key, value in d.items():
        if value is None:
            continue
        json_key = _SNAKE_TO_CAMEL.get(key, key)
        result[json_key] = value
    return result
