from __future__ import annotations

import io
import logging
from typing import IO, Any, Mapping, Sequence
from urllib.parse import urlencode

from ..errors import InvalidSourceError, UnsupportedAlgorithmError
from ..types import BufferSource, CallbackSource, ScalarSource, StreamSource
from .config import DigestConfig
from .hash import Accumulator
from .source import as_source
from .uri import DigestURI

logger = logging.getLogger(__name__)


def compute(
    data: Any,
    algorithm: str | None = None,
    query: Mapping[str, object | Sequence[object]] | str | None = None,
    *,
    base: DigestURI | None = None,
    config: DigestConfig | None = None,
) -> DigestURI:
    """Digest ``data`` and return a new di: URI.

    ``data`` may be a readable stream, a bytearray/memoryview, a callable
    taking the hash accumulator, or a plain str/bytes value. When ``base``
    is given its algorithm is reused unless ``algorithm`` is passed
    explicitly; ``base`` itself is never modified.
    """
    cfg = config or DigestConfig()
    source = as_source(data)
    algo = resolve_algorithm(algorithm, base, cfg)
    if not cfg.provider.supports(algo):
        raise UnsupportedAlgorithmError(algo)

    ctx = cfg.provider.new(algo)
    logger.debug("computing %s over %s", algo, type(source).__name__)

    match source:
        case StreamSource(handle=handle):
            _add_stream(ctx, handle, cfg.chunk_size)
        case BufferSource(buffer=buffer):
            ctx.update(buffer)
        case CallbackSource(callback=callback):
            callback(ctx)
        case ScalarSource(value=value):
            ctx.update(value)
        case _:
            raise InvalidSourceError(f"Unknown source kind: {type(source).__name__}")

    digest = cfg.provider.b64digest(ctx).replace("+", "-").replace("/", "_")
    opaque = f"{algo};{digest}"
    query_string = format_query(query)
    if query_string:
        opaque = f"{opaque}?{query_string}"

    uri = DigestURI(opaque)
    logger.debug("computed %s", uri)
    return uri


def resolve_algorithm(
    algorithm: str | None,
    base: DigestURI | None,
    config: DigestConfig,
) -> str:
    if algorithm:
        return algorithm.lower()
    if base is not None and base.algorithm:
        return base.algorithm.lower()
    return config.default_algorithm.lower()


def format_query(query: Mapping[str, object | Sequence[object]] | str | None) -> str:
    """Encode a key → value(s) mapping; keys keep insertion order and
    multiple values repeat the key."""
    if not query:
        return ""
    if isinstance(query, str):
        return query
    pairs: list[tuple[str, str]] = []
    for key, value in query.items():
        if isinstance(value, (list, tuple)):
            pairs.extend((key, str(v)) for v in value)
        else:
            pairs.append((key, str(value)))
    return urlencode(pairs)


def _add_stream(ctx: Accumulator, handle: IO[Any], chunk_size: int) -> None:
    stream: IO[Any] = handle
    if isinstance(handle, io.TextIOWrapper) and handle.seekable():
        # discard text decoded ahead, then read from the binary layer
        handle.seek(handle.tell())
        stream = handle.buffer
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            break
        if isinstance(chunk, str):
            chunk = chunk.encode("utf-8")
        ctx.update(chunk)
