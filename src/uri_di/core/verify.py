from __future__ import annotations

import hmac
import logging
from typing import Any

from ..types import VerifyResult
from .compute import compute
from .config import DigestConfig
from .uri import DigestURI

logger = logging.getLogger(__name__)


def verify(
    uri: DigestURI | str,
    data: Any,
    *,
    config: DigestConfig | None = None,
) -> VerifyResult:
    """Recompute the digest of ``data`` under the URI's algorithm and compare."""
    expected_uri = DigestURI.parse(uri) if isinstance(uri, str) else uri
    text = str(expected_uri)

    if not expected_uri.algorithm:
        return VerifyResult(verified=False, uri=text, error="URI has no algorithm")
    expected = expected_uri.digest()
    if not expected:
        return VerifyResult(
            verified=False,
            uri=text,
            algorithm=expected_uri.algorithm,
            error="URI has no digest",
        )

    actual_uri = compute(data, expected_uri.algorithm, config=config)
    actual = actual_uri.digest() or b""
    verified = hmac.compare_digest(expected, actual)
    if not verified:
        logger.debug("digest mismatch for %s: got %s", text, actual_uri)

    return VerifyResult(
        verified=verified,
        uri=text,
        algorithm=expected_uri.algorithm,
        expected=expected_uri.hexdigest(),
        actual=actual.hex(),
        error=None if verified else "Content does not match digest",
    )
