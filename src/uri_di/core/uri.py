"""The di: URI value object.

The opaque part (``algorithm;digest[?query]``) is the only stored state;
every accessor derives its answer from it on each call.
"""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Mapping, Sequence
from urllib.parse import parse_qs

from ..errors import DigestURIError
from ..types import UriInfo

if TYPE_CHECKING:
    from .config import DigestConfig

SCHEME = "di"


@dataclass(frozen=True)
class DigestURI:
    opaque: str | None = None

    @classmethod
    def parse(cls, text: str) -> DigestURI:
        """Build from ``di:<opaque>``. The scheme is matched case-insensitively."""
        scheme, sep, opaque = text.strip().partition(":")
        if not sep or scheme.lower() != SCHEME:
            raise DigestURIError(f"Not a {SCHEME}: URI: {text}")
        return cls(opaque)

    def __str__(self) -> str:
        return f"{SCHEME}:{self.opaque or ''}"

    @property
    def algorithm(self) -> str | None:
        """The hash algorithm. Read-only, like everything else about the hash."""
        if self.opaque is None:
            return None
        return self.opaque.partition(";")[0].partition("?")[0]

    def b64digest(self, raw: bool = False) -> str | None:
        """The digest in base64, or as stored (base64url) when ``raw`` is set."""
        if self.opaque is None:
            return None
        _, sep, rest = self.opaque.partition(";")
        if not sep:
            return ""
        digest = rest.partition("?")[0]
        if not raw:
            digest = digest.replace("-", "+").replace("_", "/")
        return digest

    def digest(self) -> bytes | None:
        b64 = self.b64digest()
        if b64 is None:
            return None
        # tolerate both padded and unpadded encodings; a lone trailing
        # character holds fewer than 8 bits and is dropped
        b64 = b64.rstrip("=")
        if len(b64) % 4 == 1:
            b64 = b64[:-1]
        try:
            return base64.b64decode(b64 + "=" * (-len(b64) % 4))
        except binascii.Error as e:
            raise DigestURIError(f"Undecodable digest in {self}: {e}") from e

    def hexdigest(self) -> str | None:
        digest = self.digest()
        return None if digest is None else digest.hex()

    @property
    def query(self) -> dict[str, list[str]]:
        if not self.opaque:
            return {}
        _, sep, query = self.opaque.partition("?")
        if not sep:
            return {}
        return parse_qs(query, keep_blank_values=True)

    def compute(
        self,
        data: Any,
        algorithm: str | None = None,
        query: Mapping[str, object | Sequence[object]] | str | None = None,
        *,
        config: DigestConfig | None = None,
    ) -> DigestURI:
        """Digest ``data`` into a new URI, reusing this URI's algorithm
        unless ``algorithm`` is given. ``self`` is left untouched."""
        from .compute import compute

        return compute(data, algorithm, query, base=self, config=config)

    def info(self) -> UriInfo:
        return UriInfo(
            uri=str(self),
            algorithm=self.algorithm,
            b64digest=self.b64digest(),
            b64url_digest=self.b64digest(raw=True),
            hexdigest=self.hexdigest(),
            query=self.query or None,
        )
