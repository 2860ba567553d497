from __future__ import annotations

import base64
import hashlib
from typing import Protocol

# di: algorithm names → hashlib constructor names
HASHLIB_NAMES = {
    "md5": "md5",
    "sha-1": "sha1",
    "sha-224": "sha224",
    "sha-256": "sha256",
    "sha-384": "sha384",
    "sha-512": "sha512",
    "sha-512/224": "sha512_224",
    "sha-512/256": "sha512_256",
    "sha3-224": "sha3_224",
    "sha3-256": "sha3_256",
    "sha3-384": "sha3_384",
    "sha3-512": "sha3_512",
    "blake2b": "blake2b",
    "blake2s": "blake2s",
}


class Accumulator(Protocol):
    def update(self, data: bytes, /) -> None: ...

    def digest(self) -> bytes: ...


class HashProvider(Protocol):
    def algorithms(self) -> frozenset[str]: ...

    def supports(self, name: str) -> bool: ...

    def new(self, name: str) -> Accumulator: ...

    def b64digest(self, accumulator: Accumulator) -> str: ...


class HashlibProvider:
    def __init__(self) -> None:
        available = {name.lower() for name in hashlib.algorithms_available}
        self._names = {
            alg: impl for alg, impl in HASHLIB_NAMES.items() if impl in available
        }

    def algorithms(self) -> frozenset[str]:
        return frozenset(self._names)

    def supports(self, name: str) -> bool:
        return name.lower() in self._names

    def new(self, name: str) -> Accumulator:
        return hashlib.new(self._names[name.lower()])

    def b64digest(self, accumulator: Accumulator) -> str:
        """Standard base64 of the digest with the trailing padding dropped."""
        return base64.b64encode(accumulator.digest()).decode("ascii").rstrip("=")
