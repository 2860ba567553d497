"""Compute and decode di: digest URIs (draft-hallambaker-digesturi)."""

from .types import (
    StreamSource,
    BufferSource,
    CallbackSource,
    ScalarSource,
    Source,
    UriInfo,
    VerifyResult,
    to_json_dict,
)
from .errors import (
    DigestURIError,
    MissingSourceError,
    InvalidSourceError,
    UnsupportedAlgorithmError,
)
from .core.hash import Accumulator, HashProvider, HashlibProvider
from .core.config import DigestConfig, load_config, save_config
from .core.source import as_source
from .core.uri import DigestURI, SCHEME
from .core.compute import compute
from .core.verify import verify
from .crypto_spec import CryptoSpec, TripletDescriptor

__all__ = [
    "StreamSource",
    "BufferSource",
    "CallbackSource",
    "ScalarSource",
    "Source",
    "UriInfo",
    "VerifyResult",
    "to_json_dict",
    "DigestURIError",
    "MissingSourceError",
    "InvalidSourceError",
    "UnsupportedAlgorithmError",
    "Accumulator",
    "HashProvider",
    "HashlibProvider",
    "DigestConfig",
    "load_config",
    "save_config",
    "as_source",
    "DigestURI",
    "SCHEME",
    "compute",
    "verify",
    "CryptoSpec",
    "TripletDescriptor",
]
