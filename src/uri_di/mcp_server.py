from __future__ import annotations

from pathlib import Path

from fastmcp import FastMCP

from .core.compute import compute
from .core.uri import DigestURI
from .core.verify import verify
from .types import to_json_dict

mcp = FastMCP("di")


@mcp.tool
def compute_uri(text: str, algorithm: str | None = None) -> str:
    """Compute the di: URI of a UTF-8 text.
    The algorithm defaults to sha-256."""
    return str(compute(text, algorithm))


@mcp.tool
def inspect_uri(uri: str) -> dict:
    """Decode a di: URI into its algorithm, hex and base64 digests and query parameters."""
    return to_json_dict(DigestURI.parse(uri).info())


@mcp.tool
def verify_file(uri: str, path: str) -> dict:
    """Check whether the file at path matches the digest in a di: URI."""
    with Path(path).open("rb") as handle:
        result = verify(uri, handle)
    return to_json_dict(result)


def main():
    mcp.run()


if __name__ == "__main__":
    main()
