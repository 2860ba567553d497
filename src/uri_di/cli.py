from __future__ import annotations

import json
import logging
import sys

import click

from .core.compute import compute
from .core.config import load_config
from .core.uri import DigestURI
from .core.verify import verify
from .crypto_spec import CryptoSpec
from .errors import DigestURIError
from .types import to_json_dict


@click.group()
@click.version_option("0.1.0")
@click.option("--config", "config_path", envvar="DI_CONFIG", help="JSON config file")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def cli(ctx, config_path, verbose):
    """Compute and inspect di: digest URIs."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )
    ctx.obj = load_config(config_path)


@cli.command("compute")
@click.argument("file", type=click.File("rb"), default="-")
@click.option("-a", "--algorithm", help="Hash algorithm (default sha-256)")
@click.option("-q", "--query", "queries", multiple=True, help="Query parameter key=value")
@click.option("-s", "--string", "text", help="Digest this text instead of FILE")
@click.pass_obj
def compute_cmd(config, file, algorithm, queries, text):
    """Compute the di: URI of FILE (stdin by default)."""
    query = _parse_query(queries)
    try:
        uri = compute(text if text is not None else file, algorithm, query, config=config)
    except DigestURIError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    click.echo(str(uri))


@cli.command()
@click.argument("uri")
@click.option("--json", "as_json", is_flag=True, help="Print as JSON")
def inspect(uri, as_json):
    """Decode a di: URI."""
    try:
        info = DigestURI.parse(uri).info()
    except DigestURIError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(to_json_dict(info), indent=2))
        return

    click.echo(f"algorithm:  {info.algorithm}")
    click.echo(f"hex:        {info.hexdigest}")
    click.echo(f"base64:     {info.b64digest}")
    click.echo(f"base64url:  {info.b64url_digest}")
    if info.query:
        for key, values in info.query.items():
            click.echo(f"query:      {key}={', '.join(values)}")


@cli.command("verify")
@click.argument("uri")
@click.argument("file", type=click.File("rb"))
@click.pass_obj
def verify_cmd(config, uri, file):
    """Check that FILE matches the digest in URI."""
    try:
        result = verify(uri, file, config=config)
    except DigestURIError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if result.verified:
        click.echo(f"verified {file.name} ({result.algorithm})")
    else:
        click.echo(f"FAILED {file.name}: {result.error}", err=True)
        if result.actual:
            click.echo(f"  expected: {result.expected}", err=True)
            click.echo(f"  actual:   {result.actual}", err=True)
        sys.exit(1)


@cli.command()
@click.pass_obj
def algorithms(config):
    """List supported hash algorithms."""
    for name in sorted(config.provider.algorithms()):
        marker = " (default)" if name == config.default_algorithm else ""
        click.echo(f"{name}{marker}")


@cli.command("crypto-spec")
@click.argument("text")
def crypto_spec(text):
    """Split a cipher:key:iv triplet."""
    spec = CryptoSpec(text)
    click.echo(f"cipher: {spec.cipher}")
    click.echo(f"key:    {spec.key}")
    click.echo(f"iv:     {spec.iv}")


def _parse_query(queries: tuple[str, ...]) -> dict[str, list[str]]:
    # Preserve first-seen key order, collect repeated keys
    query: dict[str, list[str]] = {}
    for item in queries:
        key, sep, value = item.partition("=")
        if not sep:
            click.echo(f"Invalid query parameter (expected key=value): {item}", err=True)
            sys.exit(1)
        query.setdefault(key, []).append(value)
    return query
