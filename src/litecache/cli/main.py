"""
Main CLI entry point for litecache.

Provides commands for storing, reading, and removing entries in a
persistent cache file.
"""

import json
import logging
import sys
from typing import Optional

import click
from rich.markup import escape

from litecache import __version__
from litecache.cache.store import CacheStore
from litecache.cli.output import (
    print_error,
    print_info,
    print_success,
    print_value,
)
from litecache.core.exceptions import StoreOpenError
from litecache.core.models import DEFAULT_PATH


def open_store(ctx: click.Context) -> CacheStore:
    """Open the persistent store named by the global ``--path`` option."""
    path = ctx.obj["path"]
    try:
        store = CacheStore(persistent=True, path=path)
    except StoreOpenError as e:
        print_error(escape(str(e)))
        sys.exit(1)
    ctx.call_on_close(store.close)
    return store


@click.group()
@click.version_option(version=__version__, prog_name="litecache")
@click.option(
    "--path", "-p",
    envvar="LITECACHE_PATH",
    default=DEFAULT_PATH,
    show_default=True,
    help="SQLite file holding the cache.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, path: str, verbose: bool) -> None:
    """litecache - a tiny SQLite-backed key-value cache.

    Entries are stored as JSON with an optional time-to-live in
    milliseconds. Expired entries are removed when they are next read.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["path"] = path


@cli.command()
@click.argument("key")
@click.argument("value")
@click.option("--ttl", type=click.IntRange(min=0), help="Time-to-live in milliseconds.")
@click.option("--raw", is_flag=True, help="Store VALUE as a plain string instead of JSON.")
@click.pass_context
def put(ctx: click.Context, key: str, value: str, ttl: Optional[int], raw: bool) -> None:
    """Store VALUE under KEY.

    VALUE is parsed as JSON unless --raw is given. Text that is not valid
    JSON is stored as a string.

    \b
    Examples:
        litecache put user:1 '{"name": "Ada"}'
        litecache put token abc123 --raw --ttl 60000
        litecache put enabled true
    """
    parsed = value
    if not raw:
        try:
            parsed = json.loads(value)
        except (ValueError, RecursionError):
            parsed = value

    store = open_store(ctx)
    if not store.put(key, parsed, ttl):
        print_error(f"Could not store '{escape(key)}'.")
        sys.exit(1)

    suffix = f" (expires in {ttl} ms)" if ttl is not None else ""
    print_success(f"Stored '{escape(key)}'{suffix}.")


@cli.command()
@click.argument("key")
@click.pass_context
def get(ctx: click.Context, key: str) -> None:
    """Print the value stored under KEY as JSON.

    Exits with status 1 if KEY is missing or expired.
    """
    store = open_store(ctx)
    value = store.get(key)
    # None is either a stored null or a missing/expired key.
    if value is None and not store.has_key(key):
        print_info(f"No entry for '{escape(key)}'.")
        sys.exit(1)

    print_value(value)


@cli.command()
@click.argument("key")
@click.pass_context
def has(ctx: click.Context, key: str) -> None:
    """Report whether KEY exists and has not expired.

    Exits with status 0 when present and 1 otherwise.
    """
    store = open_store(ctx)
    if store.has_key(key):
        click.echo("yes")
    else:
        click.echo("no")
        sys.exit(1)


@cli.command()
@click.argument("key")
@click.pass_context
def delete(ctx: click.Context, key: str) -> None:
    """Remove KEY from the cache."""
    store = open_store(ctx)
    if not store.delete(key):
        print_error(f"Could not delete '{escape(key)}'.")
        sys.exit(1)
    print_success(f"Deleted '{escape(key)}'.")


@cli.command()
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation.")
@click.pass_context
def clear(ctx: click.Context, yes: bool) -> None:
    """Remove every entry from the cache."""
    if not yes:
        click.confirm(f"Clear all entries in {ctx.obj['path']}?", abort=True)

    store = open_store(ctx)
    store.clear()
    print_success("Cache cleared.")


if __name__ == "__main__":
    cli()
