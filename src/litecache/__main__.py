"""
CLI entry point for running litecache as a module.

Usage: python -m litecache [OPTIONS] COMMAND [ARGS]...
"""

from litecache.cli.main import cli

if __name__ == "__main__":
    cli()
