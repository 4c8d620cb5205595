"""
Command-line interface for litecache.

Provides Click-based commands for reading and writing a persistent
cache file.
"""

from litecache.cli.main import cli

__all__ = ["cli"]
