"""CLI commands package."""

from speechlocales.cli.commands import tables

__all__ = [
    'tables',
]
