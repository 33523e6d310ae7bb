"""Command-line interface for FAQ vector search."""

from .app import create_parser, main, run_cli

__all__ = ["create_parser", "main", "run_cli"]
