"""Command-line interface for Assetwise."""

from .main import build_parser, main

__all__ = ["build_parser", "main"]
