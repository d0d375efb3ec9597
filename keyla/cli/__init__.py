"""Command-line interface for Keyla."""

from .parser import create_parser

__all__ = ["create_parser"]
