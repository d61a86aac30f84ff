"""Core utilities."""

from .parsing import parse_line

__all__ = ["parse_line"]
