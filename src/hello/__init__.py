"""Minimal program that greets through the standard logging package."""

from .hello import GREETING, main

__all__ = ["GREETING", "main"]
