"""Utilities for reusable typed field annotations."""

from .fields import JsonDict

__all__ = [
    "JsonDict",
]
