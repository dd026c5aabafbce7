"""Reusable type aliases for opaque payloads."""

from __future__ import annotations

type JsonDict = dict[str, object]

__all__ = [
    "JsonDict",
]
