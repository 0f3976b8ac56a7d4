"""Lisplet Language Server package.

This package provides:
- A pygls-based Language Server for Lisplet source files.
- An indexer that reads documents with the real scanner and reader, without
  evaluating them.
"""

__all__ = [
    "server",
    "indexer",
]
