"""Container serialization for bendybutt."""

from __future__ import annotations

from .bencode import BencodeContainer

__all__ = [
    "BencodeContainer",
]
