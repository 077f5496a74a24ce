"""Utility functions for bendybutt.

This module provides message id derivation and size calculation.
"""

from __future__ import annotations

from .digest import message_hash, message_id, verify_message_id
from .sizing import bencoded_length, encoded_size, field_sizes

__all__ = [
    # Message ids
    "message_hash",
    "message_id",
    "verify_message_id",
    # Sizing functions
    "bencoded_length",
    "encoded_size",
    "field_sizes",
]
