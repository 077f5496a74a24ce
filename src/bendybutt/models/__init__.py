"""Pydantic message modeling for bendybutt.

This module provides the decoded message records and the field helpers
used to bound their integer fields.
"""

from __future__ import annotations

from .base import BendyModel
from .fields import Int32, Int64, SignedInt
from .message import Content, FeedAnnouncement, FeedContent, Message, PrivateContent

__all__ = [
    "BendyModel",
    "Content",
    "FeedAnnouncement",
    "FeedContent",
    "Int32",
    "Int64",
    "Message",
    "PrivateContent",
    "SignedInt",
]
