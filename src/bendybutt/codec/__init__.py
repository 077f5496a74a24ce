"""Bendy Butt message codec.

This module provides encoding and decoding between decoded messages and
their canonical wire bytes (BFE fields inside a bencode container).
"""

from __future__ import annotations

from .decoder import decode, from_wire
from .encoder import encode, to_wire
from .ports import ContainerCodec, TaggedCodec
from .wire import WireFeedContent, WireMessage, WirePayload, WirePrivateContent

__all__ = [
    "encode",
    "decode",
    "to_wire",
    "from_wire",
    "TaggedCodec",
    "ContainerCodec",
    "WireMessage",
    "WirePayload",
    "WirePrivateContent",
    "WireFeedContent",
]
