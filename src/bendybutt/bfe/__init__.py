"""BFE (binary field encoding) for bendybutt.

This module provides the tagged-binary representation of feed ids, message
ids, signatures, boxed payloads and generic values used inside Bendy Butt
messages.
"""

from __future__ import annotations

from .codec import BfeCodec
from .decoder import decode, decode_blob, decode_box, decode_feed, decode_msg, decode_sig
from .encoder import (
    encode,
    encode_blob,
    encode_box,
    encode_feed,
    encode_msg,
    encode_sig,
    encode_string,
)
from .types import FORMATS, BfeFormat, BfeType, TaggedValue

__all__ = [
    "BfeCodec",
    "BfeFormat",
    "BfeType",
    "FORMATS",
    "TaggedValue",
    "encode",
    "encode_blob",
    "encode_box",
    "encode_feed",
    "encode_msg",
    "encode_sig",
    "encode_string",
    "decode",
    "decode_blob",
    "decode_box",
    "decode_feed",
    "decode_msg",
    "decode_sig",
]
