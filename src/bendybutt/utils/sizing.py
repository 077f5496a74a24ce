"""Message size calculation utilities.

This module provides functions to calculate the encoded size of messages
without serializing them. Bencode lengths depend only on the lengths of the
tagged buffers and the decimal width of the integers, so the size can be
summed from the wire record.
"""

from __future__ import annotations

from typing import Any, Optional

from ..codec.encoder import to_wire
from ..codec.ports import TaggedCodec
from ..models.message import Message


def bencoded_length(value: Any) -> int:
    """Return the number of bytes ``value`` occupies once bencoded.

    Args:
        value: bytes, int, list/tuple, or dict with bytes keys

    Raises:
        TypeError: If value contains an unsupported type

    Example:
        >>> bencoded_length([b"hello", b"world"])  # l5:hello5:worlde
        16
    """
    # bool before int: bool is a subclass of int
    if isinstance(value, bool):
        raise TypeError("bool has no bencode representation")
    if isinstance(value, int):
        return len(b"i%de" % value)
    if isinstance(value, (bytes, bytearray)):
        return len(str(len(value))) + 1 + len(value)
    if isinstance(value, (list, tuple)):
        return 2 + sum(bencoded_length(item) for item in value)
    if isinstance(value, dict):
        return 2 + sum(bencoded_length(key) + bencoded_length(item) for key, item in value.items())
    raise TypeError(f"unsupported type {type(value).__name__}")


def encoded_size(message: Message, *, tagged: Optional[TaggedCodec] = None) -> int:
    """Calculate the encoded size of a message in bytes.

    Args:
        message: Message to measure

    Returns:
        ``len(encode(message))``

    Raises:
        SuffixMismatchError: If a field's sigil/suffix does not match its type
        EncodeError: If any field cannot be encoded
    """
    return bencoded_length(to_wire(message, tagged=tagged).to_container())


def field_sizes(message: Message, *, tagged: Optional[TaggedCodec] = None) -> dict[str, int]:
    """Get the encoded size in bytes of each top-level field.

    The sizes cover the bencoded field values only; the list delimiters of the
    payload and message containers (4 bytes in total) are not attributed to
    any field.

    Example:
        >>> sizes = field_sizes(msg)
        >>> sizes["sequence"]  # i2e
        3
    """
    wire = to_wire(message, tagged=tagged)
    payload = wire.payload
    return {
        "author": bencoded_length(payload.author),
        "sequence": bencoded_length(payload.sequence),
        "previous": bencoded_length(payload.previous),
        "timestamp": bencoded_length(payload.timestamp),
        "content": bencoded_length(payload.content.to_container()),
        "signature": bencoded_length(wire.signature),
    }
