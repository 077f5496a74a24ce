"""BFE implementation of the TaggedCodec port."""

from __future__ import annotations

from typing import Any, Optional

from .decoder import decode, decode_box, decode_feed, decode_msg, decode_sig
from .encoder import encode, encode_box, encode_feed, encode_msg, encode_sig
from .types import TaggedValue


class BfeCodec:
    """Tagged-binary field codec backed by the BFE type table.

    Example:
        >>> codec = BfeCodec()
        >>> buf = codec.encode_feed_id("@6CAxOI3f+LUOVrbAl0IemqiS7ATpQvr9Mdw9LC4+Uv0=.bbfeed-v1")
        >>> buf[:2]
        b'\\x00\\x02'
    """

    def encode_feed_id(self, value: str) -> bytes:
        return encode_feed(value)

    def encode_msg_id(self, value: Optional[str]) -> bytes:
        return encode_msg(value)

    def encode_signature(self, value: str) -> bytes:
        return encode_sig(value)

    def encode_boxed(self, value: str) -> bytes:
        return encode_box(value)

    def encode_structured(self, value: Any) -> TaggedValue:
        return encode(value)

    def decode(self, value: TaggedValue) -> Any:
        return decode(value)

    def decode_feed_id(self, value: TaggedValue) -> str:
        return decode_feed(value)

    def decode_msg_id(self, value: TaggedValue) -> Optional[str]:
        return decode_msg(value)

    def decode_signature(self, value: TaggedValue) -> str:
        return decode_sig(value)

    def decode_boxed(self, value: TaggedValue) -> str:
        return decode_box(value)

    def decode_structured(self, value: TaggedValue) -> Any:
        return decode(value)
