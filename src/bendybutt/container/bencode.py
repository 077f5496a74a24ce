"""Bencode implementation of the ContainerCodec port.

Bencode gives every value exactly one encoding: integers in canonical decimal,
byte strings length-prefixed, dict keys sorted. That makes the serialized
message a stable input for hashing.
"""

from __future__ import annotations

import logging
from typing import Any

from fastbencode import bdecode, bencode

from ..exceptions import EncodeError, ShapeMismatchError

logger = logging.getLogger(__name__)


class BencodeContainer:
    """
    Bencode container codec.

    Accepts bytes, int, list, tuple and dicts with bytes keys. Decoded
    lists come back as lists, byte strings as bytes.
    """

    def serialize(self, value: Any) -> bytes:
        try:
            return bencode(value)
        except (TypeError, KeyError, ValueError) as err:
            raise EncodeError(f"value cannot be bencoded: {err!r}") from err

    def deserialize(self, data: bytes) -> Any:
        if not isinstance(data, (bytes, bytearray)):
            raise ShapeMismatchError(f"expected bytes, got {type(data).__name__}")
        try:
            return bdecode(bytes(data))
        except (ValueError, TypeError, IndexError, KeyError, OverflowError) as err:
            logger.debug("rejected %d bytes of malformed bencode: %r", len(data), err)
            raise ShapeMismatchError(f"malformed bencode container: {err}") from err
