"""BFE decoder.

Inverse of the encoder: tagged buffers become their external string (or
generic Python) value, lists and dicts are walked recursively.
"""

from __future__ import annotations

import base64
from typing import Any, Optional

from ..exceptions import ProjectionError, ShapeMismatchError, TagUnknownError
from .types import (
    GENERIC_BOOLEAN,
    GENERIC_BYTES,
    GENERIC_NIL,
    GENERIC_STRING,
    BfeFormat,
    BfeType,
    TaggedValue,
    lookup_tag,
)


def _split(buffer: TaggedValue) -> tuple[BfeFormat, bytes]:
    if not isinstance(buffer, (bytes, bytearray)):
        raise ShapeMismatchError(f"expected tagged buffer, got {type(buffer).__name__}")
    if len(buffer) < 2:
        raise TagUnknownError(f"tagged buffer too short for a tag: {len(buffer)} bytes")

    fmt = lookup_tag(buffer)
    if fmt is None:
        raise TagUnknownError(f"unknown type/format tag 0x{bytes(buffer[:2]).hex()}")
    return fmt, bytes(buffer[2:])


def _to_external(fmt: BfeFormat, data: bytes) -> Any:
    if fmt.type is not BfeType.GENERIC:
        return fmt.sigil + base64.b64encode(data).decode("ascii") + fmt.suffix

    if fmt is GENERIC_STRING:
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as err:
            raise ProjectionError(f"invalid UTF-8 in string value: {err}") from err
    if fmt is GENERIC_BOOLEAN:
        if data not in (b"\x00", b"\x01"):
            raise ProjectionError(f"invalid boolean payload 0x{data.hex()}")
        return data == b"\x01"
    if fmt is GENERIC_NIL:
        if data:
            raise ProjectionError(f"nil value carries {len(data)} payload bytes")
        return None
    if fmt is GENERIC_BYTES:
        return data

    raise TagUnknownError(f"unhandled generic format {fmt.name}")


def _decode_typed(buffer: TaggedValue, bfe_type: BfeType) -> str:
    fmt, data = _split(buffer)
    if fmt.type is not bfe_type:
        raise ProjectionError(
            f"expected {bfe_type.name.lower()} value, got {fmt.type.name.lower()}/{fmt.name}"
        )
    return _to_external(fmt, data)


def decode_feed(buffer: TaggedValue) -> str:
    """Decode a feed id buffer back to ``@<base64><suffix>``.

    Raises:
        TagUnknownError: If the tag is not in the type table
        ProjectionError: If the buffer is tagged as something other than a feed
    """
    return _decode_typed(buffer, BfeType.FEED)


def decode_msg(buffer: TaggedValue) -> Optional[str]:
    """Decode a message id buffer; the nil tag decodes to None."""
    fmt, data = _split(buffer)
    if fmt is GENERIC_NIL:
        return _to_external(fmt, data)
    return _decode_typed(buffer, BfeType.MSG)


def decode_blob(buffer: TaggedValue) -> str:
    """Decode a blob id buffer back to ``&<base64>.sha256``."""
    return _decode_typed(buffer, BfeType.BLOB)


def decode_sig(buffer: TaggedValue) -> str:
    """Decode a signature buffer back to ``<base64>.sig.ed25519``."""
    return _decode_typed(buffer, BfeType.SIGNATURE)


def decode_box(buffer: TaggedValue) -> str:
    """Decode a boxed ciphertext buffer back to ``<base64>.box`` or ``.box2``."""
    return _decode_typed(buffer, BfeType.BOX)


def decode(value: TaggedValue) -> Any:
    """Decode a tagged value into its JSON-like form.

    Args:
        value: Tagged buffer, integer, or list/dict of tagged values

    Returns:
        str, bool, None, bytes, int, list, or dict with str keys

    Raises:
        TagUnknownError: If a buffer carries an unknown tag
        ShapeMismatchError: If a value is not a container type
        ProjectionError: If a buffer payload is invalid for its format
    """
    # bool is not a container type; reject before the int branch.
    if isinstance(value, bool):
        raise ShapeMismatchError("unexpected bool in tagged value")
    if isinstance(value, int):
        return value
    if isinstance(value, (bytes, bytearray)):
        fmt, data = _split(value)
        return _to_external(fmt, data)
    if isinstance(value, (list, tuple)):
        return [decode(item) for item in value]
    if isinstance(value, dict):
        decoded: dict[str, Any] = {}
        for key, item in value.items():
            if isinstance(key, (bytes, bytearray)):
                try:
                    key = bytes(key).decode("utf-8")
                except UnicodeDecodeError as err:
                    raise ProjectionError(f"invalid UTF-8 in dict key: {err}") from err
            decoded[key] = decode(item)
        return decoded

    raise ShapeMismatchError(f"unexpected {type(value).__name__} in tagged value")
