"""BFE encoder.

Turns the external string form of identifiers, signatures and boxed payloads
into tagged buffers, and walks JSON-like structures encoding every leaf.
"""

from __future__ import annotations

import base64
import binascii
from typing import Any, Optional

from ..exceptions import EncodeError, SuffixMismatchError
from .types import (
    BLOB_CLASSIC,
    FEED_BENDYBUTT,
    GENERIC_BOOLEAN,
    GENERIC_BYTES,
    GENERIC_NIL,
    GENERIC_STRING,
    MSG_BENDYBUTT,
    SIG_ED25519,
    BfeFormat,
    BfeType,
    TaggedValue,
    formats_of,
)

_NIL = GENERIC_NIL.tag
_TRUE = GENERIC_BOOLEAN.tag + b"\x01"
_FALSE = GENERIC_BOOLEAN.tag + b"\x00"


def _match_format(value: str, bfe_type: BfeType) -> Optional[BfeFormat]:
    """Find the format of a type whose sigil and suffix frame ``value``.

    Longest suffix wins so that ``.box2`` is not mistaken for ``.box``.
    """
    candidates = sorted(formats_of(bfe_type), key=lambda fmt: len(fmt.suffix), reverse=True)
    for fmt in candidates:
        if value.startswith(fmt.sigil) and value.endswith(fmt.suffix):
            return fmt
    return None


def _encode_typed(value: str, bfe_type: BfeType) -> bytes:
    if not isinstance(value, str):
        raise EncodeError(
            f"expected str for {bfe_type.name.lower()}, got {type(value).__name__}"
        )

    fmt = _match_format(value, bfe_type)
    if fmt is None:
        raise SuffixMismatchError(
            f"{value!r} has no known {bfe_type.name.lower()} sigil/suffix"
        )

    encoded = value[len(fmt.sigil) : len(value) - len(fmt.suffix)]
    try:
        data = base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as err:
        raise EncodeError(f"{value!r}: invalid base64 payload: {err}") from err
    if base64.b64encode(data).decode("ascii") != encoded:
        # Non-zero trailing bits would decode back to a different string.
        raise EncodeError(f"{value!r}: non-canonical base64 payload")

    return fmt.tag + data


def encode_feed(value: str) -> bytes:
    """Encode a feed id such as ``@<base64>.bbfeed-v1``.

    Raises:
        SuffixMismatchError: If the string is not framed as a known feed format
        EncodeError: If the base64 payload is invalid
    """
    return _encode_typed(value, BfeType.FEED)


def encode_msg(value: Optional[str]) -> bytes:
    """Encode a message id such as ``%<base64>.bbmsg-v1``.

    ``None`` encodes to the nil tag; it stands for "no previous message".
    """
    if value is None:
        return _NIL
    return _encode_typed(value, BfeType.MSG)


def encode_blob(value: str) -> bytes:
    """Encode a blob id such as ``&<base64>.sha256``."""
    return _encode_typed(value, BfeType.BLOB)


def encode_sig(value: str) -> bytes:
    """Encode a signature such as ``<base64>.sig.ed25519``."""
    return _encode_typed(value, BfeType.SIGNATURE)


def encode_box(value: str) -> bytes:
    """Encode boxed ciphertext such as ``<base64>.box2``."""
    return _encode_typed(value, BfeType.BOX)


def encode_string(value: str) -> bytes:
    """Encode a plain UTF-8 string with the generic string tag."""
    return GENERIC_STRING.tag + value.encode("utf-8")


def _encode_str(value: str) -> bytes:
    # Sigils and suffixes reveal typed ids; everything else is a plain string.
    if value.startswith(FEED_BENDYBUTT.sigil):
        return encode_feed(value)
    if value.startswith(MSG_BENDYBUTT.sigil):
        return encode_msg(value)
    if value.startswith(BLOB_CLASSIC.sigil):
        return encode_blob(value)
    if value.endswith(SIG_ED25519.suffix):
        return encode_sig(value)
    if _match_format(value, BfeType.BOX) is not None:
        return encode_box(value)
    return encode_string(value)


def encode(value: Any) -> TaggedValue:
    """Encode a JSON-like value.

    Lists and dicts are walked recursively (dict keys become UTF-8 bytes),
    integers pass through unchanged, and every other leaf becomes a tagged
    buffer.

    Args:
        value: str, bool, None, int, bytes, list or dict with str keys

    Returns:
        Tagged value ready to be placed in a container

    Raises:
        SuffixMismatchError: If a sigil-prefixed string has an unknown suffix
        EncodeError: If a value has no tagged representation
    """
    if value is None:
        return _NIL
    # bool before int: bool is a subclass of int
    if isinstance(value, bool):
        return _TRUE if value else _FALSE
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        return _encode_str(value)
    if isinstance(value, (bytes, bytearray)):
        return GENERIC_BYTES.tag + bytes(value)
    if isinstance(value, (list, tuple)):
        return [encode(item) for item in value]
    if isinstance(value, dict):
        encoded: dict[bytes, TaggedValue] = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise EncodeError(f"dict keys must be str, got {type(key).__name__}")
            encoded[key.encode("utf-8")] = encode(item)
        return encoded

    raise EncodeError(f"unsupported value type {type(value).__name__}")
