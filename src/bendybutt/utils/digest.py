"""Message key derivation.

A Bendy Butt message is addressed by the SHA-256 hash of its encoded bytes,
written as a ``.bbmsg-v1`` message id. The next message in the feed refers to
it through its ``previous`` field.
"""

from __future__ import annotations

import base64
import hashlib

from ..bfe.types import MSG_BENDYBUTT


def message_hash(data: bytes) -> bytes:
    """Return the 32-byte SHA-256 digest of encoded message bytes."""
    return hashlib.sha256(data).digest()


def message_id(data: bytes) -> str:
    """Return the message id for encoded message bytes.

    Args:
        data: Bytes produced by encode()

    Returns:
        ``%<base64 sha256>.bbmsg-v1``

    Example:
        >>> data = encode(first_msg)
        >>> second_msg = Message(previous=message_id(data), sequence=2, ...)
    """
    digest = base64.b64encode(message_hash(data)).decode("ascii")
    return f"{MSG_BENDYBUTT.sigil}{digest}{MSG_BENDYBUTT.suffix}"


def verify_message_id(data: bytes, expected_id: str) -> bool:
    """Check that ``expected_id`` is the message id of ``data``.

    Returns:
        True if the id matches, False otherwise
    """
    return message_id(data) == expected_id
