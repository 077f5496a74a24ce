"""Collaborator interfaces for the message codec.

The codec never touches tag bytes or container syntax directly; it goes
through these two ports. The default implementations are
:class:`bendybutt.bfe.BfeCodec` and :class:`bendybutt.container.BencodeContainer`.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol

from ..bfe.types import TaggedValue


class TaggedCodec(Protocol):
    """
    Converts typed strings to tagged values and back.

    Implementations must be:
    - pure (no side effects)
    - lossless for every string they accept
    - strict: reject strings and buffers of the wrong semantic type
    """

    def encode_feed_id(self, value: str) -> TaggedValue:
        """Encode a feed id."""

    def encode_msg_id(self, value: Optional[str]) -> TaggedValue:
        """Encode a message id; None is the first-message sentinel."""

    def encode_signature(self, value: str) -> TaggedValue:
        """Encode a detached signature."""

    def encode_boxed(self, value: str) -> TaggedValue:
        """Encode boxed ciphertext."""

    def encode_structured(self, value: Any) -> TaggedValue:
        """Encode a JSON-like structure as a single tagged value."""

    def decode(self, value: TaggedValue) -> Any:
        """Decode any tagged value to its JSON-like form."""

    def decode_feed_id(self, value: TaggedValue) -> str:
        """Decode a feed id."""

    def decode_msg_id(self, value: TaggedValue) -> Optional[str]:
        """Decode a message id."""

    def decode_signature(self, value: TaggedValue) -> str:
        """Decode a detached signature."""

    def decode_boxed(self, value: TaggedValue) -> str:
        """Decode boxed ciphertext."""

    def decode_structured(self, value: TaggedValue) -> Any:
        """Decode a structure produced by encode_structured."""


class ContainerCodec(Protocol):
    """
    Serializes nested lists, dicts, integers and byte strings.

    Implementations must be:
    - deterministic
    - pure (no side effects)
    - safe against malformed input
    """

    def serialize(self, value: Any) -> bytes:
        """Encode a nested structure into bytes."""

    def deserialize(self, data: bytes) -> Any:
        """Decode bytes into a nested structure."""
