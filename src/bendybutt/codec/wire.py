"""Wire-level records for Bendy Butt messages.

Each container level of the wire format has its own record so that field order
lives in one place. ``to_container`` produces the nested list/dict structure
handed to the container codec; ``from_container`` checks the shape of a
deserialized structure and rebuilds the record.

Wire layout::

    [ [author, sequence, previous, timestamp, content], signature ]

    content = {"Private": [boxed]}
            | {"Feed": [announcement, signature]}
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Union

from ..bfe.types import TaggedValue
from ..exceptions import ShapeMismatchError

PRIVATE_VARIANT = b"Private"
FEED_VARIANT = b"Feed"


def _expect_list(value: Any, arity: int, what: str) -> list[Any]:
    if not isinstance(value, (list, tuple)):
        raise ShapeMismatchError(f"{what}: expected list, got {type(value).__name__}")
    if len(value) != arity:
        raise ShapeMismatchError(f"{what}: expected {arity} elements, got {len(value)}")
    return list(value)


def _expect_int(value: Any, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ShapeMismatchError(f"{what}: expected int, got {type(value).__name__}")
    return value


def _expect_buffer(value: Any, what: str) -> bytes:
    if not isinstance(value, (bytes, bytearray)):
        raise ShapeMismatchError(f"{what}: expected buffer, got {type(value).__name__}")
    return bytes(value)


@dataclass(frozen=True)
class WirePrivateContent:
    """Boxed ciphertext as a tagged buffer."""

    boxed: TaggedValue

    variant: ClassVar[bytes] = PRIVATE_VARIANT

    def to_container(self) -> dict[bytes, list[TaggedValue]]:
        return {self.variant: [self.boxed]}


@dataclass(frozen=True)
class WireFeedContent:
    """Tagged announcement structure and the subfeed's tagged signature."""

    announcement: TaggedValue
    signature: TaggedValue

    variant: ClassVar[bytes] = FEED_VARIANT

    def to_container(self) -> dict[bytes, list[TaggedValue]]:
        return {self.variant: [self.announcement, self.signature]}


WireContent = Union[WirePrivateContent, WireFeedContent]


def content_from_container(value: Any) -> WireContent:
    """Rebuild the content record from ``{variant: [fields...]}``.

    Raises:
        ShapeMismatchError: If the variant key is unknown or the field list has
            the wrong arity for that variant
    """
    if not isinstance(value, dict) or len(value) != 1:
        raise ShapeMismatchError("content: expected a dict with exactly one variant key")

    ((variant, fields),) = value.items()
    if isinstance(variant, str):
        variant = variant.encode("utf-8")

    if variant == PRIVATE_VARIANT:
        (boxed,) = _expect_list(fields, 1, "private content")
        return WirePrivateContent(boxed=_expect_buffer(boxed, "private content boxed"))
    if variant == FEED_VARIANT:
        announcement, signature = _expect_list(fields, 2, "feed content")
        return WireFeedContent(
            announcement=announcement,
            signature=_expect_buffer(signature, "feed content signature"),
        )

    raise ShapeMismatchError(f"content: unknown variant {variant!r}")


@dataclass(frozen=True)
class WirePayload:
    """The signed part of a message."""

    author: TaggedValue
    sequence: int
    previous: TaggedValue
    timestamp: int
    content: WireContent

    def to_container(self) -> list[Any]:
        return [
            self.author,
            self.sequence,
            self.previous,
            self.timestamp,
            self.content.to_container(),
        ]

    @classmethod
    def from_container(cls, value: Any) -> WirePayload:
        author, sequence, previous, timestamp, content = _expect_list(value, 5, "payload")
        return cls(
            author=_expect_buffer(author, "payload author"),
            sequence=_expect_int(sequence, "payload sequence"),
            previous=_expect_buffer(previous, "payload previous"),
            timestamp=_expect_int(timestamp, "payload timestamp"),
            content=content_from_container(content),
        )


@dataclass(frozen=True)
class WireMessage:
    """Payload plus the author's signature over it."""

    payload: WirePayload
    signature: TaggedValue

    def to_container(self) -> list[Any]:
        return [self.payload.to_container(), self.signature]

    @classmethod
    def from_container(cls, value: Any) -> WireMessage:
        payload, signature = _expect_list(value, 2, "message")
        return cls(
            payload=WirePayload.from_container(payload),
            signature=_expect_buffer(signature, "message signature"),
        )
