"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import Any, Optional

import pytest

from bendybutt import FeedAnnouncement, FeedContent, Message, PrivateContent
from tests.vectors import BOX2, FEED, FEED_SIG, MSG, NONCE, SIG


class FakeTaggedCodec:
    """
    Tagged codec that prefixes a one-letter type marker to the UTF-8 string.

    It knows nothing about BFE tags or base64, so the message codec can be
    exercised independently of the real type table.
    """

    def __init__(self) -> None:
        self.calls: list[str] = []

    def _tag(self, marker: bytes, value: str) -> bytes:
        return marker + value.encode("utf-8")

    def _untag(self, marker: bytes, value: Any) -> str:
        if not isinstance(value, bytes) or not value.startswith(marker):
            raise ValueError(f"expected {marker!r} buffer, got {value!r}")
        return value[len(marker) :].decode("utf-8")

    def encode_feed_id(self, value: str) -> bytes:
        self.calls.append("encode_feed_id")
        return self._tag(b"F:", value)

    def encode_msg_id(self, value: Optional[str]) -> bytes:
        self.calls.append("encode_msg_id")
        return b"N:" if value is None else self._tag(b"M:", value)

    def encode_signature(self, value: str) -> bytes:
        self.calls.append("encode_signature")
        return self._tag(b"S:", value)

    def encode_boxed(self, value: str) -> bytes:
        self.calls.append("encode_boxed")
        return self._tag(b"B:", value)

    def encode_structured(self, value: Any) -> Any:
        self.calls.append("encode_structured")
        return {key.encode("utf-8"): self._tag(b"V:", item) for key, item in value.items()}

    def decode(self, value: Any) -> Any:
        return self.decode_structured(value)

    def decode_feed_id(self, value: Any) -> str:
        self.calls.append("decode_feed_id")
        return self._untag(b"F:", value)

    def decode_msg_id(self, value: Any) -> Optional[str]:
        self.calls.append("decode_msg_id")
        if value == b"N:":
            return None
        return self._untag(b"M:", value)

    def decode_signature(self, value: Any) -> str:
        self.calls.append("decode_signature")
        return self._untag(b"S:", value)

    def decode_boxed(self, value: Any) -> str:
        self.calls.append("decode_boxed")
        return self._untag(b"B:", value)

    def decode_structured(self, value: Any) -> Any:
        self.calls.append("decode_structured")
        return {key.decode("utf-8"): self._untag(b"V:", item) for key, item in value.items()}


class FakeContainer:
    """
    In-memory container codec: serialize hands out a token, deserialize
    returns the structure stored under it.
    """

    def __init__(self) -> None:
        self._store: dict[bytes, Any] = {}

    def serialize(self, value: Any) -> bytes:
        token = b"obj-%d" % len(self._store)
        self._store[token] = value
        return token

    def deserialize(self, data: bytes) -> Any:
        if data not in self._store:
            raise ValueError(f"unknown token {data!r}")
        return self._store[data]


@pytest.fixture
def feed_announcement() -> FeedAnnouncement:
    """Metafeed announcement adding a subfeed."""
    return FeedAnnouncement(feed_type="metafeed/add", subfeed=FEED, metafeed=FEED, nonce=NONCE)


@pytest.fixture
def private_message() -> Message:
    """Message with encrypted (box2) content."""
    return Message(
        previous=MSG,
        author=FEED,
        sequence=2,
        timestamp=1,
        signature=SIG,
        content=PrivateContent(ciphertext=BOX2),
    )


@pytest.fixture
def feed_message(feed_announcement: FeedAnnouncement) -> Message:
    """Message announcing a subfeed."""
    return Message(
        previous=MSG,
        author=FEED,
        sequence=2,
        timestamp=1,
        signature=SIG,
        content=FeedContent(announcement=feed_announcement, signature=FEED_SIG),
    )


@pytest.fixture
def fake_tagged() -> FakeTaggedCodec:
    return FakeTaggedCodec()


@pytest.fixture
def fake_container() -> FakeContainer:
    return FakeContainer()
