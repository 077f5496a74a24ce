"""Unit tests for the codec running against fake collaborators."""

from __future__ import annotations

import pytest

from bendybutt import Message, ProjectionError, ShapeMismatchError, decode, encode
from bendybutt.codec import WireMessage, WirePrivateContent, from_wire, to_wire
from bendybutt.container import BencodeContainer
from tests.vectors import BOX2, FEED, MSG, SIG


class TestFakeTaggedCodec:
    """Test the message codec with a fake tagged-field codec."""

    def test_private_roundtrip(self, private_message: Message, fake_tagged) -> None:
        """Test round trip without the BFE type table."""
        data = encode(private_message, tagged=fake_tagged)
        assert decode(data, tagged=fake_tagged) == private_message

    def test_feed_roundtrip(self, feed_message: Message, fake_tagged) -> None:
        """Test feed content goes through encode_structured."""
        data = encode(feed_message, tagged=fake_tagged)

        assert "encode_structured" in fake_tagged.calls
        assert decode(data, tagged=fake_tagged) == feed_message

    def test_field_conversions(self, private_message: Message, fake_tagged) -> None:
        """Test each field uses the conversion for its type."""
        wire = to_wire(private_message, tagged=fake_tagged)

        assert wire.payload.author == b"F:" + FEED.encode()
        assert wire.payload.previous == b"M:" + MSG.encode()
        assert wire.signature == b"S:" + SIG.encode()
        assert wire.payload.content == WirePrivateContent(boxed=b"B:" + BOX2.encode())

    def test_encode_order(self, private_message: Message, fake_tagged) -> None:
        """Test content is converted before the payload fields."""
        to_wire(private_message, tagged=fake_tagged)

        assert fake_tagged.calls == [
            "encode_boxed",
            "encode_msg_id",
            "encode_feed_id",
            "encode_signature",
        ]

    def test_foreign_error_becomes_projection_error(
        self, private_message: Message, fake_tagged
    ) -> None:
        """Test a ValueError from the collaborator is reported as ProjectionError."""
        wire = to_wire(private_message, tagged=fake_tagged)
        broken = WireMessage(payload=wire.payload, signature=b"X:not-a-signature")

        with pytest.raises(ProjectionError, match="Field signature"):
            from_wire(broken, tagged=fake_tagged)

    def test_real_container(self, feed_message: Message, fake_tagged) -> None:
        """Test fake tagged values serialize through bencode."""
        container = BencodeContainer()
        data = encode(feed_message, tagged=fake_tagged, container=container)

        assert data.startswith(b"ll")
        assert decode(data, tagged=fake_tagged, container=container) == feed_message


class TestFakeContainer:
    """Test the message codec with a fake container codec."""

    def test_roundtrip(self, private_message: Message, fake_container) -> None:
        """Test round trip without bencode."""
        data = encode(private_message, container=fake_container)

        assert data == b"obj-0"
        assert decode(data, container=fake_container) == private_message

    def test_container_receives_wire_structure(
        self, private_message: Message, fake_container
    ) -> None:
        """Test the container sees [payload, signature]."""
        data = encode(private_message, container=fake_container)
        structure = fake_container.deserialize(data)

        assert len(structure) == 2
        assert len(structure[0]) == 5
        assert list(structure[0][4]) == [b"Private"]

    def test_container_error_is_shape_mismatch(self, fake_container) -> None:
        """Test a ValueError from the container is a shape mismatch."""
        with pytest.raises(ShapeMismatchError, match="Malformed container"):
            decode(b"obj-99", container=fake_container)

    def test_both_fakes(self, feed_message: Message, fake_tagged, fake_container) -> None:
        """Test the codec needs nothing but its two ports."""
        data = encode(feed_message, tagged=fake_tagged, container=fake_container)
        decoded = decode(data, tagged=fake_tagged, container=fake_container)

        assert decoded == feed_message
