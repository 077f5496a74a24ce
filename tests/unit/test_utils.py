"""Unit tests for sizing and message id utilities."""

from __future__ import annotations

import base64

import pytest

from bendybutt import Message, bfe, encode, encoded_size, field_sizes, message_id
from bendybutt.utils import bencoded_length, message_hash, verify_message_id


class TestSizeCalculation:
    """Test size calculation utilities."""

    def test_encoded_size_private(self, private_message: Message) -> None:
        """Test size matches the encoded length."""
        assert encoded_size(private_message) == len(encode(private_message))

    def test_encoded_size_feed(self, feed_message: Message) -> None:
        """Test size matches the encoded length for feed content."""
        assert encoded_size(feed_message) == len(encode(feed_message))

    def test_field_sizes(self, private_message: Message) -> None:
        """Test per-field sizes."""
        sizes = field_sizes(private_message)

        assert sizes["sequence"] == 3  # i2e
        assert sizes["timestamp"] == 3  # i1e
        assert sizes["author"] == 3 + 34  # 34:<tag + 32-byte key>
        assert sizes["previous"] == 3 + 34
        assert sizes["signature"] == 3 + 66

    def test_field_sizes_sum(self, feed_message: Message) -> None:
        """Test fields plus the delimiters of both lists add up to the total."""
        assert sum(field_sizes(feed_message).values()) + 4 == encoded_size(feed_message)

    @pytest.mark.parametrize(
        "value, expected",
        [
            (0, 3),
            (-5, 4),
            (b"", 2),
            (b"hello", 7),
            ([b"hello", b"world"], 16),
            ({b"a": 1}, 8),
        ],
    )
    def test_bencoded_length(self, value, expected: int) -> None:
        """Test bencoded length of primitive values."""
        assert bencoded_length(value) == expected

    def test_bencoded_length_rejects_bool(self) -> None:
        """Test bool has no bencode length."""
        with pytest.raises(TypeError):
            bencoded_length(True)


class TestMessageId:
    """Test message id derivation."""

    def test_format(self, private_message: Message) -> None:
        """Test the id is a bbmsg-v1 message id over the sha256 digest."""
        data = encode(private_message)
        msg_id = message_id(data)

        assert msg_id.startswith("%")
        assert msg_id.endswith(".bbmsg-v1")
        assert base64.b64decode(msg_id[1 : -len(".bbmsg-v1")]) == message_hash(data)

    def test_is_valid_previous(self, private_message: Message) -> None:
        """Test the id can be BFE-encoded as a message id."""
        msg_id = message_id(encode(private_message))
        assert bfe.encode_msg(msg_id)[:2] == b"\x01\x03"

    def test_distinct(self, private_message: Message, feed_message: Message) -> None:
        """Test different messages get different ids."""
        assert message_id(encode(private_message)) != message_id(encode(feed_message))

    def test_verify(self, private_message: Message) -> None:
        """Test id verification."""
        data = encode(private_message)

        assert verify_message_id(data, message_id(data)) is True
        assert verify_message_id(data + b"x", message_id(data)) is False
