"""End-to-end integration tests."""

from __future__ import annotations

import base64

from bendybutt import (
    FeedAnnouncement,
    FeedContent,
    Message,
    PrivateContent,
    decode,
    encode,
    encoded_size,
    message_id,
    verify_message_id,
)
from tests.vectors import BOX2, FEED, FEED_SIG, NONCE, SIG

METAFEED = "@" + base64.b64encode(b"\x01" * 32).decode("ascii") + ".bbfeed-v1"
SUBFEED = "@" + base64.b64encode(b"\x02" * 32).decode("ascii") + ".ed25519"


class TestEndToEndWorkflow:
    """Test complete end-to-end workflows."""

    def test_metafeed_chain(self) -> None:
        """Test a three-message metafeed linked through message ids."""
        # 1. First message: announce a classic subfeed, no previous link
        first = Message(
            previous=None,
            author=METAFEED,
            sequence=1,
            timestamp=1_600_000_000_000,
            signature=SIG,
            content=FeedContent(
                announcement=FeedAnnouncement(
                    feed_type="metafeed/add",
                    subfeed=SUBFEED,
                    metafeed=METAFEED,
                    nonce=NONCE,
                ),
                signature=FEED_SIG,
            ),
        )
        first_data = encode(first)

        # 2. Second message links to the first by its id
        second = Message(
            previous=message_id(first_data),
            author=METAFEED,
            sequence=2,
            timestamp=1_600_000_000_001,
            signature=SIG,
            content=PrivateContent(ciphertext=BOX2),
        )
        second_data = encode(second)

        # 3. Third message tombstones the subfeed
        third = Message(
            previous=message_id(second_data),
            author=METAFEED,
            sequence=3,
            timestamp=1_600_000_000_002,
            signature=SIG,
            content=FeedContent(
                announcement=FeedAnnouncement(
                    feed_type="metafeed/tombstone",
                    subfeed=SUBFEED,
                    metafeed=METAFEED,
                    nonce=NONCE,
                ),
                signature=FEED_SIG,
            ),
        )
        third_data = encode(third)

        # 4. Receiver decodes the feed and follows the links
        feed = [decode(data) for data in (first_data, second_data, third_data)]

        assert feed == [first, second, third]
        assert feed[0].previous is None
        assert verify_message_id(first_data, feed[1].previous)
        assert verify_message_id(second_data, feed[2].previous)
        assert [msg.sequence for msg in feed] == [1, 2, 3]

    def test_mixed_feed_formats(self) -> None:
        """Test announcement ids keep their own feed formats."""
        msg = Message(
            previous=None,
            author=METAFEED,
            sequence=1,
            timestamp=1,
            signature=SIG,
            content=FeedContent(
                announcement=FeedAnnouncement(
                    feed_type="metafeed/add",
                    subfeed=SUBFEED,
                    metafeed=FEED,
                    nonce=NONCE,
                ),
                signature=FEED_SIG,
            ),
        )

        decoded = decode(encode(msg))
        assert isinstance(decoded.content, FeedContent)
        assert decoded.content.announcement.subfeed.endswith(".ed25519")
        assert decoded.content.announcement.metafeed.endswith(".bbfeed-v1")

    def test_size_before_encoding(self, private_message: Message) -> None:
        """Test a caller can size a message before serializing it."""
        size = encoded_size(private_message)
        data = encode(private_message)

        assert size == len(data)
        assert size > len(base64.b64decode(BOX2.removesuffix(".box2")))
