#!/usr/bin/env python3
"""Basic usage example for bendybutt.

This example demonstrates:
1. Building a metafeed announcement message
2. Encoding to Bendy Butt wire bytes
3. Decoding back to the Pydantic model
4. Linking the next message through its message id
"""

from __future__ import annotations

import base64
import os

from bendybutt import (
    FeedAnnouncement,
    FeedContent,
    Message,
    PrivateContent,
    decode,
    encode,
    encoded_size,
    field_sizes,
    message_id,
)


def _b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


# Placeholder keys and signatures; a real client signs the encoded payload.
METAFEED = f"@{_b64(os.urandom(32))}.bbfeed-v1"
SUBFEED = f"@{_b64(os.urandom(32))}.ed25519"
SIGNATURE = f"{_b64(bytes(64))}.sig.ed25519"


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("bendybutt Basic Usage Example")
    print("=" * 60)
    print()

    # Create the first message of a metafeed
    print("1. Creating a metafeed/add announcement...")
    first = Message(
        previous=None,
        author=METAFEED,
        sequence=1,
        timestamp=1,
        signature=SIGNATURE,
        content=FeedContent(
            announcement=FeedAnnouncement(
                feed_type="metafeed/add",
                subfeed=SUBFEED,
                metafeed=METAFEED,
                nonce=_b64(os.urandom(32)),
            ),
            signature=SIGNATURE,
        ),
    )
    print(f"   Author:  {first.author}")
    print(f"   Subfeed: {first.content.announcement.subfeed}")
    print()

    # Analyze field sizes
    print("2. Analyzing field sizes...")
    for field_name, size in field_sizes(first).items():
        print(f"   {field_name}: {size} bytes")
    print(f"   Total: {encoded_size(first)} bytes")
    print()

    # Encode the message
    print("3. Encoding to wire bytes...")
    data = encode(first)
    print(f"   Encoded: {data[:32]!r}...")
    print()

    # Decode the message
    print("4. Decoding...")
    decoded = decode(data)
    print(f"   Round trip identical: {decoded == first}")
    print()

    # Link the next message
    print("5. Linking the next message...")
    second = Message(
        previous=message_id(data),
        author=METAFEED,
        sequence=2,
        timestamp=2,
        signature=SIGNATURE,
        content=PrivateContent(ciphertext=f"{_b64(os.urandom(48))}.box2"),
    )
    print(f"   Previous: {second.previous}")
    print(f"   Encoded size: {len(encode(second))} bytes")


if __name__ == "__main__":
    main()
