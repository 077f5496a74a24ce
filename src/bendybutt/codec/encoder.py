"""Bendy Butt message encoder.

This module provides the encode() function that converts a decoded Message
into its canonical wire bytes: every identifier, signature and ciphertext is
BFE-encoded, then the fixed-shape wire structure is bencoded.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from ..bfe.codec import BfeCodec
from ..bfe.types import TaggedValue
from ..container.bencode import BencodeContainer
from ..exceptions import BendyButtError, EncodeError
from ..models.message import FeedContent, Message, PrivateContent
from .ports import ContainerCodec, TaggedCodec
from .wire import WireContent, WireFeedContent, WireMessage, WirePayload, WirePrivateContent

logger = logging.getLogger(__name__)


def encode(
    message: Message,
    *,
    tagged: Optional[TaggedCodec] = None,
    container: Optional[ContainerCodec] = None,
) -> bytes:
    """Encode a Message to Bendy Butt wire bytes.

    Fields are placed in the fixed wire order: payload (author, sequence,
    previous, timestamp, content) then signature. Output is deterministic for
    a given message.

    Args:
        message: Decoded message to encode
        tagged: Tagged-binary field codec (defaults to BfeCodec)
        container: Container codec (defaults to BencodeContainer)

    Returns:
        Canonical wire bytes

    Raises:
        SuffixMismatchError: If a field's sigil/suffix does not match its type
        EncodeError: If any field cannot be encoded

    Examples:
        ```python
        from bendybutt import Message, PrivateContent, decode, encode

        msg = Message(
            previous="%H3MlLmVPVgHU6rBSzautUBZibDttkI+cU4lAFUIM8Ag=.bbmsg-v1",
            author="@6CAxOI3f+LUOVrbAl0IemqiS7ATpQvr9Mdw9LC4+Uv0=.bbfeed-v1",
            sequence=2,
            timestamp=1,
            signature=(
                "F/XZ1uOwXNLKSHynxIvV/FUW1Fd9hIqxJw8TgTbMlf39SbVTwdRPdgxZxp9DoaMIj2yEfm14O0L9"
                "kcQJCIW2Cg==.sig.ed25519"
            ),
            content=PrivateContent(ciphertext="QmVuZHkgQnV0dA==.box2"),
        )
        data = encode(msg)
        assert decode(data) == msg
        ```
    """
    wire = to_wire(message, tagged=tagged)
    container = container if container is not None else BencodeContainer()

    try:
        encoded = container.serialize(wire.to_container())
    except BendyButtError:
        raise
    except (TypeError, ValueError) as err:
        raise EncodeError(f"Container serialization failed: {err}") from err

    logger.debug("encoded %s message: %d bytes", message.content.kind, len(encoded))
    return encoded


def to_wire(message: Message, *, tagged: Optional[TaggedCodec] = None) -> WireMessage:
    """Convert a Message to its wire record without serializing it.

    Raises:
        SuffixMismatchError: If a field's sigil/suffix does not match its type
        EncodeError: If any field cannot be encoded
    """
    tagged = tagged if tagged is not None else BfeCodec()

    content = _encode_content(tagged, message.content)

    previous = _encode_field("previous", tagged.encode_msg_id, message.previous)
    author = _encode_field("author", tagged.encode_feed_id, message.author)
    signature = _encode_field("signature", tagged.encode_signature, message.signature)

    payload = WirePayload(
        author=author,
        sequence=_check_int("sequence", message.sequence),
        previous=previous,
        timestamp=_check_int("timestamp", message.timestamp),
        content=content,
    )
    return WireMessage(payload=payload, signature=signature)


def _encode_content(tagged: TaggedCodec, content: Any) -> WireContent:
    """Encode the content variant.

    Raises:
        EncodeError: If the variant is unknown or a field is invalid
    """
    if isinstance(content, PrivateContent):
        boxed = _encode_field("content.ciphertext", tagged.encode_boxed, content.ciphertext)
        return WirePrivateContent(boxed=boxed)

    if isinstance(content, FeedContent):
        announcement = _encode_field(
            "content.announcement",
            tagged.encode_structured,
            content.announcement.to_structured(),
        )
        signature = _encode_field("content.signature", tagged.encode_signature, content.signature)
        return WireFeedContent(announcement=announcement, signature=signature)

    raise EncodeError(f"Unsupported content type {type(content).__name__}")


def _encode_field(name: str, convert: Callable[[Any], TaggedValue], value: Any) -> TaggedValue:
    """Run one tagged conversion, naming the field in any error.

    Errors from the tagged codec keep their type; foreign errors become EncodeError.
    """
    try:
        return convert(value)
    except BendyButtError as err:
        raise type(err)(f"Field {name}: {err}") from err
    except (TypeError, ValueError) as err:
        raise EncodeError(f"Field {name}: {err}") from err


def _check_int(name: str, value: Any) -> int:
    # Raw integers are the only untagged fields; bool would bencode as int.
    if isinstance(value, bool) or not isinstance(value, int):
        raise EncodeError(f"Field {name}: expected int, got {type(value).__name__}")
    return value
