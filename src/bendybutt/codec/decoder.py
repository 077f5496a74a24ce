"""Bendy Butt message decoder.

This module provides the decode() function that converts canonical wire bytes
back to a decoded Message.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from pydantic import ValidationError

from ..bfe.codec import BfeCodec
from ..bfe.types import TaggedValue
from ..container.bencode import BencodeContainer
from ..exceptions import BendyButtError, DecodeError, ProjectionError, ShapeMismatchError
from ..models.base import BendyModel
from ..models.message import Content, FeedAnnouncement, FeedContent, Message, PrivateContent
from .ports import ContainerCodec, TaggedCodec
from .wire import WireContent, WireFeedContent, WireMessage, WirePrivateContent

logger = logging.getLogger(__name__)


def decode(
    data: bytes,
    *,
    tagged: Optional[TaggedCodec] = None,
    container: Optional[ContainerCodec] = None,
) -> Message:
    """Decode Bendy Butt wire bytes to a Message.

    Fields are read in the same fixed order they were encoded in. Either the
    whole message decodes or an error is raised; there is no partial result.

    Args:
        data: Wire bytes produced by encode()
        tagged: Tagged-binary field codec (defaults to BfeCodec)
        container: Container codec (defaults to BencodeContainer)

    Returns:
        Decoded message

    Raises:
        ShapeMismatchError: If the bytes are not a well-formed message container
        TagUnknownError: If a tagged field carries an unknown type tag
        ProjectionError: If a tagged field cannot take its external form
        DecodeError: For any other decoding failure

    Examples:
        ```python
        from bendybutt import decode

        msg = decode(data)
        if msg.content.kind == "feed":
            print(msg.content.announcement.subfeed)
        ```
    """
    container = container if container is not None else BencodeContainer()

    try:
        structure = container.deserialize(data)
    except BendyButtError:
        raise
    except (TypeError, ValueError) as err:
        raise ShapeMismatchError(f"Malformed container: {err}") from err

    wire = WireMessage.from_container(structure)
    message = from_wire(wire, tagged=tagged)

    logger.debug("decoded %s message: %d bytes", message.content.kind, len(data))
    return message


def from_wire(wire: WireMessage, *, tagged: Optional[TaggedCodec] = None) -> Message:
    """Convert a wire record to a Message.

    Raises:
        TagUnknownError: If a tagged field carries an unknown type tag
        ProjectionError: If a tagged field cannot take its external form
    """
    tagged = tagged if tagged is not None else BfeCodec()
    payload = wire.payload

    content = _decode_content(tagged, payload.content)

    fields: dict[str, Any] = {
        "previous": _decode_field("previous", tagged.decode_msg_id, payload.previous),
        "author": _decode_field("author", tagged.decode_feed_id, payload.author),
        "sequence": payload.sequence,
        "timestamp": payload.timestamp,
        "signature": _decode_field("signature", tagged.decode_signature, wire.signature),
        "content": content,
    }

    try:
        return Message(**fields)
    except ValidationError as err:
        raise ProjectionError(f"Failed to construct Message: {err}") from err


def _decode_content(tagged: TaggedCodec, content: WireContent) -> Content:
    """Decode the content variant.

    Raises:
        ProjectionError: If the announcement structure does not fit FeedAnnouncement
    """
    if isinstance(content, WirePrivateContent):
        ciphertext = _decode_field("content.ciphertext", tagged.decode_boxed, content.boxed)
        return _build(PrivateContent, "content", {"ciphertext": ciphertext})

    if isinstance(content, WireFeedContent):
        structured = _decode_field(
            "content.announcement", tagged.decode_structured, content.announcement
        )
        if not isinstance(structured, dict):
            raise ProjectionError(
                f"Field content.announcement: expected key-value structure, "
                f"got {type(structured).__name__}"
            )
        announcement = _build(FeedAnnouncement, "content.announcement", structured)
        signature = _decode_field("content.signature", tagged.decode_signature, content.signature)
        return _build(
            FeedContent, "content", {"announcement": announcement, "signature": signature}
        )

    raise DecodeError(f"Unsupported wire content type {type(content).__name__}")


def _decode_field(name: str, convert: Callable[[TaggedValue], Any], value: TaggedValue) -> Any:
    """Run one tagged conversion, naming the field in any error.

    Errors from the tagged codec keep their type; foreign errors become ProjectionError.
    """
    try:
        return convert(value)
    except BendyButtError as err:
        raise type(err)(f"Field {name}: {err}") from err
    except (TypeError, ValueError) as err:
        raise ProjectionError(f"Field {name}: {err}") from err


def _build(model: type[BendyModel], name: str, values: dict[Any, Any]) -> Any:
    try:
        return model.model_validate(values)
    except ValidationError as err:
        raise ProjectionError(f"Field {name}: {err}") from err
