"""Decoded Bendy Butt message records.

A message is either *private* (a boxed ciphertext) or a *feed* announcement
(a metafeed linking one of its subfeeds, counter-signed by the subfeed key).
The two kinds form a discriminated union on ``kind``.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import Field, StrictStr

from .base import BendyModel
from .fields import Int32, Int64


class FeedAnnouncement(BendyModel):
    """Metafeed announcement data.

    Serialized under the keys ``type``, ``subfeed``, ``metafeed`` and ``nonce``.

    Attributes:
        feed_type: Announcement operation, e.g. ``metafeed/add``
        subfeed: Feed id of the announced subfeed
        metafeed: Feed id of the announcing metafeed
        nonce: Random base64 string, used once
    """

    feed_type: StrictStr = Field(alias="type")
    subfeed: StrictStr
    metafeed: StrictStr
    nonce: StrictStr

    def to_structured(self) -> dict[str, Any]:
        """Return the key-value form used on the wire."""
        return self.model_dump(by_alias=True)


class PrivateContent(BendyModel):
    """Encrypted content: ``<base64>.box`` or ``<base64>.box2``."""

    kind: Literal["private"] = "private"
    ciphertext: StrictStr


class FeedContent(BendyModel):
    """Feed announcement content with the subfeed's signature over it."""

    kind: Literal["feed"] = "feed"
    announcement: FeedAnnouncement
    signature: StrictStr


Content = Annotated[Union[PrivateContent, FeedContent], Field(discriminator="kind")]


class Message(BendyModel):
    """A decoded Bendy Butt message.

    Attributes:
        previous: Id of the prior message, or None for the first message of a feed
        author: Feed id of the author
        sequence: Position of the message in its feed
        timestamp: Caller-supplied timestamp
        signature: Signature over the encoded payload
        content: Private or feed content

    Example:
        >>> msg = Message(
        ...     previous=None,
        ...     author="@6CAxOI3f+LUOVrbAl0IemqiS7ATpQvr9Mdw9LC4+Uv0=.bbfeed-v1",
        ...     sequence=1,
        ...     timestamp=1,
        ...     signature=SIG,
        ...     content=PrivateContent(ciphertext=BOX2),
        ... )
    """

    previous: Optional[StrictStr]
    author: StrictStr
    sequence: Int32
    timestamp: Int64
    signature: StrictStr
    content: Content
