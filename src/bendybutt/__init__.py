"""bendybutt: Bendy Butt feed message codec

A Python library for the Bendy Butt message format used by Secure Scuttlebutt
metafeeds. Messages are bencoded lists whose identifiers, signatures and
ciphertexts are stored in BFE (binary field encoding) form.

Key Features:
- Pydantic-based decoded message model
- Fixed-shape wire records mirroring the bencode layout
- Pluggable tagged-field and container codecs
- Message id derivation and size calculation

Quick Start:
    >>> from bendybutt import Message, PrivateContent, decode, encode
    >>>
    >>> msg = Message(
    ...     previous=None,
    ...     author="@6CAxOI3f+LUOVrbAl0IemqiS7ATpQvr9Mdw9LC4+Uv0=.bbfeed-v1",
    ...     sequence=1,
    ...     timestamp=1,
    ...     signature=(
    ...         "F/XZ1uOwXNLKSHynxIvV/FUW1Fd9hIqxJw8TgTbMlf39SbVTwdRPdgxZxp9DoaMIj2yEfm14O0L9"
    ...         "kcQJCIW2Cg==.sig.ed25519"
    ...     ),
    ...     content=PrivateContent(ciphertext="QmVuZHkgQnV0dA==.box2"),
    ... )
    >>> data = encode(msg)
    >>> decode(data) == msg
    True

Format reference: https://github.com/ssb-ngi-pointer/bendy-butt-spec
"""

from __future__ import annotations

from .bfe import BfeCodec
from .codec import ContainerCodec, TaggedCodec, decode, encode
from .container import BencodeContainer
from .exceptions import (
    BendyButtError,
    DecodeError,
    EncodeError,
    ProjectionError,
    ShapeMismatchError,
    SuffixMismatchError,
    TagUnknownError,
)
from .models import FeedAnnouncement, FeedContent, Message, PrivateContent
from .utils import encoded_size, field_sizes, message_id, verify_message_id

__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode",
    "decode",
    # Models
    "Message",
    "PrivateContent",
    "FeedContent",
    "FeedAnnouncement",
    # Collaborators
    "TaggedCodec",
    "ContainerCodec",
    "BfeCodec",
    "BencodeContainer",
    # Exceptions
    "BendyButtError",
    "EncodeError",
    "SuffixMismatchError",
    "DecodeError",
    "TagUnknownError",
    "ShapeMismatchError",
    "ProjectionError",
    # Message ids
    "message_id",
    "verify_message_id",
    # Sizing
    "encoded_size",
    "field_sizes",
    # Version
    "__version__",
]
