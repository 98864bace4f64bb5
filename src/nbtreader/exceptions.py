# Copyright (c) "Neo4j"
# Neo4j Sweden AB [https://neo4j.com]
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

# ruff: noqa: N818
# The read error names mirror the failure kinds of the format, not the
# "...Error" convention.


"""
Module containing the decoder exceptions.

Decoder API Errors
==================
+ NbtError
  + NbtReadError
    + UnexpectedEof
    + UnknownTagType
    + InvalidTagType
    + TransportFailure
    + InvalidEncoding
    + DepthLimitExceeded
  + ConfigurationError
"""

from __future__ import annotations

import typing as t


__all__ = [
    "ConfigurationError",
    "DepthLimitExceeded",
    "InvalidEncoding",
    "InvalidTagType",
    "NbtError",
    "NbtReadError",
    "TransportFailure",
    "UnexpectedEof",
    "UnknownTagType",
]


class NbtError(Exception):
    """Base class for all errors raised by this package."""


# NbtError > NbtReadError
class NbtReadError(NbtError):
    """
    Raised when a document cannot be decoded.

    Any read error aborts the whole parse; no partial tree is produced.

    :ivar position: number of bytes consumed from the stream when the error
        was detected, or :data:`None` if unknown.
    """

    position: int | None = None

    def is_retryable(self) -> bool:
        """
        Whether decoding the same bytes again could succeed.

        Always :data:`False`: retrying only makes sense against a different
        or repositioned stream.
        """
        return False

    def __str__(self):
        s = super().__str__()
        if self.position is not None:
            return f"{s} (at byte {self.position})"
        return s


# NbtError > NbtReadError > UnexpectedEof
class UnexpectedEof(NbtReadError):
    """
    Raised when the stream ended before a field was complete.

    This covers fixed-width numbers as well as length-prefixed strings and
    arrays whose declared length exceeds the remaining input.
    """


# NbtError > NbtReadError > UnknownTagType
class UnknownTagType(NbtReadError):
    """Raised for a tag-type byte outside the known set of tag types."""

    tag_type: int

    def __init__(self, tag_type: int, *args: t.Any) -> None:
        if not args:
            args = ("Unknown tag type 0x{:02x}".format(tag_type),)
        super().__init__(*args)
        self.tag_type = tag_type


# NbtError > NbtReadError > InvalidTagType
class InvalidTagType(NbtReadError):
    """
    Raised for a structurally invalid use of a known tag type.

    Chiefly a list header declaring a non-zero element count with the
    ``TAG_End`` element type, or ``TAG_End`` where a value is expected.
    """


# NbtError > NbtReadError > TransportFailure
class TransportFailure(NbtReadError):
    """
    Raised when the underlying byte source failed.

    The original :exc:`OSError` is available as ``__cause__``.
    """


# NbtError > NbtReadError > InvalidEncoding
class InvalidEncoding(NbtReadError):
    """
    Raised when string bytes are not valid UTF-8.

    The original :exc:`UnicodeDecodeError` is available as ``__cause__``.
    """


# NbtError > NbtReadError > DepthLimitExceeded
class DepthLimitExceeded(NbtReadError):
    """Raised when nesting exceeds the configured ``max_depth``."""

    max_depth: int

    def __init__(self, max_depth: int, *args: t.Any) -> None:
        if not args:
            args = (f"Nesting depth exceeds max_depth={max_depth}",)
        super().__init__(*args)
        self.max_depth = max_depth


# NbtError > ConfigurationError
class ConfigurationError(NbtError):
    """Raised when there is an error concerning a configuration."""
