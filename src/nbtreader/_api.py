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


from __future__ import annotations

import typing as t
from io import BytesIO
from os import PathLike

from ._codec.nbt import (
    ByteSource,
    Reader,
    RootValue,
)
from ._conf import ReaderConfig


__all__ = [
    "parse_nbt_bytes",
    "parse_nbt_file",
    "parse_nbt_stream",
]


def _reader(stream: t.BinaryIO, config: dict[str, t.Any]) -> Reader:
    reader_config = ReaderConfig.consume(config).validate()
    source = ByteSource(stream, read_fully=reader_config.read_fully)
    return Reader(
        source,
        encoding_errors=reader_config.encoding_errors,
        max_depth=reader_config.max_depth,
    )


def parse_nbt_stream(stream: t.BinaryIO, **config: t.Any) -> RootValue:
    """ Decode one NBT document from a binary stream.

    The stream is read strictly forward, exactly up to the end of the
    document. It is neither seeked nor closed; any bytes following the
    document are left unread.

    Example::

        import nbtreader

        with open("level.dat", "rb") as f:
            root = nbtreader.parse_nbt_stream(f)
        print(root.name, root.value.data())

    Compressed documents (e.g. gzip) have to be decompressed by the
    caller, for instance by passing a :class:`gzip.GzipFile`.

    :param stream: binary stream positioned at the start of a document.
    :param config: reader options:

        * ``read_fully`` (default :data:`False`): fill string and byte
          array payloads across several reads of ``stream``. Enable for
          sockets and other sources that deliver partial chunks.
        * ``max_depth`` (default :data:`None`): maximum nesting of lists
          and compounds.
        * ``encoding_errors`` (default ``"strict"``): :mod:`codecs` error
          handler for strings.

    :returns: the document's name and value.

    :raises NbtReadError: if the document is malformed, truncated or the
        stream fails. No partial result is produced.
    :raises ConfigurationError: if the configuration is invalid.
    """
    return _reader(stream, config).read_root()


def parse_nbt_bytes(data: bytes, **config: t.Any) -> RootValue:
    """ Decode one NBT document from a bytes-like object.

    See :func:`parse_nbt_stream` for the parameters and errors.
    """
    return parse_nbt_stream(BytesIO(data), **config)


def parse_nbt_file(
    path: str | PathLike[str], **config: t.Any
) -> RootValue:
    """ Decode the NBT document stored (uncompressed) in a file.

    See :func:`parse_nbt_stream` for the parameters and errors.
    """
    with open(path, "rb") as f:
        return parse_nbt_stream(f, **config)
