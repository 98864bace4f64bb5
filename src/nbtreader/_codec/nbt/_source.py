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

from ...exceptions import (
    TransportFailure,
    UnexpectedEof,
)


# Upper bound for a single underlying read. Declared lengths come from the
# document itself, so they must not dictate allocation sizes up front.
MAX_READ_SIZE = 1 << 20


class ByteSource:
    """ Sequential view on a binary stream for the decoder.

    The stream can be anything with a binary ``read(n)`` method. It is
    consumed strictly forward and never seeked.

    :param stream: the binary stream to read from.
    :param read_fully: if :data:`True`, length-prefixed payloads are
        assembled from as many underlying reads as needed. Otherwise, a
        single read returning fewer bytes than requested is treated as the
        end of the input.
    """

    def __init__(self, stream: t.BinaryIO, read_fully: bool = False) -> None:
        self.stream = stream
        self.read_fully = read_fully
        self.position = 0

    def _read(self, n: int) -> bytes:
        try:
            data = self.stream.read(n)
        except OSError as exc:
            raise TransportFailure(
                "Failed to read from the byte source: %s" % exc
            ) from exc
        if data is None:
            # non-blocking stream without data available
            data = b""
        self.position += len(data)
        return data

    def read_exact(self, n: int) -> bytes:
        """ Read exactly ``n`` bytes of a fixed-width field.

        :raises UnexpectedEof: if the stream ends first.
        """
        data = self._read(min(n, MAX_READ_SIZE))
        if len(data) == n:
            return data
        chunks = [data]
        remaining = n - len(data)
        while remaining:
            if not data:
                raise UnexpectedEof(
                    "Expected %d more bytes, found end of input"
                    % remaining
                )
            data = self._read(min(remaining, MAX_READ_SIZE))
            chunks.append(data)
            remaining -= len(data)
        return b"".join(chunks)

    def read_bytes(self, n: int) -> bytes:
        """ Read the ``n`` byte payload of a string or byte array.

        :raises UnexpectedEof: if fewer than ``n`` bytes were delivered.
        """
        if self.read_fully:
            return self.read_exact(n)
        if n <= MAX_READ_SIZE:
            data = self._read(n)
            if len(data) != n:
                raise UnexpectedEof(
                    "Expected %d bytes, got %d" % (n, len(data))
                )
            return data
        # every chunk but the last must come back full
        chunks = []
        remaining = n
        while remaining:
            size = min(remaining, MAX_READ_SIZE)
            data = self._read(size)
            if len(data) != size:
                raise UnexpectedEof(
                    "Expected %d bytes, got %d"
                    % (n, n - remaining + len(data))
                )
            chunks.append(data)
            remaining -= size
        return b"".join(chunks)

    def read_u8(self) -> int:
        data = self._read(1)
        if not data:
            raise UnexpectedEof("Expected a tag byte, found end of input")
        return data[0]
