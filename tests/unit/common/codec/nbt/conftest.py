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

import struct
import typing as t
from io import BytesIO
from pathlib import Path

import pytest

from nbtreader import parse_nbt_bytes


DATA_DIR = Path(__file__).parent / "data"


class NbtBuilder:
    """Assembles raw NBT bytes for the tests."""

    @staticmethod
    def string(value: str | bytes) -> bytes:
        raw = value.encode("utf-8") if isinstance(value, str) else value
        return struct.pack(">H", len(raw)) + raw

    @classmethod
    def named(cls, tag_type: int, name: str, payload: bytes) -> bytes:
        return bytes((tag_type,)) + cls.string(name) + payload

    # a document is a single named tag
    document = named

    @staticmethod
    def compound(*entries: bytes) -> bytes:
        return b"".join(entries) + b"\x00"

    @staticmethod
    def list_header(element_type: int, size: int) -> bytes:
        return struct.pack(">BI", element_type, size)

    @staticmethod
    def number(fmt: str, *values: t.Any) -> bytes:
        return struct.pack(">%d%s" % (len(values), fmt), *values)


class ChunkedStream:
    """Binary stream that never returns more than ``chunk_size`` bytes."""

    def __init__(self, data: bytes, chunk_size: int) -> None:
        self._buffer = BytesIO(data)
        self.chunk_size = chunk_size
        self.reads = 0

    def read(self, n: int = -1) -> bytes:
        self.reads += 1
        if n < 0:
            n = self.chunk_size
        return self._buffer.read(min(n, self.chunk_size))


class FailingStream:
    """Binary stream that fails after delivering ``data``."""

    def __init__(self, data: bytes, error: Exception) -> None:
        self._buffer = BytesIO(data)
        self.error = error

    def read(self, n: int = -1) -> bytes:
        data = self._buffer.read(n)
        if not data:
            raise self.error
        return data


@pytest.fixture
def nbt() -> type[NbtBuilder]:
    return NbtBuilder


@pytest.fixture
def parse():
    def _parse(data, **config):
        return parse_nbt_bytes(bytes(data), **config)

    return _parse


@pytest.fixture
def hello_world_bytes() -> bytes:
    return (DATA_DIR / "hello_world.nbt").read_bytes()


@pytest.fixture
def chunked_stream() -> type[ChunkedStream]:
    return ChunkedStream


@pytest.fixture
def failing_stream() -> type[FailingStream]:
    return FailingStream
