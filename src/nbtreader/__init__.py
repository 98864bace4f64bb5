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


"""
Decoder for named binary tag (NBT) documents.

Example::

    import nbtreader

    root = nbtreader.parse_nbt_bytes(data)
    assert root.value["name"] == nbtreader.String("Bananrama")
"""


from logging import getLogger as _getLogger

from ._api import (
    parse_nbt_bytes,
    parse_nbt_file,
    parse_nbt_stream,
)
from ._codec.nbt import (
    Byte,
    ByteArray,
    Compound,
    Double,
    Float,
    Int,
    IntArray,
    List,
    Long,
    RootValue,
    Short,
    String,
    TAG_BYTE,
    TAG_BYTE_ARRAY,
    TAG_COMPOUND,
    TAG_DOUBLE,
    TAG_END,
    TAG_FLOAT,
    TAG_INT,
    TAG_INT_ARRAY,
    TAG_LIST,
    TAG_LONG,
    tag_name,
    TAG_SHORT,
    TAG_STRING,
    Value,
)
from ._meta import version as __version__
from .exceptions import (
    ConfigurationError,
    DepthLimitExceeded,
    InvalidEncoding,
    InvalidTagType,
    NbtError,
    NbtReadError,
    TransportFailure,
    UnexpectedEof,
    UnknownTagType,
)


__all__ = [
    "__version__",
    "Byte",
    "ByteArray",
    "Compound",
    "ConfigurationError",
    "DepthLimitExceeded",
    "Double",
    "Float",
    "Int",
    "IntArray",
    "InvalidEncoding",
    "InvalidTagType",
    "List",
    "Long",
    "NbtError",
    "NbtReadError",
    "parse_nbt_bytes",
    "parse_nbt_file",
    "parse_nbt_stream",
    "RootValue",
    "Short",
    "String",
    "TAG_BYTE",
    "TAG_BYTE_ARRAY",
    "TAG_COMPOUND",
    "TAG_DOUBLE",
    "TAG_END",
    "TAG_FLOAT",
    "TAG_INT",
    "TAG_INT_ARRAY",
    "TAG_LIST",
    "TAG_LONG",
    "tag_name",
    "TAG_SHORT",
    "TAG_STRING",
    "TransportFailure",
    "UnexpectedEof",
    "UnknownTagType",
    "Value",
]


log = _getLogger("nbtreader")
