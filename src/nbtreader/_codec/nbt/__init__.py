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


from ._common import (
    COMPOSITE_TAGS,
    is_simple_tag,
    SIMPLE_TAGS,
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
    TAG_NAMES,
    TAG_SHORT,
    TAG_STRING,
)
from ._reader import Reader
from ._source import ByteSource
from .types import (
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
    Value,
    VALUE_TYPES,
)


__all__ = [
    "Byte",
    "ByteArray",
    "ByteSource",
    "COMPOSITE_TAGS",
    "Compound",
    "Double",
    "Float",
    "Int",
    "IntArray",
    "is_simple_tag",
    "List",
    "Long",
    "Reader",
    "RootValue",
    "Short",
    "SIMPLE_TAGS",
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
    "TAG_NAMES",
    "TAG_SHORT",
    "TAG_STRING",
    "Value",
    "VALUE_TYPES",
]
