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

from ...exceptions import (
    InvalidTagType,
    UnknownTagType,
)


TAG_END = 0
TAG_BYTE = 1
TAG_SHORT = 2
TAG_INT = 3
TAG_LONG = 4
TAG_FLOAT = 5
TAG_DOUBLE = 6
TAG_BYTE_ARRAY = 7
TAG_STRING = 8
TAG_LIST = 9
TAG_COMPOUND = 10
TAG_INT_ARRAY = 11


TAG_NAMES = {
    TAG_END: "TAG_End",
    TAG_BYTE: "TAG_Byte",
    TAG_SHORT: "TAG_Short",
    TAG_INT: "TAG_Int",
    TAG_LONG: "TAG_Long",
    TAG_FLOAT: "TAG_Float",
    TAG_DOUBLE: "TAG_Double",
    TAG_BYTE_ARRAY: "TAG_Byte_Array",
    TAG_STRING: "TAG_String",
    TAG_LIST: "TAG_List",
    TAG_COMPOUND: "TAG_Compound",
    TAG_INT_ARRAY: "TAG_Int_Array",
}

# Decodable in a single primitive step. IntArray is a flat array of ints,
# so it belongs here even though it has a length prefix.
SIMPLE_TAGS = frozenset((
    TAG_BYTE,
    TAG_SHORT,
    TAG_INT,
    TAG_LONG,
    TAG_FLOAT,
    TAG_DOUBLE,
    TAG_BYTE_ARRAY,
    TAG_STRING,
    TAG_INT_ARRAY,
))

COMPOSITE_TAGS = frozenset((TAG_LIST, TAG_COMPOUND))


def tag_name(tag_type: int) -> str:
    try:
        return TAG_NAMES[tag_type]
    except KeyError:
        return "(unknown tag type 0x{:02x})".format(tag_type)


def is_simple_tag(tag_type: int) -> bool:
    """ Classify a tag-type code that is expected to introduce a value.

    :returns: :data:`True` for tags that decode in one primitive step,
        :data:`False` for List and Compound.
    :raises InvalidTagType: for ``TAG_End``, which never introduces a value.
    :raises UnknownTagType: for codes outside the known set.
    """
    if tag_type in SIMPLE_TAGS:
        return True
    if tag_type in COMPOSITE_TAGS:
        return False
    if tag_type == TAG_END:
        raise InvalidTagType("TAG_End cannot introduce a value")
    raise UnknownTagType(tag_type)


__all__ = [
    "TAG_END",
    "TAG_BYTE",
    "TAG_SHORT",
    "TAG_INT",
    "TAG_LONG",
    "TAG_FLOAT",
    "TAG_DOUBLE",
    "TAG_BYTE_ARRAY",
    "TAG_STRING",
    "TAG_LIST",
    "TAG_COMPOUND",
    "TAG_INT_ARRAY",
    "TAG_NAMES",
    "SIMPLE_TAGS",
    "COMPOSITE_TAGS",
    "tag_name",
    "is_simple_tag",
]
