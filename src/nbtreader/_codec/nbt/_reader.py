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
from abc import (
    ABC,
    abstractmethod,
)
from codecs import decode
from enum import Enum
from logging import getLogger
from struct import (
    Struct,
    unpack as struct_unpack,
)

from ...exceptions import (
    DepthLimitExceeded,
    InvalidEncoding,
    InvalidTagType,
    NbtReadError,
    UnknownTagType,
)
from ._common import (
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
    TAG_SHORT,
    TAG_STRING,
)
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
)


log = getLogger("nbtreader")


# XXX: The NBT standard says "TAG_Short" and "TAG_Int" for lengths, which
# would imply they are signed. Which makes no sense, so they are read as
# unsigned here.
U16 = Struct(">H")
U32 = Struct(">I")

# Fixed-width element types: struct format character and width in bytes.
NUMBER_FORMATS = {
    TAG_BYTE: ("b", 1),
    TAG_SHORT: ("h", 2),
    TAG_INT: ("i", 4),
    TAG_LONG: ("q", 8),
    TAG_FLOAT: ("f", 4),
    TAG_DOUBLE: ("d", 8),
}

NUMBER_TYPES = {
    TAG_BYTE: Byte,
    TAG_SHORT: Short,
    TAG_INT: Int,
    TAG_LONG: Long,
    TAG_FLOAT: Float,
    TAG_DOUBLE: Double,
}


class StepResult(Enum):
    NEEDS_MORE_WORK = 1
    FINISHED = 2


class Descend(t.NamedTuple):
    """A nested composite that has to be read before the current one."""

    child: ReadingComposite


class ReadingComposite(ABC):
    """ An in-progress List or Compound read.

    Instances are driven by :meth:`Reader.drive`, which keeps them on an
    explicit stack instead of recursing for every level of nesting.
    """

    @abstractmethod
    def step(self, reader: Reader) -> StepResult | Descend:
        """ Make one unit of forward progress.

        :returns: :attr:`StepResult.NEEDS_MORE_WORK` to be stepped again,
            :class:`Descend` if a nested composite has to be read first, or
            :attr:`StepResult.FINISHED` once all elements have been read.
        """
        ...

    @abstractmethod
    def resume(self, value: Value) -> None:
        """Accept the value of the composite last returned via Descend."""
        ...

    @abstractmethod
    def finalize(self) -> Value:
        ...


class ReadingCompound(ReadingComposite):

    def __init__(self) -> None:
        self.value: dict[str, Value] = {}
        self.pending_name: str | None = None

    def step(self, reader):
        tag_type = reader.source.read_u8()
        if tag_type == TAG_END:
            return StepResult.FINISHED
        name = reader.read_string()
        start = reader.start_read(tag_type)
        if isinstance(start, ReadingComposite):
            self.pending_name = name
            return Descend(start)
        # later duplicates overwrite earlier ones
        self.value[name] = start
        return StepResult.NEEDS_MORE_WORK

    def resume(self, value):
        name, self.pending_name = self.pending_name, None
        assert name is not None
        self.value[name] = value

    def finalize(self):
        return Compound(self.value)


class ReadingListOfList(ReadingComposite):

    def __init__(self, items_remaining: int) -> None:
        self.items_remaining = items_remaining
        self.value: list[List] = []

    def step(self, reader):
        if self.items_remaining == 0:
            return StepResult.FINISHED
        start = reader.start_list_read()
        self.items_remaining -= 1
        if isinstance(start, ReadingComposite):
            return Descend(start)
        self.value.append(start)
        return StepResult.NEEDS_MORE_WORK

    def resume(self, value):
        assert isinstance(value, List)
        self.value.append(value)

    def finalize(self):
        return List(TAG_LIST, self.value)


class ReadingListOfCompound(ReadingComposite):

    def __init__(self, items_remaining: int) -> None:
        self.items_remaining = items_remaining
        self.value: list[Compound] = []

    def step(self, reader):
        if self.items_remaining == 0:
            return StepResult.FINISHED
        start = reader.start_read(TAG_COMPOUND)
        self.items_remaining -= 1
        return Descend(start)

    def resume(self, value):
        assert isinstance(value, Compound)
        self.value.append(value)

    def finalize(self):
        return List(TAG_COMPOUND, self.value)


class Reader:
    """ Decoder for a single NBT document.

    :param source: the bytes to decode.
    :param encoding_errors: :mod:`codecs` error handler used when decoding
        strings. Only ``"strict"`` reports invalid UTF-8 as
        :exc:`.InvalidEncoding`.
    :param max_depth: maximum number of nested composites, or :data:`None`
        for no limit other than available memory.
    """

    def __init__(
        self,
        source: ByteSource,
        encoding_errors: str = "strict",
        max_depth: int | None = None,
    ) -> None:
        self.source = source
        self.encoding_errors = encoding_errors
        self.max_depth = max_depth

    def read_number(self, tag_type: int) -> int | float:
        fmt, width = NUMBER_FORMATS[tag_type]
        value, = struct_unpack(">" + fmt, self.source.read_exact(width))
        return value

    def read_string(self) -> str:
        size, = U16.unpack(self.source.read_exact(2))
        data = self.source.read_bytes(size)
        try:
            return decode(data, "utf-8", self.encoding_errors)
        except UnicodeDecodeError as exc:
            raise InvalidEncoding("Invalid UTF-8 in string: %s" % exc) from exc

    def read_byte_array(self) -> bytes:
        size, = U32.unpack(self.source.read_exact(4))
        return self.source.read_bytes(size)

    def read_int_array(self) -> list[int]:
        size, = U32.unpack(self.source.read_exact(4))
        return list(struct_unpack(">%di" % size,
                                  self.source.read_exact(4 * size)))

    def read_simple_value(self, tag_type: int) -> Value:
        if tag_type in NUMBER_TYPES:
            return NUMBER_TYPES[tag_type](self.read_number(tag_type))
        elif tag_type == TAG_BYTE_ARRAY:
            return ByteArray(self.read_byte_array())
        elif tag_type == TAG_STRING:
            return String(self.read_string())
        elif tag_type == TAG_INT_ARRAY:
            return IntArray(self.read_int_array())
        raise ValueError(
            "read_simple_value called for non-simple value %s"
            % tag_name(tag_type)
        )

    def _read_simple_list(self, element_type: int, size: int) -> List:
        if element_type in NUMBER_FORMATS:
            fmt, width = NUMBER_FORMATS[element_type]
            values = struct_unpack(">%d%s" % (size, fmt),
                                   self.source.read_exact(width * size))
            return List(element_type, list(values))
        elif element_type == TAG_BYTE_ARRAY:
            read = self.read_byte_array
        elif element_type == TAG_STRING:
            read = self.read_string
        else:  # TAG_INT_ARRAY
            read = self.read_int_array
        return List(element_type, [read() for _ in range(size)])

    def start_list_read(self) -> List | ReadingComposite:
        """ Read a list header and, if possible, the whole list.

        Lists of simple values are decoded right away. Lists of lists and
        lists of compounds are returned as a composite to be driven.
        """
        element_type = self.source.read_u8()
        size, = U32.unpack(self.source.read_exact(4))

        if element_type == TAG_END:
            if size == 0:
                return List.empty()
            raise InvalidTagType(
                "TAG_List of TAG_End must be empty, got %d elements" % size
            )
        if element_type == TAG_LIST:
            return ReadingListOfList(size)
        if element_type == TAG_COMPOUND:
            return ReadingListOfCompound(size)
        if element_type not in SIMPLE_TAGS:
            raise UnknownTagType(element_type)
        return self._read_simple_list(element_type, size)

    def start_read(self, tag_type: int) -> Value | ReadingComposite:
        """ Start reading a value that might be simple or composite.

        :raises UnknownTagType: if ``tag_type`` is not a known tag type.
        :raises InvalidTagType: if ``tag_type`` is ``TAG_End``.
        """
        if is_simple_tag(tag_type):
            return self.read_simple_value(tag_type)
        if tag_type == TAG_LIST:
            return self.start_list_read()
        return ReadingCompound()

    def drive(self, reading: ReadingComposite) -> Value:
        """ Read a composite and everything nested in it to completion.

        Nesting is tracked on an explicit stack, so the depth of the
        document is bounded by memory only (or by ``max_depth``), never by
        the interpreter's recursion limit.
        """
        max_depth = self.max_depth
        stack = [reading]
        deepest = 1
        while True:
            result = stack[-1].step(self)
            if result is StepResult.NEEDS_MORE_WORK:
                continue
            if isinstance(result, Descend):
                stack.append(result.child)
                if len(stack) > deepest:
                    deepest = len(stack)
                    if max_depth is not None and deepest > max_depth:
                        raise DepthLimitExceeded(max_depth)
                continue
            value = stack.pop().finalize()
            if not stack:
                log.debug("Read composite %s, maximum depth %d",
                          tag_name(value.tag_type), deepest)
                return value
            stack[-1].resume(value)

    def read_root(self) -> RootValue:
        """ Read one complete document.

        :raises NbtReadError: if the document is malformed, truncated or
            the byte source fails.
        """
        try:
            root_tag_type = self.source.read_u8()
            root_name = self.read_string()
            log.debug("Reading document %r with root %s",
                      root_name, tag_name(root_tag_type))
            start = self.start_read(root_tag_type)
            if isinstance(start, ReadingComposite):
                if self.max_depth is not None and self.max_depth < 1:
                    raise DepthLimitExceeded(self.max_depth)
                value = self.drive(start)
            else:
                value = start
        except NbtReadError as exc:
            if exc.position is None:
                exc.position = self.source.position
            log.debug("Failed to read document: %s", exc)
            raise
        log.debug("Read document %r (%d bytes)",
                  root_name, self.source.position)
        return RootValue(root_name, value)
