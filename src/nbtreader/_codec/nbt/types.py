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
Typed value tree produced by the decoder.

Every decoded value is an instance of exactly one :class:`Value` subclass,
and every subclass corresponds to exactly one tag-type code.
"""

from __future__ import annotations

import typing as t
from collections.abc import Mapping

from ._common import (
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


if t.TYPE_CHECKING:
    import numpy


__all__ = [
    "Byte",
    "ByteArray",
    "Compound",
    "Double",
    "Float",
    "Int",
    "IntArray",
    "List",
    "Long",
    "RootValue",
    "Short",
    "String",
    "Value",
    "VALUE_TYPES",
]


class Value:
    """ Base class of all decoded values.

    The decoded payload is available as :attr:`value`.
    """

    __slots__ = ("value",)

    tag_type: t.ClassVar[int]

    def __init__(self, value: t.Any) -> None:
        self.value = value

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.value == other.value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self):
        return "%s(%r)" % (self.__class__.__name__, self.value)

    def data(self) -> t.Any:
        """
        Return the value as plain Python objects.

        Compounds become :class:`dict`, lists become :class:`list`, scalars
        and arrays become :class:`int`, :class:`float`, :class:`str`,
        :class:`bytes` or :class:`list` of :class:`int`. The tag types are
        lost in the process.

        Like the decoder, the conversion does not recurse natively, so
        arbitrarily deep trees can be converted.
        """
        return _to_python(self)


class Byte(Value):
    __slots__ = ()
    tag_type = TAG_BYTE


class Short(Value):
    __slots__ = ()
    tag_type = TAG_SHORT


class Int(Value):
    __slots__ = ()
    tag_type = TAG_INT


class Long(Value):
    __slots__ = ()
    tag_type = TAG_LONG


class Float(Value):
    __slots__ = ()
    tag_type = TAG_FLOAT


class Double(Value):
    __slots__ = ()
    tag_type = TAG_DOUBLE


class ByteArray(Value):
    __slots__ = ()
    tag_type = TAG_BYTE_ARRAY

    def to_numpy(self) -> numpy.ndarray:
        """ Convert the bytes into a signed 8-bit :mod:`numpy` array.

        This method is only available if the `numpy` library is installed.
        """
        import numpy as np

        return np.frombuffer(self.value, dtype=np.int8).copy()


class String(Value):
    __slots__ = ()
    tag_type = TAG_STRING


class IntArray(Value):
    __slots__ = ()
    tag_type = TAG_INT_ARRAY

    def to_numpy(self) -> numpy.ndarray:
        """ Convert the ints into a signed 32-bit :mod:`numpy` array.

        This method is only available if the `numpy` library is installed.
        """
        import numpy as np

        return np.array(self.value, dtype=np.int32)


class List(Value):
    """ Homogeneous list of elements of one declared tag type.

    :attr:`value` holds the raw element payloads: :class:`int`,
    :class:`float`, :class:`bytes`, :class:`str` or :class:`list` of
    :class:`int` for simple element types, :class:`List` and
    :class:`Compound` instances for nested ones.

    A list whose element type is ``TAG_End`` is the empty list that
    declares no element type at all (see :meth:`empty`).
    """

    __slots__ = ("element_type",)
    tag_type = TAG_LIST

    def __init__(
        self, element_type: int, value: list[t.Any] | None = None
    ) -> None:
        super().__init__([] if value is None else value)
        self.element_type = element_type

    @classmethod
    def empty(cls) -> List:
        return cls(TAG_END)

    @property
    def is_empty(self) -> bool:
        return self.element_type == TAG_END

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return (self.element_type == other.element_type
                and self.value == other.value)

    def __len__(self):
        return len(self.value)

    def __iter__(self):
        return iter(self.value)

    def __getitem__(self, index):
        return self.value[index]

    def __repr__(self):
        if self.is_empty:
            return "List.empty()"
        return "List(%s, %r)" % (tag_name(self.element_type), self.value)

    def to_numpy(self) -> numpy.ndarray:
        """ Convert a list of numbers into a :mod:`numpy` array.

        The array's dtype matches the element type's width. An empty list
        converts into an empty array.

        This method is only available if the `numpy` library is installed.

        :raises TypeError: if the elements are not numbers.
        """
        import numpy as np

        dtypes = {
            TAG_BYTE: np.int8,
            TAG_SHORT: np.int16,
            TAG_INT: np.int32,
            TAG_LONG: np.int64,
            TAG_FLOAT: np.float32,
            TAG_DOUBLE: np.float64,
        }
        if self.is_empty:
            return np.empty(0)
        try:
            dtype = dtypes[self.element_type]
        except KeyError:
            raise TypeError(
                "Cannot convert a list of %s into a numpy array"
                % tag_name(self.element_type)
            ) from None
        return np.array(self.value, dtype=dtype)


class Compound(Value, Mapping):
    """ Mapping of unique names to values.

    Key order carries no meaning; two compounds with the same entries
    compare equal regardless of the order they were decoded in.
    """

    __slots__ = ()
    tag_type = TAG_COMPOUND

    def __init__(self, value: dict[str, Value] | None = None) -> None:
        super().__init__({} if value is None else value)

    def __getitem__(self, key: str) -> Value:
        return self.value[key]

    def __iter__(self):
        return iter(self.value)

    def __len__(self):
        return len(self.value)

    __eq__ = Value.__eq__
    __hash__ = None  # type: ignore[assignment]


VALUE_TYPES: dict[int, type[Value]] = {
    cls.tag_type: cls
    for cls in (Byte, Short, Int, Long, Float, Double, ByteArray, String,
                List, Compound, IntArray)
}


class RootValue(t.NamedTuple):
    """The single named top-level value of a document."""

    #: Name of the root tag, almost always the empty string.
    name: str
    value: Value


def _to_python_one(value):
    # Returns the converted value and, for nested containers, an iterator
    # of (key, child) pairs that still need converting into it.
    if isinstance(value, Compound):
        return {}, iter(value.value.items())
    if isinstance(value, List):
        if value.element_type in (TAG_LIST, TAG_COMPOUND):
            return [], ((None, child) for child in value.value)
        if value.element_type == TAG_INT_ARRAY:
            return [list(ints) for ints in value.value], None
        return list(value.value), None
    if isinstance(value, IntArray):
        return list(value.value), None
    return value.value, None


def _to_python(value):
    out, pending = _to_python_one(value)
    if pending is None:
        return out
    stack = [(out, pending)]
    while stack:
        container, pending = stack[-1]
        for key, child in pending:
            child_out, child_pending = _to_python_one(child)
            if key is None:
                container.append(child_out)
            else:
                container[key] = child_out
            if child_pending is not None:
                stack.append((child_out, child_pending))
                break
        else:
            stack.pop()
    return out
