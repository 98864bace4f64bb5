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


import pytest

from nbtreader.exceptions import (
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


@pytest.mark.parametrize("cls", (
    UnexpectedEof,
    InvalidTagType,
    TransportFailure,
    InvalidEncoding,
))
def test_read_error_hierarchy(cls):
    error = cls("Error Message")
    assert isinstance(error, NbtReadError)
    assert isinstance(error, NbtError)
    assert str(error) == "Error Message"
    assert error.args == ("Error Message",)
    assert error.position is None
    assert not error.is_retryable()


def test_configuration_error_is_not_a_read_error():
    error = ConfigurationError("bad")
    assert isinstance(error, NbtError)
    assert not isinstance(error, NbtReadError)


def test_unknown_tag_type():
    with pytest.raises(UnknownTagType) as e:
        raise UnknownTagType(12)

    # The regexp parameter of the match method is matched with the re.search
    # function.
    with pytest.raises(AssertionError):
        e.match("FAIL!")

    assert e.match("Unknown tag type 0x0c")
    assert e.value.tag_type == 12
    assert e.value.args == ("Unknown tag type 0x0c",)


def test_unknown_tag_type_custom_message():
    error = UnknownTagType(0xAB, "custom")
    assert str(error) == "custom"
    assert error.tag_type == 0xAB


def test_depth_limit_exceeded():
    error = DepthLimitExceeded(64)
    assert error.max_depth == 64
    assert str(error) == "Nesting depth exceeds max_depth=64"


def test_position_in_message():
    error = UnexpectedEof("Expected 2 bytes, got 1")
    error.position = 17
    assert str(error) == "Expected 2 bytes, got 1 (at byte 17)"
    assert error.args == ("Expected 2 bytes, got 1",)
