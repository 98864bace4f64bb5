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

import io
import logging

import pytest

from nbtreader import (
    parse_nbt_bytes,
    UnexpectedEof,
)
from nbtreader.debug import (
    LOGGER_NAME,
    watch,
    Watcher,
)


HELLO_WORLD = b"\x0a\x00\x0bhello world\x00"


@pytest.fixture
def decoder_logger():
    logger = logging.getLogger(LOGGER_NAME)
    level = logger.level
    handlers = list(logger.handlers)
    logger.setLevel(logging.NOTSET)
    yield logger
    logger.setLevel(level)
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)


def test_watcher_writes_decoder_logs(decoder_logger):
    out = io.StringIO()
    with Watcher(out=out):
        parse_nbt_bytes(HELLO_WORLD)
    lines = out.getvalue().splitlines()
    assert len(lines) == 3
    assert "[DEBUG]  Reading document 'hello world' with root TAG_Compound" \
        in lines[0]
    assert "Read composite TAG_Compound, maximum depth 1" in lines[1]
    assert "Read document 'hello world' (15 bytes)" in lines[2]


def test_watcher_writes_failures(decoder_logger):
    out = io.StringIO()
    with Watcher(out=out):
        with pytest.raises(UnexpectedEof):
            parse_nbt_bytes(HELLO_WORLD[:-1])
    assert "Failed to read document: " in out.getvalue()
    assert "(at byte 14)" in out.getvalue()


def test_stopped_watcher_writes_nothing(decoder_logger):
    out = io.StringIO()
    with Watcher(out=out) as watcher:
        assert watcher.active
    assert not watcher.active
    parse_nbt_bytes(HELLO_WORLD)
    assert out.getvalue() == ""


def test_watcher_level_filters_records(decoder_logger):
    out = io.StringIO()
    with Watcher(level=logging.INFO, out=out):
        parse_nbt_bytes(HELLO_WORLD)
    assert out.getvalue() == ""


@pytest.mark.parametrize(("logger_level", "watch_level", "active_level"), (
    (logging.NOTSET, logging.DEBUG, logging.DEBUG),
    (logging.WARNING, logging.DEBUG, logging.DEBUG),
    (logging.WARNING, logging.INFO, logging.INFO),
    (logging.DEBUG, logging.INFO, logging.DEBUG),
))
def test_watcher_restores_logger_level(
    decoder_logger, logger_level, watch_level, active_level
):
    decoder_logger.setLevel(logger_level)
    with Watcher(level=watch_level, out=io.StringIO()):
        assert decoder_logger.getEffectiveLevel() <= active_level
        if logger_level:
            assert decoder_logger.level == active_level
    assert decoder_logger.level == logger_level


def test_watcher_start_is_idempotent(decoder_logger):
    before = len(decoder_logger.handlers)
    watcher = Watcher(out=io.StringIO())
    watcher.start()
    watcher.start()
    assert len(decoder_logger.handlers) == before + 1
    watcher.stop()
    watcher.stop()
    assert len(decoder_logger.handlers) == before


def test_watcher_defaults_to_current_stderr(decoder_logger, capsys):
    with Watcher():
        parse_nbt_bytes(HELLO_WORLD)
    assert "Reading document 'hello world'" in capsys.readouterr().err


def test_watch_returns_started_watcher(decoder_logger):
    out = io.StringIO()
    watcher = watch(out=out)
    try:
        assert isinstance(watcher, Watcher)
        assert watcher.active
        parse_nbt_bytes(HELLO_WORLD)
    finally:
        watcher.stop()
    assert "Read document 'hello world'" in out.getvalue()


def test_custom_format(decoder_logger):
    out = io.StringIO()
    with Watcher(out=out, fmt="%(name)s: %(message)s"):
        parse_nbt_bytes(b"\x01\x00\x00\x05")
    assert out.getvalue().splitlines()[0] == \
        "nbtreader: Reading document '' with root TAG_Byte"
