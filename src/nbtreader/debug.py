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


""" Helpers for looking at what the decoder does.

All decoder modules log to the ``nbtreader`` logger at DEBUG level: the
start of every document, the deepest nesting reached in each composite
root, the number of bytes consumed and the error a failed read ended with.

Example::

    import nbtreader
    from nbtreader.debug import watch

    with watch():
        root = nbtreader.parse_nbt_file("level.nbt")

.. note::
    The exact log messages are not part of the API contract and might change
    at any time without notice.
"""


from __future__ import annotations

import sys
import typing as t
from logging import (
    DEBUG,
    Formatter,
    getLogger,
    StreamHandler,
)


__all__ = [
    "Watcher",
    "watch",
]


LOGGER_NAME = "nbtreader"

DEFAULT_FORMAT = "%(asctime)s  [%(levelname)s]  %(message)s"


class Watcher:
    """ Sends the decoder's log records to a text stream while active.

    :param level: minimum level of the records to show.
    :param out: stream to write to. :data:`None` means :data:`sys.stderr`
        as it is at the time :meth:`start` is called.
    :param fmt: :mod:`logging` format string for each record.
    """

    def __init__(
        self,
        level: int = DEBUG,
        out: t.TextIO | None = None,
        fmt: str = DEFAULT_FORMAT,
    ) -> None:
        self.level = level
        self.out = out
        self.formatter = Formatter(fmt)
        self._handler: StreamHandler | None = None
        self._previous_level: int | None = None

    @property
    def active(self) -> bool:
        return self._handler is not None

    def start(self) -> None:
        """ Attach the handler, lowering the logger's level if needed.

        Starting an active watcher does nothing.
        """
        if self._handler is not None:
            return
        logger = getLogger(LOGGER_NAME)
        handler = StreamHandler(sys.stderr if self.out is None else self.out)
        handler.setFormatter(self.formatter)
        handler.setLevel(self.level)
        self._previous_level = logger.level
        if logger.getEffectiveLevel() > self.level:
            logger.setLevel(self.level)
        logger.addHandler(handler)
        self._handler = handler

    def stop(self) -> None:
        """Detach the handler and restore the logger's previous level."""
        if self._handler is None:
            return
        logger = getLogger(LOGGER_NAME)
        logger.removeHandler(self._handler)
        logger.setLevel(self._previous_level)
        self._handler = None
        self._previous_level = None

    def __enter__(self) -> Watcher:
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop()


def watch(level: int = DEBUG, out: t.TextIO | None = None) -> Watcher:
    """ Create a :class:`Watcher`, start it and return it.

    Call :meth:`Watcher.stop` on the result, or use it as a context manager,
    to stop watching.
    """
    watcher = Watcher(level, out)
    watcher.start()
    return watcher
