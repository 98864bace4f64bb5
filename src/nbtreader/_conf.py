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

from abc import ABCMeta
from codecs import lookup_error
from collections.abc import Mapping

from .exceptions import ConfigurationError


class ConfigType(ABCMeta):
    """ Collects the public, non-callable class attributes of a config class
    (and of its config bases) as the option names exposed by ``keys()``.
    """

    def __new__(mcs, name, bases, attributes):
        fields = set()
        for base in bases:
            if isinstance(base, ConfigType):
                fields.update(base.keys())
        fields.update(
            k for k, v in attributes.items()
            if not k.startswith("_")
            and not callable(v)
            and not isinstance(v, (staticmethod, classmethod, property))
        )
        frozen = frozenset(fields)
        attributes.setdefault("keys", classmethod(lambda _: frozen))
        return super().__new__(mcs, name, bases, attributes)


class Config(Mapping, metaclass=ConfigType):
    """ Base class for option containers.

    Class attributes are the defaults. Instances are built from any number
    of mappings plus keyword arguments, later ones winning. :data:`None`
    values leave the default in place.
    """

    def __init__(self, *args, **kwargs):
        for source in (*args, kwargs):
            unknown = []
            for key, value in dict(source).items():
                if key not in self.keys():
                    unknown.append(key)
                elif value is not None:
                    setattr(self, key, value)
            if unknown:
                raise ConfigurationError(
                    "Unexpected config keys: " + ", ".join(sorted(unknown))
                )

    @classmethod
    def consume(cls, data):
        """ Build a config from ``data``, which must hold option names only.

        Consumed keys are popped from ``data``.
        """
        options = {key: data.pop(key) for key in cls.keys() if key in data}
        if data:
            raise ConfigurationError(
                "Unexpected config keys: " + ", ".join(sorted(data))
            )
        return cls(options)

    def __repr__(self):
        attrs = "".join(" %s=%r" % (key, self[key]) for key in sorted(self))
        return "<%s%s>" % (self.__class__.__name__, attrs)

    def __len__(self):
        return len(self.keys())

    def __getitem__(self, key):
        return getattr(self, key)

    def __iter__(self):
        return iter(self.keys())


class ReaderConfig(Config):
    """ Document reader configuration.
    """

    #: Read Fully
    read_fully = False
    # Assemble string and byte array payloads from as many reads of the
    # underlying stream as needed. By default, a single read returning fewer
    # bytes than requested counts as the end of the input, which is only
    # correct for sources that always fill the request (files, BytesIO).
    # Enable this for sockets and other sources that deliver partial chunks.

    #: Max Depth
    max_depth = None
    # The maximum number of nested lists and compounds. None means no limit
    # other than available memory.

    #: Encoding Errors
    encoding_errors = "strict"
    # The codecs error handler used to decode strings. Any handler other
    # than "strict" (e.g. "replace", "surrogateescape") accepts invalid
    # UTF-8 instead of raising InvalidEncoding.

    def validate(self):
        if not isinstance(self.read_fully, bool):
            raise ConfigurationError(
                "read_fully must be a bool, got %r" % (self.read_fully,)
            )
        if self.max_depth is not None and (
            isinstance(self.max_depth, bool)
            or not isinstance(self.max_depth, int)
            or self.max_depth < 0
        ):
            raise ConfigurationError(
                "max_depth must be a non-negative int or None, got %r"
                % (self.max_depth,)
            )
        if not isinstance(self.encoding_errors, str):
            raise ConfigurationError(
                "encoding_errors must be a str, got %r"
                % (self.encoding_errors,)
            )
        try:
            lookup_error(self.encoding_errors)
        except LookupError as exc:
            raise ConfigurationError(
                "Unknown encoding_errors handler %r" % (self.encoding_errors,)
            ) from exc
        return self
