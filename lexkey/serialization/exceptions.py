#  Copyright 2025 Hathor Labs
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#  http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.

from enum import StrEnum


class SerializationError(Exception):
    """ Base class for every error raised while encoding or decoding a key.
    """
    pass


class UnsupportedConstruct(StrEnum):
    """ Shapes that cannot be represented by a key because they are variable length or carry a payload.
    """

    OPTION = 'option'
    MAP = 'map'
    SEQUENCE = 'sequence'
    PAYLOAD_VARIANT = 'payload variant'


class UnsupportedTypeError(SerializationError, TypeError):
    """ Raised when a type annotation cannot be used as a key shape.

    The `construct` attribute names which kind of unsupported shape was found, it is `None` when the annotation is
    simply unknown to the type map in use.
    """

    construct: UnsupportedConstruct | None

    def __init__(self, message: str, *, construct: UnsupportedConstruct | None = None) -> None:
        super().__init__(message)
        self.construct = construct


class BadDataError(SerializationError, ValueError):
    """ Raised when the text being decoded does not match the expected shape.

    The `index` attribute is the position of the offending component (or `None` when the error is not about a single
    component) and `expected` describes what should have been there.
    """

    index: int | None
    expected: str | None

    def __init__(self, message: str, *, index: int | None = None, expected: str | None = None) -> None:
        super().__init__(message)
        self.index = index
        self.expected = expected


class OutOfDataError(BadDataError):
    """ Raised when there are fewer components than the shape needs.
    """
    pass


class TrailingDataError(BadDataError):
    """ Raised when components are left over after the shape was fully decoded.
    """
    pass


class SerializationTypeError(SerializationError, TypeError):
    """ Raised when a value does not have the Python type its declared shape expects.
    """
    pass


class SerializationValueError(SerializationError, ValueError):
    """ Raised when a value has the right Python type but cannot be encoded, for example an int out of range.
    """
    pass


class InvalidDelimiterError(SerializationError, ValueError):
    """ Raised when a delimiter that could break ordering or parsing is configured.
    """
    pass
