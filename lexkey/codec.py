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

"""
Public entry points to encode values into keys and decode them back.

All functions take an explicit type annotation, which is the shape of the key. When encoding, the annotation can be
omitted, it is then inferred from the value with `infer_type`, in which case plain `int` and `float` use their 64-bit
encodings.

For repeated use of the same shape, `KeyCodec` builds the shape once and binds a delimiter to it.
"""

from enum import Enum
from typing import IO, Any, Generic, Optional, TypeVar

from lexkey.conf.get_settings import get_global_settings
from lexkey.key_types import KeyType, TypeToKeyTypeMap, make_key_type
from lexkey.serialization.delimiter import validate_delimiter
from lexkey.utils.typing import is_namedtuple_type

T = TypeVar('T')


def infer_type(value: Any) -> Any:
    """ Infer the type annotation of a value, for when it's not given explicitly.

    >>> infer_type(True), infer_type(1), infer_type(1.5), infer_type('a'), infer_type(b'a'), infer_type(None)
    (<class 'bool'>, <class 'int'>, <class 'float'>, <class 'str'>, <class 'bytes'>, <class 'NoneType'>)
    >>> infer_type(('account', 1234))
    tuple[str, int]

    Records (dataclasses, named tuples and pydantic models), enum members and values of any other type result in
    their own class, unsupported ones are then rejected when building the key type:

    >>> infer_type([1, 2])
    <class 'list'>
    """
    if isinstance(value, (bool, Enum)) or value is None:
        return type(value)
    if isinstance(value, int):
        return int
    if isinstance(value, float):
        return float
    if isinstance(value, str):
        return str
    if isinstance(value, (bytes, bytearray)):
        return bytes
    if isinstance(value, tuple):
        if is_namedtuple_type(type(value)):
            return type(value)
        return tuple[tuple(infer_type(i) for i in value)]  # type: ignore[misc]
    return type(value)


def dumps(value: Any, type_: Any = None, *, delimiter: Optional[str] = None,
          check_delimiter: Optional[bool] = None) -> str:
    """ Encode a value into a key, using the given type annotation as its shape.
    """
    if type_ is None:
        type_ = infer_type(value)
    return make_key_type(type_).to_text(value, delimiter=delimiter, check_delimiter=check_delimiter)


def loads(text: str, type_: type[T], *, delimiter: Optional[str] = None) -> T:
    """ Decode a key into a value of the given type annotation, the whole text must be consumed.
    """
    return make_key_type(type_).from_text(text, delimiter=delimiter)


def to_bytes(value: Any, type_: Any = None, *, delimiter: Optional[str] = None,
             check_delimiter: Optional[bool] = None) -> bytes:
    """ Same as `dumps` but results in the UTF-8 encoded key.
    """
    if type_ is None:
        type_ = infer_type(value)
    return make_key_type(type_).to_bytes(value, delimiter=delimiter, check_delimiter=check_delimiter)


def from_bytes(data: bytes, type_: type[T], *, delimiter: Optional[str] = None) -> T:
    """ Same as `loads` but takes a UTF-8 encoded key, invalid UTF-8 is a `BadDataError`.
    """
    return make_key_type(type_).from_bytes(data, delimiter=delimiter)


def dump(value: Any, fp: IO[str], type_: Any = None, *, delimiter: Optional[str] = None,
         check_delimiter: Optional[bool] = None) -> None:
    """ Encode a value and write the key to a text file object.
    """
    fp.write(dumps(value, type_, delimiter=delimiter, check_delimiter=check_delimiter))


def load(fp: IO[Any], type_: type[T], *, delimiter: Optional[str] = None) -> T:
    """ Read everything from a file object and decode it as a single key.

    Binary file objects are accepted too, their content must be UTF-8.
    """
    data = fp.read()
    if isinstance(data, (bytes, bytearray)):
        return from_bytes(data, type_, delimiter=delimiter)
    return loads(data, type_, delimiter=delimiter)


class KeyCodec(Generic[T]):
    """ A codec bound to a single key shape and delimiter.

    The shape is validated and built once, on construction, so any `UnsupportedTypeError` is raised right away.
    """

    __slots__ = ('_key_type', '_delimiter', '_check_delimiter')

    def __init__(
        self,
        type_: type[T],
        *,
        delimiter: Optional[str] = None,
        check_delimiter: Optional[bool] = None,
        extra_key_types_map: Optional[TypeToKeyTypeMap] = None,
    ) -> None:
        if delimiter is None or check_delimiter is None:
            settings = get_global_settings()
            delimiter = settings.DELIMITER if delimiter is None else delimiter
            check_delimiter = settings.CHECK_DELIMITER_IN_TEXT if check_delimiter is None else check_delimiter
        self._delimiter = validate_delimiter(delimiter)
        self._check_delimiter = check_delimiter
        self._key_type: KeyType[T] = make_key_type(type_, extra_key_types_map=extra_key_types_map)

    def __repr__(self) -> str:
        return f'KeyCodec({type(self._key_type).__name__}, delimiter={self._delimiter!r})'

    @property
    def key_type(self) -> KeyType[T]:
        return self._key_type

    @property
    def delimiter(self) -> str:
        return self._delimiter

    def num_components(self) -> int:
        return self._key_type.num_components()

    def encode(self, value: T) -> str:
        return self._key_type.to_text(value, delimiter=self._delimiter, check_delimiter=self._check_delimiter)

    def decode(self, text: str) -> T:
        return self._key_type.from_text(text, delimiter=self._delimiter)

    def encode_bytes(self, value: T) -> bytes:
        return self._key_type.to_bytes(value, delimiter=self._delimiter, check_delimiter=self._check_delimiter)

    def decode_bytes(self, data: bytes) -> T:
        return self._key_type.from_bytes(data, delimiter=self._delimiter)
