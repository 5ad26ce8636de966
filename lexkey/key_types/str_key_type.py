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

from __future__ import annotations

from typing_extensions import Self, override

from lexkey.key_types.key_type import KeyType
from lexkey.serialization import Deserializer, SerializationTypeError, SerializationValueError, Serializer
from lexkey.serialization.encoding.char import decode_char, encode_char
from lexkey.serialization.encoding.utf8 import decode_utf8, encode_utf8
from lexkey.utils.typing import is_subclass


class StrKeyType(KeyType[str]):
    """ Represents builtin `str` values, written without any escaping.
    """

    @override
    @classmethod
    def _from_type(cls, type_: type[str], /, *, type_map: KeyType.TypeMap) -> Self:
        if not is_subclass(type_, str):
            raise TypeError('expected str type')
        return cls()

    @override
    def num_components(self) -> int:
        return 1

    @override
    def _check_value(self, value: str, /, *, deep: bool) -> None:
        if not isinstance(value, str):
            raise SerializationTypeError(f'expected str, got {type(value).__name__}')

    @override
    def _serialize(self, serializer: Serializer, value: str, /) -> None:
        encode_utf8(serializer, value)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> str:
        return decode_utf8(deserializer)


class CharKeyType(StrKeyType):
    """ Represents a `str` of exactly one code point.
    """

    @override
    def _check_value(self, value: str, /, *, deep: bool) -> None:
        super()._check_value(value, deep=deep)
        if len(value) != 1:
            raise SerializationValueError(f'expected exactly one code point, got {len(value)}')

    @override
    def _serialize(self, serializer: Serializer, value: str, /) -> None:
        encode_char(serializer, value)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> str:
        return decode_char(deserializer)
