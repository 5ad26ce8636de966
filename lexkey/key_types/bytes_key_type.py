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
from lexkey.serialization import Deserializer, SerializationTypeError, Serializer
from lexkey.serialization.encoding.bytes import decode_bytes, encode_bytes
from lexkey.utils.typing import is_subclass


class BytesKeyType(KeyType[bytes]):
    """ Represents byte sequences, `bytearray` is accepted when encoding but `bytes` is always what is decoded.
    """

    @override
    @classmethod
    def _from_type(cls, type_: type[bytes], /, *, type_map: KeyType.TypeMap) -> Self:
        if not is_subclass(type_, (bytes, bytearray)):
            raise TypeError('expected bytes type')
        return cls()

    @override
    def num_components(self) -> int:
        return 1

    @override
    def _check_value(self, value: bytes, /, *, deep: bool) -> None:
        if not isinstance(value, (bytes, bytearray)):
            raise SerializationTypeError(f'expected bytes, got {type(value).__name__}')

    @override
    def _serialize(self, serializer: Serializer, value: bytes, /) -> None:
        encode_bytes(serializer, value)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> bytes:
        return decode_bytes(deserializer)
