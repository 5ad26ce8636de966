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
from lexkey.serialization.encoding.bool import decode_bool, encode_bool
from lexkey.utils.typing import is_subclass


class BoolKeyType(KeyType[bool]):
    @override
    @classmethod
    def _from_type(cls, type_: type[bool], /, *, type_map: KeyType.TypeMap) -> Self:
        if not is_subclass(type_, bool):
            raise TypeError('expected bool type')
        return cls()

    @override
    def num_components(self) -> int:
        return 1

    @override
    def _check_value(self, value: bool, /, *, deep: bool) -> None:
        if not isinstance(value, bool):
            raise SerializationTypeError(f'expected bool, got {type(value).__name__}')

    @override
    def _serialize(self, serializer: Serializer, value: bool, /) -> None:
        encode_bool(serializer, value)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> bool:
        return decode_bool(deserializer)
