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

from typing import ClassVar

from typing_extensions import Self, override

from lexkey.key_types.key_type import KeyType
from lexkey.serialization import Deserializer, SerializationTypeError, SerializationValueError, Serializer
from lexkey.serialization.encoding.int import decode_int, encode_int, int_bounds, int_kind_name
from lexkey.utils.typing import is_subclass


class _SizedIntKeyType(KeyType[int]):
    """ Base class for classes that represent builtin `int` values with a fixed size and signedness.
    """

    # XXX: subclass must define these values:
    _signed: ClassVar[bool]
    _byte_size: ClassVar[int]

    @override
    @classmethod
    def _from_type(cls, type_: type[int], /, *, type_map: KeyType.TypeMap) -> Self:
        if not is_subclass(type_, int) or is_subclass(type_, bool):
            raise TypeError('expected int type')
        return cls()

    @override
    def num_components(self) -> int:
        return 1

    @override
    def _check_value(self, value: int, /, *, deep: bool) -> None:
        # XXX: bool is a subclass of int, but True is not a valid Int8
        if isinstance(value, bool) or not isinstance(value, int):
            raise SerializationTypeError(f'expected int, got {type(value).__name__}')
        self._check_range(value)

    def _check_range(self, value: int) -> None:
        lower_bound, upper_bound = int_bounds(self._byte_size, self._signed)
        kind = int_kind_name(self._byte_size, self._signed)
        if value > upper_bound:
            raise SerializationValueError(f'{value} is above the upper bound of {kind}')
        if value < lower_bound:
            raise SerializationValueError(f'{value} is below the lower bound of {kind}')

    @override
    def _serialize(self, serializer: Serializer, value: int, /) -> None:
        encode_int(serializer, value, length=self._byte_size, signed=self._signed)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> int:
        return decode_int(deserializer, length=self._byte_size, signed=self._signed)


class Int8KeyType(_SizedIntKeyType):
    _signed = True
    _byte_size = 1


class Int16KeyType(_SizedIntKeyType):
    _signed = True
    _byte_size = 2


class Int32KeyType(_SizedIntKeyType):
    _signed = True
    _byte_size = 4  # 4-bytes -> 32-bits


class Int64KeyType(_SizedIntKeyType):
    _signed = True
    _byte_size = 8


class Int128KeyType(_SizedIntKeyType):
    _signed = True
    _byte_size = 16


class Uint8KeyType(_SizedIntKeyType):
    _signed = False
    _byte_size = 1


class Uint16KeyType(_SizedIntKeyType):
    _signed = False
    _byte_size = 2


class Uint32KeyType(_SizedIntKeyType):
    _signed = False
    _byte_size = 4  # 4-bytes -> 32-bits


class Uint64KeyType(_SizedIntKeyType):
    _signed = False
    _byte_size = 8


class Uint128KeyType(_SizedIntKeyType):
    _signed = False
    _byte_size = 16
