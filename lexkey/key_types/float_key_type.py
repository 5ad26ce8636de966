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
from lexkey.serialization.encoding.float import decode_float, encode_float
from lexkey.utils.typing import is_subclass


class _FloatKeyType(KeyType[float]):
    """ Base class for IEEE 754 floats, an `int` value is accepted and encoded as the equivalent float.

    Decoding a `Float32` yields the nearest single precision value, which is not always equal to the value encoded.
    """

    # XXX: subclass must define this value:
    _byte_size: ClassVar[int]

    @override
    @classmethod
    def _from_type(cls, type_: type[float], /, *, type_map: KeyType.TypeMap) -> Self:
        if not is_subclass(type_, float):
            raise TypeError('expected float type')
        return cls()

    @override
    def num_components(self) -> int:
        return 1

    @override
    def _check_value(self, value: float, /, *, deep: bool) -> None:
        if isinstance(value, bool) or not isinstance(value, (float, int)):
            raise SerializationTypeError(f'expected float, got {type(value).__name__}')
        if isinstance(value, int):
            try:
                float(value)
            except OverflowError as e:
                raise SerializationValueError(f'{value} is out of range for Float{self._byte_size * 8}') from e

    @override
    def _serialize(self, serializer: Serializer, value: float, /) -> None:
        encode_float(serializer, float(value), length=self._byte_size)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> float:
        return decode_float(deserializer, length=self._byte_size)


class Float32KeyType(_FloatKeyType):
    _byte_size = 4


class Float64KeyType(_FloatKeyType):
    _byte_size = 8
