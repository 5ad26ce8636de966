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

from collections.abc import Iterable
from typing import get_args, get_origin

from typing_extensions import Self, override

from lexkey.key_types.key_type import KeyType
from lexkey.serialization import Deserializer, SerializationTypeError, Serializer


# XXX: we can't usefully describe the tuple type
class TupleKeyType(KeyType[tuple]):
    """ Represents heterogeneous-type fixed size tuples, `tuple[()]` being the unit shape.
    """

    __slots__ = ('_args',)

    _args: tuple[KeyType, ...]

    def __init__(self, args: Iterable[KeyType]) -> None:
        self._args = tuple(args)
        for arg in self._args:
            assert isinstance(arg, KeyType)

    @override
    @classmethod
    def _from_type(cls, type_: type[tuple], /, *, type_map: KeyType.TypeMap) -> Self:
        origin_type: type = get_origin(type_) or type_
        if not issubclass(origin_type, tuple):
            raise TypeError('expected tuple type')
        args = get_args(type_)
        if args and args[-1] is Ellipsis:
            raise TypeError('expected tuple[<args...>]')
        return cls(KeyType.from_type(arg, type_map=type_map) for arg in args)

    @override
    def num_components(self) -> int:
        return sum(arg.num_components() for arg in self._args)

    @override
    def _check_value(self, value: tuple, /, *, deep: bool) -> None:
        if not isinstance(value, tuple):
            raise SerializationTypeError(f'expected tuple, got {type(value).__name__}')
        if len(value) != len(self._args):
            raise SerializationTypeError(f'expected tuple of size {len(self._args)}, got {len(value)}')
        if deep:
            for i, arg_key_type in zip(value, self._args):
                arg_key_type._check_value(i, deep=True)

    @override
    def _serialize(self, serializer: Serializer, value: tuple, /) -> None:
        from lexkey.serialization.compound_encoding.tuple import encode_tuple
        encode_tuple(serializer, value, tuple(i.serialize for i in self._args))

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> tuple:
        from lexkey.serialization.compound_encoding.tuple import decode_tuple
        return decode_tuple(deserializer, tuple(i.deserialize for i in self._args))
