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
from typing import TypeVar

from typing_extensions import Self, override

from lexkey.key_types.key_type import KeyType
from lexkey.key_types.utils import get_record_field_types
from lexkey.serialization import Deserializer, SerializationTypeError, Serializer
from lexkey.utils.typing import is_namedtuple_type, resolve_newtype

N = TypeVar('N', bound=tuple)


class NamedTupleKeyType(KeyType[N]):
    """ Represents `typing.NamedTuple` classes, encoded exactly like a tuple of its fields.

    A plain tuple with the right size is also accepted when encoding, decoding always produces the named tuple.
    """

    __slots__ = ('_args', '_actual_type')

    _args: tuple[KeyType, ...]
    _actual_type: type[N]

    def __init__(self, namedtuple: type[N], args: Iterable[KeyType]) -> None:
        self._actual_type = namedtuple
        self._args = tuple(args)

    @override
    @classmethod
    def _from_type(cls, type_: type[N], /, *, type_map: KeyType.TypeMap) -> Self:
        actual_type = resolve_newtype(type_)
        if not is_namedtuple_type(actual_type):
            raise TypeError('expected NamedTuple type')
        args = get_record_field_types(actual_type).values()
        return cls(actual_type, (KeyType.from_type(arg, type_map=type_map) for arg in args))

    @override
    def num_components(self) -> int:
        return sum(arg.num_components() for arg in self._args)

    @override
    def _check_value(self, value: N, /, *, deep: bool) -> None:
        if not isinstance(value, tuple):
            raise SerializationTypeError(f'expected {self._actual_type.__name__}, got {type(value).__name__}')
        if len(value) != len(self._args):
            raise SerializationTypeError(f'expected {len(self._args)} fields, got {len(value)}')
        if deep:
            for i, arg_key_type in zip(value, self._args):
                arg_key_type._check_value(i, deep=True)

    @override
    def _serialize(self, serializer: Serializer, value: N, /) -> None:
        from lexkey.serialization.compound_encoding.tuple import encode_tuple
        encode_tuple(serializer, value, tuple(i.serialize for i in self._args))

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> N:
        from lexkey.serialization.compound_encoding.tuple import decode_tuple
        return self._actual_type(*decode_tuple(deserializer, tuple(i.deserialize for i in self._args)))
