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

from enum import Enum
from typing import TypeVar

from typing_extensions import Self, override

from lexkey.key_types.key_type import KeyType
from lexkey.serialization import Deserializer, SerializationTypeError, Serializer
from lexkey.serialization.encoding.utf8 import encode_utf8
from lexkey.utils.typing import is_subclass, resolve_newtype

E = TypeVar('E', bound=Enum)


class EnumKeyType(KeyType[E]):
    """ Key type for Enum subclasses, a member is encoded as its name, the name of the enum class is never encoded.

    Values of members are not used at all, so the order of keys follows the order of member names, not values.
    """

    __slots__ = ('enum_class',)

    def __init__(self, enum_class: type[E]) -> None:
        self.enum_class = enum_class

    @override
    @classmethod
    def _from_type(cls, type_: type[E], /, *, type_map: KeyType.TypeMap) -> Self:
        if not is_subclass(type_, Enum):
            raise TypeError('expected Enum subclass')
        return cls(resolve_newtype(type_))

    @override
    def num_components(self) -> int:
        return 1

    @override
    def _check_value(self, value: E, /, *, deep: bool) -> None:
        if not isinstance(value, self.enum_class):
            raise SerializationTypeError(f'expected {self.enum_class.__name__}, got {type(value).__name__}')

    @override
    def _serialize(self, serializer: Serializer, value: E, /) -> None:
        encode_utf8(serializer, value.name)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> E:
        component = deserializer.read_component()
        member = self.enum_class.__members__.get(component.text)
        # XXX: aliases are in __members__ too, but only the canonical name is ever encoded
        if member is None or member.name != component.text:
            raise component.error(f'{self.enum_class.__name__} member name')
        return member
