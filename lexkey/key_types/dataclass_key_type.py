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

from typing import TYPE_CHECKING, Any, TypeVar

from typing_extensions import Self, override

from lexkey.key_types.key_type import KeyType
from lexkey.key_types.utils import get_record_field_types
from lexkey.serialization import BadDataError, Deserializer, SerializationTypeError, Serializer
from lexkey.utils.typing import is_dataclass_type, resolve_newtype

if TYPE_CHECKING:
    from lexkey.utils.typing import DataclassInstance

D = TypeVar('D', bound='DataclassInstance')


class DataclassKeyType(KeyType[D]):
    """ Represents dataclasses, fields are encoded in declaration order and their names are not encoded.

    A dataclass without fields is a unit shape and doesn't write anything.
    """

    __slots__ = ('_fields', '_class')
    _fields: dict[str, KeyType]
    _class: type[D]

    def __init__(self, fields_: dict[str, KeyType], class_: type[D]):
        self._fields = fields_
        self._class = class_

    @override
    @classmethod
    def _from_type(cls, type_: type[D], /, *, type_map: KeyType.TypeMap) -> Self:
        class_ = resolve_newtype(type_)
        if not is_dataclass_type(class_):
            raise TypeError('expected a dataclass')
        # XXX: the order is important, but `dict` and `fields` should have a stable order
        values: dict[str, KeyType] = {}
        for field_name, field_type in get_record_field_types(class_).items():
            values[field_name] = KeyType.from_type(field_type, type_map=type_map)
        return cls(values, class_)

    @override
    def num_components(self) -> int:
        return sum(field_key_type.num_components() for field_key_type in self._fields.values())

    @override
    def _check_value(self, value: D, /, *, deep: bool) -> None:
        if not isinstance(value, self._class):
            raise SerializationTypeError(f'expected {self._class.__name__} instance, got {type(value).__name__}')
        if deep:
            for field_name, field_key_type in self._fields.items():
                field_key_type._check_value(getattr(value, field_name), deep=True)

    @override
    def _serialize(self, serializer: Serializer, value: D, /) -> None:
        for field_name, field_key_type in self._fields.items():
            field_key_type.serialize(serializer, getattr(value, field_name))

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> D:
        start = deserializer.cur_pos()
        kwargs: dict[str, Any] = {}
        for field_name, field_key_type in self._fields.items():
            kwargs[field_name] = field_key_type.deserialize(deserializer)
        # XXX: __post_init__ can reject values that are valid for each field on its own
        try:
            return self._class(**kwargs)
        except (TypeError, ValueError) as e:
            name = self._class.__name__
            raise BadDataError(f'component {start}: invalid {name}: {e}', index=start, expected=name) from e
