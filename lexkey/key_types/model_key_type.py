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

from typing import Any, TypeVar

from pydantic import BaseModel as PydanticBaseModel, ValidationError
from typing_extensions import Self, override

from lexkey.key_types.key_type import KeyType
from lexkey.key_types.utils import get_record_field_types
from lexkey.serialization import BadDataError, Deserializer, SerializationTypeError, Serializer
from lexkey.utils.typing import is_subclass, resolve_newtype

M = TypeVar('M', bound=PydanticBaseModel)


class ModelKeyType(KeyType[M]):
    """ Represents pydantic models, which are records just like dataclasses: fields in declaration order, no names.

    Decoded values go through the model's validation when they are instantiated.
    """

    __slots__ = ('_fields', '_class')
    _fields: dict[str, KeyType]
    _class: type[M]

    def __init__(self, fields_: dict[str, KeyType], class_: type[M]):
        self._fields = fields_
        self._class = class_

    @override
    @classmethod
    def _from_type(cls, type_: type[M], /, *, type_map: KeyType.TypeMap) -> Self:
        if not is_subclass(type_, PydanticBaseModel):
            raise TypeError('expected a pydantic model')
        class_ = resolve_newtype(type_)
        values = {
            field_name: KeyType.from_type(field_type, type_map=type_map)
            for field_name, field_type in get_record_field_types(class_).items()
        }
        return cls(values, class_)

    @override
    def num_components(self) -> int:
        return sum(field_key_type.num_components() for field_key_type in self._fields.values())

    @override
    def _check_value(self, value: M, /, *, deep: bool) -> None:
        if not isinstance(value, self._class):
            raise SerializationTypeError(f'expected {self._class.__name__} instance, got {type(value).__name__}')
        if deep:
            for field_name, field_key_type in self._fields.items():
                field_key_type._check_value(getattr(value, field_name), deep=True)

    @override
    def _serialize(self, serializer: Serializer, value: M, /) -> None:
        from lexkey.serialization.compound_encoding.tuple import encode_tuple
        values = tuple(getattr(value, field_name) for field_name in self._fields)
        encode_tuple(serializer, values, tuple(i.serialize for i in self._fields.values()))

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> M:
        from lexkey.serialization.compound_encoding.tuple import decode_tuple
        start = deserializer.cur_pos()
        values = decode_tuple(deserializer, tuple(i.deserialize for i in self._fields.values()))
        kwargs: dict[str, Any] = dict(zip(self._fields, values))
        try:
            return self._class(**kwargs)
        except ValidationError as e:
            name = self._class.__name__
            raise BadDataError(f'component {start}: invalid {name}: {e}', index=start, expected=name) from e
