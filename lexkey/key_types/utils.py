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

from collections.abc import Mapping
from dataclasses import fields
from enum import Enum
from types import NoneType
from typing import TYPE_CHECKING, Any, NamedTuple, TypeAlias, get_origin, get_type_hints

from pydantic import BaseModel as PydanticBaseModel
from structlog import get_logger

from lexkey.serialization import UnsupportedTypeError
from lexkey.utils.typing import (
    DataclassInstance,
    is_dataclass_type,
    is_namedtuple_type,
    iter_newtype_chain,
    resolve_newtype,
)

if TYPE_CHECKING:
    from lexkey.key_types import KeyType


logger = get_logger()

TypeAliasMap: TypeAlias = Mapping[Any, type]
TypeToKeyTypeMap: TypeAlias = Mapping[Any, type['KeyType']]


def pretty_type(type_: Any) -> str:
    """ Shows a cleaner string representation for a type.

    >>> pretty_type(None), pretty_type(int), pretty_type(tuple[int, str])
    ('None', 'int', 'tuple[int, str]')
    """
    if type_ is NoneType or type_ is None:
        return 'None'
    elif hasattr(type_, '__args__'):
        return str(type_)
    else:
        return getattr(type_, '__name__', repr(type_))


# XXX: _verbose argument is used to help with doctest
def get_aliased_type(type_: Any, alias_map: TypeAliasMap, *, _verbose: bool = True) -> Any:
    """ Map a type to its usable alias, types without an alias are returned as is.

    For example, `bytearray` is mapped to `bytes` in the default alias map:

    >>> from lexkey.key_types import DEFAULT_TYPE_ALIAS_MAP as alias_map
    >>> get_aliased_type(bytearray, alias_map, _verbose=False)
    <class 'bytes'>
    >>> get_aliased_type(str, alias_map, _verbose=False)
    <class 'str'>
    """
    try:
        new_type = alias_map.get(type_, type_)
    except TypeError:
        # XXX: unhashable annotations can't have an alias
        return type_
    if new_type is not type_ and _verbose:
        logger.debug('type replaced', old=pretty_type(type_), new=pretty_type(new_type))
    return new_type


def get_usable_origin_type(type_: Any, /, *, type_map: 'KeyType.TypeMap', _verbose: bool = True) -> Any:
    """ The purpose of this function is to map a given type into a type that is usable in a KeyType.TypeMap

    The returned type is such that it is guaranteed to exist in `type_map.key_types_map`, lookup is done in this order:

    1. the type itself and then each type of its NewType chain (after aliasing), which is how `Uint32` is found
       before `int`, or how a user NewType over `Uint32` is found at all;
    2. the origin of those types, so `tuple[int, str]` is found through `tuple`;
    3. structural markers for enums, named tuples, dataclasses and pydantic models;
    4. the MRO of the innermost type, so subclasses of supported types are supported.

    >>> from lexkey.types import Uint32
    >>> from lexkey.key_types import DEFAULT_TYPE_MAP as type_map
    >>> get_usable_origin_type(Uint32, type_map=type_map) is Uint32
    True
    >>> get_usable_origin_type(tuple[int, str], type_map=type_map)
    <class 'tuple'>
    """
    if isinstance(type_, str):
        raise UnsupportedTypeError('string annotations are not currently supported')

    key_types_map = type_map.key_types_map

    for chain_type in iter_newtype_chain(type_):
        aliased_type = get_aliased_type(chain_type, type_map.alias_map, _verbose=_verbose)
        # XXX: a literal `None` annotation is a valid key, only a missing origin is skipped
        if _is_mapped(aliased_type, key_types_map):
            return aliased_type
        origin = get_origin(aliased_type)
        if origin is not None and _is_mapped(origin, key_types_map):
            return origin

    resolved = get_aliased_type(resolve_newtype(type_), type_map.alias_map, _verbose=False)
    if isinstance(resolved, type):
        for marker, matches in (
            (Enum, issubclass(resolved, Enum)),
            (NamedTuple, is_namedtuple_type(resolved)),
            (DataclassInstance, is_dataclass_type(resolved)),
            (PydanticBaseModel, issubclass(resolved, PydanticBaseModel)),
        ):
            if matches and marker in key_types_map:
                return marker
        for base in resolved.__mro__:
            if base in key_types_map:
                return base

    raise UnsupportedTypeError(f'type {pretty_type(type_)} is not supported by any KeyType class')


def _is_mapped(type_: Any, key_types_map: TypeToKeyTypeMap) -> bool:
    try:
        return type_ in key_types_map
    except TypeError:
        return False


def get_record_field_types(class_: type) -> dict[str, Any]:
    """ Get the annotation of each field of a record class, in declaration order.

    Records are named tuples, dataclasses and pydantic models. Field names are only used to read values from instances
    and to create new instances, they are never encoded.

    >>> from typing import NamedTuple
    >>> class Point(NamedTuple):
    ...     x: int
    ...     y: float
    >>> get_record_field_types(Point)
    {'x': <class 'int'>, 'y': <class 'float'>}
    """
    if is_namedtuple_type(class_):
        hints = get_type_hints(class_)
        return {name: hints.get(name, Any) for name in class_._fields}  # type: ignore[attr-defined]
    if is_dataclass_type(class_):
        hints = get_type_hints(class_)
        result: dict[str, Any] = {}
        for field in fields(class_):
            if not field.init:
                raise UnsupportedTypeError(f'{class_.__name__}.{field.name}: fields with init=False are not supported')
            result[field.name] = hints.get(field.name, field.type)
        return result
    if isinstance(class_, type) and issubclass(class_, PydanticBaseModel):
        return {name: info.annotation for name, info in class_.model_fields.items()}
    raise UnsupportedTypeError(f'{pretty_type(class_)} is not a record type')
