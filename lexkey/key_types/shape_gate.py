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

"""
Validation of type annotations against the shapes that can be represented by a key.

A key is not self-describing: the only thing that tells where a field ends and the next begins is the shape itself, so
every field must write a number of components that is known from its annotation alone. Shapes that don't satisfy that
are rejected, naming the kind of construct that was found:

>>> from typing import Optional
>>> for type_ in [Optional[int], dict[str, int], list[int], tuple[int, ...], int | str]:
...     try:
...         check_supported_shape(type_)
...     except UnsupportedTypeError as e:
...         print(e.construct.value)
option
map
sequence
sequence
payload variant

Supported shapes pass without any effect, and the check recurses into tuples and records:

>>> check_supported_shape(tuple[str, int, bytes])
>>> try:
...     check_supported_shape(tuple[str, set[int]])
... except UnsupportedTypeError as e:
...     print(*e.args)
set[int] is a sequence, which is not supported in keys
"""

from collections.abc import Collection, Iterable, Iterator, Mapping, Sequence, Set as AbstractSet
from types import NoneType, UnionType
from typing import Any, Tuple, Union, get_args, get_origin

from pydantic import BaseModel as PydanticBaseModel

from lexkey.key_types.utils import get_record_field_types, pretty_type
from lexkey.serialization import UnsupportedConstruct, UnsupportedTypeError
from lexkey.utils.typing import is_dataclass_type, is_namedtuple_type, resolve_newtype


def _reject(type_: Any, construct: UnsupportedConstruct) -> UnsupportedTypeError:
    article = 'an' if construct.value[0] in 'aeiou' else 'a'
    return UnsupportedTypeError(
        f'{pretty_type(type_)} is {article} {construct.value}, which is not supported in keys',
        construct=construct,
    )


def check_supported_shape(type_: Any, /, *, deep: bool = True) -> None:
    """ Raise `UnsupportedTypeError` if the given annotation is an option, map, sequence or payload variant.

    NewTypes are looked through. When `deep=True` the check recurses into tuple arguments and record fields, otherwise
    only the outermost shape is checked (which is what happens when building a `KeyType`, since that recursion is
    made externally).

    Types that are none of the unsupported constructs pass, even if no `KeyType` supports them, that is reported
    later by the type map lookup.
    """
    resolved = resolve_newtype(type_)
    origin = get_origin(resolved) or resolved
    args = get_args(resolved)

    if origin is Union or origin is UnionType:
        if NoneType in args or None in args:
            raise _reject(type_, UnsupportedConstruct.OPTION)
        raise _reject(type_, UnsupportedConstruct.PAYLOAD_VARIANT)

    if origin is tuple:
        if resolved is tuple or resolved is Tuple:
            raise _reject(type_, UnsupportedConstruct.SEQUENCE)
        if len(args) == 2 and args[1] is Ellipsis:
            raise _reject(type_, UnsupportedConstruct.SEQUENCE)
        if deep:
            for arg in args:
                check_supported_shape(arg, deep=True)
        return

    if not isinstance(origin, type):
        return

    if is_namedtuple_type(origin) or is_dataclass_type(origin) or issubclass(origin, PydanticBaseModel):
        if deep:
            for field_type in get_record_field_types(origin).values():
                check_supported_shape(field_type, deep=True)
        return

    if issubclass(origin, (str, bytes, bytearray)):
        return

    if issubclass(origin, tuple):
        # a tuple subclass that is not a named tuple has no fixed fields
        raise _reject(type_, UnsupportedConstruct.SEQUENCE)

    if issubclass(origin, Mapping):
        raise _reject(type_, UnsupportedConstruct.MAP)

    # XXX: Iterable and Collection are checked by identity, their subclass hooks would match records that define
    #      __iter__, like pydantic models
    if issubclass(origin, (Sequence, AbstractSet, Iterator)) or origin in (Iterable, Collection):
        raise _reject(type_, UnsupportedConstruct.SEQUENCE)
