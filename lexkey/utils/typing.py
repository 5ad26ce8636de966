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

from collections.abc import Iterator
from dataclasses import is_dataclass
from types import UnionType
from typing import Any, ClassVar, Protocol


class DataclassInstance(Protocol):
    """ Structural marker for dataclasses, used as a key in type maps so any dataclass can be looked up.
    """
    __dataclass_fields__: ClassVar[dict[str, Any]]


def is_newtype(type_: Any, /) -> bool:
    """ Whether the given object is a `typing.NewType`.

    >>> from typing import NewType
    >>> is_newtype(NewType('N', int))
    True
    >>> is_newtype(int)
    False
    """
    return getattr(type_, '__supertype__', None) is not None


def iter_newtype_chain(type_: Any, /) -> Iterator[Any]:
    """ Yield the given type followed by each type it was derived from, when it is a (possibly nested) NewType.

    >>> from typing import NewType
    >>> N = NewType('N', int)
    >>> M = NewType('M', N)
    >>> [t.__name__ for t in iter_newtype_chain(M)]
    ['M', 'N', 'int']
    >>> list(iter_newtype_chain(str))
    [<class 'str'>]
    """
    yield type_
    while (super_type := getattr(type_, '__supertype__', None)) is not None:
        type_ = super_type
        yield type_


def resolve_newtype(type_: Any, /) -> Any:
    """ Return the type at the bottom of a NewType chain.

    >>> from typing import NewType
    >>> resolve_newtype(NewType('M', NewType('N', bytes)))
    <class 'bytes'>
    """
    *_, last = iter_newtype_chain(type_)
    return last


def is_namedtuple_type(type_: Any, /) -> bool:
    """ Whether the given type is a class created with `typing.NamedTuple` or `collections.namedtuple`.

    >>> from typing import NamedTuple
    >>> class Point(NamedTuple):
    ...     x: int
    ...     y: int
    >>> is_namedtuple_type(Point), is_namedtuple_type(tuple), is_namedtuple_type(tuple[int, int])
    (True, False, False)
    """
    return isinstance(type_, type) and issubclass(type_, tuple) and hasattr(type_, '_fields')


def is_dataclass_type(type_: Any, /) -> bool:
    """ Whether the given object is a dataclass class (not an instance).
    """
    return isinstance(type_, type) and is_dataclass(type_)


def is_subclass(cls: type, class_or_tuple: type | tuple[type, ...] | UnionType, /) -> bool:
    """ Reimplements issubclass() with support for recursive NewType classes.

    Normal behavior from `issubclass`:

    >>> is_subclass(int, int)
    True
    >>> is_subclass(bool, int)
    True
    >>> is_subclass(bool, (int, str))
    True
    >>> is_subclass(bool, int | str)
    True
    >>> is_subclass(bool, bytes | str)
    False
    >>> is_subclass(str, int)
    False

    But `is_subclass` also works when a NewType is given as arg 1:

    >>> from typing import NewType
    >>> N = NewType('N', int)
    >>> is_subclass(N, int)
    True
    >>> is_subclass(N, int | str)
    True
    >>> is_subclass(N, str)
    False
    >>> M = NewType('M', N)
    >>> is_subclass(M, int)
    True
    >>> is_subclass(M, str)
    False

    Unlike `issubclass`, something that doesn't resolve to a class is simply not a subclass:

    >>> is_subclass(tuple[int, str], tuple)
    False
    """
    cls = resolve_newtype(cls)
    if not isinstance(cls, type):
        return False
    return issubclass(cls, class_or_tuple)
