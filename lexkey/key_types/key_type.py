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

from abc import ABC, abstractmethod
from typing import Generic, NamedTuple, TypeVar, final

from typing_extensions import Self

from lexkey.key_types.shape_gate import check_supported_shape
from lexkey.key_types.utils import TypeAliasMap, TypeToKeyTypeMap, get_aliased_type, get_usable_origin_type
from lexkey.serialization import BadDataError, Deserializer, SerializationValueError, Serializer

T = TypeVar('T')


class KeyType(ABC, Generic[T]):
    """ This class is used to model a key shape with a known type signature and how it will be (de)serialized.

    A tree of KeyType instances is built from a type annotation once, with `KeyType.from_type`, and can then be used to
    encode any number of values with that shape into text and to decode them back. Instances are immutable and can be
    shared freely.
    """

    class TypeMap(NamedTuple):
        alias_map: TypeAliasMap
        key_types_map: TypeToKeyTypeMap

    # XXX: subclasses must override this if they need any properties
    __slots__ = ()

    @final
    @staticmethod
    def from_type(type_: type[T], /, *, type_map: TypeMap) -> KeyType[T]:
        """ Instantiate a KeyType instance from a type signature using the given maps.

        A `key_types_map` associates concrete types to concrete KeyType classes, while an `alias_map` associate types
        with substitute types to use instead.

        Unsupported constructs (options, maps, sequences and payload variants) are rejected with an
        `UnsupportedTypeError` before the type map is consulted, at every level of the annotation.
        """
        # XXX: the recursion into arguments and fields is made by the _from_type of compound KeyType classes
        check_supported_shape(type_, deep=False)
        usable_origin = get_usable_origin_type(type_, type_map=type_map)
        key_type = type_map.key_types_map[usable_origin]
        aliased_type = get_aliased_type(type_, type_map.alias_map, _verbose=False)
        return key_type._from_type(aliased_type, type_map=type_map)

    @final
    @staticmethod
    def check_type(type_: type[T], /, *, type_map: TypeMap) -> None:
        """ Same as `from_type` but doesn't return the KeyType, only the errors are relevant.
        """
        KeyType.from_type(type_, type_map=type_map)

    @classmethod
    def _from_type(cls, type_: type[T], /, *, type_map: TypeMap) -> Self:
        """ Instantiate a KeyType instance from a type signature.

        The implementation is expected to inspect the given type's origin and args to check for compatibility and to
        decide on using `KeyType.from_type`, forwarding the given `type_map` to continue instantiating KeyType
        specializations, this is the case particularly for compound KeyTypes, like TupleKeyType or DataclassKeyType.
        """
        # XXX: a KeyType that is only meant for local use does not need to implement _from_type
        raise TypeError(f'{cls} is not compatible with use in a KeyType.TypeMap')

    @abstractmethod
    def num_components(self) -> int:
        """ How many components a value of this shape is encoded into, it does not depend on the value.
        """
        raise NotImplementedError

    @final
    def check_value(self, value: T, /) -> None:
        """ Raise a `SerializationTypeError` or `SerializationValueError` if the value can't be encoded.

        This is a deep check, for compound types all the inner values are checked too.
        """
        # XXX: subclasses must implement KeyType._check_value, not KeyType.check_value
        self._check_value(value, deep=True)

    @final
    def serialize(self, serializer: Serializer, value: T, /) -> None:
        """ Serialize a value instance according to the signature that was abstracted.

        Serialization includes calling check_value while the value is being serialized, so calling check_value before
        calling serialize is not needed.
        """
        # XXX: subclasses must implement KeyType._serialize, not KeyType.serialize
        self._check_value(value, deep=False)
        self._serialize(serializer, value)

    @final
    def deserialize(self, deserializer: Deserializer, /) -> T:
        """ Deserialize a value instance according to the signature that was abstracted.

        Deserialization includes asserting check_value while the value is being deserialized, so calling check_value
        after calling deserialize is not needed.
        """
        # XXX: subclasses must implement KeyType._deserialize, not KeyType.deserialize
        value = self._deserialize(deserializer)
        self._check_value(value, deep=False)
        return value

    @final
    def to_text(self, value: T, /, *, delimiter: str | None = None, check_delimiter: bool | None = None) -> str:
        """ Encode a value into a key.

        When `delimiter` or `check_delimiter` are not given the global settings are used.
        """
        delimiter, check_delimiter = _resolve_options(delimiter, check_delimiter)
        serializer = Serializer.build_text_serializer(delimiter=delimiter)
        checked_serializer = serializer.with_optional_delimiter_check(check_delimiter)
        self.serialize(checked_serializer, value)
        return checked_serializer.finalize()

    @final
    def from_text(self, text: str, /, *, delimiter: str | None = None) -> T:
        """ Decode a key into a value, the whole text must be consumed.
        """
        delimiter, _ = _resolve_options(delimiter, False)
        deserializer = Deserializer.build_text_deserializer(
            text,
            delimiter=delimiter,
            num_components=self.num_components(),
        )
        value = self.deserialize(deserializer)
        deserializer.finalize()
        return value

    @final
    def to_bytes(self, value: T, /, *, delimiter: str | None = None, check_delimiter: bool | None = None) -> bytes:
        """ Shortcut to encode a value into the UTF-8 bytes of a key, which is what sorted stores normally take.
        """
        text = self.to_text(value, delimiter=delimiter, check_delimiter=check_delimiter)
        try:
            return text.encode('utf-8')
        except UnicodeEncodeError as e:
            raise SerializationValueError(f'key cannot be encoded as utf-8: {e.reason}') from e

    @final
    def from_bytes(self, data: bytes | bytearray | memoryview, /, *, delimiter: str | None = None) -> T:
        """ Shortcut to decode a value from the UTF-8 bytes of a key.
        """
        try:
            text = bytes(data).decode('utf-8')
        except UnicodeDecodeError as e:
            raise BadDataError(f'key is not valid utf-8: {e.reason}', expected='utf-8') from e
        return self.from_text(text, delimiter=delimiter)

    @abstractmethod
    def _check_value(self, value: T, /, *, deep: bool) -> None:
        """ Inner implementation of `KeyType.check_value`, should raise if the given value is not valid.

        Compound values should use `KeyType._check_value` on the inner type(s) instead of `KeyType.check_value` and
        pass the appropriate deep argument.
        """
        raise NotImplementedError

    @abstractmethod
    def _serialize(self, serializer: Serializer, value: T, /) -> None:
        """ Inner implementation of `serialize`, you can assume that the give value has been "shallow checked".

        When implementing the serialization with compound encoders, `KeyType.serialize` should be passed as an
        `Encoder` instead of `KeyType._serialize`, by passing `KeyType.serialize` the next `KeyType._serialize`
        implementation will be able to assume that the value was checked.
        """
        raise NotImplementedError

    @abstractmethod
    def _deserialize(self, deserializer: Deserializer, /) -> T:
        """ Inner implementation of `deserialize`, it is expected that deserializers always produce valid values.

        Even then, `KeyType.deserialize` should be passed as a `Decoder`, that way it's possible to do a "shallow
        check" for asserting that a valid value was produced.
        """
        raise NotImplementedError


def _resolve_options(delimiter: str | None, check_delimiter: bool | None) -> tuple[str, bool]:
    if delimiter is not None and check_delimiter is not None:
        return delimiter, check_delimiter
    from lexkey.conf.get_settings import get_global_settings
    settings = get_global_settings()
    return (
        settings.DELIMITER if delimiter is None else delimiter,
        settings.CHECK_DELIMITER_IN_TEXT if check_delimiter is None else check_delimiter,
    )
