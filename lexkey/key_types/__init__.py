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

from enum import Enum
from types import NoneType
from typing import Any, NamedTuple, TypeVar

from pydantic import BaseModel as PydanticBaseModel
from structlog import get_logger

from lexkey.key_types.bool_key_type import BoolKeyType
from lexkey.key_types.bytes_key_type import BytesKeyType
from lexkey.key_types.dataclass_key_type import DataclassKeyType
from lexkey.key_types.enum_key_type import EnumKeyType
from lexkey.key_types.float_key_type import Float32KeyType, Float64KeyType
from lexkey.key_types.key_type import KeyType
from lexkey.key_types.model_key_type import ModelKeyType
from lexkey.key_types.namedtuple_key_type import NamedTupleKeyType
from lexkey.key_types.null_key_type import NullKeyType
from lexkey.key_types.shape_gate import check_supported_shape
from lexkey.key_types.sized_int_key_type import (
    Int8KeyType,
    Int16KeyType,
    Int32KeyType,
    Int64KeyType,
    Int128KeyType,
    Uint8KeyType,
    Uint16KeyType,
    Uint32KeyType,
    Uint64KeyType,
    Uint128KeyType,
)
from lexkey.key_types.str_key_type import CharKeyType, StrKeyType
from lexkey.key_types.tuple_key_type import TupleKeyType
from lexkey.key_types.utils import TypeAliasMap, TypeToKeyTypeMap, pretty_type
from lexkey.types import (
    Binary,
    Char,
    Float32,
    Float64,
    Int8,
    Int16,
    Int32,
    Int64,
    Int128,
    Uint8,
    Uint16,
    Uint32,
    Uint64,
    Uint128,
)
from lexkey.utils.typing import DataclassInstance

__all__ = [
    'DEFAULT_TYPE_ALIAS_MAP',
    'DEFAULT_TYPE_MAP',
    'DEFAULT_TYPE_TO_KEY_TYPE_MAP',
    'BoolKeyType',
    'BytesKeyType',
    'CharKeyType',
    'DataclassKeyType',
    'EnumKeyType',
    'Float32KeyType',
    'Float64KeyType',
    'Int8KeyType',
    'Int16KeyType',
    'Int32KeyType',
    'Int64KeyType',
    'Int128KeyType',
    'KeyType',
    'ModelKeyType',
    'NamedTupleKeyType',
    'NullKeyType',
    'StrKeyType',
    'TupleKeyType',
    'TypeAliasMap',
    'TypeToKeyTypeMap',
    'Uint8KeyType',
    'Uint16KeyType',
    'Uint32KeyType',
    'Uint64KeyType',
    'Uint128KeyType',
    'check_supported_shape',
    'make_key_type',
]

logger = get_logger()

T = TypeVar('T')

DEFAULT_TYPE_ALIAS_MAP: TypeAliasMap = {
    bytearray: bytes,
}

# Mapping between types and KeyType classes.
DEFAULT_TYPE_TO_KEY_TYPE_MAP: TypeToKeyTypeMap = {
    # builtin types:
    bool: BoolKeyType,
    bytes: BytesKeyType,
    float: Float64KeyType,
    int: Int64KeyType,
    str: StrKeyType,
    tuple: TupleKeyType,
    # XXX: technically None is not a type, type[None]/NoneType is, but both can show up in annotations
    None: NullKeyType,
    NoneType: NullKeyType,
    # other Python types, matched structurally:
    Enum: EnumKeyType,
    NamedTuple: NamedTupleKeyType,
    DataclassInstance: DataclassKeyType,
    PydanticBaseModel: ModelKeyType,
    # lexkey types:
    Int8: Int8KeyType,
    Int16: Int16KeyType,
    Int32: Int32KeyType,
    Int64: Int64KeyType,
    Int128: Int128KeyType,
    Uint8: Uint8KeyType,
    Uint16: Uint16KeyType,
    Uint32: Uint32KeyType,
    Uint64: Uint64KeyType,
    Uint128: Uint128KeyType,
    Float32: Float32KeyType,
    Float64: Float64KeyType,
    Char: CharKeyType,
    Binary: BytesKeyType,
}

DEFAULT_TYPE_MAP = KeyType.TypeMap(DEFAULT_TYPE_ALIAS_MAP, DEFAULT_TYPE_TO_KEY_TYPE_MAP)


def make_key_type(type_: Any, /, *, extra_key_types_map: TypeToKeyTypeMap | None = None) -> KeyType:
    """ Like KeyType.from_type, but with the default maps.

    Extra entries can be given to support more types or to override how a type is mapped, if you need to customize the
    aliasing too use `KeyType.from_type` instead.

    For example:

        key_type = make_key_type(tuple[str, Uint32])
        assert key_type.num_components() == 2
        assert key_type.to_text(('account', 1234)) == 'account:000004d2'
    """
    type_map = DEFAULT_TYPE_MAP
    if extra_key_types_map:
        type_map = KeyType.TypeMap(DEFAULT_TYPE_ALIAS_MAP, {**DEFAULT_TYPE_TO_KEY_TYPE_MAP, **extra_key_types_map})
    key_type = KeyType.from_type(type_, type_map=type_map)
    logger.debug('key type built', type=pretty_type(type_), key_type=type(key_type).__name__)
    return key_type
