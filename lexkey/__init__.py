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

from lexkey.codec import KeyCodec, dump, dumps, from_bytes, infer_type, load, loads, to_bytes
from lexkey.key_types import KeyType, make_key_type
from lexkey.serialization import (
    BadDataError,
    InvalidDelimiterError,
    OutOfDataError,
    SerializationError,
    SerializationTypeError,
    SerializationValueError,
    TrailingDataError,
    UnsupportedConstruct,
    UnsupportedTypeError,
)
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
from lexkey.version import __version__

__all__ = [
    '__version__',
    'BadDataError',
    'Binary',
    'Char',
    'Float32',
    'Float64',
    'Int8',
    'Int16',
    'Int32',
    'Int64',
    'Int128',
    'InvalidDelimiterError',
    'KeyCodec',
    'KeyType',
    'OutOfDataError',
    'SerializationError',
    'SerializationTypeError',
    'SerializationValueError',
    'TrailingDataError',
    'Uint8',
    'Uint16',
    'Uint32',
    'Uint64',
    'Uint128',
    'UnsupportedConstruct',
    'UnsupportedTypeError',
    'dump',
    'dumps',
    'from_bytes',
    'infer_type',
    'load',
    'loads',
    'make_key_type',
    'to_bytes',
]
