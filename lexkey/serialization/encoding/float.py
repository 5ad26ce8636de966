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
This module implements encoding of IEEE 754 binary floats, either 4 bytes (single) or 8 bytes (double) wide.

The raw bits of the float are taken as a big-endian unsigned int and transformed before being written as hex:

- when the sign bit is clear, the sign bit is set, so positive values sort after negative values
- when the sign bit is set, all bits are inverted, so larger magnitudes sort first among negative values

>>> se = Serializer.build_text_serializer()
>>> encode_float(se, 1.0, length=8)  # writes bff0000000000000
>>> encode_float(se, -1.0, length=8)  # writes 400fffffffffffff
>>> encode_float(se, 0.0, length=8)  # writes 8000000000000000
>>> encode_float(se, -0.0, length=8)  # writes 7fffffffffffffff
>>> encode_float(se, 1.0, length=4)  # writes bf800000
>>> se.finalize()
'bff0000000000000:400fffffffffffff:8000000000000000:7fffffffffffffff:bf800000'

>>> de = Deserializer.build_text_deserializer('bff0000000000000:7fffffffffffffff:bf800000')
>>> decode_float(de, length=8)
1.0
>>> decode_float(de, length=8)
-0.0
>>> decode_float(de, length=4)
1.0
>>> de.finalize()

Single precision values are rounded to the nearest representable value, values that can't be represented at all are
rejected:

>>> se = Serializer.build_text_serializer()
>>> encode_float(se, 1234.56, length=4)
>>> se.finalize()
'c49a51ec'
>>> try:
...     encode_float(Serializer.build_text_serializer(), 1e39, length=4)
... except SerializationValueError as e:
...     print(*e.args)
1e+39 is out of range for Float32

NaN is encoded like any other bit pattern, so a positive NaN sorts after `inf` and a negative NaN sorts before `-inf`:

>>> import math
>>> se = Serializer.build_text_serializer()
>>> encode_float(se, -math.inf, length=8)
>>> encode_float(se, math.inf, length=8)
>>> encode_float(se, math.nan, length=8)
>>> se.finalize()
'000fffffffffffff:fff0000000000000:fff8000000000000'
"""

import struct

from lexkey.serialization import Deserializer, SerializationValueError, Serializer

from .bytes import hex_to_bytes

_STRUCT_FORMATS: dict[int, tuple[str, str]] = {
    4: ('>f', '>I'),
    8: ('>d', '>Q'),
}


def float_kind_name(length: int) -> str:
    """ Human readable name of a float, used in error messages.
    """
    return f'Float{length * 8}'


def float_bits_to_ordered(bits: int, *, length: int) -> int:
    """ Map the raw bits of a float to an unsigned int of the same size that preserves the float order.

    >>> hex(float_bits_to_ordered(0x3f800000, length=4))
    '0xbf800000'
    >>> hex(float_bits_to_ordered(0xbf800000, length=4))
    '0x407fffff'
    """
    total_bits = length * 8
    sign = 1 << (total_bits - 1)
    mask = (1 << total_bits) - 1
    if bits & sign:
        return bits ^ mask
    return bits | sign


def ordered_to_float_bits(ordered: int, *, length: int) -> int:
    """ Inverse of `float_bits_to_ordered`.

    >>> hex(ordered_to_float_bits(0x407fffff, length=4))
    '0xbf800000'
    """
    total_bits = length * 8
    sign = 1 << (total_bits - 1)
    mask = (1 << total_bits) - 1
    if ordered & sign:
        return ordered ^ sign
    return ordered ^ mask


def encode_float(serializer: Serializer, value: float, *, length: int) -> None:
    """ Encode a float using the given byte-length, 4 or 8.

    This modules's docstring has more details and examples.
    """
    assert isinstance(value, (float, int))
    float_format, int_format = _STRUCT_FORMATS[length]
    try:
        packed = struct.pack(float_format, value)
    except OverflowError:
        raise SerializationValueError(f'{value} is out of range for {float_kind_name(length)}')
    bits, = struct.unpack(int_format, packed)
    ordered = float_bits_to_ordered(bits, length=length)
    serializer.write_component(ordered.to_bytes(length, byteorder='big').hex())


def decode_float(deserializer: Deserializer, *, length: int) -> float:
    """ Decode a float using the given byte-length, 4 or 8.

    This modules's docstring has more details and examples.
    """
    float_format, int_format = _STRUCT_FORMATS[length]
    component = deserializer.read_component()
    data = hex_to_bytes(component, expected=float_kind_name(length), length=length)
    bits = ordered_to_float_bits(int.from_bytes(data, byteorder='big'), length=length)
    value, = struct.unpack(float_format, struct.pack(int_format, bits))
    return value
