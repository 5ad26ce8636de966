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
This module implements encoding of integers with a fixed size, the size and signedness are parametrized.

The encoding format is the big-endian hex of the value, always using 2 digits per byte. Signed values have their sign
bit flipped first, so that negative values sort before positive values:

>>> se = Serializer.build_text_serializer()
>>> encode_int(se, 0, length=1, signed=True)  # writes 80
>>> encode_int(se, -1, length=1, signed=True)  # writes 7f
>>> encode_int(se, 1234, length=4, signed=False)  # writes 000004d2
>>> encode_int(se, 12345, length=2, signed=True)  # writes b039
>>> se.finalize()
'80:7f:000004d2:b039'

>>> de = Deserializer.build_text_deserializer('80:7f:000004d2:b039')
>>> decode_int(de, length=1, signed=True)  # reads 80
0
>>> decode_int(de, length=1, signed=True)  # reads 7f
-1
>>> decode_int(de, length=4, signed=False)  # reads 000004d2
1234
>>> decode_int(de, length=2, signed=True)  # reads b039
12345
>>> de.finalize()

Values that don't fit are rejected when encoding:

>>> try:
...     encode_int(Serializer.build_text_serializer(), 256, length=1, signed=False)
... except SerializationValueError as e:
...     print(*e.args)
256 is out of range for Uint8

And the number of digits must be exact when decoding:

>>> de = Deserializer.build_text_deserializer('1')
>>> try:
...     decode_int(de, length=4, signed=False)
... except ValueError as e:
...     print(*e.args)
component 0: expected Uint32 (8 hex digits required), got '1'
"""

from lexkey.serialization import Deserializer, SerializationValueError, Serializer

from .bytes import hex_to_bytes


def int_kind_name(length: int, signed: bool) -> str:
    """ Human readable name of a fixed-size int, used in error messages.

    >>> int_kind_name(4, True), int_kind_name(16, False)
    ('Int32', 'Uint128')
    """
    return f'{"Int" if signed else "Uint"}{length * 8}'


def int_bounds(length: int, signed: bool) -> tuple[int, int]:
    """ Inclusive lower and upper bounds of a fixed-size int.

    >>> int_bounds(1, True)
    (-128, 127)
    >>> int_bounds(2, False)
    (0, 65535)
    """
    bits = length * 8
    if signed:
        return -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    return 0, (1 << bits) - 1


def int_to_ordered(value: int, *, length: int, signed: bool) -> int:
    """ Map a fixed-size int to an unsigned int of the same size that preserves its order.

    >>> int_to_ordered(-1, length=4, signed=True) < int_to_ordered(0, length=4, signed=True)
    True
    >>> hex(int_to_ordered(-2**31, length=4, signed=True))
    '0x0'
    >>> hex(int_to_ordered(2**31 - 1, length=4, signed=True))
    '0xffffffff'
    """
    if not signed:
        return value
    bits = length * 8
    mask = (1 << bits) - 1
    sign = 1 << (bits - 1)
    return (value & mask) ^ sign


def ordered_to_int(ordered: int, *, length: int, signed: bool) -> int:
    """ Inverse of `int_to_ordered`.

    >>> ordered_to_int(0x7fffffff, length=4, signed=True)
    -1
    """
    if not signed:
        return ordered
    bits = length * 8
    sign = 1 << (bits - 1)
    value = ordered ^ sign
    return value - (1 << bits) if value & sign else value


def encode_int(serializer: Serializer, number: int, *, length: int, signed: bool) -> None:
    """ Encode an int using the given byte-length and signedness.

    This modules's docstring has more details and examples.
    """
    assert isinstance(number, int)
    lower, upper = int_bounds(length, signed)
    if not lower <= number <= upper:
        raise SerializationValueError(f'{number} is out of range for {int_kind_name(length, signed)}')
    ordered = int_to_ordered(number, length=length, signed=signed)
    serializer.write_component(ordered.to_bytes(length, byteorder='big').hex())


def decode_int(deserializer: Deserializer, *, length: int, signed: bool) -> int:
    """ Decode an int using the given byte-length and signedness.

    This modules's docstring has more details and examples.
    """
    component = deserializer.read_component()
    data = hex_to_bytes(component, expected=int_kind_name(length, signed), length=length)
    return ordered_to_int(int.from_bytes(data, byteorder='big'), length=length, signed=signed)
