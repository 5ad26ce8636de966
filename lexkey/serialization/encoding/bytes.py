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

r"""
This modules implements encoding of byte sequences as lowercase hex, 2 digits per byte.

Lowercase hex digits sort in the same order as the nibbles they represent, and since every byte takes exactly 2 digits
the text sorts in the same order as the original byte sequence, a shorter prefix sorting first.

>>> se = Serializer.build_text_serializer()
>>> encode_bytes(se, b'test')
>>> encode_bytes(se, b'')
>>> encode_bytes(se, b'\x00\xff')
>>> se.finalize()
'74657374::00ff'

>>> de = Deserializer.build_text_deserializer('74657374::00ff')
>>> decode_bytes(de)
b'test'
>>> decode_bytes(de)
b''
>>> decode_bytes(de)
b'\x00\xff'
>>> de.finalize()

Only an even number of lowercase hex digits is accepted:

>>> for invalid in ['abc', '00FF', 'zz', '0x00']:
...     de = Deserializer.build_text_deserializer(invalid)
...     try:
...         decode_bytes(de)
...     except ValueError as e:
...         print(*e.args)
component 0: expected bytes (even number of lowercase hex digits required), got 'abc'
component 0: expected bytes (even number of lowercase hex digits required), got '00FF'
component 0: expected bytes (even number of lowercase hex digits required), got 'zz'
component 0: expected bytes (even number of lowercase hex digits required), got '0x00'

The order only holds for a single value, or for the last field of a key. When a shorter value is followed by another
field, the delimiter is compared against the hex digits of the longer value, and the default `:` sorts after all of
them:

>>> se = Serializer.build_text_serializer()
>>> encode_bytes(se, b'')
>>> encode_bytes(se, b'\x01')
>>> first = se.finalize()
>>> se = Serializer.build_text_serializer()
>>> encode_bytes(se, b'\x00')
>>> encode_bytes(se, b'\x01')
>>> second = se.finalize()
>>> first, second, first < second
(':01', '00:01', False)
"""

import re

from lexkey.serialization import Component, Deserializer, Serializer

_HEX_PATTERN = re.compile('(?:[0-9a-f]{2})*')


def hex_to_bytes(component: Component, *, expected: str, length: int | None = None) -> bytes:
    r""" Parse the text of a component as lowercase hex, optionally requiring an exact byte length.

    >>> hex_to_bytes(Component(0, '04d2'), expected='Uint16', length=2)
    b'\x04\xd2'
    >>> try:
    ...     hex_to_bytes(Component(3, '4d2'), expected='Uint16', length=2)
    ... except ValueError as e:
    ...     print(*e.args)
    component 3: expected Uint16 (4 hex digits required), got '4d2'
    """
    text = component.text
    if length is not None and len(text) != 2 * length:
        raise component.error(expected, f'{2 * length} hex digits required')
    if _HEX_PATTERN.fullmatch(text) is None:
        reason = 'lowercase hex digits required' if length is not None else \
            'even number of lowercase hex digits required'
        raise component.error(expected, reason)
    return bytes.fromhex(text)


def encode_bytes(serializer: Serializer, data: bytes) -> None:
    """ Encodes a byte-sequence as lowercase hex.

    This modules's docstring has more details and examples.
    """
    assert isinstance(data, (bytes, bytearray))
    serializer.write_component(data.hex())


def decode_bytes(deserializer: Deserializer) -> bytes:
    """ Decodes a byte-sequence from lowercase hex.

    This modules's docstring has more details and examples.
    """
    component = deserializer.read_component()
    return hex_to_bytes(component, expected='bytes')
