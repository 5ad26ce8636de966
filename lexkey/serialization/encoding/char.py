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
This module implements encoding of a single character (one code point), written as is.

>>> se = Serializer.build_text_serializer()
>>> encode_char(se, 'x')
>>> encode_char(se, 'λ')
>>> se.finalize()
'x:λ'

>>> de = Deserializer.build_text_deserializer('x:λ:xy')
>>> decode_char(de)
'x'
>>> decode_char(de)
'λ'
>>> try:
...     decode_char(de)
... except ValueError as e:
...     print(*e.args)
component 2: expected char (exactly one code point required), got 'xy'
"""

from lexkey.serialization import Deserializer, SerializationValueError, Serializer


def encode_char(serializer: Serializer, value: str) -> None:
    """ Encodes a single code point.
    """
    assert isinstance(value, str)
    if len(value) != 1:
        raise SerializationValueError(f'expected exactly one code point, got {len(value)}')
    serializer.write_component(value)


def decode_char(deserializer: Deserializer) -> str:
    """ Decodes a single code point.
    """
    component = deserializer.read_component()
    if len(component.text) != 1:
        raise component.error('char', 'exactly one code point required')
    return component.text
