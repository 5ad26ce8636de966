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
This module implements encoding a boolean value as a literal.

The format is trivial and extremely simple:

- `False` maps to `false`
- `True` maps to `true`
- any other text is invalid

Since `'false' < 'true'` the order of booleans is preserved.

>>> se = Serializer.build_text_serializer()
>>> encode_bool(se, False)
>>> encode_bool(se, True)
>>> se.finalize()
'false:true'

>>> de = Deserializer.build_text_deserializer('false:true')
>>> decode_bool(de)
False
>>> decode_bool(de)
True
>>> de.finalize()

>>> de = Deserializer.build_text_deserializer('True')
>>> try:
...     decode_bool(de)
... except ValueError as e:
...     print(*e.args)
component 0: expected bool, got 'True'
"""

from lexkey.serialization import Deserializer, Serializer

_TRUE = 'true'
_FALSE = 'false'


def encode_bool(serializer: Serializer, value: bool) -> None:
    """ Encodes a boolean value as `true` or `false`.
    """
    assert isinstance(value, bool)
    serializer.write_component(_TRUE if value else _FALSE)


def decode_bool(deserializer: Deserializer) -> bool:
    """ Decodes a boolean value from `true` or `false`.
    """
    component = deserializer.read_component()
    if component.text == _FALSE:
        return False
    elif component.text == _TRUE:
        return True
    else:
        raise component.error('bool')
