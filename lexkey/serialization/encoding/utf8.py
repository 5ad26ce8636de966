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
This module implements encoding of strings, which are written unmodified.

UTF-8 preserves code point order when compared byte-wise, so the encoded text sorts the same way as the strings.

>>> se = Serializer.build_text_serializer()
>>> encode_utf8(se, 'foobar')
>>> encode_utf8(se, 'ハトホル')
>>> encode_utf8(se, '')
>>> se.finalize()
'foobar:ハトホル:'

>>> de = Deserializer.build_text_deserializer('foobar:ハトホル:')
>>> decode_utf8(de)
'foobar'
>>> decode_utf8(de)
'ハトホル'
>>> decode_utf8(de)
''
>>> de.finalize()

There is no escaping, a string that contains the delimiter is written as is and can't be read back as a single value.

The order only holds for a single value, or for the last field of a key. When a string is a prefix of another and
another field follows it, the delimiter is compared against the next character of the longer string:

>>> se = Serializer.build_text_serializer()
>>> encode_utf8(se, 'ab')
>>> encode_utf8(se, 'x')
>>> first = se.finalize()
>>> se = Serializer.build_text_serializer()
>>> encode_utf8(se, 'ab0')
>>> encode_utf8(se, 'x')
>>> second = se.finalize()
>>> first, second, first < second
('ab:x', 'ab0:x', False)
"""

from lexkey.serialization import Deserializer, Serializer


def encode_utf8(serializer: Serializer, value: str) -> None:
    """ Encodes a string as is.

    This modules's docstring has more details and examples.
    """
    assert isinstance(value, str)
    serializer.write_component(value)


def decode_utf8(deserializer: Deserializer) -> str:
    """ Decodes a string as is.

    This modules's docstring has more details and examples.
    """
    return deserializer.read_component().text
