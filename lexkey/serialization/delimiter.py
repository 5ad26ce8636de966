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
The delimiter separates the components of a key, it is only ever written between components.

Because hex digits, `true`/`false` and enum member names are all made of alphanumeric characters or `_`, the
delimiter can never be one of those, otherwise parsing would be ambiguous:

>>> validate_delimiter(':')
':'
>>> validate_delimiter('/')
'/'
>>> for invalid in ['', '::', 'a', '0', '_', ' ', '\\n', 'é']:
...     try:
...         validate_delimiter(invalid)
...     except InvalidDelimiterError:
...         pass
...     else:
...         print('accepted', repr(invalid))
"""

from lexkey.serialization.exceptions import InvalidDelimiterError

DEFAULT_DELIMITER = ':'


def validate_delimiter(delimiter: str) -> str:
    """ Check that the given delimiter is usable and return it unchanged.
    """
    if not isinstance(delimiter, str):
        raise InvalidDelimiterError(f'delimiter must be a str, got {type(delimiter).__name__}')
    if len(delimiter) != 1:
        raise InvalidDelimiterError(f'delimiter must be exactly one character, got {delimiter!r}')
    if not delimiter.isascii() or not delimiter.isprintable():
        raise InvalidDelimiterError(f'delimiter must be a printable ASCII character, got {delimiter!r}')
    if delimiter.isspace() or delimiter.isalnum() or delimiter == '_':
        raise InvalidDelimiterError(f'delimiter cannot be whitespace, alphanumeric or underscore, got {delimiter!r}')
    return delimiter
