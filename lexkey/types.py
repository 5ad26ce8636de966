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
Annotations for the fixed-size scalars a key can hold.

Python has a single `int` and a single `float`, so the width (and signedness) of a key field is picked by annotating it
with one of these types. They are all `typing.NewType`, at runtime the values are plain `int`, `float`, `str` and
`bytes`:

>>> Uint32(1234)
1234
>>> type(Float32(1.5))
<class 'float'>
"""

from typing import NewType

Int8 = NewType('Int8', int)
Int16 = NewType('Int16', int)
Int32 = NewType('Int32', int)
Int64 = NewType('Int64', int)
Int128 = NewType('Int128', int)

Uint8 = NewType('Uint8', int)
Uint16 = NewType('Uint16', int)
Uint32 = NewType('Uint32', int)
Uint64 = NewType('Uint64', int)
Uint128 = NewType('Uint128', int)

Float32 = NewType('Float32', float)
Float64 = NewType('Float64', float)

# a single code point
Char = NewType('Char', str)
# explicit alias for byte sequences, encoded exactly like `bytes`
Binary = NewType('Binary', bytes)

__all__ = [
    'Binary',
    'Char',
    'Float32',
    'Float64',
    'Int8',
    'Int16',
    'Int32',
    'Int64',
    'Int128',
    'Uint8',
    'Uint16',
    'Uint32',
    'Uint64',
    'Uint128',
]
