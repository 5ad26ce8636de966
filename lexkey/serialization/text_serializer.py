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

from typing_extensions import override

from lexkey.serialization.delimiter import DEFAULT_DELIMITER, validate_delimiter
from lexkey.serialization.serializer import Serializer


class TextSerializer(Serializer):
    """Simple implementation of Serializer to write to memory.

    This implementation defers joining everything until finalize is called, before that every component is stored in a
    list. Because of that, a failed encode never produces partial output.

    >>> se = TextSerializer()
    >>> se.write_component('account')
    >>> se.write_component('000004d2')
    >>> se.cur_pos()
    2
    >>> se.finalize()
    'account:000004d2'

    >>> TextSerializer(delimiter='/').finalize()
    ''
    """

    def __init__(self, *, delimiter: str = DEFAULT_DELIMITER) -> None:
        self._delimiter = validate_delimiter(delimiter)
        self._parts: list[str] = []

    @override
    def finalize(self) -> str:
        result = self._delimiter.join(self._parts)
        del self._parts
        return result

    @property
    @override
    def delimiter(self) -> str:
        return self._delimiter

    @override
    def cur_pos(self) -> int:
        return len(self._parts)

    @override
    def write_component(self, component: str) -> None:
        assert isinstance(component, str)
        self._parts.append(component)
