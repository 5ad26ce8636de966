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
from lexkey.serialization.deserializer import Component, Deserializer
from lexkey.serialization.exceptions import OutOfDataError, TrailingDataError


class TextDeserializer(Deserializer):
    """Simple implementation of a Deserializer to parse components from a text.

    The whole text is split once on construction and a cursor walks the resulting list.

    >>> de = TextDeserializer('account:000004d2')
    >>> de.read_component()
    Component(index=0, text='account')
    >>> de.peek_component()
    Component(index=1, text='000004d2')
    >>> de.read_component().text
    '000004d2'
    >>> de.finalize()

    An empty text has no components, unless exactly one is expected, in which case it is a single empty component:

    >>> TextDeserializer('').is_empty()
    True
    >>> TextDeserializer('', num_components=1).read_component()
    Component(index=0, text='')

    When the number of components is known beforehand a mismatch is reported before anything is decoded:

    >>> try:
    ...     TextDeserializer('a:b:c', num_components=2)
    ... except TrailingDataError as e:
    ...     print(*e.args)
    expected 2 components, got 3
    """

    def __init__(
        self,
        text: str,
        *,
        delimiter: str = DEFAULT_DELIMITER,
        num_components: int | None = None,
    ) -> None:
        if not isinstance(text, str):
            raise TypeError(f'expected str, got {type(text).__name__}')
        self._delimiter = validate_delimiter(delimiter)
        if text:
            self._parts = text.split(self._delimiter)
        elif num_components == 1:
            self._parts = ['']
        else:
            self._parts = []
        self._pos = 0
        if num_components is not None and len(self._parts) != num_components:
            self._raise_count_mismatch(num_components)

    def _raise_count_mismatch(self, num_components: int) -> None:
        found = len(self._parts)
        expected = f'{num_components} components'
        message = f'expected {expected}, got {found}'
        if found < num_components:
            raise OutOfDataError(message, index=found, expected=expected)
        raise TrailingDataError(message, index=num_components, expected=expected)

    @override
    def finalize(self) -> None:
        if not self.is_empty():
            left = len(self._parts) - self._pos
            raise TrailingDataError(
                f'{left} trailing component(s) starting at component {self._pos}',
                index=self._pos,
                expected='end of key',
            )
        del self._parts

    @override
    def is_empty(self) -> bool:
        return self._pos >= len(self._parts)

    @override
    def cur_pos(self) -> int:
        return self._pos

    @override
    def peek_component(self) -> Component:
        if self.is_empty():
            raise OutOfDataError(
                f'component {self._pos}: not enough components to read',
                index=self._pos,
                expected='component',
            )
        return Component(self._pos, self._parts[self._pos])

    @override
    def read_component(self) -> Component:
        component = self.peek_component()
        self._pos += 1
        return component
