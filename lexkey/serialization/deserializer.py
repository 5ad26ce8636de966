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

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, NamedTuple

from lexkey.serialization.delimiter import DEFAULT_DELIMITER
from lexkey.serialization.exceptions import BadDataError

if TYPE_CHECKING:
    from lexkey.serialization.text_deserializer import TextDeserializer


class Component(NamedTuple):
    """ A single component read from a key, with its position so decoders can report precise errors.

    >>> Component(2, 'xyz').error('Uint32').args
    ("component 2: expected Uint32, got 'xyz'",)
    >>> Component(0, 'abc').error('Uint8', '2 hex digits required').args
    ("component 0: expected Uint8 (2 hex digits required), got 'abc'",)
    """

    index: int
    text: str

    def error(self, expected: str, reason: str | None = None) -> BadDataError:
        """ Build (but not raise) the error for when this component can't be decoded as `expected`.
        """
        detail = f' ({reason})' if reason else ''
        return BadDataError(
            f'component {self.index}: expected {expected}{detail}, got {self.text!r}',
            index=self.index,
            expected=expected,
        )


class Deserializer(ABC):
    """ Reads a key as a sequence of text components.
    """

    def finalize(self) -> None:
        """Check that all components were consumed, the deserializer cannot be reused after this."""
        raise TypeError('this deserializer does not support finalization')

    @staticmethod
    def build_text_deserializer(
        text: str,
        *,
        delimiter: str = DEFAULT_DELIMITER,
        num_components: int | None = None,
    ) -> TextDeserializer:
        from lexkey.serialization.text_deserializer import TextDeserializer
        return TextDeserializer(text, delimiter=delimiter, num_components=num_components)

    @abstractmethod
    def is_empty(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def cur_pos(self) -> int:
        """Index of the next component to be read."""
        raise NotImplementedError

    @abstractmethod
    def peek_component(self) -> Component:
        """Read the next component but don't consume it."""
        raise NotImplementedError

    @abstractmethod
    def read_component(self) -> Component:
        """Read and consume the next component, errors if there are no components left."""
        raise NotImplementedError
