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
from typing import TYPE_CHECKING

from typing_extensions import Self

from lexkey.serialization.delimiter import DEFAULT_DELIMITER

if TYPE_CHECKING:
    from lexkey.serialization.adapters import DelimiterCheckSerializer
    from lexkey.serialization.text_serializer import TextSerializer


class Serializer(ABC):
    """ Writes a key as a sequence of text components.

    Encoders only ever write whole components, joining them with the delimiter is up to the implementation.
    """

    def finalize(self) -> str:
        """Get the resulting text, the serializer cannot be reused after this."""
        raise TypeError('this serializer does not support finalization')

    @property
    @abstractmethod
    def delimiter(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def cur_pos(self) -> int:
        """Number of components written so far."""
        raise NotImplementedError

    @abstractmethod
    def write_component(self, component: str) -> None:
        """Write a single component, it must not be joined with anything else by the caller."""
        raise NotImplementedError

    def with_delimiter_check(self) -> DelimiterCheckSerializer[Self]:
        """Helper method to wrap the current serializer with DelimiterCheckSerializer."""
        from lexkey.serialization.adapters import DelimiterCheckSerializer
        return DelimiterCheckSerializer(self)

    def with_optional_delimiter_check(self, check: bool | None) -> Self | DelimiterCheckSerializer[Self]:
        """Helper method to optionally wrap the current serializer."""
        if not check:
            return self
        return self.with_delimiter_check()

    @staticmethod
    def build_text_serializer(*, delimiter: str = DEFAULT_DELIMITER) -> TextSerializer:
        from lexkey.serialization.text_serializer import TextSerializer
        return TextSerializer(delimiter=delimiter)
