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

from typing import TypeVar

from typing_extensions import override

from lexkey.serialization.exceptions import SerializationValueError
from lexkey.serialization.serializer import Serializer

from .generic_adapter import GenericSerializerAdapter

S = TypeVar('S', bound=Serializer)


class DelimiterCheckSerializer(GenericSerializerAdapter[S]):
    """ Rejects components that contain the delimiter.

    Without this adapter, a text field containing the delimiter is written as is, and the resulting key can't be
    decoded back into the same value. This adapter turns that situation into an error at encoding time instead.

    >>> se = Serializer.build_text_serializer().with_delimiter_check()
    >>> se.write_component('account')
    >>> try:
    ...     se.write_component('a:b')
    ... except SerializationValueError as e:
    ...     print(*e.args)
    component 1 contains the delimiter ':'
    >>> se.finalize()
    'account'
    """

    @override
    def write_component(self, component: str) -> None:
        if self.delimiter in component:
            raise SerializationValueError(f'component {self.cur_pos()} contains the delimiter {self.delimiter!r}')
        super().write_component(component)
