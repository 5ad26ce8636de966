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

from pathlib import Path
from typing import Union

from pydantic import field_validator

from lexkey.serialization.delimiter import DEFAULT_DELIMITER, validate_delimiter
from lexkey.utils.pydantic import BaseModel
from lexkey.utils.yaml import dict_from_yaml


class LexKeySettings(BaseModel):
    # Character written between the components of a key, see `validate_delimiter` for what is accepted
    DELIMITER: str = DEFAULT_DELIMITER

    # When enabled, encoding a text field that contains the delimiter is an error instead of producing a key that
    # can't be decoded back into the same value
    CHECK_DELIMITER_IN_TEXT: bool = False

    @field_validator('DELIMITER', mode='after')
    @classmethod
    def _validate_delimiter(cls, delimiter: str) -> str:
        return validate_delimiter(delimiter)

    @classmethod
    def from_yaml(cls, *, filepath: Union[Path, str]) -> 'LexKeySettings':
        """Takes a filepath to a yaml file and returns a validated LexKeySettings instance."""
        settings_dict = dict_from_yaml(filepath=filepath)
        return cls.model_validate(settings_dict)
