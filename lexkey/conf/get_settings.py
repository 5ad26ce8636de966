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

import os
from typing import NamedTuple, Optional

from structlog import get_logger

from lexkey.conf.settings import LexKeySettings as Settings

logger = get_logger()

CONFIG_YAML_ENV_VAR = 'LEXKEY_CONFIG_YAML'
DEFAULT_SOURCE = '<defaults>'


class _SettingsMetadata(NamedTuple):
    source: str
    is_yaml: bool
    settings: Settings


_settings_singleton: Optional[_SettingsMetadata] = None


def get_global_settings() -> Settings:
    """
    Returns the global settings.

    Tries to get the settings from a yaml filepath in the 'LEXKEY_CONFIG_YAML' env var. If it isn't set, the default
    settings are used. Settings are loaded once, later calls return the same instance.
    """
    settings_yaml_filepath = os.environ.get(CONFIG_YAML_ENV_VAR)
    if settings_yaml_filepath is None:
        return _load_settings_singleton(DEFAULT_SOURCE, is_yaml=False)
    return _load_settings_singleton(settings_yaml_filepath, is_yaml=True)


def get_settings_source() -> str:
    """ Returns the path of the YAML file that was loaded, or '<defaults>'.

    XXX: Will raise an assertion error if get_global_settings() wasn't used before.
    """
    global _settings_singleton
    assert _settings_singleton is not None, 'get_global_settings() not called before'
    return _settings_singleton.source


def _load_settings_singleton(source: str, *, is_yaml: bool) -> Settings:
    global _settings_singleton

    if _settings_singleton is not None:
        if _settings_singleton.is_yaml != is_yaml:
            raise RuntimeError('loading config twice with a different source type')
        if _settings_singleton.source != source:
            raise RuntimeError('loading config twice with a different file')

        return _settings_singleton.settings

    settings = Settings.from_yaml(filepath=source) if is_yaml else Settings()
    logger.debug('settings loaded', source=source, delimiter=settings.DELIMITER)
    _settings_singleton = _SettingsMetadata(
        source=source,
        is_yaml=is_yaml,
        settings=settings,
    )

    return _settings_singleton.settings
