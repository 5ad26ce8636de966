import os

from lexkey.conf import UNITTESTS_SETTINGS_FILEPATH

os.environ['LEXKEY_CONFIG_YAML'] = os.environ.get('LEXKEY_TEST_CONFIG_YAML', UNITTESTS_SETTINGS_FILEPATH)
