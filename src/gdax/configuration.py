# Copyright 2026 The gdax Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from configparser import ConfigParser
from enum import Enum
from pathlib import Path
from typing import Dict, NamedTuple, Set, Union
from urllib.parse import urlparse

from gdax.gdax_error import ValidationError
from gdax.logger import LOGGER

PRODUCTION_REST_URL: str = "https://api.pro.coinbase.com"
PRODUCTION_WEBSOCKET_URL: str = "wss://ws-feed.pro.coinbase.com"
SANDBOX_REST_URL: str = "https://api-public.sandbox.pro.coinbase.com"
SANDBOX_WEBSOCKET_URL: str = "wss://ws-feed-public.sandbox.pro.coinbase.com"

DEFAULT_SECTION: str = "gdax"


# Configuration file keywords
class Keyword(Enum):
    API_KEY = "api_key"
    API_PASSPHRASE = "api_passphrase"
    API_SECRET = "api_secret"
    REST_URL = "rest_url"
    WEBSOCKET_URL = "websocket_url"

    @classmethod
    def has_value(cls, value: str) -> bool:
        return value in _keyword_values


_keyword_values: Set[str] = {item.value for item in Keyword}

_REQUIRED_KEYWORD_SET: Set[str] = {
    Keyword.API_KEY.value,
    Keyword.API_PASSPHRASE.value,
    Keyword.API_SECRET.value,
}

_REST_SCHEMES = ("https://", "http://")
_WEBSOCKET_SCHEMES = ("wss://", "ws://")


class ClientConfiguration(NamedTuple):
    api_key: str
    api_secret: str
    api_passphrase: str
    rest_url: str = PRODUCTION_REST_URL
    websocket_url: str = PRODUCTION_WEBSOCKET_URL

    @classmethod
    def create(
        cls,
        api_key: str,
        api_secret: str,
        api_passphrase: str,
        rest_url: str = PRODUCTION_REST_URL,
        websocket_url: str = PRODUCTION_WEBSOCKET_URL,
    ) -> "ClientConfiguration":
        """Build a validated configuration.

        Credentials must be non-empty strings, the REST URL must be http(s) and the WebSocket URL ws(s).
        The REST URL is normalized by removing trailing slashes, so that endpoint paths can be appended to it.
        """
        _check_non_empty_string(Keyword.API_KEY.value, api_key)
        _check_non_empty_string(Keyword.API_SECRET.value, api_secret)
        _check_non_empty_string(Keyword.API_PASSPHRASE.value, api_passphrase)
        _check_non_empty_string(Keyword.REST_URL.value, rest_url)
        _check_non_empty_string(Keyword.WEBSOCKET_URL.value, websocket_url)
        if not rest_url.startswith(_REST_SCHEMES):
            raise ValidationError(f"Invalid {Keyword.REST_URL.value} (must start with {' or '.join(_REST_SCHEMES)}): {rest_url}")
        if not websocket_url.startswith(_WEBSOCKET_SCHEMES):
            raise ValidationError(f"Invalid {Keyword.WEBSOCKET_URL.value} (must start with {' or '.join(_WEBSOCKET_SCHEMES)}): {websocket_url}")
        if not urlparse(rest_url).netloc:
            raise ValidationError(f"Invalid {Keyword.REST_URL.value} (no host): {rest_url}")
        if not urlparse(websocket_url).netloc:
            raise ValidationError(f"Invalid {Keyword.WEBSOCKET_URL.value} (no host): {websocket_url}")
        return cls(
            api_key=api_key,
            api_secret=api_secret,
            api_passphrase=api_passphrase,
            rest_url=rest_url.rstrip("/"),
            websocket_url=websocket_url,
        )

    def __repr__(self) -> str:
        return f"ClientConfiguration(api_key='{self.api_key}', api_secret=<hidden>, api_passphrase=<hidden>, rest_url='{self.rest_url}', websocket_url='{self.websocket_url}')"


def _check_non_empty_string(name: str, value: object) -> None:
    if not isinstance(value, str):
        raise ValidationError(f"Parameter '{name}' is not a string: {type(value).__name__}")
    if not value.strip():
        raise ValidationError(f"Parameter '{name}' is empty")


def load_configuration(ini_file: Union[str, Path], section: str = DEFAULT_SECTION) -> ClientConfiguration:
    if not Path(ini_file).exists():
        raise ValidationError(f"Configuration file '{ini_file}' not found")

    ini_config: ConfigParser = ConfigParser()
    ini_config.read(ini_file)
    if not ini_config.has_section(section):
        raise ValidationError(f"Section '{section}' not found in configuration file '{ini_file}'")

    section_values: Dict[str, str] = {}
    for field in ini_config[section]:
        if not Keyword.has_value(field):
            raise ValidationError(f"Invalid field '{field}' in section '{section}' of configuration file '{ini_file}'")
        section_values[field] = ini_config[section][field]

    missing_fields: Set[str] = _REQUIRED_KEYWORD_SET - set(section_values)
    if missing_fields:
        raise ValidationError(f"Missing field(s) {sorted(missing_fields)} in section '{section}' of configuration file '{ini_file}'")

    LOGGER.debug("Loaded section '%s' from configuration file '%s'", section, ini_file)
    return ClientConfiguration.create(**section_values)
