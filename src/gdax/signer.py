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

# Coinbase Pro authentication:
# https://docs.cloud.coinbase.com/exchange/docs/authorization-and-authentication

import base64
import binascii
import hashlib
import hmac
import time
from typing import Callable, Dict, Optional

from requests import PreparedRequest
from requests.auth import AuthBase

from gdax.gdax_error import InvalidSecretError

# Authentication headers
CB_ACCESS_KEY: str = "CB-ACCESS-KEY"
CB_ACCESS_PASSPHRASE: str = "CB-ACCESS-PASSPHRASE"
CB_ACCESS_SIGN: str = "CB-ACCESS-SIGN"
CB_ACCESS_TIMESTAMP: str = "CB-ACCESS-TIMESTAMP"


def decode_secret(api_secret: str) -> bytes:
    if not isinstance(api_secret, str):
        raise InvalidSecretError(f"API secret is not a string: {type(api_secret)}")
    try:
        return base64.b64decode(api_secret, validate=True)
    except binascii.Error as exc:
        raise InvalidSecretError("API secret is not valid Base64") from exc


def _sign(hmac_key: bytes, timestamp: str, method: str, path: str, body: str) -> str:
    message: str = f"{timestamp}{method}{path}{body}"
    signature: hmac.HMAC = hmac.new(hmac_key, message.encode("utf-8"), hashlib.sha256)
    return base64.b64encode(signature.digest()).decode("utf-8")


def compute_signature(api_secret: str, timestamp: str, method: str, path: str, body: str = "") -> str:
    """Return the Base64 HMAC-SHA256 of timestamp + method + path + body, keyed by the decoded secret."""
    return _sign(decode_secret(api_secret), timestamp, method, path, body)


def build_auth_headers(
    api_key: str,
    api_secret: str,
    api_passphrase: str,
    timestamp: str,
    method: str,
    path: str,
    body: str = "",
) -> Dict[str, str]:
    return {
        CB_ACCESS_KEY: api_key,
        CB_ACCESS_SIGN: compute_signature(api_secret, timestamp, method, path, body),
        CB_ACCESS_TIMESTAMP: timestamp,
        CB_ACCESS_PASSPHRASE: api_passphrase,
    }


def unix_timestamp() -> str:
    return str(int(time.time()))


class GdaxAuth(AuthBase):
    """Signs every outgoing request with a fresh timestamp.

    The secret is decoded once, at construction: a malformed secret raises InvalidSecretError
    before any request is built.
    """

    def __init__(self, api_key: str, api_secret: str, api_passphrase: str, clock: Optional[Callable[[], str]] = None) -> None:
        self.__api_key: str = api_key
        self.__hmac_key: bytes = decode_secret(api_secret)
        self.__api_passphrase: str = api_passphrase
        self.__clock: Callable[[], str] = clock if clock else unix_timestamp

    def __call__(self, request: PreparedRequest) -> PreparedRequest:
        timestamp: str = self.__clock()
        body: str = self.__body_as_text(request.body)
        signature: str = _sign(self.__hmac_key, timestamp, str(request.method), request.path_url, body)

        request.headers.update(
            {
                CB_ACCESS_KEY: self.__api_key,
                CB_ACCESS_SIGN: signature,
                CB_ACCESS_TIMESTAMP: timestamp,
                CB_ACCESS_PASSPHRASE: self.__api_passphrase,
            }
        )
        return request

    @staticmethod
    def __body_as_text(body: Optional[object]) -> str:
        if body is None:
            return ""
        if isinstance(body, bytes):
            return body.decode("utf-8")
        return str(body)
