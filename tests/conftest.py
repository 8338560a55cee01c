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

import json
from typing import Any, Callable, List, Optional

import pytest
from requests import PreparedRequest
from requests.models import Response
from requests.structures import CaseInsensitiveDict

from gdax.client import USER_AGENT
from gdax.configuration import ClientConfiguration
from gdax.transport import AbstractTransport

TEST_REST_URL: str = "https://test.pro.coinbase"
TEST_WEBSOCKET_URL: str = "wss://test.ws-feed.pro.coinbase.com"
TEST_API_KEY: str = "super_secret_key_123_abc"
TEST_API_SECRET: str = "MTIzYWJjU3VwZXJTZWNyZXRTZWNyZXQ="
TEST_API_PASSPHRASE: str = "1q2w3e4r"
TEST_TIMESTAMP: str = "1600000000"


class RecordingTransport(AbstractTransport):
    """Records every request it receives and answers with a canned response."""

    def __init__(self, body: Any = "", status_code: int = 200) -> None:
        self.requests: List[PreparedRequest] = []
        self.__body: str = body if isinstance(body, str) else json.dumps(body)
        self.__status_code: int = status_code

    def send(self, request: PreparedRequest) -> Response:
        self.requests.append(request)
        response: Response = Response()
        response.status_code = self.__status_code
        response._content = self.__body.encode("utf-8")  # pylint: disable=protected-access
        response.encoding = "utf-8"
        response.headers = CaseInsensitiveDict({"Content-Type": "application/json"})
        response.url = str(request.url)
        response.request = request
        return response


@pytest.fixture(scope="session")
def configuration() -> ClientConfiguration:
    return ClientConfiguration(
        api_key=TEST_API_KEY,
        api_secret=TEST_API_SECRET,
        api_passphrase=TEST_API_PASSPHRASE,
        rest_url=TEST_REST_URL,
        websocket_url=TEST_WEBSOCKET_URL,
    )


@pytest.fixture(scope="session")
def fixed_clock() -> Callable[[], str]:
    return lambda: TEST_TIMESTAMP


@pytest.fixture(name="make_transport")
def make_transport_fixture() -> Callable[..., RecordingTransport]:
    def make_transport(body: Any = "", status_code: int = 200) -> RecordingTransport:
        return RecordingTransport(body, status_code)

    return make_transport


def assert_auth_headers(request: PreparedRequest, timestamp: Optional[str] = None) -> None:
    assert set(request.headers.keys()) == {"CB-ACCESS-KEY", "CB-ACCESS-SIGN", "CB-ACCESS-TIMESTAMP", "CB-ACCESS-PASSPHRASE", "User-Agent"}
    assert request.headers["CB-ACCESS-KEY"] == TEST_API_KEY
    assert request.headers["CB-ACCESS-PASSPHRASE"] == TEST_API_PASSPHRASE
    assert request.headers["User-Agent"] == USER_AGENT
    assert request.headers["CB-ACCESS-SIGN"]
    assert request.headers["CB-ACCESS-TIMESTAMP"]
    if timestamp is not None:
        assert request.headers["CB-ACCESS-TIMESTAMP"] == timestamp
