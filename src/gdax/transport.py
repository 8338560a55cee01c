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

from typing import Optional

import requests
from requests import PreparedRequest
from requests.exceptions import RequestException
from requests.models import Response
from requests.sessions import Session

from gdax.gdax_error import NetworkError


class AbstractTransport:
    def send(self, request: PreparedRequest) -> Response:
        raise NotImplementedError("Abstract method: it must be implemented in the transport class")


class SessionTransport(AbstractTransport):

    __DEFAULT_TIMEOUT: int = 30

    def __init__(self, session: Optional[Session] = None, timeout: Optional[float] = None) -> None:
        self.__session: Session = session if session is not None else requests.Session()
        self.__timeout: float = timeout if timeout is not None else self.__DEFAULT_TIMEOUT

    @property
    def timeout(self) -> float:
        return self.__timeout

    def send(self, request: PreparedRequest) -> Response:
        try:
            # 3xx responses are returned as is, signed headers are never replayed to another path
            return self.__session.send(request, timeout=self.__timeout, allow_redirects=False)
        except RequestException as exc:
            raise NetworkError(f"{request.method} {request.url} failed: {exc}") from exc

    def close(self) -> None:
        self.__session.close()
