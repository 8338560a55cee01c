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

from rp2.rp2_error import RP2RuntimeError, RP2ValueError


class ValidationError(RP2ValueError):
    pass


class DecodingError(RP2ValueError):
    pass


# A malformed secret is caught before any network call (ValidationError) and is a Base64 decoding failure (DecodingError)
class InvalidSecretError(ValidationError, DecodingError):
    pass


class NetworkError(RP2RuntimeError):
    pass


class ApiError(RP2RuntimeError):
    def __init__(self, status_code: int, body: str, message: Optional[str] = None) -> None:
        self.__status_code: int = status_code
        self.__body: str = body
        self.__message: Optional[str] = message
        super().__init__(f"HTTP {status_code}: {message if message else body}")

    @property
    def status_code(self) -> int:
        return self.__status_code

    @property
    def body(self) -> str:
        return self.__body

    @property
    def message(self) -> Optional[str]:
        return self.__message
