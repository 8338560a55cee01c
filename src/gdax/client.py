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

# Coinbase Pro REST client links:
# REST API: https://docs.cloud.coinbase.com/exchange/reference
# Pagination: https://docs.cloud.coinbase.com/exchange/docs/pagination
# Endpoint: https://api.pro.coinbase.com

from typing import Any, Callable, Dict, List, NamedTuple, Optional
from urllib.parse import quote, urlencode

from requests import PreparedRequest, Request
from requests.exceptions import RequestException
from requests.models import Response

from gdax.account import (
    Account,
    AccountActivity,
    AccountHold,
    ListAccount,
    decode_account_history,
    decode_account_holds,
    decode_list_accounts,
)
from gdax.configuration import ClientConfiguration
from gdax.gdax_error import ApiError, DecodingError, ValidationError
from gdax.logger import LOGGER
from gdax.signer import GdaxAuth
from gdax.transport import AbstractTransport, SessionTransport

_VERSION: str = "0.1.0"

USER_AGENT: str = f"gdax/{_VERSION}"

# Native format keywords
_AFTER: str = "after"
_BEFORE: str = "before"
_LIMIT: str = "limit"
_MESSAGE: str = "message"

_MAX_PAGE_LIMIT: int = 100


class Pagination(NamedTuple):
    """Cursor parameters for list endpoints.

    The cursors come from the CB-BEFORE / CB-AFTER headers of a previous response. The client never follows
    them by itself: each call is a single round trip.
    """

    before: Optional[str] = None
    after: Optional[str] = None
    limit: Optional[int] = None

    def to_params(self) -> Dict[str, str]:
        params: Dict[str, str] = {}
        if self.before is not None:
            params[_BEFORE] = _check_cursor(_BEFORE, self.before)
        if self.after is not None:
            params[_AFTER] = _check_cursor(_AFTER, self.after)
        if self.limit is not None:
            if isinstance(self.limit, bool) or not isinstance(self.limit, int) or not 1 <= self.limit <= _MAX_PAGE_LIMIT:
                raise ValidationError(f"Pagination limit must be an integer between 1 and {_MAX_PAGE_LIMIT}: {self.limit}")
            params[_LIMIT] = str(self.limit)
        return params


def _check_cursor(name: str, cursor: str) -> str:
    if not isinstance(cursor, str) or not cursor.strip():
        raise ValidationError(f"Pagination cursor '{name}' must be a non-empty string: {cursor!r}")
    return cursor


class GdaxClient:

    __GET: str = "GET"

    def __init__(
        self,
        configuration: ClientConfiguration,
        transport: Optional[AbstractTransport] = None,
        clock: Optional[Callable[[], str]] = None,
    ) -> None:
        if not isinstance(configuration, ClientConfiguration):
            raise ValidationError(f"configuration is not a ClientConfiguration: {configuration}")
        # Directly built configurations skip create(): validate and normalize them here too
        configuration = ClientConfiguration.create(*configuration)
        self.__configuration: ClientConfiguration = configuration
        self.__auth: GdaxAuth = GdaxAuth(configuration.api_key, configuration.api_secret, configuration.api_passphrase, clock)
        self.__transport: AbstractTransport = transport if transport is not None else SessionTransport()

    @property
    def configuration(self) -> ClientConfiguration:
        return self.__configuration

    def list_accounts(self) -> List[ListAccount]:
        return decode_list_accounts(self.__send_request("/accounts"))

    def get_account(self, account_id: str) -> Account:
        return Account.from_json(self.__send_request(self.__account_path(account_id)))

    def get_account_history(self, account_id: str, pagination: Optional[Pagination] = None) -> List[AccountActivity]:
        """Return the ledger entries of an account, newest first (the order the server sends them in)."""
        return decode_account_history(self.__send_request(f"{self.__account_path(account_id)}/ledger", pagination))

    def get_account_holds(self, account_id: str, pagination: Optional[Pagination] = None) -> List[AccountHold]:
        return decode_account_holds(self.__send_request(f"{self.__account_path(account_id)}/holds", pagination))

    # Account ids are checked here so that an empty id never turns into a request for GET /accounts/
    @staticmethod
    def __account_path(account_id: str) -> str:
        if not isinstance(account_id, str):
            raise ValidationError(f"Account id is not a string: {account_id}")
        if not account_id.strip():
            raise ValidationError("Account id is empty")
        return f"/accounts/{quote(account_id, safe='')}"

    def _prepare_request(self, endpoint: str, pagination: Optional[Pagination] = None) -> PreparedRequest:
        path: str = endpoint
        if pagination is not None:
            params: Dict[str, str] = pagination.to_params()
            if params:
                path = f"{endpoint}?{urlencode(params)}"
        request: Request = Request(self.__GET, f"{self.__configuration.rest_url}{path}", headers={"User-Agent": USER_AGENT}, auth=self.__auth)
        try:
            return request.prepare()
        except RequestException as exc:
            raise ValidationError(f"Cannot build request for {self.__configuration.rest_url}{path}: {exc}") from exc

    def __send_request(self, endpoint: str, pagination: Optional[Pagination] = None) -> Any:
        prepared_request: PreparedRequest = self._prepare_request(endpoint, pagination)
        LOGGER.debug("Request: %s %s", prepared_request.method, prepared_request.path_url)
        response: Response = self.__transport.send(prepared_request)
        self._validate_response(response, endpoint)
        try:
            return response.json()
        except ValueError as exc:
            raise DecodingError(f"Response to {self.__GET} {endpoint} is not valid JSON: {response.text[:200]}") from exc

    # Documented at: https://docs.cloud.coinbase.com/exchange/docs/requests
    def _validate_response(self, response: Response, endpoint: str) -> None:
        if 200 <= response.status_code < 300:
            return
        message: Optional[str] = None
        try:
            json_response: Any = response.json()
        except ValueError:
            json_response = None
        if isinstance(json_response, dict) and isinstance(json_response.get(_MESSAGE), str):
            message = json_response[_MESSAGE]
        LOGGER.error(
            "Error %d: %s%s (%s): %s", response.status_code, self.__configuration.rest_url, endpoint, self.__GET, message if message else response.text
        )
        raise ApiError(response.status_code, response.text, message)
