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

# Coinbase Pro account endpoints:
# https://docs.cloud.coinbase.com/exchange/reference/exchangerestapi_getaccounts

from typing import Any, Callable, Dict, List, NamedTuple, TypeVar

from gdax.gdax_error import DecodingError

# Native format keywords
_ACCOUNT_ID: str = "account_id"
_AMOUNT: str = "amount"
_AVAILABLE: str = "available"
_BALANCE: str = "balance"
_CREATED_AT: str = "created_at"
_CURRENCY: str = "currency"
_DETAILS: str = "details"
_HOLD: str = "hold"
_HOLDS: str = "holds"
_ID: str = "id"
_ORDER_ID: str = "order_id"
_PRODUCT_ID: str = "product_id"
_REF: str = "ref"
_TRADE_ID: str = "trade_id"
_TYPE: str = "type"
_UPDATED_AT: str = "updated_at"

_Record = TypeVar("_Record")


def _check_object(json_value: Any, record_name: str) -> Dict[str, Any]:
    if not isinstance(json_value, dict):
        raise DecodingError(f"Expected JSON object for {record_name}, got {type(json_value).__name__}: {json_value}")
    return json_value


def _get_string(json_object: Dict[str, Any], key: str) -> str:
    value: Any = json_object.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodingError(f"Field '{key}' is not a string: {value}")
    return value


def decode_list(json_value: Any, decoder: Callable[[Any], _Record], record_name: str) -> List[_Record]:
    # A null body is treated as an empty collection
    if json_value is None:
        return []
    if not isinstance(json_value, list):
        raise DecodingError(f"Expected JSON array of {record_name}, got {type(json_value).__name__}: {json_value}")
    return [decoder(element) for element in json_value]


class Account(NamedTuple):
    """Balance snapshot of a single account, as returned by GET /accounts/{id}."""

    id: str = ""
    currency: str = ""
    balance: str = ""
    available: str = ""
    holds: str = ""

    @classmethod
    def from_json(cls, json_value: Any) -> "Account":
        json_object: Dict[str, Any] = _check_object(json_value, cls.__name__)
        return cls(
            id=_get_string(json_object, _ID),
            currency=_get_string(json_object, _CURRENCY),
            balance=_get_string(json_object, _BALANCE),
            available=_get_string(json_object, _AVAILABLE),
            holds=_get_string(json_object, _HOLDS),
        )


# Same shape as Account, but GET /accounts names the hold amount "hold" instead of "holds"
class ListAccount(NamedTuple):
    id: str = ""
    currency: str = ""
    balance: str = ""
    available: str = ""
    hold: str = ""

    @classmethod
    def from_json(cls, json_value: Any) -> "ListAccount":
        json_object: Dict[str, Any] = _check_object(json_value, cls.__name__)
        return cls(
            id=_get_string(json_object, _ID),
            currency=_get_string(json_object, _CURRENCY),
            balance=_get_string(json_object, _BALANCE),
            available=_get_string(json_object, _AVAILABLE),
            hold=_get_string(json_object, _HOLD),
        )


class ActivityDetail(NamedTuple):
    order_id: str = ""
    trade_id: str = ""
    product_id: str = ""

    @classmethod
    def from_json(cls, json_value: Any) -> "ActivityDetail":
        if json_value is None:
            return cls()
        json_object: Dict[str, Any] = _check_object(json_value, cls.__name__)
        return cls(
            order_id=_get_string(json_object, _ORDER_ID),
            trade_id=_get_string(json_object, _TRADE_ID),
            product_id=_get_string(json_object, _PRODUCT_ID),
        )


class AccountActivity(NamedTuple):
    """A ledger entry: a balance-affecting event (fee, match, transfer, ...) on an account."""

    id: str = ""
    created_at: str = ""
    amount: str = ""
    balance: str = ""
    type: str = ""
    details: ActivityDetail = ActivityDetail()

    @classmethod
    def from_json(cls, json_value: Any) -> "AccountActivity":
        json_object: Dict[str, Any] = _check_object(json_value, cls.__name__)
        return cls(
            id=_get_string(json_object, _ID),
            created_at=_get_string(json_object, _CREATED_AT),
            amount=_get_string(json_object, _AMOUNT),
            balance=_get_string(json_object, _BALANCE),
            type=_get_string(json_object, _TYPE),
            details=ActivityDetail.from_json(json_object.get(_DETAILS)),
        )


class AccountHold(NamedTuple):
    """Funds reserved on an account by an open order or a pending transfer (identified by ref)."""

    id: str = ""
    account_id: str = ""
    created_at: str = ""
    updated_at: str = ""
    amount: str = ""
    type: str = ""
    ref: str = ""

    @classmethod
    def from_json(cls, json_value: Any) -> "AccountHold":
        json_object: Dict[str, Any] = _check_object(json_value, cls.__name__)
        return cls(
            id=_get_string(json_object, _ID),
            account_id=_get_string(json_object, _ACCOUNT_ID),
            created_at=_get_string(json_object, _CREATED_AT),
            updated_at=_get_string(json_object, _UPDATED_AT),
            amount=_get_string(json_object, _AMOUNT),
            type=_get_string(json_object, _TYPE),
            ref=_get_string(json_object, _REF),
        )


def decode_list_accounts(json_value: Any) -> List[ListAccount]:
    return decode_list(json_value, ListAccount.from_json, ListAccount.__name__)


def decode_account_history(json_value: Any) -> List[AccountActivity]:
    return decode_list(json_value, AccountActivity.from_json, AccountActivity.__name__)


def decode_account_holds(json_value: Any) -> List[AccountHold]:
    return decode_list(json_value, AccountHold.from_json, AccountHold.__name__)
