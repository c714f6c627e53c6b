"""Data models for litellm-statusline.

The budget service returns ``/user/info`` in two shapes: either a wrapper with
``user_info`` and ``keys``, or the user record itself. ``normalize_account_info``
turns both into one ``AccountInfo``; everything downstream works on that.
"""

from __future__ import annotations

import logging
import math
from enum import StrEnum
from typing import Any

import msgspec

from litellm_statusline.errors.types import InvalidResponse

logger = logging.getLogger(__name__)

DEFAULT_MAX_BUDGET = 100.0
KEY_SUFFIX_LENGTH = 4


class KeyRecord(msgspec.Struct, frozen=True):
    """A virtual key belonging to the user."""

    key_name: str | None = None  # Masked key, e.g. "sk-...WXYZ"
    key_alias: str | None = None
    spend: float | None = None
    max_budget: float | None = None


class UserInfo(msgspec.Struct, frozen=True):
    """Account-level information."""

    user_id: str | None = None
    user_email: str | None = None
    user_alias: str | None = None
    username: str | None = None
    spend: float | None = None
    max_budget: float | None = None


class AccountInfo(msgspec.Struct, frozen=True):
    """Normalized ``/user/info`` payload."""

    user_info: UserInfo = msgspec.field(default_factory=UserInfo)
    keys: tuple[KeyRecord, ...] = ()


class ResolvedIdentity(msgspec.Struct, frozen=True):
    """Who is spending, and how much of what budget."""

    display_name: str
    spend: float
    max_budget: float

    @property
    def percentage(self) -> float:
        return spend_percentage(self.spend, self.max_budget)


class SpendBand(StrEnum):
    """Color band for a spend percentage."""

    OK = "ok"
    WARNING = "warning"
    CRITICAL = "critical"

    @property
    def color(self) -> str:
        """Return the rich color for this band."""
        match self:
            case SpendBand.OK:
                return "green"
            case SpendBand.WARNING:
                return "yellow"
            case SpendBand.CRITICAL:
                return "red"


class _Wrapped(msgspec.Struct):
    user_info: UserInfo | None = None
    keys: tuple[Any, ...] | None = None


def normalize_account_info(payload: Any) -> AccountInfo:
    """Convert a raw ``/user/info`` payload into an ``AccountInfo``.

    If the payload carries a ``user_info`` object it is used as the user
    record; otherwise the payload itself is the user record.

    Key records that do not parse are skipped.

    Raises:
        InvalidResponse: If the payload is not an object or has fields of the
            wrong type.
    """
    if isinstance(payload, AccountInfo):
        return payload
    if not isinstance(payload, dict):
        raise InvalidResponse(f"Unexpected payload type: {type(payload).__name__}")

    try:
        wrapped = msgspec.convert(payload, type=_Wrapped, strict=False)
        if wrapped.user_info is not None:
            user_info = wrapped.user_info
        else:
            user_info = msgspec.convert(payload, type=UserInfo, strict=False)
    except msgspec.ValidationError as e:
        raise InvalidResponse(f"Unexpected payload: {e}") from e

    return AccountInfo(user_info=user_info, keys=_convert_keys(wrapped.keys or ()))


def _convert_keys(entries: tuple[Any, ...]) -> tuple[KeyRecord, ...]:
    keys = []
    for entry in entries:
        try:
            keys.append(msgspec.convert(entry, type=KeyRecord, strict=False))
        except msgspec.ValidationError as e:
            logger.debug("Skipping key record: %s", e)
    return tuple(keys)


def find_current_key(keys: tuple[KeyRecord, ...], api_key: str | None) -> KeyRecord | None:
    """Return the first key whose name ends with the api key's last 4 chars."""
    if not keys or not api_key:
        return None
    suffix = api_key[-KEY_SUFFIX_LENGTH:]
    for key in keys:
        if key.key_name and key.key_name.endswith(suffix):
            return key
    return None


def resolve_display_name(user_info: UserInfo, key: KeyRecord | None) -> str:
    """Pick the name to show, most specific first."""
    if key is not None and key.key_alias:
        return key.key_alias
    if user_info.user_email:
        return user_info.user_email.split("@")[0]
    return user_info.user_alias or user_info.username or user_info.user_id or "unknown"


def resolve_identity(payload: Any, api_key: str | None) -> ResolvedIdentity:
    """Resolve display name, spend and budget for the caller's api key.

    When the key is found its spend is used and its budget falls back to the
    user budget, then to 100. Otherwise the user-level values are used. A
    budget of 0 is a real value and is kept.
    """
    account = normalize_account_info(payload)
    user = account.user_info
    key = find_current_key(account.keys, api_key)

    if key is not None:
        spend = key.spend or 0.0
        max_budget = _first_present(key.max_budget, user.max_budget, DEFAULT_MAX_BUDGET)
    else:
        spend = user.spend or 0.0
        max_budget = _first_present(user.max_budget, DEFAULT_MAX_BUDGET)

    return ResolvedIdentity(
        display_name=resolve_display_name(user, key),
        spend=spend,
        max_budget=max_budget,
    )


def spend_percentage(spend: float, max_budget: float) -> float:
    """Return spend as a percentage of budget, 0 when the budget is not positive."""
    if max_budget > 0:
        return spend / max_budget * 100
    return 0.0


def round_percentage(percentage: float) -> int:
    """Round half up, so 22.5 shows as 23 and 0.5 as 1."""
    return math.floor(percentage + 0.5)


def spend_band(percentage: float) -> SpendBand:
    """Return the color band for a percentage."""
    if percentage < 50:
        return SpendBand.OK
    elif percentage < 80:
        return SpendBand.WARNING
    else:
        return SpendBand.CRITICAL


def format_currency(value: float | None) -> str:
    """Format a money value with two decimals, ``?`` when unknown."""
    if value is None:
        return "?"
    return f"{value:.2f}"


def _first_present(*values: float | None) -> float:
    for value in values:
        if value is not None:
            return value
    return DEFAULT_MAX_BUDGET
