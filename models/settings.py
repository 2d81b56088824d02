from pydantic import BaseModel, ConfigDict, Field
from typing import Mapping, Optional
import logging
import os
import re

logger = logging.getLogger(__name__)

DEFAULT_CURRENCY = "usd"
DEFAULT_STRIPE_API_VERSION = "2022-11-15"

_INTEGER_PREFIX = re.compile(r"^\s*([+-]?\d+)")
_CURRENCY_CODE = re.compile(r"^[a-z]{3}$")


def _optional(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def parse_deposit_amount(raw: Optional[str]) -> int:
    """先頭の整数部分を読み取る。数値でない・0以下の場合は0"""
    if raw is None:
        return 0
    match = _INTEGER_PREFIX.match(raw)
    if match is None:
        return 0
    amount = int(match.group(1))
    return amount if amount > 0 else 0


def parse_currency(raw: Optional[str]) -> str:
    currency = (_optional(raw) or DEFAULT_CURRENCY).lower()
    if not _CURRENCY_CODE.match(currency):
        logger.warning(f"通貨コードが不正なため {DEFAULT_CURRENCY} を使用します: {raw!r}")
        return DEFAULT_CURRENCY
    return currency


class Settings(BaseModel):
    """プロセス起動時に一度だけ環境変数から構築される設定"""

    model_config = ConfigDict(frozen=True)

    stripe_secret_key: Optional[str] = Field(default=None, repr=False)
    publishable_key: Optional[str] = None
    currency: str = DEFAULT_CURRENCY
    deposit_amount: int = Field(default=0, ge=0)
    stripe_api_version: str = DEFAULT_STRIPE_API_VERSION
    email_connection_string: Optional[str] = Field(default=None, repr=False)
    notification_to: Optional[str] = None
    notification_from: Optional[str] = None
    allowed_origin: str = "*"

    @property
    def secret_key_present(self) -> bool:
        return bool(self.stripe_secret_key)

    @property
    def payment_required(self) -> bool:
        return bool(self.secret_key_present and self.publishable_key and self.deposit_amount > 0)

    @property
    def notifications_enabled(self) -> bool:
        return bool(self.email_connection_string and self.notification_to and self.notification_from)

    def public_config(self) -> dict:
        return {
            "publishableKey": self.publishable_key,
            "paymentRequired": self.payment_required,
            "currency": self.currency,
            "depositAmount": self.deposit_amount,
        }

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            stripe_secret_key=_optional(env.get("STRIPE_SECRET_KEY")),
            publishable_key=_optional(env.get("STRIPE_PUBLISHABLE_KEY")),
            currency=parse_currency(env.get("STRIPE_CURRENCY")),
            deposit_amount=parse_deposit_amount(env.get("STRIPE_DEPOSIT_AMOUNT")),
            stripe_api_version=_optional(env.get("STRIPE_API_VERSION")) or DEFAULT_STRIPE_API_VERSION,
            email_connection_string=_optional(env.get("EMAIL_CONNECTION_STRING")),
            notification_to=_optional(env.get("BOOKING_NOTIFICATION_TO")),
            notification_from=_optional(env.get("BOOKING_NOTIFICATION_FROM")) or _optional(env.get("SENDER_ADDRESS")),
            allowed_origin=_optional(env.get("ALLOWED_ORIGIN")) or "*",
        )
