from fastapi.concurrency import run_in_threadpool
from functools import lru_cache
from typing import Optional
from models.booking import BookingPayload
from models.errors import PaymentGatewayError
from models.payment import PaymentIntent
from models.settings import Settings
import logging
import stripe

logger = logging.getLogger(__name__)


class PaymentGateway:
    """Stripe PaymentIntent の作成・取得"""

    def __init__(self, api_key: str, api_version: Optional[str] = None):
        self._api_key = api_key
        self._api_version = api_version

    def _request_options(self) -> dict:
        options = {"api_key": self._api_key}
        if self._api_version:
            options["stripe_version"] = self._api_version
        return options

    async def create_intent(self, payload: BookingPayload, amount: int, currency: str) -> PaymentIntent:
        try:
            intent = await run_in_threadpool(
                stripe.PaymentIntent.create,
                amount=amount,
                currency=currency,
                description=f"Booking enquiry from {payload.name}",
                metadata=payload.to_metadata(),
                **self._request_options(),
            )
        except stripe.StripeError as e:
            logger.exception("Stripe payment intent error")
            raise PaymentGatewayError(f"PaymentIntentの作成に失敗しました: {str(e)}") from e

        logger.info(f"PaymentIntentを作成しました: {intent.id}")
        return PaymentIntent.from_stripe(intent)

    async def retrieve_intent(self, intent_id: str) -> PaymentIntent:
        try:
            intent = await run_in_threadpool(
                stripe.PaymentIntent.retrieve,
                intent_id,
                **self._request_options(),
            )
        except stripe.StripeError as e:
            logger.exception(f"PaymentIntentの取得に失敗しました: {intent_id}")
            raise PaymentGatewayError(f"PaymentIntentの取得に失敗しました: {str(e)}") from e
        return PaymentIntent.from_stripe(intent)


@lru_cache(maxsize=1)
def create_payment_gateway(settings: Settings) -> Optional[PaymentGateway]:
    """シークレットキーが設定されている場合のみPaymentGatewayを返す"""
    if not settings.secret_key_present:
        return None
    return PaymentGateway(settings.stripe_secret_key, settings.stripe_api_version)
