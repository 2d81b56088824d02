"""
予約問い合わせの処理

リクエストボディの読み取り、必須項目の検証、PaymentIntentの作成、
確認後の通知メール送信を順に行う。
"""
from typing import Any, AsyncIterator, Mapping, Optional, Union
from pydantic import ValidationError
from managers.email_manager import EmailManager
from managers.payment_manager import PaymentGateway
from models.booking import BookingPayload, ConfirmResponse, SubmitResponse
from models.errors import InvalidBodyError, MissingFieldsError, NotificationError, PayloadTooLargeError
from models.payment import PaymentDetails, PaymentStatus
from models.settings import Settings
import json
import logging

logger = logging.getLogger(__name__)

MAX_BODY_BYTES = 1_000_000

BodySource = Union[Mapping[str, Any], AsyncIterator[bytes]]


async def read_json_body(source: BodySource, limit: int = MAX_BODY_BYTES) -> dict:
    """リクエストボディをJSONとして読み取る。解析済みの場合はそのまま返す"""
    if isinstance(source, Mapping):
        return dict(source)

    data = bytearray()
    async for chunk in source:
        data.extend(chunk)
        if len(data) > limit:
            raise PayloadTooLargeError(f"リクエストボディが上限({limit} bytes)を超えました")

    if not data:
        return {}
    try:
        body = json.loads(bytes(data))
    except (ValueError, RecursionError) as e:
        raise InvalidBodyError(f"JSONの解析に失敗しました: {str(e)}") from e
    if not isinstance(body, dict):
        raise InvalidBodyError(f"JSONオブジェクトではありません: {type(body).__name__}")
    return body


def parse_payload(body: Mapping[str, Any]) -> BookingPayload:
    try:
        return BookingPayload.model_validate(body)
    except ValidationError as e:
        raise InvalidBodyError(f"予約内容の形式が不正です: {str(e)}") from e


def validate_booking(payload: BookingPayload) -> None:
    missing = payload.missing_fields()
    if missing:
        raise MissingFieldsError(missing)


async def submit_booking(
    payload: BookingPayload,
    settings: Settings,
    gateway: Optional[PaymentGateway],
) -> SubmitResponse:
    validate_booking(payload)

    payment = None
    if settings.payment_required and gateway is not None:
        intent = await gateway.create_intent(payload, settings.deposit_amount, settings.currency)
        payment = PaymentDetails.from_intent(intent)

    return SubmitResponse(payment_required=settings.payment_required, payment=payment)


async def confirm_booking(
    payload: BookingPayload,
    settings: Settings,
    gateway: Optional[PaymentGateway],
    notifier: Optional[EmailManager],
) -> ConfirmResponse:
    """決済完了後の確認。支払い状況を再取得し、運営者へ通知する"""
    response = ConfirmResponse()

    if payload.payment_intent_id and gateway is not None:
        try:
            intent = await gateway.retrieve_intent(payload.payment_intent_id)
            response.payment = PaymentStatus(id=intent.id, status=intent.status)
            payload = payload.model_copy(update={"payment_status": intent.status})
        except Exception:
            logger.exception(f"支払い状況を取得できませんでした: {payload.payment_intent_id}")
            response.payment = PaymentStatus(id=payload.payment_intent_id, status="unknown")

    if not payload.payment_status:
        default_status = "payment-pending" if settings.payment_required else "not-charged"
        payload = payload.model_copy(update={"payment_status": default_status})

    if notifier is not None:
        try:
            await notifier.send(payload, settings.deposit_amount, settings.currency)
        except Exception:
            logger.exception("予約通知メールを送信できませんでした")
            response.mail_error = NotificationError.default_public_message

    return response
