from azure.communication.email import EmailClient
from azure.core.exceptions import AzureError
from fastapi.concurrency import run_in_threadpool
from functools import lru_cache
from typing import Optional
from models.booking import BookingPayload
from models.email import EmailMessage
from models.errors import NotificationError
from models.settings import Settings
import logging

logger = logging.getLogger(__name__)


class EmailManager:
    """予約通知メールの送信を担当する"""

    def __init__(self, client: EmailClient, sender_address: str, to_address: str):
        self.client = client
        self.sender_address = sender_address
        self.to_address = to_address

    async def send(self, payload: BookingPayload, deposit_amount: int, currency: str) -> dict:
        message = EmailMessage.booking_notification(
            payload,
            deposit_amount,
            currency,
            sender_address=self.sender_address,
            to_address=self.to_address,
        )
        try:
            mail_result = await run_in_threadpool(self._send_blocking, message)
        except AzureError as e:
            logger.exception("予約通知メールの送信に失敗しました")
            raise NotificationError(f"メール送信エラー: {str(e)}") from e

        status = (mail_result or {}).get("status")
        if status != "Succeeded":
            logger.error(f"予約通知メールの送信が完了しませんでした: status={status}")
            raise NotificationError(f"メール送信ステータス: {status}")

        logger.info(f"予約通知メールを送信しました: subject={message.content.subject}")
        return mail_result

    def _send_blocking(self, message: EmailMessage) -> dict:
        poller = self.client.begin_send(message.model_dump(exclude_none=True))
        return poller.result()


@lru_cache(maxsize=1)
def create_notifier(settings: Settings) -> Optional[EmailManager]:
    """通知に必要な設定が揃っている場合のみEmailManagerを返す"""
    if not settings.notifications_enabled:
        logger.warning("メール設定が不足しているため予約通知は無効です")
        return None
    try:
        client = EmailClient.from_connection_string(settings.email_connection_string)
    except ValueError:
        logger.exception("EMAIL_CONNECTION_STRING が不正なため予約通知は無効です")
        return None
    return EmailManager(client, settings.notification_from, settings.notification_to)
