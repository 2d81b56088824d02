from pydantic import BaseModel
from typing import List, Optional
from html import escape
from models.booking import BookingPayload
from utils.currency import format_currency

SUBJECT_BASE = "New booking enquiry"
DEPOSIT_RECEIVED_SUFFIX = " (deposit received)"
NO_DEPOSIT = "No deposit charged"


class EmailAddress(BaseModel):
    address: str


class EmailRecipients(BaseModel):
    to: List[EmailAddress]


class EmailContent(BaseModel):
    subject: str
    plainText: str
    html: Optional[str] = None


class EmailMessage(BaseModel):
    """Azure Communication Email の begin_send に渡すメッセージ"""

    senderAddress: str
    recipients: EmailRecipients
    content: EmailContent

    @classmethod
    def booking_notification(
        cls, payload: BookingPayload, deposit_amount: int, currency: str,
        sender_address: str, to_address: str,
    ) -> 'EmailMessage':
        """
        予約問い合わせを運営者へ通知するメールを作成する

        Args:
            payload: 予約問い合わせの内容
            deposit_amount: デポジット額(最小通貨単位)
            currency: 通貨コード
            sender_address: 送信元アドレス
            to_address: 通知先アドレス

        Returns:
            EmailMessage: 通知用のEmailMessageインスタンス
        """
        lines = booking_detail_lines(payload)
        deposit = deposit_display(deposit_amount, currency)

        return cls(
            senderAddress=sender_address,
            recipients=EmailRecipients(to=[EmailAddress(address=to_address)]),
            content=EmailContent(
                subject=notification_subject(payload.payment_status),
                plainText=_create_text(lines, deposit),
                html=_create_html(lines, deposit),
            ),
        )


def notification_subject(payment_status: Optional[str]) -> str:
    if payment_status and payment_status.lower() == 'succeeded':
        return SUBJECT_BASE + DEPOSIT_RECEIVED_SUFFIX
    return SUBJECT_BASE


def deposit_display(deposit_amount: int, currency: str) -> str:
    if not deposit_amount:
        return NO_DEPOSIT
    return format_currency(deposit_amount, currency)


def booking_detail_lines(payload: BookingPayload) -> List[tuple]:
    """(ラベル, 値) の一覧。任意項目は値がある場合のみ含める"""
    lines = [
        ("Name", payload.name),
        ("Email", payload.email),
        ("Phone", payload.phone),
        ("Check-in", payload.check_in),
        ("Check-out", payload.check_out),
        ("Guests", payload.guests),
    ]
    optional = [
        ("Message", payload.message),
        ("Payment status", payload.payment_status),
        ("Payment intent", payload.payment_intent_id),
    ]
    lines.extend((label, value) for label, value in optional if value)
    return lines


def _create_text(lines: List[tuple], deposit: str) -> str:
    details = "\n".join(f"{label}: {value or ''}" for label, value in lines)
    return f"{details}\n\nDeposit amount: {deposit}"


def _create_html(lines: List[tuple], deposit: str) -> str:
    paragraphs = "".join(f"<p>{escape(label)}: {escape(value or '')}</p>" for label, value in lines)
    return f"<div>{paragraphs}<p><strong>Deposit amount:</strong> {escape(deposit)}</p></div>"
