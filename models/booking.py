from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel
from typing import Any, List, Literal, Optional
from models.payment import PaymentDetails, PaymentStatus

BookingAction = Literal['submit', 'confirm']

REQUIRED_FIELDS: List[str] = ['name', 'email', 'phone', 'check_in', 'check_out', 'guests']


class BookingPayload(BaseModel):
    """予約問い合わせフォームから送信される内容"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra='ignore')

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    check_in: Optional[str] = None
    check_out: Optional[str] = None
    guests: Optional[str] = None  # 数値で送られてきた場合も文字列として扱う
    message: Optional[str] = None
    action: Optional[str] = None
    payment_intent_id: Optional[str] = None
    payment_status: Optional[str] = None

    @field_validator('*', mode='before')
    @classmethod
    def scalar_to_str(cls, value: Any) -> Any:
        if isinstance(value, bool):
            return str(value).lower()
        if isinstance(value, (int, float)):
            return str(value)
        return value

    @property
    def resolved_action(self) -> BookingAction:
        return 'confirm' if self.action == 'confirm' else 'submit'

    def missing_fields(self) -> List[str]:
        """未入力(空白のみを含む)の必須項目をフォームの項目名で返す"""
        return [
            to_camel(field) for field in REQUIRED_FIELDS
            if not (getattr(self, field) or '').strip()
        ]

    def to_metadata(self) -> dict:
        return {
            'name': self.name or '',
            'email': self.email or '',
            'phone': self.phone or '',
            'check_in': self.check_in or '',
            'check_out': self.check_out or '',
            'guests': str(self.guests or ''),
            'message': self.message or '',
        }


class SubmitResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool = True
    payment_required: bool
    payment: Optional[PaymentDetails] = None


class ConfirmResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool = True
    payment: Optional[PaymentStatus] = None
    mail_error: Optional[str] = None
