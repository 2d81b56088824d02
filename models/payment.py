# models/payment.py
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional


class PaymentIntent(BaseModel):
    id: str  # Stripe Payment Intent ID
    client_secret: Optional[str] = None  # フロントエンドで支払いを完了するために必要
    amount: Optional[int] = None  # 最小通貨単位
    currency: Optional[str] = None
    status: str  # 支払いステータス

    @classmethod
    def from_stripe(cls, intent) -> 'PaymentIntent':
        return cls(
            id=intent.id,
            client_secret=getattr(intent, 'client_secret', None),
            amount=getattr(intent, 'amount', None),
            currency=getattr(intent, 'currency', None),
            status=intent.status,
        )


class PaymentDetails(BaseModel):
    """支払いフォーム表示用にクライアントへ返す情報"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    client_secret: Optional[str]
    id: str
    amount: Optional[int]
    currency: Optional[str]

    @classmethod
    def from_intent(cls, intent: PaymentIntent) -> 'PaymentDetails':
        return cls(
            client_secret=intent.client_secret,
            id=intent.id,
            amount=intent.amount,
            currency=intent.currency,
        )


class PaymentStatus(BaseModel):
    id: str
    status: str
