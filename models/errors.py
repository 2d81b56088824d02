"""
予約APIのエラー定義

各エラーは種類(kind)・HTTPステータス・クライアント向けメッセージを持つ。
内部の詳細(message)はログにのみ出力し、レスポンスには public_message を返す。
"""
from enum import Enum
from typing import Dict, List, Optional


class ErrorKind(str, Enum):
    INVALID_REQUEST = "invalid_request"
    GATEWAY = "gateway"
    MAIL = "mail"


class BookingError(Exception):
    kind: ErrorKind = ErrorKind.INVALID_REQUEST
    status_code: int = 400
    default_public_message: Optional[str] = None

    def __init__(self, message: str, status_code: Optional[int] = None, public_message: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.public_message = public_message or self.default_public_message or message

    @property
    def headers(self) -> Optional[Dict[str, str]]:
        return None


class MethodNotAllowedError(BookingError):
    status_code = 405
    default_public_message = "Method not allowed"

    def __init__(self, method: str, allow: str):
        super().__init__(f"Method {method} not allowed")
        self.allow = allow

    @property
    def headers(self) -> Optional[Dict[str, str]]:
        return {"Allow": self.allow}


class InvalidBodyError(BookingError):
    default_public_message = "Invalid JSON body"


class PayloadTooLargeError(InvalidBodyError):
    pass


class MissingFieldsError(BookingError):
    def __init__(self, missing_fields: List[str]):
        self.missing_fields = list(missing_fields)
        super().__init__(f"Missing required fields: {', '.join(self.missing_fields)}")


class PaymentGatewayError(BookingError):
    kind = ErrorKind.GATEWAY
    status_code = 500
    default_public_message = "Unable to initiate payment"


class NotificationError(BookingError):
    kind = ErrorKind.MAIL
    status_code = 500
    default_public_message = "Failed to send notification email"
