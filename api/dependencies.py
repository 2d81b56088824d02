from fastapi import Depends
from functools import lru_cache
from typing import Optional
from managers.email_manager import EmailManager, create_notifier
from managers.payment_manager import PaymentGateway, create_payment_gateway
from models.settings import Settings


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()


def get_payment_gateway(settings: Settings = Depends(get_settings)) -> Optional[PaymentGateway]:
    return create_payment_gateway(settings)


def get_notifier(settings: Settings = Depends(get_settings)) -> Optional[EmailManager]:
    return create_notifier(settings)
