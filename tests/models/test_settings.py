import pytest
from pydantic import ValidationError
from models.settings import Settings, parse_currency, parse_deposit_amount


@pytest.mark.parametrize("raw,expected", [
    ("1500", 1500),
    (" 2500 ", 2500),
    ("1500abc", 1500),
    ("12.7", 12),
    ("-5", 0),
    ("0", 0),
    ("abc", 0),
    ("", 0),
    (None, 0),
])
def test_parse_deposit_amount(raw, expected):
    assert parse_deposit_amount(raw) == expected


@pytest.mark.parametrize("raw,expected", [(None, "usd"), ("", "usd"), ("EUR", "eur"), (" gbp ", "gbp"), ("dollars", "usd"), ("u1d", "usd")])
def test_parse_currency(raw, expected):
    assert parse_currency(raw) == expected


def test_payment_required(payment_env):
    settings = Settings.from_env(payment_env)
    assert settings.secret_key_present is True
    assert settings.payment_required is True


def test_blank_keys_are_absent(payment_env):
    settings = Settings.from_env({**payment_env, "STRIPE_PUBLISHABLE_KEY": "  ", "STRIPE_SECRET_KEY": ""})
    assert settings.publishable_key is None
    assert settings.secret_key_present is False
    assert settings.payment_required is False


def test_secret_key_is_not_in_repr(payment_env):
    assert "sk_test_123" not in repr(Settings.from_env(payment_env))


def test_settings_are_frozen(payment_env):
    settings = Settings.from_env(payment_env)
    with pytest.raises(ValidationError):
        settings.deposit_amount = 1


def test_notifications_enabled():
    env = {
        "EMAIL_CONNECTION_STRING": "endpoint=https://example.communication.azure.com/;accesskey=abc",
        "BOOKING_NOTIFICATION_TO": "owner@lacasa.example",
        "SENDER_ADDRESS": "DoNotReply@lacasa.example",
    }
    settings = Settings.from_env(env)
    assert settings.notification_from == "DoNotReply@lacasa.example"
    assert settings.notifications_enabled is True

    settings = Settings.from_env({**env, "BOOKING_NOTIFICATION_FROM": "bookings@lacasa.example"})
    assert settings.notification_from == "bookings@lacasa.example"

    env.pop("BOOKING_NOTIFICATION_TO")
    assert Settings.from_env(env).notifications_enabled is False


def test_public_config(payment_env):
    assert Settings.from_env(payment_env).public_config() == {
        "publishableKey": "pk_test_123",
        "paymentRequired": True,
        "currency": "usd",
        "depositAmount": 1500,
    }
