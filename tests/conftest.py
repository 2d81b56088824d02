import pytest
from fastapi.testclient import TestClient
from api import app
from api.dependencies import get_notifier, get_payment_gateway, get_settings
from models.errors import NotificationError, PaymentGatewayError
from models.payment import PaymentIntent
from models.settings import Settings

PAYMENT_ENV = {
    'STRIPE_SECRET_KEY': 'sk_test_123',
    'STRIPE_PUBLISHABLE_KEY': 'pk_test_123',
    'STRIPE_CURRENCY': 'USD',
    'STRIPE_DEPOSIT_AMOUNT': '1500',
}


class FakePaymentGateway:
    def __init__(self, status='succeeded', create_error=None, retrieve_error=None):
        self.status = status
        self.create_error = create_error
        self.retrieve_error = retrieve_error
        self.created = []
        self.retrieved = []

    async def create_intent(self, payload, amount, currency):
        self.created.append((payload, amount, currency))
        if self.create_error is not None:
            raise self.create_error
        return PaymentIntent(
            id='pi_test_1',
            client_secret='pi_test_1_secret_abc',
            amount=amount,
            currency=currency,
            status='requires_payment_method',
        )

    async def retrieve_intent(self, intent_id):
        self.retrieved.append(intent_id)
        if self.retrieve_error is not None:
            raise self.retrieve_error
        return PaymentIntent(id=intent_id, status=self.status)


class FakeNotifier:
    def __init__(self, error=None):
        self.error = error
        self.sent = []

    async def send(self, payload, deposit_amount, currency):
        self.sent.append((payload, deposit_amount, currency))
        if self.error is not None:
            raise self.error


@pytest.fixture
def booking_form():
    return {
        'name': 'Jane Guest',
        'email': 'jane@example.com',
        'phone': '+44 7700 900123',
        'checkIn': '2026-07-01',
        'checkOut': '2026-07-08',
        'guests': 4,
        'message': 'Arriving late in the evening',
    }


@pytest.fixture
def payment_settings():
    return Settings.from_env(PAYMENT_ENV)


@pytest.fixture
def free_settings():
    return Settings.from_env({})


@pytest.fixture
def gateway():
    return FakePaymentGateway()


@pytest.fixture
def notifier():
    return FakeNotifier()


@pytest.fixture
def make_client():
    def _make_client(settings, gateway=None, notifier=None):
        app.dependency_overrides[get_settings] = lambda: settings
        app.dependency_overrides[get_payment_gateway] = lambda: gateway
        app.dependency_overrides[get_notifier] = lambda: notifier
        return TestClient(app)

    yield _make_client
    app.dependency_overrides.clear()


@pytest.fixture
def gateway_failure():
    return PaymentGatewayError('Stripe payment intent error: Invalid API Key provided: sk_test_***123')


@pytest.fixture
def mail_failure():
    return NotificationError('メール送信エラー: connection refused')


@pytest.fixture
def payment_env():
    return dict(PAYMENT_ENV)


@pytest.fixture
def gateway_factory():
    return FakePaymentGateway


@pytest.fixture
def notifier_factory():
    return FakeNotifier
