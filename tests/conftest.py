"""Test configuration and fixtures."""
import copy
import pytest

from app import create_app
from config.settings import ServiceConfig
from models.receipt import Receipt
from services.receipt_service import ReceiptService
from storage.memory_storage import InMemoryPointsStorage

TARGET_RECEIPT = {
    "retailer": "Target",
    "purchaseDate": "2022-01-01",
    "purchaseTime": "13:01",
    "items": [
        {"shortDescription": "Mountain Dew 12PK", "price": "6.49"},
        {"shortDescription": "Emils Cheese Pizza", "price": "12.25"},
        {"shortDescription": "Knorr Creamy Chicken", "price": "1.26"},
        {"shortDescription": "Doritos Nacho Cheese", "price": "3.35"},
        {"shortDescription": "   Klarbrunn 12-PK 12 FL OZ  ", "price": "12.00"}
    ],
    "total": "35.35"
}

CORNER_MARKET_RECEIPT = {
    "retailer": "M&M Corner Market",
    "purchaseDate": "2022-03-20",
    "purchaseTime": "14:33",
    "items": [
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"}
    ],
    "total": "9.00"
}


def make_payload(base=None, **overrides):
    """Copy a sample receipt payload, replacing top-level fields."""
    payload = copy.deepcopy(base or TARGET_RECEIPT)
    payload.update(overrides)
    return payload


@pytest.fixture
def target_payload():
    return copy.deepcopy(TARGET_RECEIPT)


@pytest.fixture
def corner_market_payload():
    return copy.deepcopy(CORNER_MARKET_RECEIPT)


@pytest.fixture
def target_receipt():
    return Receipt.from_payload(TARGET_RECEIPT)


@pytest.fixture
def corner_market_receipt():
    return Receipt.from_payload(CORNER_MARKET_RECEIPT)


@pytest.fixture
def storage():
    return InMemoryPointsStorage()


@pytest.fixture
def receipt_service(storage):
    return ReceiptService(storage)


@pytest.fixture
def app(receipt_service):
    """Create a Flask app wired to the test service."""
    with pytest.MonkeyPatch().context() as mp:
        mp.delenv('RECEIPT_POINTS_PORT', raising=False)
        mp.delenv('RECEIPT_ID_MAX_ATTEMPTS', raising=False)
        config = ServiceConfig()
    flask_app = create_app(config, receipt_service=receipt_service, configure_logging=False)
    flask_app.config['TESTING'] = True
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()
