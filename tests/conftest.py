from datetime import timedelta

import mongomock
import pytest
from django.conf import settings
from django.utils import timezone

from rest_framework.test import APIClient

from modules.core import mongo
from modules.orders.constants import ORDERS_COLLECTION


@pytest.fixture(autouse=True)
def mongo_client(monkeypatch):
    """Replace the process-wide MongoClient with an in-memory mongomock one."""
    client = mongomock.MongoClient()
    monkeypatch.setattr(mongo, "get_client", lambda: client)
    return client


@pytest.fixture()
def orders_collection(mongo_client):
    return mongo_client[settings.MONGODB_DATABASE][ORDERS_COLLECTION]


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def today():
    return timezone.localdate()


@pytest.fixture()
def tomorrow(today):
    return today + timedelta(days=1)


@pytest.fixture()
def order_payload(tomorrow):
    return {
        "clientName": "John Doe",
        "deliveryDate": tomorrow.isoformat(),
        "items": [
            {"fruitName": "Apple", "quantityInKilos": 5},
            {"fruitName": "Banana", "quantityInKilos": 3},
        ],
    }
