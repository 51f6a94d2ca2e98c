"""Unit tests for OrderMongoRepository.

Runs against mongomock.  Covers:
- Insert assigns an ObjectId string and stores the embedded items.
- Replace-by-id keeps a single document and the same id.
- ``find_by_id`` for known, unknown and malformed ids.
- Date conversion to and from BSON datetimes.
"""

from __future__ import annotations

from datetime import date, datetime

import pytest
from bson import ObjectId

from modules.orders.models import Order, OrderItem
from modules.orders.repositories import IOrderRepository, OrderMongoRepository

pytestmark = pytest.mark.unit


@pytest.fixture()
def repo(orders_collection):
    return OrderMongoRepository(orders_collection)


@pytest.fixture()
def new_order():
    return Order(
        client_name="John Doe",
        delivery_date=date(2030, 1, 2),
        items=[
            OrderItem(fruit_name="Apple", quantity_in_kilos=5),
            OrderItem(fruit_name="Banana", quantity_in_kilos=3),
        ],
    )


class TestContract:
    def test_implements_interface(self, repo):
        assert isinstance(repo, IOrderRepository)

    def test_defaults_to_configured_collection(self, orders_collection, new_order):
        saved = OrderMongoRepository().save(new_order)
        assert orders_collection.find_one({"_id": ObjectId(saved.id)}) is not None


class TestSaveInsert:
    def test_assigns_object_id(self, repo, new_order):
        saved = repo.save(new_order)
        assert ObjectId.is_valid(saved.id)

    def test_does_not_mutate_input(self, repo, new_order):
        repo.save(new_order)
        assert new_order.id is None

    def test_stores_document_shape(self, repo, new_order, orders_collection):
        saved = repo.save(new_order)
        document = orders_collection.find_one({"_id": ObjectId(saved.id)})

        assert document["clientName"] == "John Doe"
        assert document["deliveryDate"] == datetime(2030, 1, 2)
        assert document["items"] == [
            {"fruitName": "Apple", "quantityInKilos": 5},
            {"fruitName": "Banana", "quantityInKilos": 3},
        ]

    def test_each_insert_gets_its_own_id(self, repo, new_order):
        first = repo.save(new_order)
        second = repo.save(new_order)
        assert first.id != second.id


class TestSaveReplace:
    def test_replaces_every_field(self, repo, new_order, orders_collection):
        saved = repo.save(new_order)
        replacement = Order(
            id=saved.id,
            client_name="Jane Roe",
            delivery_date=date(2031, 7, 8),
            items=[OrderItem(fruit_name="Cherry", quantity_in_kilos=12)],
        )

        result = repo.save(replacement)

        assert result.id == saved.id
        assert orders_collection.count_documents({}) == 1
        assert repo.find_by_id(saved.id) == replacement

    def test_upserts_unknown_id(self, repo, new_order, orders_collection):
        new_order.id = "507f1f77bcf86cd799439011"
        repo.save(new_order)
        document = orders_collection.find_one(
            {"_id": ObjectId("507f1f77bcf86cd799439011")}
        )
        assert document is not None


class TestFind:
    def test_find_by_id_round_trips(self, repo, new_order):
        saved = repo.save(new_order)
        found = repo.find_by_id(saved.id)

        assert found == saved
        assert isinstance(found.delivery_date, date)
        assert not isinstance(found.delivery_date, datetime)

    def test_find_by_unknown_id_returns_none(self, repo):
        assert repo.find_by_id("507f1f77bcf86cd799439011") is None

    @pytest.mark.parametrize("bad_id", ["not-an-id", "", "123"])
    def test_find_by_malformed_id_returns_none(self, repo, bad_id):
        assert repo.find_by_id(bad_id) is None

    def test_find_all_empty(self, repo):
        assert repo.find_all() == []

    def test_find_all_returns_every_order(self, repo, new_order):
        ids = {repo.save(new_order).id for _ in range(3)}
        assert {order.id for order in repo.find_all()} == ids

    def test_reads_legacy_string_dates(self, repo, orders_collection):
        result = orders_collection.insert_one(
            {
                "clientName": "Legacy",
                "deliveryDate": "2030-01-02",
                "items": [{"fruitName": "Fig", "quantityInKilos": 1}],
            }
        )
        found = repo.find_by_id(str(result.inserted_id))
        assert found.delivery_date == date(2030, 1, 2)
