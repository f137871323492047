"""Tests for entity/document mapping and MongoDB query translation.

No database is needed; these exercise the pure functions the stores use.
"""

from datetime import datetime, timezone
from decimal import Decimal

import pytest
from bson.decimal128 import Decimal128
from bson.objectid import ObjectId

from storefront.domain.model.order import Order, OrderItem, OrderStatus
from storefront.domain.model.product import Category, Product
from storefront.domain.model.user import User
from storefront.domain.model.value_objects import Address, Money, Quantity
from storefront.domain.queries import CategoryFilter, PriceRangeFilter, TextFilter
from storefront.infrastructure.persistence.documents import (
    address_from_document,
    order_from_document,
    order_to_document,
    product_from_document,
    product_to_document,
    user_from_document,
    user_to_document,
)
from storefront.infrastructure.persistence.mongo_product_repository import filter_to_query
from storefront.infrastructure.persistence.mongo_store import DecimalCodec, to_object_id

STAMP = datetime(2024, 3, 1, 12, 30, tzinfo=timezone.utc)


class TestProductDocument:

    def test_fields(self):
        product = Product(
            id="1",
            name="Book",
            description="A novel",
            price=Money.of("12.50"),
            category=Category.BOOKS,
            quantity=7,
            created_at=STAMP,
            version=2,
        )
        product.add_rating("u1", 5, "Loved it", date=STAMP)
        doc = product_to_document(product)

        assert "id" not in doc
        assert doc["price"] == Decimal("12.50")
        assert doc["category"] == "Books"
        assert doc["ratings"] == [
            {"user_id": "u1", "rating": 5, "review": "Loved it", "date": STAMP}
        ]

        restored = product_from_document("1", doc)
        assert restored == product

    def test_reads_string_values(self):
        doc = {
            "name": "Book",
            "price": "8.00",
            "category": "Books",
            "quantity": 1,
            "created_at": "2024-03-01T12:30:00+00:00",
        }
        product = product_from_document("9", doc)
        assert product.price == Money.of("8.00")
        assert product.created_at == STAMP
        assert product.ratings == []
        assert product.version == 0


class TestUserDocument:

    def test_round_trip(self):
        user = User(
            id="u1",
            first_name="Jane",
            last_name="Smith",
            email="jane@example.com",
            password="password123",
            address=Address("456 Oak Ave", "Los Angeles", "CA", "90210", "USA"),
            phone_number="5551234567",
            wishlist=["p1"],
        )
        user.add_to_cart("p2", 2)
        assert user_from_document("u1", user_to_document(user)) == user

    def test_missing_address(self):
        assert address_from_document(None) == Address()


class TestOrderDocument:

    def test_round_trip(self):
        order = Order(
            id="o1",
            user_id="u1",
            items=[OrderItem("p1", Quantity(2), Money.of("3.25"))],
            shipping_address=Address(city="Boston"),
            payment_method="Cash",
            status=OrderStatus.SHIPPED,
            created_at=STAMP,
        )
        doc = order_to_document(order)
        assert doc["status"] == "shipped"
        assert doc["items"][0]["quantity"] == 2
        assert order_from_document("o1", doc) == order


class TestFilterToQuery:

    def test_category(self):
        assert filter_to_query(CategoryFilter(Category.SPORTS)) == {"category": "Sports"}

    def test_price_range(self):
        query = filter_to_query(PriceRangeFilter(Money.of("500"), Money.of("1500")))
        assert query == {"price": {"$gte": Decimal("500"), "$lte": Decimal("1500")}}

    def test_text(self):
        assert filter_to_query(TextFilter(" iPhone  Pro ")) == {"$text": {"$search": "iphone pro"}}


class TestMongoHelpers:

    def test_decimal_codec(self):
        codec = DecimalCodec()
        stored = codec.transform_python(Decimal("19.99"))
        assert isinstance(stored, Decimal128)
        assert codec.transform_bson(stored) == Decimal("19.99")

    def test_to_object_id(self):
        oid = ObjectId()
        assert to_object_id(str(oid)) == oid

    @pytest.mark.parametrize("raw", [None, "", "1", "not-an-object-id"])
    def test_to_object_id_invalid(self, raw):
        assert to_object_id(raw) is None
