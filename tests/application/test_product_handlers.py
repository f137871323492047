"""Integration tests for the product use cases.

Uses in-memory fake repositories, no file I/O.
"""

import pytest

from storefront.application.add_product import AddProductHandler
from storefront.application.add_rating import AddRatingHandler
from storefront.application.adjust_stock import AdjustStockHandler
from storefront.application.apply_discount import ApplyDiscountHandler
from storefront.application.delete_product import DeleteProductHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import (
    EntityNotFoundError,
    InvalidArgumentError,
    ValidationError,
)
from storefront.domain.model.product import Category
from storefront.domain.model.value_objects import Money
from tests.fakes import FakeProductRepository


def _setup(price: str = "100.00", quantity: int = 10) -> tuple[FakeProductRepository, str]:
    """Fake repo holding one product; returns the repo and the product id."""
    repo = FakeProductRepository()
    product = AddProductHandler(repo).handle(
        name="Laptop",
        description="A portable computer",
        price=price,
        category="Electronics",
        quantity=quantity,
        tags=["computer", " ", "work "],
    )
    return repo, product.id


class TestAddProduct:

    def test_assigns_id_and_persists(self):
        repo, product_id = _setup()
        stored = repo.get_by_id(product_id)
        assert stored.name == "Laptop"
        assert stored.category == Category.ELECTRONICS
        assert stored.version == 1
        assert stored.created_at is not None

    def test_blank_tags_dropped(self):
        repo, product_id = _setup()
        assert repo.get_by_id(product_id).tags == ["computer", "work"]

    def test_missing_name_rejected(self):
        repo = FakeProductRepository()
        with pytest.raises(ValidationError, match="name"):
            AddProductHandler(repo).handle("", "desc", "1", "Books", 1)
        assert repo.count() == 0

    def test_unknown_category_rejected(self):
        with pytest.raises(ValidationError, match="category"):
            AddProductHandler(FakeProductRepository()).handle("X", "desc", "1", "Toys", 1)

    def test_negative_quantity_rejected(self):
        with pytest.raises(ValidationError, match="quantity"):
            AddProductHandler(FakeProductRepository()).handle("X", "desc", "1", "Books", -1)


class TestUpdateProduct:

    def test_patches_only_given_fields(self):
        repo, product_id = _setup()
        UpdateProductHandler(repo).handle(product_id, price="79.99", quantity=3)
        stored = repo.get_by_id(product_id)
        assert stored.price == Money.of("79.99")
        assert stored.quantity == 3
        assert stored.name == "Laptop"

    def test_failed_validation_leaves_stored_product_unchanged(self):
        repo, product_id = _setup()
        with pytest.raises(ValidationError):
            UpdateProductHandler(repo).handle(product_id, name="Renamed", quantity=-5)
        stored = repo.get_by_id(product_id)
        assert stored.name == "Laptop"
        assert stored.quantity == 10
        assert stored.version == 1

    def test_unknown_product(self):
        with pytest.raises(EntityNotFoundError):
            UpdateProductHandler(FakeProductRepository()).handle("99", name="X")


class TestApplyDiscount:

    def test_ten_percent_off_100(self):
        repo, product_id = _setup("100")
        product = ApplyDiscountHandler(repo).handle(product_id, 10)
        assert product.price == Money.of("90")
        assert repo.get_by_id(product_id).price == Money.of("90")

    def test_150_percent_rejected_and_not_saved(self):
        repo, product_id = _setup("100")
        saves = repo.store.saves
        with pytest.raises(InvalidArgumentError):
            ApplyDiscountHandler(repo).handle(product_id, 150)
        assert repo.get_by_id(product_id).price == Money.of("100")
        assert repo.store.saves == saves

    def test_unknown_product(self):
        with pytest.raises(EntityNotFoundError, match="not found"):
            ApplyDiscountHandler(FakeProductRepository()).handle("404", 10)


class TestAddRating:

    def test_rating_is_appended_and_averaged(self):
        repo, product_id = _setup()
        handler = AddRatingHandler(repo)
        handler.handle(product_id, user_id="u1", rating=3)
        product = handler.handle(product_id, user_id="u2", rating=5, review="Great")
        assert product.average_rating == 4
        stored = repo.get_by_id(product_id)
        assert [r.rating for r in stored.ratings] == [3, 5]
        assert stored.ratings[1].review == "Great"

    def test_out_of_range_rejected(self):
        repo, product_id = _setup()
        with pytest.raises(InvalidArgumentError):
            AddRatingHandler(repo).handle(product_id, user_id="u1", rating=6)
        assert repo.get_by_id(product_id).ratings == []


class TestAdjustStock:

    def test_adjusts(self):
        repo, product_id = _setup(quantity=5)
        AdjustStockHandler(repo).handle(product_id, -5)
        stored = repo.get_by_id(product_id)
        assert stored.quantity == 0
        assert not stored.is_in_stock()

    def test_cannot_oversell(self):
        repo, product_id = _setup(quantity=5)
        with pytest.raises(InvalidArgumentError):
            AdjustStockHandler(repo).handle(product_id, -6)
        assert repo.get_by_id(product_id).quantity == 5


class TestDeleteProduct:

    def test_deletes(self):
        repo, product_id = _setup()
        DeleteProductHandler(repo).handle(product_id)
        assert repo.get_by_id(product_id) is None

    def test_unknown_product(self):
        with pytest.raises(EntityNotFoundError):
            DeleteProductHandler(FakeProductRepository()).handle("1")
