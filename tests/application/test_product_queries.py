"""Integration tests for catalog queries."""

import pytest

from storefront.application.product_queries import ProductQueries
from storefront.domain.exceptions import (
    EntityNotFoundError,
    InvalidArgumentError,
    ValidationError,
)
from storefront.domain.model.product import Category, Product
from storefront.domain.model.value_objects import Money
from tests.fakes import FakeProductRepository


def _product(name: str, price: str, category: Category, description: str) -> Product:
    return Product(
        id=None,
        name=name,
        description=description,
        price=Money.of(price),
        category=category,
        quantity=10,
    )


def _setup() -> ProductQueries:
    repo = FakeProductRepository([
        _product("iPhone 15 Pro", "999", Category.ELECTRONICS, "Latest iPhone with advanced camera system"),
        _product("Samsung Galaxy S23", "899", Category.ELECTRONICS, "Android flagship smartphone"),
        _product("MacBook Pro", "1999", Category.ELECTRONICS, "Professional laptop for developers"),
        _product("Nike Air Max", "120", Category.CLOTHING, "Comfortable running shoes"),
    ])
    return ProductQueries(repo)


class TestGet:

    def test_dto(self):
        dto = _setup().get("1")
        assert dto.name == "iPhone 15 Pro"
        assert dto.price == "$999.00"
        assert dto.category == "Electronics"
        assert dto.display_name == "iPhone 15 Pro - $999.00"
        assert dto.average_rating == 0
        assert dto.is_in_stock

    def test_not_found(self):
        with pytest.raises(EntityNotFoundError):
            _setup().get("42")


class TestFind:

    def test_by_category(self):
        names = [p.name for p in _setup().by_category("clothing")]
        assert names == ["Nike Air Max"]

    def test_by_unknown_category(self):
        with pytest.raises(ValidationError):
            _setup().by_category("Toys")

    def test_by_price_range(self):
        names = sorted(p.name for p in _setup().by_price_range("500", "1500"))
        assert names == ["Samsung Galaxy S23", "iPhone 15 Pro"]

    def test_price_range_inverted(self):
        with pytest.raises(InvalidArgumentError):
            _setup().by_price_range("1500", "500")

    def test_search(self):
        names = [p.name for p in _setup().search("iPhone")]
        assert names == ["iPhone 15 Pro"]

    def test_search_description(self):
        names = [p.name for p in _setup().search("shoes")]
        assert names == ["Nike Air Max"]


class TestPage:

    def test_first_page_newest_first(self):
        page = _setup().page(page=1, limit=3)
        assert [p.name for p in page.products] == [
            "Nike Air Max",
            "MacBook Pro",
            "Samsung Galaxy S23",
        ]
        assert page.total == 4
        assert page.total_pages == 2
        assert page.current_page == 1

    def test_last_page(self):
        page = _setup().page(page=2, limit=3)
        assert [p.name for p in page.products] == ["iPhone 15 Pro"]

    def test_past_the_end_is_empty(self):
        assert _setup().page(page=5, limit=3).products == []

    def test_empty_catalog(self):
        page = ProductQueries(FakeProductRepository()).page()
        assert page.total == 0
        assert page.total_pages == 0

    @pytest.mark.parametrize("page, limit", [(0, 10), (1, 0)])
    def test_bad_arguments(self, page, limit):
        with pytest.raises(InvalidArgumentError):
            _setup().page(page=page, limit=limit)


class TestCategoryStats:

    def test_stats(self):
        stats = _setup().category_stats()
        assert [(s.category.value, s.count, str(s.average_price)) for s in stats] == [
            ("Electronics", 3, "$1299.00"),
            ("Clothing", 1, "$120.00"),
        ]
