"""Unit tests for product filters."""

import pytest

from storefront.domain.exceptions import InvalidArgumentError
from storefront.domain.model.product import Category, Product
from storefront.domain.model.value_objects import Money
from storefront.domain.queries import CategoryFilter, PriceRangeFilter, TextFilter


def _product(name: str, price: str, category: Category = Category.ELECTRONICS, description: str = "") -> Product:
    return Product(
        id=None,
        name=name,
        description=description or f"About {name}",
        price=Money.of(price),
        category=category,
        quantity=1,
    )


class TestCategoryFilter:

    def test_matches_same_category(self):
        criteria = CategoryFilter(Category.CLOTHING)
        assert criteria.matches(_product("Shirt", "20", Category.CLOTHING))
        assert not criteria.matches(_product("Phone", "20", Category.ELECTRONICS))


class TestPriceRangeFilter:

    def test_inclusive_bounds(self):
        criteria = PriceRangeFilter(Money.of("500"), Money.of("1500"))
        assert criteria.matches(_product("A", "500"))
        assert criteria.matches(_product("B", "999"))
        assert criteria.matches(_product("C", "1500"))
        assert not criteria.matches(_product("D", "1500.01"))
        assert not criteria.matches(_product("E", "499.99"))

    def test_min_above_max_rejected(self):
        with pytest.raises(InvalidArgumentError, match="above maximum"):
            PriceRangeFilter(Money.of("10"), Money.of("5"))


class TestTextFilter:

    def test_matches_name_case_insensitive(self):
        assert TextFilter("iphone").matches(_product("iPhone 15 Pro", "999"))

    def test_matches_description(self):
        product = _product("MacBook Pro", "1999", description="Professional laptop for developers")
        assert TextFilter("laptop").matches(product)

    def test_any_token_matches(self):
        assert TextFilter("tablet  galaxy").matches(_product("Samsung Galaxy S23", "899"))

    def test_no_match(self):
        assert not TextFilter("shoes").matches(_product("iPhone", "999"))

    def test_tokens(self):
        assert TextFilter("  Running  SHOES ").tokens == ["running", "shoes"]

    def test_blank_rejected(self):
        with pytest.raises(InvalidArgumentError, match="Search text is required"):
            TextFilter("   ")
