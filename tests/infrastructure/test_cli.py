"""End-to-end tests for the click CLI against a JSON store in a temp dir."""

import json

import pytest
from click.testing import CliRunner

from storefront.infrastructure.cli.main import cli


@pytest.fixture
def run(tmp_path, monkeypatch):
    monkeypatch.setenv("STOREFRONT_BACKEND", "json")
    monkeypatch.setenv("STOREFRONT_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("STOREFRONT_LOG_LEVEL", raising=False)
    runner = CliRunner()

    def invoke(*args: str):
        return runner.invoke(cli, list(args))

    return invoke


def _seed(run) -> None:
    assert run(
        "product", "add", "--name", "Widget", "--description", "A widget",
        "--price", "10.00", "--category", "other", "--quantity", "50",
    ).exit_code == 0
    assert run(
        "product", "add", "--name", "Gadget", "--description", "A gadget",
        "--price", "5", "--category", "Other", "--quantity", "50",
    ).exit_code == 0
    assert run(
        "user", "register", "--first-name", "John", "--last-name", "Doe",
        "--email", "john@example.com", "--password", "password123",
        "--city", "New York", "--country", "USA",
    ).exit_code == 0


class TestProductCommands:

    def test_add_and_show(self, run):
        result = run(
            "product", "add", "--name", "Lamp", "--description", "Desk lamp",
            "--price", "25", "--category", "Home & Garden", "--quantity", "3",
            "--tag", "light",
        )
        assert result.exit_code == 0, result.output
        assert "Product #1 'Lamp' added at $25.00" in result.output

        result = run("product", "show", "--id", "1")
        assert result.exit_code == 0, result.output
        assert "Lamp - $25.00" in result.output
        assert "Home & Garden" in result.output

    def test_writes_json_file(self, run, tmp_path):
        _seed(run)
        stored = json.loads((tmp_path / "products.json").read_text())["records"]
        assert [p["name"] for p in stored] == ["Widget", "Gadget"]
        assert stored[0]["price"] == "10.00"

    def test_discount_rate_and_stock(self, run):
        _seed(run)
        result = run("product", "discount", "--id", "1", "--percent", "10")
        assert "now $9.00" in result.output

        result = run("product", "rate", "--id", "1", "--user", "1", "--rating", "5")
        assert "Average rating for 'Widget': 5.00" in result.output

        result = run("product", "stock", "--id", "1", "--delta", "-50")
        assert "Stock for 'Widget' is now 0" in result.output

    def test_bad_discount_is_reported(self, run):
        _seed(run)
        result = run("product", "discount", "--id", "1", "--percent", "150")
        assert result.exit_code == 1
        assert "between 0 and 100" in result.output

    def test_nan_discount_is_reported(self, run):
        _seed(run)
        result = run("product", "discount", "--id", "1", "--percent", "nan")
        assert result.exit_code == 1
        assert "Invalid discount percentage" in result.output
        assert "now $10.00" in run("product", "discount", "--id", "1", "--percent", "0").output

    def test_missing_product(self, run):
        result = run("product", "show", "--id", "99")
        assert result.exit_code == 1
        assert "Product with ID '99' not found" in result.output

    def test_search_and_stats(self, run):
        _seed(run)
        result = run("product", "search", "--min-price", "6", "--max-price", "20")
        assert "Widget" in result.output
        assert "Gadget" not in result.output

        result = run("product", "search", "--text", "gadget")
        assert "Gadget" in result.output

        result = run("product", "stats")
        assert "Other" in result.output
        assert "$7.50" in result.output

    def test_search_needs_exactly_one_criterion(self, run):
        assert run("product", "search").exit_code == 2
        assert run("product", "search", "--text", "x", "--category", "Books").exit_code == 2
        assert run("product", "search", "--min-price", "1").exit_code == 2

    def test_list_pages(self, run):
        _seed(run)
        result = run("product", "list", "--limit", "1")
        assert result.exit_code == 0, result.output
        assert "Page 1 of 2 (2 products)" in result.output


class TestUserAndOrderCommands:

    def test_checkout_flow(self, run):
        _seed(run)
        assert run("user", "wishlist-add", "--id", "1", "--product", "2").exit_code == 0

        result = run("user", "cart-add", "--id", "1", "--product", "1", "--quantity", "2")
        assert "product 1 x2" in result.output
        run("user", "cart-add", "--id", "1", "--product", "2")

        result = run("order", "checkout", "--user", "1", "--payment", "Credit Card", "--clear-cart")
        assert result.exit_code == 0, result.output
        assert "Order #1 created" in result.output
        assert "$25.00" in result.output

        result = run("user", "show", "--id", "1")
        assert "Gadget" in result.output
        assert "Cart:\n  (empty)" in result.output

        result = run("order", "status", "--id", "1", "--status", "shipped")
        assert "Order #1 is now shipped." in result.output

        result = run("order", "list", "--user", "1")
        assert "John Doe" in result.output
        assert "shipped" in result.output

    def test_deleted_product_in_order(self, run):
        _seed(run)
        run("user", "cart-add", "--id", "1", "--product", "2")
        run("order", "checkout", "--user", "1", "--payment", "Cash")
        run("product", "delete", "--id", "2")

        result = run("order", "show", "--id", "1")
        assert result.exit_code == 0, result.output
        assert "(not found) 2" in result.output

    def test_wishlisted_product_stays_missing_after_new_add(self, run):
        _seed(run)
        run("user", "wishlist-add", "--id", "1", "--product", "2")
        run("product", "delete", "--id", "2")
        result = run(
            "product", "add", "--name", "Gizmo", "--description", "Unrelated",
            "--price", "1", "--category", "Other", "--quantity", "1",
        )
        assert "Product #3 'Gizmo'" in result.output

        result = run("user", "show", "--id", "1")
        assert "(product not found)" in result.output
        assert "Gizmo" not in result.output

    def test_duplicate_registration(self, run):
        _seed(run)
        result = run(
            "user", "register", "--first-name", "Jane", "--last-name", "Doe",
            "--email", "JOHN@example.com", "--password", "password123",
        )
        assert result.exit_code == 1
        assert "already registered" in result.output

    def test_invalid_email(self, run):
        result = run(
            "user", "register", "--first-name", "Jane", "--last-name", "Doe",
            "--email", "jane", "--password", "password123",
        )
        assert result.exit_code == 1
        assert "email: is invalid" in result.output

    def test_empty_order_list(self, run):
        assert "No orders found." in run("order", "list").output


def test_demo(run):
    result = run("demo")
    assert result.exit_code == 0, result.output
    assert "Order total items: 3" in result.output
    assert "Order total amount: $2797.00" in result.output
    assert "Demo completed." in result.output


def test_unknown_backend(monkeypatch):
    monkeypatch.setenv("STOREFRONT_BACKEND", "sqlite")
    result = CliRunner().invoke(cli, ["product", "list"])
    assert result.exit_code == 1
    assert "STOREFRONT_BACKEND must be one of" in result.output
