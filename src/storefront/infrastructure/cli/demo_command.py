"""Guided walkthrough: seeds sample data and exercises every use case."""

from __future__ import annotations

import click

from storefront.application.add_product import AddProductHandler
from storefront.application.add_rating import AddRatingHandler
from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.add_to_wishlist import AddToWishlistHandler
from storefront.application.apply_discount import ApplyDiscountHandler
from storefront.application.finalize_order import FinalizeOrderHandler
from storefront.application.product_queries import ProductQueries
from storefront.application.register_user import RegisterUserHandler
from storefront.application.show_user import ShowUserHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.user import User
from storefront.domain.model.value_objects import Address
from storefront.domain.repository.user_repository import UserRepository
from storefront.infrastructure.bootstrap import Repositories, open_repositories
from storefront.infrastructure.cli.common import pass_settings
from storefront.infrastructure.config import Settings

SAMPLE_PRODUCTS = [
    {
        "name": "iPhone 15 Pro",
        "description": "Latest iPhone with advanced camera system",
        "price": "999",
        "category": "Electronics",
        "quantity": 50,
        "tags": ["smartphone", "apple", "mobile"],
    },
    {
        "name": "Samsung Galaxy S23",
        "description": "Android flagship smartphone",
        "price": "899",
        "category": "Electronics",
        "quantity": 30,
        "tags": ["smartphone", "samsung", "android"],
    },
    {
        "name": "MacBook Pro",
        "description": "Professional laptop for developers",
        "price": "1999",
        "category": "Electronics",
        "quantity": 20,
        "tags": ["laptop", "apple", "computer"],
    },
    {
        "name": "Nike Air Max",
        "description": "Comfortable running shoes",
        "price": "120",
        "category": "Clothing",
        "quantity": 100,
        "tags": ["shoes", "nike", "sports"],
    },
]

SAMPLE_USERS = [
    {
        "first_name": "John",
        "last_name": "Doe",
        "email": "john@example.com",
        "password": "password123",
        "address": Address("123 Main St", "New York", "NY", "10001", "USA"),
    },
    {
        "first_name": "Jane",
        "last_name": "Smith",
        "email": "jane@example.com",
        "password": "password123",
        "address": Address("456 Oak Ave", "Los Angeles", "CA", "90210", "USA"),
    },
]


def _section(title: str) -> None:
    click.echo()
    click.secho(f"--- {title} ---", bold=True)


def _register_or_reuse(user_repo: UserRepository, spec: dict) -> User:
    existing = user_repo.get_by_email(spec["email"])
    if existing is not None:
        return existing
    return RegisterUserHandler(user_repo).handle(**spec)


def run_demo(repos: Repositories) -> None:
    queries = ProductQueries(repos.products)

    _section("Creating sample products")
    add_product = AddProductHandler(repos.products)
    products = [add_product.handle(**spec) for spec in SAMPLE_PRODUCTS]
    click.echo(f"Created products: {', '.join(p.name for p in products)}")

    _section("Creating sample users")
    users = [_register_or_reuse(repos.users, spec) for spec in SAMPLE_USERS]
    click.echo(f"Users: {', '.join(u.full_name for u in users)}")

    _section("Catalog")
    page = queries.page(page=1, limit=10)
    click.echo(f"Products in catalog: {page.total}")

    _section("Finding Electronics")
    click.echo(", ".join(p.name for p in queries.by_category("Electronics")))

    _section("Finding products between $500 and $1500")
    for p in queries.by_price_range("500", "1500"):
        click.echo(f"  {p.display_name}")

    _section('Text search for "iPhone"')
    click.echo(", ".join(p.name for p in queries.search("iPhone")) or "(no matches)")

    iphone, galaxy = products[0], products[1]
    john = users[0]

    _section("Adding a rating to the iPhone")
    rated = AddRatingHandler(repos.products).handle(
        iphone.id, user_id=john.id, rating=5, review="Excellent phone!"
    )
    click.echo(f"Average rating for {rated.name}: {rated.average_rating:.2f}")

    _section("Applying a 10% discount to the MacBook")
    discounted = ApplyDiscountHandler(repos.products).handle(products[2].id, 10)
    click.echo(f"Discounted: {discounted.display_name}")

    _section("Adding the iPhone to John's wishlist")
    AddToWishlistHandler(repos.users, repos.products).handle(john.id, iphone.id)
    shown = ShowUserHandler(repos.users, repos.products).handle(john.id)
    click.echo(f"Wishlist items: {', '.join(w.product_name or w.product_id for w in shown.wishlist)}")

    _section("Adding products to John's cart")
    add_to_cart = AddToCartHandler(repos.users, repos.products)
    add_to_cart.handle(john.id, iphone.id, 1)
    add_to_cart.handle(john.id, galaxy.id, 2)
    shown = ShowUserHandler(repos.users, repos.products).handle(john.id)
    for line in shown.cart:
        click.echo(f"  {line.product_name or line.product_id} x{line.quantity}")

    _section("Placing an order")
    order = FinalizeOrderHandler(repos.orders, repos.users, repos.products).handle(
        user_id=john.id,
        payment_method="Credit Card",
        product_ids=[iphone.id, galaxy.id],
        clear_cart=True,
    )
    click.echo(f"Order total items: {order.item_count}")
    click.echo(f"Order total amount: {order.total_amount}")
    for item in order.items:
        click.echo(f"  {item.product_name} x{item.quantity} = {item.line_total}")

    _section("Aggregation: products by category")
    for row in queries.category_stats():
        click.echo(f"  {row.category.value}: {row.count} product(s), avg {row.average_price}")

    click.echo()
    click.echo("Demo completed.")


@click.command("demo")
@pass_settings
def demo(settings: Settings) -> None:
    """Seed sample data and walk through every operation."""
    with open_repositories(settings) as repos:
        try:
            run_demo(repos)
        except DomainException as exc:
            raise click.ClickException(str(exc))
