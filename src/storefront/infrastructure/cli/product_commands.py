"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from storefront.application.add_product import AddProductHandler
from storefront.application.add_rating import AddRatingHandler
from storefront.application.adjust_stock import AdjustStockHandler
from storefront.application.apply_discount import ApplyDiscountHandler
from storefront.application.delete_product import DeleteProductHandler
from storefront.application.dto import ProductDTO
from storefront.application.product_queries import DEFAULT_PAGE_SIZE, ProductQueries
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.product import Category
from storefront.infrastructure.bootstrap import open_repositories
from storefront.infrastructure.cli.common import pass_settings
from storefront.infrastructure.config import Settings

CATEGORY_CHOICE = click.Choice([c.value for c in Category], case_sensitive=False)


def _display_products(products: list[ProductDTO]) -> None:
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<26} {'Name':<24} {'Category':<14} {'Price':>10} {'Qty':>5} {'Rating':>7}")
    click.echo("-" * 91)
    for p in products:
        click.echo(
            f"{p.id:<26} {p.name:<24} {p.category:<14} {p.price:>10} "
            f"{p.quantity:>5} {p.average_rating:>7.2f}"
        )


def _display_product(p: ProductDTO) -> None:
    click.echo(f"Product #{p.id}  {p.display_name}")
    click.echo(f"Category:    {p.category}")
    click.echo(f"Description: {p.description}")
    click.echo(f"Quantity:    {p.quantity} ({'in stock' if p.is_in_stock else 'out of stock'})")
    click.echo(f"Tags:        {', '.join(p.tags) or '-'}")
    click.echo(f"Rating:      {p.average_rating:.2f} from {p.rating_count} rating(s)")


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--description", required=True, help="Product description.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--category", required=True, type=CATEGORY_CHOICE, help="Catalog category.")
@click.option("--quantity", required=True, type=int, help="Units in stock.")
@click.option("--tag", "tags", multiple=True, help="Tag label (repeatable).")
@click.option("--image-url", default=None, help="Image URL.")
@pass_settings
def product_add(
    settings: Settings,
    name: str,
    description: str,
    price: str,
    category: str,
    quantity: int,
    tags: tuple[str, ...],
    image_url: str | None,
) -> None:
    """Add a new product to the catalog."""
    with open_repositories(settings) as repos:
        handler = AddProductHandler(product_repo=repos.products)
        try:
            product = handler.handle(
                name=name,
                description=description,
                price=price,
                category=category,
                quantity=quantity,
                tags=list(tags),
                image_url=image_url,
            )
        except DomainException as exc:
            raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("list")
@click.option("--page", default=1, show_default=True, type=int, help="Page number.")
@click.option("--limit", default=DEFAULT_PAGE_SIZE, show_default=True, type=int, help="Products per page.")
@pass_settings
def product_list(settings: Settings, page: int, limit: int) -> None:
    """List products, newest first."""
    with open_repositories(settings) as repos:
        try:
            result = ProductQueries(repos.products).page(page=page, limit=limit)
        except DomainException as exc:
            raise click.ClickException(str(exc))

    _display_products(result.products)
    click.echo(f"Page {result.current_page} of {result.total_pages} ({result.total} products)")


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
@pass_settings
def product_show(settings: Settings, product_id: str) -> None:
    """Show details of a product."""
    with open_repositories(settings) as repos:
        try:
            dto = ProductQueries(repos.products).get(product_id)
        except DomainException as exc:
            raise click.ClickException(str(exc))

    _display_product(dto)


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--description", default=None, help="New description.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--category", default=None, type=CATEGORY_CHOICE, help="New category.")
@click.option("--quantity", default=None, type=int, help="New stock quantity.")
@click.option("--in-stock/--not-in-stock", default=None, help="Stock flag.")
@click.option("--tag", "tags", multiple=True, help="Replace tags (repeatable).")
@pass_settings
def product_update(
    settings: Settings,
    product_id: str,
    name: str | None,
    description: str | None,
    price: str | None,
    category: str | None,
    quantity: int | None,
    in_stock: bool | None,
    tags: tuple[str, ...],
) -> None:
    """Update a product's fields."""
    with open_repositories(settings) as repos:
        handler = UpdateProductHandler(product_repo=repos.products)
        try:
            product = handler.handle(
                product_id=product_id,
                name=name,
                description=description,
                price=price,
                category=category,
                quantity=quantity,
                in_stock=in_stock,
                tags=list(tags) if tags else None,
            )
        except DomainException as exc:
            raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} updated: {product.display_name}")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@pass_settings
def product_delete(settings: Settings, product_id: str) -> None:
    """Delete a product."""
    with open_repositories(settings) as repos:
        try:
            DeleteProductHandler(product_repo=repos.products).handle(product_id)
        except DomainException as exc:
            raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted.")


@click.command("discount")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--percent", required=True, help="Discount percentage (0-100).")
@pass_settings
def product_discount(settings: Settings, product_id: str, percent: str) -> None:
    """Apply a percentage discount to a product's price."""
    with open_repositories(settings) as repos:
        try:
            product = ApplyDiscountHandler(product_repo=repos.products).handle(product_id, percent)
        except DomainException as exc:
            raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} now {product.price}")


@click.command("rate")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--user", "user_id", required=True, help="ID of the rating user.")
@click.option("--rating", required=True, type=int, help="Rating from 1 to 5.")
@click.option("--review", default="", help="Review text.")
@pass_settings
def product_rate(settings: Settings, product_id: str, user_id: str, rating: int, review: str) -> None:
    """Rate a product."""
    with open_repositories(settings) as repos:
        handler = AddRatingHandler(product_repo=repos.products)
        try:
            product = handler.handle(product_id, user_id=user_id, rating=rating, review=review)
        except DomainException as exc:
            raise click.ClickException(str(exc))

    click.echo(f"Average rating for '{product.name}': {product.average_rating:.2f}")


@click.command("stock")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--delta", required=True, type=int, help="Units to add (negative to remove).")
@pass_settings
def product_stock(settings: Settings, product_id: str, delta: int) -> None:
    """Adjust a product's stock level."""
    with open_repositories(settings) as repos:
        try:
            product = AdjustStockHandler(product_repo=repos.products).handle(product_id, delta)
        except DomainException as exc:
            raise click.ClickException(str(exc))

    click.echo(f"Stock for '{product.name}' is now {product.quantity}")


@click.command("search")
@click.option("--category", default=None, type=CATEGORY_CHOICE, help="Match a category.")
@click.option("--min-price", default=None, help="Lowest price (inclusive).")
@click.option("--max-price", default=None, help="Highest price (inclusive).")
@click.option("--text", default=None, help="Words to find in name or description.")
@pass_settings
def product_search(
    settings: Settings,
    category: str | None,
    min_price: str | None,
    max_price: str | None,
    text: str | None,
) -> None:
    """Find products by category, price range or text."""
    has_range = min_price is not None or max_price is not None
    if sum([category is not None, has_range, text is not None]) != 1:
        raise click.UsageError("Give exactly one of --category, --min-price/--max-price, --text.")
    if has_range and (min_price is None or max_price is None):
        raise click.UsageError("--min-price and --max-price go together.")

    with open_repositories(settings) as repos:
        queries = ProductQueries(repos.products)
        try:
            if category is not None:
                results = queries.by_category(category)
            elif text is not None:
                results = queries.search(text)
            else:
                results = queries.by_price_range(min_price, max_price)
        except DomainException as exc:
            raise click.ClickException(str(exc))

    _display_products(results)


@click.command("stats")
@pass_settings
def product_stats(settings: Settings) -> None:
    """Show product count and average price per category."""
    with open_repositories(settings) as repos:
        stats = ProductQueries(repos.products).category_stats()

    if not stats:
        click.echo("No products found.")
        return

    click.echo(f"{'Category':<16} {'Count':>6} {'Avg price':>12}")
    click.echo("-" * 36)
    for row in stats:
        click.echo(f"{row.category.value:<16} {row.count:>6} {str(row.average_price):>12}")

