"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from storefront.application.dto import OrderDTO
from storefront.application.finalize_order import FinalizeOrderHandler
from storefront.application.show_order import ListOrdersHandler, ShowOrderHandler
from storefront.application.update_order_status import UpdateOrderStatusHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.order import OrderStatus
from storefront.infrastructure.bootstrap import open_repositories
from storefront.infrastructure.cli.common import pass_settings
from storefront.infrastructure.config import Settings

STATUS_CHOICE = click.Choice([s.value for s in OrderStatus], case_sensitive=False)


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_name or '(user not found)'}  [{dto.user_id}]")
    click.echo(f"Created:  {dto.created_at}")
    click.echo(f"Ship to:  {dto.shipping_address or '-'}")
    click.echo(f"Payment:  {dto.payment_method}")
    click.echo()

    click.echo(f"  {'Product':<24} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*51}")
    for item in dto.items:
        name = item.product_name or f"(not found) {item.product_id}"
        click.echo(f"  {name:<24} {item.quantity:>5} {item.price:>10} {item.line_total:>10}")
    click.echo(f"  {'-'*51}")
    click.echo(f"  {'Items':<24} {dto.item_count:>5}")
    click.echo(f"  {'Order Total':<31} {dto.total_amount:>20}")


@click.command("checkout")
@click.option("--user", "user_id", required=True, help="User ID.")
@click.option("--payment", "payment_method", required=True, help="Payment method, e.g. 'Credit Card'.")
@click.option(
    "--product",
    "product_ids",
    multiple=True,
    help="Cart product to order (repeatable). Defaults to the whole cart.",
)
@click.option("--clear-cart", is_flag=True, default=False, help="Remove ordered items from the cart.")
@pass_settings
def order_checkout(
    settings: Settings,
    user_id: str,
    payment_method: str,
    product_ids: tuple[str, ...],
    clear_cart: bool,
) -> None:
    """Place an order from a user's cart."""
    with open_repositories(settings) as repos:
        handler = FinalizeOrderHandler(
            order_repo=repos.orders,
            user_repo=repos.users,
            product_repo=repos.products,
        )
        try:
            dto = handler.handle(
                user_id=user_id,
                payment_method=payment_method,
                product_ids=list(product_ids) or None,
                clear_cart=clear_cart,
            )
        except DomainException as exc:
            raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} created  (status={dto.status})")
    click.echo()
    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
@pass_settings
def order_show(settings: Settings, order_id: str) -> None:
    """Show details of an existing order."""
    with open_repositories(settings) as repos:
        handler = ShowOrderHandler(repos.orders, repos.users, repos.products)
        try:
            dto = handler.handle(order_id)
        except DomainException as exc:
            raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("list")
@click.option("--user", "user_id", default=None, help="Only orders placed by this user.")
@pass_settings
def order_list(settings: Settings, user_id: str | None) -> None:
    """List orders, newest first."""
    with open_repositories(settings) as repos:
        orders = ListOrdersHandler(repos.orders, repos.users, repos.products).handle(user_id)

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<26} {'Customer':<24} {'Status':<11} {'Items':>5} {'Total':>12}")
    click.echo("-" * 82)
    for o in orders:
        customer = o.customer_name or "(user not found)"
        click.echo(f"{o.id:<26} {customer:<24} {o.status:<11} {o.item_count:>5} {o.total_amount:>12}")


@click.command("status")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option("--status", required=True, type=STATUS_CHOICE, help="New status.")
@pass_settings
def order_status(settings: Settings, order_id: str, status: str) -> None:
    """Set an order's status."""
    with open_repositories(settings) as repos:
        try:
            order = UpdateOrderStatusHandler(order_repo=repos.orders).handle(order_id, status)
        except DomainException as exc:
            raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} is now {order.status.value}.")
