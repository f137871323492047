import click

from storefront.infrastructure.cli.demo_command import demo
from storefront.infrastructure.cli.order_commands import (
    order_checkout,
    order_list,
    order_show,
    order_status,
)
from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_discount,
    product_list,
    product_rate,
    product_search,
    product_show,
    product_stats,
    product_stock,
    product_update,
)
from storefront.infrastructure.cli.user_commands import (
    user_cart_add,
    user_cart_remove,
    user_delete,
    user_list,
    user_register,
    user_show,
    user_update,
    user_wishlist_add,
)
from storefront.infrastructure.config import Settings
from storefront.infrastructure.logging_config import configure_logging


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log at INFO level.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Storefront: products, users and orders over a document store"""
    try:
        settings = Settings.from_env()
    except ValueError as exc:
        raise click.ClickException(str(exc))
    configure_logging("INFO" if verbose else settings.log_level)
    ctx.obj = settings


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def user() -> None:
    """Manage users, wishlists and carts."""


@cli.group()
def order() -> None:
    """Manage orders."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_discount)
product.add_command(product_list)
product.add_command(product_rate)
product.add_command(product_search)
product.add_command(product_show)
product.add_command(product_stats)
product.add_command(product_stock)
product.add_command(product_update)
user.add_command(user_cart_add)
user.add_command(user_cart_remove)
user.add_command(user_delete)
user.add_command(user_list)
user.add_command(user_register)
user.add_command(user_show)
user.add_command(user_update)
user.add_command(user_wishlist_add)
order.add_command(order_checkout)
order.add_command(order_list)
order.add_command(order_show)
order.add_command(order_status)
cli.add_command(demo)
