"""CLI commands for the User aggregate (profile, wishlist, cart)."""

from __future__ import annotations

import click

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.add_to_wishlist import AddToWishlistHandler
from storefront.application.delete_user import DeleteUserHandler
from storefront.application.dto import UserDTO
from storefront.application.register_user import RegisterUserHandler
from storefront.application.remove_from_cart import RemoveFromCartHandler
from storefront.application.show_user import ShowUserHandler
from storefront.application.update_user import UpdateUserHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.value_objects import Address
from storefront.infrastructure.bootstrap import open_repositories
from storefront.infrastructure.cli.common import pass_settings
from storefront.infrastructure.config import Settings

NOT_FOUND = "(product not found)"


def _address_options(func):
    for name in ("country", "zip-code", "state", "city", "street"):
        func = click.option(f"--{name}", default=None, help=f"Address {name.replace('-', ' ')}.")(func)
    return func


def _address(
    street: str | None,
    city: str | None,
    state: str | None,
    zip_code: str | None,
    country: str | None,
) -> Address | None:
    if not any((street, city, state, zip_code, country)):
        return None
    return Address(
        street=street or "",
        city=city or "",
        state=state or "",
        zip_code=zip_code or "",
        country=country or "",
    )


def _display_user(dto: UserDTO) -> None:
    click.echo(f"User #{dto.id}  {dto.full_name} <{dto.email}>{'  [admin]' if dto.is_admin else ''}")
    if dto.phone_number:
        click.echo(f"Phone:    {dto.phone_number}")
    click.echo(f"Address:  {dto.address or '-'}")
    click.echo()

    click.echo("Wishlist:")
    if not dto.wishlist:
        click.echo("  (empty)")
    for entry in dto.wishlist:
        click.echo(f"  {entry.product_id:<26} {entry.product_name or NOT_FOUND}")

    click.echo("Cart:")
    if not dto.cart:
        click.echo("  (empty)")
    for line in dto.cart:
        click.echo(f"  {line.product_id:<26} {line.product_name or NOT_FOUND:<24} x{line.quantity}")


@click.command("register")
@click.option("--first-name", required=True, help="First name.")
@click.option("--last-name", required=True, help="Last name.")
@click.option("--email", required=True, help="Email address (unique).")
@click.option("--password", required=True, help="Password (6+ characters).")
@click.option("--phone", default=None, help="10-digit phone number.")
@click.option("--admin", is_flag=True, default=False, help="Grant admin rights.")
@_address_options
@pass_settings
def user_register(
    settings: Settings,
    first_name: str,
    last_name: str,
    email: str,
    password: str,
    phone: str | None,
    admin: bool,
    street: str | None,
    city: str | None,
    state: str | None,
    zip_code: str | None,
    country: str | None,
) -> None:
    """Register a new user."""
    with open_repositories(settings) as repos:
        handler = RegisterUserHandler(user_repo=repos.users)
        try:
            user = handler.handle(
                first_name=first_name,
                last_name=last_name,
                email=email,
                password=password,
                address=_address(street, city, state, zip_code, country),
                phone_number=phone,
                is_admin=admin,
            )
        except DomainException as exc:
            raise click.ClickException(str(exc))

    click.echo(f"User #{user.id} '{user.full_name}' registered")


@click.command("list")
@pass_settings
def user_list(settings: Settings) -> None:
    """List all users."""
    with open_repositories(settings) as repos:
        users = ShowUserHandler(repos.users, repos.products).list_all()

    if not users:
        click.echo("No users found.")
        return

    click.echo(f"{'ID':<26} {'Name':<24} {'Email':<30} {'Cart':>5}")
    click.echo("-" * 88)
    for u in users:
        click.echo(f"{u.id:<26} {u.full_name:<24} {u.email:<30} {len(u.cart):>5}")


@click.command("show")
@click.option("--id", "user_id", required=True, help="User ID.")
@pass_settings
def user_show(settings: Settings, user_id: str) -> None:
    """Show a user with wishlist and cart."""
    with open_repositories(settings) as repos:
        try:
            dto = ShowUserHandler(repos.users, repos.products).handle(user_id)
        except DomainException as exc:
            raise click.ClickException(str(exc))

    _display_user(dto)


@click.command("update")
@click.option("--id", "user_id", required=True, help="User ID.")
@click.option("--first-name", default=None, help="New first name.")
@click.option("--last-name", default=None, help="New last name.")
@click.option("--email", default=None, help="New email address.")
@click.option("--password", default=None, help="New password.")
@click.option("--phone", default=None, help="New 10-digit phone number.")
@_address_options
@pass_settings
def user_update(
    settings: Settings,
    user_id: str,
    first_name: str | None,
    last_name: str | None,
    email: str | None,
    password: str | None,
    phone: str | None,
    street: str | None,
    city: str | None,
    state: str | None,
    zip_code: str | None,
    country: str | None,
) -> None:
    """Update a user's profile."""
    with open_repositories(settings) as repos:
        handler = UpdateUserHandler(user_repo=repos.users)
        try:
            user = handler.handle(
                user_id=user_id,
                first_name=first_name,
                last_name=last_name,
                email=email,
                password=password,
                address=_address(street, city, state, zip_code, country),
                phone_number=phone,
            )
        except DomainException as exc:
            raise click.ClickException(str(exc))

    click.echo(f"User #{user_id} '{user.full_name}' updated")


@click.command("delete")
@click.option("--id", "user_id", required=True, help="User ID.")
@pass_settings
def user_delete(settings: Settings, user_id: str) -> None:
    """Delete a user. Their orders are kept."""
    with open_repositories(settings) as repos:
        try:
            DeleteUserHandler(user_repo=repos.users).handle(user_id)
        except DomainException as exc:
            raise click.ClickException(str(exc))

    click.echo(f"User #{user_id} deleted.")


@click.command("wishlist-add")
@click.option("--id", "user_id", required=True, help="User ID.")
@click.option("--product", "product_id", required=True, help="Product ID.")
@pass_settings
def user_wishlist_add(settings: Settings, user_id: str, product_id: str) -> None:
    """Add a product to a user's wishlist."""
    with open_repositories(settings) as repos:
        handler = AddToWishlistHandler(user_repo=repos.users, product_repo=repos.products)
        try:
            user = handler.handle(user_id, product_id)
        except DomainException as exc:
            raise click.ClickException(str(exc))

    click.echo(f"Wishlist for '{user.full_name}' has {len(user.wishlist)} item(s)")


@click.command("cart-add")
@click.option("--id", "user_id", required=True, help="User ID.")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", default=1, show_default=True, type=int, help="Units to add.")
@pass_settings
def user_cart_add(settings: Settings, user_id: str, product_id: str, quantity: int) -> None:
    """Add a product to a user's cart (merges with an existing entry)."""
    with open_repositories(settings) as repos:
        handler = AddToCartHandler(user_repo=repos.users, product_repo=repos.products)
        try:
            user = handler.handle(user_id, product_id, quantity)
        except DomainException as exc:
            raise click.ClickException(str(exc))

    item = user.cart_item(product_id)
    click.echo(f"Cart for '{user.full_name}': product {product_id} x{item.quantity}")


@click.command("cart-remove")
@click.option("--id", "user_id", required=True, help="User ID.")
@click.option("--product", "product_id", required=True, help="Product ID.")
@pass_settings
def user_cart_remove(settings: Settings, user_id: str, product_id: str) -> None:
    """Remove a product from a user's cart."""
    with open_repositories(settings) as repos:
        try:
            user = RemoveFromCartHandler(user_repo=repos.users).handle(user_id, product_id)
        except DomainException as exc:
            raise click.ClickException(str(exc))

    click.echo(f"Cart for '{user.full_name}' has {len(user.cart)} item(s)")
