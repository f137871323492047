"""Shared click helpers for the command modules."""

from __future__ import annotations

import click

from storefront.infrastructure.config import Settings

# Hands each command the Settings object the root group put on the context.
pass_settings = click.make_pass_decorator(Settings)
