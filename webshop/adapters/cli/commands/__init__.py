"""Sous-package CLI commands - re-exporte les applications Typer publiques."""

from webshop.adapters.cli.commands.beer_commands import beer_app
from webshop.adapters.cli.commands.customer_commands import customer_app
from webshop.adapters.cli.commands.order_commands import order_app

__all__ = [
    "beer_app",
    "customer_app",
    "order_app",
]
