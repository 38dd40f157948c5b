"""
Commandes CLI des commandes clients (orders list/show/add/remove).
"""

from datetime import datetime, timedelta
from typing import Annotated

import typer
from rich.table import Table

from webshop.adapters.cli.helpers import console, domain_errors, exit_not_found, with_container
from webshop.core.entities.customer import Order

order_app = typer.Typer(
    name="orders",
    help="Gestion des commandes",
    rich_markup_mode="rich",
)


def render_orders_table(orders: list[Order]) -> Table:
    """Construit la table Rich d'une liste de commandes."""
    table = Table(title="Commandes", show_header=True)
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Client")
    table.add_column("Commande le")
    table.add_column("Livraison le")
    table.add_column("Lignes", justify="right")
    for order in orders:
        customer = order.customer
        table.add_row(
            str(order.id),
            f"{customer.first_name} {customer.last_name}" if customer else "-",
            f"{order.order_date:%Y-%m-%d}" if order.order_date else "-",
            f"{order.delivery_date:%Y-%m-%d}" if order.delivery_date else "-",
            str(len(order.order_lines)),
        )
    return table


@order_app.command("list")
def list_orders() -> None:
    """Liste toutes les commandes."""
    _list_orders()


@with_container()
def _list_orders(container) -> None:
    """Implementation de la commande orders list."""
    orders = container.order_service().get_orders()
    if not orders:
        console.print("[yellow]Aucune commande enregistree.[/yellow]")
        return
    console.print(render_orders_table(orders))


@order_app.command("show")
def show_order(
    order_id: Annotated[int, typer.Argument(help="ID de la commande")],
) -> None:
    """Affiche une commande."""
    _show_order(order_id)


@with_container()
def _show_order(container, order_id: int) -> None:
    """Implementation de la commande orders show."""
    with domain_errors():
        order = container.order_service().get_order_by_id(order_id)
    if order is None:
        exit_not_found("Commande", order_id)
    console.print(render_orders_table([order]))


@order_app.command("add")
def add_order(
    customer_id: Annotated[int, typer.Option("--customer-id", help="ID du client")],
    delivery_days: Annotated[
        int, typer.Option("--delivery-days", help="Delai de livraison en jours")
    ] = 3,
) -> None:
    """
    Enregistre une commande datee de maintenant.

    Exemple:
      webshop orders add --customer-id 1 --delivery-days 5
    """
    _add_order(customer_id, delivery_days)


@with_container()
def _add_order(container, customer_id: int, delivery_days: int) -> None:
    """Implementation de la commande orders add."""
    with domain_errors():
        customer = container.customer_service().get_customer_by_id(customer_id)
        if customer is None:
            exit_not_found("Client", customer_id)

        now = datetime.now()
        order = Order(
            customer=customer,
            order_date=now,
            delivery_date=now + timedelta(days=delivery_days),
        )
        saved = container.order_service().add_order(order)
    console.print(f"[green]Commande enregistree:[/green] ID {saved.id}")


@order_app.command("remove")
def remove_order(
    order_id: Annotated[int, typer.Argument(help="ID de la commande")],
) -> None:
    """Supprime une commande."""
    _remove_order(order_id)


@with_container()
def _remove_order(container, order_id: int) -> None:
    """Implementation de la commande orders remove."""
    with domain_errors():
        removed = container.order_service().remove_order(order_id)
    if removed is None:
        exit_not_found("Commande", order_id)
    console.print(f"[green]Commande supprimee:[/green] ID {removed.id}")
