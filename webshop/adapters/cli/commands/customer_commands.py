"""
Commandes CLI des clients (customers list/show/add/remove).
"""

from typing import Annotated, Optional

import typer
from rich.table import Table

from webshop.adapters.cli.helpers import console, domain_errors, exit_not_found, with_container
from webshop.core.entities.customer import Customer

customer_app = typer.Typer(
    name="customers",
    help="Gestion des clients",
    rich_markup_mode="rich",
)


def render_customers_table(customers: list[Customer]) -> Table:
    """Construit la table Rich d'une liste de clients."""
    table = Table(title="Clients", show_header=True)
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Nom")
    table.add_column("Email")
    table.add_column("Adresse")
    table.add_column("Telephone")
    for customer in customers:
        table.add_row(
            str(customer.id),
            f"{customer.first_name} {customer.last_name}",
            customer.email or "",
            customer.address or "",
            customer.phone_number or "-",
        )
    return table


@customer_app.command("list")
def list_customers() -> None:
    """Liste tous les clients."""
    _list_customers()


@with_container()
def _list_customers(container) -> None:
    """Implementation de la commande customers list."""
    customers = container.customer_service().get_all_customers()
    if not customers:
        console.print("[yellow]Aucun client enregistre.[/yellow]")
        return
    console.print(render_customers_table(customers))


@customer_app.command("show")
def show_customer(
    customer_id: Annotated[int, typer.Argument(help="ID du client")],
) -> None:
    """Affiche un client et ses commandes."""
    _show_customer(customer_id)


@with_container()
def _show_customer(container, customer_id: int) -> None:
    """Implementation de la commande customers show."""
    with domain_errors():
        customer = container.customer_service().get_customer_by_id(customer_id)
    if customer is None:
        exit_not_found("Client", customer_id)

    console.print(render_customers_table([customer]))
    if not customer.orders:
        console.print("[dim]Aucune commande.[/dim]")
        return
    for order in customer.orders:
        console.print(
            f"  Commande {order.id}: passee le {order.order_date:%Y-%m-%d}, "
            f"livraison le {order.delivery_date:%Y-%m-%d}"
        )


@customer_app.command("add")
def add_customer(
    first_name: Annotated[Optional[str], typer.Option("--first-name", help="Prenom")] = None,
    last_name: Annotated[Optional[str], typer.Option("--last-name", help="Nom")] = None,
    email: Annotated[Optional[str], typer.Option("--email", help="Adresse email")] = None,
    address: Annotated[Optional[str], typer.Option("--address", help="Adresse postale")] = None,
    phone_number: Annotated[
        Optional[str], typer.Option("--phone", help="Telephone (optionnel)")
    ] = None,
) -> None:
    """Ajoute un client."""
    customer = Customer(
        first_name=first_name,
        last_name=last_name,
        email=email,
        address=address,
        phone_number=phone_number,
    )
    _add_customer(customer)


@with_container()
def _add_customer(container, customer: Customer) -> None:
    """Implementation de la commande customers add."""
    with domain_errors():
        saved = container.customer_service().add_customer(customer)
    console.print(
        f"[green]Client ajoute:[/green] {saved.first_name} {saved.last_name} (ID {saved.id})"
    )


@customer_app.command("remove")
def remove_customer(
    customer_id: Annotated[int, typer.Argument(help="ID du client")],
) -> None:
    """Supprime un client."""
    _remove_customer(customer_id)


@with_container()
def _remove_customer(container, customer_id: int) -> None:
    """Implementation de la commande customers remove."""
    with domain_errors():
        removed = container.customer_service().remove_customer(customer_id)
    if removed is None:
        exit_not_found("Client", customer_id)
    console.print(f"[green]Client supprime:[/green] {removed.first_name} {removed.last_name}")
