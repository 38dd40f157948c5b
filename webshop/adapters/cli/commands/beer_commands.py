"""
Commandes CLI du catalogue de bieres (beers list/show/add/search/remove).
"""

from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Annotated, Optional

import typer
from rich.table import Table

from webshop.adapters.cli.helpers import console, domain_errors, exit_not_found, with_container
from webshop.core.entities.beer import Beer, BeerFilter, BeerSearchField, BeerType


class PriceOrder(str, Enum):
    """Sens du tri par prix."""

    ASC = "asc"
    DESC = "desc"


# Application Typer pour les commandes beers
beer_app = typer.Typer(
    name="beers",
    help="Gestion du catalogue de bieres",
    rich_markup_mode="rich",
)


def render_beers_table(beers: list[Beer], title: str = "Catalogue") -> Table:
    """Construit la table Rich d'une liste de bieres."""
    table = Table(title=title, show_header=True)
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Nom")
    table.add_column("Marque")
    table.add_column("Type")
    table.add_column("% vol.", justify="right")
    table.add_column("Prix", justify="right", style="green")
    for beer in beers:
        table.add_row(
            str(beer.id),
            beer.name or "",
            beer.brand or "",
            beer.beer_type.value if beer.beer_type else "-",
            f"{beer.percentage:.1f}",
            f"{beer.price:.2f}" if beer.price is not None else "-",
        )
    return table


@beer_app.command("list")
def list_beers(
    by_price: Annotated[
        Optional[PriceOrder],
        typer.Option("--by-price", help="Trie par prix (asc ou desc)"),
    ] = None,
    beer_type: Annotated[
        Optional[BeerType],
        typer.Option("--type", help="Ne garde que les bieres de ce type"),
    ] = None,
) -> None:
    """
    Liste le catalogue.

    Exemples:
      webshop beers list
      webshop beers list --by-price desc
      webshop beers list --type dark
    """
    if by_price is not None and beer_type is not None:
        console.print("[red]Erreur: --by-price et --type sont exclusifs.[/red]")
        raise typer.Exit(1)
    _list_beers(by_price, beer_type)


@with_container()
def _list_beers(container, by_price: Optional[PriceOrder], beer_type: Optional[BeerType]) -> None:
    """Implementation de la commande beers list."""
    service = container.beer_service()
    if by_price is not None:
        beers = service.get_beers_by_price(ascending=by_price == PriceOrder.ASC)
    elif beer_type is not None:
        beers = service.get_beers_by_type(beer_type)
    else:
        beers = service.get_beers()

    if not beers:
        console.print("[yellow]Aucune biere dans le catalogue.[/yellow]")
        return
    console.print(render_beers_table(beers))


@beer_app.command("show")
def show_beer(
    beer_id: Annotated[int, typer.Argument(help="ID de la biere")],
) -> None:
    """Affiche une biere."""
    _show_beer(beer_id)


@with_container()
def _show_beer(container, beer_id: int) -> None:
    """Implementation de la commande beers show."""
    with domain_errors():
        beer = container.beer_service().get_beer_by_id(beer_id)
    if beer is None:
        exit_not_found("Biere", beer_id)
    console.print(render_beers_table([beer], title=f"Biere {beer_id}"))


@beer_app.command("add")
def add_beer(
    name: Annotated[Optional[str], typer.Option("--name", help="Nom de la biere")] = None,
    brand: Annotated[Optional[str], typer.Option("--brand", help="Marque")] = None,
    price: Annotated[Optional[str], typer.Option("--price", help="Prix unitaire")] = None,
    percentage: Annotated[float, typer.Option("--percentage", help="Taux d'alcool")] = 0.0,
    beer_type: Annotated[
        Optional[BeerType], typer.Option("--type", help="Type de biere")
    ] = None,
) -> None:
    """Ajoute une biere au catalogue."""
    parsed_price = None
    if price is not None:
        try:
            parsed_price = Decimal(price)
        except InvalidOperation:
            console.print(f"[red]Erreur: prix invalide: {price}[/red]")
            raise typer.Exit(1)
    beer = Beer(
        name=name,
        brand=brand,
        percentage=percentage,
        price=parsed_price,
        beer_type=beer_type,
    )
    _add_beer(beer)


@with_container()
def _add_beer(container, beer: Beer) -> None:
    """Implementation de la commande beers add."""
    with domain_errors():
        saved = container.beer_service().add_beer(beer)
    console.print(f"[green]Biere ajoutee:[/green] {saved.name} (ID {saved.id})")


@beer_app.command("search")
def search_beers(
    page: Annotated[int, typer.Option("--page", help="Page a afficher")] = 1,
    per_page: Annotated[
        Optional[int],
        typer.Option("--per-page", help="Bieres par page (defaut: config)"),
    ] = None,
    field: Annotated[
        BeerSearchField, typer.Option("--field", help="Champ de tri et de recherche")
    ] = BeerSearchField.ID,
    text: Annotated[
        Optional[str], typer.Option("--text", help="Texte recherche dans le champ")
    ] = None,
    descending: Annotated[
        bool, typer.Option("--desc", help="Tri decroissant")
    ] = False,
) -> None:
    """
    Recherche paginee dans le catalogue.

    Exemples:
      webshop beers search --field name --text ipa
      webshop beers search --field price --desc --page 2 --per-page 5
    """
    _search_beers(page, per_page, field, text, descending)


@with_container()
def _search_beers(
    container,
    page: int,
    per_page: Optional[int],
    field: BeerSearchField,
    text: Optional[str],
    descending: bool,
) -> None:
    """Implementation de la commande beers search."""
    beer_filter = BeerFilter(
        current_page=page,
        items_per_page=per_page or container.config().default_items_per_page,
        is_ascending=not descending,
        search_field=field,
        search_text=text,
    )
    with domain_errors():
        beers = container.beer_service().get_filtered_beers(beer_filter)

    if not beers:
        console.print("[yellow]Aucune biere ne correspond a la recherche.[/yellow]")
        return
    console.print(render_beers_table(beers, title=f"Page {beer_filter.current_page}"))


@beer_app.command("remove")
def remove_beer(
    beer_id: Annotated[int, typer.Argument(help="ID de la biere")],
) -> None:
    """Supprime une biere du catalogue."""
    _remove_beer(beer_id)


@with_container()
def _remove_beer(container, beer_id: int) -> None:
    """Implementation de la commande beers remove."""
    with domain_errors():
        removed = container.beer_service().remove_beer(beer_id)
    if removed is None:
        exit_not_found("Biere", beer_id)
    console.print(f"[green]Biere supprimee:[/green] {removed.name}")
