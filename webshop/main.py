"""
Point d'entree CLI du webshop.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import beer_app, customer_app, order_app
from .config import Settings
from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="webshop",
    help="Gestion de la boutique de bieres",
)
container = Container()

# Monter les sous-commandes
app.add_typer(beer_app, name="beers")
app.add_typer(customer_app, name="customers")
app.add_typer(order_app, name="orders")


def get_config() -> Settings:
    """Recupere les parametres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    typer.echo(f"Base de donnees : {config.database_url}")
    typer.echo(f"Bieres par page : {config.default_items_per_page}")
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Fichier de log : {config.log_file}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"Webshop v{__version__}")


def main() -> None:
    """Point d'entree de l'application."""
    configure_logging(container.config())

    # Initialise la base de donnees (cree les tables si necessaire)
    container.database.init()

    logger.info("Demarrage du webshop", version=__version__)

    app()


if __name__ == "__main__":
    main()
