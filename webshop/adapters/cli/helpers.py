"""
Utilitaires partages pour les commandes CLI du webshop.

Ce module fournit :
- console : instance Rich Console partagee
- with_container : decorateur injectant un container initialise
- domain_errors : context manager traduisant les erreurs metier en code de sortie
- exit_not_found : message standard pour un ID inconnu
"""

from contextlib import contextmanager
from functools import wraps

import typer
from rich.console import Console

from webshop.container import Container
from webshop.core.exceptions import WebshopError

# Console globale pour tous les affichages
console = Console()


def with_container(requires_db: bool = True):
    """
    Decorateur qui injecte un container initialise en premier argument.

    Args:
        requires_db: Si True (defaut), initialise la base de donnees.

    Usage:
        @with_container()
        def my_command(container, ...):
            service = container.beer_service()
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            container = Container()
            if requires_db:
                container.database.init()
            return func(container, *args, **kwargs)
        return wrapper
    return decorator


@contextmanager
def domain_errors():
    """
    Affiche les erreurs de validation en rouge et termine avec le code 1.

    Usage:
        with domain_errors():
            service.add_beer(beer)
    """
    try:
        yield
    except WebshopError as e:
        console.print(f"[red]Erreur: {e}[/red]")
        raise typer.Exit(1) from e


def exit_not_found(label: str, entity_id: int) -> None:
    """Affiche un message 'introuvable' et termine avec le code 1."""
    console.print(f"[yellow]{label} {entity_id} introuvable.[/yellow]")
    raise typer.Exit(1)
