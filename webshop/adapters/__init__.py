"""
Adaptateurs de presentation.

- cli/ : Interface en ligne de commande (Typer + Rich)

Les adaptateurs traduisent les erreurs metier des services dans leur
propre representation (message colore et code de sortie pour la CLI).
"""
