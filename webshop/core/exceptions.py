"""
Exceptions du domaine.

Les services levent ces erreurs avant tout appel au repository. Le message
de chaque erreur est fixe (voir webshop.utils.constants) et fait partie du
contrat expose aux couches de presentation.
"""


class WebshopError(Exception):
    """Classe de base des erreurs metier du webshop."""


class InvalidStateError(WebshopError, ValueError):
    """
    L'objet fourni viole une regle de validation.

    Levee quand un champ obligatoire manque ou qu'un identifiant est deja
    present sur une entite a creer.
    """


class NullInputError(InvalidStateError):
    """L'objet a ecrire est absent (None)."""


class ArgumentError(WebshopError, ValueError):
    """Un identifiant requis est manquant ou vaut sa valeur par defaut (0)."""
