"""
Entites clients et commandes.

Une commande reference obligatoirement un client ; le client expose ses
commandes en lecture seule (back-reference remplie par le repository).
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional


@dataclass
class Customer:
    """
    Client de la boutique.

    Attributs :
        id : Identifiant (0 = non attribue)
        first_name : Prenom
        last_name : Nom
        email : Adresse email
        address : Adresse postale
        phone_number : Numero de telephone (optionnel)
        orders : Commandes du client (lecture seule, non possedees par le client)
    """

    id: int = 0
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    phone_number: Optional[str] = None
    orders: list["Order"] = field(default_factory=list)


@dataclass
class Order:
    """
    Commande passee par un client.

    Attributs :
        id : Identifiant (0 = non attribue)
        customer : Client ayant passe la commande
        order_date : Date de la commande
        delivery_date : Date de livraison prevue
        order_lines : Lignes de commande, transmises sans interpretation
    """

    id: int = 0
    customer: Optional[Customer] = None
    order_date: Optional[datetime] = None
    delivery_date: Optional[datetime] = None
    order_lines: list[Any] = field(default_factory=list)
