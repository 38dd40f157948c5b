"""
Webshop - Couche applicative d'une boutique de bieres en ligne.

Ce package fournit les services de validation et d'orchestration pour le
catalogue de bieres, les commandes et les clients.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, exceptions)
- services/ : Couche application (regles metier, orchestration)
- infrastructure/ : Persistance SQLModel (implementations des ports)
- adapters/ : Interface en ligne de commande
"""

__version__ = "0.1.0"
