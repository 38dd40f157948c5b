"""
Couche domaine (core).

Contient les entites metier, les ports (interfaces abstraites) et les exceptions.
Cette couche n'a AUCUNE dependance vers l'infrastructure (adapters, frameworks, BDD).

Sous-packages :
- entities/ : Entites metier (Beer, Customer, Order) et filtre de recherche
- ports/ : Interfaces abstraites definissant les contrats des repositories
- exceptions.py : Erreurs de validation levees par les services
"""
