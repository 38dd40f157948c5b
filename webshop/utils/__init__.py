"""
Utilitaires et constantes pour le webshop.

Ce module contient les messages d'erreur partages entre les services
et les repositories.
"""
