"""
Couche adaptateurs (infrastructure).

Les adaptateurs implémentent les ports définis dans core/ports/ et fournissent
des implémentations concrètes pour les systèmes externes.

Sous-packages :
- api/ : Client Media Manager (URLs, dispatcher, transport httpx)
- cli/ : Interface ligne de commande (Typer) et fichier config.toml

Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
"""
