"""
Couche domaine (core).

Contient les endpoints, la taxonomie d'erreurs, les objets valeur et les ports.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (httpx, typer, fichiers).

Sous-packages :
- entities/ : Endpoint (les huit types de ressources de l'API)
- ports/ : Interfaces abstraites (transport HTTP)
- value_objects/ : Objets valeur immutables (ParentEndpoint, MoveRequest)
"""
