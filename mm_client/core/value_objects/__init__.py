"""
Objets valeur immutables utilises pour construire les requetes.

Exports :
- Params : Parametres de requete ordonnes
- ParentEndpoint : Ressource parente pour les URLs imbriquees
- MoveTarget, Move, MoveRequest : Corps de deplacement d'une ressource
"""

from mm_client.core.value_objects.move import Move, MoveRequest, MoveTarget
from mm_client.core.value_objects.request import ParentEndpoint, Params

__all__ = [
    "Move",
    "MoveRequest",
    "MoveTarget",
    "ParentEndpoint",
    "Params",
]
