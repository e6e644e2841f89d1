"""
Objets valeur pour la construction des requetes.

- Params : parametres de requete ordonnes (nom, valeur)
- ParentEndpoint : ressource parente pour les URLs imbriquees
"""

from dataclasses import dataclass
from typing import Sequence

from mm_client.core.entities.endpoint import Endpoint

# L'ordre d'insertion est conserve tel quel dans la query string
Params = Sequence[tuple[str, str]]


@dataclass(frozen=True)
class ParentEndpoint:
    """
    Ressource parente d'une collection imbriquee (ex: les seasons d'un show).

    Attributs:
        endpoint: Type de la ressource parente
        id: Identifiant de la ressource parente
    """

    endpoint: Endpoint
    id: str
