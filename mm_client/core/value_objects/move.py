"""
Objets valeur pour le deplacement d'une ressource vers un nouveau parent.

Seuls une season ou un show peuvent servir de nouveau parent. Le corps
envoye a l'API a la forme:

    {"data": {"type": "special", "id": "SP3", "attributes": {"season": "S9"}}}

avec exactement une des cles "show" ou "season" dans attributes.
"""

from dataclasses import dataclass
from typing import Any, Optional

from mm_client.core.entities.endpoint import Endpoint
from mm_client.core.errors import UnsupportedMoveParentError


@dataclass(frozen=True)
class MoveTarget:
    """
    Nouveau parent d'une ressource deplacee.

    Exactement un des deux champs est renseigne. Utiliser for_parent()
    plutot que le constructeur.

    Attributs:
        show: ID du show parent
        season: ID de la season parente
    """

    show: Optional[str] = None
    season: Optional[str] = None

    @classmethod
    def for_parent(cls, endpoint: Endpoint, parent_id: str) -> "MoveTarget":
        """
        Construit la cible a partir du type de parent.

        Raises:
            UnsupportedMoveParentError: Si le parent n'est ni SEASON ni SHOW
        """
        if endpoint is Endpoint.SHOW:
            return cls(show=parent_id)
        if endpoint is Endpoint.SEASON:
            return cls(season=parent_id)
        raise UnsupportedMoveParentError(endpoint)

    def to_dict(self) -> dict[str, str]:
        """Attributs JSON, sans cle pour le parent absent."""
        attributes = {}
        if self.show is not None:
            attributes["show"] = self.show
        if self.season is not None:
            attributes["season"] = self.season
        return attributes


@dataclass(frozen=True)
class Move:
    """
    Ressource a deplacer et sa nouvelle cible.

    Attributs:
        endpoint: Type de la ressource deplacee (tag singulier dans le JSON)
        id: ID de la ressource deplacee
        attributes: Nouveau parent
    """

    endpoint: Endpoint
    id: str
    attributes: MoveTarget

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.endpoint.singular,
            "id": self.id,
            "attributes": self.attributes.to_dict(),
        }


@dataclass(frozen=True)
class MoveRequest:
    """Enveloppe JSON:API d'un deplacement."""

    data: Move

    @classmethod
    def build(
        cls,
        parent_endpoint: Endpoint,
        parent_id: str,
        child_endpoint: Endpoint,
        child_id: str,
    ) -> "MoveRequest":
        """
        Construit la requete de deplacement d'un enfant vers un nouveau parent.

        Raises:
            UnsupportedMoveParentError: Si le parent n'est ni SEASON ni SHOW
        """
        target = MoveTarget.for_parent(parent_endpoint, parent_id)
        return cls(data=Move(endpoint=child_endpoint, id=child_id, attributes=target))

    def to_dict(self) -> dict[str, Any]:
        return {"data": self.data.to_dict()}
