"""
Interface port pour le transport HTTP.

Le dispatcher de requetes ne parle jamais directement a une bibliotheque HTTP.
Il depend de ITransport, ce qui permet a une application hote de fournir
son propre transport (non bloquant, instrumente, mock de test...) sans
toucher a la construction des URLs ni a la classification des reponses.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Mapping, Optional


@dataclass(frozen=True)
class TransportResponse:
    """
    Reponse HTTP brute livree par un transport.

    Attributs :
        status_code : Code de statut HTTP
        body : Corps de la reponse, lu entierement
        headers : En-tetes de la reponse
    """

    status_code: int
    body: bytes = b""
    headers: Mapping[str, str] = field(default_factory=dict)


class ITransport(ABC):
    """
    Capacite minimale d'envoi d'une requete HTTP.

    Les implementations doivent:
    - effectuer exactement une tentative reseau par appel
    - lever NetworkError si la requete n'aboutit pas
    - lever BodyReadError si le corps ne peut pas etre lu entierement
    """

    @abstractmethod
    def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: Optional[bytes] = None,
    ) -> TransportResponse:
        """
        Envoie une requete et retourne la reponse complete.

        Args :
            method : Methode HTTP (GET, POST, PATCH, DELETE)
            url : URL absolue, query string incluse
            headers : En-tetes a envoyer
            body : Corps deja serialise, ou None

        Retourne :
            La reponse avec son corps entierement lu
        """
        ...

    def close(self) -> None:
        """Libere les ressources du transport (aucune par defaut)."""
