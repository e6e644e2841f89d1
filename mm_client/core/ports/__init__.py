"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Ports transport : Contrat d'envoi des requetes HTTP
- ITransport : Envoi d'une requete et lecture complete de la reponse
- TransportResponse : Reponse brute (statut, corps, en-tetes)
"""

from mm_client.core.ports.transport import ITransport, TransportResponse

__all__ = [
    "ITransport",
    "TransportResponse",
]
