"""
mm-client - Client Python pour l'API PBS Media Manager.

Ce package fournit un client typé pour interroger et modifier le catalogue
Media Manager (assets, shows, seasons, episodes, franchises, collections,
specials, changelog), ainsi qu'une petite CLI (`mm`).

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (endpoints, erreurs, objets valeur, ports)
- adapters/ : Couche infrastructure (client API, transport httpx, CLI)
"""

from loguru import logger

from mm_client.adapters.api.client import Environment, MediaManagerClient
from mm_client.core.entities.endpoint import Endpoint
from mm_client.core.errors import MediaManagerError

__all__ = [
    "Endpoint",
    "Environment",
    "MediaManagerClient",
    "MediaManagerError",
]

__version__ = "0.1.0"

# Silencieux tant que l'application ne configure pas le logging
logger.disable(__name__)
