"""
Entites du domaine.

Exports :
- Endpoint : Les huit types de ressources de l'API Media Manager
"""

from mm_client.core.entities.endpoint import Endpoint

__all__ = ["Endpoint"]
