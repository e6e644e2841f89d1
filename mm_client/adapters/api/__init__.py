"""
Client de l'API Media Manager.

Ce module fournit:
- url_builder : Construction pure des URLs (build_url, build_edit_url, format_params)
- RequestDispatcher : Authentification Basic et classification des reponses
- HttpxTransport : Implementation par defaut de ITransport sur httpx
- MediaManagerClient : Operations par ressource et raccourcis generes
"""

from mm_client.adapters.api.client import (
    PRODUCTION_URL,
    STAGING_URL,
    Environment,
    MediaManagerClient,
)
from mm_client.adapters.api.dispatcher import RequestDispatcher
from mm_client.adapters.api.httpx_transport import HttpxTransport
from mm_client.adapters.api.url_builder import build_edit_url, build_url, format_params

__all__ = [
    "PRODUCTION_URL",
    "STAGING_URL",
    "Environment",
    "HttpxTransport",
    "MediaManagerClient",
    "RequestDispatcher",
    "build_edit_url",
    "build_url",
    "format_params",
]
