"""
Construction des URLs de l'API Media Manager.

Fonctions pures, sans I/O. Formes produites:
- ressource : {base}/{endpoint}/{id}/
- liste : {base}/{endpoint}/
- liste enfant : {base}/{parent}/{parent_id}/{endpoint}/
- edition : une des formes ci-dessus suivie de edit/

Chaque segment de chemin se termine par un slash.

Limitation: les noms et valeurs de parametres ne sont PAS encodes.
L'appelant doit les pre-encoder si necessaire (ex: urllib.parse.quote).
"""

from typing import Optional

from mm_client.core.entities.endpoint import Endpoint
from mm_client.core.value_objects.request import ParentEndpoint, Params


def format_params(params: Params) -> str:
    """
    Formate les parametres en query string, dans l'ordre fourni.

    Example:
        format_params([]) == ""
        format_params([("a", "1"), ("b", "2")]) == "?a=1&b=2"
    """
    if not params:
        return ""
    return "?" + "&".join(f"{name}={value}" for name, value in params)


def _build_path(
    base: str,
    endpoint: Endpoint,
    id: Optional[str],
    parent: Optional[ParentEndpoint],
) -> str:
    segments = [base.rstrip("/")]
    if parent is not None:
        segments.extend([parent.endpoint.plural, parent.id])
    segments.append(endpoint.plural)
    if id is not None:
        segments.append(id)
    return "/".join(segments) + "/"


def build_url(
    base: str,
    endpoint: Endpoint,
    id: Optional[str] = None,
    params: Params = (),
    parent: Optional[ParentEndpoint] = None,
) -> str:
    """
    Construit l'URL d'une ressource, d'une liste ou d'une liste enfant.

    Args:
        base: URL de base de l'API (ex: https://media.services.pbs.org/api/v1)
        endpoint: Type de ressource ciblee
        id: ID de la ressource, ou None pour une liste
        params: Parametres de requete ordonnes
        parent: Ressource parente pour une liste imbriquee

    Returns:
        URL complete, query string incluse

    Example:
        build_url("https://x/api", Endpoint.SHOW, "42") == "https://x/api/shows/42/"
    """
    return _build_path(base, endpoint, id, parent) + format_params(params)


def build_edit_url(
    base: str,
    endpoint: Endpoint,
    id: Optional[str] = None,
    params: Params = (),
    parent: Optional[ParentEndpoint] = None,
) -> str:
    """
    Comme build_url, avec un segment edit/ ajoute avant la query string.

    Example:
        build_edit_url("https://x/api", Endpoint.ASSET, "7") == "https://x/api/assets/7/edit/"
    """
    return _build_path(base, endpoint, id, parent) + "edit/" + format_params(params)
