"""
Envoi des requetes authentifiees et classification des reponses.

Chaque requete porte:
- Authorization: Basic base64(key:secret)
- Connection: close (pas de reutilisation keep-alive supposee)
- Accept: application/json

Classification par code de statut, dans cet ordre:
    200, 204  -> corps retourne tel quel (texte UTF-8)
    400       -> BadRequestError(corps du serveur)
    401, 403  -> NotAuthorizedError
    404       -> ResourceNotFoundError
    autre     -> APIFailureError(statut)

Le corps n'est pas interprete: le decodage JSON revient a l'appelant.
"""

import base64
import json
from typing import Any, Optional

from loguru import logger

from mm_client.core.errors import (
    APIFailureError,
    BadRequestError,
    ConvertError,
    NotAuthorizedError,
    ResourceNotFoundError,
)
from mm_client.core.ports.transport import ITransport, TransportResponse

SUCCESS_STATUSES = frozenset({200, 204})
NOT_AUTHORIZED_STATUSES = frozenset({401, 403})


def basic_auth_header(key: str, secret: str) -> str:
    """Valeur de l'en-tete Authorization pour l'authentification Basic."""
    token = base64.b64encode(f"{key}:{secret}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


def decode_body(response: TransportResponse) -> str:
    """
    Decode le corps d'une reponse en texte UTF-8.

    Raises:
        ConvertError: Si le corps n'est pas de l'UTF-8 valide
    """
    try:
        return response.body.decode("utf-8")
    except UnicodeDecodeError as err:
        raise ConvertError(err) from err


def classify_response(response: TransportResponse) -> str:
    """
    Transforme une reponse brute en texte ou en erreur typee.

    Returns:
        Corps de la reponse pour 200 et 204

    Raises:
        BadRequestError: 400, avec le message du serveur
        NotAuthorizedError: 401 ou 403
        ResourceNotFoundError: 404
        APIFailureError: Tout autre statut
        ConvertError: Corps non UTF-8 pour 200, 204 ou 400
    """
    status = response.status_code
    if status in SUCCESS_STATUSES:
        return decode_body(response)
    if status == 400:
        raise BadRequestError(decode_body(response))
    if status in NOT_AUTHORIZED_STATUSES:
        raise NotAuthorizedError()
    if status == 404:
        raise ResourceNotFoundError()
    raise APIFailureError(status)


class RequestDispatcher:
    """
    Envoie des requetes authentifiees via un ITransport.

    Une seule tentative reseau par appel, sans retry ni timeout propre.

    Example:
        dispatcher = RequestDispatcher("key", "secret", HttpxTransport())
        body = dispatcher.get("https://media.services.pbs.org/api/v1/shows/")
    """

    def __init__(self, key: str, secret: str, transport: ITransport) -> None:
        self._transport = transport
        self._headers = {
            "Authorization": basic_auth_header(key, secret),
            "Connection": "close",
            "Accept": "application/json",
        }

    @property
    def transport(self) -> ITransport:
        return self._transport

    def get(self, url: str) -> str:
        return self._request("GET", url)

    def post(self, url: str, body: Any) -> str:
        return self._request("POST", url, body)

    def patch(self, url: str, body: Any) -> str:
        return self._request("PATCH", url, body)

    def delete(self, url: str) -> str:
        return self._request("DELETE", url)

    def _request(self, method: str, url: str, body: Optional[Any] = None) -> str:
        headers = dict(self._headers)
        content = None
        if body is not None:
            content = json.dumps(body).encode("utf-8")
            headers["Content-Type"] = "application/json"

        logger.debug(f"{method} {url}")
        response = self._transport.send(method, url, headers, content)
        logger.debug(f"{method} {url} -> HTTP {response.status_code}")
        return classify_response(response)
