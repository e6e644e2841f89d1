"""
Transport HTTP par defaut, base sur httpx (mode synchrone).

Implemente ITransport avec un httpx.Client cree a la demande. La reponse
est recue en streaming puis lue explicitement, ce qui permet de distinguer:
- l'echec de la requete elle-meme -> NetworkError
- l'echec de lecture du corps d'une reponse deja recue -> BodyReadError

Aucun retry n'est effectue: une seule tentative reseau par appel.
"""

import threading
from typing import Mapping, Optional

import httpx
from loguru import logger

from mm_client.core.errors import BodyReadError, NetworkError
from mm_client.core.ports.transport import ITransport, TransportResponse


class HttpxTransport(ITransport):
    """
    Transport bloquant sur httpx.Client.

    Example:
        transport = HttpxTransport(timeout=30.0)
        response = transport.send("GET", "https://example.org/", {})
        transport.close()
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        client: Optional[httpx.Client] = None,
    ) -> None:
        """
        Initialise le transport.

        Args:
            timeout: Timeout en secondes, ou None pour garder le defaut httpx
            client: Client httpx deja configure (tests, application hote).
                Il reste a la charge de l'appelant: close() ne le ferme pas.
        """
        self._timeout = timeout
        self._client = client
        self._owns_client = client is None
        self._lock = threading.Lock()

    def _get_client(self) -> httpx.Client:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        with self._lock:
            if self._owns_client and (self._client is None or self._client.is_closed):
                if self._timeout is None:
                    self._client = httpx.Client()
                else:
                    self._client = httpx.Client(timeout=self._timeout)
            return self._client

    def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: Optional[bytes] = None,
    ) -> TransportResponse:
        client = self._get_client()
        try:
            request = client.build_request(method, url, headers=dict(headers), content=body)
            response = client.send(request, stream=True)
        except (httpx.TransportError, httpx.InvalidURL) as err:
            logger.debug(f"{method} {url} -> echec reseau: {err!r}")
            raise NetworkError(err) from err

        try:
            content = response.read()
        except (httpx.TransportError, httpx.DecodingError) as err:
            logger.debug(f"{method} {url} -> echec de lecture du corps: {err!r}")
            raise BodyReadError(err) from err
        finally:
            response.close()

        return TransportResponse(
            status_code=response.status_code,
            body=content,
            headers=dict(response.headers),
        )

    def close(self) -> None:
        """Ferme le client HTTP cree par le transport (un client injecte reste ouvert)."""
        with self._lock:
            if self._owns_client and self._client is not None:
                self._client.close()
                self._client = None

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
