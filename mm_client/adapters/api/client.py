"""
Client de l'API PBS Media Manager.

Presente des operations par ressource (get, list, child_list, create, edit,
update, delete, change_parent) sans que l'appelant construise les URLs.
Compose url_builder pour les chemins et RequestDispatcher pour l'envoi.

Les raccourcis par ressource (show, seasons, episodes...) sont generes a
partir des operations generiques et n'ont aucune logique propre.

Usage:
    client = MediaManagerClient.staging("key", "secret")
    body = client.show("adams-chronicles")
    body = client.seasons("adams-chronicles", [("page", "2")])
    client.change_parent(Endpoint.SEASON, "S9", Endpoint.SPECIAL, "SP3")
    client.close()
"""

from enum import Enum
from typing import Any, Callable, Optional

from loguru import logger

from mm_client.adapters.api.dispatcher import RequestDispatcher
from mm_client.adapters.api.httpx_transport import HttpxTransport
from mm_client.adapters.api.url_builder import build_edit_url, build_url
from mm_client.core.entities.endpoint import Endpoint
from mm_client.core.ports.transport import ITransport
from mm_client.core.value_objects.move import MoveRequest
from mm_client.core.value_objects.request import ParentEndpoint, Params

PRODUCTION_URL = "https://media.services.pbs.org/api/v1"
STAGING_URL = "https://media-staging.services.pbs.org/api/v1"


class Environment(Enum):
    """Environnement cible de l'API.

    Valeurs:
        LIVE: API de production
        STAGING: API de pre-production
    """

    LIVE = "live"
    STAGING = "staging"

    @property
    def default_base_url(self) -> str:
        return PRODUCTION_URL if self is Environment.LIVE else STAGING_URL


def _get_shorthand(endpoint: Endpoint) -> Callable[..., str]:
    def shorthand(self: "MediaManagerClient", id: str, params: Optional[Params] = None) -> str:
        return self.get(endpoint, id, params)

    shorthand.__name__ = endpoint.singular
    shorthand.__doc__ = f"Recupere un {endpoint.singular} (GET /{endpoint.plural}/{{id}}/)."
    return shorthand


def _list_shorthand(endpoint: Endpoint) -> Callable[..., str]:
    def shorthand(self: "MediaManagerClient", params: Optional[Params] = None) -> str:
        return self.list(endpoint, params)

    shorthand.__name__ = endpoint.plural
    shorthand.__doc__ = f"Liste les {endpoint.plural} (GET /{endpoint.plural}/)."
    return shorthand


def _child_list_shorthand(
    endpoint: Endpoint, parent: Endpoint, name: Optional[str] = None
) -> Callable[..., str]:
    def shorthand(
        self: "MediaManagerClient", parent_id: str, params: Optional[Params] = None
    ) -> str:
        return self.child_list(endpoint, parent_id, parent, params)

    shorthand.__name__ = name or endpoint.plural
    shorthand.__doc__ = (
        f"Liste les {endpoint.plural} d'un {parent.singular} "
        f"(GET /{parent.plural}/{{parent_id}}/{endpoint.plural}/)."
    )
    return shorthand


class MediaManagerClient:
    """
    Client de l'API Media Manager.

    Immutable apres construction: peut etre partage entre threads. Chaque
    operation effectue un seul aller-retour reseau et retourne le corps
    brut de la reponse (texte), ou leve une MediaManagerError.

    Attributes:
        base_url: URL de base de l'API ciblee
    """

    __slots__ = ("_key", "_base_url", "_dispatcher")

    def __init__(
        self,
        key: str,
        secret: str,
        base_url: str = PRODUCTION_URL,
        transport: Optional[ITransport] = None,
    ) -> None:
        """
        Initialise le client.

        Args:
            key: Cle API Media Manager
            secret: Secret API Media Manager
            base_url: URL de base (production par defaut)
            transport: Transport HTTP; HttpxTransport par defaut
        """
        self._key = key
        self._base_url = base_url.rstrip("/")
        self._dispatcher = RequestDispatcher(key, secret, transport or HttpxTransport())

    @classmethod
    def for_environment(
        cls,
        key: str,
        secret: str,
        environment: Environment,
        base_url: Optional[str] = None,
        transport: Optional[ITransport] = None,
    ) -> "MediaManagerClient":
        """Client pour un environnement, avec une URL de base surchargeable."""
        return cls(key, secret, base_url or environment.default_base_url, transport)

    @classmethod
    def live(
        cls, key: str, secret: str, transport: Optional[ITransport] = None
    ) -> "MediaManagerClient":
        return cls.for_environment(key, secret, Environment.LIVE, transport=transport)

    @classmethod
    def staging(
        cls, key: str, secret: str, transport: Optional[ITransport] = None
    ) -> "MediaManagerClient":
        return cls.for_environment(key, secret, Environment.STAGING, transport=transport)

    @property
    def base_url(self) -> str:
        return self._base_url

    def __repr__(self) -> str:
        return f"MediaManagerClient(key={self._key!r}, base_url={self._base_url!r})"

    # Operations generiques

    def get(self, endpoint: Endpoint, id: str, params: Optional[Params] = None) -> str:
        """
        Recupere une ressource unique.

        Args:
            endpoint: Type de ressource
            id: ID de la ressource
            params: Parametres optionnels (ex: champs a inclure)
        """
        return self._dispatcher.get(build_url(self._base_url, endpoint, id, params or ()))

    def list(self, endpoint: Endpoint, params: Optional[Params] = None) -> str:
        """Recupere une collection de premier niveau (GET /{endpoint}/)."""
        return self._dispatcher.get(build_url(self._base_url, endpoint, params=params or ()))

    def child_list(
        self,
        endpoint: Endpoint,
        parent_id: str,
        parent_endpoint: Endpoint,
        params: Optional[Params] = None,
    ) -> str:
        """
        Recupere les enfants d'une ressource parente.

        Exemple: les seasons d'un show, GET /shows/{parent_id}/seasons/.
        """
        parent = ParentEndpoint(parent_endpoint, parent_id)
        return self._dispatcher.get(
            build_url(self._base_url, endpoint, params=params or (), parent=parent)
        )

    def create(
        self,
        parent_endpoint: Endpoint,
        parent_id: str,
        endpoint: Endpoint,
        body: Any,
    ) -> str:
        """
        Cree une ressource enfant sous un parent (POST sur la liste enfant).

        Tout statut 200/204 est un succes; le corps (eventuellement vide)
        est retourne sans interpretation.
        """
        parent = ParentEndpoint(parent_endpoint, parent_id)
        return self._dispatcher.post(build_url(self._base_url, endpoint, parent=parent), body)

    def edit(self, endpoint: Endpoint, id: str) -> str:
        """Recupere la representation editable d'une ressource (GET .../edit/)."""
        return self._dispatcher.get(build_edit_url(self._base_url, endpoint, id))

    def update(self, endpoint: Endpoint, id: str, body: Any) -> str:
        """Met a jour une ressource (PATCH .../edit/)."""
        return self._dispatcher.patch(build_edit_url(self._base_url, endpoint, id), body)

    def delete(self, endpoint: Endpoint, id: str) -> str:
        """Supprime une ressource (DELETE .../edit/)."""
        return self._dispatcher.delete(build_edit_url(self._base_url, endpoint, id))

    def change_parent(
        self,
        new_parent_endpoint: Endpoint,
        new_parent_id: str,
        child_endpoint: Endpoint,
        child_id: str,
    ) -> str:
        """
        Deplace une ressource sous un nouveau parent (season ou show).

        Envoie un PATCH sur l'URL simple (non edit) de l'enfant. Deux appels
        successifs produisent deux PATCH: aucune deduplication.

        Raises:
            UnsupportedMoveParentError: Si le parent n'est ni SEASON ni SHOW,
                avant tout appel reseau
        """
        move = MoveRequest.build(new_parent_endpoint, new_parent_id, child_endpoint, child_id)
        logger.debug(
            f"Deplacement de {child_endpoint.singular} {child_id} "
            f"vers {new_parent_endpoint.singular} {new_parent_id}"
        )
        return self._dispatcher.patch(
            build_url(self._base_url, child_endpoint, child_id), move.to_dict()
        )

    def url(self, url: str) -> str:
        """GET sur une URL absolue (ex: liens de pagination renvoyes par l'API)."""
        return self._dispatcher.get(url)

    def close(self) -> None:
        """Ferme le transport HTTP."""
        self._dispatcher.transport.close()

    def __enter__(self) -> "MediaManagerClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # Raccourcis generes

    asset = _get_shorthand(Endpoint.ASSET)
    collection = _get_shorthand(Endpoint.COLLECTION)
    episode = _get_shorthand(Endpoint.EPISODE)
    franchise = _get_shorthand(Endpoint.FRANCHISE)
    season = _get_shorthand(Endpoint.SEASON)
    show = _get_shorthand(Endpoint.SHOW)
    special = _get_shorthand(Endpoint.SPECIAL)

    changelog = _list_shorthand(Endpoint.CHANGELOG)
    franchises = _list_shorthand(Endpoint.FRANCHISE)
    shows = _list_shorthand(Endpoint.SHOW)

    seasons = _child_list_shorthand(Endpoint.SEASON, Endpoint.SHOW)
    specials = _child_list_shorthand(Endpoint.SPECIAL, Endpoint.SHOW)
    collections = _child_list_shorthand(Endpoint.COLLECTION, Endpoint.SHOW)
    episodes = _child_list_shorthand(Endpoint.EPISODE, Endpoint.SEASON)
    franchise_shows = _child_list_shorthand(Endpoint.SHOW, Endpoint.FRANCHISE, "franchise_shows")

    def assets(
        self,
        parent_endpoint: Endpoint,
        parent_id: str,
        params: Optional[Params] = None,
    ) -> str:
        """Liste les assets de n'importe quel parent (GET /{parent}/{id}/assets/)."""
        return self.child_list(Endpoint.ASSET, parent_id, parent_endpoint, params)
