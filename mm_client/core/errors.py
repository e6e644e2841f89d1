"""
Taxonomie d'erreurs du client Media Manager.

Toutes les erreurs derivent de MediaManagerError et sont levees (jamais
retournees). Deux familles intermediaires permettent de distinguer:
- APIError : le serveur a repondu avec un statut d'echec (400, 401/403, 404, autre)
- TransportFailure : le client n'a pas pu envoyer la requete ou consommer
  une reponse pourtant livree (reseau, lecture du flux, decodage UTF-8)

Les erreurs d'endpoint (UnknownEndpointError, UnsupportedMoveParentError)
sont detectees avant tout appel reseau.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mm_client.core.entities.endpoint import Endpoint


class MediaManagerError(Exception):
    """Erreur de base pour toutes les erreurs du client Media Manager."""


class UnknownEndpointError(MediaManagerError):
    """
    Levee quand une chaine ne correspond a aucun alias d'endpoint connu.

    Attributes:
        text: Texte fourni, conserve tel quel
    """

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(
            f"Requested endpoint is not in the list of known endpoints: {text!r}"
        )


class UnsupportedMoveParentError(MediaManagerError):
    """
    Levee quand change_parent recoit un parent autre que Season ou Show.

    Attributes:
        endpoint: Endpoint parent refuse
    """

    def __init__(self, endpoint: "Endpoint") -> None:
        self.endpoint = endpoint
        super().__init__(
            f"Resources can only be moved under a season or a show, not {endpoint}"
        )


class APIError(MediaManagerError):
    """Le serveur a repondu avec un statut HTTP d'echec."""


class NotAuthorizedError(APIError):
    """HTTP 401 ou 403."""

    def __init__(self) -> None:
        super().__init__(
            "Supplied credentials are not authorized to access this resource"
        )


class ResourceNotFoundError(APIError):
    """HTTP 404."""

    def __init__(self) -> None:
        super().__init__("Specified resource could not be found")


class BadRequestError(APIError):
    """
    HTTP 400. Le message du serveur est conserve mot pour mot.

    Attributes:
        message: Corps de la reponse, decode en texte
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"API did not understand request: {message}")


class APIFailureError(APIError):
    """
    Tout autre statut HTTP non reussi.

    Attributes:
        status_code: Code de statut HTTP brut renvoye par le serveur
    """

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"Unknown failure of the API endpoint (HTTP {status_code})")


class TransportFailure(MediaManagerError):
    """
    Echec cote client: la cause d'origine est chainee via __cause__.

    Les sous-classes sont levees avec `raise ... from err`.
    """

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(str(cause) or type(cause).__name__)


class NetworkError(TransportFailure):
    """La requete n'a pas pu aboutir (DNS, connexion, TLS, timeout...)."""


class BodyReadError(TransportFailure):
    """Le flux de la reponse n'a pas pu etre lu entierement."""


class ConvertError(TransportFailure):
    """Le corps de la reponse n'est pas du texte UTF-8 valide."""
