"""
Types de ressources exposes par l'API Media Manager.

Endpoint est une enumeration fermee. Chaque variante possede:
- une forme plurielle (la valeur de l'enum), utilisee dans les chemins d'URL
- une forme singuliere, utilisee comme tag de type dans les corps de deplacement
"""

from enum import Enum

from mm_client.core.errors import UnknownEndpointError


class Endpoint(Enum):
    """Ressource de l'API Media Manager.

    Valeurs (forme plurielle des URLs):
        ASSET: assets
        CHANGELOG: changelog
        COLLECTION: collections
        EPISODE: episodes
        FRANCHISE: franchises
        SEASON: seasons
        SHOW: shows
        SPECIAL: specials
    """

    ASSET = "assets"
    CHANGELOG = "changelog"
    COLLECTION = "collections"
    EPISODE = "episodes"
    FRANCHISE = "franchises"
    SEASON = "seasons"
    SHOW = "shows"
    SPECIAL = "specials"

    @property
    def plural(self) -> str:
        """Segment de chemin utilise dans les URLs (ex: "shows")."""
        return self.value

    @property
    def singular(self) -> str:
        """Tag de type utilise dans les corps de deplacement (ex: "show")."""
        return _SINGULAR[self]

    @classmethod
    def parse(cls, text: str) -> "Endpoint":
        """
        Retrouve un Endpoint depuis sa forme plurielle ou singuliere.

        Args:
            text: Alias exact a analyser (ex: "show", "shows")

        Returns:
            Endpoint correspondant

        Raises:
            UnknownEndpointError: Si le texte ne correspond a aucun alias,
                avec le texte d'origine tel quel
        """
        endpoint = _ALIASES.get(text)
        if endpoint is None:
            raise UnknownEndpointError(text)
        return endpoint

    def __str__(self) -> str:
        return self.value


_SINGULAR: dict[Endpoint, str] = {
    Endpoint.ASSET: "asset",
    # Pas de forme singuliere distincte cote API
    Endpoint.CHANGELOG: "changelog",
    Endpoint.COLLECTION: "collection",
    Endpoint.EPISODE: "episode",
    Endpoint.FRANCHISE: "franchise",
    Endpoint.SEASON: "season",
    Endpoint.SHOW: "show",
    Endpoint.SPECIAL: "special",
}

_ALIASES: dict[str, Endpoint] = {
    **{endpoint.plural: endpoint for endpoint in Endpoint},
    **{singular: endpoint for endpoint, singular in _SINGULAR.items()},
}
