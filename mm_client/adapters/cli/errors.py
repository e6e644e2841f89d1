"""
Erreurs de la CLI et du fichier de configuration.

Ces erreurs sont produites par la couche CLI, jamais par le client API.
Les erreurs du client (MediaManagerError) sont affichees telles quelles.
"""

from mm_client.core.errors import MediaManagerError


class CLIError(MediaManagerError):
    """Erreur de base de la CLI."""


class InvalidConfigError(CLIError):
    """config.toml illisible (TOML invalide ou propriete manquante)."""

    def __init__(self) -> None:
        super().__init__(
            "Supplied config.toml could not be understood. Try checking for a "
            "misspelled or missing property."
        )


class EndpointConfigMissingError(CLIError):
    """
    La section de l'environnement demande est absente de config.toml.

    Attributes:
        section: Nom de la section manquante ("live" ou "staging")
    """

    def __init__(self, section: str) -> None:
        self.section = section
        super().__init__(
            f"config.toml is missing the key/secret pair for this endpoint ({section})."
        )


class ConfigStorageError(CLIError):
    """Lecture ou ecriture de config.toml impossible (cause chainee)."""

    def __init__(self, cause: OSError) -> None:
        self.cause = cause
        super().__init__(str(cause))


class FormatError(CLIError):
    """La reponse du serveur n'est pas du JSON affichable."""

    def __init__(self) -> None:
        super().__init__("Failure to format response.")
