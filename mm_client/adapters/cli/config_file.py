"""
Lecture et ecriture du fichier de credentials config.toml.

Format:

    [live]
    key = "..."
    secret = "..."

    [staging]
    key = "..."
    secret = "..."

Les deux sections sont optionnelles. L'absence de la section demandee est
signalee par EndpointConfigMissingError, avant tout appel reseau.
"""

from pathlib import Path
from typing import Optional

import toml
from loguru import logger
from pydantic import BaseModel, ValidationError

from mm_client.adapters.api.client import Environment
from mm_client.adapters.cli.errors import (
    ConfigStorageError,
    EndpointConfigMissingError,
    InvalidConfigError,
)


class EndpointCredentials(BaseModel):
    """Paire cle/secret pour un environnement."""

    key: str
    secret: str


class CredentialsConfig(BaseModel):
    """Contenu de config.toml."""

    live: Optional[EndpointCredentials] = None
    staging: Optional[EndpointCredentials] = None

    def credentials_for(self, environment: Environment) -> EndpointCredentials:
        """
        Retourne les credentials de l'environnement demande.

        Raises:
            EndpointConfigMissingError: Si la section est absente
        """
        credentials = getattr(self, environment.value)
        if credentials is None:
            raise EndpointConfigMissingError(environment.value)
        return credentials


class ConfigFile:
    """
    Fichier config.toml sur disque.

    Example:
        config_file = ConfigFile(Path("~/.config/mm-client/config.toml").expanduser())
        config = config_file.load()
        creds = config.credentials_for(Environment.STAGING)
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def load(self) -> CredentialsConfig:
        """
        Lit et valide le fichier.

        Raises:
            ConfigStorageError: Fichier absent ou illisible
            InvalidConfigError: Encodage, TOML ou structure invalide
        """
        try:
            raw = self._path.read_text(encoding="utf-8")
        except UnicodeDecodeError as err:
            logger.debug(f"config.toml non UTF-8 ({self._path}): {err}")
            raise InvalidConfigError() from err
        except OSError as err:
            raise ConfigStorageError(err) from err

        try:
            return CredentialsConfig.model_validate(toml.loads(raw))
        except (toml.TomlDecodeError, ValidationError) as err:
            logger.debug(f"config.toml invalide ({self._path}): {err}")
            raise InvalidConfigError() from err

    def store(self, config: CredentialsConfig) -> None:
        """
        Ecrit le fichier, en creant le repertoire parent si necessaire.

        Raises:
            ConfigStorageError: Ecriture impossible
        """
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(
                toml.dumps(config.model_dump(exclude_none=True)),
                encoding="utf-8",
            )
        except OSError as err:
            raise ConfigStorageError(err) from err
        logger.info(f"Configuration enregistree dans {self._path}")
