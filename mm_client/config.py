"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe MMCLIENT_,
et peut optionnellement être fournie via un fichier .env.

Les credentials API ne sont PAS ici : ils sont dans config.toml (voir adapters/cli/config_file.py).
"""

from pathlib import Path
from typing import Optional

import typer
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from mm_client.adapters.api.client import PRODUCTION_URL, STAGING_URL, Environment

APP_NAME = "mm-client"


def default_config_path() -> Path:
    """Emplacement par défaut de config.toml dans le répertoire de l'application."""
    return Path(typer.get_app_dir(APP_NAME)) / "config.toml"


def default_log_file() -> Path:
    return Path(typer.get_app_dir(APP_NAME)) / "logs" / "mm-client.log"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe MMCLIENT_.
    Exemple : MMCLIENT_STAGING_URL=http://localhost:8080/api/v1

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="MMCLIENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # URLs de base de l'API
    production_url: str = Field(default=PRODUCTION_URL)
    staging_url: str = Field(default=STAGING_URL)

    # Fichier de credentials
    config_path: Path = Field(default_factory=default_config_path)

    # Transport HTTP (None = défaut httpx)
    http_timeout: Optional[float] = Field(default=None, gt=0)

    # Logging (stderr + fichier optionnel, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="WARNING")
    log_file: Optional[Path] = Field(default_factory=default_log_file)
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("config_path", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_log_file(cls, v: str | Path | None) -> Optional[Path]:
        """Une valeur vide (MMCLIENT_LOG_FILE=) désactive le fichier de log."""
        if v is None or v == "":
            return None
        return Path(v).expanduser()

    def base_url_for(self, environment: Environment) -> str:
        """URL de base configurée pour un environnement."""
        if environment is Environment.STAGING:
            return self.staging_url
        return self.production_url
