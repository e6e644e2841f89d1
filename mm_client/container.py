"""
Container d'injection de dependances via dependency-injector.

Fournit les parametres, le transport HTTP partage et l'acces au fichier
de credentials a la CLI.
"""

from dependency_injector import containers, providers

from .adapters.api.httpx_transport import HttpxTransport
from .adapters.cli.config_file import ConfigFile
from .config import Settings


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        settings = container.config()
        transport = container.transport()
        config_file = container.config_file()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Transport - un seul client httpx pour le processus
    transport = providers.Singleton(
        HttpxTransport,
        timeout=config.provided.http_timeout,
    )

    # Fichier de credentials
    config_file = providers.Factory(
        ConfigFile,
        path=config.provided.config_path,
    )
