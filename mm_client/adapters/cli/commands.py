"""
Commande CLI `mm` : interroge un objet Media Manager par type et id.

Exemples:
  mm show adams-chronicles          # API de production
  mm -s episode 1a2b3c              # API de staging
  mm --init                         # (re)genere config.toml
"""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from mm_client.adapters.api.client import Environment, MediaManagerClient
from mm_client.adapters.cli.config_file import (
    ConfigFile,
    CredentialsConfig,
    EndpointCredentials,
)
from mm_client.adapters.cli.errors import FormatError
from mm_client.config import Settings
from mm_client.container import Container
from mm_client.core.entities.endpoint import Endpoint
from mm_client.core.errors import MediaManagerError
from mm_client.core.ports.transport import ITransport

console = Console()


def query(
    type_: Annotated[
        Optional[str],
        typer.Argument(metavar="TYPE", help="Type d'objet a interroger (ex: show, episode)"),
    ] = None,
    id: Annotated[
        Optional[str],
        typer.Argument(help="Id de l'objet a interroger"),
    ] = None,
    init: Annotated[
        bool,
        typer.Option("--init", help="Cree ou remplace le fichier config.toml"),
    ] = False,
    staging: Annotated[
        bool,
        typer.Option("--staging", "-s", help="Interroge l'environnement de staging"),
    ] = False,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", help="Chemin de config.toml (defaut: repertoire de l'application)"),
    ] = None,
) -> None:
    """
    Affiche un objet Media Manager en JSON indente.

    Sans config.toml, la commande propose d'en generer un.
    """
    container = Container()
    settings = container.config()
    config_file = ConfigFile(config.expanduser()) if config else container.config_file()
    environment = Environment.STAGING if staging else Environment.LIVE

    try:
        if init:
            generate_config(config_file)

        if type_ is None or id is None:
            return

        if not config_file.exists():
            generate_config(config_file)

        credentials_config = config_file.load()
        endpoint = Endpoint.parse(type_)
        transport = container.transport()
        try:
            output = fetch(credentials_config, environment, endpoint, id, settings, transport)
        finally:
            transport.close()
    except MediaManagerError as err:
        console.print(f"An error occured: {escape(str(err))}", soft_wrap=True)
        raise typer.Exit(1)

    typer.echo(output)


def fetch(
    credentials_config: CredentialsConfig,
    environment: Environment,
    endpoint: Endpoint,
    id: str,
    settings: Settings,
    transport: ITransport,
) -> str:
    """
    Recupere un objet et le formate pour l'affichage.

    Raises:
        EndpointConfigMissingError: Section absente, avant tout appel reseau
        MediaManagerError: Toute erreur du client
        FormatError: Reponse non JSON
    """
    credentials = credentials_config.credentials_for(environment)
    client = MediaManagerClient.for_environment(
        credentials.key,
        credentials.secret,
        environment,
        base_url=settings.base_url_for(environment),
        transport=transport,
    )
    return to_pretty_print(client.get(endpoint, id))


def to_pretty_print(json_string: str) -> str:
    """
    Reformate une chaine JSON avec indentation.

    Raises:
        FormatError: Si la chaine n'est pas du JSON valide
    """
    try:
        parsed = json.loads(json_string)
    except ValueError as err:
        raise FormatError() from err
    return json.dumps(parsed, indent=2, ensure_ascii=False)


def generate_config(config_file: ConfigFile) -> CredentialsConfig:
    """Demande les credentials de production et de staging puis ecrit config.toml."""
    console.print("[bold]config.toml Generator[/bold]")
    config = CredentialsConfig(
        live=EndpointCredentials(
            key=typer.prompt("Production API Key"),
            secret=typer.prompt("Production API Secret", hide_input=True),
        ),
        staging=EndpointCredentials(
            key=typer.prompt("Staging API Key"),
            secret=typer.prompt("Staging API Secret", hide_input=True),
        ),
    )
    config_file.store(config)
    console.print(f"Configuration ecrite dans {escape(str(config_file.path))}", soft_wrap=True)
    return config
