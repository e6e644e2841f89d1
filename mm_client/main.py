"""
Point d'entrée CLI de mm-client.

Active et configure le logging du package puis lance la commande `mm`.
"""

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import query
from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="mm",
    help="MediaManager CLI - interroge l'API PBS Media Manager",
    add_completion=False,
)

app.command()(query)


def main() -> None:
    """Point d'entrée de l'application."""
    settings = Container().config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    logger.debug("Démarrage de mm-client", version=__version__)

    app()


if __name__ == "__main__":
    main()
