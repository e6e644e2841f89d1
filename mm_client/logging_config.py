"""
Configuration du logging de mm-client via loguru.

Le package desactive son logger a l'import (voir mm_client/__init__.py) :
une application qui utilise le client sans configurer loguru ne voit
aucune sortie. La CLI appelle configure_logging(), qui reactive les logs
du package puis installe ses handlers :
- stderr au niveau choisi, pour ne pas se melanger au JSON affiche sur stdout
- un fichier JSON avec rotation, uniquement si un chemin est fourni
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

PACKAGE = "mm_client"

CONSOLE_FORMAT = "<level>{level: <8}</level> | <cyan>{name}</cyan> | <level>{message}</level>"


def configure_logging(
    log_level: str = "WARNING",
    log_file: Optional[Path] = None,
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Active et configure les logs de mm-client.

    Args :
        log_level : Niveau minimum pour stderr (DEBUG, INFO, WARNING, ERROR)
        log_file : Fichier de log JSON, ou None pour ne rien ecrire sur disque
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs a conserver
    """
    logger.remove()
    logger.enable(PACKAGE)

    logger.add(sys.stderr, level=log_level, format=CONSOLE_FORMAT, colorize=True)

    if log_file is None:
        return

    # Le fichier garde toutes les requetes, quel que soit le niveau console
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
    )
    logger.debug("Journal fichier actif", log_file=str(log_file))
