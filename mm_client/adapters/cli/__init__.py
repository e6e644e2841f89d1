"""
Interface ligne de commande (Typer) et fichier de credentials.

La commande elle-meme est dans commands.py, montee par mm_client.main.
"""

from mm_client.adapters.cli.config_file import (
    ConfigFile,
    CredentialsConfig,
    EndpointCredentials,
)
from mm_client.adapters.cli.errors import (
    CLIError,
    ConfigStorageError,
    EndpointConfigMissingError,
    FormatError,
    InvalidConfigError,
)

__all__ = [
    "CLIError",
    "ConfigFile",
    "ConfigStorageError",
    "CredentialsConfig",
    "EndpointConfigMissingError",
    "EndpointCredentials",
    "FormatError",
    "InvalidConfigError",
]
