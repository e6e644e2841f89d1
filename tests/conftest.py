"""
Fixtures pytest partagees pour les tests mm-client.

Ce module contient les fixtures communes utilisees dans les tests:
- Credentials et URL de base de test
- Mock de ITransport pour tester le dispatcher sans reseau
- Client Media Manager branche sur un transport httpx (a mocker avec respx)
- config.toml temporaire
"""

from pathlib import Path
from typing import Iterator
from unittest.mock import MagicMock

import pytest

from mm_client.adapters.api.client import MediaManagerClient
from mm_client.adapters.api.httpx_transport import HttpxTransport
from mm_client.adapters.cli.config_file import (
    ConfigFile,
    CredentialsConfig,
    EndpointCredentials,
)
from mm_client.core.ports.transport import ITransport, TransportResponse
from tests.fixtures.media_manager_responses import BASE_URL


@pytest.fixture
def api_key() -> str:
    """Cle API de test."""
    return "test-key"


@pytest.fixture
def api_secret() -> str:
    """Secret API de test."""
    return "test-secret"


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def mock_transport() -> MagicMock:
    """
    Mock de ITransport.

    Retourne un 200 vide par defaut. Configurer send.return_value ou
    send.side_effect dans chaque test.
    """
    mock = MagicMock(spec=ITransport)
    mock.send.return_value = TransportResponse(status_code=200, body=b"")
    return mock


@pytest.fixture
def client(api_key: str, api_secret: str, base_url: str) -> Iterator[MediaManagerClient]:
    """Client reel sur HttpxTransport; les routes sont mockees par respx."""
    mm_client = MediaManagerClient(api_key, api_secret, base_url, HttpxTransport())
    yield mm_client
    mm_client.close()


@pytest.fixture
def credentials_config() -> CredentialsConfig:
    return CredentialsConfig(
        live=EndpointCredentials(key="live-key", secret="live-secret"),
        staging=EndpointCredentials(key="staging-key", secret="staging-secret"),
    )


@pytest.fixture
def config_file(tmp_path: Path, credentials_config: CredentialsConfig) -> ConfigFile:
    """config.toml temporaire contenant les deux sections."""
    config = ConfigFile(tmp_path / "mm-client" / "config.toml")
    config.store(credentials_config)
    return config
