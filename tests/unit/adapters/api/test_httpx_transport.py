"""
Tests pour HttpxTransport.

Uses respx to mock HTTP requests, and httpx.MockTransport for a response
whose body stream breaks while being read.
"""

from typing import Iterator

import httpx
import pytest
import respx

from mm_client.adapters.api.httpx_transport import HttpxTransport
from mm_client.core.errors import BodyReadError, NetworkError

URL = "https://mm.test/api/v1/shows/42/"


class _BrokenStream(httpx.SyncByteStream):
    """Flux qui echoue apres le premier fragment."""

    def __iter__(self) -> Iterator[bytes]:
        yield b'{"partial"'
        raise httpx.ReadError("connection reset by peer")


class TestHttpxTransportSend:
    """Tests de l'envoi et de la lecture de la reponse."""

    @respx.mock
    def test_returns_status_body_and_headers(self) -> None:
        route = respx.get(URL).mock(
            return_value=httpx.Response(
                200,
                content=b'{"name":"value"}',
                headers={"content-type": "application/json"},
            )
        )

        with HttpxTransport() as transport:
            response = transport.send("GET", URL, {"Connection": "close"})

        assert route.call_count == 1
        assert response.status_code == 200
        assert response.body == b'{"name":"value"}'
        assert response.headers["content-type"] == "application/json"

    @respx.mock
    def test_sends_headers_and_body(self) -> None:
        route = respx.patch(URL).mock(return_value=httpx.Response(204))

        with HttpxTransport() as transport:
            transport.send("PATCH", URL, {"X-Test": "1"}, b'{"a": 1}')

        request = route.calls.last.request
        assert request.headers["X-Test"] == "1"
        assert request.content == b'{"a": 1}'

    @respx.mock
    def test_error_statuses_are_returned_not_raised(self) -> None:
        respx.get(URL).mock(return_value=httpx.Response(500, content=b"oops"))

        with HttpxTransport() as transport:
            response = transport.send("GET", URL, {})

        assert response.status_code == 500
        assert response.body == b"oops"

    @respx.mock
    def test_connect_error_is_network_error(self) -> None:
        respx.get(URL).mock(side_effect=httpx.ConnectError("connection refused"))

        with HttpxTransport() as transport:
            with pytest.raises(NetworkError) as exc_info:
                transport.send("GET", URL, {})

        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @respx.mock
    def test_timeout_is_network_error(self) -> None:
        route = respx.get(URL).mock(side_effect=httpx.ConnectTimeout("timed out"))

        with HttpxTransport() as transport:
            with pytest.raises(NetworkError):
                transport.send("GET", URL, {})

        assert route.call_count == 1

    def test_broken_body_stream_is_body_read_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, stream=_BrokenStream())

        http_client = httpx.Client(transport=httpx.MockTransport(handler))
        with HttpxTransport(client=http_client) as transport:
            with pytest.raises(BodyReadError) as exc_info:
                transport.send("GET", URL, {})
        http_client.close()

        assert isinstance(exc_info.value.__cause__, httpx.ReadError)

    def test_unsupported_scheme_is_network_error(self) -> None:
        with HttpxTransport() as transport:
            with pytest.raises(NetworkError):
                transport.send("GET", "ftp://mm.test/shows/", {})


class TestHttpxTransportLifecycle:
    """Tests de creation et fermeture du client httpx."""

    def test_timeout_is_passed_to_client(self) -> None:
        transport = HttpxTransport(timeout=12.5)
        try:
            assert transport._get_client().timeout == httpx.Timeout(12.5)
        finally:
            transport.close()

    def test_client_is_reused_then_recreated_after_close(self) -> None:
        transport = HttpxTransport()
        first = transport._get_client()
        assert transport._get_client() is first

        transport.close()
        assert first.is_closed

        second = transport._get_client()
        assert second is not first
        transport.close()

    def test_injected_client_is_left_open_and_kept(self) -> None:
        http_client = httpx.Client(
            transport=httpx.MockTransport(lambda request: httpx.Response(200, content=b"ok")),
            headers={"X-Host": "proxy-settings"},
        )
        transport = HttpxTransport(client=http_client)

        transport.send("GET", URL, {})
        transport.close()

        assert not http_client.is_closed
        assert transport._get_client() is http_client
        response = transport.send("GET", URL, {})
        assert response.body == b"ok"
        http_client.close()
