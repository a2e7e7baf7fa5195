"""Tests for RelayClient and the module-level convenience functions."""

import json
import os
from unittest.mock import patch

import httpx
import pytest
import respx

import relay_sdk
from relay_sdk.client import RelayClient, get_relay_client
from relay_sdk.exceptions import NetworkFailure, ParseError, TransportUnavailable


class TestRelayClientFromEnv:
    """Tests for RelayClient.from_env()."""

    def test_from_env_with_all_vars(self):
        """Should read base URL, token and debug flag."""
        env = {
            "RELAY_BASE_URL": "http://test/api/",
            "RELAY_AUTH_TOKEN": "env-token",
            "RELAY_DEBUG": "1",
        }
        with patch.dict(os.environ, env, clear=True):
            client = RelayClient.from_env()
            assert client._base_url == "http://test/api/"
            assert client._auth_token == "env-token"
            assert client._debug is True

    def test_from_env_defaults(self):
        """Should fall back to no base URL, no token and no debug."""
        with patch.dict(os.environ, {}, clear=True):
            client = RelayClient.from_env()
            assert client._base_url is None
            assert client._auth_token is None
            assert client._debug is False

    def test_from_env_kwargs_take_precedence(self):
        """Should let keyword arguments override the environment."""
        with patch.dict(os.environ, {"RELAY_AUTH_TOKEN": "env-token"}, clear=True):
            client = RelayClient.from_env(auth_token="explicit")
            assert client._auth_token == "explicit"

    def test_get_relay_client(self):
        """Should return a client configured from the environment."""
        with patch.dict(os.environ, {}, clear=True):
            assert isinstance(get_relay_client(), RelayClient)


class TestRelayClientGet:
    """Tests for GET requests over httpx."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_text(self):
        """Should resolve with the body text."""
        respx.get("http://test/page").mock(return_value=httpx.Response(200, text="hello"))
        assert await RelayClient().get_text("http://test/page") == "hello"

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_blob(self):
        """Should resolve with the raw bytes."""
        respx.get("http://test/file").mock(return_value=httpx.Response(200, content=b"\x89PNG"))
        assert await RelayClient().get_blob("http://test/file") == b"\x89PNG"

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_json(self):
        """Should resolve with the decoded JSON value."""
        respx.get("http://test/json").mock(return_value=httpx.Response(200, text='{"a":1}'))
        assert await RelayClient().get_json("http://test/json") == {"a": 1}

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_json_malformed(self):
        """Should raise ParseError for malformed JSON."""
        respx.get("http://test/json").mock(return_value=httpx.Response(200, text="{a:"))
        with pytest.raises(ParseError):
            await RelayClient().get_json("http://test/json")

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_error_status(self):
        """Should reject with the HTTP status."""
        respx.get("http://test/missing").mock(return_value=httpx.Response(404))
        with pytest.raises(NetworkFailure) as exc_info:
            await RelayClient().get_text("http://test/missing")
        assert exc_info.value.status == 404

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_json_error_status(self):
        """Should reject structured GETs with the HTTP status too."""
        respx.get("http://test/json").mock(return_value=httpx.Response(500, text="oops"))
        with pytest.raises(NetworkFailure) as exc_info:
            await RelayClient().get_json("http://test/json")
        assert exc_info.value.status == 500

    @pytest.mark.asyncio
    @respx.mock
    async def test_base_url(self):
        """Should resolve relative URLs against the base URL."""
        route = respx.get("http://test/api/items").mock(return_value=httpx.Response(200, text="[]"))
        client = RelayClient(base_url="http://test/api/")
        assert await client.get_json("items") == []
        assert route.called


class TestRelayClientCredentials:
    """Tests for credential forwarding."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_plain_request_has_no_token(self):
        """Should not forward the token without credentials."""
        route = respx.get("http://test/me").mock(return_value=httpx.Response(200, text="{}"))
        await RelayClient(auth_token="secret-token").get_json("http://test/me")
        assert "authorization" not in route.calls.last.request.headers

    @pytest.mark.asyncio
    @respx.mock
    async def test_with_credentials_forwards_token(self):
        """Should forward the token for credentialed requests."""
        route = respx.get("http://test/me").mock(return_value=httpx.Response(200, text="{}"))
        await RelayClient(auth_token="secret-token").get_json_with_credentials("http://test/me")
        assert route.calls.last.request.headers["authorization"] == "Bearer secret-token"

    @pytest.mark.asyncio
    @respx.mock
    async def test_text_and_blob_with_credentials(self):
        """Should forward the token for text and blob requests."""
        route = respx.get("http://test/me").mock(return_value=httpx.Response(200, text="hi"))
        client = RelayClient(auth_token="secret-token")
        assert await client.get_text_with_credentials("http://test/me") == "hi"
        assert await client.get_blob_with_credentials("http://test/me") == b"hi"
        assert all(
            call.request.headers["authorization"] == "Bearer secret-token" for call in route.calls
        )


class TestRelayClientPost:
    """Tests for POST requests over httpx."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_post_text(self):
        """Should send a form-encoded body."""
        route = respx.post("http://test/form").mock(return_value=httpx.Response(200, text="ok"))
        assert await RelayClient().post_text("http://test/form", "a=1&b=2") == "ok"

        request = route.calls.last.request
        assert request.headers["content-type"] == "application/x-www-form-urlencoded"
        assert request.content == b"a=1&b=2"

    @pytest.mark.asyncio
    @respx.mock
    async def test_post_json(self):
        """Should send a JSON body."""
        route = respx.post("http://test/items").mock(return_value=httpx.Response(201, text="created"))
        result = await RelayClient().post_json("http://test/items", {"name": "item"})
        assert result == "created"

        request = route.calls.last.request
        assert request.headers["content-type"] == "application/json"
        assert json.loads(request.content) == {"name": "item"}

    @pytest.mark.asyncio
    @respx.mock
    async def test_post_with_credentials(self):
        """Should forward the token for credentialed POSTs."""
        route = respx.post("http://test/items").mock(return_value=httpx.Response(200))
        client = RelayClient(auth_token="secret-token")
        await client.post_text_with_credentials("http://test/items", "a=1")
        await client.post_json_with_credentials("http://test/items", {"a": 1})
        assert all(
            call.request.headers["authorization"] == "Bearer secret-token" for call in route.calls
        )

    @pytest.mark.asyncio
    @respx.mock
    async def test_post_error_status(self):
        """Should reject with the HTTP status."""
        respx.post("http://test/items").mock(return_value=httpx.Response(422))
        with pytest.raises(NetworkFailure) as exc_info:
            await RelayClient().post_json("http://test/items", {})
        assert exc_info.value.status == 422


class TestRelayClientHandleFactory:
    """Tests for custom transport handles."""

    @pytest.mark.asyncio
    async def test_uses_handle_factory(self, fake_handle):
        """Should dispatch through the given handle factory."""
        handle = fake_handle(response_text="hello")
        client = RelayClient(handle_factory=lambda: handle)
        assert await client.get_text_with_credentials("http://test/page") == "hello"
        assert handle.with_credentials is True
        assert handle.url == "http://test/page"

    @pytest.mark.asyncio
    async def test_get_json_passes_structured_through(self, fake_handle):
        """Should not re-parse values the transport already decoded."""
        handle = fake_handle(response={"a": 1})
        client = RelayClient(handle_factory=lambda: handle)
        assert await client.get_json("http://test/json") == {"a": 1}


class TestRelayClientMonkey:
    """Tests for the host transport."""

    def test_monkey_without_host_raises(self):
        """Should raise TransportUnavailable synchronously."""
        with pytest.raises(TransportUnavailable):
            RelayClient().monkey({"url": "http://test/api"})

    @pytest.mark.asyncio
    async def test_monkey_with_host(self):
        """Should send through the configured host function."""

        def host(details):
            details["onload"]({"response": details["method"]})

        assert await RelayClient(host_request=host).monkey({"url": "http://test/api"}) == "GET"


class TestModuleFunctions:
    """Tests for the environment-configured module functions."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_text(self):
        """Should use the environment's base URL."""
        respx.get("http://test/api/page").mock(return_value=httpx.Response(200, text="hello"))
        with patch.dict(os.environ, {"RELAY_BASE_URL": "http://test/api/"}, clear=True):
            assert await relay_sdk.get_text("page") == "hello"

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_json_with_credentials(self):
        """Should forward the environment's token."""
        route = respx.get("http://test/me").mock(return_value=httpx.Response(200, json={"id": 1}))
        with patch.dict(os.environ, {"RELAY_AUTH_TOKEN": "env-token"}, clear=True):
            assert await relay_sdk.get_json_with_credentials("http://test/me") == {"id": 1}
        assert route.calls.last.request.headers["authorization"] == "Bearer env-token"

    @pytest.mark.asyncio
    @respx.mock
    async def test_post_json(self):
        """Should post JSON through a fresh client."""
        route = respx.post("http://test/items").mock(return_value=httpx.Response(200))
        with patch.dict(os.environ, {}, clear=True):
            await relay_sdk.post_json("http://test/items", [1, 2])
        assert json.loads(route.calls.last.request.content) == [1, 2]

    def test_monkey_without_host_raises(self):
        """Should raise TransportUnavailable before any future exists."""
        with pytest.raises(TransportUnavailable):
            relay_sdk.monkey({"url": "http://test/api"})
