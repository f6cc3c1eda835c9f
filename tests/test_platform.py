"""
Tests for token sources and output writing.

Tests cover:
- SnapshotSource loading YAML and JSON snapshots
- RemoteTokenClient requests and status handling
- write_output_files
"""

import json
from pathlib import Path

import httpx
import pytest

from chuk_mcp_tokens.errors import (
    ArtifactMissingError,
    AuthenticationError,
    ConfigurationError,
    MissingContextError,
    NotFoundError,
    RemoteFetchError,
)
from chuk_mcp_tokens.export import OutputFile
from chuk_mcp_tokens.models import RemoteVersionIdentifier
from chuk_mcp_tokens.platform import (
    RemoteTokenClient,
    SnapshotSource,
    fetch_snapshot,
    write_output_files,
)

VERSION = RemoteVersionIdentifier(design_system_id="ds", version_id="v1")

SNAPSHOT_YAML = """\
tokens:
  - id: teal-50
    name: "50"
    tokenType: color
    value: "#00BFA5"
    tokenPath: [primitive, ui-teal]
  - id: accent
    name: Accent
    tokenType: color
    value: "#00BFA5"
    referencedTokenId: teal-50
    tokenPath: [semantic]
groups:
  - id: g1
    name: Colors
themes:
  - id: dark
    name: Dark
    overrides:
      accent:
        value: "#000000"
"""


class TestSnapshotSource:
    """Tests for SnapshotSource."""

    @pytest.mark.asyncio
    async def test_load_yaml(self, temp_dir: Path):
        """YAML snapshots with camelCase keys load."""
        path = temp_dir / "acme.yaml"
        path.write_text(SNAPSHOT_YAML)
        snapshot = await fetch_snapshot(SnapshotSource(path), VERSION)
        assert [t.id for t in snapshot.tokens] == ["teal-50", "accent"]
        assert snapshot.tokens[1].referenced_token_id == "teal-50"
        assert snapshot.tokens[0].token_path == ["primitive", "ui-teal"]
        assert snapshot.groups[0].name == "Colors"
        assert snapshot.themes[0].overrides["accent"].value == "#000000"

    @pytest.mark.asyncio
    async def test_load_json(self, temp_dir: Path):
        """JSON snapshots with snake_case keys load."""
        path = temp_dir / "acme.json"
        path.write_text(
            json.dumps(
                {"tokens": [{"id": "a", "name": "A", "token_type": "space", "value": 4}]}
            )
        )
        tokens = await SnapshotSource(path).get_tokens(VERSION)
        assert tokens[0].value == 4

    def test_missing_file(self, temp_dir: Path):
        """A missing snapshot is a missing artifact."""
        with pytest.raises(ArtifactMissingError):
            SnapshotSource(temp_dir / "nope.yaml").snapshot

    def test_invalid_yaml(self, temp_dir: Path):
        """Unparsable snapshots are configuration errors."""
        path = temp_dir / "bad.yaml"
        path.write_text("tokens: [unclosed")
        with pytest.raises(ConfigurationError):
            SnapshotSource(path).snapshot

    def test_invalid_token(self, temp_dir: Path):
        """Tokens with unknown types are rejected."""
        path = temp_dir / "bad.yaml"
        path.write_text("tokens:\n  - id: a\n    name: A\n    tokenType: sparkle\n")
        with pytest.raises(ConfigurationError):
            SnapshotSource(path).snapshot

    def test_empty_file(self, temp_dir: Path):
        """An empty snapshot has no tokens."""
        path = temp_dir / "empty.yaml"
        path.write_text("")
        assert SnapshotSource(path).snapshot.tokens == []


def client_for(handler) -> RemoteTokenClient:
    """Client wired to a mock transport."""
    return RemoteTokenClient(
        api_token="secret",
        base_url="https://api.example.test/v2/",
        transport=httpx.MockTransport(handler),
    )


class TestRemoteTokenClient:
    """Tests for RemoteTokenClient."""

    def test_requires_token(self, monkeypatch):
        """Missing credentials fail before any request."""
        monkeypatch.delenv("SUPERNOVA_API_TOKEN", raising=False)
        with pytest.raises(MissingContextError):
            RemoteTokenClient()

    def test_token_from_environment(self, monkeypatch):
        """The API token can come from the environment."""
        monkeypatch.setenv("SUPERNOVA_API_TOKEN", "env-token")
        assert RemoteTokenClient().api_token == "env-token"

    @pytest.mark.asyncio
    async def test_get_tokens(self):
        """Tokens are fetched from the version endpoint with a bearer token."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                200,
                json={"tokens": [{"id": "a", "name": "A", "tokenType": "color", "value": "#FFF"}]},
            )

        tokens = await client_for(handler).get_tokens(VERSION)
        assert tokens[0].id == "a"
        assert str(seen[0].url) == "https://api.example.test/v2/design-systems/ds/versions/v1/tokens"
        assert seen[0].headers["Authorization"] == "Bearer secret"

    @pytest.mark.asyncio
    async def test_list_payload(self):
        """Bare list payloads are accepted."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=[{"id": "dark", "name": "Dark"}])

        themes = await client_for(handler).get_token_themes(VERSION)
        assert themes[0].name == "Dark"

    @pytest.mark.asyncio
    async def test_fetch_snapshot(self):
        """A snapshot fetch calls every endpoint in turn."""
        paths: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            paths.append(request.url.path.rsplit("/", 1)[-1])
            return httpx.Response(200, json=[])

        snapshot = await fetch_snapshot(client_for(handler), VERSION)
        assert paths == ["tokens", "token-groups", "collections", "themes"]
        assert snapshot.tokens == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [401, 403])
    async def test_authentication_error(self, status):
        """401/403 responses are authentication errors."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status, json={"message": "nope"})

        with pytest.raises(AuthenticationError) as exc_info:
            await client_for(handler).get_tokens(VERSION)
        assert exc_info.value.status_code == status

    @pytest.mark.asyncio
    async def test_not_found(self):
        """404 responses are not-found errors."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404)

        with pytest.raises(NotFoundError):
            await client_for(handler).get_token_groups(VERSION)

    @pytest.mark.asyncio
    async def test_server_error(self):
        """Other failures are generic fetch errors."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500)

        with pytest.raises(RemoteFetchError) as exc_info:
            await client_for(handler).get_token_collections(VERSION)
        assert not isinstance(exc_info.value, NotFoundError | AuthenticationError)
        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_connection_error(self):
        """Transport failures are fetch errors."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(RemoteFetchError):
            await client_for(handler).get_tokens(VERSION)

    @pytest.mark.asyncio
    async def test_unexpected_payload(self):
        """Payloads that do not match the models are fetch errors."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=[{"name": "no id"}])

        with pytest.raises(RemoteFetchError):
            await client_for(handler).get_tokens(VERSION)


class TestWriteOutputFiles:
    """Tests for write_output_files."""

    @pytest.mark.asyncio
    async def test_writes_nested_paths(self, temp_dir: Path):
        """Files land under their relative directories."""
        files = [
            OutputFile(relative_path="./", file_name="tokens.json", content="{}"),
            OutputFile(relative_path="./dark", file_name="color.json", content='{"a": "1"}'),
        ]
        written = await write_output_files(files, temp_dir)
        assert written == [temp_dir / "tokens.json", temp_dir / "dark" / "color.json"]
        assert (temp_dir / "dark" / "color.json").read_text(encoding="utf-8") == '{"a": "1"}'


class TestExampleSnapshot:
    """The bundled example snapshot stays loadable."""

    def test_example_loads(self):
        """The example snapshot validates and has both themes."""
        path = Path(__file__).parent.parent / "examples" / "snapshots" / "acme.yaml"
        snapshot = SnapshotSource(path).snapshot
        assert [theme.name for theme in snapshot.themes] == ["Light", "Dark"]
        assert snapshot.themes[1].overrides["text-body"].referenced_token_id == "teal-50"
