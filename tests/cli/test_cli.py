"""Tests for the inspiration-list command line"""

import json
from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from inspiration_list import __version__
from inspiration_list.cli.main import cli
from inspiration_list.client import ApiError
from inspiration_list.core import RecordStore

RECORD = {
    "id": "inspiration_1700000000000_abc123",
    "originalText": "我想做一个语音记录的APP",
    "enhancedContent": {
        "summary": "语音记录APP",
        "details": "用语音快速记录想法",
        "suggestions": ["先做原型"],
        "tags": ["语音", "应用"],
        "category": "技术创新",
    },
    "metadata": {"wordCount": 11, "language": "zh", "sentiment": "neutral"},
    "createdAt": "2023-11-14T22:13:20.000Z",
    "updatedAt": "2023-11-14T22:13:20.000Z",
}


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def api_client():
    """ApiClient stand-in returned by get_api_client"""
    client = MagicMock()
    with patch("inspiration_list.cli.records_cmd.get_api_client", return_value=client) as factory:
        client.factory = factory
        yield client


@pytest.fixture
def local_store(kv, enricher, settings):
    """Store commands run against an in-memory store"""
    store = RecordStore(kv, enricher, settings)
    with patch("inspiration_list.cli.store_cmd.get_record_store", return_value=store), \
            patch("inspiration_list.cli.store_cmd.get_settings", return_value=settings):
        yield store


class TestCliBasics:

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help_lists_commands(self, runner):
        result = runner.invoke(cli, ["--help"])

        for command in ("serve", "create", "list", "show", "delete", "health", "export", "reindex", "providers"):
            assert command in result.output

    def test_providers(self, runner):
        result = runner.invoke(cli, ["providers"])

        assert result.exit_code == 0
        assert "memory" in result.output
        assert "sqlite" in result.output
        assert "providers discovered" in result.output


class TestServeCommand:

    @patch("uvicorn.run")
    def test_runs_uvicorn(self, mock_run, runner):
        result = runner.invoke(cli, ["serve", "--port", "9000"])

        assert result.exit_code == 0
        args, kwargs = mock_run.call_args
        assert args == ("inspiration_list.api.main:app",)
        assert kwargs["host"] == "127.0.0.1"
        assert kwargs["port"] == 9000
        assert kwargs["reload"] is False


class TestRecordCommands:

    def test_create(self, runner, api_client):
        api_client.create_inspiration.return_value = RECORD

        result = runner.invoke(cli, ["create", "我想做一个语音记录的APP"])

        assert result.exit_code == 0
        assert RECORD["id"] in result.output
        assert "技术创新" in result.output
        api_client.create_inspiration.assert_called_once_with("我想做一个语音记录的APP")

    def test_create_json(self, runner, api_client):
        api_client.create_inspiration.return_value = RECORD

        result = runner.invoke(cli, ["create", "idea", "--json"])

        assert json.loads(result.output) == RECORD

    def test_api_url_option(self, runner, api_client):
        api_client.get_health.return_value = {"status": "healthy", "providers": {}}

        runner.invoke(cli, ["health", "--api-url", "http://ideas.test"])

        api_client.factory.assert_called_once_with("http://ideas.test")

    def test_api_url_from_env(self, runner, api_client):
        api_client.get_health.return_value = {"status": "healthy", "providers": {}}

        runner.invoke(cli, ["health"], env={"INSPIRATION_API_URL": "http://env.test"})

        api_client.factory.assert_called_once_with("http://env.test")

    def test_list(self, runner, api_client):
        api_client.list_inspirations.return_value = {
            "data": [{
                "id": RECORD["id"],
                "originalText": RECORD["originalText"],
                "summary": "语音记录APP",
                "tags": ["语音"],
                "category": "技术创新",
                "createdAt": RECORD["createdAt"],
            }],
            "pagination": {"currentPage": 1, "totalPages": 1, "totalItems": 1, "hasNext": False, "hasPrev": False},
        }

        result = runner.invoke(cli, ["list", "--category", "技术创新", "--search", "语音"])

        assert result.exit_code == 0
        assert "Page 1/1 (1 total)" in result.output
        api_client.list_inspirations.assert_called_once_with(page=1, limit=20, category="技术创新", search="语音")

    def test_list_empty(self, runner, api_client):
        api_client.list_inspirations.return_value = {
            "data": [],
            "pagination": {"currentPage": 1, "totalPages": 0, "totalItems": 0, "hasNext": False, "hasPrev": False},
        }

        result = runner.invoke(cli, ["list"])

        assert "No inspirations found." in result.output

    def test_show(self, runner, api_client):
        api_client.get_inspiration.return_value = RECORD

        result = runner.invoke(cli, ["show", RECORD["id"]])

        assert json.loads(result.output)["id"] == RECORD["id"]

    def test_show_missing_exits_nonzero(self, runner, api_client):
        api_client.get_inspiration.side_effect = ApiError("Inspiration not found", 404)

        result = runner.invoke(cli, ["show", "inspiration_0_nope"])

        assert result.exit_code == 1
        assert "Inspiration not found" in result.output

    def test_delete_with_yes(self, runner, api_client):
        result = runner.invoke(cli, ["delete", RECORD["id"], "--yes"])

        assert result.exit_code == 0
        api_client.delete_inspiration.assert_called_once_with(RECORD["id"])

    def test_delete_declined(self, runner, api_client):
        result = runner.invoke(cli, ["delete", RECORD["id"]], input="n\n")

        assert result.exit_code == 1
        api_client.delete_inspiration.assert_not_called()

    def test_health_network_error(self, runner, api_client):
        api_client.get_health.side_effect = ApiError("Connection refused", 0)

        result = runner.invoke(cli, ["health"])

        assert result.exit_code == 1
        assert "network error" in result.output


class TestStoreCommands:

    def test_export_to_stdout(self, runner, local_store):
        local_store.create("第一个想法")
        local_store.create("second idea")

        result = runner.invoke(cli, ["export"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["count"] == 2
        assert data["provider"] == "memory"
        assert {r["originalText"] for r in data["inspirations"]} == {"第一个想法", "second idea"}

    def test_export_to_file(self, runner, local_store, tmp_path):
        local_store.create("第一个想法")
        output = tmp_path / "backup.json"

        result = runner.invoke(cli, ["export", str(output), "--pretty"])

        assert result.exit_code == 0
        assert json.loads(output.read_text(encoding="utf-8"))["count"] == 1

    def test_reindex(self, runner, local_store, kv):
        created = local_store.create("lost from the index")
        kv.delete("inspirations:index")

        result = runner.invoke(cli, ["reindex"])

        assert result.exit_code == 0
        assert "Index rebuilt with 1 entries" in result.output
        assert local_store.list().data[0].id == created.id

    def test_store_commands_without_kv(self, runner, enricher, settings):
        store = RecordStore(None, enricher, settings)
        with patch("inspiration_list.cli.store_cmd.get_record_store", return_value=store):
            result = runner.invoke(cli, ["reindex"])

        assert result.exit_code == 1
        assert "KV_PROVIDER=none" in result.output
