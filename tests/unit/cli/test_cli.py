import json

import pytest
from typer.testing import CliRunner

from hedera_agent_kit.cli import app

FIXTURES = "tests.fixtures.ledger.ledger_fixtures"

runner = CliRunner()


def write_config(tmp_path, **overrides):
    config = {
        "context": {"mode": "return_bytes", "account_id": "0.0.1001"},
        "client": {"class": f"{FIXTURES}.FakeLedgerClient"},
        "builder": {"class": f"{FIXTURES}.FakeTransactionBuilder"},
        "plugins": ["core-consensus-plugin"],
    }
    config.update(overrides)
    path = tmp_path / "config.json"
    path.write_text(json.dumps(config))
    return str(path)


@pytest.fixture
def config_path(tmp_path):
    return write_config(tmp_path)


class TestCli:
    def test_tools(self, config_path):
        result = runner.invoke(app, ["tools", "--config", config_path])

        assert result.exit_code == 0
        assert "create_topic_tool" in result.stdout
        assert "core-consensus-plugin" in result.stdout

    def test_tools_respects_allow_list(self, tmp_path):
        path = write_config(tmp_path, tools=["create_topic_tool"])

        result = runner.invoke(app, ["tools", "--config", path])

        assert result.exit_code == 0
        assert "create_topic_tool" in result.stdout
        assert "delete_topic_tool" not in result.stdout
        assert "submit_topic_message_tool" not in result.stdout

    def test_run(self, config_path):
        result = runner.invoke(
            app,
            ["run", "delete_topic_tool", "--params", '{"topic_id": "0.0.8"}', "--config", config_path],
        )

        assert result.exit_code == 0
        assert "external signing" in result.stdout

    def test_run_failure_exit_code(self, config_path):
        result = runner.invoke(app, ["run", "delete_topic_tool", "--config", config_path])

        assert result.exit_code == 1
        assert "Failed to delete the topic" in result.stdout

    def test_invalid_params(self, config_path):
        result = runner.invoke(
            app, ["run", "delete_topic_tool", "--params", "{", "--config", config_path]
        )
        assert result.exit_code == 1

    def test_missing_config(self, tmp_path):
        result = runner.invoke(app, ["tools", "--config", str(tmp_path / "nope.json")])

        assert result.exit_code == 1
        assert "not found" in result.stdout
