"""
Tests for the core ledger plugins and their tools.
"""
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest

from hedera_agent_kit.domains.context import Context
from hedera_agent_kit.plugins.core_account import (
    CoreAccountPlugin,
    core_account_plugin_tool_names,
)
from hedera_agent_kit.plugins.core_account.sign_schedule_transaction import (
    post_process as sign_schedule_post_process,
)
from hedera_agent_kit.plugins.core_consensus import (
    CoreConsensusPlugin,
    core_consensus_plugin_tool_names,
)
from hedera_agent_kit.plugins.core_consensus_query import CoreConsensusQueryPlugin
from hedera_agent_kit.plugins.core_contract import CoreContractPlugin
from hedera_agent_kit.plugins.core_queries import (
    CoreQueriesPlugin,
    core_queries_plugin_tool_names,
)
from hedera_agent_kit.plugins.core_token import CoreTokenPlugin
from hedera_agent_kit.domains.results import RawTransactionResponse, TransactionReceipt
from hedera_agent_kit.plugins.registry import PluginRegistry
from tests.fixtures.ledger.ledger_fixtures import (
    OPERATOR_ACCOUNT_ID,
    builder,
    execute_context,
    ledger_client,
    mirrornode,
    mock_logger,
    plugin_context,
    rejecting_client,
    return_bytes_context,
)


async def tool_by_method(plugin, plugin_context, method):
    for tool in await plugin.get_tools(plugin_context):
        if tool.method == method:
            return tool
    raise AssertionError(f"{method} not provided by {plugin.id}")


class TestCorePluginTools:
    @pytest.mark.asyncio
    async def test_account_plugin_tools(self, plugin_context):
        tools = await CoreAccountPlugin().get_tools(plugin_context)
        assert [tool.method for tool in tools] == list(
            core_account_plugin_tool_names.values()
        )

    @pytest.mark.asyncio
    async def test_consensus_plugin_tools(self, plugin_context):
        tools = await CoreConsensusPlugin().get_tools(plugin_context)
        assert [tool.method for tool in tools] == list(
            core_consensus_plugin_tool_names.values()
        )

    @pytest.mark.asyncio
    async def test_tools_are_created_fresh(self, plugin_context):
        plugin = CoreTokenPlugin()
        first = await plugin.get_tools(plugin_context)
        second = await plugin.get_tools(plugin_context)
        assert [t.method for t in first] == [t.method for t in second]
        assert first[0] is not second[0]

    @pytest.mark.asyncio
    async def test_fresh_tools_after_serialization_failure(
        self, plugin_context, ledger_client, return_bytes_context
    ):
        plugin = CoreTokenPlugin()
        failing_client = MagicMock()
        failing_client.to_bytes = MagicMock(side_effect=RuntimeError("freeze failed"))
        failing_client.submit = AsyncMock()
        first = await tool_by_method(plugin, plugin_context, "delete_token_tool")

        failed = await first.execute(
            failing_client, return_bytes_context, {"token_id": "0.0.7007"}
        )
        second = await tool_by_method(plugin, plugin_context, "delete_token_tool")
        result = await second.execute(
            ledger_client, return_bytes_context, {"token_id": "0.0.7007"}
        )

        assert not failed.succeeded
        assert failed.human_message.endswith(": freeze failed")
        failing_client.submit.assert_not_called()
        assert second is not first
        assert result.succeeded
        assert result.raw.bytes is not None

    @pytest.mark.asyncio
    async def test_registry_aggregates_core_plugins(self, plugin_context):
        registry = PluginRegistry(plugin_context)
        for plugin in (
            CoreAccountPlugin(),
            CoreTokenPlugin(),
            CoreConsensusPlugin(),
            CoreConsensusQueryPlugin(),
            CoreContractPlugin(),
            CoreQueriesPlugin(),
        ):
            await registry.register_plugin(plugin)

        methods = [tool.method for tool in await registry.get_all_tools()]

        assert len(methods) == len(set(methods)) == 21
        assert methods[0] == "transfer_hbar_tool"
        assert methods[-1] == "get_topic_info_query_tool"

    @pytest.mark.asyncio
    async def test_description_mentions_operator(self, plugin_context):
        tool = await tool_by_method(
            CoreAccountPlugin(), plugin_context, "transfer_hbar_tool"
        )
        assert OPERATOR_ACCOUNT_ID in tool.description


class TestAccountTools:
    def test_sign_schedule_post_process(self):
        raw = RawTransactionResponse(status="SUCCESS", transaction_id="0.0.1@1.1")
        assert sign_schedule_post_process(raw) == (
            "Transaction successfully signed. Transaction ID: 0.0.1@1.1"
        )

    @pytest.mark.asyncio
    async def test_sign_schedule_transaction(
        self, plugin_context, ledger_client, execute_context
    ):
        tool = await tool_by_method(
            CoreAccountPlugin(), plugin_context, "sign_schedule_transaction_tool"
        )

        result = await tool.execute(
            ledger_client, execute_context, {"schedule_id": "0.0.5005"}
        )

        assert result.human_message.startswith("Transaction successfully signed.")
        assert ledger_client.submitted[0].kind == "sign_schedule_transaction"
        assert ledger_client.submitted[0].params.schedule_id == "0.0.5005"

    @pytest.mark.asyncio
    async def test_sign_schedule_transaction_rejected(
        self, plugin_context, rejecting_client, execute_context
    ):
        tool = await tool_by_method(
            CoreAccountPlugin(), plugin_context, "sign_schedule_transaction_tool"
        )

        result = await tool.execute(
            rejecting_client, execute_context, {"schedule_id": "0.0.5005"}
        )

        assert not result.succeeded
        assert result.human_message.startswith("Failed to sign scheduled transaction:")

    @pytest.mark.asyncio
    async def test_sign_schedule_missing_parameter(
        self, plugin_context, ledger_client, execute_context
    ):
        tool = await tool_by_method(
            CoreAccountPlugin(), plugin_context, "sign_schedule_transaction_tool"
        )

        result = await tool.execute(ledger_client, execute_context, {})

        assert not result.succeeded
        assert "schedule_id" in result.human_message
        assert ledger_client.submitted == []

    @pytest.mark.asyncio
    async def test_transfer_hbar_balances(self, plugin_context, ledger_client, execute_context):
        tool = await tool_by_method(
            CoreAccountPlugin(), plugin_context, "transfer_hbar_tool"
        )

        result = await tool.execute(
            ledger_client,
            execute_context,
            {"transfers": [{"account_id": "0.0.2002", "amount": "1.5"}]},
        )

        assert result.succeeded
        transfers = ledger_client.submitted[0].params.hbar_transfers
        assert [(t.account_id, t.amount) for t in transfers] == [
            ("0.0.2002", 150_000_000),
            (OPERATOR_ACCOUNT_ID, -150_000_000),
        ]

    @pytest.mark.asyncio
    async def test_create_account_return_bytes(
        self, plugin_context, ledger_client, return_bytes_context
    ):
        tool = await tool_by_method(
            CoreAccountPlugin(), plugin_context, "create_account_tool"
        )

        result = await tool.execute(
            ledger_client, return_bytes_context, {"initial_balance": Decimal("2")}
        )

        assert result.raw.bytes is not None
        assert result.raw.account_id is None
        assert ledger_client.submitted == []


class TestTokenAndTopicTools:
    @pytest.mark.asyncio
    async def test_create_fungible_token(self, plugin_context, ledger_client, execute_context):
        ledger_client.receipt = TransactionReceipt(
            status="SUCCESS", transaction_id="0.0.1001@2.2", token_id="0.0.7007"
        )
        tool = await tool_by_method(
            CoreTokenPlugin(), plugin_context, "create_fungible_token_tool"
        )

        result = await tool.execute(
            ledger_client,
            execute_context,
            {"token_name": "Gold", "token_symbol": "GLD", "initial_supply": 10, "decimals": 2},
        )

        assert "Token ID: 0.0.7007" in result.human_message
        params = ledger_client.submitted[0].params
        assert params.initial_supply == 1000
        assert params.treasury_account_id == OPERATOR_ACCOUNT_ID

    @pytest.mark.asyncio
    async def test_create_topic(self, plugin_context, ledger_client, execute_context):
        ledger_client.receipt = TransactionReceipt(
            status="SUCCESS", transaction_id="0.0.1001@3.3", topic_id="0.0.8008"
        )
        tool = await tool_by_method(
            CoreConsensusPlugin(), plugin_context, "create_topic_tool"
        )

        result = await tool.execute(ledger_client, execute_context, {"topic_memo": "news"})

        assert result.raw.topic_id == "0.0.8008"
        assert "0.0.8008" in result.human_message

    @pytest.mark.asyncio
    async def test_deploy_contract(self, plugin_context, ledger_client, execute_context):
        ledger_client.receipt = TransactionReceipt(
            status="SUCCESS", transaction_id="0.0.1001@4.4", contract_id="0.0.9009"
        )
        tool = await tool_by_method(
            CoreContractPlugin(), plugin_context, "deploy_contract_tool"
        )

        result = await tool.execute(ledger_client, execute_context, {"bytecode": "0x6080"})

        assert "Contract ID: 0.0.9009" in result.human_message
        assert ledger_client.submitted[0].params.bytecode == "6080"


class TestTopicMessagesQuery:
    @pytest.mark.asyncio
    async def test_get_topic_messages(
        self, plugin_context, mirrornode, ledger_client, execute_context
    ):
        mirrornode.messages = [
            {"sequence_number": 1, "consensus_timestamp": "1.1", "message": "hello"},
            {"sequence_number": 2, "consensus_timestamp": "2.2", "message": "world"},
        ]
        tool = await tool_by_method(
            CoreConsensusQueryPlugin(), plugin_context, "get_topic_messages_query_tool"
        )

        result = await tool.execute(
            ledger_client, execute_context, {"topic_id": "0.0.8008", "limit": 1}
        )

        assert result.succeeded
        assert result.raw["messages"] == mirrornode.messages[:1]
        assert "#1" in result.human_message
        assert "world" not in result.human_message
        assert ledger_client.submitted == []

    @pytest.mark.asyncio
    async def test_without_mirrornode(self, ledger_client):
        from hedera_agent_kit.plugins.core_consensus_query import (
            GetTopicMessagesQueryTool,
        )

        result = await GetTopicMessagesQueryTool(Context()).execute(
            ledger_client, Context(), {"topic_id": "0.0.8008"}
        )

        assert not result.succeeded
        assert result.human_message == (
            "Failed to get topic messages: No mirror node configured"
        )


class TestTransferNft:
    @pytest.mark.asyncio
    async def test_transfer_nft(self, plugin_context, ledger_client, execute_context):
        tool = await tool_by_method(CoreTokenPlugin(), plugin_context, "transfer_nft_tool")

        result = await tool.execute(
            ledger_client,
            execute_context,
            {"token_id": "0.0.7007", "serial_number": 3, "to_account_id": "0.0.2002"},
        )

        assert result.succeeded
        assert result.human_message.startswith("NFT successfully transferred.")
        transaction = ledger_client.submitted[0]
        assert transaction.kind == "transfer_nft"
        assert transaction.params.from_account_id == OPERATOR_ACCOUNT_ID
        assert transaction.params.serial_number == 3

    @pytest.mark.asyncio
    async def test_transfer_nft_to_current_owner(
        self, plugin_context, ledger_client, execute_context
    ):
        tool = await tool_by_method(CoreTokenPlugin(), plugin_context, "transfer_nft_tool")

        result = await tool.execute(
            ledger_client,
            execute_context,
            {"token_id": "0.0.7007", "serial_number": 3, "to_account_id": OPERATOR_ACCOUNT_ID},
        )

        assert not result.succeeded
        assert result.human_message.startswith("Failed to transfer NFT:")
        assert ledger_client.submitted == []


class TestCoreQueries:
    @pytest.mark.asyncio
    async def test_plugin_tools(self, plugin_context):
        tools = await CoreQueriesPlugin().get_tools(plugin_context)
        assert [tool.method for tool in tools] == list(
            core_queries_plugin_tool_names.values()
        )

    @pytest.mark.asyncio
    async def test_hbar_balance_defaults_to_operator(
        self, plugin_context, mirrornode, ledger_client, execute_context
    ):
        mirrornode.accounts[OPERATOR_ACCOUNT_ID] = {
            "account_id": OPERATOR_ACCOUNT_ID,
            "balance": 1_250_000_000,
        }
        tool = await tool_by_method(
            CoreQueriesPlugin(), plugin_context, "get_hbar_balance_query_tool"
        )

        result = await tool.execute(ledger_client, execute_context, {})

        assert result.succeeded
        assert result.raw["tinybars"] == 1_250_000_000
        assert result.raw["hbar_balance"] == "12.5"
        assert result.human_message == (
            f"Account {OPERATOR_ACCOUNT_ID} has a balance of 12.5 HBAR"
        )
        assert ledger_client.submitted == []

    @pytest.mark.asyncio
    async def test_account_info(self, plugin_context, mirrornode, ledger_client, execute_context):
        mirrornode.accounts["0.0.2002"] = {
            "account_id": "0.0.2002",
            "balance": 100_000_000,
            "key": "302a...",
            "memo": "savings",
            "evm_address": "0x00000000000000000000000000000000000007d2",
        }
        tool = await tool_by_method(
            CoreQueriesPlugin(), plugin_context, "get_account_query_tool"
        )

        result = await tool.execute(ledger_client, execute_context, {"account_id": "0.0.2002"})

        assert result.raw["account"]["memo"] == "savings"
        assert "- Balance: 1 HBAR" in result.human_message
        assert "- EVM address: 0x" in result.human_message

    @pytest.mark.asyncio
    async def test_unknown_account(self, plugin_context, ledger_client, execute_context):
        tool = await tool_by_method(
            CoreQueriesPlugin(), plugin_context, "get_account_query_tool"
        )

        result = await tool.execute(ledger_client, execute_context, {"account_id": "0.0.404"})

        assert not result.succeeded
        assert result.human_message == (
            "Failed to get account info: Account 0.0.404 not found"
        )

    @pytest.mark.asyncio
    async def test_account_token_balances(
        self, plugin_context, mirrornode, ledger_client, execute_context
    ):
        mirrornode.token_balances[OPERATOR_ACCOUNT_ID] = [
            {"token_id": "0.0.7007", "balance": 1234, "decimals": 2},
            {"token_id": "0.0.7008", "balance": 5, "decimals": 0},
        ]
        tool = await tool_by_method(
            CoreQueriesPlugin(), plugin_context, "get_account_token_balances_query_tool"
        )

        everything = await tool.execute(ledger_client, execute_context, {})
        single = await tool.execute(ledger_client, execute_context, {"token_id": "0.0.7008"})

        assert "- 0.0.7007: 12.34" in everything.human_message
        assert "- 0.0.7008: 5" in everything.human_message
        assert single.raw["token_balances"] == [
            {"token_id": "0.0.7008", "balance": 5, "decimals": 0}
        ]

    @pytest.mark.asyncio
    async def test_no_token_balances(self, plugin_context, ledger_client, execute_context):
        tool = await tool_by_method(
            CoreQueriesPlugin(), plugin_context, "get_account_token_balances_query_tool"
        )

        result = await tool.execute(ledger_client, execute_context, {"account_id": "0.0.2002"})

        assert result.succeeded
        assert result.human_message == "No token balances found for account 0.0.2002."

    @pytest.mark.asyncio
    async def test_token_info(self, plugin_context, mirrornode, ledger_client, execute_context):
        mirrornode.tokens["0.0.7007"] = {
            "name": "Gold",
            "symbol": "GLD",
            "type": "FUNGIBLE_COMMON",
            "decimals": 2,
            "total_supply": 1000,
            "max_supply": None,
            "treasury_account_id": OPERATOR_ACCOUNT_ID,
        }
        tool = await tool_by_method(
            CoreQueriesPlugin(), plugin_context, "get_token_info_query_tool"
        )

        result = await tool.execute(ledger_client, execute_context, {"token_id": "0.0.7007"})

        assert result.raw["token_id"] == "0.0.7007"
        assert "- Name: Gold (GLD)" in result.human_message
        assert "- Max supply: unlimited" in result.human_message

    @pytest.mark.asyncio
    async def test_topic_info(self, plugin_context, mirrornode, ledger_client, execute_context):
        mirrornode.topics["0.0.8008"] = {
            "memo": "news",
            "admin_key": "302a...",
            "submit_key": None,
            "created_timestamp": "1700000000.000000001",
        }
        tool = await tool_by_method(
            CoreQueriesPlugin(), plugin_context, "get_topic_info_query_tool"
        )

        result = await tool.execute(ledger_client, execute_context, {"topic_id": "0.0.8008"})

        assert result.succeeded
        assert "- Memo: news" in result.human_message
        assert "- Submit key: none" in result.human_message

    @pytest.mark.asyncio
    async def test_token_info_missing_parameter(
        self, plugin_context, ledger_client, execute_context
    ):
        tool = await tool_by_method(
            CoreQueriesPlugin(), plugin_context, "get_token_info_query_tool"
        )

        result = await tool.execute(ledger_client, execute_context, {})

        assert not result.succeeded
        assert result.human_message.startswith("Failed to get token info: Invalid parameters")

    @pytest.mark.asyncio
    async def test_without_mirrornode(self, ledger_client, execute_context):
        from hedera_agent_kit.plugins.core_queries import GetTopicInfoQueryTool

        result = await GetTopicInfoQueryTool(execute_context).execute(
            ledger_client, execute_context, {"topic_id": "0.0.8008"}
        )

        assert not result.succeeded
        assert result.human_message == "Failed to get topic info: No mirror node configured"
