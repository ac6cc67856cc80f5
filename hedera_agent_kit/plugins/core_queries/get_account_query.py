from typing import Any, Dict

from hedera_agent_kit.domains.context import Context
from hedera_agent_kit.domains.enums import TransactionStatus
from hedera_agent_kit.domains.parameters.queries import (
    AccountQueryParameters,
    AccountQueryParametersNormalised,
)
from hedera_agent_kit.plugins.tools.query_tool import MirrorNodeQueryTool
from hedera_agent_kit.services.parameter_normaliser import (
    ParameterNormaliser,
    tinybars_to_hbar,
)
from hedera_agent_kit.services.prompt_generator import PromptGenerator

GET_ACCOUNT_QUERY_TOOL = "get_account_query_tool"


def post_process(account_id: str, account: Dict[str, Any]) -> str:
    hbar = tinybars_to_hbar(int(account.get("balance") or 0))
    lines = [
        f"Details for account {account_id}:",
        f"- Balance: {hbar:f} HBAR",
        f"- Key: {account.get('key') or 'none'}",
        f"- Memo: {account.get('memo') or 'none'}",
    ]
    if account.get("evm_address"):
        lines.append(f"- EVM address: {account['evm_address']}")
    return "\n".join(lines)


class GetAccountQueryTool(MirrorNodeQueryTool):
    method_name = GET_ACCOUNT_QUERY_TOOL
    display_name = "Get Account Info"
    failure_label = "Failed to get account info"
    parameters_model = AccountQueryParameters

    def build_description(self, context: Context) -> str:
        return f"""
{PromptGenerator.get_context_snippet(context)}

This tool returns the details of a Hedera account: balance, key, memo and EVM address.

Parameters:
- {PromptGenerator.get_account_parameter_description("account_id", context)}
{PromptGenerator.get_parameter_usage_instructions()}
"""

    def normalise(
        self, params: Dict[str, Any], context: Context
    ) -> AccountQueryParametersNormalised:
        return ParameterNormaliser.account_query(params, context)

    async def fetch(self, params: AccountQueryParametersNormalised) -> Dict[str, Any]:
        return await self.mirrornode.get_account(params.account_id)

    def to_raw(
        self, params: AccountQueryParametersNormalised, account: Dict[str, Any]
    ) -> Dict[str, Any]:
        return {
            "status": TransactionStatus.SUCCESS.value,
            "account_id": params.account_id,
            "account": account,
        }

    def format_result(
        self, params: AccountQueryParametersNormalised, account: Dict[str, Any]
    ) -> str:
        return post_process(params.account_id, account)
