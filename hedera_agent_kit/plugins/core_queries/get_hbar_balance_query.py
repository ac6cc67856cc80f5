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

GET_HBAR_BALANCE_QUERY_TOOL = "get_hbar_balance_query_tool"


class GetHbarBalanceQueryTool(MirrorNodeQueryTool):
    method_name = GET_HBAR_BALANCE_QUERY_TOOL
    display_name = "Get HBAR Balance"
    failure_label = "Failed to get HBAR balance"
    parameters_model = AccountQueryParameters

    def build_description(self, context: Context) -> str:
        return f"""
{PromptGenerator.get_context_snippet(context)}

This tool returns the HBAR balance of a Hedera account.

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
        tinybars = int(account.get("balance") or 0)
        return {
            "status": TransactionStatus.SUCCESS.value,
            "account_id": params.account_id,
            "tinybars": tinybars,
            "hbar_balance": f"{tinybars_to_hbar(tinybars):f}",
        }

    def format_result(
        self, params: AccountQueryParametersNormalised, account: Dict[str, Any]
    ) -> str:
        hbar = tinybars_to_hbar(int(account.get("balance") or 0))
        return f"Account {params.account_id} has a balance of {hbar:f} HBAR"
