from typing import Any, Dict, List

from hedera_agent_kit.domains.context import Context
from hedera_agent_kit.domains.enums import TransactionStatus
from hedera_agent_kit.domains.parameters.queries import (
    AccountTokenBalancesQueryParameters,
    AccountTokenBalancesQueryParametersNormalised,
)
from hedera_agent_kit.plugins.tools.query_tool import MirrorNodeQueryTool
from hedera_agent_kit.services.parameter_normaliser import (
    ParameterNormaliser,
    from_base_units,
)
from hedera_agent_kit.services.prompt_generator import PromptGenerator

GET_ACCOUNT_TOKEN_BALANCES_QUERY_TOOL = "get_account_token_balances_query_tool"


def post_process(account_id: str, balances: List[Dict[str, Any]]) -> str:
    if not balances:
        return f"No token balances found for account {account_id}."
    lines = [f"Token balances for account {account_id}:"]
    for balance in balances:
        amount = from_base_units(
            int(balance.get("balance") or 0), int(balance.get("decimals") or 0)
        )
        lines.append(f"- {balance.get('token_id')}: {amount:f}")
    return "\n".join(lines)


class GetAccountTokenBalancesQueryTool(MirrorNodeQueryTool):
    method_name = GET_ACCOUNT_TOKEN_BALANCES_QUERY_TOOL
    display_name = "Get Account Token Balances"
    failure_label = "Failed to get account token balances"
    parameters_model = AccountTokenBalancesQueryParameters

    def build_description(self, context: Context) -> str:
        return f"""
{PromptGenerator.get_context_snippet(context)}

This tool returns the token balances of a Hedera account in display units.

Parameters:
- {PromptGenerator.get_account_parameter_description("account_id", context)}
- token_id (string, optional): Only return the balance of this token
{PromptGenerator.get_parameter_usage_instructions()}
"""

    def normalise(
        self, params: Dict[str, Any], context: Context
    ) -> AccountTokenBalancesQueryParametersNormalised:
        return ParameterNormaliser.account_token_balances_query(params, context)

    async def fetch(
        self, params: AccountTokenBalancesQueryParametersNormalised
    ) -> List[Dict[str, Any]]:
        return await self.mirrornode.get_token_balances(params.account_id, params.token_id)

    def to_raw(
        self,
        params: AccountTokenBalancesQueryParametersNormalised,
        balances: List[Dict[str, Any]],
    ) -> Dict[str, Any]:
        return {
            "status": TransactionStatus.SUCCESS.value,
            "account_id": params.account_id,
            "token_balances": balances,
        }

    def format_result(
        self,
        params: AccountTokenBalancesQueryParametersNormalised,
        balances: List[Dict[str, Any]],
    ) -> str:
        return post_process(params.account_id, balances)
