from typing import Any, Dict

from hedera_agent_kit.domains.context import Context
from hedera_agent_kit.domains.parameters.account import (
    CreateAccountParameters,
    CreateAccountParametersNormalised,
)
from hedera_agent_kit.domains.results import RawTransactionResponse
from hedera_agent_kit.plugins.tools.ledger_tool import LedgerTool
from hedera_agent_kit.services.parameter_normaliser import ParameterNormaliser
from hedera_agent_kit.services.prompt_generator import PromptGenerator

CREATE_ACCOUNT_TOOL = "create_account_tool"


class CreateAccountTool(LedgerTool):
    method_name = CREATE_ACCOUNT_TOOL
    display_name = "Create Account"
    failure_label = "Failed to create account"
    parameters_model = CreateAccountParameters

    def build_description(self, context: Context) -> str:
        return f"""
{PromptGenerator.get_context_snippet(context)}

This tool will create a new Hedera account.

Parameters:
- public_key (string, optional): Key for the new account, defaults to the operator key
- account_memo (string, optional): Memo for the account
- initial_balance (number, optional): Initial HBAR balance, defaults to 0
- max_automatic_token_associations (number, optional): -1 for unlimited
{PromptGenerator.get_parameter_usage_instructions()}
"""

    def normalise(
        self, params: Dict[str, Any], context: Context
    ) -> CreateAccountParametersNormalised:
        return ParameterNormaliser.create_account(params, context)

    def build(self, params: CreateAccountParametersNormalised) -> Any:
        return self.builder.create_account(params)

    def format_result(self, raw: RawTransactionResponse) -> str:
        return (
            f"Account created successfully.\n"
            f"Transaction ID: {raw.transaction_id}\n"
            f"New Account ID: {raw.account_id}"
        )
