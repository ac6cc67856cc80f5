"""
Ledger collaborator interfaces.

The toolkit never talks to the network itself. Adapters implementing these
interfaces wrap a concrete SDK and are supplied through configuration.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from hedera_agent_kit.domains.parameters.account import (
    CreateAccountParametersNormalised,
    DeleteAccountParametersNormalised,
    SignScheduleTransactionParameters,
    TransferHbarParametersNormalised,
)
from hedera_agent_kit.domains.parameters.consensus import (
    CreateTopicParametersNormalised,
    DeleteTopicParameters,
    GetTopicMessagesParameters,
    SubmitTopicMessageParameters,
)
from hedera_agent_kit.domains.parameters.contract import DeployContractParameters
from hedera_agent_kit.domains.parameters.token import (
    AssociateTokenParametersNormalised,
    CreateFungibleTokenParametersNormalised,
    CreateNonFungibleTokenParametersNormalised,
    DeleteTokenParameters,
    MintFungibleTokenParametersNormalised,
    TransferFungibleTokenParametersNormalised,
    TransferNftParametersNormalised,
)
from hedera_agent_kit.domains.results import TransactionReceipt


class LedgerClient(ABC):
    """Network client used to complete transactions."""

    def __init__(self, config: Dict[str, Any] = None):
        self.config = config or {}

    @abstractmethod
    async def submit(self, transaction: Any) -> TransactionReceipt:
        """Sign, submit and wait for the receipt of a transaction.

        Raises:
            TransactionFailedError: if the transaction fails precheck or
                its receipt carries a failure status
        """
        pass

    @abstractmethod
    def to_bytes(self, transaction: Any, payer_account_id: Optional[str] = None) -> bytes:
        """Freeze a transaction without signing and serialize it."""
        pass


class TransactionBuilder(ABC):
    """Builds unsigned SDK transactions from normalised parameters."""

    def __init__(self, config: Dict[str, Any] = None):
        self.config = config or {}

    @abstractmethod
    def transfer_hbar(self, params: TransferHbarParametersNormalised) -> Any:
        pass

    @abstractmethod
    def create_account(self, params: CreateAccountParametersNormalised) -> Any:
        pass

    @abstractmethod
    def delete_account(self, params: DeleteAccountParametersNormalised) -> Any:
        pass

    @abstractmethod
    def sign_schedule_transaction(self, params: SignScheduleTransactionParameters) -> Any:
        pass

    @abstractmethod
    def create_fungible_token(self, params: CreateFungibleTokenParametersNormalised) -> Any:
        pass

    @abstractmethod
    def create_non_fungible_token(
        self, params: CreateNonFungibleTokenParametersNormalised
    ) -> Any:
        pass

    @abstractmethod
    def mint_fungible_token(self, params: MintFungibleTokenParametersNormalised) -> Any:
        pass

    @abstractmethod
    def associate_token(self, params: AssociateTokenParametersNormalised) -> Any:
        pass

    @abstractmethod
    def delete_token(self, params: DeleteTokenParameters) -> Any:
        pass

    @abstractmethod
    def transfer_fungible_token(
        self, params: TransferFungibleTokenParametersNormalised
    ) -> Any:
        pass

    @abstractmethod
    def transfer_nft(self, params: TransferNftParametersNormalised) -> Any:
        pass

    @abstractmethod
    def create_topic(self, params: CreateTopicParametersNormalised) -> Any:
        pass

    @abstractmethod
    def delete_topic(self, params: DeleteTopicParameters) -> Any:
        pass

    @abstractmethod
    def submit_topic_message(self, params: SubmitTopicMessageParameters) -> Any:
        pass

    @abstractmethod
    def deploy_contract(self, params: DeployContractParameters) -> Any:
        pass


class MirrorNode(ABC):
    """Read-only access to historical ledger data."""

    def __init__(self, config: Dict[str, Any] = None):
        self.config = config or {}

    @abstractmethod
    async def get_topic_messages(
        self, params: GetTopicMessagesParameters
    ) -> List[Dict[str, Any]]:
        """Return messages with ``sequence_number``, ``consensus_timestamp``
        and decoded ``message``.
        """
        pass

    @abstractmethod
    async def get_account(self, account_id: str) -> Dict[str, Any]:
        """Return account details.

        Keys: ``account_id``, ``balance`` in tinybars, ``key``, ``memo`` and
        ``evm_address``.

        Raises:
            LookupError: if the account does not exist
        """
        pass

    @abstractmethod
    async def get_token_balances(
        self, account_id: str, token_id: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        """Return the account's token balances.

        Each entry has ``token_id``, ``balance`` in base units and ``decimals``.
        """
        pass

    @abstractmethod
    async def get_token_info(self, token_id: str) -> Dict[str, Any]:
        """Return token details.

        Keys include ``name``, ``symbol``, ``type``, ``decimals``,
        ``total_supply``, ``max_supply`` and ``treasury_account_id``.
        """
        pass

    @abstractmethod
    async def get_topic_info(self, topic_id: str) -> Dict[str, Any]:
        """Return topic details.

        Keys include ``memo``, ``admin_key``, ``submit_key`` and
        ``created_timestamp``.
        """
        pass
