"""
Exceptions raised by the Hedera Agent Kit.
"""
from typing import Any, Dict, List, Optional


class HederaAgentKitError(Exception):
    """Base class for all toolkit errors."""


class DuplicatePluginError(HederaAgentKitError):
    """A plugin with the same id is already registered."""

    def __init__(self, plugin_id: str):
        self.plugin_id = plugin_id
        super().__init__(f"Plugin with id '{plugin_id}' is already registered")


class ParameterValidationError(HederaAgentKitError):
    """Tool parameters were rejected during normalisation."""

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        self.errors = errors or []
        super().__init__(message)


class TransactionFailedError(HederaAgentKitError):
    """The ledger rejected or failed to confirm a transaction."""

    def __init__(self, status: str, message: Optional[str] = None):
        self.status = status
        super().__init__(message or f"Transaction failed with status {status}")
