"""
Tools for the Hedera Agent Kit.

This package contains the LedgerTool base class for transaction tools and
the MirrorNodeQueryTool base class for read-only queries.
"""

from hedera_agent_kit.plugins.tools.ledger_tool import *
from hedera_agent_kit.plugins.tools.query_tool import *
