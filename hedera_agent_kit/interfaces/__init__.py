"""
Abstract interfaces for the Hedera Agent Kit.

These interfaces define the contracts that concrete implementations
must adhere to:
- Plugin, tool and registry contracts
- Ledger collaborators (network client, transaction builder, mirror node)
- Transaction execution strategies
"""
