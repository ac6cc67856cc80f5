"""
Parameter schemas for ledger tools.

Each tool exposes a pydantic model describing its raw parameters and a
normalised counterpart that transaction builders consume.
"""
