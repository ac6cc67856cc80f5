"""
Service implementations for the Hedera Agent Kit.

Parameter normalisation and description text generation shared by tools.
"""
