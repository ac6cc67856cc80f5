"""
Plugin system for the Hedera Agent Kit.

This package provides the plugin registry, the plugin and tool base
classes, and the core ledger plugins.
"""
