"""
Factory for creating and wiring components of the Hedera Agent Kit.

This module handles the creation and dependency injection of the ledger
collaborators, the plugin context and the plugins named in configuration.
"""
import importlib
import logging
from typing import Any, Dict, List, Optional, Tuple

import logfire

from hedera_agent_kit.domains.context import Context, PluginContext
from hedera_agent_kit.interfaces.plugins.plugins import Plugin
from hedera_agent_kit.plugins.core_account import CoreAccountPlugin
from hedera_agent_kit.plugins.core_consensus import CoreConsensusPlugin
from hedera_agent_kit.plugins.core_consensus_query import CoreConsensusQueryPlugin
from hedera_agent_kit.plugins.core_contract import CoreContractPlugin
from hedera_agent_kit.plugins.core_queries import CoreQueriesPlugin
from hedera_agent_kit.plugins.core_token import CoreTokenPlugin
from hedera_agent_kit.plugins.registry import PluginRegistry

# Setup logger for this module
logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "hedera_agent_kit"

CORE_PLUGINS = {
    "core-account-plugin": CoreAccountPlugin,
    "core-token-plugin": CoreTokenPlugin,
    "core-consensus-plugin": CoreConsensusPlugin,
    "core-consensus-query-plugin": CoreConsensusQueryPlugin,
    "core-contract-plugin": CoreContractPlugin,
    "core-queries-plugin": CoreQueriesPlugin,
}


class HederaAgentKitFactory:
    """Factory for creating and wiring components of the Hedera Agent Kit."""

    @staticmethod
    def _load_class(class_path: str) -> Any:
        try:
            module_path, class_name = class_path.rsplit(".", 1)
            module = importlib.import_module(module_path)
            return getattr(module, class_name)
        except (ImportError, AttributeError, ValueError) as e:
            raise ValueError(f"Error loading class '{class_path}': {e}") from e

    @classmethod
    def _create_component(
        cls, section: str, config: Dict[str, Any], required: bool = True
    ) -> Optional[Any]:
        """Instantiate a ``{class, config}`` section of the configuration."""
        section_config = config.get(section)
        if section_config is None:
            if required:
                raise ValueError(f"'{section}' configuration is required.")
            return None
        if "class" not in section_config:
            raise ValueError(f"'{section}' configuration is missing 'class'.")

        component_class = cls._load_class(section_config["class"])
        component = component_class(config=section_config.get("config", {}))
        logger.info(f"Loaded {section}: {section_config['class']}")
        return component

    @classmethod
    def create_plugins(cls, plugin_configs: Optional[List[Any]]) -> List[Plugin]:
        """Instantiate plugins from core ids or ``{class, config}`` entries.

        Args:
            plugin_configs: Plugin entries; None selects every core plugin

        Returns:
            Plugin instances in configuration order
        """
        if plugin_configs is None:
            return [plugin_class() for plugin_class in CORE_PLUGINS.values()]

        plugins = []
        for entry in plugin_configs:
            if isinstance(entry, str):
                if entry not in CORE_PLUGINS:
                    raise ValueError(
                        f"Unknown core plugin '{entry}'. "
                        f"Available: {list(CORE_PLUGINS.keys())}"
                    )
                plugins.append(CORE_PLUGINS[entry]())
                continue

            class_path = entry.get("class") if isinstance(entry, dict) else None
            if not class_path:
                raise ValueError(f"Plugin config missing 'class': {entry}")
            plugin_class = cls._load_class(class_path)
            plugin_config = entry.get("config")
            plugins.append(plugin_class(**plugin_config) if plugin_config else plugin_class())
            logger.info(f"Loaded plugin: {class_path}")
        return plugins

    @staticmethod
    def configure_logging(config: Dict[str, Any]) -> logging.Logger:
        """Configure the package logger and optional Logfire shipping."""
        package_logger = logging.getLogger(PACKAGE_LOGGER)

        level = config.get("logging", {}).get("level")
        if level:
            package_logger.setLevel(level.upper())

        if "logfire" in config:
            if "api_key" not in config["logfire"]:
                raise ValueError("Pydantic Logfire API key is required.")
            try:
                logfire.configure(token=config["logfire"]["api_key"])
                if not any(
                    isinstance(handler, logfire.LogfireLoggingHandler)
                    for handler in package_logger.handlers
                ):
                    package_logger.addHandler(logfire.LogfireLoggingHandler())
                logger.info("Logfire configured for hedera_agent_kit logs")
            except Exception as e:
                logger.error(f"Failed to configure Logfire: {e}")

        return package_logger

    @classmethod
    def create_from_config(
        cls, config: Dict[str, Any]
    ) -> Tuple[PluginRegistry, Any, List[Plugin]]:
        """Create the toolkit components from configuration.

        Args:
            config: Configuration dictionary

        Returns:
            The plugin registry, the ledger client and the plugins to register
        """
        package_logger = cls.configure_logging(config)

        context = Context.model_validate(config.get("context", {}))
        logger.info(f"Using execution mode: {context.mode.value}")

        client = cls._create_component("client", config)
        builder = cls._create_component("builder", config)
        mirrornode = cls._create_component("mirrornode", config, required=False)

        plugin_context = PluginContext(
            logger=package_logger,
            config={
                "builder": builder,
                "mirrornode": mirrornode,
                **config.get("plugin_config", {}),
            },
            context=context,
        )
        registry = PluginRegistry(plugin_context)
        plugins = cls.create_plugins(config.get("plugins"))

        return registry, client, plugins
