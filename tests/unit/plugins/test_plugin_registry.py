"""
Tests for the PluginRegistry implementation.

This module covers plugin registration, lookup, tool aggregation and the
cleanup guarantees of unregistration.
"""
import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from hypothesis import given, settings, strategies as st

from hedera_agent_kit.domains.context import PluginContext
from hedera_agent_kit.domains.exceptions import DuplicatePluginError
from hedera_agent_kit.plugins.base import BasePlugin
from hedera_agent_kit.plugins.registry import PluginRegistry

MOCK_PLUGIN_ID = "mock-plugin-id"


class MockPlugin(BasePlugin):
    """Plugin returning a fixed list of tool stand-ins."""

    __test__ = False

    def __init__(self, plugin_id: str = MOCK_PLUGIN_ID, tools=None):
        super().__init__(
            id=plugin_id,
            name="Mock Plugin",
            description="A mock plugin for testing",
            version="1.0.0",
            author="Test Author",
        )
        self.tools = tools if tools is not None else [MagicMock(method="mock_tool")]
        self.initialize_calls = 0
        self.cleanup = AsyncMock()

    async def initialize(self, context):
        self.initialize_calls += 1
        await super().initialize(context)

    async def get_tools(self, context):
        return list(self.tools)


@pytest.fixture
def mock_logger():
    return MagicMock()


@pytest.fixture
def plugin_context(mock_logger):
    return PluginContext(logger=mock_logger, config={})


@pytest.fixture
def registry(plugin_context):
    return PluginRegistry(plugin_context)


@pytest.fixture
def mock_plugin():
    return MockPlugin()


def logged(mock_method, text):
    return any(text in str(call.args[0]) for call in mock_method.call_args_list)


class TestPluginRegistry:
    """Test suite for PluginRegistry."""

    def test_init_default(self):
        """Test initialization with a default context."""
        registry = PluginRegistry()
        assert isinstance(registry.context, PluginContext)
        assert registry.get_all_plugins() == []

    @pytest.mark.asyncio
    async def test_register_plugin(self, registry, mock_plugin, plugin_context, mock_logger):
        """Test registering initializes the plugin and logs it."""
        await registry.register_plugin(mock_plugin)

        assert mock_plugin.initialize_calls == 1
        assert mock_plugin.context is plugin_context
        assert registry.get_plugin(MOCK_PLUGIN_ID) is mock_plugin
        assert logged(mock_logger.info, "Plugin registered")
        assert logged(mock_logger.info, MOCK_PLUGIN_ID)

    @pytest.mark.asyncio
    async def test_register_duplicate_plugin(self, registry, mock_plugin):
        """Test the same id cannot be registered twice."""
        await registry.register_plugin(mock_plugin)

        with pytest.raises(DuplicatePluginError, match="already registered"):
            await registry.register_plugin(mock_plugin)

        assert mock_plugin.initialize_calls == 1
        assert registry.get_all_plugins() == [mock_plugin]

    @pytest.mark.asyncio
    async def test_register_duplicate_keeps_first_instance(self, registry):
        """Test a second instance with the same id never replaces the first."""
        first = MockPlugin()
        second = MockPlugin()
        await registry.register_plugin(first)

        with pytest.raises(DuplicatePluginError):
            await registry.register_plugin(second)

        assert registry.get_plugin(MOCK_PLUGIN_ID) is first
        assert second.initialize_calls == 0

    @pytest.mark.asyncio
    async def test_concurrent_duplicate_registration(self, registry):
        """Test a duplicate detected after initialize cleans up the rejected instance."""
        release = asyncio.Event()

        class SlowPlugin(MockPlugin):
            async def initialize(self, context):
                await release.wait()
                await super().initialize(context)

        slow = SlowPlugin()
        fast = MockPlugin()

        slow_task = asyncio.create_task(registry.register_plugin(slow))
        await asyncio.sleep(0)
        await registry.register_plugin(fast)
        release.set()

        with pytest.raises(DuplicatePluginError):
            await slow_task

        assert registry.get_plugin(MOCK_PLUGIN_ID) is fast
        slow.cleanup.assert_awaited_once()
        fast.cleanup.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_register_initialize_failure_propagates(self, registry):
        """Test an initialize error fails the call and registers nothing."""
        plugin = MockPlugin()
        plugin.initialize = AsyncMock(side_effect=RuntimeError("Init failed"))

        with pytest.raises(RuntimeError, match="Init failed"):
            await registry.register_plugin(plugin)

        assert registry.get_plugin(MOCK_PLUGIN_ID) is None

    @pytest.mark.asyncio
    async def test_get_all_plugins(self, registry, mock_plugin):
        """Test listing returns a snapshot in registration order."""
        second = MockPlugin("second-plugin")
        await registry.register_plugin(mock_plugin)
        await registry.register_plugin(second)

        plugins = registry.get_all_plugins()
        assert plugins == [mock_plugin, second]

        plugins.clear()
        assert len(registry.get_all_plugins()) == 2

    def test_get_plugin_non_existing(self, registry):
        """Test looking up an unknown id returns None."""
        assert registry.get_plugin("non-existent") is None

    @pytest.mark.asyncio
    async def test_get_all_tools(self, registry):
        """Test tools are concatenated in plugin then tool order."""
        p1_tool = MagicMock(method="p1_tool")
        p2_tool1 = MagicMock(method="p2_tool1")
        p2_tool2 = MagicMock(method="p2_tool2")
        await registry.register_plugin(MockPlugin("p1", tools=[p1_tool]))
        await registry.register_plugin(MockPlugin("p2", tools=[p2_tool1, p2_tool2]))

        tools = await registry.get_all_tools()

        assert tools == [p1_tool, p2_tool1, p2_tool2]

    @pytest.mark.asyncio
    async def test_get_all_tools_passes_context(self, registry, plugin_context):
        """Test get_tools receives the registry context."""
        plugin = MockPlugin()
        plugin.get_tools = AsyncMock(return_value=[])
        await registry.register_plugin(plugin)

        await registry.get_all_tools()

        plugin.get_tools.assert_awaited_once_with(plugin_context)

    @pytest.mark.asyncio
    async def test_get_all_tools_propagates_errors(self, registry):
        """Test a failing get_tools is not swallowed."""
        plugin = MockPlugin()
        plugin.get_tools = AsyncMock(side_effect=RuntimeError("Tools failed"))
        await registry.register_plugin(plugin)

        with pytest.raises(RuntimeError, match="Tools failed"):
            await registry.get_all_tools()

    @pytest.mark.asyncio
    async def test_unregister_plugin(self, registry, mock_plugin, mock_logger):
        """Test unregistering cleans up once and removes the plugin."""
        await registry.register_plugin(mock_plugin)

        result = await registry.unregister_plugin(MOCK_PLUGIN_ID)

        assert result is True
        mock_plugin.cleanup.assert_awaited_once()
        assert registry.get_plugin(MOCK_PLUGIN_ID) is None
        assert logged(mock_logger.info, "Plugin unregistered")

    @pytest.mark.asyncio
    async def test_unregister_non_existent_plugin(self, registry, mock_plugin):
        """Test unregistering an unknown id returns False and changes nothing."""
        await registry.register_plugin(mock_plugin)

        result = await registry.unregister_plugin("non-existent")

        assert result is False
        assert registry.get_all_plugins() == [mock_plugin]
        mock_plugin.cleanup.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unregister_cleanup_error(self, registry, mock_plugin, mock_logger):
        """Test cleanup errors are logged and do not block removal."""
        await registry.register_plugin(mock_plugin)
        mock_plugin.cleanup.side_effect = Exception("Cleanup error")

        result = await registry.unregister_plugin(MOCK_PLUGIN_ID)

        assert result is True
        mock_plugin.cleanup.assert_awaited_once()
        assert registry.get_plugin(MOCK_PLUGIN_ID) is None
        assert logged(mock_logger.error, "Error during plugin cleanup")
        assert logged(mock_logger.error, "Cleanup error")

    @pytest.mark.asyncio
    async def test_unregister_sync_cleanup(self, registry, mock_plugin):
        """Test a synchronously implemented cleanup hook is supported."""
        await registry.register_plugin(mock_plugin)
        mock_plugin.cleanup = MagicMock(return_value=None)

        assert await registry.unregister_plugin(MOCK_PLUGIN_ID) is True
        mock_plugin.cleanup.assert_called_once()

    @pytest.mark.asyncio
    async def test_unregister_all_plugins(self, registry):
        """Test unregistering all cleans up every plugin even when one fails."""
        plugin_a = MockPlugin("plugin-a")
        plugin_b = MockPlugin("plugin-b")
        plugin_a.cleanup.side_effect = Exception("A broke")
        await registry.register_plugin(plugin_a)
        await registry.register_plugin(plugin_b)

        await registry.unregister_all_plugins()

        assert registry.get_all_plugins() == []
        plugin_a.cleanup.assert_awaited_once()
        plugin_b.cleanup.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_unregister_all_plugins_empty(self, registry):
        """Test unregistering all on an empty registry is a no-op."""
        await registry.unregister_all_plugins()
        assert registry.get_all_plugins() == []

    @given(ids=st.lists(st.text(min_size=1).filter(lambda s: s.strip()), unique=True, max_size=20))
    @settings(max_examples=50)
    def test_register_distinct_ids(self, ids):
        """Test registering distinct ids keeps every plugin retrievable."""

        async def scenario():
            registry = PluginRegistry(PluginContext(logger=MagicMock()))
            plugins = [MockPlugin(plugin_id) for plugin_id in ids]
            for plugin in plugins:
                await registry.register_plugin(plugin)
            return registry, plugins

        registry, plugins = asyncio.run(scenario())

        assert len(registry.get_all_plugins()) == len(ids)
        for plugin in plugins:
            assert registry.get_plugin(plugin.id) is plugin
