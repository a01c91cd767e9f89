"""
    Plugin discovery via entry points, plus manual registration.

    Design Pattern: Registry
    ────────────────────────
    Data-source and layout plugins announce themselves under their own
    entry-point group. A loader instantiates every plugin of its group
    on first use; hosts and tests may also register instances directly,
    which take precedence over discovered ones of the same name.
"""
import importlib.metadata
import logging
from typing import Dict, Generic, List, Optional, Type, TypeVar

from graph_api.plugins.base import DataSourcePlugin, LayoutPlugin

logger = logging.getLogger(__name__)

TPlugin = TypeVar('TPlugin')

# Entry-point group names (must match setup.py)
DATA_SOURCE_EP_GROUP = 'tabular_graph.data_source'
LAYOUT_EP_GROUP = 'tabular_graph.layout'


class PluginLoader(Generic[TPlugin]):
    """
    Lazily discovers the plugins of one entry-point group.

    Usage:
        loader = PluginLoader(DataSourcePlugin, DATA_SOURCE_EP_GROUP)
        csv_plugin = loader.get('csv')
        loader.register('inline', InlinePlugin())
    """

    def __init__(self, plugin_base_class: Type[TPlugin], group: str):
        self._base_class = plugin_base_class
        self._group = group
        self._discovered: Dict[str, TPlugin] = {}
        self._registered: Dict[str, TPlugin] = {}
        self._loaded = False

    @property
    def group(self) -> str:
        return self._group

    def load_all(self) -> Dict[str, TPlugin]:
        """Return name → plugin for every discovered and registered plugin."""
        if not self._loaded:
            self._discover()
        plugins = dict(self._discovered)
        plugins.update(self._registered)
        return plugins

    def register(self, name: str, plugin: TPlugin) -> None:
        if not isinstance(plugin, self._base_class):
            raise TypeError(
                f"Plugin '{name}' must be a {self._base_class.__name__}, "
                f"got {type(plugin).__name__}."
            )
        self._registered[name] = plugin
        logger.info("Registered plugin: %s (%s)", name, type(plugin).__name__)

    def get(self, name: str) -> Optional[TPlugin]:
        return self.load_all().get(name)

    def get_names(self) -> List[str]:
        return sorted(self.load_all().keys())

    def reload(self) -> Dict[str, TPlugin]:
        """Forget discovered plugins and scan the entry points again."""
        self._discovered.clear()
        self._loaded = False
        return self.load_all()

    def _discover(self) -> None:
        self._loaded = True
        try:
            entry_points = importlib.metadata.entry_points(group=self._group)
        except Exception as exc:
            logger.error("Entry-point discovery failed for '%s': %s", self._group, exc)
            return

        for ep in entry_points:
            try:
                plugin_cls = ep.load()
                if not (isinstance(plugin_cls, type) and issubclass(plugin_cls, self._base_class)):
                    logger.warning("Plugin '%s' is not a %s, skipped.",
                                   ep.name, self._base_class.__name__)
                    continue
                self._discovered[ep.name] = plugin_cls()
                logger.info("Loaded plugin: %s (%s)", ep.name, plugin_cls.__name__)
            except Exception as exc:
                logger.error("Failed to load plugin '%s': %s", ep.name, exc)

    def __len__(self) -> int:
        return len(self.load_all())

    def __contains__(self, name: str) -> bool:
        return name in self.load_all()

    def __repr__(self) -> str:
        return (
            f"PluginLoader(base={self._base_class.__name__}, "
            f"group='{self._group}', loaded={len(self._discovered) + len(self._registered)})"
        )


def create_data_source_loader() -> PluginLoader[DataSourcePlugin]:
    """Create a loader for Data Source plugins."""
    return PluginLoader(DataSourcePlugin, DATA_SOURCE_EP_GROUP)


def create_layout_loader() -> PluginLoader[LayoutPlugin]:
    """Create a loader for Layout plugins."""
    return PluginLoader(LayoutPlugin, LAYOUT_EP_GROUP)
