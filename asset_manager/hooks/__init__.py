import pluggy
import structlog

from asset_manager.constants import HOST_NAMESPACE
from asset_manager.hooks import impl, specs

log = structlog.get_logger(__name__)


def get_plugin_manager(namespace: str = HOST_NAMESPACE) -> pluggy.PluginManager:
    """Fetch pluggy's plugin manager for our library.

    Hook implementations are loaded from our own services, as well as from
    any installed package exposing a `namespace` setuptools entry point.
    """
    pm = pluggy.PluginManager(namespace)
    pm.add_hookspecs(specs)

    log.debug("Loading Hook Implementations from entry points..")
    pm.load_setuptools_entrypoints(namespace)

    for module in impl.load_hook_modules():
        pm.register(module)
    return pm
