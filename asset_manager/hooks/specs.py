import flask
import pluggy

from asset_manager.constants import HOST_NAMESPACE

#: Hook Specification Object for specifying new hooks.
HOOK_SPEC = pluggy.HookspecMarker(HOST_NAMESPACE)

#: Hook Implementer object for implementing available hooks.
HOOK_IMPL = pluggy.HookimplMarker(HOST_NAMESPACE)


@HOOK_SPEC
def register_blueprints(app: flask.Flask) -> None:
    """Register a service's blueprints with the given :class:`flask.Flask` app."""
