"""HTTP services built around the asset lifecycle.

Each sub-package with a ``blueprints`` module is picked up automatically by
:func:`asset_manager.hooks.get_plugin_manager`.
"""
