"""Hook Implementations collected from the :mod:`asset_manager.services` sub-package.

Every service package exposing a ``blueprints`` module is expected to
implement :func:`asset_manager.hooks.specs.register_blueprints` in it.
Service packages without one are skipped.
"""
import importlib
import pkgutil
from types import ModuleType
from typing import List

import structlog

from asset_manager import services as services_subpackage

log = structlog.get_logger(__name__)


def load_hook_modules() -> List[ModuleType]:
    modules = []
    for sub_module in pkgutil.iter_modules(path=services_subpackage.__path__):
        _, sub_module_name, _ = sub_module

        if sub_module_name.startswith(("_", "utils")):
            continue

        blueprints_module_path = f"{services_subpackage.__name__}.{sub_module_name}.blueprints"
        try:
            modules.append(importlib.import_module(blueprints_module_path))
        except ModuleNotFoundError:
            log.error("Skipped service - no blueprints module found!", service=sub_module_name)
            continue
        log.debug("Loaded blueprints for service", service=sub_module_name)
    return modules
