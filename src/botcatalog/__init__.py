# botcatalog/__init__.py
"""
botcatalog - bot model catalog on a ports-and-adapters core

- Ports, adapter registry and resolver (botcatalog.core.di)
- Schema validation returning Result values (botcatalog.core.validation)
- Value objects, entities and aggregates (botcatalog.core.modeling)
- Bot model use cases (botcatalog.application.bot_models)
"""

from __future__ import annotations

__version__ = "0.1.0"

# Lazy imports keep `import botcatalog` cheap and free of import cycles.
_EXPORTS = {
    # core
    "Port": "botcatalog.core.di",
    "create_port": "botcatalog.core.di",
    "Registry": "botcatalog.core.di",
    "use_registry": "botcatalog.core.di",
    "set_port_adapter": "botcatalog.core.di",
    "use_port": "botcatalog.core.di",
    "reset_di": "botcatalog.core.di",
    "Result": "botcatalog.core.errors",
    "PortNotBoundError": "botcatalog.core.errors",
    "SchemaValidationError": "botcatalog.core.errors",
    "validate": "botcatalog.core.validation",
    # domain
    "BotModel": "botcatalog.domain",
    "Niche": "botcatalog.domain",
    "TechnicalSpecification": "botcatalog.domain",
    "User": "botcatalog.domain",
    "Email": "botcatalog.domain",
    # use cases
    "store_bot_model": "botcatalog.application.bot_models",
    "simple_store_bot_model": "botcatalog.application.bot_models",
}


def __getattr__(name: str):
    """Lazily import public names."""
    module_name = _EXPORTS.get(name)
    if module_name is None:
        raise AttributeError(f"module 'botcatalog' has no attribute '{name}'")
    import importlib

    return getattr(importlib.import_module(module_name), name)


__all__ = ["__version__", *_EXPORTS]
