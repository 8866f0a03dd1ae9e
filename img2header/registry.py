"""Dialect auto-discovery and registration.

Scans img2header/dialects/ for modules that define a `dialect` object
of type Dialect. Collects them into a dict keyed by dialect name.

Handles both normal Python (pkgutil.iter_modules) and frozen binaries
(where iter_modules returns nothing — falls back to the known module list).
"""

import importlib
import pkgutil

from img2header.core.types import Dialect, InvalidConfiguration

_registry: dict[str, Dialect] = {}
_modules: dict[str, object] = {}

# Known dialect module names — fallback for frozen binaries
_DIALECT_MODULES = [
    'namespaced_constexpr',
    'plain_array',
    'struct_wrapped',
]


def discover() -> dict[str, Dialect]:
    """Import all dialect modules and return the registry."""
    if _registry:
        return _registry

    import img2header.dialects as pkg

    found_modules = [
        modname for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__) if not modname.startswith('_')
    ]
    if not found_modules:
        found_modules = _DIALECT_MODULES

    for modname in sorted(found_modules):
        module = importlib.import_module(f'img2header.dialects.{modname}')
        dialect = getattr(module, 'dialect', None)
        if isinstance(dialect, Dialect):
            _registry[dialect.name] = dialect
            _modules[dialect.name] = module

    return _registry


def module_for(name: str) -> object:
    """The module that defines dialect `name` (for docstring access)."""
    get(name)
    return _modules[name]


def get(name: str) -> Dialect:
    """Get a dialect by name."""
    reg = discover()
    if name not in reg:
        raise InvalidConfiguration(f'Unknown dialect: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_dialects() -> dict[str, Dialect]:
    """Return all registered dialects."""
    return discover()
