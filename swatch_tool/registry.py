"""Technique auto-discovery and registration.

Scans swatch_tool/techniques/ for modules that define a `technique` object
of type Technique and collects them into a dict keyed by name. Frozen
binaries, where pkgutil finds nothing, fall back to the known module list.
"""

import importlib
import pkgutil

from swatch_tool.core.types import Technique

_registry: dict[str, Technique] = {}

_TECHNIQUE_MODULES = ['all', 'distinct', 'swatches', 'top']


def discover() -> dict[str, Technique]:
    """Import all technique modules and return the registry."""
    if _registry:
        return _registry

    import swatch_tool.techniques as pkg

    found = [name for _importer, name, _ispkg in pkgutil.iter_modules(pkg.__path__) if not name.startswith('_')]
    if not found:
        found = _TECHNIQUE_MODULES

    for modname in found:
        module = importlib.import_module(f'swatch_tool.techniques.{modname}')
        tech = getattr(module, 'technique', None)
        if isinstance(tech, Technique):
            _registry[tech.name] = tech

    return _registry


def get(name: str) -> Technique:
    """Get a technique by name."""
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown technique: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_techniques() -> dict[str, Technique]:
    return discover()
