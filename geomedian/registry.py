"""Technique auto-discovery and registration.

Scans geomedian/techniques/ for modules that define a `technique` object
of type Technique. Collects them into a dict keyed by name.

Handles both normal Python (pkgutil.iter_modules) and frozen PyInstaller
binaries (where iter_modules returns nothing — falls back to the known
module list, which mirrors the imports in techniques/__init__.py).
"""

import importlib
import pkgutil

from geomedian.core.types import Technique

_registry: dict[str, Technique] = {}
_docs: dict[str, str] = {}

# Known technique module names — fallback for frozen binaries
_TECHNIQUE_MODULES = [
    'all',
    'mark',
    'point',
    'projections',
]


def discover() -> dict[str, Technique]:
    """Import all technique modules and return the registry."""
    if _registry:
        return _registry

    import geomedian.techniques as pkg

    found_modules = [
        modname for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__) if not modname.startswith('_')
    ]
    if not found_modules:
        found_modules = _TECHNIQUE_MODULES

    for modname in found_modules:
        module = importlib.import_module(f'geomedian.techniques.{modname}')
        tech = getattr(module, 'technique', None)
        if isinstance(tech, Technique):
            _registry[tech.name] = tech
            _docs[tech.name] = (module.__doc__ or '').strip()

    return _registry


def get(name: str) -> Technique:
    """Get a technique by name."""
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown technique: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_techniques() -> dict[str, Technique]:
    """Return all registered techniques."""
    return discover()


def doc(name: str) -> str:
    """Full module docstring of a technique ('' if it has none)."""
    discover()
    return _docs.get(name, '')


def summary(name: str) -> str:
    """First docstring line of a technique, falling back to its help text."""
    text = doc(name)
    return text.splitlines()[0] if text else get(name).help
