"""Auto-discovery of technique modules.

Every .py file in this package that defines a `technique` object is
auto-registered by geomedian.registry.discover().

The explicit imports below ensure PyInstaller includes these modules
in the frozen binary. Without them, pkgutil.iter_modules cannot find
the technique files at runtime.
"""

# PyInstaller hidden imports — keep this list in sync with technique modules
import geomedian.techniques.all as _all  # noqa: F401
import geomedian.techniques.mark as _mark  # noqa: F401
import geomedian.techniques.point as _point  # noqa: F401
import geomedian.techniques.projections as _projections  # noqa: F401
