"""Auto-discovery of technique modules.

Every .py file in this package that defines a `technique` object is
auto-registered by swatch_tool.registry.discover().

The explicit imports below ensure PyInstaller includes these modules
in a frozen binary, where pkgutil.iter_modules cannot find them.
"""

# PyInstaller hidden imports: keep this list in sync with technique modules
import swatch_tool.techniques.all as _all  # noqa: F401
import swatch_tool.techniques.distinct as _distinct  # noqa: F401
import swatch_tool.techniques.swatches as _swatches  # noqa: F401
import swatch_tool.techniques.top as _top  # noqa: F401
