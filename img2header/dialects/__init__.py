"""Auto-discovery of output dialect modules.

Every .py file in this package that defines a `dialect` object is
auto-registered by img2header.registry.discover().

The explicit imports below ensure PyInstaller includes these modules
in the frozen binary. Without them, pkgutil.iter_modules cannot find
the dialect files at runtime.
"""

# PyInstaller hidden imports — keep this list in sync with dialect modules
import img2header.dialects.namespaced_constexpr as _namespaced_constexpr  # noqa: F401
import img2header.dialects.plain_array as _plain_array  # noqa: F401
import img2header.dialects.struct_wrapped as _struct_wrapped  # noqa: F401
