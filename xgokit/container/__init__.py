"""
Container runtime support for xgokit.

Checks the runtime installation and resolves the cross compilation image.
"""

from xgokit.container.runtime import DEFAULT_RUNTIME, check_runtime
from xgokit.container.images import ImageResolver

__all__ = ["DEFAULT_RUNTIME", "check_runtime", "ImageResolver"]
