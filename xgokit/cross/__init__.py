"""
Cross compilation target support for xgokit.
"""

from xgokit.cross.targets import (
    ALL_TARGETS,
    Target,
    TargetFlags,
    select_targets,
    unknown_targets,
)

__all__ = [
    "ALL_TARGETS",
    "Target",
    "TargetFlags",
    "select_targets",
    "unknown_targets",
]
