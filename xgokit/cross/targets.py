"""
Cross compilation target selection.

Maps the user supplied target list (``linux64,darwin64`` or the sentinel
``all``) onto the fixed set of platforms the toolchain image can build.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List

logger = logging.getLogger(__name__)

ALL_TARGETS = "all"


class Target(Enum):
    """Platform/architecture pairs supported by the toolchain image."""

    LINUX64 = "linux64"
    LINUX386 = "linux386"
    LINUX_ARM = "linuxArm"
    WINDOWS64 = "windows64"
    WINDOWS386 = "windows386"
    DARWIN64 = "darwin64"
    DARWIN386 = "darwin386"

    @property
    def env_var(self) -> str:
        """Environment variable the container reads for this target."""
        return self.name.replace("_", "")


@dataclass(frozen=True)
class TargetFlags:
    """
    One boolean per supported target.

    Field order matches :class:`Target` declaration order.
    """

    linux64: bool = False
    linux386: bool = False
    linux_arm: bool = False
    windows64: bool = False
    windows386: bool = False
    darwin64: bool = False
    darwin386: bool = False

    @classmethod
    def all(cls) -> "TargetFlags":
        return cls(*([True] * len(Target)))

    def enabled(self, target: Target) -> bool:
        return getattr(self, target.name.lower())

    def selected(self) -> List[Target]:
        """Return enabled targets in declaration order."""
        return [target for target in Target if self.enabled(target)]

    def as_env(self) -> Dict[str, str]:
        """
        Render flags as container environment variables.

        Returns:
            Mapping such as ``{"LINUX64": "true", "LINUXARM": "false", ...}``
        """
        return {
            target.env_var: "true" if self.enabled(target) else "false"
            for target in Target
        }


def _tokens(spec: str) -> List[str]:
    return spec.split(",")


def select_targets(spec: str) -> TargetFlags:
    """
    Compute the target flags for a target spec string.

    ``"all"`` enables every target. Otherwise a target is enabled iff its
    identifier appears verbatim as one of the comma separated tokens.
    Unknown tokens are ignored and an empty spec enables nothing.

    Args:
        spec: Comma separated target identifiers or ``"all"``

    Returns:
        TargetFlags for the spec

    Example:
        >>> select_targets("linux64,darwin64").selected()
        [<Target.LINUX64: 'linux64'>, <Target.DARWIN64: 'darwin64'>]
    """
    if spec == ALL_TARGETS:
        return TargetFlags.all()

    requested = set(_tokens(spec))
    return TargetFlags(
        **{target.name.lower(): target.value in requested for target in Target}
    )


def unknown_targets(spec: str) -> List[str]:
    """
    Return tokens of a target spec that name no supported target.

    Empty tokens (from stray commas) are not reported.
    """
    if spec == ALL_TARGETS:
        return []
    known = {target.value for target in Target}
    return [token for token in _tokens(spec) if token and token not in known]
