"""
Build request and container invocation for xgokit.
"""

from xgokit.build.request import BuildRequest
from xgokit.build.invoker import build_command, build_environment, cross_compile

__all__ = ["BuildRequest", "build_command", "build_environment", "cross_compile"]
