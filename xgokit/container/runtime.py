"""
Container runtime availability check.
"""

import logging
import subprocess

from xgokit.core import process
from xgokit.core.exceptions import RuntimeUnavailable

logger = logging.getLogger(__name__)

DEFAULT_RUNTIME = "docker"


def check_runtime(runtime: str = DEFAULT_RUNTIME) -> None:
    """
    Check whether a container runtime is installed and functional.

    Runs ``<runtime> version`` with its output shown on the console.

    Args:
        runtime: Container runtime binary (e.g., 'docker', 'podman')

    Raises:
        RuntimeUnavailable: If the binary is missing or the query fails
    """
    print(f"Checking {runtime} installation...")
    try:
        process.run([runtime, "version"])
    except (subprocess.CalledProcessError, OSError) as e:
        logger.debug(f"Runtime probe of '{runtime}' failed: {e!r}")
        raise RuntimeUnavailable(e, runtime=runtime) from e
    print()
