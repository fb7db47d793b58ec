"""
Cross compilation container invocation.

Builds the single ``docker run`` command that performs the actual cross
compilation and executes it. Compiled binaries land in the mounted working
directory.
"""

import logging
import subprocess
from pathlib import Path
from typing import Dict, List, Optional

from xgokit.build.request import BuildRequest
from xgokit.config.settings import Settings
from xgokit.core import process
from xgokit.core.exceptions import CompilationFailed
from xgokit.cross.targets import TargetFlags

logger = logging.getLogger(__name__)


def _bool(value: bool) -> str:
    return "true" if value else "false"


def build_environment(request: BuildRequest, flags: TargetFlags) -> Dict[str, str]:
    """
    Compute the container environment for a build.

    Args:
        request: Build request
        flags: Target flags derived from ``request.targets``

    Returns:
        Ordered mapping of environment variable names to values
    """
    env = {
        "REPO_REMOTE": request.remote,
        "REPO_BRANCH": request.branch,
        "PACK": request.package,
    }
    env.update(flags.as_env())
    env.update(
        {
            "DEPS": request.deps,
            "OUT": request.out_prefix,
            "FLAG_V": _bool(request.verbose),
            "FLAG_RACE": _bool(request.race),
        }
    )
    return env


def build_command(
    request: BuildRequest,
    flags: TargetFlags,
    workdir: Path,
    settings: Optional[Settings] = None,
) -> List[str]:
    """
    Assemble the container command for a build.

    The result depends only on its arguments, so identical inputs give an
    identical argument list.

    Args:
        request: Build request
        flags: Target flags
        workdir: Directory mounted into the container for the output
        settings: Launcher settings (runtime, image prefix, mount point)

    Returns:
        Command argument list, import path last

    Example:
        >>> cmd = build_command(BuildRequest("github.com/a/b"),
        ...                     TargetFlags(), Path("/src"))
        >>> cmd[:4]
        ['docker', 'run', '-v', '/src:/build']
    """
    settings = settings or Settings()

    cmd = [settings.runtime, "run", "-v", f"{workdir}:{settings.mount_point}"]
    for name, value in build_environment(request, flags).items():
        cmd.extend(["-e", f"{name}={value}"])
    cmd.append(settings.image_for(request.go_version))
    cmd.append(request.import_path)
    return cmd


def cross_compile(
    request: BuildRequest,
    flags: TargetFlags,
    workdir: Optional[Path] = None,
    settings: Optional[Settings] = None,
) -> None:
    """
    Cross compile a package into the working directory.

    Args:
        request: Build request
        flags: Target flags
        workdir: Output directory (default: current working directory)
        settings: Launcher settings

    Raises:
        CompilationFailed: If the container cannot be started or exits non-zero
    """
    if workdir is None:
        try:
            workdir = Path.cwd()
        except OSError as e:
            raise CompilationFailed(e) from e

    cmd = build_command(request, flags, workdir, settings)

    print(f"Cross compiling {request.import_path}...")
    try:
        process.run(cmd)
    except (subprocess.CalledProcessError, OSError) as e:
        raise CompilationFailed(e) from e
