"""
Synchronous subprocess execution helpers.

All external programs are started through this module, one at a time.
Errors from :mod:`subprocess` are propagated unchanged so callers can wrap
them into the stage exception they own.
"""

import logging
import subprocess
from typing import Sequence

logger = logging.getLogger(__name__)


def _format(cmd: Sequence[str]) -> str:
    return " ".join(cmd)


def run(cmd: Sequence[str]) -> None:
    """
    Run a command, streaming its output to the console.

    The child inherits the standard output and error streams of the
    current process. No timeout is applied.

    Args:
        cmd: Command and arguments

    Raises:
        subprocess.CalledProcessError: If the command exits non-zero
        OSError: If the command cannot be started (e.g. binary missing)
    """
    logger.debug(f"Running: {_format(cmd)}")
    subprocess.run(list(cmd), check=True)


def capture(cmd: Sequence[str]) -> str:
    """
    Run a command and return its combined stdout and stderr.

    Args:
        cmd: Command and arguments

    Returns:
        Decoded output of the command

    Raises:
        subprocess.CalledProcessError: If the command exits non-zero
        OSError: If the command cannot be started
    """
    logger.debug(f"Capturing: {_format(cmd)}")
    result = subprocess.run(
        list(cmd),
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
        check=True,
    )
    return result.stdout or ""

