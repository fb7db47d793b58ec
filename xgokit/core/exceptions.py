"""
Centralized exception hierarchy for xgokit.

Every stage of the launcher pipeline raises one of these exceptions. All of
them are fatal: the CLI logs the message and exits with a non-zero code.
"""


# ============================================================================
# Base Exceptions
# ============================================================================


class XgoError(Exception):
    """Base exception for all xgokit errors."""

    pass


class StageError(XgoError):
    """
    Base exception for a failed pipeline stage.

    Formats a single-line message naming the stage and wrapping the
    underlying error text. ``{runtime}`` in the stage name is replaced by
    the container runtime binary.
    """

    stage = "run launcher stage"

    def __init__(self, cause=None, runtime: str = "docker"):
        self.cause = cause
        self.runtime = runtime
        stage = self.stage.format(runtime=runtime)
        if cause is None:
            super().__init__(f"Failed to {stage}.")
        else:
            # CalledProcessError text already ends with a period
            detail = str(cause).rstrip(".")
            super().__init__(f"Failed to {stage}: {detail}.")


# ============================================================================
# Command-line and Configuration Exceptions
# ============================================================================


class InvalidArguments(XgoError):
    """Raised when the positional import path is missing or repeated."""

    pass


class ConfigurationError(XgoError):
    """Raised when the configuration file cannot be parsed."""

    pass


# ============================================================================
# Container Runtime Exceptions
# ============================================================================


class RuntimeUnavailable(StageError):
    """Raised when the container runtime is missing or not responding."""

    stage = "check {runtime} installation"


class ImageQueryFailed(StageError):
    """Raised when local images cannot be listed."""

    stage = "check {runtime} image availability"


class ImagePullFailed(StageError):
    """Raised when an image cannot be pulled from the registry."""

    stage = "pull {runtime} image from the registry"


# ============================================================================
# Compilation Exceptions
# ============================================================================


class CompilationFailed(StageError):
    """Raised when the cross compilation container fails."""

    stage = "cross compile package"
