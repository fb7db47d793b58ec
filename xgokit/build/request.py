"""
Build request record.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class BuildRequest:
    """
    Everything the toolchain container needs to know about one build.

    Constructed once from the command line and configuration, then passed
    unchanged to each pipeline stage.

    Attributes:
        import_path: Go import path to fetch and build
        remote: Version control remote to fetch (empty = default)
        branch: Version control branch to build (empty = default)
        package: Sub-package to build if not the root import
        targets: Comma separated target list or 'all'
        deps: CGO dependencies (configure/make based archives)
        out_prefix: Prefix for output naming (empty = package name)
        verbose: Print package names as they are compiled
        race: Enable the data race detector (amd64 only)
        go_version: Go release selecting the toolchain image
    """

    import_path: str
    remote: str = ""
    branch: str = ""
    package: str = ""
    targets: str = "all"
    deps: str = ""
    out_prefix: str = ""
    verbose: bool = False
    race: bool = False
    go_version: str = "latest"
