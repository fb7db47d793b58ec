"""
xgo command-line interface.

Parses the Go-style single-dash flags of the launcher, resolves them against
the configuration file and runs the cross compilation pipeline:

    probe runtime -> ensure image -> select targets -> run container
"""

import argparse
import logging
import shlex
import sys
from pathlib import Path
from typing import List, Optional

from xgokit.build import BuildRequest, build_command, cross_compile
from xgokit.config import Settings, load_settings
from xgokit.container import ImageResolver, check_runtime
from xgokit.core.exceptions import InvalidArguments, XgoError
from xgokit.cross import ALL_TARGETS, TargetFlags, select_targets, unknown_targets

# Get version from package
try:
    from importlib.metadata import version

    __version__ = version("xgokit")
except Exception:
    __version__ = "0.1.0"

logger = logging.getLogger(__name__)

USAGE = "%(prog)s [options] <go import path>"


class CLI:
    """xgo command-line interface."""

    def __init__(self):
        """Initialize CLI with argument parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create argument parser.

        Flag defaults are left as None so that values from the
        configuration file can be told apart from explicit flags.

        Returns:
            Configured ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog="xgo",
            usage=USAGE,
            description="xgo - Go CGO cross compiler",
            epilog="Compiled binaries are written to the current directory.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            allow_abbrev=False,
        )

        # Cross compilation options
        parser.add_argument(
            "-go",
            metavar="VERSION",
            help="Go release to use for cross compilation (default: latest)",
        )
        parser.add_argument(
            "-pkg", metavar="PATH", help="Sub-package to build if not root import"
        )
        parser.add_argument(
            "-out",
            metavar="PREFIX",
            help="Prefix to use for output naming (empty = package name)",
        )
        parser.add_argument(
            "-remote",
            metavar="URL",
            help="Version control remote repository to build",
        )
        parser.add_argument(
            "-branch", metavar="NAME", help="Version control branch to build"
        )
        parser.add_argument(
            "-deps",
            metavar="ARCHIVES",
            help="CGO dependencies (configure/make based archives)",
        )
        parser.add_argument(
            "-targets",
            metavar="LIST",
            help="Comma separated list of targets, e.g. linux64,darwin64 "
            "(default: all)",
        )

        # Options passed to go build
        parser.add_argument(
            "-v",
            action="store_true",
            default=None,
            help="Print the names of packages as they are compiled",
        )
        parser.add_argument(
            "-race",
            action="store_true",
            default=None,
            help="Enable data race detection (supported only on amd64)",
        )

        # Launcher options
        parser.add_argument(
            "--version", action="version", version=f"xgo {__version__}"
        )
        parser.add_argument(
            "--config",
            type=Path,
            metavar="PATH",
            help="Path to configuration file (default: ./xgo.yaml)",
        )
        parser.add_argument(
            "--debug", action="store_true", help="Enable debug logging"
        )
        parser.add_argument(
            "--quiet",
            "-q",
            action="store_true",
            help="Enable minimal output (errors only)",
        )
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Print the container command instead of running it",
        )

        parser.add_argument(
            "import_paths",
            nargs="*",
            metavar="IMPORT_PATH",
            help="Go import path to build",
        )

        return parser

    def parse_args(self, args: Optional[List[str]] = None):
        """
        Parse command-line arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Parsed arguments namespace
        """
        return self.parser.parse_args(args)

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run CLI with given arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        parsed_args = self.parse_args(args)

        self._configure_logging(parsed_args)

        try:
            return self._run_pipeline(parsed_args)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130  # Standard exit code for SIGINT
        except XgoError as e:
            logger.error(str(e))
            return 1
        except Exception as e:
            logger.error(f"Error: {e}")
            if parsed_args.debug:
                import traceback

                traceback.print_exc()
            return 1

    def _configure_logging(self, args):
        """
        Configure logging based on debug/quiet flags.

        Args:
            args: Parsed arguments with debug/quiet flags
        """
        if args.debug:
            level = logging.DEBUG
            format_str = "%(levelname)s [%(name)s] %(message)s"
        elif args.quiet:
            level = logging.ERROR
            format_str = "%(levelname)s: %(message)s"
        else:
            level = logging.INFO
            format_str = "%(message)s"

        logging.basicConfig(
            level=level,
            format=format_str,
            force=True,  # Reconfigure if already configured
        )

    def _validate_args(self, args) -> None:
        """
        Check that exactly one import path was given.

        Raises:
            InvalidArguments: If the positional argument count is wrong
        """
        if len(args.import_paths) != 1:
            raise InvalidArguments(
                f"Usage: {self.parser.prog} [options] <go import path>"
            )

    def _build_request(self, args, settings: Settings) -> BuildRequest:
        """
        Merge command-line flags with configured defaults.

        Command-line values take precedence over the configuration file.

        Args:
            args: Parsed arguments
            settings: Loaded settings

        Returns:
            Immutable build request for this run
        """

        def pick(name):
            value = getattr(args, name)
            return settings.defaults[name] if value is None else value

        return BuildRequest(
            import_path=args.import_paths[0],
            remote=pick("remote"),
            branch=pick("branch"),
            package=pick("pkg"),
            targets=pick("targets"),
            deps=pick("deps"),
            out_prefix=pick("out"),
            verbose=pick("v"),
            race=pick("race"),
            go_version=pick("go"),
        )

    def _run_pipeline(self, args) -> int:
        """
        Run the launcher stages in order, stopping at the first failure.

        Args:
            args: Parsed arguments

        Returns:
            Exit code (0 for success)
        """
        # Validate the positional argument before touching the runtime
        self._validate_args(args)

        settings = load_settings(args.config, required=args.config is not None)
        request = self._build_request(args, settings)
        logger.debug(f"Build request: {request}")

        check_runtime(settings.runtime)

        image = settings.image_for(request.go_version)
        ImageResolver(settings.runtime).ensure(image)

        flags = select_targets(request.targets)
        self._report_targets(request.targets, flags)

        if args.dry_run:
            cmd = build_command(request, flags, Path.cwd(), settings)
            print(shlex.join(cmd))
            return 0

        cross_compile(request, flags, settings=settings)
        return 0

    def _report_targets(self, spec: str, flags: TargetFlags) -> None:
        """Log the selected targets and warn about ignored tokens."""
        for token in unknown_targets(spec):
            logger.warning(f"Ignoring unknown target '{token}'")

        selected = flags.selected()
        if spec == ALL_TARGETS:
            logger.info("Building for all architectures")
        elif selected:
            logger.info(
                f"Building for: {', '.join(target.value for target in selected)}"
            )
        else:
            logger.warning(
                f"No known targets in '{spec}', the build will produce no binaries"
            )


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
