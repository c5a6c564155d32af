# SPDX-License-Identifier: MIT
"""Command-line interface for cargo-pkgconfig.

Installed as ``cargo-pkgconfig`` so that cargo picks it up as the
``cargo pkgconfig`` subcommand. Cargo passes the subcommand name as the
first argument, which is dropped here.
"""

from __future__ import annotations

import argparse
import logging
import sys

from cargo_pkgconfig.core.collector import ArtifactCollector, cargo_command
from cargo_pkgconfig.core.errors import NoOutputFormatError, PkgconfigError
from cargo_pkgconfig.core.resolver import resolve_flags
from cargo_pkgconfig.toolchains import FLAVORS, DumpType, get_flavor

# Set up logging
logger = logging.getLogger("cargo_pkgconfig")

SUBCOMMAND = "pkgconfig"


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Configure logging based on verbosity level."""
    if debug:
        level = logging.DEBUG
        fmt = "%(levelname)s: %(name)s: %(message)s"
    elif verbose:
        level = logging.INFO
        fmt = "%(levelname)s: %(message)s"
    else:
        level = logging.WARNING
        fmt = "%(levelname)s: %(message)s"

    logging.basicConfig(level=level, format=fmt)


def split_cargo_args(argv: list[str]) -> tuple[list[str], list[str]]:
    """Split arguments at the first "--".

    Args:
        argv: Command-line arguments (without the program name).

    Returns:
        Tuple of (our arguments, arguments passed through to cargo).
    """
    if "--" in argv:
        index = argv.index("--")
        return argv[:index], argv[index + 1 :]
    return list(argv), []


def get_dump_type(args: argparse.Namespace) -> DumpType:
    """Get the requested output format.

    Raises:
        NoOutputFormatError: If neither --libs nor --ar was given.
    """
    if args.libs:
        return DumpType.LINKER
    if args.ar:
        return DumpType.ARCHIVER
    raise NoOutputFormatError()


def cmd_pkgconfig(args: argparse.Namespace) -> int:
    """Build the crate and print flags for the requested library.

    Returns:
        Exit code: cargo's when the build failed, 1 on any of our errors.
    """
    setup_logging(args.verbose, args.debug)

    try:
        dump_type = get_dump_type(args)
        flavor = get_flavor(args.flavor)
        command = cargo_command(args.cargo_args)

        with ArtifactCollector(command) as collector:
            outcome = collector.collect()

            if outcome.failed:
                # Cargo already printed why; just forward its exit code.
                return collector.wait()

            if outcome.success is None:
                code = collector.wait()
                if code != 0:
                    logger.debug("cargo exited with %d before finishing", code)
                    return code

            flags = resolve_flags(args.libname, outcome.artifacts, dump_type, flavor)
            if flags is not None:
                print(flags)

            return collector.wait()
    except PkgconfigError as e:
        logger.error("%s", e.message)
        return 1


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    from cargo_pkgconfig import __version__

    parser = argparse.ArgumentParser(
        prog="cargo pkgconfig",
        description="Extract crate metadata with an interface similar to pkg-config.",
        epilog="Arguments after '--' are passed to 'cargo build'.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("--debug", action="store_true", help="Debug output")
    parser.add_argument(
        "libname",
        help="Name of the library (usually the same as the crate name)",
    )

    output = parser.add_mutually_exclusive_group()
    output.add_argument("--libs", action="store_true", help="output all linker flags")
    output.add_argument("--ar", action="store_true", help="output all archiver flags")

    parser.add_argument(
        "--flavor",
        choices=sorted(FLAVORS),
        help="flavor of linker command-line flags (default: from host OS)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the cargo-pkgconfig CLI.

    Cargo runs external subcommands as ``cargo-pkgconfig pkgconfig ...``, so
    a leading "pkgconfig" is dropped when more arguments follow it. A library
    that is itself named "pkgconfig" must therefore not be the first argument
    when the tool is run directly.
    """
    if argv is None:
        argv = sys.argv[1:]
    if len(argv) > 1 and argv[0] == SUBCOMMAND:
        argv = argv[1:]

    own_args, cargo_args = split_cargo_args(argv)

    parser = build_parser()
    args = parser.parse_args(own_args)
    args.cargo_args = cargo_args

    return cmd_pkgconfig(args)


if __name__ == "__main__":
    sys.exit(main())
