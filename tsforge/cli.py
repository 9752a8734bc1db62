"""Command line entry point for tsforge.

Usage::

    tsforge --name my-lib --author bob
    python -m tsforge -n my-lib -a bob -k typescript utils --no-install
"""

from __future__ import annotations

import argparse
import asyncio
import sys
import time
from pathlib import Path
from typing import NoReturn

from pydantic import ValidationError as SettingsError

from . import __version__
from .config import Config
from .errors import TsforgeError, ValidationError
from .installer import install_dependencies
from .scaffolder import ProjectGenerator, TemplateData
from .utils import console, format_duration, print_error, print_success, print_warning


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser whose usage errors exit with status 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        print_error(message)
        sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser.

    ``--name`` and ``--author`` are checked by :func:`validate_args` rather
    than by argparse so that a missing option exits with status 1.
    """
    parser = _ArgumentParser(
        prog="tsforge",
        description="Generate a new TypeScript package skeleton",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  tsforge -n my-lib -a bob\n"
            "  tsforge -n my-lib -a bob -d 'Tiny helpers.' -k utils helpers\n"
            "  tsforge -n my-lib -a bob -r github:bob/my-lib --no-install\n"
        ),
    )
    parser.add_argument("--name", "-n", metavar="<pkg>", help="The name of the package")
    parser.add_argument("--author", "-a", metavar="<name>", help="The author of the package")
    parser.add_argument(
        "--desc", "-d",
        metavar="<description>",
        help="The description of the package (default: 'This is <pkg>.')",
    )
    parser.add_argument(
        "--keywords", "-k",
        metavar="<words...>",
        nargs="*",
        default=[],
        help="The keywords of the package",
    )
    parser.add_argument(
        "--repo", "-r",
        metavar="<repository>",
        help="The repository of the package (default: <author>/<pkg>)",
    )
    parser.add_argument(
        "--output", "-o",
        metavar="<dir>",
        type=Path,
        default=None,
        help="Directory in which the package folder is created (default: .)",
    )
    parser.add_argument(
        "--no-install",
        action="store_true",
        help="Do not install dependencies instantly",
    )
    parser.add_argument(
        "--rollback",
        action="store_true",
        help="Remove the partially generated package if rendering fails",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def validate_args(args: argparse.Namespace, config: Config) -> TemplateData:
    """Check the parsed options and build the template data.

    Nothing is written to disk here.

    Raises:
        ValidationError: On a missing option, an unusable name, or an
            existing target path.
    """
    if not args.name:
        raise ValidationError("Package name is not provided")

    name = args.name
    if name in {".", ".."} or "/" in name or "\\" in name:
        raise ValidationError(f'Invalid package name "{name}"')

    target = config.output_dir / name
    if target.exists() or target.is_symlink():
        raise ValidationError(f'Path "{target}" already exists', path=target)

    if not args.author:
        raise ValidationError("Package author is not provided")

    return TemplateData(name=name, desc=args.desc or "", author=args.author)


async def run(args: argparse.Namespace, data: TemplateData, config: Config) -> Path:
    """Generate the package and optionally install its dependencies."""
    started = time.perf_counter()

    console.print("Generating files...")
    generator = ProjectGenerator(data, config)
    package_root = await generator.generate(
        config.output_dir,
        repository=args.repo,
        keywords=args.keywords,
    )

    if args.no_install:
        print_warning("Dependencies not installed.")
    else:
        console.print("Installing dev dependencies...")
        await install_dependencies(package_root, config.install_command)

    print_success("Finished!")
    console.print(f"time used: {format_duration(time.perf_counter() - started)}")
    return package_root


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``tsforge`` and ``python -m tsforge``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = Config.from_env()
        if args.output is not None:
            config.output_dir = args.output
        if args.rollback:
            config.rollback_on_failure = True
        data = validate_args(args, config)
        asyncio.run(run(args, data, config))
    except TsforgeError as exc:
        print_error(exc.message)
        sys.exit(1)
    except SettingsError as exc:
        print_error(str(exc))
        sys.exit(1)


if __name__ == "__main__":
    main()
