"""CLI entrypoint for the Assetpress optimizer."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from assetpress import __version__
from assetpress.cli.handlers import handle_cache_clear, handle_cache_info, handle_validate_config
from assetpress.constants.branding import CLI_DESCRIPTION
from assetpress.constants.reporting import RESULT_TEMP_PREFIX, RESULT_TEMP_SUFFIX
from assetpress.exceptions import AssetpressError, ConfigError
from assetpress.io import write_json_atomic
from assetpress.optimizer import optimize_directory
from assetpress.reporting import StdoutReporter


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-r", "--root", type=Path, required=True, help="Build output directory")
    parser.add_argument("-c", "--config", type=Path, help="Explicit config file")
    parser.add_argument(
        "--cache-dir",
        type=Path,
        default=None,
        help="Cache directory (overrides cache.dir from the config)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="assetpress",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    optimize = subparsers.add_parser("optimize", help="Compress assets in a build output directory")
    _add_common_arguments(optimize)
    optimize.add_argument("-n", "--no-cache", action="store_true", help="Disable cache reads/writes")
    optimize.add_argument("-j", "--workers", type=int, default=None, help="Concurrent compression tasks")
    optimize.add_argument("--max-file-mb", type=int, default=None, help="Skip files larger than this size")
    optimize.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Write the build result as JSON to this path",
    )
    optimize.add_argument("--no-stdout", action="store_true", help="Silence stdout output")
    optimize.add_argument("--no-color", action="store_true", help="Disable colored output")

    cache = subparsers.add_parser("cache", help="Inspect or clear the compression cache")
    cache_commands = cache.add_subparsers(dest="cache_command", required=True)
    clear = cache_commands.add_parser("clear", help="Invalidate cache entries")
    _add_common_arguments(clear)
    clear.add_argument(
        "-p",
        "--pattern",
        default=None,
        help="Regular expression; only entries whose original path matches are removed",
    )
    info = cache_commands.add_parser("info", help="Show cache statistics")
    _add_common_arguments(info)
    info.add_argument("--json", action="store_true", help="Print statistics as JSON")

    validate = subparsers.add_parser("validate-config", help="Validate configuration without optimizing")
    validate.add_argument("-r", "--root", type=Path, required=True, help="Build output directory")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if getattr(args, "verbose", False) else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    if args.command == "validate-config":
        return handle_validate_config(args)
    if args.command == "cache":
        if args.cache_command == "clear":
            return handle_cache_clear(args)
        return handle_cache_info(args)
    if args.command != "optimize":
        parser.error(f"Unsupported command: {args.command}")

    try:
        result = optimize_directory(
            root=args.root,
            config_path=args.config,
            cache_dir=args.cache_dir,
            no_cache=args.no_cache,
            workers=args.workers,
            max_file_mb=args.max_file_mb,
        )
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except AssetpressError as exc:
        print(f"Optimizer error: {exc}", file=sys.stderr)
        return 1

    if args.output is not None:
        try:
            write_json_atomic(
                path=args.output.resolve(),
                payload=result.to_dict(),
                temp_prefix=RESULT_TEMP_PREFIX,
                temp_suffix=RESULT_TEMP_SUFFIX,
            )
        except OSError as exc:
            print(f"Failed to write build result to {args.output}: {exc}", file=sys.stderr)
            return 1

    if not args.no_stdout:
        use_color = not args.no_color and sys.stdout.isatty()
        reporter = StdoutReporter(result, color=use_color, verbose=args.verbose)
        print(reporter.render())

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
