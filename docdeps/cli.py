"""CLI entrypoints for docdeps commands."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from .config import MODES, BuildEnvironment, ConfigError
from .hook import IncludeCheckHook
from .logging import configure_logging
from .report.sinks import StreamStatusSink


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_log_file_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    parser.add_argument(
        "--log-file",
        type=Path,
        default=argparse.SUPPRESS if suppress_default else None,
        metavar="PATH",
        help="Also write the run's log records to PATH.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docdeps",
        description="Report which documentation pages embed changed include files.",
    )
    _add_verbose_option(parser)
    _add_log_file_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    check_parser = subparsers.add_parser(
        "check",
        help="Classify changed files by the pages that include them.",
    )
    _add_verbose_option(check_parser, suppress_default=True)
    _add_log_file_option(check_parser, suppress_default=True)
    check_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the repository root (defaults to current directory).",
    )
    check_parser.add_argument(
        "--from-env",
        action="store_true",
        help="Read revisions, deploy URL and flags from the build environment variables.",
    )
    check_parser.add_argument("--base", help="Base revision to diff from.")
    check_parser.add_argument("--head", help="Head revision to diff to.")
    check_parser.add_argument(
        "--deploy-url",
        help="Deploy preview base URL used to link affected pages.",
    )
    check_parser.add_argument(
        "--mode",
        choices=MODES,
        help="Addressing mode (overrides .docdeps.yml).",
    )
    check_parser.add_argument(
        "--modified-file",
        dest="modified_files",
        action="append",
        metavar="PATH",
        help="Changed file relative to the repository root; skips git when given.",
    )

    serve_parser = subparsers.add_parser(
        "serve",
        help="Serve the build-event endpoint over HTTP.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    _add_log_file_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")

    return parser


def _environment_from_args(args: argparse.Namespace) -> BuildEnvironment:
    environment = BuildEnvironment.from_environ(os.environ) if args.from_env else BuildEnvironment()
    if args.base:
        environment.base_ref = args.base
    if args.head:
        environment.head_ref = args.head
    if args.deploy_url:
        environment.deploy_url = args.deploy_url
    if args.mode:
        environment.mode = args.mode
    if args.modified_files:
        environment.modified_files = list(args.modified_files)
    return environment


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for docdeps commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    if args.command == "check":
        hook = IncludeCheckHook(sink=StreamStatusSink())
        try:
            update = hook.on_success(Path(args.path), _environment_from_args(args))
        except ConfigError as exc:
            parser.exit(1, f"docdeps check failed: {exc}\n")
        if update is None:
            print("Include dependency check is disabled")
    elif args.command == "serve":
        from .service import run_service

        run_service(host=args.host, port=args.port)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


if __name__ == "__main__":
    main(sys.argv[1:])
