"""CLI entrypoints for codebase analyzer commands."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from .config import AnalyzerSettings, ConfigError, load_config
from .logging import configure_logging
from .orchestrator import AnalysisError, Orchestrator
from .scanner import scan_directory


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS if suppress_default else False,
        help="Increase log verbosity for troubleshooting.",
    )


def _add_config_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a .codebase-analyzer.yml file or the directory holding it.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="codebase-analyzer",
        description="Analyze source files and report metrics, statistics and insights.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Analyze a JSON submission, a plain source file, or a directory.",
    )
    _add_verbose_option(analyze_parser, suppress_default=True)
    _add_config_option(analyze_parser)
    analyze_parser.add_argument(
        "source",
        nargs="?",
        default="-",
        help="Submission file, directory, or '-' to read from stdin (default).",
    )
    analyze_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Write the report to this file instead of stdout.",
    )
    analyze_parser.add_argument(
        "--compact",
        action="store_true",
        help="Emit the report on a single line.",
    )
    analyze_parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only log warnings and errors.",
    )

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP analysis service.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    _add_config_option(serve_parser)
    serve_parser.add_argument("--host", default=None, help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=None, help="Port to listen on.")

    return parser


def _read_submission(source: str, settings: AnalyzerSettings) -> Any:
    if source == "-":
        return sys.stdin.read()
    path = Path(source).expanduser()
    if path.is_dir():
        return scan_directory(path, settings.scan.exclude_paths)
    # Raw text; the normalizer decides whether it is a JSON document.
    return path.read_text(encoding="utf-8")


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for codebase analyzer commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=bool(args.verbose), quiet=bool(getattr(args, "quiet", False))
    )

    try:
        settings = load_config(args.config)
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    if args.command == "analyze":
        try:
            submission = _read_submission(args.source, settings)
        except OSError as exc:
            parser.exit(1, f"Cannot read {args.source}: {exc}\n")

        try:
            report = Orchestrator(settings=settings).analyze(submission)
        except AnalysisError as exc:
            parser.exit(1, f"{exc}\nRun with --verbose for more details.\n")

        indent = None if args.compact else 2
        rendered = json.dumps(report.to_dict(), indent=indent)
        if args.output is not None:
            args.output.write_text(rendered + "\n", encoding="utf-8")
        else:
            print(rendered)
    elif args.command == "serve":
        from .service import run_service

        run_service(settings, host=args.host, port=args.port)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


if __name__ == "__main__":
    main(sys.argv[1:])
