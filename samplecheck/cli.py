"""CLI entrypoint for samplecheck runs."""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path

from .config import ConfigError, HarnessConfig, load_config
from .credentials import CredentialsError
from .logging import configure_logging
from .orchestrator import Orchestrator
from .report import write_json_report

EXIT_FAILURES = 1
EXIT_FATAL = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="samplecheck",
        description="Assemble and run documentation code samples in every supported language.",
    )
    parser.add_argument(
        "root",
        nargs="?",
        default=None,
        help="Harness directory holding templates and credentials (defaults to current directory).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=(
            "Path to samplecheck.yml (defaults to ROOT/samplecheck.yml). "
            "The harness root becomes the file's directory, so ROOT cannot be combined with it."
        ),
    )
    parser.add_argument("--docs-root", type=Path, help="Directory with one subdirectory per service.")
    parser.add_argument("--templates-dir", type=Path, help="Directory of <service>.<ext>.j2 templates.")
    parser.add_argument("--staging-dir", type=Path, help="Where assembled programs are written.")
    parser.add_argument("--credentials", type=Path, help="JSON file of credential values.")
    parser.add_argument(
        "--fail-on-missing",
        action="store_true",
        default=None,
        help="Exit non-zero when any service/language pair has no template.",
    )
    parser.add_argument(
        "--report-json",
        type=Path,
        default=None,
        help="Also write outcomes and totals to this JSON file.",
    )
    parser.add_argument("--log-file", type=Path, default=None, help="Mirror diagnostics to a file.")
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        default=False,
        help="Only log warnings and errors.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    return parser


def _apply_overrides(config: HarnessConfig, args: argparse.Namespace) -> HarnessConfig:
    overrides = {
        "docs_root": args.docs_root,
        "templates_dir": args.templates_dir,
        "staging_dir": args.staging_dir,
        "credentials_file": args.credentials,
        "fail_on_missing": args.fail_on_missing,
    }
    return replace(config, **{key: value for key, value in overrides.items() if value is not None})


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint; returns the process exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=bool(args.verbose), quiet=bool(args.quiet), log_file=args.log_file
    )

    if args.config is not None and args.root is not None:
        parser.error("ROOT and --config cannot be combined; the config file's directory is the root")

    try:
        config = load_config(args.config or Path(args.root or "."))
    except ConfigError as exc:
        parser.exit(EXIT_FATAL, f"{exc}\n")
    config = _apply_overrides(config, args)

    orchestrator = Orchestrator(config)
    try:
        outcomes = orchestrator.run()
    except CredentialsError as exc:
        parser.exit(EXIT_FATAL, f"samplecheck aborted: {exc}\n")

    summary = orchestrator.reporter.summary(outcomes)
    if args.report_json is not None:
        write_json_report(args.report_json, outcomes)

    if summary.failure or (config.fail_on_missing and summary.missing):
        return EXIT_FAILURES
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
