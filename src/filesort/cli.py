"""Command-line entry point: gather filenames, classify, render the report."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional, Sequence

from rich.console import Console
from rich.progress import Progress

from .aggregator import report
from .classifier import classify_batch
from .config import AppConfig, Settings, apply_env_overrides, load_config
from .logging_utils import render_fields_block
from .models import ClassificationRecord, StatisticsSummary
from .run_summary import log_report
from .sample_data import demo_filenames
from .summary_table import SummaryTableRenderer
from .utils import read_input_list
from .validation import OUTPUT_FORMATS
from .version import __version__

LOGGER = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s\n%(message)s\n"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_INPUT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="filesort",
        description="Classify filenames by extension, assign processing priorities and report statistics.",
    )
    parser.add_argument("filenames", nargs="*", help="Filenames to classify")
    parser.add_argument(
        "--input-list",
        type=Path,
        help="Text file listing one filename per line ('#' starts a comment)",
    )
    parser.add_argument("--demo", action="store_true", help="Append the demonstration batch")
    parser.add_argument(
        "--config",
        type=Path,
        default=Path(os.environ["FILESORT_CONFIG"]) if os.environ.get("FILESORT_CONFIG") else None,
        help="Path to a YAML config (default: $FILESORT_CONFIG)",
    )
    parser.add_argument("--format", choices=OUTPUT_FORMATS, help="Report format")
    parser.add_argument("--no-progress", action="store_true", help="Disable the progress bar")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    logging.getLogger().setLevel(level)


def resolve_settings(args: argparse.Namespace, settings: Settings) -> Settings:
    """Layer environment overrides and then CLI flags on top of file settings."""
    resolved = apply_env_overrides(settings)
    if args.format:
        resolved = replace(resolved, format=args.format)
    if args.no_progress:
        resolved = replace(resolved, show_progress=False)
    if args.verbose:
        resolved = replace(resolved, verbose=True)
    return resolved


def collect_filenames(args: argparse.Namespace, config: AppConfig) -> List[str]:
    """Gather the batch from CLI arguments, list files, config and demo data.

    Raises:
        OSError: If an input list file cannot be read.
        UnicodeDecodeError: If an input list file is not valid UTF-8.
    """
    filenames: List[str] = list(args.filenames)
    if args.input_list is not None:
        filenames.extend(read_input_list(args.input_list))
    filenames.extend(config.inputs)
    if config.input_list is not None:
        filenames.extend(read_input_list(config.input_list))
    if args.demo:
        filenames.extend(demo_filenames())
    return filenames


def classify_with_progress(
    filenames: Sequence[str],
    *,
    enabled: bool,
    console: Optional[Console] = None,
) -> List[ClassificationRecord]:
    show = enabled and bool(filenames) and LOGGER.isEnabledFor(logging.INFO)
    with Progress(console=console or Console(stderr=True), disable=not show, transient=True) as progress:
        task_id = progress.add_task("Classifying", total=len(filenames))

        def _advance(completed: int, total: int, record: ClassificationRecord) -> None:
            progress.update(task_id, completed=completed)

        return classify_batch(filenames, progress=_advance)


def render_report(
    fmt: str,
    records: Sequence[ClassificationRecord],
    summary: StatisticsSummary,
    console: Console,
) -> None:
    if fmt == "json":
        payload = {
            "records": [record.to_dict() for record in records],
            "summary": summary.to_dict(),
        }
        console.file.write(json.dumps(payload, indent=2) + "\n")
    elif fmt == "plain":
        log_report(records, summary)
    else:
        SummaryTableRenderer(console).print_report(records, summary)


def main(argv: Optional[Sequence[str]] = None, console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = load_config(args.config) if args.config else AppConfig()
        settings = resolve_settings(args, config.settings)
    except ValueError as exc:
        LOGGER.error("Failed to load config: %s", exc)
        return EXIT_CONFIG_ERROR

    if settings.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        filenames = collect_filenames(args, config)
    except (OSError, UnicodeDecodeError) as exc:
        LOGGER.error("Unable to read input list: %s", exc)
        return EXIT_INPUT_ERROR

    if not filenames:
        LOGGER.warning("No filenames supplied; pass filenames, --input-list or --demo.")

    LOGGER.info(
        render_fields_block(
            "File Classification",
            {
                "Version": __version__,
                "Files": len(filenames),
                "Format": settings.format,
                "Config": args.config or "(none)",
            },
        )
    )

    out = console or Console()
    records = classify_with_progress(filenames, enabled=settings.show_progress)
    sorted_records, summary = report(records)
    render_report(settings.format, sorted_records, summary, out)

    LOGGER.info("Processing completed: %d file(s) classified.", summary.total)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
