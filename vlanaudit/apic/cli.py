"""CLI entry point for the VLAN-to-path audit — standalone-capable."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from loguru import logger

from vlanaudit.apic.exceptions import AuditError, InputFileError
from vlanaudit.apic.formatters import CsvFormatter, TerminalFormatter
from vlanaudit.apic.pipeline import run_audit

OUTPUT_FORMATS = ["table", "json", "csv"]


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Build argparse parser for the audit."""
    parser = argparse.ArgumentParser(
        description="Check which endpoint paths are not allowed to carry the endpoint's VLAN "
        "and write a remediation CSV.",
    )
    parser.add_argument(
        "-e",
        "--endpoint",
        required=True,
        metavar="FILE",
        help="File with 'show endpoints' output ('-' for stdin)",
    )
    parser.add_argument(
        "-m",
        "--moquery",
        required=True,
        metavar="FILE",
        help="File with 'moquery -c fvRsPathAtt' output ('-' for stdin)",
    )
    parser.add_argument(
        "--epg",
        help="EPG name for the CSV rows (default: derived from the moquery output)",
    )
    parser.add_argument(
        "--vlan",
        help="VLAN id for the CSV rows (default: the endpoint's VLAN)",
    )
    parser.add_argument(
        "-o",
        "--output",
        help="Write the remediation CSV to this file",
    )
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default="table",
        help="Stdout format when no --output is given (default: table)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose logging",
    )
    return parser.parse_args(args)


def read_dump(path: str) -> str:
    """Read a diagnostic dump from a file, or from stdin for '-'."""
    if path == "-":
        return sys.stdin.read()
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputFileError(f"Cannot read {path}: {e}", path=path) from e


def main(args: list[str] | None = None) -> None:
    """Main entry point for the audit CLI."""
    parsed = parse_args(args)

    if not parsed.verbose:
        logger.remove()
        logger.add(sys.stderr, level="INFO")

    if parsed.endpoint == "-" and parsed.moquery == "-":
        logger.error("Only one of --endpoint/--moquery can be read from stdin")
        sys.exit(1)

    try:
        report = run_audit(
            read_dump(parsed.endpoint),
            read_dump(parsed.moquery),
            epg=parsed.epg,
            vlan=parsed.vlan,
        )
    except AuditError as e:
        logger.error(str(e))
        sys.exit(1)

    if parsed.format == "json":
        output = report.model_dump_json(indent=2)
    elif parsed.format == "csv":
        output = CsvFormatter(report).format()
    else:
        output = TerminalFormatter(report).format()

    if parsed.output:
        Path(parsed.output).write_text(CsvFormatter(report).format() + "\n")
        logger.info(f"{report.not_allowed_count} not-allowed paths written to {parsed.output}")
    else:
        print(output)
