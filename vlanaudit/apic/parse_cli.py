"""CLI entry point for parsing a single dump — shows what the extractors see."""

from __future__ import annotations

import argparse
import json
import sys

from loguru import logger

from vlanaudit.apic.cli import read_dump
from vlanaudit.apic.endpoint import parse_endpoint_output
from vlanaudit.apic.exceptions import AuditError
from vlanaudit.apic.formatters import format_attachment_table, format_endpoint_table
from vlanaudit.apic.moquery import parse_moquery_output


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Build argparse parser for single-dump parsing."""
    parser = argparse.ArgumentParser(
        description="Parse one APIC diagnostic dump and print the extracted records.",
    )
    parser.add_argument(
        "file",
        help="Dump file ('-' for stdin)",
    )
    parser.add_argument(
        "-k",
        "--kind",
        choices=["endpoint", "moquery"],
        required=True,
        help="Which extractor to run",
    )
    parser.add_argument(
        "--format",
        choices=["table", "json"],
        default="table",
        help="Output format (default: table)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose logging",
    )
    return parser.parse_args(args)


def main(args: list[str] | None = None) -> None:
    """Main entry point for the parse CLI."""
    parsed = parse_args(args)

    if not parsed.verbose:
        logger.remove()
        logger.add(sys.stderr, level="INFO")

    try:
        text = read_dump(parsed.file)
    except AuditError as e:
        logger.error(str(e))
        sys.exit(1)

    if parsed.kind == "endpoint":
        endpoint = parse_endpoint_output(text)
        if endpoint is None:
            logger.error("No endpoint found: output names no vlan-<id> or no vPC path")
            sys.exit(1)
        if parsed.format == "json":
            output = endpoint.model_dump_json(indent=2)
        else:
            output = format_endpoint_table(endpoint)
    else:
        attachments = parse_moquery_output(text)
        if parsed.format == "json":
            output = json.dumps([a.model_dump(mode="json") for a in attachments], indent=2)
        else:
            output = format_attachment_table(attachments)
        logger.info(f"{len(attachments)} path attachments")

    print(output)
