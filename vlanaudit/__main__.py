"""Orchestrator CLI — dispatches to sub-CLIs.

Sub-commands:
  audit   Check endpoint paths against configured VLAN attachments, write CSV
  parse   Parse a single endpoint or moquery dump and print the records

Examples:
  vlanaudit audit -e show_endpoints.txt -m moquery.txt -o remediation.csv

  vlanaudit parse --kind moquery moquery.txt --format json
"""

from __future__ import annotations

import os
import sys

from tabulate import tabulate

from vlanaudit import __version__, configure_logging
from vlanaudit import glogger

COMMANDS = {
    "audit": ("vlanaudit.apic.cli", "VLAN-to-path audit with remediation CSV"),
    "parse": ("vlanaudit.apic.parse_cli", "Parse a single APIC dump"),
}


def _print_usage() -> None:
    print("usage: vlanaudit <command> [options]\n")
    print("Available commands:")
    for cmd, (_, desc) in COMMANDS.items():
        print(f"  {cmd:14s}  {desc}")
    print("\nRun 'vlanaudit <command> --help' for command-specific options.")


def _print_startup_banner() -> None:
    startup_rows = [["vlanaudit", __version__]]
    loguru_level = os.environ.get("LOGURU_LEVEL")
    if loguru_level:
        startup_rows.append(["LOGURU_LEVEL", loguru_level])

    glogger.opt(raw=True).debug("\n{}\n", tabulate(startup_rows, tablefmt="simple_grid"))


def main() -> None:
    """Main entry point — dispatch to sub-CLI."""
    configure_logging()
    _print_startup_banner()

    if len(sys.argv) < 2 or sys.argv[1] in ("-h", "--help"):
        _print_usage()
        sys.exit(0 if len(sys.argv) >= 2 else 1)

    command = sys.argv[1]
    if command not in COMMANDS:
        print(f"vlanaudit: unknown command '{command}'\n", file=sys.stderr)
        _print_usage()
        sys.exit(1)

    module_path, _ = COMMANDS[command]

    # Import and call the sub-CLI's main(), passing remaining args
    from importlib import import_module

    module = import_module(module_path)
    module.main(sys.argv[2:])


if __name__ == "__main__":
    main()
