"""Tests for vlanaudit.apic.formatters output formatters."""

from __future__ import annotations

import pytest

from vlanaudit.apic.formatters import (
    CsvFormatter,
    TerminalFormatter,
    format_attachment_table,
    format_endpoint_table,
)
from vlanaudit.apic.pipeline import run_audit


@pytest.fixture()
def report(endpoint_output, moquery_output):
    return run_audit(endpoint_output, moquery_output)


class TestTerminalFormatter:
    """Test TerminalFormatter."""

    def test_contains_summary(self, report):
        output = TerminalFormatter(report).format()

        assert "VLAN:   105" in output
        assert "EPG:    VLAN105_EPG" in output
        assert "Pod:    pod-2" in output

    def test_contains_verdicts(self, report):
        output = TerminalFormatter(report).format()

        assert "101-102-VPC-1-PG" in output
        assert "not_allowed" in output
        assert "MISSING" in output
        assert "1 allowed, 1 not allowed" in output

    def test_shows_resolved_topology(self, report):
        output = TerminalFormatter(report).format()

        assert "pod-2/protpaths-101-102/pathep-[101-102-VPC-1-PG]" in output
        assert "pod-2/protpaths-201-202/pathep-[201-202-VPC-1-PG]" in output


class TestCsvFormatter:
    """Test CsvFormatter."""

    def test_matches_remediation_csv(self, report):
        assert CsvFormatter(report).format() == (
            "VLAN,EPG,PATH\n105,VLAN105_EPG,pod-2/protpaths-201-202/pathep-[201-202-VPC-1-PG]"
        )


class TestTables:
    """Test the single-dump tables."""

    def test_endpoint_table(self, report):
        output = format_endpoint_table(report.endpoint)
        assert "Path" in output
        assert "201-202-VPC-1-PG" in output

    def test_attachment_table(self, report):
        output = format_attachment_table(report.attachments)
        assert "protpaths" in output
        assert "eth1/10" in output

    def test_empty_attachment_table(self):
        assert "Topology" in format_attachment_table([])
