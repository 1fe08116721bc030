"""Terminal and CSV formatters for audit reports."""

from __future__ import annotations

from tabulate import tabulate

from vlanaudit.apic.csv_export import generate_csv, resolve_full_path
from vlanaudit.apic.models import AuditReport, EndpointRecord, PathAttachment, PathStatus


class TerminalFormatter:
    """Format an AuditReport as plain-text terminal output."""

    def __init__(self, report: AuditReport, tablefmt: str = "simple") -> None:
        self.report = report
        self.tablefmt = tablefmt

    def format(self) -> str:
        """Return the complete terminal output as a string."""
        r = self.report
        lines: list[str] = []

        # ── Endpoint summary ───────────────────────────────────────────
        lines.append(f"  VLAN:   {r.vlan}")
        lines.append(f"  EPG:    {r.epg}")
        lines.append(f"  Pod:    {r.endpoint.pod}")
        lines.append(f"  Paths:  {len(r.endpoint.paths)}")
        lines.append(f"  Attachments parsed: {len(r.attachments)}")
        lines.append("")

        # ── Per-path verdicts ──────────────────────────────────────────
        rows = []
        for res in r.results:
            mark = "OK" if res.status is PathStatus.ALLOWED else "MISSING"
            full_path = resolve_full_path(res.path, r.endpoint.pod, r.attachments)
            rows.append([res.path, res.status.value, mark, full_path])
        lines.append(tabulate(rows, headers=["Path", "Status", "", "Topology"], tablefmt=self.tablefmt))

        # ── Totals ─────────────────────────────────────────────────────
        lines.append("")
        lines.append(f"  {r.allowed_count} allowed, {r.not_allowed_count} not allowed")

        return "\n".join(lines)


class CsvFormatter:
    """Format an AuditReport as the remediation CSV."""

    def __init__(self, report: AuditReport) -> None:
        self.report = report

    def format(self) -> str:
        r = self.report
        return generate_csv(r.vlan, r.epg, r.results, r.endpoint, r.attachments)


def format_endpoint_table(endpoint: EndpointRecord, tablefmt: str = "simple") -> str:
    """Tabulate a parsed endpoint: one row per path."""
    rows = [[endpoint.vlan, endpoint.pod, path] for path in endpoint.paths]
    return tabulate(rows, headers=["VLAN", "Pod", "Path"], tablefmt=tablefmt)


def format_attachment_table(attachments: list[PathAttachment], tablefmt: str = "simple") -> str:
    """Tabulate parsed moquery attachments in input order."""
    rows = [[a.vlan, a.epg, a.kind.value if a.kind else "-", a.path, a.full_path] for a in attachments]
    return tabulate(rows, headers=["VLAN", "EPG", "Kind", "Path", "Topology"], tablefmt=tablefmt)
