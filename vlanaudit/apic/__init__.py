"""APIC endpoint / path-attachment parsing and VLAN allowance checks."""

from vlanaudit.apic._util import (
    extract_vlan_from_epg,
    pod_from_full_path,
    pod_from_node_id,
    synthesize_full_path,
)
from vlanaudit.apic.csv_export import generate_csv, resolve_full_path
from vlanaudit.apic.endpoint import parse_endpoint_output
from vlanaudit.apic.formatters import CsvFormatter, TerminalFormatter
from vlanaudit.apic.models import (
    AuditReport,
    EndpointRecord,
    PathAttachment,
    PathKind,
    PathStatus,
    ValidationResult,
)
from vlanaudit.apic.moquery import parse_moquery_output
from vlanaudit.apic.pipeline import run_audit
from vlanaudit.apic.validator import validate_vlan_allowances

__all__ = [
    "parse_endpoint_output",
    "parse_moquery_output",
    "validate_vlan_allowances",
    "generate_csv",
    "resolve_full_path",
    "run_audit",
    "extract_vlan_from_epg",
    "pod_from_full_path",
    "pod_from_node_id",
    "synthesize_full_path",
    "TerminalFormatter",
    "CsvFormatter",
    "AuditReport",
    "EndpointRecord",
    "PathAttachment",
    "PathKind",
    "PathStatus",
    "ValidationResult",
]
