"""Remediation CSV generation for not-allowed paths."""

from __future__ import annotations

from loguru import logger

from vlanaudit.apic._util import synthesize_full_path
from vlanaudit.apic.models import EndpointRecord, PathAttachment, PathStatus, ValidationResult

CSV_HEADER = "VLAN,EPG,PATH"


def resolve_full_path(path: str, pod: str, attachments: list[PathAttachment]) -> str:
    """Return the topology string for ``path`` in ``pod``.

    The first attachment with the same path in the same pod wins; without
    one the string is synthesized from the path name.
    """
    for att in attachments:
        if att.path == path and att.pod == pod:
            return att.full_path

    full_path = synthesize_full_path(path, pod)
    logger.debug(f"No attachment for {path} in {pod}, synthesized {full_path}")
    return full_path


def generate_csv(
    vlan: str,
    epg: str,
    results: list[ValidationResult],
    endpoint: EndpointRecord,
    attachments: list[PathAttachment],
) -> str:
    """Build the remediation CSV: one ``VLAN,EPG,PATH`` row per not-allowed path.

    Values are controller identifiers and are written unquoted.
    """
    rows = [CSV_HEADER]
    for result in results:
        if result.status is not PathStatus.NOT_ALLOWED:
            continue
        full_path = resolve_full_path(result.path, endpoint.pod, attachments)
        rows.append(f"{vlan},{epg},{full_path}")

    return "\n".join(rows)
