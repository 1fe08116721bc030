"""Audit pipeline — parse, validate and bundle one run into an AuditReport."""

from __future__ import annotations

from loguru import logger

from vlanaudit.apic.endpoint import parse_endpoint_output
from vlanaudit.apic.exceptions import EndpointNotFoundError, EpgNotResolvedError
from vlanaudit.apic.models import AuditReport, EndpointRecord, PathAttachment
from vlanaudit.apic.moquery import parse_moquery_output
from vlanaudit.apic.validator import validate_vlan_allowances


def derive_epg(vlan: str, endpoint: EndpointRecord, attachments: list[PathAttachment]) -> str | None:
    """Pick the EPG that carries ``vlan``, preferring one in the endpoint's pod."""
    same_vlan = [att for att in attachments if att.vlan == vlan]
    for att in same_vlan:
        if att.pod == endpoint.pod:
            return att.epg
    return same_vlan[0].epg if same_vlan else None


def run_audit(
    endpoint_text: str,
    moquery_text: str,
    epg: str | None = None,
    vlan: str | None = None,
) -> AuditReport:
    """Run the whole audit over two raw diagnostic dumps.

    Args:
        endpoint_text: ``show endpoints`` output.
        moquery_text: ``moquery -c fvRsPathAtt`` output.
        epg: EPG name for the CSV rows. Derived from the attachments if omitted.
        vlan: VLAN for the CSV rows. Defaults to the endpoint's VLAN.

    Raises:
        EndpointNotFoundError: endpoint_text yields no endpoint.
        EpgNotResolvedError: no epg given and none carries the VLAN.
    """
    endpoint = parse_endpoint_output(endpoint_text)
    if endpoint is None:
        raise EndpointNotFoundError("No endpoint found: output names no vlan-<id> or no vPC path")

    attachments = parse_moquery_output(moquery_text)
    results = validate_vlan_allowances(endpoint, attachments)

    vlan = vlan or endpoint.vlan
    if not epg:
        epg = derive_epg(vlan, endpoint, attachments)
        if epg is None:
            raise EpgNotResolvedError(f"No EPG carries VLAN {vlan}; pass the EPG name explicitly")
        logger.info(f"Using EPG {epg} for VLAN {vlan}")

    return AuditReport(
        vlan=vlan,
        epg=epg,
        endpoint=endpoint,
        attachments=attachments,
        results=results,
    )
