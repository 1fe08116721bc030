"""VLAN allowance validation: endpoint paths vs. configured attachments."""

from __future__ import annotations

from loguru import logger

from vlanaudit.apic.models import EndpointRecord, PathAttachment, ValidationResult


def allowed_paths(endpoint: EndpointRecord, attachments: list[PathAttachment]) -> set[str]:
    """Return the paths that carry the endpoint's VLAN in the endpoint's pod.

    VLAN alone is not enough: an attachment in another pod does not
    authorize the path. Attachments without a pod prefix never match.
    """
    return {att.path for att in attachments if att.vlan == endpoint.vlan and att.pod == endpoint.pod}


def validate_vlan_allowances(
    endpoint: EndpointRecord,
    attachments: list[PathAttachment] | None,
) -> list[ValidationResult]:
    """Judge every endpoint path as allowed or not allowed.

    Args:
        endpoint: Parsed endpoint record; its paths are the keys to judge.
        attachments: Parsed moquery records. None or empty means nothing
            is allowed.

    Returns:
        One ValidationResult per endpoint path, in the endpoint's path order.
    """
    allowed = allowed_paths(endpoint, attachments or [])

    results = [
        ValidationResult(path=path, has_active_endpoint=True, is_vlan_allowed=path in allowed)
        for path in endpoint.paths
    ]

    denied = sum(1 for r in results if not r.is_vlan_allowed)
    logger.debug(f"vlan-{endpoint.vlan}/{endpoint.pod}: {len(results) - denied} allowed, {denied} not allowed")
    return results
