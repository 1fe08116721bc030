"""Private helper functions for APIC text parsing and path naming."""

from __future__ import annotations

import re

DEFAULT_POD = "pod-1"

_EPG_VLAN_RE = re.compile(r"VLAN(\d+)", re.IGNORECASE)
_POD_PREFIX_RE = re.compile(r"^(pod-\d+)")
_PATHEP_RE = re.compile(r"pathep-\[([^\]]+)\]")
_VPC_PAIR_RE = re.compile(r"(\d+)-(\d+)-VPC")


def extract_vlan_from_epg(epg_name: str) -> str:
    """Return the digits of the ``VLAN<n>`` marker in an EPG name, or ''.

    E.g. 'VLAN105_EPG' -> '105', 'web_vlan0042' -> '0042'
    """
    m = _EPG_VLAN_RE.search(epg_name)
    return m.group(1) if m else ""


def extract_pathep(full_path: str) -> str:
    """Return the bracketed token of ``pathep-[...]``, or ''."""
    m = _PATHEP_RE.search(full_path)
    return m.group(1) if m else ""


def pod_from_full_path(full_path: str) -> str | None:
    """Return the leading 'pod-<n>' of a topology string, or None."""
    m = _POD_PREFIX_RE.match(full_path)
    return m.group(1) if m else None


def pod_from_node_id(node_id: int) -> str | None:
    """Classify a leaf node id into its pod.

    Node ids 400 and up live in pod-2, 300-399 in pod-1. Anything else
    cannot be classified.
    """
    if node_id >= 400:
        return "pod-2"
    if node_id >= 300:
        return "pod-1"
    return None


def synthesize_full_path(path: str, pod: str) -> str:
    """Build a topology string for a path no attachment record describes.

    vPC policy-group names carry the leaf pair ('101-102-VPC-1-PG'), so the
    protpaths form can be rebuilt exactly. Single-homed paths get the
    'paths-XXX' placeholder since the leaf id is unknown.
    """
    m = _VPC_PAIR_RE.search(path)
    if m:
        return f"{pod}/protpaths-{m.group(1)}-{m.group(2)}/pathep-[{path}]"
    return f"{pod}/paths-XXX/pathep-[{path}]"
