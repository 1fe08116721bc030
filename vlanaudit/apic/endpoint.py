"""Endpoint extractor for APIC ``show endpoints`` style output."""

from __future__ import annotations

import re

from loguru import logger

from vlanaudit.apic._util import DEFAULT_POD, pod_from_node_id
from vlanaudit.apic.models import EndpointRecord

_VLAN_RE = re.compile(r"vlan-(\d+)", re.IGNORECASE)
_VPC_RE = re.compile(r"vpc\s+([\d-]+-VPC-[\d-]+-PG)", re.IGNORECASE)
_NODE_HEADER_RE = re.compile(r"\bNode\b")
_NODE_IDS_RE = re.compile(r"^\s*(\d+)\s+(\d+)")


def _node_ids_after(lines: list[str], idx: int) -> tuple[int, int] | None:
    """Return the two node ids on the first non-blank line after ``idx``."""
    for line in lines[idx + 1 :]:
        if not line.strip():
            continue
        m = _NODE_IDS_RE.match(line)
        if m:
            return int(m.group(1)), int(m.group(2))
        return None
    return None


def parse_endpoint_output(text: str) -> EndpointRecord | None:
    """Parse endpoint diagnostic text into an EndpointRecord.

    Handles output like::

        Legend:
        ...
              Node
          410 411
        vlan-105   0050.56a1.0001  L   vpc 101-102-VPC-1-PG
        vlan-105   0050.56a1.0001  L   vpc 201-202-VPC-1-PG

    The last ``vlan-<n>`` line and the last classifiable ``Node`` block win.
    Every distinct ``vpc <...>-VPC-<...>-PG`` token becomes a path.

    Returns:
        The record, or None when the text names no VLAN or no vPC path.
    """
    lines = text.strip().splitlines()

    vlan = ""
    pod = ""
    paths: dict[str, None] = {}

    for idx, line in enumerate(lines):
        m = _VLAN_RE.search(line)
        if m:
            vlan = m.group(1)

        if _NODE_HEADER_RE.search(line):
            node_ids = _node_ids_after(lines, idx)
            if node_ids:
                classified = pod_from_node_id(node_ids[0])
                if classified:
                    pod = classified

        for vpc in _VPC_RE.finditer(line):
            paths.setdefault(vpc.group(1), None)

    if not vlan or not paths:
        logger.debug(f"No endpoint found (vlan={vlan!r}, {len(paths)} vpc paths)")
        return None

    record = EndpointRecord(vlan=vlan, paths=list(paths), pod=pod or DEFAULT_POD)
    logger.debug(f"Endpoint on vlan-{record.vlan} in {record.pod}: {len(record.paths)} paths")
    return record
