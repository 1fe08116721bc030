"""Attachment extractor for ``moquery -c fvRsPathAtt`` output."""

from __future__ import annotations

import re

from loguru import logger

from vlanaudit.apic._util import extract_pathep, extract_vlan_from_epg
from vlanaudit.apic.models import PathAttachment, PathKind

_DN_PREFIX = r"dn\s*:\s*uni/tn-[^/]+/ap-[^/]+/epg-([^/]+)/rspathAtt-\[topology/"

# Tried in order; the first hit decides the path kind for the line.
_DN_PATTERNS: tuple[tuple[PathKind, re.Pattern[str]], ...] = (
    (
        PathKind.PROTPATHS,
        re.compile(_DN_PREFIX + r"(pod-\d+/protpaths-[\d-]+/pathep-\[[^\]]+\])\]", re.IGNORECASE),
    ),
    (
        PathKind.PATHS,
        re.compile(_DN_PREFIX + r"(pod-\d+/paths-\d+/pathep-\[[^\]]+\])\]", re.IGNORECASE),
    ),
)


def _match_dn(line: str) -> tuple[PathKind, re.Match[str]] | None:
    for kind, pattern in _DN_PATTERNS:
        m = pattern.search(line)
        if m:
            return kind, m
    return None


def parse_moquery_output(text: str) -> list[PathAttachment]:
    """Parse moquery text into PathAttachment records, in input order.

    Only ``dn`` lines of the form::

        dn : uni/tn-T/ap-AP/epg-VLAN105_EPG/rspathAtt-[topology/pod-2/protpaths-101-102/pathep-[101-102-VPC-1-PG]]

    are considered. Lines whose EPG has no ``VLAN<n>`` marker or whose path
    has no ``pathep-[...]`` token are skipped. Duplicates are kept.
    """
    attachments: list[PathAttachment] = []
    skipped = 0

    for line in text.strip().splitlines():
        hit = _match_dn(line)
        if hit is None:
            continue
        kind, m = hit

        epg = m.group(1)
        full_path = m.group(2)
        vlan = extract_vlan_from_epg(epg)
        path = extract_pathep(full_path)

        if not vlan or not path:
            skipped += 1
            continue

        attachments.append(
            PathAttachment(
                vlan=vlan,
                epg=epg,
                path=path,
                full_path=full_path,
                kind=kind,
            )
        )

    logger.debug(f"Parsed {len(attachments)} path attachments ({skipped} dn lines without VLAN/path skipped)")
    return attachments
