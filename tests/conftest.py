"""Shared fixtures for the vlanaudit test suite."""

from __future__ import annotations

import pytest

from vlanaudit.apic.models import EndpointRecord, PathAttachment, PathKind

# ── raw APIC dumps ────────────────────────────────────────────────────

ENDPOINT_OUTPUT = """\
Legend:
 s - arp              H - vtep             V - vpc-attached     p - peer-aged
 R - peer-attached-rl B - bounce           S - static           M - span
 D - bounce-to-proxy  O - peer-attached    a - local-aged       m - svc-mgr
 L - local            E - shared-service

      Node
  410 411
+-----------------------------------+---------------+-----------------+-----------+
      VLAN/                           Encap           MAC Address       Interface
      Domain                          VLAN            IP Address        IP Info
+-----------------------------------+---------------+-----------------+-----------+
vlan-105                               vlan-105      0050.56a1.0001 L   vpc 101-102-VPC-1-PG
vlan-105                               vlan-105      0050.56a1.0001 L   vpc 201-202-VPC-1-PG
vlan-105                               vlan-105      0050.56a1.0001 L   vpc 101-102-VPC-1-PG
"""

MOQUERY_OUTPUT = """\
Total Objects shown: 3

# fv.RsPathAtt
tDn          : topology/pod-2/protpaths-101-102/pathep-[101-102-VPC-1-PG]
dn           : uni/tn-X/ap-Y/epg-VLAN105_EPG/rspathAtt-[topology/pod-2/protpaths-101-102/pathep-[101-102-VPC-1-PG]]
encap        : vlan-105
mode         : regular

# fv.RsPathAtt
tDn          : topology/pod-1/paths-301/pathep-[eth1/10]
dn           : uni/tn-X/ap-Y/epg-VLAN200_EPG/rspathAtt-[topology/pod-1/paths-301/pathep-[eth1/10]]
encap        : vlan-200

# fv.RsPathAtt
dn           : uni/tn-X/ap-Y/epg-WEB_EPG/rspathAtt-[topology/pod-2/protpaths-201-202/pathep-[201-202-VPC-1-PG]]
"""


@pytest.fixture()
def endpoint_output():
    """'show endpoints' output for vlan-105 on two vPCs in pod-2."""
    return ENDPOINT_OUTPUT


@pytest.fixture()
def moquery_output():
    """'moquery -c fvRsPathAtt' output with a vPC, a port and an EPG without VLAN marker."""
    return MOQUERY_OUTPUT


# ── model factories ───────────────────────────────────────────────────


@pytest.fixture()
def sample_endpoint():
    """Factory fixture returning an EndpointRecord with customizable fields."""

    def _make(**overrides):
        defaults = dict(
            vlan="105",
            paths=["101-102-VPC-1-PG", "201-202-VPC-1-PG"],
            pod="pod-2",
        )
        defaults.update(overrides)
        return EndpointRecord(**defaults)

    return _make


@pytest.fixture()
def sample_attachment():
    """Factory fixture returning a PathAttachment with customizable fields."""

    def _make(**overrides):
        defaults = dict(
            vlan="105",
            epg="VLAN105_EPG",
            path="101-102-VPC-1-PG",
            full_path="pod-2/protpaths-101-102/pathep-[101-102-VPC-1-PG]",
            kind=PathKind.PROTPATHS,
        )
        defaults.update(overrides)
        return PathAttachment(**defaults)

    return _make
