"""Pydantic models for APIC endpoint / path-attachment audit data."""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from vlanaudit.apic._util import pod_from_full_path


class PathKind(str, Enum):
    """Topology shape of a fabric path."""

    PROTPATHS = "protpaths"  # vPC, dual-homed to a leaf pair
    PATHS = "paths"  # single leaf port


class PathStatus(str, Enum):
    """Verdict for one endpoint path."""

    ALLOWED = "allowed"
    NOT_ALLOWED = "not_allowed"


class EndpointRecord(BaseModel):
    """Facts extracted from one endpoint diagnostic dump."""

    model_config = ConfigDict(frozen=True)

    vlan: str
    ip: str = ""
    paths: tuple[str, ...] = ()
    pod: Literal["pod-1", "pod-2"] = "pod-1"

    @field_validator("paths")
    @classmethod
    def _unique_paths(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(dict.fromkeys(value))


class PathAttachment(BaseModel):
    """One ``fvRsPathAtt`` record: an EPG bound to a fabric path."""

    model_config = ConfigDict(frozen=True)

    vlan: str
    epg: str
    path: str
    full_path: str
    kind: PathKind | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def pod(self) -> str | None:
        """Leading ``pod-<n>`` token of ``full_path``, if any."""
        return pod_from_full_path(self.full_path)


class ValidationResult(BaseModel):
    """Allowed / not-allowed verdict for a single endpoint path."""

    model_config = ConfigDict(frozen=True)

    path: str
    has_active_endpoint: bool = True
    is_vlan_allowed: bool

    @computed_field  # type: ignore[prop-decorator]
    @property
    def status(self) -> PathStatus:
        return PathStatus.ALLOWED if self.is_vlan_allowed else PathStatus.NOT_ALLOWED


class AuditReport(BaseModel):
    """Everything one audit run produced, ready for formatting."""

    vlan: str
    epg: str
    endpoint: EndpointRecord
    attachments: list[PathAttachment] = Field(default_factory=list)
    results: list[ValidationResult] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def allowed_count(self) -> int:
        return sum(1 for r in self.results if r.status is PathStatus.ALLOWED)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def not_allowed_count(self) -> int:
        return sum(1 for r in self.results if r.status is PathStatus.NOT_ALLOWED)
