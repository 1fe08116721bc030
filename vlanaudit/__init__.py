"""APIC VLAN-to-path audit library.

Parses APIC endpoint and ``moquery`` diagnostic output, checks whether every
path an endpoint is seen on is allowed to carry the endpoint's VLAN, and
produces a remediation CSV of the paths that are not.
"""

__version__ = "0.0.1"

import os
import sys
from typing import Any, Callable, Dict

from loguru import logger as glogger

glogger.disable(__name__)


def _loguru_skiplog_filter(record: dict) -> bool:  # type: ignore[type-arg]
    """Filter function to hide records with ``extra['skiplog']`` set."""
    return not record.get("extra", {}).get("skiplog", False)


def configure_logging(
    loguru_filter: Callable[[Dict[str, Any]], bool] = _loguru_skiplog_filter,
) -> None:
    """Configure a default ``loguru`` sink with a convenient format and filter."""
    os.environ["LOGURU_LEVEL"] = os.getenv("LOGURU_LEVEL", "DEBUG")
    glogger.remove()
    logger_fmt: str = (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{module}</cyan>::<cyan>{extra[classname]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
    )
    glogger.add(sys.stderr, level=os.getenv("LOGURU_LEVEL"), format=logger_fmt, filter=loguru_filter)  # type: ignore[arg-type]
    glogger.configure(extra={"classname": "None", "skiplog": False})
    glogger.enable(__name__)


from vlanaudit.apic.csv_export import generate_csv  # noqa: E402
from vlanaudit.apic.endpoint import parse_endpoint_output  # noqa: E402
from vlanaudit.apic.exceptions import (  # noqa: E402
    AuditError,
    EndpointNotFoundError,
    EpgNotResolvedError,
    InputFileError,
)
from vlanaudit.apic.models import (  # noqa: E402
    AuditReport,
    EndpointRecord,
    PathAttachment,
    PathKind,
    PathStatus,
    ValidationResult,
)
from vlanaudit.apic.moquery import parse_moquery_output  # noqa: E402
from vlanaudit.apic.pipeline import run_audit  # noqa: E402
from vlanaudit.apic.validator import validate_vlan_allowances  # noqa: E402

__all__ = [
    "glogger",
    "configure_logging",
    "parse_endpoint_output",
    "parse_moquery_output",
    "validate_vlan_allowances",
    "generate_csv",
    "run_audit",
    "EndpointRecord",
    "PathAttachment",
    "PathKind",
    "PathStatus",
    "ValidationResult",
    "AuditReport",
    "AuditError",
    "InputFileError",
    "EndpointNotFoundError",
    "EpgNotResolvedError",
]
