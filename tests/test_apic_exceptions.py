"""Tests for vlanaudit.apic.exceptions hierarchy."""

import pytest

import vlanaudit
from vlanaudit.apic.exceptions import (
    AuditError,
    EndpointNotFoundError,
    EpgNotResolvedError,
    InputFileError,
)


class TestHierarchy:
    """All audit errors share one base."""

    @pytest.mark.parametrize("exc_cls", [InputFileError, EndpointNotFoundError, EpgNotResolvedError])
    def test_subclass_of_audit_error(self, exc_cls):
        assert issubclass(exc_cls, AuditError)

    def test_audit_error_is_exception(self):
        assert issubclass(AuditError, Exception)

    def test_catchable_as_base(self):
        with pytest.raises(AuditError):
            raise EndpointNotFoundError("none")


class TestInputFileError:
    """InputFileError carries the offending path."""

    def test_path_attribute(self):
        err = InputFileError("cannot read", path="/tmp/x")
        assert err.path == "/tmp/x"
        assert str(err) == "cannot read"

    def test_path_defaults_to_none(self):
        assert InputFileError("cannot read").path is None


class TestPackageExports:
    """Top-level package re-exports the core API."""

    def test_core_functions(self):
        for name in ("parse_endpoint_output", "parse_moquery_output", "validate_vlan_allowances", "generate_csv"):
            assert callable(getattr(vlanaudit, name))

    def test_version(self):
        assert vlanaudit.__version__
