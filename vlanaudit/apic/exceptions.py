"""Exception hierarchy for VLAN audits."""


class AuditError(Exception):
    """Base exception for all audit errors."""


class InputFileError(AuditError):
    """A diagnostic dump could not be read."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class EndpointNotFoundError(AuditError):
    """Endpoint output names no VLAN or no vPC path."""


class EpgNotResolvedError(AuditError):
    """No EPG given and none could be derived from the attachments."""
