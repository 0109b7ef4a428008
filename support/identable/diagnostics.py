# Errors reported while reading an annotated declaration.

import enum
import logging

from dataclasses import dataclass

logger = logging.getLogger(__name__)

DIAGNOSTIC_DOMAIN = "EnumIdentableMacro"


class ErrorKind(enum.Enum):
    NOT_AN_ENUM = "mustBeEnum"
    NO_CASES = "mustHaveCases"

    @property
    def message(self):
        if self is ErrorKind.NOT_AN_ENUM:
            return "`@EnumIdentableMacro` can only be applied to an `enum`"
        return "`@EnumIdentableMacro` can only be applied to an `enum` with `case` statements"

    @property
    def diagnostic_id(self):
        return f"{DIAGNOSTIC_DOMAIN}.{self.value}"


@dataclass(frozen=True)
class Diagnostic:
    kind: ErrorKind
    location: object = None
    severity: str = "error"

    @property
    def message(self):
        return self.kind.message

    def __str__(self):
        where = str(self.location) if self.location is not None else "<unknown>"
        return f"{where}: {self.severity}: {self.message} [{self.kind.diagnostic_id}]"


class ExtractionError(Exception):
    """Raised when a declaration cannot be reduced to a list of variants.
    Only affects the offending declaration."""

    def __init__(self, kind, location=None):
        self.diagnostic = Diagnostic(kind, location)
        super().__init__(str(self.diagnostic))

    @property
    def kind(self):
        return self.diagnostic.kind

    @property
    def location(self):
        return self.diagnostic.location


class CollectingSink:
    "Keeps every reported diagnostic."

    def __init__(self):
        self.diagnostics = []

    def diagnose(self, diagnostic):
        self.diagnostics.append(diagnostic)

    @property
    def kinds(self):
        return [diagnostic.kind for diagnostic in self.diagnostics]


class LoggingSink:
    "Reports diagnostics through the logging module."

    def __init__(self, log=None):
        self.log = logger if log is None else log

    def diagnose(self, diagnostic):
        self.log.error("%s", diagnostic)
