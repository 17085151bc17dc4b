"""
FHIR R5 OperationOutcome: a collection of error, warning, or information messages
that result from a system action.

See: https://hl7.org/fhir/R5/operationoutcome.html
"""

from typing import Literal

from pydantic import Field

from fhir_schema.model.codes import FhirCode
from fhir_schema.model.datatypes import BackboneElement, CodeableConcept
from fhir_schema.model.resource import DomainResource


class IssueSeverity(FhirCode):
    fatal = "fatal"
    error = "error"
    warning = "warning"
    information = "information"
    success = "success"


class IssueType(FhirCode):
    invalid = "invalid"
    structure = "structure"
    required = "required"
    value = "value"
    invariant = "invariant"
    security = "security"
    login = "login"
    unknown = "unknown"
    expired = "expired"
    forbidden = "forbidden"
    suppressed = "suppressed"
    processing = "processing"
    not_supported = "not-supported"
    duplicate = "duplicate"
    multiple_matches = "multiple-matches"
    not_found = "not-found"
    deleted = "deleted"
    too_long = "too-long"
    code_invalid = "code-invalid"
    extension = "extension"
    too_costly = "too-costly"
    business_rule = "business-rule"
    conflict = "conflict"
    limited_filter = "limited-filter"
    transient = "transient"
    lock_error = "lock-error"
    no_store = "no-store"
    exception = "exception"
    timeout = "timeout"
    incomplete = "incomplete"
    throttled = "throttled"
    informational = "informational"
    success = "success"


class OperationOutcomeIssue(BackboneElement):
    severity: IssueSeverity
    code: IssueType
    details: CodeableConcept | None = None
    diagnostics: str | None = None
    location: list[str] | None = None
    expression: list[str] | None = None


class OperationOutcome(DomainResource):
    resource_type: Literal["OperationOutcome"] = "OperationOutcome"
    issue: list[OperationOutcomeIssue] = Field(..., min_length=1)

    @property
    def has_errors(self) -> bool:
        return any(issue.severity in (IssueSeverity.fatal, IssueSeverity.error) for issue in self.issue)
