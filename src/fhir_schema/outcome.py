"""
Reporting decode failures as FHIR OperationOutcome resources.

Every pydantic error becomes one issue whose ``expression`` is the FHIRPath of the
offending element, e.g. ``AllergyIntolerance.reaction[0].manifestation``.
"""

import logging
import uuid
from datetime import UTC, datetime

from pydantic import ValidationError
from pydantic_core import ErrorDetails

from fhir_schema.errors import (
    FhirDecodeError,
    InvalidCodeError,
    UnknownElementError,
    UnknownResourceTypeError,
)
from fhir_schema.model.datatypes import CodeableConcept, Coding, Meta
from fhir_schema.model.resources.operation_outcome import (
    IssueSeverity,
    IssueType,
    OperationOutcome,
    OperationOutcomeIssue,
)

logger = logging.getLogger(__name__)

OPERATION_OUTCOME_SYSTEM = "http://terminology.hl7.org/CodeSystem/operation-outcome"

ISSUE_TYPES_BY_ERROR_TYPE: dict[str, IssueType] = {
    "missing": IssueType.required,
    "literal_error": IssueType.code_invalid,
    "enum": IssueType.code_invalid,
    "value_error": IssueType.invariant,
    "assertion_error": IssueType.invariant,
    "json_invalid": IssueType.structure,
    "model_type": IssueType.structure,
    "model_attributes_type": IssueType.structure,
    "dict_type": IssueType.structure,
    "list_type": IssueType.structure,
    "union_tag_invalid": IssueType.structure,
    "union_tag_not_found": IssueType.structure,
}


class ErrorOutcome:
    def __init__(
        self,
        fhir_issue_code: IssueType,
        fhir_error_code: str,
        fhir_display_message: str,
        fhir_issue_severity: IssueSeverity = IssueSeverity.error,
    ) -> None:
        self.fhir_issue_code = fhir_issue_code
        self.fhir_error_code = fhir_error_code
        self.fhir_display_message = fhir_display_message
        self.fhir_issue_severity = fhir_issue_severity

    def build_issue(
        self,
        diagnostics: str,
        expression: list[str] | None = None,
        fhir_issue_code: IssueType | None = None,
    ) -> OperationOutcomeIssue:
        details = CodeableConcept(
            coding=[
                Coding(
                    system=OPERATION_OUTCOME_SYSTEM,
                    code=self.fhir_error_code,
                    display=self.fhir_display_message,
                )
            ]
        )
        return OperationOutcomeIssue(
            severity=self.fhir_issue_severity,
            code=fhir_issue_code or self.fhir_issue_code,
            details=details,
            diagnostics=diagnostics,
            expression=expression,
        )


INVALID_CONTENT_ERROR = ErrorOutcome(
    fhir_issue_code=IssueType.value,
    fhir_error_code="MSG_BAD_FORMAT",
    fhir_display_message="The element content does not conform to its definition.",
)

BAD_SYNTAX_ERROR = ErrorOutcome(
    fhir_issue_code=IssueType.structure,
    fhir_error_code="MSG_BAD_SYNTAX",
    fhir_display_message="The document is not a FHIR JSON resource.",
)

UNKNOWN_TYPE_ERROR = ErrorOutcome(
    fhir_issue_code=IssueType.not_supported,
    fhir_error_code="MSG_UNKNOWN_TYPE",
    fhir_display_message="The resource type is not recognised.",
)

UNKNOWN_CONTENT_ERROR = ErrorOutcome(
    fhir_issue_code=IssueType.structure,
    fhir_error_code="MSG_UNKNOWN_CONTENT",
    fhir_display_message="The resource contains elements that are not part of its definition.",
)

UNEXPECTED_ERROR = ErrorOutcome(
    fhir_issue_code=IssueType.exception,
    fhir_error_code="MSG_ERROR_PARSING",
    fhir_display_message="An unexpected error occurred while decoding the resource.",
    fhir_issue_severity=IssueSeverity.fatal,
)


def fhir_path(resource_type: str, loc: tuple[int | str, ...]) -> str:
    """Turn a pydantic error location into a FHIRPath expression.

    Choice variants appear in the location as ``(name, Type, "value")`` and are
    written back as the typed element name ``nameType``.
    """
    path = resource_type
    segments = list(loc)
    index = 0
    while index < len(segments):
        segment = segments[index]
        if isinstance(segment, int):
            path += f"[{segment}]"
            index += 1
            continue

        following = segments[index + 1 : index + 3]
        if (
            len(following) == 2  # noqa: PLR2004
            and isinstance(following[0], str)
            and following[0][:1].isupper()
            and following[1] == "value"
        ):
            path += f".{segment}{following[0]}"
            index += 3
        else:
            path += f".{segment}"
            index += 1
    return path


def _issue_for_error(error: ErrorDetails, resource_type: str) -> OperationOutcomeIssue:
    issue_type = ISSUE_TYPES_BY_ERROR_TYPE.get(error["type"], IssueType.value)
    return INVALID_CONTENT_ERROR.build_issue(
        diagnostics=error["msg"],
        expression=[fhir_path(resource_type, tuple(error["loc"]))],
        fhir_issue_code=issue_type,
    )


def _outcome(issues: list[OperationOutcomeIssue]) -> OperationOutcome:
    return OperationOutcome(
        id=str(uuid.uuid4()),
        meta=Meta(last_updated=datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")),
        issue=issues,
    )


def outcome_from_validation_error(error: ValidationError, resource_type: str | None = None) -> OperationOutcome:
    resource_type = resource_type or error.title
    logger.error(
        "Resource failed validation",
        extra={"resource_type": resource_type, "error_count": error.error_count()},
    )
    return _outcome([_issue_for_error(details, resource_type) for details in error.errors()])


def outcome_from_exception(exc: Exception, resource_type: str | None = None) -> OperationOutcome:
    """Describe any decode failure as an OperationOutcome."""
    if isinstance(exc, ValidationError):
        return outcome_from_validation_error(exc, resource_type)

    logger.error("Resource could not be decoded", extra={"error": str(exc), "error_type": type(exc).__name__})
    match exc:
        case UnknownElementError():
            issues = [
                UNKNOWN_CONTENT_ERROR.build_issue(f"Unrecognised element {path}", expression=[path])
                for path in exc.paths
            ]
        case UnknownResourceTypeError():
            issues = [UNKNOWN_TYPE_ERROR.build_issue(str(exc))]
        case InvalidCodeError():
            issues = [INVALID_CONTENT_ERROR.build_issue(str(exc), fhir_issue_code=IssueType.code_invalid)]
        case FhirDecodeError():
            issues = [BAD_SYNTAX_ERROR.build_issue(str(exc))]
        case _:
            issues = [UNEXPECTED_ERROR.build_issue(str(exc))]
    return _outcome(issues)
