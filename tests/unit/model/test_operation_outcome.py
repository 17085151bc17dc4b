"""
Unit tests for FHIR OperationOutcome models.

OperationOutcome is an ordinary registered resource: it decodes from and encodes
to FHIR JSON like any other, and is also what decode failures are reported as.
"""

import pytest
from hamcrest import assert_that, contains_exactly, equal_to, has_entries, has_key, is_not, none
from pydantic import ValidationError

from fhir_schema.model.datatypes import CodeableConcept, Coding
from fhir_schema.model.resources.operation_outcome import (
    IssueSeverity,
    IssueType,
    OperationOutcome,
    OperationOutcomeIssue,
)
from fhir_schema.serialization import parse_resource, resource_to_dict
from tests.fixtures.matchers.operation_outcome import is_operation_outcome, is_operation_outcome_issue


class TestOperationOutcomeIssue:
    """Tests for the OperationOutcomeIssue model."""

    def test_create_issue_with_all_fields(self):
        """Test creating an issue with all required and optional fields."""
        # Given
        details = CodeableConcept(
            coding=[
                Coding(
                    system="http://terminology.hl7.org/CodeSystem/operation-outcome",
                    code="MSG_BAD_FORMAT",
                    display="The element content does not conform to its definition.",
                )
            ]
        )

        # When
        issue = OperationOutcomeIssue(
            severity="error",
            code="code-invalid",
            details=details,
            diagnostics="Input should be 'male', 'female', 'other' or 'unknown'",
            expression=["Patient.gender"],
        )

        # Then
        assert_that(
            issue,
            is_operation_outcome_issue()
            .with_severity(IssueSeverity.error)
            .and_code(IssueType.code_invalid)
            .and_diagnostics("Input should be 'male', 'female', 'other' or 'unknown'")
            .and_details(details)
            .and_expression(["Patient.gender"]),
        )

    def test_create_issue_without_expression(self):
        """Test creating an issue without the optional expression field."""
        # Given, When
        issue = OperationOutcomeIssue(severity="warning", code="processing", diagnostics="Some warning")

        # Then
        assert_that(issue, is_operation_outcome_issue().with_expression(none()).and_location(none()))

    def test_encoding_excludes_absent_elements(self):
        """Test that encoding leaves out elements that were not given."""
        # Given
        issue = OperationOutcomeIssue(severity="error", code="processing", diagnostics="Error")

        # When
        result = issue.model_dump(by_alias=True, exclude_none=True, mode="json")

        # Then
        assert_that(result, equal_to({"severity": "error", "code": "processing", "diagnostics": "Error"}))

    def test_validation_error_on_missing_required_field(self):
        """Test that ValidationError is raised when the issue type is missing."""
        with pytest.raises(ValidationError) as exc_info:
            OperationOutcomeIssue(severity="error")

        assert_that(exc_info.value.errors()[0]["loc"], equal_to(("code",)))

    def test_validation_error_on_unknown_issue_type(self):
        """Test that issue types outside the FHIR value set are rejected."""
        with pytest.raises(ValidationError):
            OperationOutcomeIssue(severity="error", code="forbidden-ish")


class TestOperationOutcome:
    """Tests for the OperationOutcome model."""

    def test_create_operation_outcome_with_required_fields(self):
        """Test creating an OperationOutcome with only required fields."""
        # Given
        issue = OperationOutcomeIssue(severity="error", code="processing", diagnostics="Error")

        # When
        outcome = OperationOutcome(issue=[issue])

        # Then
        assert_that(
            outcome,
            is_operation_outcome().with_resource_type("OperationOutcome").and_id(none()).and_issue([issue]),
        )

    def test_model_dump_uses_fhir_element_names(self):
        """Test that encoding writes resourceType and camelCase meta elements."""
        # Given
        issue = OperationOutcomeIssue(severity="error", code="processing", diagnostics="Error")
        outcome = OperationOutcome(issue=[issue], id="abc-123", meta={"lastUpdated": "2024-01-15T10:30:45Z"})

        # When
        result = resource_to_dict(outcome)

        # Then
        assert_that(
            result,
            has_entries(
                resourceType="OperationOutcome",
                id="abc-123",
                meta={"lastUpdated": "2024-01-15T10:30:45Z"},
            ),
        )
        assert_that(result, is_not(has_key("text")))

    def test_decodes_through_the_registry(self):
        """Test that OperationOutcome JSON dispatches to the OperationOutcome model."""
        # Given
        data = {
            "resourceType": "OperationOutcome",
            "issue": [{"severity": "information", "code": "informational", "diagnostics": "All OK"}],
        }

        # When
        outcome = parse_resource(data)

        # Then
        assert_that(
            outcome,
            is_operation_outcome().with_issue(contains_exactly(is_operation_outcome_issue().with_diagnostics("All OK"))),
        )
        assert_that(outcome.has_errors, equal_to(False))

    def test_has_errors_with_fatal_issue(self):
        """Test that a fatal issue counts as an error."""
        outcome = OperationOutcome(
            issue=[
                OperationOutcomeIssue(severity="warning", code="not-supported"),
                OperationOutcomeIssue(severity="fatal", code="exception"),
            ]
        )

        assert_that(outcome.has_errors, equal_to(True))

    def test_validation_error_on_empty_issue_list(self):
        """Test that ValidationError is raised when issue list is empty."""
        with pytest.raises(ValidationError) as exc_info:
            OperationOutcome(issue=[])

        assert "issue" in str(exc_info.value)

    def test_resource_type_cannot_be_changed(self):
        """Test that resourceType is fixed to 'OperationOutcome'."""
        with pytest.raises(ValidationError):
            OperationOutcome.model_validate(
                {"resourceType": "Patient", "issue": [{"severity": "error", "code": "processing"}]}
            )
