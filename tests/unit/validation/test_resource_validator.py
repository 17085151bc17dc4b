import json
from pathlib import Path

import pytest
from hamcrest import assert_that, contains_exactly, empty, equal_to, instance_of, none
from pydantic import ValidationError

from fhir_schema.config.config import config
from fhir_schema.errors import FhirDecodeError, UnknownElementError, UnknownResourceTypeError
from fhir_validation_api.validators.resource_validator import find_resource_files, validate_resource_file


def test_find_resource_files_expands_directories(tmp_path):
    (tmp_path / "b.json").write_text("{}")
    (tmp_path / "a.json").write_text("{}")
    (tmp_path / "notes.txt").write_text("")
    explicit = tmp_path / "explicit.fhir"

    found = find_resource_files([tmp_path, explicit])

    assert_that(found, contains_exactly(tmp_path / "a.json", tmp_path / "b.json", explicit))


def test_valid_resource(tmp_path):
    path = tmp_path / "basic.json"
    path.write_text(json.dumps({"resourceType": "Basic", "code": {"text": "referral"}}))

    report = validate_resource_file(path, round_trip=True)

    assert_that(report.ok, equal_to(True))
    assert_that(report.resource_type, equal_to("Basic"))
    assert_that(report.differences, empty())
    assert_that(report.error, none())


def test_schema_violation(tmp_path):
    path = tmp_path / "basic.json"
    path.write_text(json.dumps({"resourceType": "Basic"}))

    report = validate_resource_file(path)

    assert_that(report.ok, equal_to(False))
    assert_that(report.error, instance_of(ValidationError))


def test_unknown_resource_type(tmp_path):
    path = tmp_path / "location.json"
    path.write_text(json.dumps({"resourceType": "Location"}))

    assert_that(validate_resource_file(path).error, instance_of(UnknownResourceTypeError))


def test_not_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("resourceType: Patient")

    assert_that(validate_resource_file(path).error, instance_of(FhirDecodeError))


@pytest.fixture
def patient_with_unknown_element(tmp_path) -> Path:
    path = tmp_path / "patient.json"
    path.write_text(json.dumps({"resourceType": "Patient", "bogus": 1}))
    return path


@pytest.fixture
def reject_unknown_elements(monkeypatch):
    monkeypatch.setenv("FHIR_UNKNOWN_ELEMENTS", "reject")
    config.cache_clear()
    yield
    config.cache_clear()


def test_unknown_elements_are_kept_by_default(patient_with_unknown_element):
    assert_that(validate_resource_file(patient_with_unknown_element).ok, equal_to(True))


@pytest.mark.usefixtures("reject_unknown_elements")
def test_reject_policy_from_configuration_applies(patient_with_unknown_element):
    report = validate_resource_file(patient_with_unknown_element)

    assert_that(report.ok, equal_to(False))
    assert_that(report.error, instance_of(UnknownElementError))


@pytest.mark.usefixtures("reject_unknown_elements")
def test_explicit_lenient_decoding_overrides_configuration(patient_with_unknown_element):
    assert_that(validate_resource_file(patient_with_unknown_element, strict=False).ok, equal_to(True))
