import pytest
from hamcrest import assert_that, contains_string, equal_to, has_item
from pydantic import ValidationError

from fhir_schema.errors import InvalidCodeError
from fhir_schema.model.codes import AdministrativeGender
from fhir_schema.model.resources import Account, Patient
from fhir_schema.model.resources.account import AccountStatus


def test_from_code_returns_member():
    assert_that(AdministrativeGender.from_code("female"), equal_to(AdministrativeGender.female))


def test_from_code_rejects_unknown_code():
    with pytest.raises(InvalidCodeError) as exc_info:
        AdministrativeGender.from_code("W")

    error = exc_info.value
    assert_that(error.code_system, equal_to("AdministrativeGender"))
    assert_that(error.value, equal_to("W"))
    assert_that(error.allowed, has_item("unknown"))
    assert_that(str(error), contains_string("male, female, other, unknown"))


def test_escape_value_is_a_member():
    assert_that(AccountStatus.from_code("unknown"), equal_to(AccountStatus.unknown))


def test_decoded_code_is_enum_member():
    patient = Patient.model_validate({"resourceType": "Patient", "gender": "other"})

    assert_that(patient.gender, equal_to(AdministrativeGender.other))


def test_out_of_set_code_is_a_validation_error():
    with pytest.raises(ValidationError) as exc_info:
        Account.model_validate({"resourceType": "Account", "status": "closed"})

    assert_that(exc_info.value.errors()[0]["type"], equal_to("enum"))
