import pytest
from hamcrest import assert_that, contains_exactly, equal_to, has_entries, has_key, is_not

from fhir_schema.model.datatypes import Coding, Extension, HumanName
from fhir_schema.model.resources import Patient
from fhir_schema.serialization import resource_to_dict
from tests.fixtures.builders.model.datatypes import CodingFactory, HumanNameFactory, IdentifierFactory
from tests.fixtures.matchers.resources import is_choice_value, is_coding, is_reference


def test_attributes_are_populated_from_camel_case_names():
    patient = Patient.model_validate({"resourceType": "Patient", "birthDate": "1974-12-25"})

    assert_that(patient.birth_date, equal_to("1974-12-25"))


def test_attributes_can_be_populated_by_python_name():
    coding = Coding(system="http://loinc.org", code="8302-2", user_selected=True)

    assert_that(coding.model_dump(by_alias=True, exclude_none=True), has_entries(userSelected=True))


def test_unmodelled_elements_are_kept_and_written_back():
    patient = Patient.model_validate(
        {"resourceType": "Patient", "favouriteColour": "blue", "name": [{"family": "Chalmers", "nickname": "Pete"}]}
    )

    encoded = resource_to_dict(patient)

    assert_that(encoded, has_entries(favouriteColour="blue"))
    assert_that(encoded["name"][0], has_entries(family="Chalmers", nickname="Pete"))


def test_primitive_extension_siblings_are_kept():
    patient = Patient.model_validate(
        {
            "resourceType": "Patient",
            "birthDate": "1974-12-25",
            "_birthDate": {"extension": [{"url": "http://hl7.org/fhir/StructureDefinition/patient-birthTime"}]},
        }
    )

    assert_that(resource_to_dict(patient), has_key("_birthDate"))


def test_extension_value_is_a_choice():
    extension = Extension.model_validate({"url": "http://example.org/colour", "valueCoding": {"code": "blue"}})

    assert_that(extension.value, is_choice_value().with_type("Coding").and_value(is_coding().with_code("blue")))


def test_complex_extension_nests_extensions():
    extension = Extension.model_validate(
        {
            "url": "http://hl7.org/fhir/StructureDefinition/patient-nationality",
            "extension": [
                {"url": "code", "valueCodeableConcept": {"text": "Dutch"}},
                {"url": "period", "valuePeriod": {"start": "2010"}},
            ],
        }
    )

    assert_that([child.url for child in extension.extension], contains_exactly("code", "period"))
    assert_that(extension.model_dump(by_alias=True, exclude_none=True), is_not(has_key("value")))


def test_built_codings_encode_with_wire_names():
    coding = CodingFactory.build(user_selected=False)

    assert_that(
        coding.model_dump(by_alias=True, exclude_none=True),
        has_entries(system=coding.system, code=coding.code, userSelected=False),
    )


def test_patient_helpers():
    official = HumanNameFactory.build(family="Chalmers", given=["Peter", "James"], prefix=["Mr"])
    identifier = IdentifierFactory.build()
    patient = Patient(
        name=[HumanName(use="nickname", given=["Jim"]), official],
        identifier=[identifier],
    )

    assert_that(patient.official_name, equal_to(official))
    assert_that(patient.official_name.display_name, equal_to("Mr Peter James Chalmers"))
    assert_that(patient.identifier_value(identifier.system), equal_to(identifier.value))
    assert_that(patient.identifier_value("http://example.org/mrn"), equal_to(None))


def test_resource_as_reference():
    patient = Patient(id="example")

    assert_that(patient.as_reference("Peter Chalmers"), is_reference().with_reference("Patient/example"))
    with pytest.raises(ValueError, match="has no id to reference"):
        Patient().as_reference()


def test_extensions_for_url():
    patient = Patient.model_validate(
        {
            "resourceType": "Patient",
            "extension": [
                {"url": "http://example.org/colour", "valueString": "blue"},
                {"url": "http://example.org/size", "valueInteger": 3},
                {"url": "http://example.org/colour", "valueString": "green"},
            ],
        }
    )

    colours = patient.extensions_for("http://example.org/colour")

    assert_that([extension.value.value for extension in colours], contains_exactly("blue", "green"))
    assert_that(patient.extensions_for("http://example.org/missing"), equal_to([]))
