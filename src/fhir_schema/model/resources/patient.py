"""
FHIR R5 Patient: demographics and other administrative information about an
individual receiving care or other health-related services.

See: https://hl7.org/fhir/R5/patient.html
"""

from typing import Literal

from fhir_schema.model.choice import choice_of
from fhir_schema.model.codes import AdministrativeGender, FhirCode
from fhir_schema.model.datatypes import (
    Address,
    Attachment,
    BackboneElement,
    CodeableConcept,
    ContactPoint,
    HumanName,
    Identifier,
    Period,
    Reference,
)
from fhir_schema.model.primitives import Boolean, FhirDate, FhirDateTime, Integer
from fhir_schema.model.resource import DomainResource


class LinkType(FhirCode):
    replaced_by = "replaced-by"
    replaces = "replaces"
    refer = "refer"
    seealso = "seealso"


PatientDeceased = choice_of(Boolean=Boolean, DateTime=FhirDateTime)
PatientMultipleBirth = choice_of(Boolean=Boolean, Integer=Integer)


class PatientContact(BackboneElement):
    relationship: list[CodeableConcept] | None = None
    role: list[CodeableConcept] | None = None
    name: HumanName | None = None
    additional_name: list[HumanName] | None = None
    telecom: list[ContactPoint] | None = None
    address: Address | None = None
    additional_address: list[Address] | None = None
    gender: AdministrativeGender | None = None
    organization: Reference | None = None
    period: Period | None = None


class PatientCommunication(BackboneElement):
    language: CodeableConcept
    preferred: Boolean | None = None


class PatientLink(BackboneElement):
    other: Reference
    type: LinkType


class Patient(DomainResource):
    resource_type: Literal["Patient"] = "Patient"
    identifier: list[Identifier] | None = None
    active: Boolean | None = None
    name: list[HumanName] | None = None
    telecom: list[ContactPoint] | None = None
    gender: AdministrativeGender | None = None
    birth_date: FhirDate | None = None
    deceased: PatientDeceased = None
    address: list[Address] | None = None
    marital_status: CodeableConcept | None = None
    multiple_birth: PatientMultipleBirth = None
    photo: list[Attachment] | None = None
    contact: list[PatientContact] | None = None
    communication: list[PatientCommunication] | None = None
    general_practitioner: list[Reference] | None = None
    managing_organization: Reference | None = None
    link: list[PatientLink] | None = None

    @property
    def official_name(self) -> HumanName | None:
        """The name marked ``official``, falling back to the first name given."""
        names = self.name or []
        return next((name for name in names if name.use == "official"), names[0] if names else None)

    def identifier_value(self, system: str) -> str | None:
        return next((identifier.value for identifier in self.identifier or [] if identifier.system == system), None)
