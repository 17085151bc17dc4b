"""
FHIR R5 Practitioner: a person who is directly or indirectly involved in the provisioning of healthcare.

See: https://hl7.org/fhir/R5/practitioner.html
"""

from typing import Literal

from fhir_schema.model.choice import choice_of
from fhir_schema.model.codes import AdministrativeGender
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
from fhir_schema.model.primitives import Boolean, FhirDate, FhirDateTime
from fhir_schema.model.resource import DomainResource

PractitionerDeceased = choice_of(Boolean=Boolean, DateTime=FhirDateTime)


class PractitionerQualification(BackboneElement):
    identifier: list[Identifier] | None = None
    code: CodeableConcept
    period: Period | None = None
    issuer: Reference | None = None


class PractitionerCommunication(BackboneElement):
    language: CodeableConcept
    preferred: Boolean | None = None


class Practitioner(DomainResource):
    resource_type: Literal["Practitioner"] = "Practitioner"
    identifier: list[Identifier] | None = None
    active: Boolean | None = None
    name: list[HumanName] | None = None
    telecom: list[ContactPoint] | None = None
    gender: AdministrativeGender | None = None
    birth_date: FhirDate | None = None
    deceased: PractitionerDeceased = None
    address: list[Address] | None = None
    photo: list[Attachment] | None = None
    qualification: list[PractitionerQualification] | None = None
    communication: list[PractitionerCommunication] | None = None
