"""
FHIR R5 AllergyIntolerance: risk of a harmful or undesirable physiological response to a substance.

See: https://hl7.org/fhir/R5/allergyintolerance.html
"""

from typing import Literal

from fhir_schema.model.choice import choice_of
from fhir_schema.model.codes import FhirCode
from fhir_schema.model.datatypes import (
    Age,
    Annotation,
    BackboneElement,
    CodeableConcept,
    CodeableReference,
    Identifier,
    Period,
    Range,
    Reference,
)
from fhir_schema.model.primitives import FhirDateTime
from fhir_schema.model.resource import DomainResource


class AllergyIntoleranceCategory(FhirCode):
    food = "food"
    medication = "medication"
    environment = "environment"
    biologic = "biologic"


class AllergyIntoleranceCriticality(FhirCode):
    low = "low"
    high = "high"
    unable_to_assess = "unable-to-assess"


class AllergyIntoleranceReactionSeverity(FhirCode):
    mild = "mild"
    moderate = "moderate"
    severe = "severe"


class AllergyIntoleranceParticipant(BackboneElement):
    function: CodeableConcept | None = None
    actor: Reference


class AllergyIntoleranceReaction(BackboneElement):
    substance: CodeableConcept | None = None
    manifestation: list[CodeableReference]
    description: str | None = None
    onset: FhirDateTime | None = None
    severity: AllergyIntoleranceReactionSeverity | None = None
    exposure_route: CodeableConcept | None = None
    note: list[Annotation] | None = None


AllergyIntoleranceOnset = choice_of(DateTime=FhirDateTime, Age=Age, Period=Period, Range=Range, String=str)


class AllergyIntolerance(DomainResource):
    resource_type: Literal["AllergyIntolerance"] = "AllergyIntolerance"
    identifier: list[Identifier] | None = None
    clinical_status: CodeableConcept | None = None
    verification_status: CodeableConcept | None = None
    # allergy | intolerance, extensible in R5 so a CodeableConcept rather than a code
    type: CodeableConcept | None = None
    category: list[AllergyIntoleranceCategory] | None = None
    criticality: AllergyIntoleranceCriticality | None = None
    code: CodeableConcept | None = None
    patient: Reference
    encounter: Reference | None = None
    onset: AllergyIntoleranceOnset = None
    recorded_date: FhirDateTime | None = None
    participant: list[AllergyIntoleranceParticipant] | None = None
    last_occurrence: FhirDateTime | None = None
    note: list[Annotation] | None = None
    reaction: list[AllergyIntoleranceReaction] | None = None
