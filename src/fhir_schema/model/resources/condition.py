"""
FHIR R5 Condition: a clinical condition, problem, diagnosis, or other event,
situation, issue, or clinical concept that has risen to a level of concern.

See: https://hl7.org/fhir/R5/condition.html
"""

from typing import Literal

from fhir_schema.model.choice import choice_of
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

CLINICAL_STATUS_SYSTEM = "http://terminology.hl7.org/CodeSystem/condition-clinical"

ConditionOnset = choice_of(DateTime=FhirDateTime, Age=Age, Period=Period, Range=Range, String=str)
ConditionAbatement = choice_of(DateTime=FhirDateTime, Age=Age, Period=Period, Range=Range, String=str)


class ConditionParticipant(BackboneElement):
    function: CodeableConcept | None = None
    actor: Reference


class ConditionStage(BackboneElement):
    summary: CodeableConcept | None = None
    assessment: list[Reference] | None = None
    type: CodeableConcept | None = None


class Condition(DomainResource):
    resource_type: Literal["Condition"] = "Condition"
    identifier: list[Identifier] | None = None
    clinical_status: CodeableConcept
    verification_status: CodeableConcept | None = None
    category: list[CodeableConcept] | None = None
    severity: CodeableConcept | None = None
    code: CodeableConcept | None = None
    body_site: list[CodeableConcept] | None = None
    subject: Reference
    encounter: Reference | None = None
    onset: ConditionOnset = None
    abatement: ConditionAbatement = None
    recorded_date: FhirDateTime | None = None
    participant: list[ConditionParticipant] | None = None
    stage: list[ConditionStage] | None = None
    evidence: list[CodeableReference] | None = None
    note: list[Annotation] | None = None

    @property
    def is_active(self) -> bool:
        return self.clinical_status.has_coding(CLINICAL_STATUS_SYSTEM, "active")
