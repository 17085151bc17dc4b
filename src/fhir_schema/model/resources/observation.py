"""
FHIR R5 Observation: measurements and simple assertions made about a patient,
device or other subject.

See: https://hl7.org/fhir/R5/observation.html
"""

from typing import Literal

from fhir_schema.model.choice import choice_of
from fhir_schema.model.codes import FhirCode
from fhir_schema.model.datatypes import (
    Annotation,
    Attachment,
    BackboneElement,
    CodeableConcept,
    Identifier,
    Period,
    Quantity,
    Range,
    Ratio,
    Reference,
    SampledData,
    SimpleQuantity,
    Timing,
)
from fhir_schema.model.primitives import Boolean, Canonical, FhirDateTime, FhirInstant, FhirTime, Integer
from fhir_schema.model.resource import DomainResource


class ObservationStatus(FhirCode):
    registered = "registered"
    preliminary = "preliminary"
    final = "final"
    amended = "amended"
    corrected = "corrected"
    cancelled = "cancelled"
    entered_in_error = "entered-in-error"
    unknown = "unknown"


class TriggeredByType(FhirCode):
    reflex = "reflex"
    repeat = "repeat"
    re_run = "re-run"


ObservationInstantiates = choice_of(Canonical=Canonical, Reference=Reference)
ObservationEffective = choice_of(DateTime=FhirDateTime, Period=Period, Timing=Timing, Instant=FhirInstant)
ObservationValue = choice_of(
    Quantity=Quantity,
    CodeableConcept=CodeableConcept,
    String=str,
    Boolean=Boolean,
    Integer=Integer,
    Range=Range,
    Ratio=Ratio,
    SampledData=SampledData,
    Time=FhirTime,
    DateTime=FhirDateTime,
    Period=Period,
    Attachment=Attachment,
    Reference=Reference,
)


class ObservationTriggeredBy(BackboneElement):
    observation: Reference
    type: TriggeredByType
    reason: str | None = None


class ObservationReferenceRange(BackboneElement):
    low: SimpleQuantity | None = None
    high: SimpleQuantity | None = None
    normal_value: CodeableConcept | None = None
    type: CodeableConcept | None = None
    applies_to: list[CodeableConcept] | None = None
    age: Range | None = None
    text: str | None = None


class ObservationComponent(BackboneElement):
    code: CodeableConcept
    value: ObservationValue = None
    data_absent_reason: CodeableConcept | None = None
    interpretation: list[CodeableConcept] | None = None
    reference_range: list[ObservationReferenceRange] | None = None


class Observation(DomainResource):
    resource_type: Literal["Observation"] = "Observation"
    identifier: list[Identifier] | None = None
    instantiates: ObservationInstantiates = None
    based_on: list[Reference] | None = None
    triggered_by: list[ObservationTriggeredBy] | None = None
    part_of: list[Reference] | None = None
    status: ObservationStatus
    category: list[CodeableConcept] | None = None
    code: CodeableConcept
    subject: Reference | None = None
    focus: list[Reference] | None = None
    encounter: Reference | None = None
    effective: ObservationEffective = None
    issued: FhirInstant | None = None
    performer: list[Reference] | None = None
    value: ObservationValue = None
    data_absent_reason: CodeableConcept | None = None
    interpretation: list[CodeableConcept] | None = None
    note: list[Annotation] | None = None
    body_site: CodeableConcept | None = None
    body_structure: Reference | None = None
    method: CodeableConcept | None = None
    specimen: Reference | None = None
    device: Reference | None = None
    reference_range: list[ObservationReferenceRange] | None = None
    has_member: list[Reference] | None = None
    derived_from: list[Reference] | None = None
    component: list[ObservationComponent] | None = None

    def component_for(self, system: str, code: str) -> ObservationComponent | None:
        """Return the first component whose code carries the given coding."""
        return next((component for component in self.component or [] if component.code.has_coding(system, code)), None)
