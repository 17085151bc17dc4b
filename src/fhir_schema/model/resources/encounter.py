"""
FHIR R5 Encounter: an interaction between a patient and healthcare provider(s)
for the purpose of providing healthcare service(s) or assessing the health status of a patient.

See: https://hl7.org/fhir/R5/encounter.html
"""

from typing import Literal

from pydantic import Field

from fhir_schema.model.codes import FhirCode
from fhir_schema.model.datatypes import (
    BackboneElement,
    CodeableConcept,
    CodeableReference,
    Duration,
    Identifier,
    Period,
    Reference,
    VirtualServiceDetail,
)
from fhir_schema.model.primitives import FhirDateTime
from fhir_schema.model.resource import DomainResource


class EncounterStatus(FhirCode):
    planned = "planned"
    in_progress = "in-progress"
    on_hold = "on-hold"
    discharged = "discharged"
    completed = "completed"
    cancelled = "cancelled"
    discontinued = "discontinued"
    entered_in_error = "entered-in-error"
    unknown = "unknown"


class EncounterLocationStatus(FhirCode):
    planned = "planned"
    active = "active"
    reserved = "reserved"
    completed = "completed"


class EncounterParticipant(BackboneElement):
    type: list[CodeableConcept] | None = None
    period: Period | None = None
    actor: Reference | None = None


class EncounterReason(BackboneElement):
    use: list[CodeableConcept] | None = None
    value: list[CodeableReference] | None = None


class EncounterDiagnosis(BackboneElement):
    condition: list[CodeableReference] | None = None
    use: list[CodeableConcept] | None = None


class EncounterAdmission(BackboneElement):
    pre_admission_identifier: Identifier | None = None
    origin: Reference | None = None
    admit_source: CodeableConcept | None = None
    re_admission: CodeableConcept | None = None
    destination: Reference | None = None
    discharge_disposition: CodeableConcept | None = None


class EncounterLocation(BackboneElement):
    location: Reference
    status: EncounterLocationStatus | None = None
    form: CodeableConcept | None = None
    period: Period | None = None


class Encounter(DomainResource):
    resource_type: Literal["Encounter"] = "Encounter"
    identifier: list[Identifier] | None = None
    status: EncounterStatus
    class_: list[CodeableConcept] | None = Field(None, alias="class")
    priority: CodeableConcept | None = None
    type: list[CodeableConcept] | None = None
    service_type: list[CodeableReference] | None = None
    subject: Reference | None = None
    subject_status: CodeableConcept | None = None
    episode_of_care: list[Reference] | None = None
    based_on: list[Reference] | None = None
    care_team: list[Reference] | None = None
    part_of: Reference | None = None
    service_provider: Reference | None = None
    participant: list[EncounterParticipant] | None = None
    appointment: list[Reference] | None = None
    virtual_service: list[VirtualServiceDetail] | None = None
    actual_period: Period | None = None
    planned_start_date: FhirDateTime | None = None
    planned_end_date: FhirDateTime | None = None
    length: Duration | None = None
    reason: list[EncounterReason] | None = None
    diagnosis: list[EncounterDiagnosis] | None = None
    account: list[Reference] | None = None
    diet_preference: list[CodeableConcept] | None = None
    special_arrangement: list[CodeableConcept] | None = None
    special_courtesy: list[CodeableConcept] | None = None
    admission: EncounterAdmission | None = None
    location: list[EncounterLocation] | None = None

    @property
    def current_location(self) -> EncounterLocation | None:
        return next(
            (location for location in self.location or [] if location.status == EncounterLocationStatus.active),
            None,
        )
