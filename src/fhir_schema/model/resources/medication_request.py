"""
FHIR R5 MedicationRequest: an order or request for both supply of the medication
and the instructions for administration of the medication to a patient.

See: https://hl7.org/fhir/R5/medicationrequest.html
"""

from typing import Literal

from fhir_schema.model.choice import choice_of
from fhir_schema.model.codes import FhirCode, RequestPriority
from fhir_schema.model.datatypes import (
    Annotation,
    BackboneElement,
    CodeableConcept,
    CodeableReference,
    Dosage,
    Duration,
    Identifier,
    Period,
    Quantity,
    Reference,
)
from fhir_schema.model.primitives import Boolean, FhirDateTime, UnsignedInt
from fhir_schema.model.resource import DomainResource


class MedicationRequestStatus(FhirCode):
    active = "active"
    on_hold = "on-hold"
    ended = "ended"
    stopped = "stopped"
    completed = "completed"
    cancelled = "cancelled"
    entered_in_error = "entered-in-error"
    draft = "draft"
    unknown = "unknown"


class MedicationRequestIntent(FhirCode):
    proposal = "proposal"
    plan = "plan"
    order = "order"
    original_order = "original-order"
    reflex_order = "reflex-order"
    filler_order = "filler-order"
    instance_order = "instance-order"
    option = "option"


class MedicationRequestDispenseRequestInitialFill(BackboneElement):
    quantity: Quantity | None = None
    duration: Duration | None = None


class MedicationRequestDispenseRequest(BackboneElement):
    initial_fill: MedicationRequestDispenseRequestInitialFill | None = None
    dispense_interval: Duration | None = None
    validity_period: Period | None = None
    number_of_repeats_allowed: UnsignedInt | None = None
    quantity: Quantity | None = None
    expected_supply_duration: Duration | None = None
    dispenser: Reference | None = None
    dispenser_instruction: list[Annotation] | None = None
    dose_administration_aid: CodeableConcept | None = None


MedicationRequestSubstitutionAllowed = choice_of(required=True, Boolean=Boolean, CodeableConcept=CodeableConcept)


class MedicationRequestSubstitution(BackboneElement):
    allowed: MedicationRequestSubstitutionAllowed
    reason: CodeableConcept | None = None


class MedicationRequest(DomainResource):
    resource_type: Literal["MedicationRequest"] = "MedicationRequest"
    identifier: list[Identifier] | None = None
    based_on: list[Reference] | None = None
    prior_prescription: Reference | None = None
    group_identifier: Identifier | None = None
    status: MedicationRequestStatus
    status_reason: CodeableConcept | None = None
    status_changed: FhirDateTime | None = None
    intent: MedicationRequestIntent
    category: list[CodeableConcept] | None = None
    priority: RequestPriority | None = None
    do_not_perform: Boolean | None = None
    medication: CodeableReference
    subject: Reference
    information_source: list[Reference] | None = None
    encounter: Reference | None = None
    supporting_information: list[Reference] | None = None
    authored_on: FhirDateTime | None = None
    requester: Reference | None = None
    reported: Boolean | None = None
    performer_type: CodeableConcept | None = None
    performer: list[Reference] | None = None
    device: list[CodeableReference] | None = None
    recorder: Reference | None = None
    reason: list[CodeableReference] | None = None
    course_of_therapy_type: CodeableConcept | None = None
    insurance: list[Reference] | None = None
    note: list[Annotation] | None = None
    rendered_dosage_instruction: str | None = None
    effective_dose_period: Period | None = None
    dosage_instruction: list[Dosage] | None = None
    dispense_request: MedicationRequestDispenseRequest | None = None
    substitution: MedicationRequestSubstitution | None = None
    event_history: list[Reference] | None = None
