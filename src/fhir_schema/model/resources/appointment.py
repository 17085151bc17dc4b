"""
FHIR R5 Appointment: a booking of a healthcare event among patient(s), practitioner(s),
related person(s) and/or device(s) for a specific date/time.

See: https://hl7.org/fhir/R5/appointment.html
"""

from typing import Literal

from pydantic import Field

from fhir_schema.model.codes import FhirCode
from fhir_schema.model.datatypes import (
    Annotation,
    BackboneElement,
    CodeableConcept,
    CodeableReference,
    Coding,
    Identifier,
    Period,
    Reference,
    VirtualServiceDetail,
)
from fhir_schema.model.primitives import Boolean, FhirDate, FhirDateTime, FhirInstant, PositiveInt
from fhir_schema.model.resource import DomainResource


class AppointmentStatus(FhirCode):
    proposed = "proposed"
    pending = "pending"
    booked = "booked"
    arrived = "arrived"
    fulfilled = "fulfilled"
    cancelled = "cancelled"
    noshow = "noshow"
    entered_in_error = "entered-in-error"
    checked_in = "checked-in"
    waitlist = "waitlist"


class ParticipationStatus(FhirCode):
    accepted = "accepted"
    declined = "declined"
    tentative = "tentative"
    needs_action = "needs-action"


class AppointmentParticipant(BackboneElement):
    type: list[CodeableConcept] | None = None
    period: Period | None = None
    actor: Reference | None = None
    required: Boolean | None = None
    status: ParticipationStatus


class AppointmentRecurrenceTemplateWeeklyTemplate(BackboneElement):
    monday: Boolean | None = None
    tuesday: Boolean | None = None
    wednesday: Boolean | None = None
    thursday: Boolean | None = None
    friday: Boolean | None = None
    saturday: Boolean | None = None
    sunday: Boolean | None = None
    week_interval: PositiveInt | None = None


class AppointmentRecurrenceTemplateMonthlyTemplate(BackboneElement):
    day_of_month: PositiveInt | None = None
    nth_week_of_month: Coding | None = None
    day_of_week: Coding | None = None
    month_interval: PositiveInt


class AppointmentRecurrenceTemplateYearlyTemplate(BackboneElement):
    year_interval: PositiveInt


class AppointmentRecurrenceTemplate(BackboneElement):
    timezone: CodeableConcept | None = None
    recurrence_type: CodeableConcept
    last_occurrence_date: FhirDate | None = None
    occurrence_count: PositiveInt | None = None
    occurrence_date: list[FhirDate] | None = None
    weekly_template: AppointmentRecurrenceTemplateWeeklyTemplate | None = None
    monthly_template: AppointmentRecurrenceTemplateMonthlyTemplate | None = None
    yearly_template: AppointmentRecurrenceTemplateYearlyTemplate | None = None
    excluding_date: list[FhirDate] | None = None
    excluding_recurrence_id: list[PositiveInt] | None = None


class Appointment(DomainResource):
    resource_type: Literal["Appointment"] = "Appointment"
    identifier: list[Identifier] | None = None
    status: AppointmentStatus
    cancellation_reason: CodeableConcept | None = None
    class_: list[CodeableConcept] | None = Field(None, alias="class")
    service_category: list[CodeableConcept] | None = None
    service_type: list[CodeableReference] | None = None
    specialty: list[CodeableConcept] | None = None
    appointment_type: CodeableConcept | None = None
    reason: list[CodeableReference] | None = None
    priority: CodeableConcept | None = None
    description: str | None = None
    replaces: list[Reference] | None = None
    virtual_service: list[VirtualServiceDetail] | None = None
    supporting_information: list[Reference] | None = None
    previous_appointment: Reference | None = None
    originating_appointment: Reference | None = None
    start: FhirInstant | None = None
    end: FhirInstant | None = None
    minutes_duration: PositiveInt | None = None
    requested_period: list[Period] | None = None
    slot: list[Reference] | None = None
    account: list[Reference] | None = None
    created: FhirDateTime | None = None
    cancellation_date: FhirDateTime | None = None
    note: list[Annotation] | None = None
    patient_instruction: list[CodeableReference] | None = None
    based_on: list[Reference] | None = None
    subject: Reference | None = None
    participant: list[AppointmentParticipant]
    recurrence_id: PositiveInt | None = None
    occurrence_changed: Boolean | None = None
    recurrence_template: list[AppointmentRecurrenceTemplate] | None = None

    def participants_with_status(self, status: ParticipationStatus) -> list[AppointmentParticipant]:
        return [participant for participant in self.participant if participant.status == status]
