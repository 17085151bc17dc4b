"""
FHIR R5 Claim: a provider-issued list of professional services and products
provided, or to be provided, to a patient which is sent to an insurer for reimbursement.

See: https://hl7.org/fhir/R5/claim.html
"""

from typing import Literal

from fhir_schema.model.choice import choice_of
from fhir_schema.model.codes import FhirCode, FinancialResourceStatus
from fhir_schema.model.datatypes import (
    Address,
    Attachment,
    BackboneElement,
    CodeableConcept,
    CodeableReference,
    Coding,
    Identifier,
    Money,
    Period,
    Quantity,
    Reference,
    SimpleQuantity,
)
from fhir_schema.model.primitives import Boolean, Decimal, FhirDate, FhirDateTime, PositiveInt
from fhir_schema.model.resource import DomainResource


class ClaimUse(FhirCode):
    claim = "claim"
    preauthorization = "preauthorization"
    predetermination = "predetermination"


class ClaimRelated(BackboneElement):
    claim: Reference | None = None
    relationship: CodeableConcept | None = None
    reference: Identifier | None = None


class ClaimPayee(BackboneElement):
    type: CodeableConcept
    party: Reference | None = None


ClaimEventWhen = choice_of(required=True, DateTime=FhirDateTime, Period=Period)


class ClaimEvent(BackboneElement):
    type: CodeableConcept
    when: ClaimEventWhen


class ClaimCareTeam(BackboneElement):
    sequence: PositiveInt
    provider: Reference
    responsible: Boolean | None = None
    role: CodeableConcept | None = None
    specialty: CodeableConcept | None = None


ClaimSupportingInfoTiming = choice_of(Date=FhirDate, Period=Period)
ClaimSupportingInfoValue = choice_of(
    Boolean=Boolean,
    String=str,
    Quantity=Quantity,
    Attachment=Attachment,
    Reference=Reference,
    Identifier=Identifier,
)


class ClaimSupportingInfo(BackboneElement):
    sequence: PositiveInt
    category: CodeableConcept
    code: CodeableConcept | None = None
    timing: ClaimSupportingInfoTiming = None
    value: ClaimSupportingInfoValue = None
    reason: CodeableConcept | None = None


ClaimDiagnosisValue = choice_of(required=True, CodeableConcept=CodeableConcept, Reference=Reference)
ClaimProcedureValue = choice_of(required=True, CodeableConcept=CodeableConcept, Reference=Reference)


class ClaimDiagnosis(BackboneElement):
    sequence: PositiveInt
    diagnosis: ClaimDiagnosisValue
    type: list[CodeableConcept] | None = None
    on_admission: CodeableConcept | None = None


class ClaimProcedure(BackboneElement):
    sequence: PositiveInt
    type: list[CodeableConcept] | None = None
    date: FhirDateTime | None = None
    procedure: ClaimProcedureValue
    udi: list[Reference] | None = None


class ClaimInsurance(BackboneElement):
    sequence: PositiveInt
    focal: Boolean
    identifier: Identifier | None = None
    coverage: Reference
    business_arrangement: str | None = None
    pre_auth_ref: list[str] | None = None
    claim_response: Reference | None = None


ClaimAccidentLocation = choice_of(Address=Address, Reference=Reference)


class ClaimAccident(BackboneElement):
    date: FhirDate
    type: CodeableConcept | None = None
    location: ClaimAccidentLocation = None


class ClaimItemBodySite(BackboneElement):
    site: list[CodeableReference]
    sub_site: list[CodeableConcept] | None = None


class ClaimItemDetailSubDetail(BackboneElement):
    sequence: PositiveInt
    trace_number: list[Identifier] | None = None
    revenue: CodeableConcept | None = None
    category: CodeableConcept | None = None
    product_or_service: CodeableConcept | None = None
    product_or_service_end: CodeableConcept | None = None
    modifier: list[CodeableConcept] | None = None
    program_code: list[CodeableConcept] | None = None
    patient_paid: Money | None = None
    quantity: SimpleQuantity | None = None
    unit_price: Money | None = None
    factor: Decimal | None = None
    tax: Money | None = None
    net: Money | None = None
    udi: list[Reference] | None = None


class ClaimItemDetail(BackboneElement):
    sequence: PositiveInt
    trace_number: list[Identifier] | None = None
    revenue: CodeableConcept | None = None
    category: CodeableConcept | None = None
    product_or_service: CodeableConcept | None = None
    product_or_service_end: CodeableConcept | None = None
    modifier: list[CodeableConcept] | None = None
    program_code: list[CodeableConcept] | None = None
    patient_paid: Money | None = None
    quantity: SimpleQuantity | None = None
    unit_price: Money | None = None
    factor: Decimal | None = None
    tax: Money | None = None
    net: Money | None = None
    udi: list[Reference] | None = None
    sub_detail: list[ClaimItemDetailSubDetail] | None = None


ClaimItemServiced = choice_of(Date=FhirDate, Period=Period)
ClaimItemLocation = choice_of(CodeableConcept=CodeableConcept, Address=Address, Reference=Reference)


class ClaimItem(BackboneElement):
    sequence: PositiveInt
    trace_number: list[Identifier] | None = None
    care_team_sequence: list[PositiveInt] | None = None
    diagnosis_sequence: list[PositiveInt] | None = None
    procedure_sequence: list[PositiveInt] | None = None
    information_sequence: list[PositiveInt] | None = None
    revenue: CodeableConcept | None = None
    category: CodeableConcept | None = None
    product_or_service: CodeableConcept | None = None
    product_or_service_end: CodeableConcept | None = None
    request: list[Reference] | None = None
    modifier: list[CodeableConcept] | None = None
    program_code: list[CodeableConcept] | None = None
    serviced: ClaimItemServiced = None
    location: ClaimItemLocation = None
    patient_paid: Money | None = None
    quantity: SimpleQuantity | None = None
    unit_price: Money | None = None
    factor: Decimal | None = None
    tax: Money | None = None
    net: Money | None = None
    udi: list[Reference] | None = None
    body_site: list[ClaimItemBodySite] | None = None
    encounter: list[Reference] | None = None
    detail: list[ClaimItemDetail] | None = None


class Claim(DomainResource):
    resource_type: Literal["Claim"] = "Claim"
    identifier: list[Identifier] | None = None
    trace_number: list[Identifier] | None = None
    status: FinancialResourceStatus
    type: CodeableConcept
    sub_type: CodeableConcept | None = None
    use: ClaimUse
    patient: Reference
    billable_period: Period | None = None
    created: FhirDateTime
    enterer: Reference | None = None
    insurer: Reference | None = None
    provider: Reference | None = None
    priority: CodeableConcept | None = None
    funds_reserve: CodeableConcept | None = None
    related: list[ClaimRelated] | None = None
    prescription: Reference | None = None
    original_prescription: Reference | None = None
    payee: ClaimPayee | None = None
    referral: Reference | None = None
    encounter: list[Reference] | None = None
    facility: Reference | None = None
    diagnosis_related_group: CodeableConcept | None = None
    event: list[ClaimEvent] | None = None
    care_team: list[ClaimCareTeam] | None = None
    supporting_info: list[ClaimSupportingInfo] | None = None
    diagnosis: list[ClaimDiagnosis] | None = None
    procedure: list[ClaimProcedure] | None = None
    insurance: list[ClaimInsurance] | None = None
    accident: ClaimAccident | None = None
    patient_paid: Money | None = None
    item: list[ClaimItem] | None = None
    total: Money | None = None

    @property
    def diagnosis_codings(self) -> list[Coding]:
        """Every coding carried by the diagnoses given as concepts."""
        codings = []
        for diagnosis in self.diagnosis or []:
            if diagnosis.diagnosis.type == "CodeableConcept":
                codings.extend(diagnosis.diagnosis.value.coding or [])
        return codings
