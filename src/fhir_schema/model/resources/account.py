"""
FHIR R5 Account: a financial tool for tracking value accrued for a particular purpose.

See: https://hl7.org/fhir/R5/account.html
"""

from typing import Literal

from fhir_schema.model.codes import FhirCode
from fhir_schema.model.datatypes import (
    BackboneElement,
    CodeableConcept,
    CodeableReference,
    Identifier,
    Money,
    Period,
    Reference,
)
from fhir_schema.model.primitives import Boolean, FhirDateTime, Markdown, PositiveInt
from fhir_schema.model.resource import DomainResource


class AccountStatus(FhirCode):
    active = "active"
    inactive = "inactive"
    entered_in_error = "entered-in-error"
    on_hold = "on-hold"
    unknown = "unknown"


class AccountCoverage(BackboneElement):
    coverage: Reference
    priority: PositiveInt | None = None


class AccountGuarantor(BackboneElement):
    party: Reference
    on_hold: Boolean | None = None
    period: Period | None = None


class AccountDiagnosis(BackboneElement):
    sequence: PositiveInt | None = None
    condition: CodeableReference
    date_of_diagnosis: FhirDateTime | None = None
    type: list[CodeableConcept] | None = None
    on_admission: Boolean | None = None
    package_code: list[CodeableConcept] | None = None


class AccountProcedure(BackboneElement):
    sequence: PositiveInt | None = None
    code: CodeableReference
    date_of_service: FhirDateTime | None = None
    type: list[CodeableConcept] | None = None
    package_code: list[CodeableConcept] | None = None
    device: list[Reference] | None = None


class AccountRelatedAccount(BackboneElement):
    relationship: CodeableConcept | None = None
    account: Reference


class AccountBalance(BackboneElement):
    aggregate: CodeableConcept | None = None
    term: CodeableConcept | None = None
    estimate: Boolean | None = None
    amount: Money


class Account(DomainResource):
    resource_type: Literal["Account"] = "Account"
    identifier: list[Identifier] | None = None
    status: AccountStatus
    billing_status: CodeableConcept | None = None
    type: CodeableConcept | None = None
    name: str | None = None
    subject: list[Reference] | None = None
    service_period: Period | None = None
    coverage: list[AccountCoverage] | None = None
    owner: Reference | None = None
    description: Markdown | None = None
    guarantor: list[AccountGuarantor] | None = None
    diagnosis: list[AccountDiagnosis] | None = None
    procedure: list[AccountProcedure] | None = None
    related_account: list[AccountRelatedAccount] | None = None
    currency: CodeableConcept | None = None
    balance: list[AccountBalance] | None = None
    calculated_at: FhirDateTime | None = None

    @property
    def active_guarantors(self) -> list[AccountGuarantor]:
        """Guarantors that are not on credit hold."""
        return [guarantor for guarantor in self.guarantor or [] if not guarantor.on_hold]
