"""
FHIR R5 Consent: a healthcare consumer's choices to permit or deny recipients or
roles to perform actions for specific purposes and periods of time.

Provisions nest: each provision may hold further provisions that refine or
make exceptions to it.

See: https://hl7.org/fhir/R5/consent.html
"""

from collections.abc import Iterator
from typing import Literal

from fhir_schema.model.codes import FhirCode
from fhir_schema.model.datatypes import (
    Attachment,
    BackboneElement,
    CodeableConcept,
    Coding,
    Expression,
    Identifier,
    Period,
    Reference,
)
from fhir_schema.model.primitives import Boolean, FhirDate, FhirDateTime, Uri
from fhir_schema.model.resource import DomainResource


class ConsentState(FhirCode):
    draft = "draft"
    active = "active"
    inactive = "inactive"
    not_done = "not-done"
    entered_in_error = "entered-in-error"
    unknown = "unknown"


class ConsentDecision(FhirCode):
    deny = "deny"
    permit = "permit"


class ConsentDataMeaning(FhirCode):
    instance = "instance"
    related = "related"
    dependents = "dependents"
    authoredby = "authoredby"


class ConsentPolicyBasis(BackboneElement):
    reference: Reference | None = None
    url: Uri | None = None


class ConsentVerification(BackboneElement):
    verified: Boolean
    verification_type: CodeableConcept | None = None
    verified_by: Reference | None = None
    verified_with: Reference | None = None
    verification_date: list[FhirDateTime] | None = None


class ConsentProvisionActor(BackboneElement):
    role: CodeableConcept | None = None
    reference: Reference | None = None


class ConsentProvisionData(BackboneElement):
    meaning: ConsentDataMeaning
    reference: Reference


class ConsentProvision(BackboneElement):
    period: Period | None = None
    actor: list[ConsentProvisionActor] | None = None
    action: list[CodeableConcept] | None = None
    security_label: list[Coding] | None = None
    purpose: list[Coding] | None = None
    document_type: list[Coding] | None = None
    resource_type: list[Coding] | None = None
    code: list[CodeableConcept] | None = None
    data_period: Period | None = None
    data: list[ConsentProvisionData] | None = None
    expression: Expression | None = None
    provision: list["ConsentProvision"] | None = None


ConsentProvision.model_rebuild()


class Consent(DomainResource):
    resource_type: Literal["Consent"] = "Consent"
    identifier: list[Identifier] | None = None
    status: ConsentState
    category: list[CodeableConcept] | None = None
    subject: Reference | None = None
    date: FhirDate | None = None
    period: Period | None = None
    grantor: list[Reference] | None = None
    grantee: list[Reference] | None = None
    manager: list[Reference] | None = None
    controller: list[Reference] | None = None
    source_attachment: list[Attachment] | None = None
    source_reference: list[Reference] | None = None
    regulatory_basis: list[CodeableConcept] | None = None
    policy_basis: ConsentPolicyBasis | None = None
    policy_text: list[Reference] | None = None
    verification: list[ConsentVerification] | None = None
    decision: ConsentDecision | None = None
    provision: list[ConsentProvision] | None = None

    def iter_provisions(self) -> Iterator[ConsentProvision]:
        """Walk every provision depth first, nested provisions after their parent."""
        stack = list(reversed(self.provision or []))
        while stack:
            provision = stack.pop()
            yield provision
            stack.extend(reversed(provision.provision or []))
