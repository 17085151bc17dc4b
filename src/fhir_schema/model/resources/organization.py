"""
FHIR R5 Organization: a formally or informally recognized grouping of people or
organizations formed for the purpose of achieving some form of collective action.

See: https://hl7.org/fhir/R5/organization.html
"""

from typing import Literal

from fhir_schema.model.datatypes import (
    BackboneElement,
    CodeableConcept,
    ExtendedContactDetail,
    Identifier,
    Period,
    Reference,
)
from fhir_schema.model.primitives import Boolean, Markdown
from fhir_schema.model.resource import DomainResource


class OrganizationQualification(BackboneElement):
    identifier: list[Identifier] | None = None
    code: CodeableConcept
    period: Period | None = None
    issuer: Reference | None = None


class Organization(DomainResource):
    resource_type: Literal["Organization"] = "Organization"
    identifier: list[Identifier] | None = None
    active: Boolean | None = None
    type: list[CodeableConcept] | None = None
    name: str | None = None
    alias: list[str] | None = None
    description: Markdown | None = None
    contact: list[ExtendedContactDetail] | None = None
    part_of: Reference | None = None
    endpoint: list[Reference] | None = None
    qualification: list[OrganizationQualification] | None = None
