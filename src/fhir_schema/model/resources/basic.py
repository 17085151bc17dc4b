"""
FHIR R5 Basic: a resource for concepts not yet defined elsewhere, carried mostly in extensions.

See: https://hl7.org/fhir/R5/basic.html
"""

from typing import Literal

from fhir_schema.model.datatypes import CodeableConcept, Identifier, Reference
from fhir_schema.model.primitives import FhirDateTime
from fhir_schema.model.resource import DomainResource


class Basic(DomainResource):
    resource_type: Literal["Basic"] = "Basic"
    identifier: list[Identifier] | None = None
    code: CodeableConcept
    subject: Reference | None = None
    created: FhirDateTime | None = None
    author: Reference | None = None
