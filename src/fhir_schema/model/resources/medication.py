"""
FHIR R5 Medication: the definition of a medication for prescribing, dispensing and administering.

See: https://hl7.org/fhir/R5/medication.html
"""

from typing import Literal

from fhir_schema.model.choice import choice_of
from fhir_schema.model.codes import FhirCode
from fhir_schema.model.datatypes import (
    BackboneElement,
    CodeableConcept,
    CodeableReference,
    Identifier,
    Quantity,
    Ratio,
    Reference,
)
from fhir_schema.model.primitives import Boolean, FhirDateTime
from fhir_schema.model.resource import DomainResource


class MedicationStatus(FhirCode):
    active = "active"
    inactive = "inactive"
    entered_in_error = "entered-in-error"


MedicationIngredientStrength = choice_of(Ratio=Ratio, CodeableConcept=CodeableConcept, Quantity=Quantity)


class MedicationIngredient(BackboneElement):
    item: CodeableReference
    is_active: Boolean | None = None
    strength: MedicationIngredientStrength = None


class MedicationBatch(BackboneElement):
    lot_number: str | None = None
    expiration_date: FhirDateTime | None = None


class Medication(DomainResource):
    resource_type: Literal["Medication"] = "Medication"
    identifier: list[Identifier] | None = None
    code: CodeableConcept | None = None
    status: MedicationStatus | None = None
    marketing_authorization_holder: Reference | None = None
    dose_form: CodeableConcept | None = None
    total_volume: Quantity | None = None
    ingredient: list[MedicationIngredient] | None = None
    batch: MedicationBatch | None = None
    definition: Reference | None = None

    @property
    def active_ingredients(self) -> list[MedicationIngredient]:
        return [ingredient for ingredient in self.ingredient or [] if ingredient.is_active]
