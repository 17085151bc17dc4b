"""
FHIR R5 Device: a type of manufactured item used in the provision of healthcare
without being substantially changed through that activity.

See: https://hl7.org/fhir/R5/device.html
"""

from typing import Literal

from pydantic import Field

from fhir_schema.model.choice import choice_of
from fhir_schema.model.codes import FhirCode
from fhir_schema.model.datatypes import (
    Annotation,
    Attachment,
    BackboneElement,
    CodeableConcept,
    CodeableReference,
    ContactPoint,
    Count,
    Duration,
    Identifier,
    Quantity,
    Range,
    Reference,
)
from fhir_schema.model.primitives import Base64Binary, Boolean, FhirDateTime, Integer, Uri
from fhir_schema.model.resource import DomainResource


class DeviceStatus(FhirCode):
    active = "active"
    inactive = "inactive"
    entered_in_error = "entered-in-error"


class DeviceNameType(FhirCode):
    registered_name = "registered-name"
    user_friendly_name = "user-friendly-name"
    patient_reported_name = "patient-reported-name"


class UdiEntryType(FhirCode):
    barcode = "barcode"
    rfid = "rfid"
    manual = "manual"
    card = "card"
    self_reported = "self-reported"
    electronic_transmission = "electronic-transmission"
    unknown = "unknown"


class DeviceUdiCarrier(BackboneElement):
    device_identifier: str
    issuer: Uri
    jurisdiction: Uri | None = None
    carrier_aidc: Base64Binary | None = Field(None, alias="carrierAIDC")
    carrier_hrf: str | None = Field(None, alias="carrierHRF")
    entry_type: UdiEntryType | None = None


class DeviceName(BackboneElement):
    value: str
    type: DeviceNameType
    display: Boolean | None = None


class DeviceVersion(BackboneElement):
    type: CodeableConcept | None = None
    component: Identifier | None = None
    install_date: FhirDateTime | None = None
    value: str


class DeviceConformsTo(BackboneElement):
    category: CodeableConcept | None = None
    specification: CodeableConcept
    version: str | None = None


DevicePropertyValue = choice_of(
    required=True,
    Quantity=Quantity,
    CodeableConcept=CodeableConcept,
    String=str,
    Boolean=Boolean,
    Integer=Integer,
    Range=Range,
    Attachment=Attachment,
)


class DeviceProperty(BackboneElement):
    type: CodeableConcept
    value: DevicePropertyValue


class Device(DomainResource):
    resource_type: Literal["Device"] = "Device"
    identifier: list[Identifier] | None = None
    display_name: str | None = None
    definition: CodeableReference | None = None
    udi_carrier: list[DeviceUdiCarrier] | None = None
    status: DeviceStatus | None = None
    availability_status: CodeableConcept | None = None
    biological_source_event: Identifier | None = None
    manufacturer: str | None = None
    manufacture_date: FhirDateTime | None = None
    expiration_date: FhirDateTime | None = None
    lot_number: str | None = None
    serial_number: str | None = None
    name: list[DeviceName] | None = None
    model_number: str | None = None
    part_number: str | None = None
    category: list[CodeableConcept] | None = None
    type: list[CodeableConcept] | None = None
    version: list[DeviceVersion] | None = None
    conforms_to: list[DeviceConformsTo] | None = None
    property_: list[DeviceProperty] | None = Field(None, alias="property")
    mode: CodeableConcept | None = None
    cycle: Count | None = None
    duration: Duration | None = None
    owner: Reference | None = None
    contact: list[ContactPoint] | None = None
    location: Reference | None = None
    url: Uri | None = None
    endpoint: list[Reference] | None = None
    gateway: list[CodeableReference] | None = None
    note: list[Annotation] | None = None
    safety: list[CodeableConcept] | None = None
    parent: Reference | None = None

    @property
    def preferred_name(self) -> str | None:
        """The name flagged for display, else ``displayName``, else the first name."""
        names = self.name or []
        flagged = next((name.value for name in names if name.display), None)
        return flagged or self.display_name or (names[0].value if names else None)
