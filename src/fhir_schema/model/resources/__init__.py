from .account import Account
from .allergy_intolerance import AllergyIntolerance
from .appointment import Appointment
from .basic import Basic
from .bundle import Bundle
from .claim import Claim
from .condition import Condition
from .consent import Consent
from .device import Device
from .encounter import Encounter
from .medication import Medication
from .medication_request import MedicationRequest
from .observation import Observation
from .operation_outcome import OperationOutcome
from .organization import Organization
from .patient import Patient
from .practitioner import Practitioner

__all__ = [
    "Account",
    "AllergyIntolerance",
    "Appointment",
    "Basic",
    "Bundle",
    "Claim",
    "Condition",
    "Consent",
    "Device",
    "Encounter",
    "Medication",
    "MedicationRequest",
    "Observation",
    "OperationOutcome",
    "Organization",
    "Patient",
    "Practitioner",
]
