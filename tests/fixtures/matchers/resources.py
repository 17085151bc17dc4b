"""Hamcrest matchers for decoded FHIR resources and their elements."""

from hamcrest.core.matcher import Matcher

from fhir_schema.model.choice import ChoiceValue
from fhir_schema.model.datatypes import CodeableConcept, Coding, Quantity, Reference
from fhir_schema.model.resources import Bundle, Observation, Patient

from .meta import BaseAutoMatcher


class ChoiceValueMatcher(BaseAutoMatcher[ChoiceValue]): ...


class CodingMatcher(BaseAutoMatcher[Coding]): ...


class CodeableConceptMatcher(BaseAutoMatcher[CodeableConcept]): ...


class QuantityMatcher(BaseAutoMatcher[Quantity]): ...


class ReferenceMatcher(BaseAutoMatcher[Reference]): ...


class PatientMatcher(BaseAutoMatcher[Patient]): ...


class ObservationMatcher(BaseAutoMatcher[Observation]): ...


class BundleMatcher(BaseAutoMatcher[Bundle]): ...


def is_choice_value() -> Matcher[ChoiceValue]:
    return ChoiceValueMatcher()


def is_coding() -> Matcher[Coding]:
    return CodingMatcher()


def is_codeable_concept() -> Matcher[CodeableConcept]:
    return CodeableConceptMatcher()


def is_quantity() -> Matcher[Quantity]:
    return QuantityMatcher()


def is_reference() -> Matcher[Reference]:
    return ReferenceMatcher()


def is_patient() -> Matcher[Patient]:
    return PatientMatcher()


def is_observation() -> Matcher[Observation]:
    return ObservationMatcher()


def is_bundle() -> Matcher[Bundle]:
    return BundleMatcher()
