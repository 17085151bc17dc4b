from enum import StrEnum
from typing import Self

from fhir_schema.errors import InvalidCodeError


class FhirCode(StrEnum):
    """Base for FHIR ``code`` elements bound to a required value set."""

    @classmethod
    def from_code(cls, code: str) -> Self:
        try:
            return cls(code)
        except ValueError as e:
            raise InvalidCodeError(cls.__name__, code, [member.value for member in cls]) from e


class AdministrativeGender(FhirCode):
    male = "male"
    female = "female"
    other = "other"
    unknown = "unknown"


class IdentifierUse(FhirCode):
    usual = "usual"
    official = "official"
    temp = "temp"
    secondary = "secondary"
    old = "old"


class NameUse(FhirCode):
    usual = "usual"
    official = "official"
    temp = "temp"
    nickname = "nickname"
    anonymous = "anonymous"
    old = "old"
    maiden = "maiden"


class AddressUse(FhirCode):
    home = "home"
    work = "work"
    temp = "temp"
    old = "old"
    billing = "billing"


class AddressType(FhirCode):
    postal = "postal"
    physical = "physical"
    both = "both"


class ContactPointSystem(FhirCode):
    phone = "phone"
    fax = "fax"
    email = "email"
    pager = "pager"
    url = "url"
    sms = "sms"
    other = "other"


class ContactPointUse(FhirCode):
    home = "home"
    work = "work"
    temp = "temp"
    old = "old"
    mobile = "mobile"


class QuantityComparator(FhirCode):
    lt = "<"
    lte = "<="
    gte = ">="
    gt = ">"
    ad = "ad"


class NarrativeStatus(FhirCode):
    generated = "generated"
    extensions = "extensions"
    additional = "additional"
    empty = "empty"


class DaysOfWeek(FhirCode):
    mon = "mon"
    tue = "tue"
    wed = "wed"
    thu = "thu"
    fri = "fri"
    sat = "sat"
    sun = "sun"


class UnitsOfTime(FhirCode):
    s = "s"
    min = "min"
    h = "h"
    d = "d"
    wk = "wk"
    mo = "mo"
    a = "a"


class EventTiming(FhirCode):
    morn = "MORN"
    morn_early = "MORN.early"
    morn_late = "MORN.late"
    noon = "NOON"
    aft = "AFT"
    aft_early = "AFT.early"
    aft_late = "AFT.late"
    eve = "EVE"
    eve_early = "EVE.early"
    eve_late = "EVE.late"
    night = "NIGHT"
    phs = "PHS"
    imd = "IMD"
    hs = "HS"
    wake = "WAKE"
    c = "C"
    cm = "CM"
    cd = "CD"
    cv = "CV"
    ac = "AC"
    acm = "ACM"
    acd = "ACD"
    acv = "ACV"
    pc = "PC"
    pcm = "PCM"
    pcd = "PCD"
    pcv = "PCV"


class RelatedArtifactType(FhirCode):
    documentation = "documentation"
    justification = "justification"
    citation = "citation"
    predecessor = "predecessor"
    successor = "successor"
    derived_from = "derived-from"
    depends_on = "depends-on"
    composed_of = "composed-of"
    part_of = "part-of"
    amends = "amends"
    amended_with = "amended-with"
    appends = "appends"
    appended_with = "appended-with"
    cites = "cites"
    cited_by = "cited-by"
    comments_on = "comments-on"
    comment_in = "comment-in"
    contains = "contains"
    contained_in = "contained-in"
    corrects = "corrects"
    correction_in = "correction-in"
    replaces = "replaces"
    replaced_with = "replaced-with"
    retracts = "retracts"
    retracted_by = "retracted-by"
    signs = "signs"
    similar_to = "similar-to"
    supports = "supports"
    supported_with = "supported-with"
    transforms = "transforms"
    transformed_into = "transformed-into"
    transformed_with = "transformed-with"
    documents = "documents"
    specification_of = "specification-of"
    created_with = "created-with"
    cite_as = "cite-as"


class PublicationStatus(FhirCode):
    draft = "draft"
    active = "active"
    retired = "retired"
    unknown = "unknown"


class RequestIntent(FhirCode):
    proposal = "proposal"
    plan = "plan"
    directive = "directive"
    order = "order"
    original_order = "original-order"
    reflex_order = "reflex-order"
    filler_order = "filler-order"
    instance_order = "instance-order"
    option = "option"


class RequestPriority(FhirCode):
    routine = "routine"
    urgent = "urgent"
    asap = "asap"
    stat = "stat"


class FinancialResourceStatus(FhirCode):
    active = "active"
    cancelled = "cancelled"
    draft = "draft"
    entered_in_error = "entered-in-error"
