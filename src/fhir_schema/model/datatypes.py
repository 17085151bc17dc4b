"""
FHIR R5 general-purpose data types.

These are the value objects shared by every resource: codings, identifiers,
references, quantities, names, addresses and so on. They are owned by the
element that contains them and carry no identity of their own.

Element and Extension refer to each other, so both live here together with
every type an extension value can take.

See: https://hl7.org/fhir/R5/datatypes.html
"""

from pydantic import Field

from fhir_schema.model.base import FhirBaseModel
from fhir_schema.model.choice import choice_of, rebuild_choice_variants
from fhir_schema.model.codes import (
    AddressType,
    AddressUse,
    ContactPointSystem,
    ContactPointUse,
    DaysOfWeek,
    EventTiming,
    IdentifierUse,
    NameUse,
    NarrativeStatus,
    PublicationStatus,
    QuantityComparator,
    RelatedArtifactType,
    UnitsOfTime,
)
from fhir_schema.model.primitives import (
    Base64Binary,
    Boolean,
    Canonical,
    Code,
    Decimal,
    FhirDate,
    FhirDateTime,
    FhirInstant,
    FhirTime,
    Id,
    Integer,
    Integer64,
    Markdown,
    Oid,
    PositiveInt,
    UnsignedInt,
    Uri,
    Url,
    Uuid,
    Xhtml,
)


class Element(FhirBaseModel):
    id: str | None = None
    extension: list["Extension"] | None = None


class BackboneElement(Element):
    """Base for elements nested inside a resource, e.g. ``Account.coverage``."""

    modifier_extension: list["Extension"] | None = None


class Coding(Element):
    system: Uri | None = None
    version: str | None = None
    code: Code | None = None
    display: str | None = None
    user_selected: Boolean | None = None


class CodeableConcept(Element):
    coding: list[Coding] | None = None
    text: str | None = None

    def has_coding(self, system: str, code: str) -> bool:
        return any(coding.system == system and coding.code == code for coding in self.coding or [])


class Period(Element):
    start: FhirDateTime | None = None
    end: FhirDateTime | None = None


class Reference(Element):
    reference: str | None = None
    type: Uri | None = None
    identifier: "Identifier | None" = None
    display: str | None = None


class Identifier(Element):
    use: IdentifierUse | None = None
    type: CodeableConcept | None = None
    system: Uri | None = None
    value: str | None = None
    period: Period | None = None
    assigner: Reference | None = None


class CodeableReference(Element):
    concept: CodeableConcept | None = None
    reference: Reference | None = None


class Quantity(Element):
    value: Decimal | None = None
    comparator: QuantityComparator | None = None
    unit: str | None = None
    system: Uri | None = None
    code: Code | None = None


class SimpleQuantity(Quantity):
    """A Quantity without a comparator."""


class Age(Quantity): ...


class Count(Quantity): ...


class Distance(Quantity): ...


class Duration(Quantity): ...


class Range(Element):
    low: SimpleQuantity | None = None
    high: SimpleQuantity | None = None


class Ratio(Element):
    numerator: Quantity | None = None
    denominator: SimpleQuantity | None = None


class Money(Element):
    value: Decimal | None = None
    currency: Code | None = None  # ISO 4217


class Attachment(Element):
    content_type: Code | None = None
    language: Code | None = None
    data: Base64Binary | None = None
    url: Url | None = None
    size: Integer64 | None = None
    hash: Base64Binary | None = None
    title: str | None = None
    creation: FhirDateTime | None = None
    height: PositiveInt | None = None
    width: PositiveInt | None = None
    frames: PositiveInt | None = None
    duration: Decimal | None = None
    pages: PositiveInt | None = None


AnnotationAuthor = choice_of(Reference=Reference, String=str)


class Annotation(Element):
    author: AnnotationAuthor = None
    time: FhirDateTime | None = None
    text: Markdown


class HumanName(Element):
    use: NameUse | None = None
    text: str | None = None
    family: str | None = None
    given: list[str] | None = None
    prefix: list[str] | None = None
    suffix: list[str] | None = None
    period: Period | None = None

    @property
    def display_name(self) -> str:
        if self.text:
            return self.text
        parts = [*(self.prefix or []), *(self.given or []), self.family or "", *(self.suffix or [])]
        return " ".join(part for part in parts if part)


class Address(Element):
    use: AddressUse | None = None
    type: AddressType | None = None
    text: str | None = None
    line: list[str] | None = None
    city: str | None = None
    district: str | None = None
    state: str | None = None
    postal_code: str | None = None
    country: str | None = None
    period: Period | None = None


class ContactPoint(Element):
    system: ContactPointSystem | None = None
    value: str | None = None
    use: ContactPointUse | None = None
    rank: PositiveInt | None = None
    period: Period | None = None


class ContactDetail(Element):
    name: str | None = None
    telecom: list[ContactPoint] | None = None


class ExtendedContactDetail(Element):
    purpose: CodeableConcept | None = None
    name: list[HumanName] | None = None
    telecom: list[ContactPoint] | None = None
    address: Address | None = None
    organization: Reference | None = None
    period: Period | None = None


VirtualServiceAddress = choice_of(
    Url=Url,
    String=str,
    ContactPoint=ContactPoint,
    ExtendedContactDetail=ExtendedContactDetail,
)


class VirtualServiceDetail(Element):
    channel_type: Coding | None = None
    address: VirtualServiceAddress = None
    additional_info: list[Url] | None = None
    max_participants: PositiveInt | None = None
    session_key: str | None = None


class Signature(Element):
    type: list[Coding] | None = None
    when: FhirInstant | None = None
    who: Reference | None = None
    on_behalf_of: Reference | None = None
    target_format: Code | None = None
    sig_format: Code | None = None
    data: Base64Binary | None = None


class SampledData(Element):
    origin: SimpleQuantity
    interval: Decimal | None = None
    interval_unit: Code
    factor: Decimal | None = None
    lower_limit: Decimal | None = None
    upper_limit: Decimal | None = None
    dimensions: PositiveInt
    code_map: Canonical | None = None
    offsets: str | None = None
    data: str | None = None


TimingBounds = choice_of(Duration=Duration, Range=Range, Period=Period)


class TimingRepeat(Element):
    bounds: TimingBounds = None
    count: PositiveInt | None = None
    count_max: PositiveInt | None = None
    duration: Decimal | None = None
    duration_max: Decimal | None = None
    duration_unit: UnitsOfTime | None = None
    frequency: PositiveInt | None = None
    frequency_max: PositiveInt | None = None
    period: Decimal | None = None
    period_max: Decimal | None = None
    period_unit: UnitsOfTime | None = None
    day_of_week: list[DaysOfWeek] | None = None
    time_of_day: list[FhirTime] | None = None
    when: list[EventTiming] | None = None
    offset: UnsignedInt | None = None


class Timing(BackboneElement):
    event: list[FhirDateTime] | None = None
    repeat: TimingRepeat | None = None
    code: CodeableConcept | None = None


DoseAndRateDose = choice_of(Range=Range, Quantity=Quantity)
DoseAndRateRate = choice_of(Ratio=Ratio, Range=Range, Quantity=Quantity)


class DosageDoseAndRate(Element):
    type: CodeableConcept | None = None
    dose: DoseAndRateDose = None
    rate: DoseAndRateRate = None


class Dosage(BackboneElement):
    sequence: Integer | None = None
    text: str | None = None
    additional_instruction: list[CodeableConcept] | None = None
    patient_instruction: str | None = None
    timing: Timing | None = None
    as_needed: Boolean | None = None
    as_needed_for: list[CodeableConcept] | None = None
    site: CodeableConcept | None = None
    route: CodeableConcept | None = None
    method: CodeableConcept | None = None
    dose_and_rate: list[DosageDoseAndRate] | None = None
    max_dose_per_period: list[Ratio] | None = None
    max_dose_per_administration: SimpleQuantity | None = None
    max_dose_per_lifetime: SimpleQuantity | None = None


UsageContextValue = choice_of(
    required=True,
    CodeableConcept=CodeableConcept,
    Quantity=Quantity,
    Range=Range,
    Reference=Reference,
)


class UsageContext(Element):
    code: Coding
    value: UsageContextValue


class Expression(Element):
    description: str | None = None
    name: Code | None = None
    language: Code | None = None
    expression: str | None = None
    reference: Uri | None = None


class RelatedArtifact(Element):
    type: RelatedArtifactType
    classifier: list[CodeableConcept] | None = None
    label: str | None = None
    display: str | None = None
    citation: Markdown | None = None
    document: Attachment | None = None
    resource: Canonical | None = None
    resource_reference: Reference | None = None
    publication_status: PublicationStatus | None = None
    publication_date: FhirDate | None = None


class Meta(Element):
    version_id: Id | None = None
    last_updated: FhirInstant | None = None
    source: Uri | None = None
    profile: list[Canonical] | None = None
    security: list[Coding] | None = None
    tag: list[Coding] | None = None


class Narrative(Element):
    status: NarrativeStatus
    div: Xhtml = Field(..., min_length=1)


ExtensionValue = choice_of(
    Base64Binary=Base64Binary,
    Boolean=Boolean,
    Canonical=Canonical,
    Code=Code,
    Date=FhirDate,
    DateTime=FhirDateTime,
    Decimal=Decimal,
    Id=Id,
    Instant=FhirInstant,
    Integer=Integer,
    Integer64=Integer64,
    Markdown=Markdown,
    Oid=Oid,
    PositiveInt=PositiveInt,
    String=str,
    Time=FhirTime,
    UnsignedInt=UnsignedInt,
    Uri=Uri,
    Url=Url,
    Uuid=Uuid,
    Address=Address,
    Age=Age,
    Annotation=Annotation,
    Attachment=Attachment,
    CodeableConcept=CodeableConcept,
    CodeableReference=CodeableReference,
    Coding=Coding,
    ContactPoint=ContactPoint,
    Count=Count,
    Distance=Distance,
    Duration=Duration,
    HumanName=HumanName,
    Identifier=Identifier,
    Money=Money,
    Period=Period,
    Quantity=Quantity,
    Range=Range,
    Ratio=Ratio,
    Reference=Reference,
    SampledData=SampledData,
    Signature=Signature,
    Timing=Timing,
    ContactDetail=ContactDetail,
    Dosage=Dosage,
    Expression=Expression,
    RelatedArtifact=RelatedArtifact,
    UsageContext=UsageContext,
    Meta=Meta,
)


class Extension(Element):
    """
    Additional content defined by implementations.

    An extension is a ``url`` naming its definition plus either a typed ``value[x]``
    or nested extensions (complex extensions). Value types this module does not model
    are kept verbatim as unrecognised elements.
    """

    url: Uri
    value: ExtensionValue = None


for _model in [m for m in list(globals().values()) if isinstance(m, type) and issubclass(m, FhirBaseModel)]:
    _model.model_rebuild()
rebuild_choice_variants()
