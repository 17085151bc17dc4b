"""
FHIR primitive data types.

Primitives are kept in their lexical (string) form so that a decoded resource
re-encodes to exactly the same text. FHIR allows partial dates and dateTimes
(``2016``, ``2016-01``), which ``datetime`` cannot hold, so these are validated
by pattern and can be parsed on demand with :func:`parse_date_time`. A dateTime
that has a time part must carry seconds and a timezone offset.

JSON booleans and numbers are validated strictly: ``"true"`` is not a boolean
and ``"5"`` is not an integer. A decimal accepts a JSON integer.

See: https://hl7.org/fhir/R5/datatypes.html#primitive
"""

import re
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import StrEnum
from typing import Annotated, NewType

from pydantic import Field, Strict, StrictBool, StrictInt, StringConstraints

OFFSET_PATTERN = r"(Z|[+-]((0\d|1[0-3]):[0-5]\d|14:00))"
DATE_PATTERN = r"^\d{4}(-(0[1-9]|1[0-2])(-(0[1-9]|[12]\d|3[01]))?)?$"
DATE_TIME_PATTERN = (
    r"^\d{4}(-(0[1-9]|1[0-2])(-(0[1-9]|[12]\d|3[01])"
    rf"(T([01]\d|2[0-3]):[0-5]\d:([0-5]\d|60)(\.\d{{1,9}})?{OFFSET_PATTERN})?)?)?$"
)
INSTANT_PATTERN = (
    r"^\d{4}-(0[1-9]|1[0-2])-(0[1-9]|[12]\d|3[01])"
    rf"T([01]\d|2[0-3]):[0-5]\d:([0-5]\d|60)(\.\d{{1,9}})?{OFFSET_PATTERN}$"
)
TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d:([0-5]\d|60)(\.\d{1,9})?$"
ID_PATTERN = r"^[A-Za-z0-9\-.]{1,64}$"
CODE_PATTERN = r"^\S+( \S+)*$"
OID_PATTERN = r"^urn:oid:[0-2](\.(0|[1-9]\d*))+$"
UUID_PATTERN = r"^urn:uuid:[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$"
BASE64_PATTERN = r"^(\s*([0-9a-zA-Z+/=]){4}\s*)+$"

FhirDate = Annotated[str, StringConstraints(pattern=DATE_PATTERN)]
FhirDateTime = Annotated[str, StringConstraints(pattern=DATE_TIME_PATTERN)]
FhirInstant = Annotated[str, StringConstraints(pattern=INSTANT_PATTERN)]
FhirTime = Annotated[str, StringConstraints(pattern=TIME_PATTERN)]
Id = Annotated[str, StringConstraints(pattern=ID_PATTERN)]
Code = Annotated[str, StringConstraints(pattern=CODE_PATTERN)]
Oid = Annotated[str, StringConstraints(pattern=OID_PATTERN)]
Uuid = Annotated[str, StringConstraints(pattern=UUID_PATTERN)]
Base64Binary = Annotated[str, StringConstraints(pattern=BASE64_PATTERN)]
Uri = Annotated[str, StringConstraints(pattern=r"^\S*$")]
Url = Uri
Canonical = Uri
Markdown = Annotated[str, StringConstraints(min_length=1)]
Integer64 = Annotated[str, StringConstraints(pattern=r"^-?\d+$")]
Boolean = StrictBool
Integer = StrictInt
Decimal = Annotated[float, Strict()]
PositiveInt = Annotated[int, Strict(), Field(gt=0)]
UnsignedInt = Annotated[int, Strict(), Field(ge=0)]

Xhtml = NewType("Xhtml", str)


class DateTimePrecision(StrEnum):
    year = "year"
    month = "month"
    day = "day"
    second = "second"


_LAYOUTS: tuple[tuple[str, DateTimePrecision], ...] = (
    ("%Y-%m-%d", DateTimePrecision.day),
    ("%Y-%m", DateTimePrecision.month),
    ("%Y", DateTimePrecision.year),
)


@dataclass(frozen=True)
class PartialDateTime:
    """A FHIR date/dateTime together with the precision it was written at."""

    value: datetime
    precision: DateTimePrecision

    def isoformat(self) -> str:
        match self.precision:
            case DateTimePrecision.year:
                return self.value.strftime("%Y")
            case DateTimePrecision.month:
                return self.value.strftime("%Y-%m")
            case DateTimePrecision.day:
                return self.value.strftime("%Y-%m-%d")
            case _:
                return self.value.isoformat().replace("+00:00", "Z")


def parse_date_time(text: str) -> PartialDateTime:
    """Parse a FHIR date, dateTime or instant, keeping track of its precision."""
    text = text.strip()
    if not re.match(DATE_TIME_PATTERN, text):
        msg = f"Unable to parse FHIR dateTime {text!r}"
        raise ValueError(msg)

    if "T" in text:
        try:
            return PartialDateTime(datetime.fromisoformat(text), DateTimePrecision.second)
        except ValueError as e:
            msg = f"Unable to parse FHIR dateTime {text!r}"
            raise ValueError(msg) from e

    for layout, precision in _LAYOUTS:
        try:
            return PartialDateTime(datetime.strptime(text, layout).replace(tzinfo=UTC), precision)
        except ValueError:
            continue

    msg = f"Unable to parse FHIR dateTime {text!r}"
    raise ValueError(msg)
