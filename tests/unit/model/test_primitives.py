from datetime import UTC, datetime, timedelta, timezone

import pytest
from hamcrest import assert_that, equal_to
from pydantic import TypeAdapter, ValidationError

from fhir_schema.model.primitives import (
    Boolean,
    Code,
    DateTimePrecision,
    Decimal,
    FhirDate,
    FhirDateTime,
    FhirInstant,
    Id,
    Integer,
    PositiveInt,
    UnsignedInt,
    parse_date_time,
)


@pytest.mark.parametrize(
    ("text", "expected", "precision"),
    [
        ("2016", datetime(2016, 1, 1, tzinfo=UTC), DateTimePrecision.year),
        ("2016-03", datetime(2016, 3, 1, tzinfo=UTC), DateTimePrecision.month),
        ("2016-03-14", datetime(2016, 3, 14, tzinfo=UTC), DateTimePrecision.day),
        ("2016-03-14T09:30:15Z", datetime(2016, 3, 14, 9, 30, 15, tzinfo=UTC), DateTimePrecision.second),
        (
            "2016-03-14T09:30:15+10:00",
            datetime(2016, 3, 14, 9, 30, 15, tzinfo=timezone(timedelta(hours=10))),
            DateTimePrecision.second,
        ),
    ],
)
def test_parse_date_time_keeps_precision(text, expected, precision):
    parsed = parse_date_time(text)

    assert_that(parsed.value, equal_to(expected))
    assert_that(parsed.precision, equal_to(precision))


@pytest.mark.parametrize("text", ["2016", "2016-03", "2016-03-14", "2016-03-14T09:30:15Z"])
def test_isoformat_renders_at_parsed_precision(text):
    assert_that(parse_date_time(text).isoformat(), equal_to(text))


@pytest.mark.parametrize(
    "text",
    ["", "yesterday", "2016-13", "2016-02-30", "2016-03-14T25:00:00Z", "2016-03-14T09:30Z", "2016-03-14T09:30:15"],
)
def test_unparseable_date_time_is_rejected(text):
    with pytest.raises(ValueError, match="Unable to parse FHIR dateTime"):
        parse_date_time(text)


@pytest.mark.parametrize(
    ("annotation", "valid", "invalid"),
    [
        (FhirDate, "2012-05", "2012-5"),
        (FhirDateTime, "2015-02-07T13:28:17-05:00", "2015-02-07T13"),
        (FhirDateTime, "2015-02-07T13:28:17Z", "2015-02-07T13:28Z"),
        (FhirDateTime, "2015-02-07", "2015-02-07T13:28:17"),
        (FhirInstant, "2015-02-07T13:28:17.239+02:00", "2015-02-07"),
        (Id, "example-1.a", "has space"),
        (Code, "code-invalid", " leading"),
    ],
)
def test_primitive_patterns(annotation, valid, invalid):
    adapter = TypeAdapter(annotation)

    assert_that(adapter.validate_python(valid), equal_to(valid))
    with pytest.raises(ValidationError):
        adapter.validate_python(invalid)


@pytest.mark.parametrize(
    ("annotation", "valid", "invalid"),
    [
        (Boolean, True, "true"),
        (Integer, 5, "5"),
        (Integer, -3, 5.0),
        (Decimal, 5, "5.0"),
        (Decimal, 0.25, True),
        (PositiveInt, 1, "1"),
        (UnsignedInt, 0, False),
    ],
)
def test_json_primitives_are_not_coerced(annotation, valid, invalid):
    adapter = TypeAdapter(annotation)

    assert_that(adapter.validate_python(valid), equal_to(valid))
    with pytest.raises(ValidationError):
        adapter.validate_python(invalid)
