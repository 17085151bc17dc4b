from typing import Any

from hamcrest import assert_that, empty, equal_to

from fhir_schema.model.resource import Resource
from fhir_schema.serialization import parse_resource, resource_to_dict, round_trip_differences


def compare_round_trip_serialization(original: dict[str, Any], model: Resource, label: str) -> None:
    """Assert that ``model`` re-encodes to ``original`` and that decoding the encoding is stable."""
    assert_that(round_trip_differences(original), empty(), f"{label}: encoded document differs from input")

    encoded = resource_to_dict(model)
    decoded = parse_resource(encoded)
    assert_that(decoded, equal_to(model), f"{label}: decode(encode(model)) differs from model")
    assert_that(resource_to_dict(decoded), equal_to(encoded), f"{label}: second encoding differs from first")
