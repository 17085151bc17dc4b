from .errors import (
    FhirDecodeError,
    FhirSchemaError,
    InvalidCodeError,
    MissingResourceTypeError,
    UnknownElementError,
    UnknownResourceTypeError,
)
from .model.choice import ChoiceValue, choice_of
from .model.resource import DomainResource, Resource
from .references import ReferenceTarget, parse_reference
from .registry import ResourceRegistry, get_registry
from .serialization import (
    decode_file,
    parse_resource,
    parse_resource_json,
    resource_to_dict,
    resource_to_json,
    round_trip_differences,
    unknown_elements,
)

__all__ = [
    "ChoiceValue",
    "DomainResource",
    "FhirDecodeError",
    "FhirSchemaError",
    "InvalidCodeError",
    "MissingResourceTypeError",
    "ReferenceTarget",
    "Resource",
    "ResourceRegistry",
    "UnknownElementError",
    "UnknownResourceTypeError",
    "choice_of",
    "decode_file",
    "get_registry",
    "parse_reference",
    "parse_resource",
    "parse_resource_json",
    "resource_to_dict",
    "resource_to_json",
    "round_trip_differences",
    "unknown_elements",
]
