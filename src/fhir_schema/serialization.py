"""
Decoding FHIR JSON into resource models and encoding them back.

Encoding omits absent elements and writes choice elements under their typed
``<name><Type>`` key, so decoding a document and encoding the result gives back
an equivalent document.
"""

import json
import logging
from collections.abc import Mapping
from os import PathLike
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from fhir_schema.config.config import UnknownElementPolicy, config
from fhir_schema.config.constants import PRIMITIVE_EXTENSION_PREFIX
from fhir_schema.errors import FhirDecodeError, MissingResourceTypeError, UnknownElementError, UnknownResourceTypeError
from fhir_schema.logging.logs_manager import add_source_to_logger
from fhir_schema.model.choice import ChoiceValue
from fhir_schema.model.resource import Resource
from fhir_schema.registry import get_registry

logger = logging.getLogger(__name__)

RawJson = bytes | str | Mapping[str, Any]


def load_json(raw: RawJson) -> dict[str, Any]:
    if isinstance(raw, Mapping):
        return dict(raw)
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        msg = f"Invalid JSON: {e}"
        raise FhirDecodeError(msg) from e
    if not isinstance(data, dict):
        msg = f"FHIR resource JSON must be an object, not {type(data).__name__}"
        raise FhirDecodeError(msg)
    return data


def _model_for(data: Mapping[str, Any]) -> type[Resource]:
    resource_type = data.get("resourceType")
    if not isinstance(resource_type, str) or not resource_type:
        raise MissingResourceTypeError
    model = get_registry().get(resource_type)
    if model is None:
        raise UnknownResourceTypeError(resource_type)
    return model


def parse_resource(data: Mapping[str, Any], *, strict: bool | None = None) -> Resource:
    """Decode a parsed FHIR JSON object into the model its ``resourceType`` names.

    :param strict: reject unrecognised elements; defaults to the ``FHIR_UNKNOWN_ELEMENTS`` setting.
    """
    if not isinstance(data, Mapping):
        msg = f"FHIR resource JSON must be an object, not {type(data).__name__}"
        raise FhirDecodeError(msg)

    resource = _model_for(data).model_validate(data)

    if strict is None:
        strict = config()["unknown_elements"] == UnknownElementPolicy.reject
    paths = unknown_elements(resource)
    if paths:
        if strict:
            raise UnknownElementError(resource.resource_type, paths)
        logger.info(
            "Preserving unrecognised elements", extra={"resource_type": resource.resource_type, "paths": paths}
        )
    return resource


def parse_resource_json(raw: bytes | str, *, strict: bool | None = None) -> Resource:
    return parse_resource(load_json(raw), strict=strict)


@add_source_to_logger()
def decode_file(path: str | PathLike[str], *, strict: bool | None = None) -> Resource:
    """Decode the FHIR JSON resource stored at ``path``."""
    logger.debug("Decoding resource file", extra={"path": str(path)})
    return parse_resource_json(Path(path).read_bytes(), strict=strict)


def resource_to_dict(resource: BaseModel) -> dict[str, Any]:
    return resource.model_dump(by_alias=True, exclude_none=True, mode="json")


def resource_to_json(resource: BaseModel, indent: int | None = None) -> str:
    if indent is None:
        indent = config()["json_indent"]
    return json.dumps(resource_to_dict(resource), indent=indent or None, ensure_ascii=False)


def round_trip_differences(raw: RawJson, model: type[Resource] | None = None) -> list[str]:
    """Decode ``raw``, encode it again and list the paths where the two documents differ.

    An empty list means the model reproduced the document exactly. Numbers compare by
    value, so ``100`` and ``100.0`` are equal.
    """
    original = load_json(raw)
    resource = (model or _model_for(original)).model_validate(original)
    encoded = resource_to_dict(resource)

    differences: list[str] = []
    _collect_differences(original, encoded, str(original.get("resourceType", "$")), differences)
    if differences:
        logger.warning(
            "Round trip changed the document",
            extra={"resource_type": original.get("resourceType"), "paths": differences},
        )
    return differences


def _collect_differences(original: Any, encoded: Any, path: str, differences: list[str]) -> None:  # noqa: ANN401
    if isinstance(original, dict) and isinstance(encoded, dict):
        for key in sorted(original.keys() | encoded.keys()):
            if key not in original or key not in encoded:
                differences.append(f"{path}.{key}")
            else:
                _collect_differences(original[key], encoded[key], f"{path}.{key}", differences)
    elif isinstance(original, list) and isinstance(encoded, list):
        if len(original) != len(encoded):
            differences.append(path)
            return
        for index, (left, right) in enumerate(zip(original, encoded, strict=True)):
            _collect_differences(left, right, f"{path}[{index}]", differences)
    elif isinstance(original, bool) != isinstance(encoded, bool) or original != encoded:
        differences.append(path)


def unknown_elements(model: BaseModel, path: str | None = None) -> list[str]:
    """List the paths of elements that were kept verbatim because no model declares them.

    Primitive extension siblings (``_birthDate``) are not counted.
    """
    if path is None:
        path = getattr(model, "resource_type", type(model).__name__)

    found = [
        f"{path}.{key}"
        for key in model.model_extra or {}
        if not key.startswith(PRIMITIVE_EXTENSION_PREFIX)
    ]
    for name, info in type(model).model_fields.items():
        value = getattr(model, name)
        if value is None:
            continue
        wire_name = info.alias or name
        if isinstance(value, ChoiceValue):
            found.extend(_unknown_in_value(value.value, f"{path}.{wire_name}{value.type}"))
        else:
            found.extend(_unknown_in_value(value, f"{path}.{wire_name}"))
    return found


def _unknown_in_value(value: Any, path: str) -> list[str]:  # noqa: ANN401
    if isinstance(value, list):
        return [found for index, item in enumerate(value) for found in _unknown_in_value(item, f"{path}[{index}]")]
    if isinstance(value, ChoiceValue):
        return _unknown_in_value(value.value, path)
    if isinstance(value, BaseModel):
        return unknown_elements(value, path)
    return []
