from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    model_serializer,
    model_validator,
)
from pydantic.alias_generators import to_camel

from fhir_schema.model.choice import choice_elements


class FhirBaseModel(BaseModel):
    """
    Base for every FHIR element and resource model.

    Attributes are snake_case; the wire names are the FHIR camelCase element names.
    Elements the model does not declare are kept as extras and written back out, so
    decoding never silently drops data.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        validate_assignment=True,
        protected_namespaces=(),
    )

    @model_validator(mode="before")
    @classmethod
    def collapse_choice_elements(cls, data: Any) -> Any:  # noqa: ANN401
        elements = choice_elements(cls)
        if not elements or not isinstance(data, dict):
            return data

        data = dict(data)
        for element in elements:
            present = [type_name for type_name in element.spec.type_names if element.key_for(type_name) in data]
            if not present:
                continue
            if len(present) > 1:
                keys = ", ".join(element.key_for(type_name) for type_name in present)
                msg = f"{element.wire_name}[x] must hold a single type, found {keys}"
                raise ValueError(msg)
            if element.wire_name in data or element.attribute in data:
                msg = f"{element.wire_name}[x] given both as {element.key_for(present[0])} and {element.wire_name}"
                raise ValueError(msg)

            type_name = present[0]
            data[element.wire_name] = {"type": type_name, "value": data.pop(element.key_for(type_name))}
        return data

    @model_serializer(mode="wrap")
    def expand_choice_elements(self, handler: SerializerFunctionWrapHandler, info: SerializationInfo) -> dict[str, Any]:
        data = handler(self)
        if not info.by_alias:
            return data

        for element in choice_elements(type(self)):
            encoded = data.pop(element.wire_name, None)
            if isinstance(encoded, dict) and "value" in encoded:
                # Dump options can drop the tag, so read it from the model.
                variant = getattr(self, element.attribute)
                data[element.key_for(variant.type)] = encoded["value"]
        return data
