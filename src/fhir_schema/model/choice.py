"""
Choice-type ("value[x]") elements.

FHIR lets some elements carry one of several data types and records the chosen
type in the JSON key (``valueQuantity``, ``onsetDateTime``). On the model each
such element is a single attribute holding a :class:`ChoiceValue` variant, so
at most one alternative can ever be populated. :class:`~fhir_schema.model.base.FhirBaseModel`
translates between the flat ``<name><Type>`` keys on the wire and the variant.

Declaring a choice element::

    ObservationValue = choice_of(Quantity=Quantity, String=str, Boolean=Boolean)

    class Observation(DomainResource):
        value: ObservationValue = None

See: https://hl7.org/fhir/R5/formats.html#choice
"""

from dataclasses import dataclass
from functools import cache
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, Field, create_model
from pydantic.alias_generators import to_camel

_VARIANTS: dict[str, type["ChoiceValue"]] = {}


class ChoiceValue(BaseModel):
    """The populated alternative of a choice element: the FHIR type name and its value."""

    type: str
    value: Any

    @classmethod
    def of(cls, type_name: str, value: Any) -> "ChoiceValue":  # noqa: ANN401
        """Build the variant for ``type_name``, e.g. ``ChoiceValue.of("Boolean", True)``."""
        try:
            variant = _VARIANTS[type_name]
        except KeyError:
            msg = f"No choice element accepts the type {type_name!r}"
            raise ValueError(msg) from None
        return variant(type=type_name, value=value)


@dataclass(frozen=True)
class ChoiceSpec:
    type_names: tuple[str, ...]
    required: bool = False


@dataclass(frozen=True)
class ChoiceElement:
    attribute: str
    wire_name: str
    spec: ChoiceSpec

    def key_for(self, type_name: str) -> str:
        return f"{self.wire_name}{type_name}"


def _variant(type_name: str, value_type: Any) -> type[ChoiceValue]:  # noqa: ANN401
    # FHIR type names are globally unique, so one variant class per name is shared by every choice element.
    variant = _VARIANTS.get(type_name)
    if variant is None:
        variant = create_model(
            f"{type_name}Choice",
            __base__=ChoiceValue,
            type=(Literal[type_name], type_name),
            value=(value_type, ...),
        )
        _VARIANTS[type_name] = variant
    return variant


def choice_of(*, required: bool = False, **variants: Any) -> Any:  # noqa: ANN401
    """Build the annotated type of a choice element from its FHIR type names and Python types."""
    if len(variants) < 2:  # noqa: PLR2004
        msg = "A choice element needs at least two alternative types"
        raise TypeError(msg)

    members = tuple(_variant(type_name, value_type) for type_name, value_type in variants.items())
    union = Annotated[Union[members], Field(discriminator="type")]  # noqa: UP007
    spec = ChoiceSpec(type_names=tuple(variants), required=required)
    if required:
        return Annotated[union, spec]
    return Annotated[Optional[union], spec]  # noqa: UP007


def rebuild_choice_variants() -> None:
    """Resolve forward references in variants created before their value types were complete."""
    for variant in _VARIANTS.values():
        variant.model_rebuild()


@cache
def choice_elements(model: type[BaseModel]) -> tuple[ChoiceElement, ...]:
    return tuple(
        ChoiceElement(attribute=name, wire_name=info.alias or to_camel(name), spec=spec)
        for name, info in model.model_fields.items()
        for spec in info.metadata
        if isinstance(spec, ChoiceSpec)
    )
