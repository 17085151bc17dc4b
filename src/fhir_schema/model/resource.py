"""
Resource and DomainResource, the bases of every top-level FHIR resource.

See: https://hl7.org/fhir/R5/resource.html and https://hl7.org/fhir/R5/domainresource.html
"""

import logging
from typing import Annotated, Any

from pydantic import BeforeValidator

from fhir_schema.model.base import FhirBaseModel
from fhir_schema.model.datatypes import Extension, Meta, Narrative, Reference
from fhir_schema.model.primitives import Code, Id, Uri
from fhir_schema.registry import ResourceRegistry, get_registry

logger = logging.getLogger(__name__)


class Resource(FhirBaseModel):
    """
    Base for all resources.

    Concrete resources narrow ``resource_type`` to a ``Literal`` of their own name, which
    makes ``resourceType`` a checked discriminator and registers the class for dispatch.
    """

    resource_type: str
    id: Id | None = None
    meta: Meta | None = None
    implicit_rules: Uri | None = None
    language: Code | None = None

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:  # noqa: ANN401
        super().__pydantic_init_subclass__(**kwargs)
        resource_type = cls.model_fields["resource_type"].default
        if isinstance(resource_type, str):
            ResourceRegistry.register_default(resource_type, cls)

    def as_reference(self, display: str | None = None) -> Reference:
        if self.id is None:
            msg = f"{self.resource_type} has no id to reference"
            raise ValueError(msg)
        return Reference(reference=f"{self.resource_type}/{self.id}", display=display)


def as_resource(value: Any) -> Any:  # noqa: ANN401
    """Decode an embedded resource through the registry; unregistered types stay as JSON."""
    if not isinstance(value, dict):
        return value

    resource_type = value.get("resourceType")
    model = get_registry().get(resource_type) if isinstance(resource_type, str) else None
    if model is None:
        logger.debug("Keeping unregistered embedded resource as JSON", extra={"resource_type": resource_type})
        return value
    return model.model_validate(value)


EmbeddedResource = Annotated[Any, BeforeValidator(as_resource)]


class DomainResource(Resource):
    text: Narrative | None = None
    contained: list[EmbeddedResource] | None = None
    extension: list[Extension] | None = None
    modifier_extension: list[Extension] | None = None

    def find_contained(self, reference: str) -> Resource | dict[str, Any] | None:
        """Return the contained resource a local reference (``#id`` or ``id``) points to."""
        local_id = reference.removeprefix("#")
        for item in self.contained or []:
            item_id = item.id if isinstance(item, Resource) else item.get("id")
            if item_id == local_id:
                return item
        return None

    def extensions_for(self, url: str) -> list[Extension]:
        return [extension for extension in self.extension or [] if extension.url == url]
