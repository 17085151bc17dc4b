import logging
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:  # pragma: no cover
    from fhir_schema.model.resource import Resource

logger = logging.getLogger(__name__)


class ResourceRegistry:
    """Registry of concrete resource models keyed by their ``resourceType``.

    Every concrete resource class registers itself as a default when it is defined, so
    importing :mod:`fhir_schema.model.resources` populates the registry with the full set.
    Instances start from a copy of the defaults and can be extended independently.

    Example usage:
        registry = get_registry()
        model = registry.get("Patient")
        patient = model.model_validate(data)
    """

    _default_resources: ClassVar[dict[str, type["Resource"]]] = {}

    def __init__(self) -> None:
        self._resources: dict[str, type[Resource]] = dict(self._default_resources)

    @classmethod
    def register_default(cls, resource_type: str, model: type["Resource"]) -> None:
        """Register a model for all registry instances created afterwards."""
        existing = cls._default_resources.get(resource_type)
        if existing is not None and existing is not model:
            logger.warning(
                "Replacing registered resource model",
                extra={"resource_type": resource_type, "previous": existing.__qualname__, "model": model.__qualname__},
            )
        cls._default_resources[resource_type] = model

    @classmethod
    def get_default_resources(cls) -> dict[str, type["Resource"]]:
        """Get a copy of the default models. Useful for testing."""
        return cls._default_resources.copy()

    @classmethod
    def set_default_resources(cls, resources: dict[str, type["Resource"]]) -> None:
        """Set the default models. Useful for testing."""
        cls._default_resources = resources

    def register(self, resource_type: str, model: type["Resource"]) -> None:
        self._resources[resource_type] = model

    def get(self, resource_type: str) -> type["Resource"] | None:
        return self._resources.get(resource_type)

    def has(self, resource_type: str) -> bool:
        return resource_type in self._resources

    @property
    def resource_types(self) -> list[str]:
        return sorted(self._resources)


_registry: ResourceRegistry | None = None


def get_registry() -> ResourceRegistry:
    """Return the shared registry, populated with every resource model in the package."""
    global _registry  # noqa: PLW0603
    if _registry is None:
        import fhir_schema.model.resources  # noqa: F401, PLC0415

        _registry = ResourceRegistry()
    return _registry
