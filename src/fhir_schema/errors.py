from collections.abc import Iterable


class FhirSchemaError(Exception):
    """Base class for errors raised by the schema layer."""


class FhirDecodeError(FhirSchemaError, ValueError):
    """The input could not be turned into a FHIR resource."""


class MissingResourceTypeError(FhirDecodeError):
    def __init__(self) -> None:
        super().__init__("FHIR resource JSON must carry a 'resourceType' string")


class UnknownResourceTypeError(FhirDecodeError):
    def __init__(self, resource_type: str) -> None:
        self.resource_type = resource_type
        super().__init__(f"No model registered for resourceType '{resource_type}'")


class UnknownElementError(FhirDecodeError):
    def __init__(self, resource_type: str, paths: Iterable[str]) -> None:
        self.resource_type = resource_type
        self.paths = list(paths)
        super().__init__(f"{resource_type} contains unrecognised elements: {', '.join(self.paths)}")


class InvalidCodeError(FhirSchemaError, ValueError):
    def __init__(self, code_system: str, value: object, allowed: Iterable[str]) -> None:
        self.code_system = code_system
        self.value = value
        self.allowed = list(allowed)
        super().__init__(f"{value!r} is not a valid {code_system}; expected one of {', '.join(self.allowed)}")
