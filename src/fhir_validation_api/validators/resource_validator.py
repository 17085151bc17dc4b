import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from pydantic import ValidationError

from fhir_schema.errors import FhirSchemaError
from fhir_schema.serialization import decode_file, round_trip_differences

logger = logging.getLogger(__name__)


@dataclass
class ValidationReport:
    path: Path
    resource_type: str | None = None
    error: Exception | None = None
    differences: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None and not self.differences


def find_resource_files(paths: Iterable[str | Path]) -> list[Path]:
    """Expand directories into the ``*.json`` files beneath them; files are kept as given."""
    found: list[Path] = []
    for path in map(Path, paths):
        if path.is_dir():
            found.extend(sorted(path.rglob("*.json")))
        else:
            found.append(path)
    return found


def validate_resource_file(
    path: str | Path, *, strict: bool | None = None, round_trip: bool = False
) -> ValidationReport:
    """Decode one resource file; ``strict=None`` follows the ``FHIR_UNKNOWN_ELEMENTS`` setting."""
    path = Path(path)
    try:
        resource = decode_file(path, strict=strict)
    except (ValidationError, FhirSchemaError, OSError) as e:
        logger.info("Resource file is invalid", extra={"path": str(path), "error_type": type(e).__name__})
        return ValidationReport(path=path, error=e)

    report = ValidationReport(path=path, resource_type=resource.resource_type)
    if round_trip:
        report.differences = round_trip_differences(path.read_bytes())
    return report
