import argparse
import sys
from collections.abc import Sequence

from pydantic import ValidationError

from fhir_schema.config.constants import FHIR_VERSION
from fhir_schema.logging.logs_manager import init_logging
from fhir_schema.outcome import fhir_path, outcome_from_exception
from fhir_schema.serialization import resource_to_json
from fhir_validation_api.validators.resource_validator import (
    ValidationReport,
    find_resource_files,
    validate_resource_file,
)

GREEN = "\033[92m"
RESET = "\033[0m"
YELLOW = "\033[93m"
RED = "\033[91m"


def refine_error(e: ValidationError) -> str:
    """Return a short error message with one line per failing element."""
    lines = [f"Validation Error: {len(e.errors())} validation error(s)"]

    for err in e.errors():
        loc = fhir_path(e.title, tuple(err["loc"]))
        msg = err["msg"]
        type_ = err["type"]

        lines.append(f"{loc} : {msg} [type={type_}]")

    return "\n".join(lines)


def report_result(report: ValidationReport, *, outcome: bool) -> None:
    if report.ok:
        sys.stdout.write(f"{GREEN}Valid {report.resource_type}: {report.path}{RESET}\n")
        return

    if report.error is None:
        differences = "\n".join(report.differences)
        sys.stderr.write(f"{YELLOW}Round trip changed {report.path}:\n{differences}{RESET}\n")
    elif isinstance(report.error, ValidationError):
        sys.stderr.write(f"{YELLOW}{report.path}\n{refine_error(report.error)}{RESET}\n")
    else:
        sys.stderr.write(f"{RED}{report.path}: {report.error}{RESET}\n")

    if outcome and report.error is not None:
        sys.stdout.write(resource_to_json(outcome_from_exception(report.error)) + "\n")


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=f"Validate FHIR {FHIR_VERSION} JSON resources.")
    parser.add_argument("--version", action="version", version=f"%(prog)s (FHIR {FHIR_VERSION})")
    parser.add_argument("paths", nargs="+", help="Resource JSON files, or directories to search for *.json")
    parser.add_argument("--strict", action="store_true", help="Reject elements the models do not define")
    parser.add_argument("--round-trip", action="store_true", help="Check that re-encoding reproduces each document")
    parser.add_argument("--outcome", action="store_true", help="Print an OperationOutcome for each failure")
    args = parser.parse_args(argv)

    init_logging()

    files = find_resource_files(args.paths)
    if not files:
        sys.stderr.write(f"{RED}No resource files found{RESET}\n")
        return 1

    failures = 0
    for path in files:
        report = validate_resource_file(path, strict=args.strict or None, round_trip=args.round_trip)
        report_result(report, outcome=args.outcome)
        failures += not report.ok

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
