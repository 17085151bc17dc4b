import logging
import os
from enum import StrEnum
from functools import cache
from typing import Any

from yarl import URL

from fhir_schema.config.constants import DEFAULT_JSON_INDENT, DEFAULT_SERVER_BASE

LOG_LEVEL = logging.getLevelNamesMapping().get(os.getenv("LOG_LEVEL", ""), logging.WARNING)


class UnknownElementPolicy(StrEnum):
    preserve = "preserve"
    reject = "reject"


@cache
def config() -> dict[str, Any]:
    unknown_elements = UnknownElementPolicy(os.getenv("FHIR_UNKNOWN_ELEMENTS", UnknownElementPolicy.preserve).lower())
    json_indent = int(os.getenv("FHIR_JSON_INDENT", str(DEFAULT_JSON_INDENT)))
    server_base = URL(os.getenv("FHIR_SERVER_BASE", DEFAULT_SERVER_BASE))

    return {
        "log_level": LOG_LEVEL,
        "unknown_elements": unknown_elements,
        "json_indent": json_indent,
        "server_base": server_base,
    }
