FHIR_VERSION = "5.0.0"
DEFAULT_SERVER_BASE = "http://hl7.org/fhir"
DEFAULT_JSON_INDENT = 2
PRIMITIVE_EXTENSION_PREFIX = "_"
