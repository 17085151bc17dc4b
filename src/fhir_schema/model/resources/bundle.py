"""
FHIR R5 Bundle: a container for a collection of resources.

Entry resources are decoded through the resource registry, so a searchset of
Patients yields :class:`~fhir_schema.model.resources.patient.Patient` instances.

See: https://hl7.org/fhir/R5/bundle.html
"""

from collections.abc import Iterator
from typing import Any, Literal

from fhir_schema.model.codes import FhirCode
from fhir_schema.model.datatypes import BackboneElement, Identifier, Signature
from fhir_schema.model.primitives import Decimal, FhirInstant, UnsignedInt, Uri
from fhir_schema.model.resource import EmbeddedResource, Resource


class BundleType(FhirCode):
    document = "document"
    message = "message"
    transaction = "transaction"
    transaction_response = "transaction-response"
    batch = "batch"
    batch_response = "batch-response"
    history = "history"
    searchset = "searchset"
    collection = "collection"
    subscription_notification = "subscription-notification"


class SearchEntryMode(FhirCode):
    match = "match"
    include = "include"
    outcome = "outcome"


class HttpVerb(FhirCode):
    get = "GET"
    head = "HEAD"
    post = "POST"
    put = "PUT"
    delete = "DELETE"
    patch = "PATCH"


class BundleLink(BackboneElement):
    relation: str
    url: Uri


class BundleEntrySearch(BackboneElement):
    mode: SearchEntryMode | None = None
    score: Decimal | None = None


class BundleEntryRequest(BackboneElement):
    method: HttpVerb
    url: Uri
    if_none_match: str | None = None
    if_modified_since: FhirInstant | None = None
    if_match: str | None = None
    if_none_exist: str | None = None


class BundleEntryResponse(BackboneElement):
    status: str
    location: Uri | None = None
    etag: str | None = None
    last_modified: FhirInstant | None = None
    outcome: EmbeddedResource = None


class BundleEntry(BackboneElement):
    link: list[BundleLink] | None = None
    full_url: Uri | None = None
    resource: EmbeddedResource = None
    search: BundleEntrySearch | None = None
    request: BundleEntryRequest | None = None
    response: BundleEntryResponse | None = None


class Bundle(Resource):
    resource_type: Literal["Bundle"] = "Bundle"
    identifier: Identifier | None = None
    type: BundleType
    timestamp: FhirInstant | None = None
    total: UnsignedInt | None = None
    link: list[BundleLink] | None = None
    entry: list[BundleEntry] | None = None
    signature: Signature | None = None
    issues: EmbeddedResource = None

    def resources(self, resource_type: str | None = None) -> Iterator[Resource | dict[str, Any]]:
        """Iterate over entry resources, optionally only those of one ``resourceType``."""
        for entry in self.entry or []:
            resource = entry.resource
            if resource is None:
                continue
            entry_type = resource.resource_type if isinstance(resource, Resource) else resource.get("resourceType")
            if resource_type is None or entry_type == resource_type:
                yield resource

    def link_url(self, relation: str) -> str | None:
        return next((link.url for link in self.link or [] if link.relation == relation), None)
