"""
Literal references: ``Reference.reference`` strings that locate the target resource.

A literal reference is one of

* relative: ``Patient/123`` or ``Patient/123/_history/2``, resolved against the server base,
* absolute: ``http://example.org/fhir/Patient/123``,
* contained: ``#p1``, pointing at a resource in the referring resource's ``contained`` list,
* a URN: ``urn:uuid:...``, typically pointing at another entry in the same Bundle.

See: https://hl7.org/fhir/R5/references.html#literal
"""

import re
from dataclasses import dataclass

from yarl import URL

from fhir_schema.config.config import config

RESOURCE_TYPE_PATTERN = re.compile(r"^[A-Z][A-Za-z]+$")
ID_PATTERN = re.compile(r"^[A-Za-z0-9\-.]{1,64}$")
HISTORY_SEGMENT = "_history"


@dataclass(frozen=True)
class ReferenceTarget:
    resource_type: str | None = None
    id: str | None = None
    version: str | None = None
    base_url: URL | None = None
    fragment: str | None = None
    urn: str | None = None

    @property
    def is_contained(self) -> bool:
        return self.fragment is not None

    @property
    def is_absolute(self) -> bool:
        return self.base_url is not None or self.urn is not None

    @property
    def relative(self) -> str:
        if self.resource_type is None or self.id is None:
            msg = "Only references to a resource type and id have a relative form"
            raise ValueError(msg)
        relative = f"{self.resource_type}/{self.id}"
        return f"{relative}/{HISTORY_SEGMENT}/{self.version}" if self.version else relative

    def absolute(self, base: URL | str | None = None) -> URL:
        """Resolve against the reference's own base, else ``base``, else the configured server base."""
        if self.urn is not None:
            return URL(self.urn)
        if self.is_contained:
            msg = f"Contained reference #{self.fragment} has no absolute form"
            raise ValueError(msg)

        server_base = self.base_url or (URL(base) if base is not None else config()["server_base"])
        return server_base.joinpath(*self.relative.split("/"))


def _split_path(segments: list[str], text: str) -> tuple[list[str], str, str, str | None]:
    """Split ``[...base, Type, id, (_history, version)]`` into its parts."""
    version = None
    if len(segments) >= 4 and segments[-2] == HISTORY_SEGMENT:  # noqa: PLR2004
        version = segments[-1]
        segments = segments[:-2]
    if len(segments) < 2:  # noqa: PLR2004
        msg = f"{text!r} is not a literal reference"
        raise ValueError(msg)

    *base, resource_type, resource_id = segments
    if not RESOURCE_TYPE_PATTERN.match(resource_type) or not ID_PATTERN.match(resource_id):
        msg = f"{text!r} is not a literal reference"
        raise ValueError(msg)
    return base, resource_type, resource_id, version


def parse_reference(text: str) -> ReferenceTarget:
    """Parse ``Reference.reference``, raising :class:`ValueError` when it is not a literal reference."""
    text = text.strip()
    if not text:
        msg = "Empty reference"
        raise ValueError(msg)

    if text.startswith("#"):
        return ReferenceTarget(fragment=text[1:])

    if text.startswith(("urn:uuid:", "urn:oid:")):
        return ReferenceTarget(urn=text)

    url = URL(text)
    if url.is_absolute():
        segments = [segment for segment in url.parts if segment and segment != "/"]
        base, resource_type, resource_id, version = _split_path(segments, text)
        base_url = url.with_path("/" + "/".join(base))
        return ReferenceTarget(resource_type=resource_type, id=resource_id, version=version, base_url=base_url)

    _, resource_type, resource_id, version = _split_path(text.split("/"), text)
    return ReferenceTarget(resource_type=resource_type, id=resource_id, version=version)
