"""
Message catalog — the diagnostic types analyzers can emit.

Codes follow Istio's ``istioctl analyze`` numbering so reports line
up with upstream documentation.
"""

from __future__ import annotations

from meshcheck.core.models.diagnostic import Diagnostic, Level, MessageType
from meshcheck.core.models.resource import Resource

REFERENCED_RESOURCE_NOT_FOUND = MessageType(
    code="IST0101",
    name="ReferencedResourceNotFound",
    level=Level.ERROR,
    template='Referenced {0} not found: "{1}"',
)

CATALOG: dict[str, MessageType] = {
    message.code: message for message in (REFERENCED_RESOURCE_NOT_FOUND,)
}


def referenced_resource_not_found(resource: Resource, field: str, value: str) -> Diagnostic:
    """A reference held in ``field`` of ``resource`` does not resolve."""
    return Diagnostic(
        message_type=REFERENCED_RESOURCE_NOT_FOUND,
        kind=resource.KIND,
        resource=resource.resource_name,
        field=field,
        value=value,
    )
