"""
Domain models — Pydantic types for snapshot resources and findings.

All models are re-exported here for convenient access:

    from meshcheck.core.models import Gateway, Pod, Secret, Diagnostic, Settings
"""

from meshcheck.core.models.diagnostic import Diagnostic, Level, MessageType
from meshcheck.core.models.gateway import Gateway, GatewaySpec, Port, Server, ServerTLS
from meshcheck.core.models.resource import ObjectMeta, Resource, ResourceName
from meshcheck.core.models.settings import Settings, WorkloadFallback
from meshcheck.core.models.suppression import Suppression
from meshcheck.core.models.workload import Pod, Secret

# Kinds the manifest loader turns into typed resources
RESOURCE_MODELS: dict[str, type[Resource]] = {
    model.KIND: model for model in (Gateway, Pod, Secret)
}

__all__ = [
    "RESOURCE_MODELS",
    "Diagnostic",
    "Gateway",
    "GatewaySpec",
    "Level",
    "MessageType",
    "ObjectMeta",
    "Pod",
    "Port",
    "Resource",
    "ResourceName",
    "Secret",
    "Server",
    "ServerTLS",
    "Settings",
    "Suppression",
    "WorkloadFallback",
]
