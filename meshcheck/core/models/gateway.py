"""
Gateway model — an Istio ``networking.istio.io`` Gateway.

Only the fields the analyzers read are modelled; everything else in
the manifest is ignored.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from meshcheck.core.models.resource import Resource, null_as_default


class Port(BaseModel):
    """The port a server listens on."""

    model_config = ConfigDict(extra="ignore")

    number: int = 0
    name: str = ""
    protocol: str = ""


class ServerTLS(BaseModel):
    """TLS settings of a gateway server.

    ``credential_name`` names a Secret holding the certificate and key.
    It is looked up in the namespace of the gateway workload.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    mode: str = ""
    credential_name: str | None = Field(default=None, alias="credentialName")
    https_redirect: bool = Field(default=False, alias="httpsRedirect")


class Server(BaseModel):
    """A listener on the gateway (port + hosts + optional TLS)."""

    model_config = ConfigDict(extra="ignore")

    name: str = ""
    port: Port | None = None
    hosts: list[str] = Field(default_factory=list)
    tls: ServerTLS | None = None

    _null_hosts = field_validator("hosts", mode="before")(null_as_default)


class GatewaySpec(BaseModel):
    model_config = ConfigDict(extra="ignore")

    selector: dict[str, str] = Field(default_factory=dict)
    servers: list[Server] = Field(default_factory=list)

    _null_fields = field_validator("selector", "servers", mode="before")(null_as_default)


class Gateway(Resource):
    """An Istio Gateway.

    ``selector`` picks the workload (pods) that implements the gateway.
    An empty selector selects every pod.
    """

    KIND: ClassVar[str] = "Gateway"
    API_GROUP: ClassVar[str] = "networking.istio.io"

    spec: GatewaySpec = Field(default_factory=GatewaySpec)

    _null_spec = field_validator("spec", mode="before")(null_as_default)

    @property
    def selector(self) -> dict[str, str]:
        return self.spec.selector

    @property
    def servers(self) -> list[Server]:
        return self.spec.servers
