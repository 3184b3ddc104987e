"""
Resource identity — namespaced names and object metadata.

Every object in a configuration snapshot is addressed by a
``ResourceName`` (namespace + short name).  Cluster-scoped objects
have an empty namespace.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


def null_as_default(cls: type[BaseModel], value: Any, info: ValidationInfo) -> Any:
    """Before-validator: a key with no value (``labels:``) gets the field default.

    Kubernetes treats an empty YAML key as an empty map or list.
    """
    if value is None:
        return cls.model_fields[info.field_name].get_default(call_default_factory=True)
    return value


class ResourceName(BaseModel):
    """A namespaced resource name, rendered as ``namespace/name``."""

    model_config = ConfigDict(frozen=True)

    namespace: str = ""
    name: str

    @classmethod
    def parse(cls, full_name: str) -> ResourceName:
        """Parse ``namespace/name`` (or a bare ``name``)."""
        namespace, sep, name = full_name.partition("/")
        if not sep:
            return cls(name=full_name)
        return cls(namespace=namespace, name=name)

    @classmethod
    def short_or_full(cls, namespace: str, name: str) -> ResourceName:
        """Qualify ``name`` with ``namespace`` unless it is already ``ns/name``."""
        if "/" in name:
            return cls.parse(name)
        return cls(namespace=namespace, name=name)

    def __str__(self) -> str:
        if self.namespace:
            return f"{self.namespace}/{self.name}"
        return self.name


class ObjectMeta(BaseModel):
    """The subset of Kubernetes ``metadata`` the analyzers read."""

    model_config = ConfigDict(extra="ignore")

    name: str
    namespace: str = ""
    labels: dict[str, str] = Field(default_factory=dict)

    _null_fields = field_validator("namespace", "labels", mode="before")(null_as_default)


class Resource(BaseModel):
    """Base class for typed snapshot entries.

    Subclasses set ``KIND`` and ``API_GROUP``; the manifest loader uses
    them to decide which model a YAML document becomes.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    KIND: ClassVar[str] = ""
    API_GROUP: ClassVar[str] = ""   # "" is the core group (apiVersion: v1)

    metadata: ObjectMeta

    @property
    def resource_name(self) -> ResourceName:
        return ResourceName(namespace=self.metadata.namespace, name=self.metadata.name)

    @property
    def namespace(self) -> str:
        return self.metadata.namespace

    @property
    def labels(self) -> dict[str, str]:
        return self.metadata.labels

    @classmethod
    def accepts_api_version(cls, api_version: str) -> bool:
        """Whether a document's ``apiVersion`` belongs to this model's group."""
        group, sep, _ = api_version.rpartition("/")
        if not sep:
            return cls.API_GROUP == ""
        return group == cls.API_GROUP

    def __str__(self) -> str:
        return f"{self.KIND} {self.resource_name}"
