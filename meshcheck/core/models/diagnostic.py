"""
Diagnostic models — the findings analyzers report.

Analyzers never raise for a finding.  Each finding is a ``Diagnostic``:
a catalogued ``MessageType`` applied to one resource, a field tag and
the value that failed.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any

from pydantic import BaseModel, ConfigDict

from meshcheck.core.models.resource import ResourceName


class Level(IntEnum):
    """Severity of a diagnostic, ordered so thresholds compare with ``>=``."""

    INFO = 0
    WARNING = 1
    ERROR = 2

    @property
    def label(self) -> str:
        return self.name.title()

    @classmethod
    def parse(cls, text: str) -> Level:
        """Look up a level by name, case-insensitively."""
        try:
            return cls[text.strip().upper()]
        except KeyError:
            choices = ", ".join(level.name.lower() for level in cls)
            raise ValueError(f"Unknown level '{text}' (expected one of: {choices})") from None


class MessageType(BaseModel):
    """A catalogued kind of finding (stable code + message template)."""

    model_config = ConfigDict(frozen=True)

    code: str           # e.g. IST0101
    name: str           # e.g. ReferencedResourceNotFound
    level: Level
    template: str       # str.format template over (field, value)

    def render(self, *args: Any) -> str:
        return self.template.format(*args)


class Diagnostic(BaseModel):
    """One finding against one resource."""

    model_config = ConfigDict(frozen=True)

    message_type: MessageType
    kind: str                # resource kind, e.g. Gateway
    resource: ResourceName
    field: str               # e.g. "selector", "credentialName"
    value: str

    @property
    def code(self) -> str:
        return self.message_type.code

    @property
    def level(self) -> Level:
        return self.message_type.level

    @property
    def message(self) -> str:
        return self.message_type.render(self.field, self.value)

    @property
    def origin(self) -> str:
        """``Kind namespace/name`` — the form suppressions match against."""
        return f"{self.kind} {self.resource}"

    def __str__(self) -> str:
        return f"{self.level.label} [{self.code}] ({self.origin}) {self.message}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "name": self.message_type.name,
            "level": self.level.label,
            "kind": self.kind,
            "namespace": self.resource.namespace,
            "resource": self.resource.name,
            "field": self.field,
            "value": self.value,
            "message": self.message,
        }
