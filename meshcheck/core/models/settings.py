"""
Settings model — analyzer configuration loaded from meshcheck.yml.

Every field has a default, so an absent settings file behaves the
same as an empty one.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from meshcheck.core.models.diagnostic import Level
from meshcheck.core.models.suppression import Suppression


class WorkloadFallback(BaseModel):
    """Namespace assumed for a well-known gateway workload.

    The default ingress gateway is often not part of the analyzed
    configuration.  A gateway whose selector carries every label of
    ``selector`` and matches no pod is assumed to run in ``namespace``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    selector: dict[str, str] = Field(default_factory=lambda: {"istio": "ingressgateway"})
    namespace: str = "istio-system"

    def applies_to(self, selector: Mapping[str, str]) -> bool:
        if not self.selector:
            return False
        return all(selector.get(key) == value for key, value in self.selector.items())


class Settings(BaseModel):
    """Top-level analyzer settings."""

    model_config = ConfigDict(extra="forbid")

    default_namespace: str = "default"     # for manifests without metadata.namespace
    fallback: WorkloadFallback | None = Field(default_factory=WorkloadFallback)
    disabled_analyzers: list[str] = Field(default_factory=list)
    suppress: list[Suppression] = Field(default_factory=list)
    output_threshold: Level = Level.INFO
    failure_threshold: Level = Level.ERROR

    @field_validator("suppress", mode="before")
    @classmethod
    def _parse_suppressions(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [Suppression.parse(v) if isinstance(v, str) else v for v in value]
        return value

    @field_validator("output_threshold", "failure_threshold", mode="before")
    @classmethod
    def _parse_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return Level.parse(value)
        return value
