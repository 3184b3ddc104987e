"""
Analyzer base — the contract between the registry and individual rules.

Every rule is an ``Analyzer``: it declares which resource kinds it reads
and, when run, walks the snapshot through an ``AnalysisContext`` and
reports findings.  Analyzers never raise for a finding.

To add a rule:
    1. Subclass Analyzer
    2. Implement metadata and analyze
    3. Register it in the AnalyzerRegistry
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict, Field

from meshcheck.core.analysis.context import AnalysisContext


class AnalyzerMetadata(BaseModel):
    """Identity of a rule and the resource kinds it needs."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    inputs: tuple[str, ...] = Field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "inputs": list(self.inputs),
        }


class Analyzer(ABC):
    """Abstract base class for all analyzers."""

    @property
    @abstractmethod
    def metadata(self) -> AnalyzerMetadata:
        """Name, description and input kinds of this analyzer."""

    @abstractmethod
    def analyze(self, ctx: AnalysisContext) -> None:
        """Inspect the snapshot and report findings through ``ctx``.

        Called once per analysis pass.  Must not mutate the snapshot.
        """

    @property
    def name(self) -> str:
        return self.metadata.name

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
