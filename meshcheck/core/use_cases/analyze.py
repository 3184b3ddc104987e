"""
Analyze use case — load manifests, run analyzers, apply suppressions.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from meshcheck.core.analysis.registry import AnalyzerRegistry, default_registry
from meshcheck.core.models.diagnostic import Diagnostic, Level
from meshcheck.core.models.settings import Settings
from meshcheck.core.services.manifests import find_manifest_files, load_manifest_files

logger = logging.getLogger(__name__)


@dataclass
class AnalysisResult:
    """Result of one analysis pass."""

    files: list[Path] = field(default_factory=list)
    resource_counts: dict[str, int] = field(default_factory=dict)
    diagnostics: list[Diagnostic] = field(default_factory=list)
    suppressed: int = 0
    executed: list[str] = field(default_factory=list)
    skipped: dict[str, str] = field(default_factory=dict)
    output_threshold: Level = Level.INFO
    failure_threshold: Level = Level.ERROR

    @property
    def visible(self) -> list[Diagnostic]:
        """Diagnostics at or above the output threshold."""
        return [d for d in self.diagnostics if d.level >= self.output_threshold]

    @property
    def failed(self) -> bool:
        """Whether any diagnostic reaches the failure threshold."""
        return any(d.level >= self.failure_threshold for d in self.diagnostics)

    def count(self, level: Level) -> int:
        return sum(1 for d in self.diagnostics if d.level == level)

    def to_dict(self) -> dict:
        return {
            "ok": not self.failed,
            "files_checked": len(self.files),
            "resources": self.resource_counts,
            "analyzers": {"executed": self.executed, "skipped": self.skipped},
            "issues": [d.to_dict() for d in self.visible],
            "errors": self.count(Level.ERROR),
            "warnings": self.count(Level.WARNING),
            "info": self.count(Level.INFO),
            "suppressed": self.suppressed,
        }


def run_analysis(
    paths: Iterable[Path],
    settings: Settings | None = None,
    registry: AnalyzerRegistry | None = None,
) -> AnalysisResult:
    """Analyze the manifests under ``paths``.

    Args:
        paths: Manifest files and/or directories.
        settings: Analyzer settings (defaults when None).
        registry: Analyzers to run (built-in set when None).

    Returns:
        AnalysisResult with unsuppressed diagnostics in report order.

    Raises:
        ManifestError: If the manifests can't be loaded.
    """
    settings = settings or Settings()
    registry = registry or default_registry(fallback=settings.fallback)

    files = find_manifest_files(paths)
    snapshot = load_manifest_files(files, default_namespace=settings.default_namespace)
    run = registry.run(snapshot, disabled=settings.disabled_analyzers)

    result = AnalysisResult(
        files=files,
        resource_counts=snapshot.counts(),
        executed=run.executed,
        skipped=run.skipped,
        output_threshold=settings.output_threshold,
        failure_threshold=settings.failure_threshold,
    )

    for diagnostic in run.diagnostics:
        if any(rule.matches(diagnostic) for rule in settings.suppress):
            logger.debug("Suppressed: %s", diagnostic)
            result.suppressed += 1
            continue
        result.diagnostics.append(diagnostic)

    logger.info(
        "Analysis done in %d ms: %d issue(s), %d suppressed",
        run.duration_ms, len(result.diagnostics), result.suppressed,
    )
    return result
