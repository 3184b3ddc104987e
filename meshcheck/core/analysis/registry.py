"""
Analyzer registry — central dispatch for all analyzers.

The registry owns registration, lookup and execution.  An analyzer only
runs when the snapshot provides every resource kind it declares as an
input; otherwise it is skipped and logged.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from meshcheck.core.analysis.analyzer import Analyzer
from meshcheck.core.analysis.context import AnalysisContext
from meshcheck.core.analysis.gateway.secret import DEFAULT_FALLBACK, SecretAnalyzer
from meshcheck.core.analysis.snapshot import Snapshot
from meshcheck.core.models.diagnostic import Diagnostic
from meshcheck.core.models.settings import WorkloadFallback

logger = logging.getLogger(__name__)


@dataclass
class RegistryRun:
    """Outcome of running a registry over one snapshot."""

    diagnostics: list[Diagnostic] = field(default_factory=list)
    executed: list[str] = field(default_factory=list)
    skipped: dict[str, str] = field(default_factory=dict)   # name -> reason
    duration_ms: int = 0


class AnalyzerRegistry:
    """Central registry and dispatcher for analyzers."""

    def __init__(self) -> None:
        self._analyzers: dict[str, Analyzer] = {}

    def register(self, analyzer: Analyzer) -> None:
        name = analyzer.name
        if name in self._analyzers:
            logger.warning("Overwriting existing analyzer: %s", name)
        self._analyzers[name] = analyzer
        logger.debug("Registered analyzer: %s", name)

    def unregister(self, name: str) -> None:
        """Remove an analyzer from the registry."""
        self._analyzers.pop(name, None)

    def get(self, name: str) -> Analyzer | None:
        return self._analyzers.get(name)

    def list_analyzers(self) -> list[str]:
        return list(self._analyzers.keys())

    def analyzer_info(self) -> list[dict[str, Any]]:
        """Metadata of all registered analyzers, in registration order."""
        return [analyzer.metadata.to_dict() for analyzer in self._analyzers.values()]

    def run(self, snapshot: Snapshot, disabled: Iterable[str] = ()) -> RegistryRun:
        """Run every enabled analyzer whose inputs the snapshot provides.

        Args:
            snapshot: The configuration to analyze.
            disabled: Analyzer names to skip.

        Returns:
            RegistryRun with all reported diagnostics, in report order.
        """
        start_time = time.monotonic()
        disabled = set(disabled)
        run = RegistryRun()

        for name, analyzer in self._analyzers.items():
            if name in disabled:
                run.skipped[name] = "disabled"
                logger.info("Skipping analyzer: disabled", extra={"analyzer": name})
                continue

            missing = [kind for kind in analyzer.metadata.inputs if not snapshot.has_kind(kind)]
            if missing:
                reason = f"missing inputs: {', '.join(missing)}"
                run.skipped[name] = reason
                logger.info("Skipping analyzer: %s", reason, extra={"analyzer": name})
                continue

            ctx = AnalysisContext(snapshot, analyzer_name=name)
            analyzer.analyze(ctx)
            run.executed.append(name)
            run.diagnostics.extend(ctx.diagnostics)
            logger.info("Reported %d issue(s)", len(ctx.diagnostics), extra={"analyzer": name})

        run.duration_ms = int((time.monotonic() - start_time) * 1000)
        return run


def default_registry(fallback: WorkloadFallback | None = DEFAULT_FALLBACK) -> AnalyzerRegistry:
    """Registry holding every built-in analyzer."""
    registry = AnalyzerRegistry()
    registry.register(SecretAnalyzer(fallback=fallback))
    return registry
