"""
Analysis engine — snapshots, analyzers and the registry that runs them.

Public API:
    from meshcheck.core.analysis import Snapshot, AnalyzerRegistry, default_registry
"""

from meshcheck.core.analysis.analyzer import Analyzer, AnalyzerMetadata
from meshcheck.core.analysis.context import AnalysisContext
from meshcheck.core.analysis.registry import AnalyzerRegistry, RegistryRun, default_registry
from meshcheck.core.analysis.snapshot import Snapshot

__all__ = [
    "AnalysisContext",
    "Analyzer",
    "AnalyzerMetadata",
    "AnalyzerRegistry",
    "RegistryRun",
    "Snapshot",
    "default_registry",
]
