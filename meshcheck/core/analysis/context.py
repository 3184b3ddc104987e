"""
Analysis context — what an analyzer sees during one pass.

Bundles the snapshot's typed iteration and existence probe with the
diagnostic sink.  One context is created per analyzer run.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import TypeVar

from meshcheck.core.analysis.snapshot import Snapshot
from meshcheck.core.models.diagnostic import Diagnostic
from meshcheck.core.models.resource import Resource, ResourceName

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Resource)


class AnalysisContext:
    """Read access to a snapshot plus a place to report findings.

    Reported diagnostics are kept in ``diagnostics`` and, when given,
    forwarded to ``sink`` as they arrive.
    """

    def __init__(
        self,
        snapshot: Snapshot,
        analyzer_name: str = "",
        sink: Callable[[Diagnostic], None] | None = None,
    ):
        self.snapshot = snapshot
        self.analyzer_name = analyzer_name
        self.diagnostics: list[Diagnostic] = []
        self._sink = sink

    def iter(self, kind: type[R]) -> Iterator[R]:
        return self.snapshot.iter(kind)

    def exists(self, kind: type[Resource], name: ResourceName) -> bool:
        return self.snapshot.exists(kind, name)

    def report(self, diagnostic: Diagnostic) -> None:
        logger.debug("%s", diagnostic, extra={"analyzer": self.analyzer_name})
        self.diagnostics.append(diagnostic)
        if self._sink is not None:
            self._sink(diagnostic)
