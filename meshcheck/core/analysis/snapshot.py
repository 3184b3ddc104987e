"""
Configuration snapshot — typed, read-only view of all loaded resources.

Analyzers read resources through ``iter(kind)`` and ``exists(kind, name)``
where ``kind`` is a model class, so entries come back already typed.
Each ``iter`` call returns a fresh lazy iterator; callers stop early
with ``break``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import TypeVar, cast

from meshcheck.core.models.resource import Resource, ResourceName

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Resource)


class Snapshot:
    """Resources indexed by kind, then by namespaced name.

    ``kinds`` declares which kinds the snapshot is complete for, even
    when it holds no objects of that kind.  When omitted, the kinds of
    the given resources are used.
    """

    def __init__(
        self,
        resources: Iterable[Resource] = (),
        kinds: Iterable[type[Resource] | str] | None = None,
    ):
        self._entries: dict[str, dict[ResourceName, Resource]] = {}
        self._kinds: set[str] = set()
        if kinds is not None:
            for kind in kinds:
                self.declare(kind)
        for resource in resources:
            self.add(resource)

    def declare(self, kind: type[Resource] | str) -> None:
        """Mark ``kind`` as available (possibly with zero objects)."""
        self._kinds.add(kind if isinstance(kind, str) else kind.KIND)

    def add(self, resource: Resource) -> None:
        """Add a resource; a later object with the same name replaces it."""
        self.declare(type(resource))
        by_name = self._entries.setdefault(resource.KIND, {})
        name = resource.resource_name
        if name in by_name:
            logger.warning("Duplicate %s %s; later definition wins", resource.KIND, name)
        by_name[name] = resource

    def has_kind(self, kind: type[Resource] | str) -> bool:
        return (kind if isinstance(kind, str) else kind.KIND) in self._kinds

    @property
    def kinds(self) -> frozenset[str]:
        return frozenset(self._kinds)

    def iter(self, kind: type[R]) -> Iterator[R]:
        """Iterate over all resources of ``kind`` in insertion order."""
        for resource in self._entries.get(kind.KIND, {}).values():
            yield cast(R, resource)

    def exists(self, kind: type[Resource], name: ResourceName) -> bool:
        return name in self._entries.get(kind.KIND, {})

    def get(self, kind: type[R], name: ResourceName) -> R | None:
        return cast("R | None", self._entries.get(kind.KIND, {}).get(name))

    def count(self, kind: type[Resource]) -> int:
        return len(self._entries.get(kind.KIND, {}))

    def counts(self) -> dict[str, int]:
        """Number of objects per declared kind."""
        return {kind: len(self._entries.get(kind, {})) for kind in sorted(self._kinds)}

    def __len__(self) -> int:
        return sum(len(by_name) for by_name in self._entries.values())

    def __repr__(self) -> str:
        return f"<Snapshot {self.counts()}>"
