"""
Manifest loading — YAML files on disk into a typed ``Snapshot``.

Accepts files and directories.  Directories are walked for ``*.yaml``
and ``*.yml``; multi-document files and ``kind: List`` wrappers are
expanded.  Kinds without a model (Deployments, Services, ...) are
ignored.  The loaded files are treated as the complete configuration,
so every modelled kind is declared available even when absent.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

import yaml
from pydantic import ValidationError

from meshcheck.core.analysis.snapshot import Snapshot
from meshcheck.core.models import RESOURCE_MODELS, Resource

logger = logging.getLogger(__name__)

_SKIP_DIRS = frozenset({
    ".git", ".venv", "venv", "node_modules", "__pycache__",
    ".mypy_cache", ".ruff_cache", ".pytest_cache", ".tox",
    "dist", "build", ".eggs",
})

_YAML_SUFFIXES = (".yaml", ".yml")


class ManifestError(Exception):
    """Raised when a manifest path cannot be read or parsed."""


def find_manifest_files(paths: Iterable[Path]) -> list[Path]:
    """Expand files and directories into the YAML files to load.

    Raises:
        ManifestError: If a path does not exist.
    """
    files: list[Path] = []
    for path in paths:
        if path.is_dir():
            for candidate in sorted(path.rglob("*")):
                if not candidate.is_file() or candidate.suffix not in _YAML_SUFFIXES:
                    continue
                rel_parts = candidate.relative_to(path).parts[:-1]
                if any(part in _SKIP_DIRS for part in rel_parts):
                    continue
                files.append(candidate)
        elif path.is_file():
            files.append(path)
        else:
            raise ManifestError(f"Path not found: {path}")
    return files


def parse_manifest_file(path: Path) -> list[dict]:
    """Parse a YAML file and return K8s object dicts.

    Raises:
        ManifestError: If the file can't be read or isn't valid YAML.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ManifestError(f"Cannot read {path}: {e}") from e

    try:
        documents = list(yaml.safe_load_all(content))
    except yaml.YAMLError as e:
        raise ManifestError(f"Invalid YAML in {path}: {e}") from e

    objects: list[dict] = []
    for doc in documents:
        if not isinstance(doc, dict):
            continue
        if doc.get("kind") == "List":
            objects.extend(item for item in doc.get("items") or [] if isinstance(item, dict))
        elif "kind" in doc and "apiVersion" in doc:
            objects.append(doc)
    return objects


def build_resource(doc: dict, default_namespace: str = "default") -> Resource | None:
    """Turn one K8s object dict into its typed model, or None if unmodelled.

    Raises:
        ValidationError: If the object does not fit its model.
    """
    model = RESOURCE_MODELS.get(doc.get("kind", ""))
    if model is None or not model.accepts_api_version(str(doc.get("apiVersion", ""))):
        return None

    resource = model.model_validate(doc)
    if not resource.metadata.namespace:
        resource.metadata.namespace = default_namespace
    return resource


def load_manifest_files(files: Iterable[Path], default_namespace: str = "default") -> Snapshot:
    """Load already-discovered manifest files into a snapshot.

    Raises:
        ManifestError: On an unreadable file, invalid YAML or an object
            that fails validation.
    """
    snapshot = Snapshot(kinds=RESOURCE_MODELS.values())
    file_count = 0

    for path in files:
        file_count += 1
        objects = parse_manifest_file(path)
        loaded = 0
        for index, doc in enumerate(objects):
            try:
                resource = build_resource(doc, default_namespace)
            except ValidationError as e:
                kind = doc.get("kind", "?")
                raise ManifestError(f"Invalid {kind} (document {index + 1}) in {path}: {e}") from e
            if resource is None:
                continue
            snapshot.add(resource)
            loaded += 1
        logger.debug("Loaded %d of %d object(s) from %s", loaded, len(objects), path)

    logger.info("Loaded %d resource(s) from %d file(s)", len(snapshot), file_count)
    return snapshot


def load_snapshot(paths: Iterable[Path], default_namespace: str = "default") -> Snapshot:
    """Load every manifest under ``paths`` into a snapshot.

    Args:
        paths: Manifest files and/or directories.
        default_namespace: Namespace for objects that don't set one.

    Raises:
        ManifestError: On a missing path, unreadable file, invalid YAML
            or an object that fails validation.
    """
    return load_manifest_files(find_manifest_files(paths), default_namespace)
