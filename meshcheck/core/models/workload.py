"""
Core Kubernetes objects — pods and secrets.
"""

from __future__ import annotations

from typing import ClassVar

from meshcheck.core.models.resource import Resource


class Pod(Resource):
    """A pod; analyzers only read its labels and namespace."""

    KIND: ClassVar[str] = "Pod"


class Secret(Resource):
    """A secret; only its identity matters, the payload is never read."""

    KIND: ClassVar[str] = "Secret"

    type: str = "Opaque"
