"""
Suppression rules — silence known diagnostics.

Written as ``CODE=Kind namespace/name``.  The resource part is a glob,
so ``IST0101=Gateway staging/*`` silences a whole namespace and
``*=Gateway legacy/edge`` silences every code for one gateway.
"""

from __future__ import annotations

from fnmatch import fnmatchcase

from pydantic import BaseModel, ConfigDict

from meshcheck.core.models.diagnostic import Diagnostic


class Suppression(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    resource: str

    @classmethod
    def parse(cls, text: str) -> Suppression:
        code, sep, resource = text.partition("=")
        code, resource = code.strip(), resource.strip()
        if not sep or not code or not resource:
            raise ValueError(
                f"Invalid suppression '{text}' (expected CODE=Kind namespace/name)"
            )
        return cls(code=code, resource=resource)

    def matches(self, diagnostic: Diagnostic) -> bool:
        if self.code != "*" and self.code != diagnostic.code:
            return False
        return fnmatchcase(diagnostic.origin, self.resource)

    def __str__(self) -> str:
        return f"{self.code}={self.resource}"
