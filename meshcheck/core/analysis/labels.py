"""
Label selectors — equality-based matching over label sets.

Mirrors Kubernetes ``labels.SelectorFromSet``: every pair of the
selector must be present with the same value, and an empty selector
matches everything.
"""

from __future__ import annotations

from collections.abc import Mapping


def selector_matches(selector: Mapping[str, str], labels: Mapping[str, str]) -> bool:
    """Whether ``labels`` satisfies every ``key=value`` pair of ``selector``."""
    return all(key in labels and labels[key] == value for key, value in selector.items())


def render_selector(selector: Mapping[str, str]) -> str:
    """Render a selector as ``k1=v1,k2=v2`` with keys sorted."""
    return ",".join(f"{key}={selector[key]}" for key in sorted(selector))
