"""
Gateway secret analyzer — TLS ``credentialName`` references must resolve.

A gateway's credentials live in the namespace of the workload it
selects, NOT the namespace of the Gateway object.  The workload
namespace is found by matching the gateway selector against pods.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Collection, Iterable, Mapping

from meshcheck.core.analysis.analyzer import Analyzer, AnalyzerMetadata
from meshcheck.core.analysis.context import AnalysisContext
from meshcheck.core.analysis.labels import render_selector, selector_matches
from meshcheck.core.analysis.messages import referenced_resource_not_found
from meshcheck.core.models.diagnostic import Diagnostic
from meshcheck.core.models.gateway import Gateway
from meshcheck.core.models.resource import ResourceName
from meshcheck.core.models.settings import WorkloadFallback
from meshcheck.core.models.workload import Pod, Secret

logger = logging.getLogger(__name__)

# Default ingress gateway: istio=ingressgateway in istio-system
DEFAULT_FALLBACK = WorkloadFallback()


def resolve_gateway_namespace(
    selector: Mapping[str, str],
    pods: Iterable[Pod],
    fallback: WorkloadFallback | None = DEFAULT_FALLBACK,
) -> str:
    """Get the namespace of the workload a gateway selector picks.

    Assumes all selected pods share one namespace.  If they don't,
    which namespace is returned is undefined (the first match wins).

    Returns:
        The namespace, or ``""`` when no pod matches and ``fallback``
        does not apply.
    """
    for pod in pods:
        if selector_matches(selector, pod.labels):
            return pod.namespace

    if fallback is not None and fallback.applies_to(selector):
        return fallback.namespace

    return ""


def check_gateway_secrets(
    gateways: Iterable[Gateway],
    pods: Collection[Pod],
    secret_exists: Callable[[ResourceName], bool],
    report: Callable[[Diagnostic], None],
    fallback: WorkloadFallback | None = DEFAULT_FALLBACK,
) -> None:
    """Report every TLS credential a gateway names that does not exist.

    ``pods`` is scanned once per gateway.  A gateway whose workload
    namespace can't be resolved gets a single ``selector`` finding and
    its servers are not checked.  A TLS block without a credential name
    references nothing and is skipped.
    """
    for gw in gateways:
        gw_ns = resolve_gateway_namespace(gw.selector, pods, fallback)

        if not gw_ns:
            logger.debug("%s: selector matches no workload", gw)
            report(referenced_resource_not_found(gw, "selector", render_selector(gw.selector)))
            continue

        logger.debug("%s: workload namespace is %s", gw, gw_ns)

        for server in gw.servers:
            if server.tls is None:
                continue

            cn = server.tls.credential_name
            if not cn:
                continue

            if not secret_exists(ResourceName.short_or_full(gw_ns, cn)):
                report(referenced_resource_not_found(gw, "credentialName", cn))


class SecretAnalyzer(Analyzer):
    """Checks a gateway's referenced secrets for correctness."""

    def __init__(self, fallback: WorkloadFallback | None = DEFAULT_FALLBACK):
        self.fallback = fallback

    @property
    def metadata(self) -> AnalyzerMetadata:
        return AnalyzerMetadata(
            name="gateway.SecretAnalyzer",
            description="Checks a gateway's referenced secrets for correctness",
            inputs=(Gateway.KIND, Pod.KIND, Secret.KIND),
        )

    def analyze(self, ctx: AnalysisContext) -> None:
        check_gateway_secrets(
            ctx.iter(Gateway),
            list(ctx.iter(Pod)),
            functools.partial(ctx.exists, Secret),
            ctx.report,
            self.fallback,
        )
