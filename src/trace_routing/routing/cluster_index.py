"""Node id → owning cluster lookup."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from trace_routing.errors import AmbiguousMembershipError
from trace_routing.types import Cluster, MembershipPolicy

logger = logging.getLogger(__name__)


def build_index(
    clusters: Iterable[Cluster],
    policy: MembershipPolicy = MembershipPolicy.FirstWins,
) -> dict[str, Cluster]:
    """Map every member node id to its cluster.

    Nodes that no cluster lists are simply absent from the result. A node
    listed by two clusters is resolved by ``policy``; Strict raises
    AmbiguousMembershipError instead.
    """
    index: dict[str, Cluster] = {}
    for cluster in clusters:
        # sorted so that Strict reports the same node on every run
        for node_id in sorted(cluster.node_ids):
            owner = index.get(node_id)
            if owner is None or owner.id == cluster.id:
                index[node_id] = cluster
                continue
            if policy is MembershipPolicy.Strict:
                raise AmbiguousMembershipError(node_id, owner.id, cluster.id)
            keep = owner if policy is MembershipPolicy.FirstWins else cluster
            logger.warning(
                "node %r is listed by clusters %r and %r; using %r",
                node_id,
                owner.id,
                cluster.id,
                keep.id,
            )
            index[node_id] = keep
    return index
