"""Group similar documents into clusters via connected components."""

from typing import Sequence

from ..models import Cluster, Document, SimilarityResult
from .graph import SimilarityGraph

DEFAULT_THRESHOLD = 35.0


def build_graph(
    documents: Sequence[Document],
    similarities: Sequence[SimilarityResult],
    threshold: float = DEFAULT_THRESHOLD,
) -> SimilarityGraph:
    """One vertex per document, one edge per pair at or above `threshold`."""
    graph = SimilarityGraph()
    for doc in documents:
        graph.add_vertex(doc.id)
    for sim in similarities:
        if sim.similarity >= threshold:
            graph.add_edge(sim.doc1_id, sim.doc2_id)
    return graph


def create_clusters(
    documents: Sequence[Document],
    similarities: Sequence[SimilarityResult],
    threshold: float = DEFAULT_THRESHOLD,
) -> list[Cluster]:
    """Return clusters of two or more mutually reachable documents.

    Cluster ids are dense, in discovery order. `avg_similarity` is the
    mean primary score over every pair with both ends in the cluster.
    """
    graph = build_graph(documents, similarities, threshold)

    # Group by component
    membership: dict[str, int] = {}
    members: list[list[str]] = []
    for component in graph.connected_components():
        if len(component) < 2:
            continue
        for doc_id in component:
            membership[doc_id] = len(members)
        members.append(component)

    totals = [0.0] * len(members)
    counts = [0] * len(members)
    for sim in similarities:
        idx = membership.get(sim.doc1_id)
        if idx is not None and membership.get(sim.doc2_id) == idx:
            totals[idx] += sim.similarity
            counts[idx] += 1

    return [
        Cluster(
            id=idx,
            documents=doc_ids,
            avg_similarity=totals[idx] / counts[idx] if counts[idx] else 0.0,
        )
        for idx, doc_ids in enumerate(members)
    ]


def cluster_index(clusters: Sequence[Cluster]) -> dict[str, int]:
    """Map each clustered document id to its cluster id."""
    index = {}
    for c in clusters:
        for doc_id in c.documents:
            index[doc_id] = c.id
    return index
