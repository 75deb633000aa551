"""Position documents and similarity edges for 3D rendering."""

from typing import Sequence

import numpy as np

from ..clustering.cluster import cluster_index
from ..models import Cluster, Document, GraphData, GraphEdge, GraphNode, SimilarityResult


def create_graph_data(
    documents: Sequence[Document],
    similarities: Sequence[SimilarityResult],
    clusters: Sequence[Cluster],
    edge_threshold: float = 35.0,
    radius: float = 5.0,
    z_spacing: float = 2.0,
) -> GraphData:
    """Lay documents out on a circle, lifting each cluster to its own plane.

    Node i sits at angle 2*pi*i/n in the XY plane. Clustered nodes get
    z = z_spacing * cluster id; the rest stay at z = 0 with cluster -1.
    """
    membership = cluster_index(clusters)
    n = len(documents)

    angles = 2 * np.pi * np.arange(n) / n if n else np.zeros(0)
    xs = radius * np.cos(angles)
    ys = radius * np.sin(angles)

    nodes = []
    for idx, doc in enumerate(documents):
        cluster_id = membership.get(doc.id, -1)
        nodes.append(GraphNode(
            id=doc.id,
            name=doc.name,
            x=float(xs[idx]),
            y=float(ys[idx]),
            z=float(cluster_id * z_spacing) if cluster_id >= 0 else 0.0,
            cluster=cluster_id,
        ))

    edges = [
        GraphEdge(source=sim.doc1_id, target=sim.doc2_id, similarity=sim.similarity)
        for sim in similarities
        if sim.similarity >= edge_threshold
    ]

    return GraphData(nodes=nodes, edges=edges)
