"""Graph-based clustering of similar documents."""

from .cluster import build_graph, cluster_index, create_clusters
from .graph import SimilarityGraph

__all__ = ["SimilarityGraph", "build_graph", "cluster_index", "create_clusters"]
