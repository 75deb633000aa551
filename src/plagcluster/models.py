"""Data models used throughout plagcluster."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Document:
    """A document ready for comparison. `content` is already normalized."""
    id: str
    name: str
    content: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "content": self.content}


@dataclass
class SimilarityResult:
    """Scores for one unordered document pair."""
    doc1_id: str
    doc2_id: str
    doc1_name: str
    doc2_name: str
    similarity: float  # primary score, used for thresholding
    matched_sections: list[str] = field(default_factory=list)
    raw_match_count: int = 0
    avg_words: int = 1
    match_metric: float = 0.0
    composite_score: float = 0.0  # percentage

    def involves(self, doc_id: str) -> bool:
        return doc_id in (self.doc1_id, self.doc2_id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "doc1Id": self.doc1_id,
            "doc2Id": self.doc2_id,
            "doc1Name": self.doc1_name,
            "doc2Name": self.doc2_name,
            "similarity": self.similarity,
            "matchedSections": list(self.matched_sections),
            "rawMatchCount": self.raw_match_count,
            "avgWords": self.avg_words,
            "matchMetric": self.match_metric,
            "compositeScore": self.composite_score,
        }


@dataclass
class Cluster:
    """A connected group of two or more similar documents."""
    id: int
    documents: list[str]
    avg_similarity: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "documents": list(self.documents),
            "avgSimilarity": self.avg_similarity,
        }


@dataclass
class GraphNode:
    id: str
    name: str
    x: float
    y: float
    z: float
    cluster: int = -1

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "x": self.x,
            "y": self.y,
            "z": self.z,
            "cluster": self.cluster,
        }


@dataclass
class GraphEdge:
    source: str
    target: str
    similarity: float

    def to_dict(self) -> dict[str, Any]:
        return {"source": self.source, "target": self.target, "similarity": self.similarity}


@dataclass
class GraphData:
    """Positioned graph for downstream visualization."""
    nodes: list[GraphNode] = field(default_factory=list)
    edges: list[GraphEdge] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
        }


@dataclass
class AnalysisResult:
    """Everything produced by one analysis run."""
    similarities: list[SimilarityResult]
    clusters: list[Cluster]
    graph_data: GraphData

    def to_dict(self) -> dict[str, Any]:
        return {
            "similarities": [s.to_dict() for s in self.similarities],
            "clusters": [c.to_dict() for c in self.clusters],
            "graphData": self.graph_data.to_dict(),
        }
