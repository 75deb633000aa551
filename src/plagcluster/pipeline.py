"""End-to-end analysis: similarities -> clusters -> graph layout."""

import logging
import threading
from collections.abc import Mapping
from typing import Any, Iterable

from .clustering.cluster import create_clusters
from .config import Settings
from .models import AnalysisResult, Document
from .similarity.engine import compute_all_similarities
from .visualization.layout import create_graph_data

logger = logging.getLogger(__name__)


class AnalysisError(ValueError):
    """An analysis run failed as a whole; no partial results exist."""


def _as_list(documents) -> list:
    try:
        return list(documents)
    except TypeError:
        raise AnalysisError(f"Documents must be a sequence, got {type(documents).__name__}") from None


def coerce_documents(documents: Iterable[Document | Mapping[str, Any]]) -> list[Document]:
    """Accept Document objects or {id, name, content} mappings."""
    docs = []
    seen: set[str] = set()
    for pos, item in enumerate(_as_list(documents)):
        if isinstance(item, Document):
            doc = item
        elif isinstance(item, Mapping):
            if "id" not in item or "content" not in item:
                raise AnalysisError(f"Document at position {pos} needs 'id' and 'content'")
            doc = Document(
                id=item["id"],
                name=item.get("name", item["id"]),
                content=item["content"],
            )
        else:
            raise AnalysisError(f"Unsupported document at position {pos}: {type(item).__name__}")

        if not isinstance(doc.id, str) or not doc.id:
            raise AnalysisError(f"Document at position {pos} has an invalid id: {doc.id!r}")
        if not isinstance(doc.content, str):
            raise AnalysisError(f"Document {doc.id!r} content must be text")
        if doc.id in seen:
            raise AnalysisError(f"Duplicate document id: {doc.id!r}")
        seen.add(doc.id)
        docs.append(doc)
    return docs


def analyze(
    documents: Iterable[Document | Mapping[str, Any]],
    settings: Settings | None = None,
) -> AnalysisResult:
    """Run the whole pipeline synchronously."""
    settings = settings or Settings()
    docs = coerce_documents(documents)
    logger.info("Analyzing %d document(s)", len(docs))

    try:
        similarities = compute_all_similarities(docs, settings)
        clusters = create_clusters(docs, similarities, settings.cluster_threshold)
        graph_data = create_graph_data(
            docs,
            similarities,
            clusters,
            edge_threshold=settings.edge_threshold,
            radius=settings.layout_radius,
            z_spacing=settings.layout_z_spacing,
        )
    except (TypeError, ValueError, AttributeError) as e:
        raise AnalysisError(f"Analysis failed: {e}") from e

    logger.info(
        "Analysis complete: %d pair(s), %d cluster(s)", len(similarities), len(clusters)
    )
    return AnalysisResult(similarities=similarities, clusters=clusters, graph_data=graph_data)


def run_analysis(
    documents: Iterable[Document | Mapping[str, Any]],
    settings: Settings | None = None,
    background: bool = True,
) -> AnalysisResult:
    """Run the analysis, off the calling thread when possible.

    The caller blocks until the worker signals completion. If the worker
    cannot be started or fails, the run is repeated synchronously from
    scratch and any error from that run propagates.
    """
    docs = _as_list(documents)
    if not background:
        return analyze(docs, settings)

    outcome: dict[str, Any] = {}
    done = threading.Event()

    def _work():
        try:
            outcome["result"] = analyze(docs, settings)
        except Exception as e:
            outcome["error"] = e
        finally:
            done.set()

    worker = threading.Thread(target=_work, name="plagcluster-analysis", daemon=True)
    try:
        worker.start()
    except RuntimeError as e:
        logger.warning("Background worker unavailable, running synchronously: %s", e)
        return analyze(docs, settings)

    done.wait()
    worker.join()

    if "result" in outcome:
        return outcome["result"]

    logger.warning("Background worker failed, running synchronously: %s", outcome.get("error"))
    return analyze(docs, settings)
