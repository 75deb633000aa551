"""Tests for the end-to-end analysis pipeline."""

import json
import threading

import pytest

from plagcluster import pipeline
from plagcluster.config import Settings
from plagcluster.models import Document
from plagcluster.pipeline import AnalysisError, analyze, coerce_documents, run_analysis
from plagcluster.report import rank_similarities, severity, to_json, write_json

ESSAY = (
    "photosynthesis converts light energy into chemical energy stored inside glucose "
    "molecules plants absorb carbon dioxide through leaf stomata while roots draw water "
    "from surrounding soil chlorophyll pigments capture photons mostly within blue red bands"
)

DOCS = [
    {"id": "a", "name": "alice.txt", "content": ESSAY},
    {"id": "b", "name": "bob.txt", "content": ESSAY},
    {"id": "c", "name": "carol.txt", "content": "volcanoes erupt molten rock called magma from deep underground chambers"},
]


def test_analyze_dicts():
    result = analyze(DOCS)
    assert len(result.similarities) == 3
    [cluster] = result.clusters
    assert set(cluster.documents) == {"a", "b"}
    assert [n.id for n in result.graph_data.nodes] == ["a", "b", "c"]
    assert [(e.source, e.target) for e in result.graph_data.edges] == [("a", "b")]


def test_to_dict_shape():
    data = analyze(DOCS).to_dict()
    assert set(data) == {"similarities", "clusters", "graphData"}
    assert set(data["similarities"][0]) == {
        "doc1Id", "doc2Id", "doc1Name", "doc2Name", "similarity", "matchedSections",
        "rawMatchCount", "avgWords", "matchMetric", "compositeScore",
    }
    assert set(data["clusters"][0]) == {"id", "documents", "avgSimilarity"}
    assert set(data["graphData"]) == {"nodes", "edges"}
    assert set(data["graphData"]["nodes"][0]) == {"id", "name", "x", "y", "z", "cluster"}
    json.loads(to_json(analyze(DOCS)))


def test_identical_documents_cluster_below_their_score():
    docs = [Document(id="x", name="x", content=ESSAY), Document(id="y", name="y", content=ESSAY)]
    score = analyze(docs).similarities[0].similarity
    for threshold in (0, score / 2, score):
        result = analyze(docs, Settings(cluster_threshold=threshold))
        assert len(result.clusters) == 1


def test_settings_thresholds_applied():
    result = analyze(DOCS, Settings(cluster_threshold=100.0, edge_threshold=100.0))
    assert result.clusters == []
    assert result.graph_data.edges == []


def test_coerce_documents_name_defaults_to_id():
    [doc] = coerce_documents([{"id": "only", "content": "text"}])
    assert doc == Document(id="only", name="only", content="text")


@pytest.mark.parametrize("bad", [
    [{"id": "a"}],
    [{"content": "text"}],
    [{"id": "a", "content": 42}],
    [{"id": "", "content": "text"}],
    [{"id": "a", "content": "x"}, {"id": "a", "content": "y"}],
    ["not a document"],
])
def test_malformed_input_fails_whole_run(bad):
    with pytest.raises(AnalysisError):
        analyze(bad)
    with pytest.raises(AnalysisError):
        run_analysis(bad)


def test_empty_and_single_document_runs():
    assert analyze([]).similarities == []
    result = analyze([{"id": "a", "content": ""}])
    assert result.similarities == []
    assert result.clusters == []
    assert len(result.graph_data.nodes) == 1


def test_background_matches_sync():
    background = run_analysis(DOCS)
    sync = run_analysis(DOCS, background=False)
    assert background.to_dict() == sync.to_dict()


def test_falls_back_when_worker_cannot_start(monkeypatch):
    class BrokenThread(threading.Thread):
        def start(self):
            raise RuntimeError("can't start new thread")

    monkeypatch.setattr(pipeline.threading, "Thread", BrokenThread)
    result = run_analysis(DOCS)
    assert len(result.clusters) == 1


def test_falls_back_when_worker_fails(monkeypatch):
    real_analyze = pipeline.analyze
    calls = []

    def flaky(documents, settings=None):
        calls.append(threading.current_thread().name)
        if len(calls) == 1:
            raise RuntimeError("worker crashed")
        return real_analyze(documents, settings)

    monkeypatch.setattr(pipeline, "analyze", flaky)
    result = run_analysis(DOCS)
    assert len(result.clusters) == 1
    assert calls[0] == "plagcluster-analysis"
    assert calls[1] == threading.current_thread().name


def test_severity_and_ranking():
    assert severity(80) == "high"
    assert severity(79.9) == "medium"
    assert severity(60) == "medium"
    assert severity(10) == "low"
    assert severity(50, Settings(severity_medium=40)) == "medium"

    ranked = rank_similarities(analyze(DOCS).similarities)
    scores = [s.similarity for s in ranked]
    assert scores == sorted(scores, reverse=True)


def test_write_json(tmp_path):
    out = write_json(analyze(DOCS), tmp_path / "out" / "result.json")
    data = json.loads(out.read_text())
    assert len(data["similarities"]) == 3


@pytest.mark.parametrize("bad", [None, 42])
def test_non_iterable_input_fails_whole_run(bad):
    with pytest.raises(AnalysisError):
        analyze(bad)
    with pytest.raises(AnalysisError):
        run_analysis(bad)
    with pytest.raises(AnalysisError):
        run_analysis(bad, background=False)
