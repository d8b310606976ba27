import threading

import pytest
from wordladder.builder import build_graph
from wordladder.scanners import create_scanner, get_scanner_ids

WORDS = ["cold", "cord", "card", "ward", "warm", "worm", "word", "wood",
         "cat", "cot", "cog", "dog", "dot", "cop", "a", "b", "cats", "Cat"]


def test_symmetry_and_no_self_loops():
    graph = build_graph(WORDS, workers=4)
    for w, neighbours in graph.items():
        assert w not in neighbours
        for n in neighbours:
            assert w in graph[n]
            assert len(n) == len(w)


def test_every_distinct_word_has_a_key():
    graph = build_graph(WORDS)
    assert list(graph.keys()) == WORDS  # no duplicates in WORDS: same order
    assert graph["cats"] == []


def test_neighbor_order_follows_corpus():
    graph = build_graph(["cot", "dog", "cat", "cog", "dot", "cop"])
    assert graph["cot"] == ["cat", "cog", "dot", "cop"]


def test_duplicates_are_kept_in_neighbor_lists():
    graph = build_graph(["cat", "cot", "cot", "cut"])
    assert graph["cat"] == ["cot", "cot", "cut"]
    assert graph["cot"] == ["cat", "cut"]  # "cot" never lists itself
    assert list(graph.keys()) == ["cat", "cot", "cut"]


def test_build_is_idempotent():
    g1 = build_graph(WORDS, workers=8)
    g2 = build_graph(WORDS, workers=8)
    assert g1 == g2
    assert list(g1.keys()) == list(g2.keys())


@pytest.mark.parametrize("workers", [1, 2, 16])
def test_worker_count_does_not_change_result(workers):
    assert build_graph(WORDS, workers=workers) == build_graph(WORDS, workers=1)


@pytest.mark.parametrize("scanner", ["linear", "bucketed", "vectorized"])
def test_scanners_agree(scanner):
    words = WORDS + ["cot", "café", "cafe", "", ""]
    expected = build_graph(words, scanner="linear")
    assert build_graph(words, scanner=scanner) == expected


def test_scanner_registry():
    assert {"linear", "bucketed", "vectorized"} <= set(get_scanner_ids())
    with pytest.raises(ValueError):
        create_scanner("nope")


def test_vectorized_unknown_word():
    sc = create_scanner("vectorized")
    sc.prepare(["cat", "cot", "dog"])
    assert sc.neighbors("cut") == ["cat", "cot"]
    assert sc.neighbors("zebra") == []


def test_empty_and_malformed_input_give_empty_map():
    assert build_graph([]) == {}
    assert build_graph(["cat", b"cot"]) == {}
    assert build_graph(["cat", None]) == {}


def test_invalid_worker_count():
    with pytest.raises(ValueError):
        build_graph(WORDS, workers=0)


def test_progress_callback_sees_every_word():
    calls = []
    build_graph(["cat", "cot", "cot", "dog"], progress=lambda d, t: calls.append((d, t)))
    assert calls == [(1, 3), (2, 3), (3, 3)]


def test_build_uses_worker_threads(monkeypatch):
    seen = set()
    sc_cls = type(create_scanner("linear"))
    original = sc_cls.neighbors

    def spy(self, word):
        seen.add(threading.current_thread().name)
        return original(self, word)

    monkeypatch.setattr(sc_cls, "neighbors", spy)
    build_graph(WORDS, workers=4, scanner="linear")
    assert seen and all(name.startswith("wordladder-build") for name in seen)


def test_worker_error_propagates(monkeypatch):
    sc_cls = type(create_scanner("linear"))

    def boom(self, word):
        raise RuntimeError("scan failed")

    monkeypatch.setattr(sc_cls, "neighbors", boom)
    with pytest.raises(RuntimeError):
        build_graph(WORDS, scanner="linear")
