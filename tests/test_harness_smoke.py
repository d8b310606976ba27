import csv
import json
import logging
from pathlib import Path

import pytest
from wordladder.builder import build_graph
from wordladder.harness import (run_query, run_batch, timed, load_or_build, read_pairs,
                                write_csv, write_manifest)
from wordladder.engine import SourceUnavailableError

CORPUS = ["cat", "cot", "cog", "dog", "dot", "cop"]


def test_run_query_found_and_not_found():
    graph = build_graph(CORPUS)
    r = run_query(graph, "cat", "dog")
    assert r["found"] is True and r["steps"] == 3 and r["error"] is None
    assert r["time_ms"] >= 0.0

    r = run_query(graph, "cat", "zzz")
    assert r["found"] is False and r["path"] is None and r["steps"] is None


def test_run_query_records_invalid_input():
    r = run_query(build_graph(CORPUS), "cat", "cats")
    assert r["found"] is False
    assert "same length" in r["error"]


def test_run_batch_and_outputs(tmp_path: Path):
    graph = build_graph(CORPUS)
    pairs = [("cat", "dog"), ("cat", "cat"), ("cop", "zzz"), ("cat", "cats")]
    results = run_batch(graph, pairs)
    assert [r["found"] for r in results] == [True, True, False, False]
    assert len(run_batch(graph, pairs, sample=2)) == 2

    csv_path = write_csv(results, str(tmp_path / "out" / "run.csv"))
    with open(csv_path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert rows[0]["path"].split() == results[0]["path"]
    assert rows[1]["steps"] == "0"
    assert rows[2]["steps"] == ""

    m = write_manifest({"num_queries": 4}, str(tmp_path / "out" / "m.json"))
    assert json.loads(Path(m).read_text(encoding="utf-8")) == {"num_queries": 4}


def test_read_pairs(tmp_path: Path):
    p = tmp_path / "pairs.txt"
    p.write_text("# comment\ncat dog\n\n cold  warm \n", encoding="utf-8")
    assert read_pairs(p) == [("cat", "dog"), ("cold", "warm")]

    p.write_text("cat dog cow\n", encoding="utf-8")
    with pytest.raises(ValueError):
        read_pairs(p)


def test_timed_records_elapsed():
    with timed("noop") as t:
        pass
    assert t["ms"] >= 0.0


def test_load_or_build(tmp_path: Path):
    words = tmp_path / "words.txt"
    words.write_text("\n".join(CORPUS) + "\n", encoding="utf-8")
    snap = tmp_path / "g.wlad"

    graph, origin = load_or_build(words_path=str(words), snapshot_path=str(snap), save=True)
    assert origin == "built" and snap.exists()

    again, origin = load_or_build(words_path=None, snapshot_path=str(snap))
    assert origin == "snapshot" and again == graph

    _, origin = load_or_build(words_path=str(words), snapshot_path=str(snap), rebuild=True)
    assert origin == "built"


def test_load_or_build_failures(tmp_path: Path):
    with pytest.raises(ValueError):
        load_or_build(words_path=None, snapshot_path=str(tmp_path / "none.wlad"))
    with pytest.raises(SourceUnavailableError):
        load_or_build(words_path=str(tmp_path / "missing.txt"), snapshot_path=None)


def test_snapshot_shadowing_word_list_is_logged(tmp_path: Path, caplog):
    words = tmp_path / "words.txt"
    words.write_text("\n".join(CORPUS) + "\n", encoding="utf-8")
    snap = tmp_path / "g.wlad"
    load_or_build(words_path=str(words), snapshot_path=str(snap), save=True)

    with caplog.at_level(logging.WARNING, logger="wordladder.harness.core"):
        _, origin = load_or_build(words_path=str(words), snapshot_path=str(snap), save=True)
    assert origin == "snapshot"
    assert any("using existing snapshot" in r.getMessage() and "save skipped" in r.getMessage()
               for r in caplog.records)

    caplog.clear()
    with caplog.at_level(logging.WARNING, logger="wordladder.harness.core"):
        load_or_build(words_path=None, snapshot_path=str(snap))
    assert not caplog.records


def test_bar_progress_is_created_lazily(capsys):
    from wordladder.harness import progress

    callback, close = progress.make_progress("bar")
    close()
    assert capsys.readouterr().err == ""

    callback, close = progress.make_progress("bar")
    build_graph(CORPUS, progress=callback)
    close()
    assert "Building" in capsys.readouterr().err
