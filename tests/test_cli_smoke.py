from pathlib import Path

from apps.cli import build, run, run_multi

CORPUS = ["cat", "cot", "cog", "dog", "dot", "cop", "abc"]


def _words(tmp_path: Path) -> Path:
    p = tmp_path / "words.txt"
    p.write_text("\n".join(CORPUS) + "\n", encoding="utf-8")
    return p


def test_run_found(tmp_path: Path, capsys):
    words = _words(tmp_path)
    snap = tmp_path / "g.wlad"
    rc = run.main(["--words", str(words), "--snapshot", str(snap), "--save",
                   "--start", "cat", "--end", "dog", "--progress", "off"])
    out = capsys.readouterr().out
    assert rc == run.EXIT_FOUND
    assert out.startswith("cat -> cot -> ")
    assert "Time taken:" in out
    assert snap.exists()

    # second run uses the snapshot only
    rc = run.main(["--snapshot", str(snap), "--start", "dog", "--end", "cat",
                   "--progress", "off"])
    assert rc == run.EXIT_FOUND
    assert "graph: snapshot" in capsys.readouterr().out


def test_run_not_found_and_bad_input(tmp_path: Path, capsys):
    words = _words(tmp_path)
    snap = tmp_path / "absent.wlad"
    base = ["--words", str(words), "--snapshot", str(snap), "--progress", "off"]

    assert run.main(base + ["--start", "cat", "--end", "abc"]) == run.EXIT_NOT_FOUND
    assert "No path found!" in capsys.readouterr().out

    assert run.main(base + ["--start", "cat", "--end", "cats"]) == run.EXIT_BAD_INPUT
    assert "error:" in capsys.readouterr().out

    rc = run.main(["--words", str(tmp_path / "missing.txt"), "--snapshot", str(snap),
                   "--start", "cat", "--end", "dog", "--progress", "off"])
    assert rc == run.EXIT_BAD_INPUT


def test_build_then_batch(tmp_path: Path, capsys):
    words = _words(tmp_path)
    snap = tmp_path / "g.wlad"
    assert build.main(["--words", str(words), "--out", str(snap), "--progress", "plain",
                       "--log-level", "WARNING"]) == 0
    assert snap.exists()

    pairs = tmp_path / "pairs.txt"
    pairs.write_text("cat dog\ncat abc\n", encoding="utf-8")
    outdir = tmp_path / "reports"
    rc = run_multi.main(["--pairs", str(pairs), "--snapshot", str(snap),
                         "--outdir", str(outdir), "--progress", "off"])
    assert rc == 0
    assert "1/2 ladders found" in capsys.readouterr().out
    assert len(list(outdir.glob("run_*.csv"))) == 1
    assert len(list(outdir.glob("run_*_manifest.json"))) == 1
