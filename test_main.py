"""
Test the command-line interface
"""

import pytest

from LittleSearch.main import main


@pytest.fixture
def corpus(tmp_path):
    (tmp_path / "a.txt").write_text("War and peace. War, war!", encoding="utf-8")
    (tmp_path / "b.txt").write_text("Alice met the white rabbit. Alice!", encoding="utf-8")
    (tmp_path / "c.txt").write_text("The war of the worlds", encoding="utf-8")
    (tmp_path / "docs.txt").write_text("a.txt\nb.txt\nc.txt\n", encoding="utf-8")
    (tmp_path / "noisewords.txt").write_text("and\nthe\nof\n", encoding="utf-8")
    return tmp_path


def run(corpus, *args):
    return main(["--docs", str(corpus / "docs.txt"), "--noise", str(corpus / "noisewords.txt"), *args])


def test_query(corpus, capsys):
    assert run(corpus, "--query", "war OR alice") == 0
    out = capsys.readouterr().out
    assert "a.txt" in out
    assert "b.txt" in out
    assert "c.txt" in out
    assert out.index("a.txt") < out.index("b.txt") < out.index("c.txt")


def test_keyword_options(corpus, capsys):
    assert run(corpus, "--kw1", "rabbit", "--kw2", "the") == 0
    out = capsys.readouterr().out
    assert "b.txt" in out
    assert "a.txt" not in out


def test_no_results(corpus, capsys):
    assert run(corpus, "--query", "zebra OR giraffe") == 0
    assert "No documents contain these keywords." in capsys.readouterr().out


def test_invalid_query(corpus, capsys):
    assert run(corpus, "--query", "a OR b OR c") == 2
    assert "Invalid query" in capsys.readouterr().out


def test_missing_document(corpus, capsys):
    (corpus / "b.txt").unlink()
    assert run(corpus, "--query", "war") == 1
    assert "One of the files was not found" in capsys.readouterr().out


def test_interactive(corpus, capsys, monkeypatch):
    answers = iter(["alice", "", "quit"])
    monkeypatch.setattr("LittleSearch.main.console.input", lambda prompt="": next(answers))
    assert run(corpus, "--interactive") == 0
    out = capsys.readouterr().out
    assert "b.txt" in out
    assert "Empty query" in out


def test_repeated_document_in_manifest(corpus, capsys):
    (corpus / "docs.txt").write_text("a.txt\nb.txt\na.txt\n", encoding="utf-8")
    assert run(corpus, "--query", "war") == 1
    assert "listed more than once" in capsys.readouterr().out
