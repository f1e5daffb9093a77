from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner, Result

from docgen.cli import app, format_config
from docgen.config import load_config

WORDS = ["lorem", "ipsum", "dolor", "sit", "amet"]


@pytest.fixture(autouse=True)
def _no_env_seed(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DOCGEN_SEED", raising=False)


@pytest.fixture
def words_file(tmp_path: Path) -> Path:
    path = tmp_path / "words.txt"
    path.write_text("\n".join(WORDS) + "\n", encoding="utf-8")
    return path


def _run(words: Path, out: Path, *extra: str, answers: str | None = None) -> Result:
    runner = CliRunner()
    args = ["run", "--words", str(words), "--output", str(out), *extra]
    return runner.invoke(app, args, input=answers)


def test_generates_documents(tmp_path: Path, words_file: Path) -> None:
    out = tmp_path / "docs.txt"
    args = ("--num", "50", "--min", "2", "--max", "6", "--avg", "4", "--seed", "7")
    result = _run(words_file, out, *args)
    assert result.exit_code == 0, result.output
    lines = out.read_text(encoding="utf-8").split("\n")
    assert lines[-1] == ""
    assert len(lines) == 51
    for line in lines[:-1]:
        words = line.split(" ")
        assert 2 <= len(words) <= 6
        assert set(words) <= set(WORDS)
    assert "Random seed: 7" in result.output
    assert "Loaded 5 words" in result.output
    assert "Progress: 50/50 documents (100.0%)" in result.output
    assert f"Output written to {out}" in result.output


def test_seeded_runs_are_identical(tmp_path: Path, words_file: Path) -> None:
    out_a = tmp_path / "a.txt"
    out_b = tmp_path / "b.txt"
    args = ("--num", "100", "--min", "1", "--max", "20", "--avg", "10", "--seed", "99")
    assert _run(words_file, out_a, *args).exit_code == 0
    assert _run(words_file, out_b, *args).exit_code == 0
    assert out_a.read_bytes() == out_b.read_bytes()


def test_two_runs_in_one_process(tmp_path: Path, words_file: Path) -> None:
    runner = CliRunner()
    for name in ("first.txt", "second.txt"):
        out = tmp_path / name
        args = ["run", "--words", str(words_file), "--output", str(out), "--num", "4", "--seed", "5"]
        result = runner.invoke(app, args)
        assert result.exit_code == 0, result.output
        assert len(out.read_text(encoding="utf-8").splitlines()) == 4
    assert (tmp_path / "first.txt").read_bytes() == (tmp_path / "second.txt").read_bytes()


def test_zero_documents(tmp_path: Path, words_file: Path) -> None:
    out = tmp_path / "docs.txt"
    result = _run(words_file, out, "--num", "0")
    assert result.exit_code == 0, result.output
    assert out.exists()
    assert out.read_bytes() == b""


def test_quiet_hides_progress(tmp_path: Path, words_file: Path) -> None:
    out = tmp_path / "docs.txt"
    result = _run(words_file, out, "--num", "10", "--min", "1", "--max", "3", "--avg", "2", "-q")
    assert result.exit_code == 0, result.output
    assert "Progress:" not in result.output
    assert len(out.read_text(encoding="utf-8").splitlines()) == 10


def test_interactive_prompts(tmp_path: Path, words_file: Path) -> None:
    out = tmp_path / "interactive.txt"
    answers = f"20\n1\n3\n2\n{out}\n"
    result = _run(words_file, tmp_path / "ignored.txt", "--interactive", answers=answers)
    assert result.exit_code == 0, result.output
    assert "Number of documents" in result.output
    assert "Words file" not in result.output.split("Document Generator Configuration:")[0]
    lines = out.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 20
    assert all(1 <= len(line.split(" ")) <= 3 for line in lines)
    assert not (tmp_path / "ignored.txt").exists()


def test_config_file(tmp_path: Path, words_file: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text(
        "generation:\n  num_documents: 5\n  min_words: 3\n  max_words: 3\n  avg_words: 3\n",
        encoding="utf-8",
    )
    out = tmp_path / "docs.txt"
    result = _run(words_file, out, "--config", str(cfg_file))
    assert result.exit_code == 0, result.output
    lines = out.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 5
    assert all(len(line.split(" ")) == 3 for line in lines)


def test_unreachable_average_warns(tmp_path: Path, words_file: Path) -> None:
    out = tmp_path / "docs.txt"
    result = _run(words_file, out, "--num", "3", "--min", "10", "--max", "1000", "--avg", "200")
    assert result.exit_code == 0, result.output
    assert "not reachable" in result.output


def test_format_config() -> None:
    text = format_config(load_config(env={}))
    assert text.startswith("Document Generator Configuration:\n")
    assert "  Number of documents: 1000000\n" in text
    assert "  Target avg words per document: 200\n" in text
    assert "  Words file: words.txt\n" in text
