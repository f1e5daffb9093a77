from pathlib import Path

import pytest
from pydantic import ValidationError

from docgen.config import apply_overrides, load_config
from docgen.utils.errors import ConfigError


def _write(tmp_path: Path, text: str) -> Path:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text(text)
    return cfg_file


def test_max_below_min(tmp_path: Path) -> None:
    cfg_file = _write(tmp_path, "generation:\n  min_words: 50\n  max_words: 10\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_negative_min(tmp_path: Path) -> None:
    cfg_file = _write(tmp_path, "generation:\n  min_words: -1\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_negative_document_count(tmp_path: Path) -> None:
    cfg_file = _write(tmp_path, "generation:\n  num_documents: -5\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_zero_progress_steps(tmp_path: Path) -> None:
    cfg_file = _write(tmp_path, "progress:\n  steps: 0\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_unknown_key(tmp_path: Path) -> None:
    cfg_file = _write(tmp_path, "unknown:\n  foo: 1\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_non_mapping_file(tmp_path: Path) -> None:
    cfg_file = _write(tmp_path, "- just\n- a list\n")
    with pytest.raises(ConfigError):
        load_config(cfg_file, env={})


def test_apply_overrides_skips_none() -> None:
    cfg = load_config(env={})
    new_cfg = apply_overrides(
        cfg, {"generation": {"num_documents": 3, "seed": None}, "paths": {"words_file": None}}
    )
    assert new_cfg.generation.num_documents == 3
    assert new_cfg.generation.seed is None
    assert new_cfg.paths.words_file == cfg.paths.words_file
    assert cfg.generation.num_documents == 1_000_000


def test_apply_overrides_revalidates() -> None:
    cfg = load_config(env={})
    with pytest.raises(ValidationError):
        apply_overrides(cfg, {"generation": {"min_words": 20, "max_words": 5}})


def test_undecodable_file(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_bytes(b"\xff\xfe: 1\n")
    with pytest.raises(ConfigError) as excinfo:
        load_config(cfg_file, env={})
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
