"""Typed configuration schema and loader for docgen."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, conint, model_validator

from ..generate.document import GenerationParams
from ..utils.errors import ConfigError

SEED_ENV = "DOCGEN_SEED"

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class GenerationSettings(BaseModel):
    """Corpus size and word-count distribution."""

    num_documents: conint(ge=0)
    min_words: conint(ge=0)
    max_words: conint(ge=0)
    avg_words: int
    seed: int | None = None

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _check_bounds(self) -> "GenerationSettings":
        if self.max_words < self.min_words:
            raise ValueError(
                f"max_words ({self.max_words}) must be >= min_words ({self.min_words})"
            )
        return self


class PathSettings(BaseModel):
    """Input and output locations."""

    output_file: Path
    words_file: Path
    encoding: str = "utf-8"

    model_config = ConfigDict(extra="forbid")


class ProgressSettings(BaseModel):
    """Progress reporting cadence."""

    enabled: bool
    steps: conint(ge=1) = 10

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    generation: GenerationSettings
    paths: PathSettings
    progress: ProgressSettings

    model_config = ConfigDict(extra="forbid")

    def to_params(self) -> GenerationParams:
        """Return the immutable parameters consumed by the generator."""

        gen = self.generation
        return GenerationParams(
            num_documents=gen.num_documents,
            min_words=gen.min_words,
            max_words=gen.max_words,
            avg_words=gen.avg_words,
        )


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: Mapping[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, Mapping):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def _seed_from_env(environ: Mapping[str, str]) -> int | None:
    raw = environ.get(SEED_ENV, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"{SEED_ENV} must be an integer, got {raw!r}") from exc


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    ``DOCGEN_SEED`` environment variable.
    """

    with (
        importlib_resources.files("docgen.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        try:
            with Path(path).open("r", encoding="utf-8") as f:
                overrides = yaml.safe_load(f) or {}
        except UnicodeDecodeError as exc:
            raise ConfigError(f"Config file '{path}' is not valid UTF-8: {exc}") from exc
        if not isinstance(overrides, dict):
            raise ConfigError(f"Config file '{path}' must contain a mapping")
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    environ = env if env is not None else os.environ
    seed = _seed_from_env(environ)
    if seed is not None:
        merged = deep_merge_dicts(merged, {"generation": {"seed": seed}})

    return ConfigModel.model_validate(merged)


def apply_overrides(cfg: ConfigModel, overrides: Mapping[str, Any]) -> ConfigModel:
    """Return a re-validated copy of ``cfg`` with ``overrides`` merged in.

    ``None`` leaves are dropped so unset command line options keep the
    configured value.
    """

    cleaned = _drop_none(overrides)
    merged = deep_merge_dicts(cfg.model_dump(), cleaned)
    return ConfigModel.model_validate(merged)


def _drop_none(mapping: Mapping[str, Any]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key, value in mapping.items():
        if isinstance(value, Mapping):
            out[key] = _drop_none(value)
        elif value is not None:
            out[key] = value
    return out


__all__ = [
    "SEED_ENV",
    "ConfigModel",
    "GenerationSettings",
    "PathSettings",
    "ProgressSettings",
    "apply_overrides",
    "deep_merge_dicts",
    "load_config",
]
