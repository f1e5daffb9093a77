"""Configuration loading utilities.

Precedence of configuration sources:
    1. Package defaults (``defaults.yml``)
    2. Optional user-provided YAML passed to :func:`load_config`
    3. ``DOCGEN_SEED`` environment variable for the random seed
    4. Command line options and interactive answers, via :func:`apply_overrides`
"""

from .schema import ConfigModel, apply_overrides, load_config

__all__ = ["ConfigModel", "apply_overrides", "load_config"]
